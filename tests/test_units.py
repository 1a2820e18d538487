"""Tests for length and angle unit types."""

import math

import numpy as np
import pytest

from planforge.core.errors import ValidationError
from planforge.core.units import MAX_INT, MIN_INT, Centimeter, Degree, Length, cm, degree


class TestCentimeter:
    """Tests for Centimeter construction and arithmetic."""

    def test_addition_and_subtraction(self):
        """Test that arithmetic returns new Centimeter values."""
        assert Centimeter(120) + Centimeter(30) == Centimeter(150)
        assert Centimeter(120) - Centimeter(130) == Centimeter(-10)
        assert Centimeter(5) + 3 == 8

    def test_negative_values_allowed(self):
        """Test that coordinates may be negative."""
        assert Centimeter(-250).value == -250

    def test_upper_bound_rejected(self):
        """Test that MAX_INT itself is out of range."""
        with pytest.raises(ValidationError, match="out of range"):
            Centimeter(MAX_INT)
        assert Centimeter(MAX_INT - 1).value == MAX_INT - 1

    def test_lower_bound_rejected(self):
        """Test values below MIN_INT are rejected."""
        with pytest.raises(ValidationError):
            Centimeter(MIN_INT - 1)

    def test_overflowing_addition_rejected(self):
        """Test that arithmetic cannot escape the valid range."""
        with pytest.raises(ValidationError):
            Centimeter(MAX_INT - 1) + 1

    def test_non_integer_rejected(self):
        """Test that floats and bools are not accepted."""
        with pytest.raises(ValidationError):
            Centimeter(1.5)
        with pytest.raises(ValidationError):
            Centimeter(True)

    def test_numpy_integer_normalized(self):
        """Test numpy integers are stored as plain int."""
        value = Centimeter(np.int64(7))
        assert value.value == 7
        assert type(value.value) is int

    def test_validation_error_is_value_error(self):
        """Test ValidationError can be caught as ValueError."""
        with pytest.raises(ValueError):
            Centimeter(MAX_INT)

    def test_comparisons_with_length_and_int(self):
        """Test threshold comparisons against other length types."""
        assert Centimeter(50) < Length(60)
        assert Centimeter(50) <= 50
        assert Centimeter(50) >= Centimeter(50)
        assert Centimeter(70) > 60
        assert Centimeter(10) == Length(10)

    def test_hash_matches_equality(self):
        """Test equal values collapse in a set."""
        assert len({Centimeter(3), Centimeter(3), Centimeter(4)}) == 2

    def test_string_format(self):
        """Test the human readable form."""
        assert str(Centimeter(12)) == "12cm"
        assert str(cm(-4)) == "-4cm"


class TestLength:
    """Tests for non-negative Length."""

    def test_negative_rejected(self):
        """Test negative lengths fail at construction."""
        with pytest.raises(ValidationError, match="negative"):
            Length(-1)

    def test_zero_allowed(self):
        """Test zero is a valid length."""
        assert Length(0).value == 0

    def test_accepts_centimeter(self):
        """Test construction from Centimeter or int is equivalent."""
        assert Length(Centimeter(5)) == Length(5)
        assert Length(5).cm == Centimeter(5)

    def test_subtraction_below_zero_rejected(self):
        """Test arithmetic that would go negative raises."""
        with pytest.raises(ValidationError):
            Length(5) - 10

    def test_ordering(self):
        """Test Length compares against Centimeter."""
        assert Length(10) > Centimeter(5)
        assert Length(10) <= 10


class TestDegree:
    """Tests for wrap-around Degree."""

    def test_range_enforced(self):
        """Test values outside [0, 360) are rejected."""
        with pytest.raises(ValidationError):
            Degree(360.0)
        with pytest.raises(ValidationError):
            Degree(-0.1)
        with pytest.raises(ValidationError):
            Degree(float('nan'))

    def test_zero_allowed(self):
        """Test the lower bound is inclusive."""
        assert Degree(0).value == 0.0

    def test_addition_wraps(self):
        """Test addition wraps modulo 360."""
        assert Degree(350.0) + Degree(20.0) == Degree(10.0)
        assert Degree(180.0) + Degree(180.0) == Degree(0.0)

    def test_subtraction_wraps(self):
        """Test subtraction wraps into range."""
        assert Degree(10.0) - Degree(20.0) == Degree(350.0)
        assert Degree(90.0) - Degree(90.0) == Degree(0.0)

    def test_ordering(self):
        """Test degrees are ordered by value."""
        assert Degree(10.0) < Degree(20.0)
        assert max(Degree(5.0), Degree(300.0)) == Degree(300.0)

    def test_radians(self):
        """Test conversion to radians."""
        assert Degree(90.0).radians == pytest.approx(math.pi / 2)


class TestDegreeHelper:
    """Tests for the degree() normalizing constructor."""

    def test_negative_angles_wrap(self):
        """Test negative angles wrap to the positive range."""
        assert degree(-90) == Degree(270.0)

    def test_large_angles_wrap(self):
        """Test angles above a full turn wrap."""
        assert degree(720.5) == Degree(0.5)

    def test_tiny_negative_wraps_to_zero(self):
        """Test that float rounding never yields 360."""
        assert degree(-1e-20) == Degree(0.0)

    def test_non_finite_rejected(self):
        """Test infinity cannot be normalized."""
        with pytest.raises(ValidationError):
            degree(float('inf'))

    def test_degree_passthrough(self):
        """Test a Degree is returned unchanged."""
        value = Degree(45.0)
        assert degree(value) is value
