import math

import pytest

from mechlab.utils.validation import (
    validate_fraction,
    validate_non_negative,
    validate_positive,
    validate_slope_angle,
)


def test_validate_positive():
    validate_positive(1.0, "mass")
    with pytest.raises(ValueError, match="mass must be positive"):
        validate_positive(0.0, "mass")
    with pytest.warns(RuntimeWarning):
        validate_positive(-1.0, "mass", strict=False)


def test_validate_non_negative():
    validate_non_negative(0.0, "height")
    with pytest.raises(ValueError):
        validate_non_negative(-0.1, "height")


def test_validate_fraction():
    validate_fraction(0.0, "e")
    validate_fraction(1.0, "e")
    with pytest.raises(ValueError, match=r"\[0, 1\]"):
        validate_fraction(1.01, "e")


@pytest.mark.parametrize("angle", [0.0, -0.1, math.pi / 2, 2.0])
def test_validate_slope_angle_rejects(angle):
    with pytest.raises(ValueError, match="slope_angle"):
        validate_slope_angle(angle)


def test_validate_slope_angle_accepts_open_interval():
    validate_slope_angle(1e-3)
    validate_slope_angle(math.radians(30))
    with pytest.warns(RuntimeWarning):
        validate_slope_angle(0.0, strict=False)
