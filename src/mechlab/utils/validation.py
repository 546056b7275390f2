"""
Validation utilities for scenario parameters.

The simulators accept any finite number for their parameters; range limits
belong to the user interface. These helpers flag values that make no physical
sense, either by raising or, with ``strict=False``, by warning.
"""
from __future__ import annotations

import math
import warnings


def _report(msg: str, strict: bool) -> None:
    if strict:
        raise ValueError(msg)
    warnings.warn(msg, RuntimeWarning, stacklevel=3)


def validate_positive(value: float, name: str, strict: bool = True) -> None:
    """
    Validate that a scalar value is positive.

    Parameters
    ----------
    value : float
        Value to validate
    name : str
        Parameter name for error messages
    strict : bool
        If True, raise ValueError. If False, issue warning.

    Raises
    ------
    ValueError
        If strict=True and value <= 0
    """
    if value <= 0:
        _report(f"{name} must be positive, got {value}", strict)


def validate_non_negative(value: float, name: str, strict: bool = True) -> None:
    """Validate that a value is non-negative."""
    if value < 0:
        _report(f"{name} must be non-negative, got {value}", strict)


def validate_fraction(value: float, name: str, strict: bool = True) -> None:
    """Validate that a value lies in the closed interval [0, 1]."""
    if not 0.0 <= value <= 1.0:
        _report(f"{name} must be within [0, 1], got {value}", strict)


def validate_slope_angle(angle: float, strict: bool = True) -> None:
    """
    Validate an incline angle in radians.

    The sliding-mass model is defined for ``0 < angle < pi/2``. At zero the
    mass never moves and the slope length used for drawing is undefined.
    """
    if not 0.0 < angle < math.pi / 2:
        _report(
            f"slope_angle must be within (0, pi/2) rad, got {angle:.6f} rad "
            f"({math.degrees(angle):.2f} deg)",
            strict,
        )
