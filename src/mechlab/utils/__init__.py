"""Utility functions for MechLab simulations."""

from .io import load_energy_history, load_lab_config, save_energy_history
from .validation import (
    validate_fraction,
    validate_non_negative,
    validate_positive,
    validate_slope_angle,
)

__all__ = [
    "save_energy_history",
    "load_energy_history",
    "load_lab_config",
    "validate_positive",
    "validate_non_negative",
    "validate_fraction",
    "validate_slope_angle",
]
