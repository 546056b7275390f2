"""
Simple pendulum: point bob on a massless rod, no friction.

Uses the full nonlinear equation of motion (no small-angle approximation).
"""
from __future__ import annotations

from typing import Any

import numpy as np

from mechlab.core.energy import kinetic_energy, potential_energy
from mechlab.core.simulation import G, Simulator
from mechlab.utils.validation import validate_positive


class PendulumSimulator(Simulator):
    """
    Nonlinear pendulum integrated with semi-implicit Euler.

    Parameters
    ----------
    mass : float
        Bob mass [kg]. Default 1.0
    length : float
        Rod length [m]. Default 2.0
    initial_angle : float
        Release angle from the vertical [rad]. Default 60 deg.
        Released from rest.

    Attributes
    ----------
    angle : float
        Current angle from the downward vertical [rad]
    angular_velocity : float
        Current angular velocity [rad/s]

    Notes
    -----
    Per step:
        alpha = -(g/L) sin(theta)
        omega += alpha dt
        theta += omega dt      (uses the updated omega)

    The velocity-first ordering keeps the scheme symplectic, so the total
    energy oscillates around its initial value instead of drifting.
    There is no terminal condition.
    """

    name = "pendulum"
    DEFAULT_PARAMETERS = {
        "mass": 1.0,
        "length": 2.0,
        "initial_angle": float(np.radians(60.0)),
    }
    CAPACITY = 100

    def _validate_parameter(self, name: str, value: float) -> None:
        super()._validate_parameter(name, value)
        if name == "length":
            validate_positive(value, "length", strict=False)

    @property
    def length(self) -> float:
        return self._parameters["length"]

    def _initialize_state(self) -> None:
        self.angle = self._parameters["initial_angle"]
        self.angular_velocity = 0.0

    def _integrate(self, dt: float) -> None:
        angular_acceleration = -(G / self.length) * np.sin(self.angle)
        self.angular_velocity = float(self.angular_velocity + angular_acceleration * dt)
        self.angle = float(self.angle + self.angular_velocity * dt)
        self.time += dt

    @property
    def height(self) -> float:
        """Bob height above its lowest point [m]."""
        return float(self.length * (1.0 - np.cos(self.angle)))

    @property
    def speed(self) -> float:
        """Tangential speed of the bob [m/s]."""
        return self.length * abs(self.angular_velocity)

    def potential_energy(self) -> float:
        return potential_energy(self.mass, G, self.height)

    def kinetic_energy(self) -> float:
        return kinetic_energy(self.mass, self.speed)

    def _state_values(self) -> dict[str, Any]:
        return {
            "angle": self.angle,
            "angular_velocity": self.angular_velocity,
        }
