"""
Point mass sliding down a frictionless incline.

Point-mass model: no rolling, no moment of inertia. The mass starts at
the top of the slope (x = 0, y = initial_height) and stops on reaching the
ground.
"""
from __future__ import annotations

from typing import Any

import numpy as np

from mechlab.core.energy import kinetic_energy, potential_energy
from mechlab.core.simulation import G, Simulator
from mechlab.utils.validation import validate_non_negative, validate_slope_angle


class InclineSimulator(Simulator):
    """
    Frictionless slide along a straight slope.

    Parameters
    ----------
    mass : float
        Sliding mass [kg]. Default 1.0
    initial_height : float
        Start height above the ground [m]. Default 5.0
    slope_angle : float
        Slope inclination [rad]. Default 30 deg. Defined for (0, pi/2);
        zero is accepted with a RuntimeWarning and the mass never moves.

    Attributes
    ----------
    x : float
        Horizontal distance from the top of the slope [m]
    y : float
        Height above the ground [m]
    velocity : float
        Speed along the slope [m/s]

    Notes
    -----
    Per step:
        a = g sin(phi)
        v += a dt
        d = v dt
        x += d cos(phi),  y -= d sin(phi)

    **Termination:** once y <= 0 the height is clamped to exactly 0 and the
    simulator stops. There is no bounce at the foot of the slope.
    """

    name = "incline"
    DEFAULT_PARAMETERS = {
        "mass": 1.0,
        "initial_height": 5.0,
        "slope_angle": float(np.radians(30.0)),
    }
    CAPACITY = 100

    def _validate_parameter(self, name: str, value: float) -> None:
        super()._validate_parameter(name, value)
        if name == "initial_height":
            validate_non_negative(value, "initial_height", strict=False)
        elif name == "slope_angle":
            validate_slope_angle(value, strict=False)

    @property
    def slope_angle(self) -> float:
        return self._parameters["slope_angle"]

    def _initialize_state(self) -> None:
        self.x = 0.0
        self.y = self._parameters["initial_height"]
        self.velocity = 0.0

    def _integrate(self, dt: float) -> None:
        phi = self.slope_angle
        acceleration = G * np.sin(phi)

        self.velocity = float(self.velocity + acceleration * dt)
        distance = self.velocity * dt
        self.x = float(self.x + distance * np.cos(phi))
        self.y = float(self.y - distance * np.sin(phi))
        self.time += dt

        if self.y <= 0.0:
            self.y = 0.0
            self._terminate(f"Reached ground with v={self.velocity:.2f}m/s")

    @property
    def height(self) -> float:
        return self.y

    @property
    def speed(self) -> float:
        return abs(self.velocity)

    def potential_energy(self) -> float:
        return potential_energy(self.mass, G, self.y)

    def kinetic_energy(self) -> float:
        return kinetic_energy(self.mass, self.velocity)

    def _state_values(self) -> dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "velocity": self.velocity,
        }
