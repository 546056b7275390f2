"""
Ball dropped onto the ground with inelastic rebounds.

Sign convention: ``y`` is the height above the ground and ``velocity`` is
positive upward throughout. The displayed speed is ``|velocity|``.
"""
from __future__ import annotations

from enum import Enum, auto
from typing import Any

from mechlab.core.energy import kinetic_energy, potential_energy
from mechlab.core.simulation import G, Simulator
from mechlab.utils.validation import validate_fraction, validate_non_negative

REST_SPEED = 0.5  # Rebound speed below which the ball is considered at rest [m/s]


class BouncePhase(Enum):
    """
    Flight phases of the ball.

    State Machine:
        FALLING ⇄ RISING
           ↓        ↑
        BOUNCING ───┘
           ↓
         REST (terminal)
    """

    FALLING = auto()  # Moving down (or released from rest)
    RISING = auto()  # Moving up after a rebound
    BOUNCING = auto()  # Rebound happened during the last tick
    REST = auto()  # Rebound too weak, ball stays on the ground


class BounceSimulator(Simulator):
    """
    Vertical free fall with a restitution coefficient at the ground.

    Parameters
    ----------
    mass : float
        Ball mass [kg]. Default 1.0
    initial_height : float
        Drop height [m]. Default 10.0
    bounce_coefficient : float
        Restitution coefficient, fraction of the impact speed kept after a
        rebound [-]. Default 0.8

    Attributes
    ----------
    y : float
        Height above the ground [m]
    velocity : float
        Vertical velocity, positive upward [m/s]
    phase : BouncePhase
        Current flight phase
    bounce_count : int
        Number of ground contacts since reset
    apex_heights : list[float]
        Peak height of every flight segment that ended in a ground contact,
        starting with the drop height

    Notes
    -----
    Per step:
        v -= g dt
        y += v dt
        t += dt
        if y <= 0:  y = 0,  v = -e v
                    if |v| < 0.5: v = 0, stop (REST)

    REST is only reachable from a ground contact; the simulator never stops
    on elapsed time alone.
    """

    name = "bounce"
    DEFAULT_PARAMETERS = {
        "mass": 1.0,
        "initial_height": 10.0,
        "bounce_coefficient": 0.8,
    }
    CAPACITY = 150

    def _validate_parameter(self, name: str, value: float) -> None:
        super()._validate_parameter(name, value)
        if name == "initial_height":
            validate_non_negative(value, "initial_height", strict=False)
        elif name == "bounce_coefficient":
            validate_fraction(value, "bounce_coefficient", strict=False)

    @property
    def bounce_coefficient(self) -> float:
        return self._parameters["bounce_coefficient"]

    def _initialize_state(self) -> None:
        self.y = self._parameters["initial_height"]
        self.velocity = 0.0
        self.phase = BouncePhase.FALLING
        self.bounce_count = 0
        self.apex_heights: list[float] = []
        self._segment_peak = self.y

    def _integrate(self, dt: float) -> None:
        resting = self.phase == BouncePhase.REST
        self.velocity -= G * dt
        self.y += self.velocity * dt
        self.time += dt
        self._segment_peak = max(self._segment_peak, self.y)

        if self.y <= 0.0:
            self._rebound(counted=not resting)
        elif self.velocity > 0.0:
            self.phase = BouncePhase.RISING
        else:
            self.phase = BouncePhase.FALLING

    def _rebound(self, counted: bool = True) -> None:
        """Ground contact. A ball restarted from REST settles without a new contact."""
        self.y = 0.0
        self.velocity = -self.velocity * self.bounce_coefficient
        if counted:
            self.bounce_count += 1
            self.apex_heights.append(self._segment_peak)
        self._segment_peak = 0.0

        if abs(self.velocity) < REST_SPEED:
            self.velocity = 0.0
            self.phase = BouncePhase.REST
            self._terminate(f"Came to rest after {self.bounce_count} bounces")
        else:
            self.phase = BouncePhase.BOUNCING

    @property
    def at_rest(self) -> bool:
        return self.phase == BouncePhase.REST

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
            "y": self.y,
            "velocity": self.velocity,
            "phase": self.phase.name,
            "bounce_count": self.bounce_count,
        }
