"""
Scenario simulator base class and fixed-step tick machinery.

A simulator owns its physical state, its parameters and a rolling buffer of
energy samples. An external driver (animation timer, headless loop, test)
calls ``tick()`` once per frame; each running tick advances the state by the
fixed step ``DT``, samples the energy and appends it to the buffer.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from mechlab.core.buffer import RollingBuffer
from mechlab.core.energy import EnergySample
from mechlab.utils.validation import validate_positive

G = 9.8  # Gravitational acceleration [m/s^2]
DT = 0.016  # Fixed tick length [s], one display frame at ~60 fps


class RunState(Enum):
    """
    Scenario control states.

    State Machine:
        STOPPED ⇄ RUNNING
        RUNNING → STOPPED also on an intrinsic terminal condition
    """

    STOPPED = auto()
    RUNNING = auto()


@dataclass(frozen=True, slots=True)
class TickResult:
    """Outcome of one ``tick()`` call, handed to the renderer."""

    state: dict[str, Any]
    sample: EnergySample | None
    running: bool


class Simulator(ABC):
    """
    Base class for the mechanics scenarios.

    Subclasses declare their parameters in ``DEFAULT_PARAMETERS`` and implement
    the equations of motion in ``_integrate``. Everything else (run state,
    reset, sampling, buffering) lives here.

    Parameters
    ----------
    **parameters : float
        Overrides for ``DEFAULT_PARAMETERS``. Unknown names raise KeyError.

    Attributes
    ----------
    time : float
        Elapsed simulation time [s]
    tick_count : int
        Number of integrator steps since the last reset
    buffer : RollingBuffer[EnergySample]
        Sliding window of energy samples, oldest first
    run_state : RunState
        Current control state

    Notes
    -----
    Parameter changes take effect from the next tick and never touch the
    state. ``initial_*`` parameters are only read by ``reset()``.

    ``tick()`` on a stopped simulator is a no-op: it returns the current
    snapshot with ``sample=None`` and leaves the buffer untouched.
    """

    name: str = "simulator"
    DEFAULT_PARAMETERS: dict[str, float] = {}
    CAPACITY: int = 100

    def __init__(self, **parameters: float) -> None:
        self._parameters: dict[str, float] = dict(self.DEFAULT_PARAMETERS)
        for key, value in parameters.items():
            self.set_parameter(key, value)

        self.run_state = RunState.STOPPED
        self.time = 0.0
        self.tick_count = 0
        self.buffer: RollingBuffer[EnergySample] = RollingBuffer(self.CAPACITY)
        self._initialize_state()

    # -------------------------------------------------------------------------
    # Parameters
    # -------------------------------------------------------------------------

    @property
    def parameters(self) -> dict[str, float]:
        """Copy of the current parameter values."""
        return dict(self._parameters)

    @property
    def mass(self) -> float:
        return self._parameters["mass"]

    def get_parameter(self, name: str) -> float:
        if name not in self._parameters:
            raise KeyError(f"Unknown parameter '{name}' for {self.name}")
        return self._parameters[name]

    def set_parameter(self, name: str, value: float) -> None:
        """
        Update one named parameter.

        Parameters
        ----------
        name : str
            Parameter name, one of ``DEFAULT_PARAMETERS``
        value : float
            New value. Questionable values only produce a RuntimeWarning.

        Raises
        ------
        KeyError
            If ``name`` is not a parameter of this scenario
        """
        if name not in self.DEFAULT_PARAMETERS:
            raise KeyError(
                f"Unknown parameter '{name}' for {self.name}. "
                f"Valid options: {sorted(self.DEFAULT_PARAMETERS)}"
            )
        value = float(value)
        self._validate_parameter(name, value)
        self._parameters[name] = value

    def _validate_parameter(self, name: str, value: float) -> None:
        if name == "mass":
            validate_positive(value, "mass", strict=False)

    # -------------------------------------------------------------------------
    # Control
    # -------------------------------------------------------------------------

    @property
    def running(self) -> bool:
        return self.run_state == RunState.RUNNING

    def start(self) -> None:
        self.run_state = RunState.RUNNING

    def stop(self) -> None:
        self.run_state = RunState.STOPPED

    def reset(self, parameters: dict[str, float] | None = None) -> dict[str, Any]:
        """
        Stop, reinitialize the state from the current parameters and clear
        the sample buffer.

        Parameters
        ----------
        parameters : dict[str, float] | None
            Optional parameter overrides applied before reinitializing.

        Returns
        -------
        dict
            Snapshot of the initial state
        """
        self.stop()
        for key, value in (parameters or {}).items():
            self.set_parameter(key, value)
        self.time = 0.0
        self.tick_count = 0
        self.buffer.clear()
        self._initialize_state()
        return self.snapshot()

    def tick(self) -> TickResult:
        """Advance one fixed step ``DT`` if running and record its energy."""
        if not self.running:
            return TickResult(self.snapshot(), None, False)

        self._integrate(DT)
        self.tick_count += 1

        sample = self.energy()
        self.buffer.append(sample)
        return TickResult(self.snapshot(), sample, self.running)

    def _terminate(self, reason: str) -> None:
        """Intrinsic transition to STOPPED (ground reached, ball at rest)."""
        self.run_state = RunState.STOPPED
        print(f"[{self.name}] {reason} at t={self.time:.3f}s")

    # -------------------------------------------------------------------------
    # Energy and snapshots
    # -------------------------------------------------------------------------

    def energy(self) -> EnergySample:
        """Energy of the current state. Does not touch the buffer."""
        return EnergySample.from_energies(
            self.time, self.potential_energy(), self.kinetic_energy()
        )

    def snapshot(self) -> dict[str, Any]:
        return {
            "scenario": self.name,
            "time": self.time,
            **self._state_values(),
            "running": self.running,
        }

    def readouts(self) -> dict[str, float]:
        """Values shown next to the scene: height, speed and energies."""
        sample = self.energy()
        return {
            "height": self.height,
            "speed": self.speed,
            "potential_energy": sample.potential_energy,
            "kinetic_energy": sample.kinetic_energy,
            "total_energy": sample.total_energy,
        }

    @property
    @abstractmethod
    def height(self) -> float:
        """Height of the mass above the scenario's zero-PE level [m]."""

    @property
    @abstractmethod
    def speed(self) -> float:
        """Speed magnitude of the mass [m/s]."""

    @abstractmethod
    def potential_energy(self) -> float:
        pass

    @abstractmethod
    def kinetic_energy(self) -> float:
        pass

    @abstractmethod
    def _initialize_state(self) -> None:
        """Set the state variables from the current parameters."""

    @abstractmethod
    def _integrate(self, dt: float) -> None:
        """Advance the state (including ``time``) by ``dt``."""

    @abstractmethod
    def _state_values(self) -> dict[str, Any]:
        pass

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(t={self.time:.3f}, "
            f"state={self.run_state.name}, samples={len(self.buffer)})"
        )
