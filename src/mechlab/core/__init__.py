"""Time-stepping and energy bookkeeping engine."""

from .buffer import RollingBuffer
from .energy import EnergySample, kinetic_energy, potential_energy
from .simulation import DT, G, RunState, Simulator, TickResult

__all__ = [
    "DT",
    "G",
    "EnergySample",
    "RollingBuffer",
    "RunState",
    "Simulator",
    "TickResult",
    "kinetic_energy",
    "potential_energy",
]
