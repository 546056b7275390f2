"""
Energy bookkeeping for the mechanics scenarios.

All quantities are SI: time in seconds, energies in joules.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True, slots=True)
class EnergySample:
    """
    One point of the energy chart.

    Attributes:
        time: Simulation time the sample was taken at [s].
        potential_energy: Gravitational potential energy [J].
        kinetic_energy: Kinetic energy [J].
        total_energy: ``potential_energy + kinetic_energy`` [J].
    """

    time: float
    potential_energy: float
    kinetic_energy: float
    total_energy: float

    @classmethod
    def from_energies(cls, time: float, pe: float, ke: float) -> EnergySample:
        return cls(float(time), float(pe), float(ke), float(pe + ke))

    def as_dict(self) -> dict[str, float]:
        return asdict(self)


def potential_energy(mass: float, g: float, height: float) -> float:
    """PE = m g h, with h measured from the scenario's reference level."""
    return mass * g * height


def kinetic_energy(mass: float, speed: float) -> float:
    """KE = 1/2 m v^2."""
    return 0.5 * mass * speed * speed
