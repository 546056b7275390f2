"""
MechLab scenarios.

Each scenario is an independent Simulator owning its own state and sample
buffer.

Example
-------
>>> from mechlab.scenarios import create_simulator
>>> sim = create_simulator("pendulum", length=1.5)
>>> sim.start()
>>> result = sim.tick()
"""

from mechlab.core.simulation import Simulator

from .bounce import BouncePhase, BounceSimulator
from .incline import InclineSimulator
from .pendulum import PendulumSimulator

SCENARIOS: dict[str, type[Simulator]] = {
    PendulumSimulator.name: PendulumSimulator,
    InclineSimulator.name: InclineSimulator,
    BounceSimulator.name: BounceSimulator,
}


def create_simulator(name: str, **parameters: float) -> Simulator:
    """
    Build a fresh simulator for the scenario ``name``.

    Raises
    ------
    KeyError
        If ``name`` is not a registered scenario
    """
    try:
        cls = SCENARIOS[name]
    except KeyError:
        raise KeyError(
            f"Unknown scenario '{name}'. Valid options: {list(SCENARIOS)}"
        ) from None
    return cls(**parameters)


__all__ = [
    "SCENARIOS",
    "BouncePhase",
    "BounceSimulator",
    "InclineSimulator",
    "PendulumSimulator",
    "create_simulator",
]
