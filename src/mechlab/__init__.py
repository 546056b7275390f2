"""
MechLab - Energy visualizer for classical-mechanics scenarios.

Core Components
---------------
Simulator : Fixed-step scenario base class (tick, reset, start/stop)
RollingBuffer : Bounded FIFO buffer of energy samples
EnergySample : (time, PE, KE, total) chart point

Scenarios
---------
PendulumSimulator : Nonlinear simple pendulum
InclineSimulator : Point mass sliding down a frictionless slope
BounceSimulator : Ball dropped onto the ground with restitution

Examples
--------
>>> from mechlab import Lab
>>> lab = Lab()
>>> lab.select("bounce")
>>> lab.run(duration=10.0)
"""

__version__ = "0.1.0"

# Core engine
from mechlab.core import (
    DT,
    G,
    EnergySample,
    RollingBuffer,
    RunState,
    Simulator,
    TickResult,
)

# Scenarios
from mechlab.scenarios import (
    SCENARIOS,
    BouncePhase,
    BounceSimulator,
    InclineSimulator,
    PendulumSimulator,
    create_simulator,
)

# Logging
from mechlab.logger import EnergyLogger
from mechlab.api.lab import Lab

__all__ = [
    # Version
    "__version__",
    # Core
    "DT",
    "G",
    "EnergySample",
    "RollingBuffer",
    "RunState",
    "Simulator",
    "TickResult",
    # Scenarios
    "SCENARIOS",
    "BouncePhase",
    "BounceSimulator",
    "InclineSimulator",
    "PendulumSimulator",
    "create_simulator",
    # Logging
    "EnergyLogger",
    # API
    "Lab",
]
