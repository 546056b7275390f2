import os
import sys

# Get the path to the project root (one level up from 'tests')
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
src_path = os.path.join(project_root, 'src')

# Add 'src' to sys.path
sys.path.insert(0, src_path)

import pytest

from mechlab.api.lab import Lab
from mechlab.scenarios import BounceSimulator, InclineSimulator, PendulumSimulator


@pytest.fixture
def pendulum():
    return PendulumSimulator()


@pytest.fixture
def incline():
    return InclineSimulator()


@pytest.fixture
def bounce():
    return BounceSimulator()


@pytest.fixture
def lab():
    return Lab()


def _run_until_stopped(sim, max_ticks: int = 10000) -> int:
    """Start ``sim`` and tick until it stops. Returns the number of ticks."""
    sim.start()
    n = 0
    while sim.running and n < max_ticks:
        sim.tick()
        n += 1
    return n


@pytest.fixture
def run_until_stopped():
    return _run_until_stopped
