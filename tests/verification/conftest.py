"""
Verification tests comparing the fixed-step scenarios against analytical
results.

Test Categories:
- Energy: conservation and drift bounds
- Kinematics: constant acceleration, small-angle period
"""

import pytest


@pytest.fixture
def g():
    return 9.8
