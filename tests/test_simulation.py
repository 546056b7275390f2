"""
Tests for the shared Simulator machinery: control states, reset, sampling.
"""
import pytest

from mechlab.core.simulation import DT, RunState, TickResult
from mechlab.scenarios import (
    SCENARIOS,
    BounceSimulator,
    InclineSimulator,
    PendulumSimulator,
    create_simulator,
)

ALL = list(SCENARIOS)


def test_initial_state_is_stopped():
    for name in ALL:
        sim = create_simulator(name)
        assert sim.run_state == RunState.STOPPED
        assert not sim.running
        assert sim.tick_count == 0


def test_create_simulator_unknown_name():
    with pytest.raises(KeyError, match="Unknown scenario"):
        create_simulator("double_pendulum")


def test_create_simulator_with_overrides():
    sim = create_simulator("incline", initial_height=3.0)
    assert isinstance(sim, InclineSimulator)
    assert sim.y == 3.0


def test_unknown_parameter_raises(pendulum):
    with pytest.raises(KeyError, match="Unknown parameter"):
        pendulum.set_parameter("slope_angle", 0.5)
    with pytest.raises(KeyError):
        PendulumSimulator(height=3.0)
    with pytest.raises(KeyError):
        pendulum.get_parameter("bounce_coefficient")


def test_start_stop_toggles(pendulum):
    pendulum.start()
    assert pendulum.run_state == RunState.RUNNING
    pendulum.stop()
    assert pendulum.run_state == RunState.STOPPED


def test_tick_while_stopped_is_noop(pendulum):
    snap = pendulum.snapshot()
    result = pendulum.tick()
    assert isinstance(result, TickResult)
    assert result.sample is None
    assert result.running is False
    assert result.state == snap
    assert len(pendulum.buffer) == 0
    assert pendulum.time == 0.0


def test_pause_keeps_state(pendulum):
    pendulum.start()
    for _ in range(10):
        pendulum.tick()
    pendulum.stop()
    snap = pendulum.snapshot()
    pendulum.tick()
    assert pendulum.snapshot() == snap

    pendulum.start()
    pendulum.tick()
    assert pendulum.tick_count == 11


@pytest.mark.parametrize("name", ALL)
def test_reset_idempotent(name):
    sim = create_simulator(name)
    sim.start()
    for _ in range(30):
        sim.tick()

    first = sim.reset()
    assert len(sim.buffer) == 0
    second = sim.reset()
    assert len(sim.buffer) == 0
    assert first == second
    assert first["time"] == 0.0
    assert first["running"] is False


def test_reset_stops_running_simulator(pendulum):
    pendulum.start()
    pendulum.tick()
    pendulum.reset()
    assert not pendulum.running
    assert pendulum.tick_count == 0


def test_reset_with_parameter_overrides(bounce):
    snap = bounce.reset({"initial_height": 4.0, "mass": 2.0})
    assert snap["y"] == 4.0
    assert bounce.mass == 2.0
    assert bounce.parameters["initial_height"] == 4.0


def test_parameters_returns_copy(pendulum):
    params = pendulum.parameters
    params["mass"] = 99.0
    assert pendulum.mass == 1.0


def test_mass_change_only_rescales_energy(pendulum):
    pendulum.start()
    for _ in range(10):
        pendulum.tick()
    e1 = pendulum.energy()
    pendulum.set_parameter("mass", 2.0)
    e2 = pendulum.energy()
    assert e2.total_energy == pytest.approx(2.0 * e1.total_energy)


def test_non_positive_mass_warns_but_is_accepted():
    with pytest.warns(RuntimeWarning, match="mass must be positive"):
        sim = BounceSimulator(mass=0.0)
    assert sim.mass == 0.0


@pytest.mark.parametrize("name", ALL)
def test_buffer_never_exceeds_capacity(name):
    sim = create_simulator(name)
    sim.start()
    for _ in range(3 * sim.CAPACITY):
        result = sim.tick()
        assert len(sim.buffer) <= sim.buffer.capacity
        if not result.running:
            break


def test_capacities():
    assert PendulumSimulator.CAPACITY == 100
    assert InclineSimulator.CAPACITY == 100
    assert BounceSimulator.CAPACITY == 150


def test_fifo_order_after_overflow(pendulum):
    pendulum.start()
    n = 250
    for _ in range(n):
        pendulum.tick()

    times = pendulum.buffer.column("time")
    assert all(b > a for a, b in zip(times, times[1:]))
    assert len(times) == 100
    # Sample k is taken after tick k, at time k * DT
    assert times[0] == pytest.approx((n - 100 + 1) * DT)
    assert times[-1] == pytest.approx(n * DT)


def test_sample_matches_energy_of_returned_state(bounce):
    bounce.start()
    result = bounce.tick()
    assert result.sample == bounce.energy()
    assert bounce.buffer.latest is result.sample


def test_repr(pendulum):
    assert "PendulumSimulator" in repr(pendulum)
    assert "STOPPED" in repr(pendulum)
