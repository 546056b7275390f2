import pytest

from mechlab.core.buffer import RollingBuffer
from mechlab.core.energy import EnergySample


def test_rejects_non_positive_capacity():
    with pytest.raises(ValueError, match="capacity"):
        RollingBuffer(0)


def test_append_below_capacity_keeps_everything():
    buf = RollingBuffer[int](5)
    for i in range(3):
        buf.append(i)
    assert len(buf) == 3
    assert buf.to_list() == [0, 1, 2]
    assert not buf.is_full
    assert buf.latest == 2


def test_fifo_eviction_keeps_newest_window():
    buf = RollingBuffer[int](3)
    for i in range(7):
        buf.append(i)
        assert len(buf) <= buf.capacity
    assert buf.is_full
    assert list(buf) == [4, 5, 6]
    assert buf[0] == 4
    assert buf[-1] == 6


def test_clear_empties_buffer():
    buf = RollingBuffer[int](2)
    buf.append(1)
    buf.clear()
    assert len(buf) == 0
    assert buf.latest is None


def test_column_extracts_attribute_in_order():
    buf = RollingBuffer[EnergySample](2)
    for t in (0.1, 0.2, 0.3):
        buf.append(EnergySample.from_energies(t, 2.0 * t, t))
    assert buf.column("time") == [0.2, 0.3]
    assert buf.column("total_energy") == pytest.approx([0.6, 0.9])


def test_energy_sample_total_and_dict():
    s = EnergySample.from_energies(1.0, 3.0, 4.5)
    assert s.total_energy == 7.5
    assert s.as_dict() == {
        "time": 1.0,
        "potential_energy": 3.0,
        "kinetic_energy": 4.5,
        "total_energy": 7.5,
    }
