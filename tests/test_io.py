import json

import pytest

from mechlab.utils.io import load_energy_history, load_lab_config, save_energy_history


def test_save_and_load_history(tmp_path, incline, run_until_stopped):
    run_until_stopped(incline)
    path = save_energy_history(incline.buffer, tmp_path / "out" / "incline.csv")

    df = load_energy_history(path)
    assert list(df.columns) == ["time", "potential_energy", "kinetic_energy", "total_energy"]
    assert len(df) == len(incline.buffer)
    assert df["total_energy"].iloc[-1] == pytest.approx(incline.buffer.latest.total_energy)
    assert df["potential_energy"].iloc[-1] == 0.0


def test_save_empty_history_raises(tmp_path, pendulum):
    with pytest.raises(ValueError, match="empty"):
        save_energy_history(pendulum.buffer, tmp_path / "empty.csv")


def test_load_history_missing_columns(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("time,foo\n0.0,1.0\n")
    with pytest.raises(KeyError, match="not found"):
        load_energy_history(path)


def test_load_config_converts_degrees(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"incline": {"slope_angle_deg": 45, "mass": 2}}))
    cfg = load_lab_config(path)
    assert cfg["incline"]["slope_angle"] == pytest.approx(0.7853981633974483)
    assert cfg["incline"]["mass"] == 2.0
    assert "slope_angle_deg" not in cfg["incline"]


def test_load_config_invalid_json(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text("{not json")
    with pytest.raises(ValueError, match="Invalid JSON"):
        load_lab_config(path)


def test_load_config_requires_objects(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps([1, 2]))
    with pytest.raises(ValueError, match="JSON object"):
        load_lab_config(path)

    path.write_text(json.dumps({"pendulum": 3}))
    with pytest.raises(ValueError, match="must be an object"):
        load_lab_config(path)
