# src/mechlab/utils/io.py
from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict

import numpy as np
import pandas as pd

if TYPE_CHECKING:
    from mechlab.core.energy import EnergySample


def save_energy_history(samples: Iterable[EnergySample], filepath: str | Path) -> Path:
    """
    Saves energy samples to a CSV file.

    Args:
        samples: EnergySample objects, e.g. the contents of a simulator buffer.
        filepath: Destination path (e.g., 'results/pendulum.csv')

    Returns:
        The path written to.
    """
    rows = [s.as_dict() for s in samples]
    if not rows:
        raise ValueError("Energy history is empty. Nothing to save.")

    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)

    df = pd.DataFrame(rows)
    df.to_csv(path, index=False)
    print(f"Energy history saved to {path.absolute()}")
    return path


def load_energy_history(filepath: str | Path) -> pd.DataFrame:
    """Reads a CSV written by save_energy_history back into a DataFrame."""
    df = pd.read_csv(filepath)
    expected = {"time", "potential_energy", "kinetic_energy", "total_energy"}
    missing = expected - set(df.columns)
    if missing:
        raise KeyError(f"Columns {sorted(missing)} not found in {filepath}")
    return df


def load_lab_config(filepath: str | Path) -> Dict[str, Dict[str, float]]:
    """
    Loads per-scenario parameters from a JSON file.

    The file holds one object per scenario name. Keys ending in ``_deg`` are
    angles in degrees and are converted to radians under the key without the
    suffix:

        {"pendulum": {"length": 1.5, "initial_angle_deg": 45},
         "bounce": {"bounce_coefficient": 0.7}}
    """
    with open(filepath, "r", encoding="utf-8") as f:
        try:
            raw: Any = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config {filepath}: {e}") from e

    if not isinstance(raw, dict):
        raise ValueError(f"Config {filepath} must contain a JSON object")

    config: Dict[str, Dict[str, float]] = {}
    for scenario, params in raw.items():
        if not isinstance(params, dict):
            raise ValueError(f"Parameters for '{scenario}' must be an object")
        converted: Dict[str, float] = {}
        for key, value in params.items():
            if key.endswith("_deg"):
                converted[key[: -len("_deg")]] = float(np.radians(value))
            else:
                converted[key] = float(value)
        config[scenario] = converted
    return config
