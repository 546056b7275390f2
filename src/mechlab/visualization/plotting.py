from __future__ import annotations

import os
from collections.abc import Iterable

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from mechlab.core.energy import EnergySample

PE_COLOR = "#3b82f6"
KE_COLOR = "#ef4444"
TOTAL_COLOR = "#10b981"

# Column names written by EnergyLogger and by save_energy_history
_COLUMN_ALIASES = {
    "time": ("t", "time"),
    "pe": ("pe", "potential_energy"),
    "ke": ("ke", "kinetic_energy"),
    "total": ("total", "total_energy"),
}


def energy_series(samples: Iterable[EnergySample]) -> dict[str, np.ndarray]:
    """Split samples into time, pe, ke and total arrays."""
    samples = list(samples)
    return {
        "time": np.array([s.time for s in samples], dtype=float),
        "pe": np.array([s.potential_energy for s in samples], dtype=float),
        "ke": np.array([s.kinetic_energy for s in samples], dtype=float),
        "total": np.array([s.total_energy for s in samples], dtype=float),
    }


def _load_energy_csv(csv_path: str) -> dict[str, np.ndarray]:
    df = pd.read_csv(csv_path)
    out: dict[str, np.ndarray] = {}
    for key, aliases in _COLUMN_ALIASES.items():
        for name in aliases:
            if name in df.columns:
                out[key] = df[name].to_numpy(dtype=float)
                break
        else:
            raise KeyError(f"Column '{aliases[0]}' not found in CSV.")
    return out


def draw_energy(ax: Axes, series: dict[str, np.ndarray]) -> list:
    """
    Draw the three energy curves on an existing axes.

    Returns the created line artists (PE, KE, total) so animations can
    update them in place.
    """
    t = series["time"]
    lines = [
        ax.plot(t, series["pe"], color=PE_COLOR, label="Potential energy (J)")[0],
        ax.plot(t, series["ke"], color=KE_COLOR, label="Kinetic energy (J)")[0],
        ax.plot(t, series["total"], color=TOTAL_COLOR, lw=2.0, label="Total energy (J)")[0],
    ]
    ax.set_xlabel("t [s]")
    ax.set_ylabel("energy [J]")
    ax.grid(True, alpha=0.3)
    ax.legend(loc="upper right")
    return lines


def _finish(fig: Figure, save_path: str | None, show: bool) -> Figure:
    fig.tight_layout()
    if save_path:
        os.makedirs(os.path.dirname(save_path) or ".", exist_ok=True)
        fig.savefig(save_path, dpi=180, bbox_inches="tight")
    if show:
        plt.show()
    return fig


def plot_energy(
    samples: Iterable[EnergySample],
    title: str = "Energy",
    save_path: str | None = None,
    show: bool = True,
) -> Figure:
    """
    Plot potential, kinetic and total energy against time.

    Parameters
    ----------
    samples : Iterable[EnergySample]
        Typically a simulator's buffer.
    title : str
    save_path : str | None
        If given, save the figure to this path (png/svg).
    show : bool
        Whether to call plt.show().

    Returns
    -------
    fig : Figure
    """
    series = energy_series(samples)
    if series["time"].size == 0:
        raise ValueError("No energy samples to plot.")

    fig, ax = plt.subplots(1, 1, figsize=(10, 4))
    draw_energy(ax, series)
    ax.set_ylim(bottom=0.0)
    ax.set_title(title)
    return _finish(fig, save_path, show)


def plot_energy_csv(
    csv_path: str,
    title: str | None = None,
    save_path: str | None = None,
    show: bool = True,
    drift: bool = False,
) -> Figure:
    """
    Plot energies from a CSV written by EnergyLogger or save_energy_history.

    With ``drift=True`` a second panel shows the relative deviation of the
    total energy from its first value.
    """
    series = _load_energy_csv(csv_path)
    title = title or os.path.basename(csv_path)

    if not drift:
        fig, ax = plt.subplots(1, 1, figsize=(10, 4))
        draw_energy(ax, series)
        ax.set_title(title)
        return _finish(fig, save_path, show)

    fig, axes = plt.subplots(2, 1, figsize=(10, 7), sharex=True)
    draw_energy(axes[0], series)
    axes[0].set_title(title)

    e0 = series["total"][0]
    rel = (series["total"] - e0) / abs(e0) if abs(e0) > 1e-12 else series["total"] - e0
    axes[1].plot(series["time"], 100.0 * rel, color=TOTAL_COLOR)
    axes[1].set_xlabel("t [s]")
    axes[1].set_ylabel("total energy drift [%]")
    axes[1].grid(True, alpha=0.3)
    return _finish(fig, save_path, show)
