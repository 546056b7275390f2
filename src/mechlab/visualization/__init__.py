"""Rendering collaborators: scene geometry, energy plots, interactive app."""

from .plotting import plot_energy, plot_energy_csv
from .scene import scene_geometry

__all__ = ["plot_energy", "plot_energy_csv", "scene_geometry"]
