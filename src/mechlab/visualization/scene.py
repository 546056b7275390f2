"""
Scene geometry for the renderer.

Converts simulator state into world-frame coordinates (metres, y up). Pure
functions: nothing here draws or mutates a simulator.
"""
from __future__ import annotations

import numpy as np

from mechlab.scenarios import BounceSimulator, InclineSimulator, PendulumSimulator
from mechlab.utils.validation import validate_slope_angle

ARROW_MIN_SPEED = {"pendulum": 0.1, "incline": 0.1, "bounce": 0.5}


def pendulum_geometry(sim: PendulumSimulator) -> dict[str, np.ndarray]:
    """
    Pivot at the origin, bob hanging below it.

    Returns
    -------
    dict
        ``pivot``, ``bob`` positions and ``velocity`` (tangential velocity
        vector of the bob) as (2,) arrays.
    """
    theta = sim.angle
    L = sim.length
    bob = np.array([L * np.sin(theta), -L * np.cos(theta)])
    v = L * sim.angular_velocity
    return {
        "pivot": np.zeros(2),
        "bob": bob,
        "velocity": np.array([v * np.cos(theta), v * np.sin(theta)]),
    }


def slope_length(initial_height: float, slope_angle: float) -> float:
    """
    Length of the slope surface [m].

    Raises
    ------
    ValueError
        If the angle is outside (0, pi/2), where the length is undefined.
    """
    validate_slope_angle(slope_angle, strict=True)
    return initial_height / np.sin(slope_angle)


def incline_geometry(sim: InclineSimulator) -> dict[str, np.ndarray]:
    """
    Right triangle with its top-left vertex at (0, initial_height).

    Returns
    -------
    dict
        ``slope`` (3, 2) triangle vertices (top, foot, corner), or None when
        the slope angle is outside (0, pi/2). ``ball`` position and
        ``velocity`` vector along the slope.
    """
    h0 = sim.get_parameter("initial_height")
    phi = sim.slope_angle
    try:
        run = slope_length(h0, phi) * np.cos(phi)
    except ValueError:
        slope = None
    else:
        slope = np.array([[0.0, h0], [run, 0.0], [0.0, 0.0]])
    return {
        "slope": slope,
        "ball": np.array([sim.x, sim.y]),
        "velocity": sim.velocity * np.array([np.cos(phi), -np.sin(phi)]),
    }


def bounce_geometry(sim: BounceSimulator, tick_spacing: float = 2.0) -> dict[str, np.ndarray]:
    """
    Ball on the vertical axis above a ground line at y = 0.

    Returns
    -------
    dict
        ``ball`` position, ``velocity`` vector and ``ticks`` (height scale
        marks every ``tick_spacing`` metres up to the drop height).
    """
    h0 = sim.get_parameter("initial_height")
    return {
        "ball": np.array([0.0, sim.y]),
        "velocity": np.array([0.0, sim.velocity]),
        "ticks": np.arange(0.0, h0 + 1e-9, tick_spacing),
    }


def scene_geometry(sim) -> dict[str, np.ndarray]:
    """Dispatch on the simulator's scenario."""
    if isinstance(sim, PendulumSimulator):
        return pendulum_geometry(sim)
    if isinstance(sim, InclineSimulator):
        return incline_geometry(sim)
    if isinstance(sim, BounceSimulator):
        return bounce_geometry(sim)
    raise TypeError(f"No scene geometry for {type(sim).__name__}")


def show_velocity_arrow(sim) -> bool:
    """Arrows are hidden below a per-scenario speed threshold."""
    return sim.speed > ARROW_MIN_SPEED.get(sim.name, 0.0)
