"""
Interactive MechLab window.

Scenario tabs, parameter sliders, play/pause/reset buttons, the 2D scene and
the rolling energy chart. The physics lives in the simulators; this module
only reads their snapshots and buffers and forwards user input.
"""
from __future__ import annotations

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.animation import FuncAnimation
from matplotlib.patches import Polygon
from matplotlib.widgets import Button, RadioButtons, Slider

from mechlab.api.lab import Lab
from mechlab.core.simulation import DT
from mechlab.visualization.plotting import draw_energy, energy_series
from mechlab.visualization.scene import scene_geometry, show_velocity_arrow

# (parameter, label, min, max, unit). Angles are shown in degrees.
SLIDER_RANGES: dict[str, list[tuple[str, str, float, float, str]]] = {
    "pendulum": [
        ("mass", "Mass [kg]", 0.5, 5.0, ""),
        ("length", "Length [m]", 0.5, 4.0, ""),
        ("initial_angle", "Angle [deg]", 10.0, 90.0, "deg"),
    ],
    "incline": [
        ("mass", "Mass [kg]", 0.5, 5.0, ""),
        ("initial_height", "Height [m]", 1.0, 10.0, ""),
        ("slope_angle", "Slope [deg]", 10.0, 60.0, "deg"),
    ],
    "bounce": [
        ("mass", "Mass [kg]", 0.5, 5.0, ""),
        ("initial_height", "Height [m]", 1.0, 20.0, ""),
        ("bounce_coefficient", "Restitution", 0.1, 0.95, ""),
    ],
}

TAB_LABELS = {"pendulum": "Pendulum", "incline": "Incline", "bounce": "Bounce"}

# Velocity arrow length per unit speed [m per m/s]
ARROW_SCALE = {"pendulum": 0.5, "incline": 0.3, "bounce": 0.2}

BALL_COLORS = {"pendulum": "#f59e0b", "incline": "#3b82f6", "bounce": "#8b5cf6"}

# Parameters that change the drawn scene layout (axis limits, slope, ticks)
SCENE_PARAMETERS = {"length", "initial_height", "slope_angle"}


class MechLabApp:
    """
    Manages the GUI, animation loop and user interactions.

    Parameters
    ----------
    lab : Lab | None
        Lab to display. A default one is created when omitted.
    interval_ms : int
        Animation timer interval. One timer event runs one ``Lab.frame()``.
    """

    def __init__(self, lab: Lab | None = None, interval_ms: int = int(DT * 1000)):
        # 1. State
        self.lab = lab if lab is not None else Lab()

        # 2. Figure: scene on the left, energy chart on the right
        self.fig, (self.ax_scene, self.ax_chart) = plt.subplots(
            1, 2, figsize=(13, 7), gridspec_kw={"width_ratios": [1.0, 1.3]}
        )
        plt.subplots_adjust(bottom=0.32, wspace=0.25)
        if self.fig.canvas.manager is not None:
            self.fig.canvas.manager.set_window_title("MechLab - Energy Visualizer")

        # 3. Widgets and visual elements
        self._init_widgets()
        self._init_chart()
        self._build_scene()
        self._redraw()

        # 4. Animation
        self.ani = FuncAnimation(
            self.fig,
            self._anim_loop,
            init_func=self._init_anim,
            interval=interval_ms,
            cache_frame_data=False,
        )

    # --- Setup ---

    def _init_widgets(self):
        """Scenario tabs, sliders per scenario, control buttons, readouts."""
        names = list(self.lab.simulators)
        self.ax_tabs = plt.axes([0.03, 0.04, 0.13, 0.2])
        self.tabs = RadioButtons(
            self.ax_tabs,
            [TAB_LABELS.get(n, n) for n in names],
            active=names.index(self.lab.active_name),
        )
        self._tab_names = {TAB_LABELS.get(n, n): n for n in names}
        self.tabs.on_clicked(self._on_select)

        # One slider set per scenario, only the active set is visible
        self.sliders: dict[str, dict[str, Slider]] = {}
        for name in names:
            sim = self.lab[name]
            self.sliders[name] = {}
            for row, (param, label, lo, hi, unit) in enumerate(SLIDER_RANGES[name]):
                ax = plt.axes([0.3, 0.2 - 0.05 * row, 0.4, 0.03])
                value = sim.get_parameter(param)
                if unit == "deg":
                    value = float(np.degrees(value))
                slider = Slider(ax, label, lo, hi, valinit=float(np.clip(value, lo, hi)))
                slider.on_changed(self._make_slider_callback(name, param, unit))
                self.sliders[name][param] = slider
        self._show_active_sliders()

        self.btn_play = Button(plt.axes([0.78, 0.17, 0.1, 0.05]), "PLAY")
        self.btn_pause = Button(plt.axes([0.78, 0.11, 0.1, 0.05]), "PAUSE")
        self.btn_reset = Button(plt.axes([0.78, 0.05, 0.1, 0.05]), "RESET")
        self.btn_play.on_clicked(self._play)
        self.btn_pause.on_clicked(self._pause)
        self.btn_reset.on_clicked(self._reset)

        self.readout = self.fig.text(0.9, 0.05, "", family="monospace", fontsize=9)

    def _make_slider_callback(self, scenario: str, param: str, unit: str):
        def on_changed(val):
            value = float(np.radians(val)) if unit == "deg" else float(val)
            self.lab[scenario].set_parameter(param, value)
            if scenario != self.lab.active_name:
                return
            if param in SCENE_PARAMETERS:
                self._build_scene()
                self._redraw()
            elif not self.lab.active.running:
                self._redraw()
        return on_changed

    def _show_active_sliders(self):
        for name, group in self.sliders.items():
            for slider in group.values():
                slider.ax.set_visible(name == self.lab.active_name)

    def _init_chart(self):
        self.chart_lines = draw_energy(
            self.ax_chart, {"time": [], "pe": [], "ke": [], "total": []}
        )
        self.ax_chart.set_title("Energy")

    def _build_scene(self):
        """Create the artists for the active scenario's scene."""
        ax = self.ax_scene
        ax.cla()
        sim = self.lab.active
        name = sim.name
        color = BALL_COLORS.get(name, "C0")
        ms = 12 + 4 * sim.mass

        self.artists = {}
        if name == "pendulum":
            L = sim.length
            self.artists["rod"], = ax.plot([], [], color="#64748b", lw=2)
            ax.plot([0], [0], "ks", markersize=6)
            ax.axhline(-L, color="#cbd5e1", ls="--", lw=1)
            ax.set_xlim(-1.2 * L, 1.2 * L)
            ax.set_ylim(-1.3 * L, 0.4 * L)
            ax.set_title("Pendulum")
        elif name == "incline":
            geo = scene_geometry(sim)
            slope = geo["slope"]
            h0 = sim.get_parameter("initial_height")
            ax.axhline(0.0, color="#475569", lw=2)
            self.artists["height"], = ax.plot([], [], color="#94a3b8", ls="--", lw=1)
            if slope is not None:
                ax.add_patch(Polygon(slope, closed=True, fc="#e2e8f0", ec="#475569"))
                x_max = slope[1, 0]
            else:
                # Undefined slope: ground line and ball only
                x_max = max(h0, 1.0)
            ax.set_xlim(-0.5, x_max * 1.1 + 0.5)
            ax.set_ylim(-0.5, h0 * 1.2 + 0.5)
            ax.set_title("Incline")
        elif name == "bounce":
            geo = scene_geometry(sim)
            h0 = sim.get_parameter("initial_height")
            ax.axhline(0.0, color="#475569", lw=2)
            for tick in geo["ticks"]:
                ax.plot([-1.0, -0.8], [tick, tick], color="#94a3b8", lw=1)
                ax.text(-1.05, tick, f"{tick:g} m", ha="right", va="center", fontsize=8)
            self.artists["height"], = ax.plot([], [], color="#94a3b8", ls="--", lw=1)
            ax.set_xlim(-2.0, 2.0)
            ax.set_ylim(-0.5, h0 + 2.0)
            ax.set_title("Bounce")

        self.artists["ball"], = ax.plot([], [], "o", color=color, markersize=ms)
        self.artists["arrow"] = ax.quiver(
            [0.0], [0.0], [0.0], [0.0],
            angles="xy", scale_units="xy", scale=1.0, color="#ef4444", width=0.006,
        )
        ax.set_aspect("equal", adjustable="box")
        ax.grid(True, linestyle=":", alpha=0.6)

    # --- Logic & Updates ---

    def _update_scene(self):
        sim = self.lab.active
        geo = scene_geometry(sim)
        ball = geo["bob"] if sim.name == "pendulum" else geo["ball"]

        self.artists["ball"].set_data([ball[0]], [ball[1]])
        self.artists["ball"].set_markersize(12 + 4 * sim.mass)
        if "rod" in self.artists:
            self.artists["rod"].set_data([0.0, ball[0]], [0.0, ball[1]])
        if "height" in self.artists:
            self.artists["height"].set_data([ball[0], ball[0]], [0.0, ball[1]])

        arrow = self.artists["arrow"]
        arrow.set_offsets([ball])
        if show_velocity_arrow(sim):
            v = geo["velocity"] * ARROW_SCALE.get(sim.name, 0.3)
            arrow.set_UVC([v[0]], [v[1]])
        else:
            arrow.set_UVC([0.0], [0.0])

    def _update_chart(self):
        series = energy_series(self.lab.active.buffer)
        for line, key in zip(self.chart_lines, ("pe", "ke", "total")):
            line.set_data(series["time"], series[key])
        ax = self.ax_chart
        if series["time"].size:
            t0, t1 = series["time"][0], series["time"][-1]
            ax.set_xlim(t0, max(t1, t0 + DT))
            top = float(max(series["pe"].max(), series["ke"].max(), series["total"].max()))
            ax.set_ylim(0.0, max(top * 1.1, 1e-6))
        else:
            ax.set_xlim(0.0, 1.0)
            ax.set_ylim(0.0, 1.0)

    def _update_readout(self):
        r = self.lab.active.readouts()
        self.readout.set_text(
            f"height {r['height']:7.2f} m\n"
            f"speed  {r['speed']:7.2f} m/s\n"
            f"PE     {r['potential_energy']:7.2f} J\n"
            f"KE     {r['kinetic_energy']:7.2f} J\n"
            f"total  {r['total_energy']:7.2f} J"
        )

    def _redraw(self):
        self._update_scene()
        self._update_chart()
        self._update_readout()
        self.fig.canvas.draw_idle()

    def _init_anim(self):
        """First draw. Artists are already set up; ticking is left to timer frames."""
        return ()

    def _anim_loop(self, frame):
        """The main ticking clock."""
        results = self.lab.frame()
        if self.lab.active_name in results:
            self._redraw()
        return ()

    # --- Event Callbacks ---

    def _on_select(self, label):
        self.lab.select(self._tab_names.get(label, label))
        self._show_active_sliders()
        self._build_scene()
        self._redraw()

    def _play(self, event):
        self.lab.active.start()

    def _pause(self, event):
        self.lab.active.stop()

    def _reset(self, event):
        self.lab.active.reset()
        # Scene limits depend on the initial parameters
        self._build_scene()
        self._redraw()

    def show(self):
        plt.show()


def main(lab: Lab | None = None) -> None:
    app = MechLabApp(lab)
    app.show()


if __name__ == "__main__":
    main()
