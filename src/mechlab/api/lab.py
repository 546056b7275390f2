"""
Lab API: owns one simulator per scenario and drives them frame by frame.
"""
from __future__ import annotations

from pathlib import Path

from mechlab.core.simulation import DT, Simulator, TickResult
from mechlab.logger import EnergyLogger
from mechlab.scenarios import SCENARIOS, create_simulator
from mechlab.utils.io import load_lab_config


class Lab:
    """
    Container for the three independent scenarios.

    Parameters
    ----------
    parameters : dict[str, dict[str, float]] | None
        Per-scenario parameter overrides, keyed by scenario name.
    active : str
        Scenario selected initially. Default "pendulum".

    Attributes
    ----------
    simulators : dict[str, Simulator]
        One simulator per registered scenario. Each owns its state and
        buffer; nothing is shared between them.

    Notes
    -----
    ``select`` behaves like switching tabs: every simulator is stopped and the
    chosen one becomes active. ``frame`` does not enforce that only the active
    scenario runs; it ticks every simulator that is currently running.

    Examples
    --------
    >>> lab = Lab({"incline": {"initial_height": 3.0}})
    >>> lab.select("incline")
    >>> sim = lab.run(duration=5.0)
    """

    def __init__(
        self,
        parameters: dict[str, dict[str, float]] | None = None,
        active: str = "pendulum",
    ) -> None:
        parameters = parameters or {}
        unknown = set(parameters) - set(SCENARIOS)
        if unknown:
            raise KeyError(
                f"Unknown scenarios in parameters: {sorted(unknown)}. "
                f"Valid options: {list(SCENARIOS)}"
            )

        self.simulators: dict[str, Simulator] = {
            name: create_simulator(name, **parameters.get(name, {}))
            for name in SCENARIOS
        }
        self.active_name = ""
        self.select(active)

    @classmethod
    def from_config(cls, filepath: str | Path, active: str = "pendulum") -> Lab:
        """Build a lab from a JSON parameter file (see ``load_lab_config``)."""
        return cls(load_lab_config(filepath), active=active)

    def __getitem__(self, name: str) -> Simulator:
        try:
            return self.simulators[name]
        except KeyError:
            raise KeyError(
                f"Unknown scenario '{name}'. Valid options: {list(self.simulators)}"
            ) from None

    @property
    def active(self) -> Simulator:
        return self.simulators[self.active_name]

    def select(self, name: str) -> Simulator:
        """Stop every scenario and make ``name`` the active one."""
        sim = self[name]
        for other in self.simulators.values():
            other.stop()
        self.active_name = name
        return sim

    def frame(self) -> dict[str, TickResult]:
        """
        One scheduler callback: tick every running simulator exactly once.

        Returns
        -------
        dict[str, TickResult]
            Results keyed by scenario name, only for simulators that ran.
        """
        results: dict[str, TickResult] = {}
        for name, sim in self.simulators.items():
            if sim.running:
                results[name] = sim.tick()
        return results

    def run(
        self,
        duration: float,
        logger: EnergyLogger | None = None,
        log_interval: float = 1.0,
    ) -> Simulator:
        """
        Headless driver for the active scenario.

        Starts the active simulator and ticks it until it stops by itself or
        ``duration`` seconds of simulation time have elapsed.

        Parameters
        ----------
        duration : float
            Maximum simulated time [s]
        logger : EnergyLogger | None
            Receives the state after every tick when given
        log_interval : float
            Interval [s] for printing progress to terminal. Set to <= 0 to disable.

        Returns
        -------
        Simulator
            The active simulator, left in its final state
        """
        sim = self.active
        t_end = sim.time + float(duration)
        last_log_time = sim.time

        if logger is not None:
            logger.log(sim)

        print(f"[Lab] Running '{sim.name}': {duration}s duration, dt={DT}s")
        sim.start()

        try:
            # Half a step of slack absorbs accumulated rounding in sim.time
            while sim.running and sim.time < t_end - 0.5 * DT:
                result = sim.tick()
                if logger is not None:
                    logger.log(sim, result.sample)

                if log_interval > 0 and (sim.time - last_log_time) >= log_interval:
                    r = sim.readouts()
                    print(
                        f"[Lab] t={sim.time:6.2f}s | h={r['height']:7.3f}m, "
                        f"v={r['speed']:6.2f}m/s, E={r['total_energy']:8.3f}J"
                    )
                    last_log_time = sim.time
        finally:
            if logger is not None:
                logger.flush()

        if sim.running:
            sim.stop()
            print(f"[Lab] Duration reached at t={sim.time:.3f}s")

        return sim

    def __repr__(self) -> str:
        return f"Lab(active='{self.active_name}', scenarios={list(self.simulators)})"
