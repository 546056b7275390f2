"""
Command line entry point.

    python -m mechlab                      # interactive window
    python -m mechlab --headless --scenario bounce --duration 20 \
        --csv output/bounce.csv --plot output/bounce.png
"""
from __future__ import annotations

import argparse
import sys

from mechlab.api.lab import Lab
from mechlab.logger import EnergyLogger
from mechlab.scenarios import SCENARIOS


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="mechlab", description=__doc__.splitlines()[1])
    ap.add_argument("--scenario", choices=list(SCENARIOS), default="pendulum",
                    help="scenario selected at start")
    ap.add_argument("--config", default=None,
                    help="JSON file with per-scenario parameters")
    ap.add_argument("--headless", action="store_true",
                    help="run without a window and exit")
    ap.add_argument("--duration", type=float, default=10.0,
                    help="maximum simulated time in seconds (headless)")
    ap.add_argument("--csv", default=None, help="write every tick to this CSV (headless)")
    ap.add_argument("--plot", default=None,
                    help="save the final energy window as an image (headless)")
    ap.add_argument("--quiet", action="store_true", help="no progress lines")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.config:
        lab = Lab.from_config(args.config, active=args.scenario)
    else:
        lab = Lab(active=args.scenario)

    if not args.headless:
        from mechlab.visualization.app import main as run_app

        run_app(lab)
        return 0

    log_interval = 0.0 if args.quiet else 1.0
    if args.csv:
        with EnergyLogger(args.csv) as logger:
            sim = lab.run(args.duration, logger=logger, log_interval=log_interval)
        print(f"[Lab] Samples written to {args.csv}")
    else:
        sim = lab.run(args.duration, log_interval=log_interval)

    if args.plot:
        import matplotlib

        matplotlib.use("Agg")
        from mechlab.visualization.plotting import plot_energy

        plot_energy(sim.buffer, title=f"{sim.name} energy", save_path=args.plot, show=False)
        print(f"[Lab] Plot saved to {args.plot}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
