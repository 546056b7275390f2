"""
CSV logging of scenario state and energy samples.

Buffers rows in memory and writes in batches to minimize I/O overhead.
Implements context manager protocol for safe resource handling.
"""
from __future__ import annotations

import csv
from pathlib import Path
from typing import Any, TextIO

from mechlab.core.energy import EnergySample
from mechlab.core.simulation import Simulator

ENERGY_COLUMNS = ["pe", "ke", "total"]


class EnergyLogger:
    """
    Buffered CSV logger for one simulator.

    Parameters
    ----------
    filepath : str | Path
        Output CSV file path
    buffer_size : int
        Number of rows to buffer before writing.
    fields : list[str] | None
        Column groups to log. Default: ["state", "energy"]
        Options: "state" (scenario state variables), "energy" (pe, ke, total)

    Notes
    -----
    The header is built from the first simulator logged:
    ``t, <state variables>, pe, ke, total``. Logging a different scenario
    into the same file afterwards raises ValueError.

    >>> with EnergyLogger("pendulum.csv") as logger:
    ...     sim.start()
    ...     while sim.running and sim.time < 10.0:
    ...         result = sim.tick()
    ...         logger.log(sim, result.sample)
    """

    def __init__(
        self,
        filepath: str | Path,
        buffer_size: int = 1000,
        fields: list[str] | None = None,
    ) -> None:
        self.filepath = Path(filepath)
        self.buffer_size = buffer_size
        self.fields = fields if fields is not None else ["state", "energy"]

        valid_fields = {"state", "energy"}
        invalid = set(self.fields) - valid_fields
        if invalid:
            raise ValueError(
                f"Invalid fields: {invalid}. Valid options: {valid_fields}"
            )

        self._buffer: list[list[str]] = []
        self._file: TextIO | None = None
        self._writer: Any = None  # csv.writer is a function, not a type
        self._header: list[str] | None = None
        self._scenario: str | None = None

        self.filepath.parent.mkdir(parents=True, exist_ok=True)

    def __enter__(self) -> EnergyLogger:
        """Open file for writing."""
        self._file = open(self.filepath, "w", newline="", encoding="utf-8")
        self._writer = csv.writer(self._file)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Close file, flushing any remaining data."""
        self.close()

    @property
    def header(self) -> list[str] | None:
        return self._header

    def _state_columns(self, sim: Simulator) -> list[str]:
        return [k for k in sim.snapshot() if k not in ("scenario", "time", "running")]

    def _write_header(self, sim: Simulator) -> None:
        hdr = ["t"]
        if "state" in self.fields:
            hdr.extend(self._state_columns(sim))
        if "energy" in self.fields:
            hdr.extend(ENERGY_COLUMNS)

        self._writer.writerow(hdr)
        self._file.flush()  # Ensure header written immediately
        self._header = hdr
        self._scenario = sim.name

    def log(self, sim: Simulator, sample: EnergySample | None = None) -> None:
        """
        Log the simulator's current state to the buffer.

        Parameters
        ----------
        sim : Simulator
            Simulator to log
        sample : EnergySample | None
            Sample produced by the last tick. Computed from the current state
            when omitted.
        """
        if self._file is None:
            self.__enter__()

        if self._header is None:
            self._write_header(sim)
        elif sim.name != self._scenario:
            raise ValueError(
                f"Logger is bound to scenario '{self._scenario}', got '{sim.name}'"
            )

        if sample is None:
            sample = sim.energy()

        row = [f"{sim.time:.10f}"]
        if "state" in self.fields:
            snapshot = sim.snapshot()
            for key in self._state_columns(sim):
                val = snapshot[key]
                if isinstance(val, float):
                    row.append(f"{val:.10e}")
                else:
                    row.append(str(val))
        if "energy" in self.fields:
            row.extend(
                f"{v:.10e}"
                for v in (sample.potential_energy, sample.kinetic_energy, sample.total_energy)
            )

        self._buffer.append(row)

        if len(self._buffer) >= self.buffer_size:
            self.flush()

    def flush(self) -> None:
        """Write buffered data to disk and clear buffer."""
        if self._writer and self._buffer:
            self._writer.writerows(self._buffer)
            if self._file:
                self._file.flush()
            self._buffer.clear()

    def close(self) -> None:
        """Flush remaining data and close file."""
        self.flush()
        if self._file:
            self._file.close()
            self._file = None
            self._writer = None
        # A later log() reopens the file, so it needs a fresh header
        self._header = None
        self._scenario = None
