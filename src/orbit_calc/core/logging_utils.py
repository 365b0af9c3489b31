"""Logging setup and buffered table output for the orbit calculator."""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.INFO, log_file: str | Path | None = None) -> None:
    """Configure the ``orbit_calc`` namespace logger.

    Logs go to stderr, and additionally to ``log_file`` when one is given.
    """

    package_logger = logging.getLogger("orbit_calc")
    package_logger.setLevel(level)
    if package_logger.hasHandlers():
        package_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    package_logger.debug("Logging initialized.")


class TableWriter:
    """Buffered writer that stores rows of numbers to a CSV file."""

    def __init__(
        self,
        path: str | Path,
        header: Sequence[str],
        *,
        flush_threshold: int = 200,
    ) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.header = list(header)
        self.rows_written = 0

        self._file = self.path.open("w", newline="", encoding="utf-8")
        self._file.write(",".join(self.header) + "\n")
        self._buffer: list[str] = []
        self._threshold = max(1, flush_threshold)

    def write_row(self, values: Sequence[float]) -> None:
        if len(values) != len(self.header):
            raise ValueError(
                f"expected {len(self.header)} values, got {len(values)}"
            )
        self._buffer.append(",".join(self._format_value(v) for v in values))
        if len(self._buffer) >= self._threshold:
            self._flush()

    def close(self) -> None:
        self._flush()
        self._file.close()
        logger.info("Wrote %d rows to %s", self.rows_written, self.path)

    def _flush(self) -> None:
        if self._buffer:
            self._file.write("\n".join(self._buffer) + "\n")
            self._file.flush()
            self.rows_written += len(self._buffer)
            self._buffer.clear()

    @staticmethod
    def _format_value(value: float) -> str:
        return f"{value:.10g}"

    def __enter__(self) -> "TableWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        self.close()
        return None


__all__ = ["LOG_FORMAT", "TableWriter", "setup_logging"]
