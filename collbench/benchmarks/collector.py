from __future__ import annotations

import collections
import logging
from pathlib import Path
from typing import Any

import pandas as pd

from ..timer import TimingResult

LOGGER = logging.getLogger("collbench.benchmark")

COLUMNS = [
    "menu",
    "command",
    "backing",
    "records",
    "started_at_ms",
    "finished_at_ms",
    "elapsed_ms",
]


class BenchmarkResultCollector:
    """Accumulates timing rows across driver runs for export."""

    def __init__(self) -> None:
        self._rows: list[dict[str, Any]] = []

    def __len__(self) -> int:
        return len(self._rows)

    def record(self, menu: str, command: str, records: int, result: TimingResult) -> None:
        self._rows.append(
            {
                "menu": menu,
                "command": command,
                "backing": result.label,
                "records": records,
                "started_at_ms": result.started_at_ms,
                "finished_at_ms": result.finished_at_ms,
                "elapsed_ms": result.elapsed_ms,
            }
        )

    def build_dataframe(self) -> pd.DataFrame:
        if not self._rows:
            return pd.DataFrame(columns=COLUMNS)
        return pd.DataFrame(self._rows, columns=COLUMNS)

    def summaries(self) -> dict[str, int]:
        counter = collections.Counter(row["command"] for row in self._rows)
        return dict(counter)

    def write_csv(self, path: Path) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        df = self.build_dataframe()
        df.to_csv(path, index=False)
        LOGGER.info("Saved %d timing rows to %s", len(df), path)
        return path
