from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable

LOGGER = logging.getLogger("collbench.timer")

END_MARKER = "-------END-------\n"


@dataclass(frozen=True)
class TimerToken:
    label: str
    started_at_ms: int
    perf_start: float


@dataclass(frozen=True)
class TimingResult:
    label: str
    started_at_ms: int
    finished_at_ms: int
    elapsed_ms: float


def _epoch_ms() -> int:
    return time.time_ns() // 1_000_000


class Timer:
    """Wall-clock stopwatch reporting each measurement to an output sink."""

    def __init__(self, sink: Callable[[str], None] = print) -> None:
        self._sink = sink

    def start(self, label: str) -> TimerToken:
        token = TimerToken(label=label, started_at_ms=_epoch_ms(), perf_start=time.perf_counter())
        self._sink(f"Start ({label}): {token.started_at_ms}")
        return token

    def stop(self, token: TimerToken) -> TimingResult:
        elapsed_ms = (time.perf_counter() - token.perf_start) * 1000.0
        result = TimingResult(
            label=token.label,
            started_at_ms=token.started_at_ms,
            finished_at_ms=_epoch_ms(),
            elapsed_ms=elapsed_ms,
        )
        self._sink(f"End: {result.finished_at_ms}")
        self._sink(f"Elapsed time in milliseconds: {elapsed_ms:.3f}")
        self._sink(END_MARKER)
        LOGGER.debug("%s took %.3f ms", token.label, elapsed_ms)
        return result

