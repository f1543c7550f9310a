"""
Module: timing

Purpose:
    Timing instrumentation for pipeline runs. Records the wall-clock
    duration of each stage and of the run as a whole; the run total is
    what results report as their elapsed time.

Key Classes:
    - TimingLog: Collects stage durations for one run

Key Functions:
    - timed_phase: Context manager for timing a code block

Dependencies:
    - time (std)
    - contextlib (std)

Used By:
    - engine: Stage timing and elapsed time
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Generator, Optional

logger = logging.getLogger(__name__)


@dataclass
class TimingLog:
    """
    Timing metrics for one pipeline run.

    Attributes:
        stage_timings: Dict of stage_name -> duration_seconds

    Example:
        >>> log = TimingLog()
        >>> log.log_stage("analysis", 0.012)
        >>> log.total
        0.012
    """

    stage_timings: Dict[str, float] = field(default_factory=dict)
    _started: Optional[float] = field(init=False, default=None, repr=False)
    _finished: Optional[float] = field(init=False, default=None, repr=False)

    def start(self) -> None:
        """Mark the start of the run."""
        self._started = time.perf_counter()
        self._finished = None

    def stop(self) -> float:
        """Mark the end of the run and return its duration."""
        self._finished = time.perf_counter()
        return self.elapsed

    @property
    def elapsed(self) -> float:
        """
        Wall-clock seconds between start() and stop().

        Falls back to the sum of stage timings when the run was never
        started, and to "now" while it is still running.
        """
        if self._started is None:
            return self.total
        end = self._finished if self._finished is not None else time.perf_counter()
        return end - self._started

    def log_stage(self, stage: str, duration: float) -> None:
        """Log a stage duration (repeated stages accumulate)."""
        self.stage_timings[stage] = self.stage_timings.get(stage, 0.0) + duration

    @property
    def total(self) -> float:
        """Sum of all stage durations."""
        return sum(self.stage_timings.values())

    def summary(self) -> str:
        """Generate human-readable timing summary."""
        lines = ["", "=== Pipeline Timing Summary ==="]
        for stage, duration in self.stage_timings.items():
            lines.append(f"  {stage:15s} {duration:.3f}s")
        lines.append(f"  {'total':15s} {self.elapsed:.3f}s")
        lines.append("")
        return "\n".join(lines)


@contextmanager
def timed_phase(log: TimingLog, stage: str) -> Generator[None, None, None]:
    """
    Context manager for timing a pipeline stage.

    The duration is recorded even when the block raises.

    Example:
        >>> log = TimingLog()
        >>> with timed_phase(log, "extraction"):
        ...     text = extractor.extract(document, data)
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        log.log_stage(stage, time.perf_counter() - start)
