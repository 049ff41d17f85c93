"""Synthetic CPU load used to show event-loop starvation.

:func:`run_synthetic_load` is deliberately synchronous and has no
suspension points. Called from an ``async`` handler it holds the event loop
until it returns, so no other request is served in the meantime.
"""

from __future__ import annotations

import math
import time
from dataclasses import dataclass

DEFAULT_ITERATIONS = 5_000_000_000

LOAD_MESSAGE = "CPU-intensive task complete."


@dataclass(frozen=True)
class LoadResult:
    """Timing and output of one synthetic load run."""

    duration_seconds: float
    calculation_result: float
    iterations: int


def run_synthetic_load(iterations: int = DEFAULT_ITERATIONS) -> LoadResult:
    """Sum ``sqrt(i)`` for ``i`` in ``1..iterations`` on the calling thread.

    The sum starts at 1, so any positive *iterations* yields a result above zero.
    """
    start = time.perf_counter()
    total = 0.0
    sqrt = math.sqrt
    for i in range(1, iterations + 1):
        total += sqrt(i)
    duration = time.perf_counter() - start
    return LoadResult(
        duration_seconds=duration,
        calculation_result=total,
        iterations=iterations,
    )
