"""
Synthetic progress estimation for generation requests.

The API gives no progress signal, so progress is interpolated from the
time elapsed since the attempt started. It is an approximation for
display only; completion is signalled by the request resolving.
"""

import asyncio
import logging
import math
import time
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int], None]


@dataclass(frozen=True)
class ProgressCurve:
    """
    Piecewise-linear progress curve with an asymptotic tail.

    Attributes:
        phases: (until_seconds, value) breakpoints, starting from (0, 0)
        ceiling: Value the tail approaches but never reaches
        crawl_seconds: Time constant of the tail
    """
    phases: Tuple[Tuple[float, float], ...]
    ceiling: float = 98.0
    crawl_seconds: float = 60.0

    def estimate(self, elapsed: float) -> int:
        if elapsed <= 0:
            return 0

        prev_t, prev_v = 0.0, 0.0
        for until, value in self.phases:
            if elapsed < until:
                fraction = (elapsed - prev_t) / (until - prev_t)
                return int(prev_v + fraction * (value - prev_v))
            prev_t, prev_v = until, value

        gap = self.ceiling - prev_v
        crawled = prev_v + gap * (1 - math.exp(-(elapsed - prev_t) / self.crawl_seconds))
        return min(int(crawled), int(math.ceil(self.ceiling)) - 1)


# Style transform, inpaint and exterior requests
PRIMARY_CURVE = ProgressCurve(phases=((3.0, 30.0), (15.0, 80.0), (45.0, 95.0)))

# Repaint, refloor, style transfer and freeform edits
EDIT_CURVE = ProgressCurve(phases=((3.0, 30.0), (15.0, 85.0), (60.0, 95.0)))


class ProgressEstimator:
    """
    Reports estimated progress for one attempt on a fixed interval.

    Emits 0 on start, only ever increases while running, and emits 100
    exactly once on complete(). Nothing is emitted after stop() or
    complete().
    """

    def __init__(
        self,
        curve: ProgressCurve,
        on_progress: Optional[ProgressCallback] = None,
        interval: float = 0.2,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.curve = curve
        self.on_progress = on_progress
        self.interval = interval
        self.clock = clock
        self.value = 0
        self._started_at = 0.0
        self._task: Optional[asyncio.Task] = None
        self._finished = False

    @property
    def running(self) -> bool:
        return self._task is not None

    def start(self) -> None:
        """Reset to 0 and begin ticking. Must be called from a running event loop."""
        self.stop()
        self._finished = False
        self._started_at = self.clock()
        self.value = 0
        self._emit(0)
        self._task = asyncio.ensure_future(self._tick())

    def stop(self) -> None:
        """Cancel the ticker. Safe to call repeatedly."""
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()

    def complete(self) -> None:
        """Stop ticking and report 100."""
        self.stop()
        if self._finished:
            return
        self._finished = True
        self.value = 100
        self._emit(100)

    async def _tick(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            estimate = self.curve.estimate(self.clock() - self._started_at)
            if estimate > self.value:
                self.value = estimate
                self._emit(estimate)

    def _emit(self, value: int) -> None:
        if self.on_progress is None:
            return
        try:
            self.on_progress(value)
        except Exception:
            logger.exception("Progress callback raised; ignoring")
