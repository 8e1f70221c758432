from __future__ import annotations

import asyncio
import logging
from typing import Callable, List, Optional, Sequence

from regime_engine.config import AutoPlayConstants
from regime_engine.core.models import RegimeId


StepCallback = Callable[[RegimeId, int], None]


class TransitionAnimator:
    """
    Plays a resolved path as timed steps.

    Every step is scheduled up front at ``index * step_delay`` from the
    moment ``play()`` is called; steps are not chained to one another.
    There is no cancellation and no guard against overlapping plays, so the
    caller must keep its trigger disabled until the returned future is done.
    """

    def __init__(self, step_delay_ms: float = AutoPlayConstants.DEFAULT_STEP_DELAY_MS) -> None:
        self._step_delay_ms = step_delay_ms
        self._active = 0
        self._log = logging.getLogger("animator")

    @property
    def in_flight(self) -> bool:
        return self._active > 0

    @property
    def step_delay_ms(self) -> float:
        return self._step_delay_ms

    def total_duration_ms(self, path: Sequence[RegimeId], step_delay_ms: Optional[float] = None) -> float:
        delay = self._step_delay_ms if step_delay_ms is None else step_delay_ms
        return max(len(path) - 1, 0) * delay

    def play(
        self,
        path: Sequence[RegimeId],
        on_step: StepCallback,
        step_delay_ms: Optional[float] = None,
    ) -> "asyncio.Future[None]":
        loop = asyncio.get_running_loop()
        done: "asyncio.Future[None]" = loop.create_future()
        steps: List[RegimeId] = list(path)
        if not steps:
            done.set_result(None)
            return done

        delay = (self._step_delay_ms if step_delay_ms is None else step_delay_ms) / 1000.0
        errors: List[BaseException] = []
        last = len(steps) - 1
        self._active += 1
        self._log.debug("Playing path %s (step delay %.3fs)", [r.value for r in steps], delay)

        def fire(regime: RegimeId, index: int) -> None:
            try:
                on_step(regime, index)
            except Exception as e:
                self._log.error("Path step %d (%s) failed: %s", index, regime.value, e, exc_info=True)
                errors.append(e)
            if index != last:
                return
            self._active -= 1
            if done.cancelled():
                return
            if errors:
                done.set_exception(errors[0])
            else:
                done.set_result(None)

        start = loop.time()
        for index, regime in enumerate(steps):
            if delay <= 0:
                loop.call_soon(fire, regime, index)
            else:
                loop.call_at(start + index * delay, fire, regime, index)
        return done
