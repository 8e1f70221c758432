from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from typing import Optional

from regime_engine.catalog.catalog import RegimeCatalog, RegimeKey, coerce_regime_id, default_catalog
from regime_engine.config import AutoPlayConstants, Config
from regime_engine.core.event_bus import EventBus
from regime_engine.core.models import AutoplayState, Direction, EventType, RegimeId


class AutoplayController:
    """
    Ping-pong scheduler over the regime order.

    Owns exactly one timer task while started. Ticks walk the order one
    step at a time and bounce back one step short of each extreme; a manual
    jump stops playback and lands directly on the target.

    All mutation happens on the event loop thread. The controller is not
    thread-safe; callers on other threads must go through
    ``loop.call_soon_threadsafe``.
    """

    def __init__(
        self,
        catalog: Optional[RegimeCatalog] = None,
        interval_ms: float = AutoPlayConstants.DEFAULT_INTERVAL_MS,
        start_regime: Optional[RegimeKey] = None,
        prefers_reduced_motion: bool = False,
        auto_resume_ms: float = 0,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        self._catalog = catalog or default_catalog()
        self._interval_ms = interval_ms
        self._auto_resume_ms = auto_resume_ms
        self._reduced_motion = prefers_reduced_motion
        self._event_bus = event_bus
        self._log = logging.getLogger("autoplay")

        start = self._catalog.middle() if start_regime is None else self._require(start_regime)
        self._state = AutoplayState(current=start, previous=start)

        self._forward_reversal = self._catalog.index_of(AutoPlayConstants.REVERSAL_POINTS["forward"])
        self._backward_reversal = self._catalog.index_of(AutoPlayConstants.REVERSAL_POINTS["backward"])

        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._timer: Optional["asyncio.Task[None]"] = None
        self._resume_handle: Optional[asyncio.TimerHandle] = None

    @classmethod
    def from_config(
        cls,
        config: Config,
        catalog: Optional[RegimeCatalog] = None,
        event_bus: Optional[EventBus] = None,
    ) -> "AutoplayController":
        return cls(
            catalog=catalog,
            interval_ms=config.autoplay_interval_ms,
            start_regime=config.start_regime,
            prefers_reduced_motion=config.prefers_reduced_motion,
            auto_resume_ms=config.auto_resume_ms,
            event_bus=event_bus,
        )

    # --- state -------------------------------------------------------------

    @property
    def current(self) -> RegimeId:
        return self._state.current

    @property
    def previous(self) -> RegimeId:
        return self._state.previous

    @property
    def direction(self) -> Direction:
        return self._state.direction

    @property
    def is_auto_playing(self) -> bool:
        return self._state.is_auto_playing

    @property
    def reduced_motion(self) -> bool:
        return self._reduced_motion

    @property
    def interval_ms(self) -> float:
        return self._interval_ms

    @property
    def timer_running(self) -> bool:
        return self._timer is not None and not self._timer.done()

    def snapshot(self) -> AutoplayState:
        return replace(self._state)

    # --- transitions -------------------------------------------------------

    def tick(self) -> AutoplayState:
        """Advances one step in the current direction, bouncing at either end."""
        state = self._state
        index = self._catalog.index_of(state.current)
        last = len(self._catalog) - 1

        if state.direction is Direction.FORWARD:
            next_index = index + 1
            if next_index > last:
                state.direction = Direction.BACKWARD
                next_index = self._forward_reversal
        else:
            next_index = index - 1
            if next_index < 0:
                state.direction = Direction.FORWARD
                next_index = self._backward_reversal

        state.previous = state.current
        state.current = self._catalog.at(next_index)
        self._log.debug(
            "Tick %s -> %s (%s)", state.previous.value, state.current.value, state.direction.value
        )
        self._emit(EventType.REGIME_CHANGED)
        return self.snapshot()

    def manual_jump(self, target: RegimeKey) -> AutoplayState:
        """Stops playback and lands on ``target`` without walking intermediate regimes."""
        regime_id = self._require(target)
        was_playing = self._state.is_auto_playing

        self._cancel_timer()
        self._state.is_auto_playing = False
        self._state.previous = self._state.current
        self._state.current = regime_id
        self._state.direction = Direction.FORWARD
        self._log.info("Manual jump %s -> %s", self._state.previous.value, regime_id.value)

        self._emit(EventType.REGIME_CHANGED)
        if was_playing:
            self._emit(EventType.AUTOPLAY_PAUSED)
        self._schedule_auto_resume()
        return self.snapshot()

    def pause(self) -> None:
        if not self._state.is_auto_playing:
            self._schedule_auto_resume()
            return
        self._state.is_auto_playing = False
        self._cancel_timer()
        self._log.info("Autoplay paused at %s", self._state.current.value)
        self._emit(EventType.AUTOPLAY_PAUSED)
        self._schedule_auto_resume()

    def resume(self) -> None:
        self._cancel_auto_resume()
        if self._state.is_auto_playing:
            return
        self._state.is_auto_playing = True
        self._log.info("Autoplay resumed at %s", self._state.current.value)
        self._sync_timer()
        self._emit(EventType.AUTOPLAY_RESUMED)

    def toggle(self) -> bool:
        if self._state.is_auto_playing:
            self.pause()
        else:
            self.resume()
        return self._state.is_auto_playing

    def set_reduced_motion(self, enabled: bool) -> None:
        """Suppresses ticks while enabled; stored state is left untouched."""
        if enabled == self._reduced_motion:
            return
        self._reduced_motion = enabled
        self._log.info("Reduced motion %s", "on" if enabled else "off")
        self._sync_timer()

    # --- timer lifecycle ---------------------------------------------------

    def start(self) -> None:
        self._loop = asyncio.get_running_loop()
        self._sync_timer()

    def stop(self) -> None:
        self._cancel_timer()
        self._cancel_auto_resume()
        self._loop = None

    async def __aenter__(self) -> "AutoplayController":
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        timer = self._timer
        self.stop()
        if timer is not None:
            try:
                await timer
            except asyncio.CancelledError:
                pass

    def _sync_timer(self) -> None:
        if self._loop is None:
            return
        if self._state.is_auto_playing and not self._reduced_motion:
            self._start_timer()
        else:
            self._cancel_timer()

    def _start_timer(self) -> None:
        # One ticker at a time
        self._cancel_timer()
        self._timer = asyncio.ensure_future(self._run_timer())

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    async def _run_timer(self) -> None:
        interval = self._interval_ms / 1000.0
        while True:
            await asyncio.sleep(interval)
            if not self._state.is_auto_playing or self._reduced_motion:
                return
            try:
                self.tick()
            except Exception as e:
                self._log.error("Autoplay tick failed: %s", e, exc_info=True)

    def _schedule_auto_resume(self) -> None:
        self._cancel_auto_resume()
        if self._loop is None or self._auto_resume_ms <= 0:
            return
        self._resume_handle = self._loop.call_later(self._auto_resume_ms / 1000.0, self.resume)

    def _cancel_auto_resume(self) -> None:
        if self._resume_handle is not None:
            self._resume_handle.cancel()
            self._resume_handle = None

    # --- helpers -----------------------------------------------------------

    def _require(self, regime_id: RegimeKey) -> RegimeId:
        key = coerce_regime_id(regime_id)
        if key is None or self._catalog.index_of(key) < 0:
            raise ValueError(f"Unknown regime id: {regime_id!r}")
        return key

    def _emit(self, event_type: EventType) -> None:
        if self._event_bus is not None:
            self._event_bus.emit(event_type, self.snapshot())
