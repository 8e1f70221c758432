from __future__ import annotations

import logging
from typing import List, Optional

from regime_engine.autoplay.controller import AutoplayController
from regime_engine.catalog.catalog import RegimeCatalog, RegimeKey, default_catalog
from regime_engine.core.event_bus import EventBus
from regime_engine.core.models import EventType, RegimeId
from .animator import TransitionAnimator
from .path import describe_path, resolve_path


class RegimeNavigator:
    """
    Handles a click on a regime node.

    Adjacent targets are committed straight into the controller. Anything
    further away is previewed step by step through the intermediate regimes
    and committed when the last step fires. Clicks arriving while a preview
    is playing are ignored, standing in for a disabled control.
    """

    def __init__(
        self,
        controller: AutoplayController,
        animator: Optional[TransitionAnimator] = None,
        catalog: Optional[RegimeCatalog] = None,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        self._controller = controller
        self._animator = animator or TransitionAnimator()
        self._catalog = catalog or default_catalog()
        self._event_bus = event_bus
        self._preview: List[RegimeId] = []
        self._preview_index = -1
        self._busy = False
        self._log = logging.getLogger("navigator")

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def preview_path(self) -> List[RegimeId]:
        return list(self._preview)

    @property
    def preview_index(self) -> int:
        return self._preview_index

    async def select(self, target: RegimeKey) -> bool:
        """Navigates to ``target``. Returns False when the click was ignored."""
        if self._busy:
            self._log.debug("Ignoring selection of %r while a path preview is playing", target)
            return False

        source = self._controller.current
        path = resolve_path(source, target, self._catalog)
        destination = path[-1]
        if len(path) <= 2:
            self._controller.manual_jump(destination)
            return True

        self._log.info(
            "%s -> %s: %s", source.value, destination.value, describe_path(source, destination, self._catalog)
        )
        self._busy = True
        self._preview = path
        self._preview_index = -1
        self._controller.pause()
        self._emit(EventType.PATH_STARTED, list(path))
        try:
            await self._animator.play(path, self._on_step)
        finally:
            self._busy = False
            self._preview = []
            self._preview_index = -1
        self._emit(EventType.PATH_COMPLETE, destination)
        return True

    def _on_step(self, regime: RegimeId, index: int) -> None:
        self._preview_index = index
        self._emit(EventType.PATH_STEP, (regime, index))
        if index == len(self._preview) - 1:
            self._controller.manual_jump(regime)

    def _emit(self, event_type: EventType, payload: object) -> None:
        if self._event_bus is not None:
            self._event_bus.emit(event_type, payload)
