from __future__ import annotations

import logging
from typing import List, Optional

from regime_engine.autoplay.controller import AutoplayController
from regime_engine.catalog.catalog import RegimeCatalog, default_catalog
from regime_engine.core.event_bus import EventBus
from regime_engine.core.models import AllocationBreakdown, AutoplayState, Event, EventType, RegimeView
from regime_engine.strategy.selector import select_direction_label, select_strategy
from regime_engine.strategy.use_cases import has_allocation_change, lp_direction
from regime_engine.transitions.navigator import RegimeNavigator


class RegimePresenter:
    """Assembles the view-model the rendering layer consumes and logs it on every change."""

    def __init__(
        self,
        controller: AutoplayController,
        navigator: Optional[RegimeNavigator] = None,
        catalog: Optional[RegimeCatalog] = None,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        self._controller = controller
        self._navigator = navigator
        self._catalog = catalog or default_catalog()
        self._log = logging.getLogger("presenter")
        self.history: List[RegimeView] = []
        if event_bus is not None:
            event_bus.subscribe(EventType.REGIME_CHANGED, self._on_regime_changed)
            event_bus.subscribe(EventType.PATH_STEP, self._on_path_step)

    def snapshot(self) -> RegimeView:
        return self.view_for(self._controller.snapshot())

    def view_for(self, state: AutoplayState) -> RegimeView:
        return RegimeView(
            current=state.current,
            previous=state.previous,
            is_auto_playing=state.is_auto_playing,
            direction=state.direction,
            regime=self._catalog.by_id(state.current),
            strategy=select_strategy(state.current, state.direction, state.previous, self._catalog),
            direction_label=select_direction_label(state.current, state.direction),
            preview_path=self._navigator.preview_path if self._navigator else [],
        )

    async def _on_regime_changed(self, event: Event) -> None:
        # Payload is the state at emit time; the live controller may have moved on
        view = self.view_for(event.payload)
        self.history.append(view)
        self._log.info("\n%s", format_panel(view))

    async def _on_path_step(self, event: Event) -> None:
        regime, index = event.payload
        self._log.info("Path preview step %d: %s", index, self._catalog.by_id(regime).label)


def _format_breakdown(breakdown: AllocationBreakdown) -> str:
    return f"spot {breakdown.spot}% / lp {breakdown.lp}% / stable {breakdown.stable}%"


def format_panel(view: RegimeView) -> str:
    regime = view.regime
    strategy = view.strategy
    lines = []
    lines.append(f"[{regime.label}] index {regime.range}")
    lines.append(
        f"Target allocation: crypto {regime.allocation.crypto}% / stable {regime.allocation.stable}%"
    )
    lines.append(f"{regime.philosophy} - {regime.author}")
    if view.direction_label:
        lines.append(f"Direction: {view.direction_label}")
    lines.append(f"Strategy: {strategy.title}")
    if strategy.description:
        lines.append(f"  {strategy.description}")
    for action in strategy.actions:
        lines.append(f"  • {action}")
    if strategy.leverage_action:
        lines.append(f"  Leverage: {strategy.leverage_action}")

    use_case = strategy.use_case
    if use_case is not None:
        lines.append(f"Scenario: {use_case.scenario}")
        lines.append(f'Intent: "{use_case.user_intent}"')
        lines.append(f"Action: {use_case.action}")
        if has_allocation_change(use_case.allocation_before, use_case.allocation_after):
            lines.append(f"  Before: {_format_breakdown(use_case.allocation_before)}")
            lines.append(f"  After:  {_format_breakdown(use_case.allocation_after)}")
            lp = lp_direction(use_case.allocation_before, use_case.allocation_after)
            if lp:
                lines.append(f"  LP position: {lp}")
        else:
            lines.append(f"  Maintaining current allocation ({_format_breakdown(use_case.allocation_after)})")

    if view.preview_path:
        lines.append("Path: " + " -> ".join(r.value for r in view.preview_path))
    lines.append(f"Autoplay: {'on' if view.is_auto_playing else 'off'} ({view.direction.value})")
    return "\n".join(lines)
