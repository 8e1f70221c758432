from __future__ import annotations

from typing import Dict, Optional, Tuple, Union

from regime_engine.catalog.catalog import RegimeCatalog, RegimeKey, coerce_regime_id, default_catalog
from regime_engine.core.models import Direction, RegimeId, Strategy

DirectionKey = Union[Direction, str]

# (forward label, backward label) for the two regimes that depend on arrival side
DIRECTION_LABELS: Dict[RegimeId, Tuple[str, str]] = {
    RegimeId.FEAR: ("From Extreme Fear (recovery)", "From Neutral (decline)"),
    RegimeId.GREED: ("From Neutral (bull run)", "From Extreme Greed (correction)"),
}


def coerce_direction(value: DirectionKey) -> Direction:
    if isinstance(value, Direction):
        return value
    return Direction(value)


def select_strategy(
    regime_id: RegimeKey,
    direction: DirectionKey,
    previous_regime_id: Optional[RegimeKey] = None,
    catalog: Optional[RegimeCatalog] = None,
) -> Strategy:
    """
    Picks the strategy variant that applies when arriving at ``regime_id``.

    Arrival side is taken from the previous regime when one is given and
    different, otherwise from the playback direction. Extremes and Neutral
    always answer with their default strategy.
    """
    catalog = catalog or default_catalog()
    direction = coerce_direction(direction)
    regime = catalog.by_id(regime_id)
    strategies = regime.strategies

    if catalog.is_single_strategy(regime.id):
        return strategies.default

    # An unrecognized previous id indexes as -1 and so reads as arriving from the left
    if previous_regime_id is not None and coerce_regime_id(previous_regime_id) != regime.id:
        prev_idx = catalog.index_of(previous_regime_id)
        curr_idx = catalog.index_of(regime.id)
        if prev_idx < curr_idx and strategies.from_left:
            return strategies.from_left
        if prev_idx > curr_idx and strategies.from_right:
            return strategies.from_right

    if direction is Direction.FORWARD and strategies.from_left:
        return strategies.from_left
    if direction is Direction.BACKWARD and strategies.from_right:
        return strategies.from_right

    return strategies.default


def select_direction_label(regime_id: RegimeKey, direction: DirectionKey) -> Optional[str]:
    key = coerce_regime_id(regime_id)
    labels = DIRECTION_LABELS.get(key) if key is not None else None
    if labels is None:
        return None
    forward, backward = labels
    return forward if coerce_direction(direction) is Direction.FORWARD else backward
