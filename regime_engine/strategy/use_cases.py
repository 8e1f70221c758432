from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from regime_engine.catalog.catalog import RegimeCatalog, default_catalog, regime_number
from regime_engine.core.models import AllocationBreakdown, RegimeId, Strategy

# Tab labels per regime and strategy variant.
# from-left: arriving from a lower regime (recovery / bull run)
# from-right: arriving from a higher regime (correction / decline)
# default: single-strategy regimes
STRATEGY_TAB_LABELS: Dict[RegimeId, Dict[str, str]] = {
    RegimeId.EXTREME_FEAR: {"default": "Market Bottom"},
    RegimeId.FEAR: {"from-left": "From Extreme Fear ↑", "from-right": "From Neutral ↓"},
    RegimeId.NEUTRAL: {"default": "Holiday Mode"},
    RegimeId.GREED: {"from-left": "From Neutral ↑", "from-right": "From Extreme Greed ↓"},
    RegimeId.EXTREME_GREED: {"default": "Market Peak"},
}


@dataclass
class UseCaseVariant:
    direction: str  # 'from-left', 'from-right' or 'default'
    tab_label: str
    title: str
    scenario: str
    user_intent: str
    action: str
    allocation_before: AllocationBreakdown
    allocation_after: AllocationBreakdown
    lp_direction: Optional[str]


@dataclass
class UseCaseTab:
    number: str
    regime_id: RegimeId
    regime: str
    philosophy: str
    author: str
    fill_color: str
    variants: List[UseCaseVariant]


def lp_direction(before: AllocationBreakdown, after: AllocationBreakdown) -> Optional[str]:
    """'building' when the LP share grows, 'unwinding' when it shrinks, None otherwise."""
    if before.lp == after.lp:
        return None
    return "building" if after.lp > before.lp else "unwinding"


def has_allocation_change(
    before: Optional[AllocationBreakdown],
    after: Optional[AllocationBreakdown],
) -> bool:
    if before is None or after is None:
        return False
    return before != after


def strategy_tab_label(regime_id: RegimeId, direction: str) -> Optional[str]:
    return STRATEGY_TAB_LABELS.get(regime_id, {}).get(direction)


def use_case_variants(catalog: Optional[RegimeCatalog] = None) -> List[UseCaseTab]:
    """Flattens every strategy that carries a use case into tabbed rows, one tab group per regime."""
    catalog = catalog or default_catalog()
    tabs: List[UseCaseTab] = []
    for regime in catalog:
        candidates: List[tuple] = [
            ("from-left", regime.strategies.from_left),
            ("from-right", regime.strategies.from_right),
            ("default", regime.strategies.default),
        ]
        variants: List[UseCaseVariant] = []
        for direction, strategy in candidates:
            if strategy is None or strategy.use_case is None:
                continue
            variants.append(_variant(regime.id, direction, strategy))

        tabs.append(
            UseCaseTab(
                number=regime_number(regime.id),
                regime_id=regime.id,
                regime=regime.label,
                philosophy=regime.philosophy,
                author=regime.author,
                fill_color=regime.fill_color,
                variants=variants,
            )
        )
    return tabs


def _variant(regime_id: RegimeId, direction: str, strategy: Strategy) -> UseCaseVariant:
    label = strategy_tab_label(regime_id, direction)
    if not label:
        raise KeyError(
            f'Missing tab label for regime "{regime_id.value}", direction "{direction}". '
            "Add an entry to STRATEGY_TAB_LABELS."
        )
    use_case = strategy.use_case
    return UseCaseVariant(
        direction=direction,
        tab_label=label,
        title=strategy.title,
        scenario=use_case.scenario,
        user_intent=use_case.user_intent,
        action=use_case.action,
        allocation_before=use_case.allocation_before,
        allocation_after=use_case.allocation_after,
        lp_direction=lp_direction(use_case.allocation_before, use_case.allocation_after),
    )
