from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, Optional, Sequence, Tuple, Union

from regime_engine.core.models import (
    Allocation,
    AllocationBreakdown,
    AssetFlow,
    LpTransformation,
    Regime,
    RegimeId,
    Strategy,
    StrategySet,
    UseCase,
)
from .content import REGIME_ORDER, REGIME_TABLE

RegimeKey = Union[RegimeId, str]

# Regimes that never specialize their strategy by arrival side
SINGLE_STRATEGY_INDICES = (0, 2, 4)


class CatalogError(ValueError):
    pass


def coerce_regime_id(value: Any) -> Optional[RegimeId]:
    """Accepts a RegimeId or its string value; returns None for anything else."""
    if isinstance(value, RegimeId):
        return value
    try:
        return RegimeId(value)
    except ValueError:
        return None


def _breakdown(raw: Dict[str, Any]) -> AllocationBreakdown:
    return AllocationBreakdown(spot=raw["spot"], lp=raw["lp"], stable=raw["stable"])


def _build_strategy(raw: Dict[str, Any]) -> Strategy:
    lp = raw.get("lp_transformation")
    use_case = raw.get("use_case")
    return Strategy(
        title=raw["title"],
        description=raw.get("description", ""),
        actions=tuple(raw.get("actions", [])),
        asset_flow=AssetFlow(raw.get("asset_flow", "hold")),
        lp_transformation=LpTransformation(
            source=lp["from"],
            target=lp["to"],
            percentage=lp["percentage"],
            duration=lp["duration"],
        ) if lp else None,
        leverage_action=raw.get("leverage_action"),
        use_case=UseCase(
            scenario=use_case["scenario"],
            user_intent=use_case["user_intent"],
            action=use_case["action"],
            allocation_before=_breakdown(use_case["allocation_before"]),
            allocation_after=_breakdown(use_case["allocation_after"]),
        ) if use_case else None,
    )


def build_regime(raw: Dict[str, Any]) -> Regime:
    try:
        strategies = raw["strategies"]
        regime_id = RegimeId(raw["id"])
        low, high = raw["fear_greed_index"]
        return Regime(
            id=regime_id,
            label=raw["label"],
            range=raw["range"],
            fear_greed_index=(int(low), int(high)),
            allocation=Allocation(crypto=raw["allocation"]["crypto"], stable=raw["allocation"]["stable"]),
            color=raw["color"],
            fill_color=raw["fill_color"],
            author=raw["author"],
            philosophy=raw["philosophy"],
            why_this_works=raw["why_this_works"],
            actions=tuple(raw["actions"]),
            strategies=StrategySet(
                default=_build_strategy(strategies["default"]),
                from_left=_build_strategy(strategies["from_left"]) if "from_left" in strategies else None,
                from_right=_build_strategy(strategies["from_right"]) if "from_right" in strategies else None,
            ),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise CatalogError(f"Malformed regime entry {raw.get('id')!r}: {e}") from e


class RegimeCatalog:
    """
    Ordered, immutable registry of the five sentiment regimes.

    The table is validated once on construction; a corrupt table raises
    CatalogError instead of being served to callers.
    """

    def __init__(
        self,
        table: Sequence[Dict[str, Any]] = REGIME_TABLE,
        order: Sequence[str] = REGIME_ORDER,
    ) -> None:
        self._log = logging.getLogger("catalog")
        try:
            self._order: Tuple[RegimeId, ...] = tuple(RegimeId(i) for i in order)
        except ValueError as e:
            raise CatalogError(f"Unknown regime id in order: {e}") from e
        self._regimes: Tuple[Regime, ...] = tuple(build_regime(raw) for raw in table)
        self._by_id: Dict[RegimeId, Regime] = {r.id: r for r in self._regimes}
        self._validate()

    def _validate(self) -> None:
        if len(self._order) != len(RegimeId) or set(self._order) != set(RegimeId):
            raise CatalogError(f"Order must list each of the {len(RegimeId)} regimes exactly once")
        if len(self._regimes) != len(self._order) or len(self._by_id) != len(self._regimes):
            raise CatalogError(f"Expected {len(self._order)} distinct regimes, got {len(self._regimes)}")
        if tuple(r.id for r in self._regimes) != self._order:
            raise CatalogError("Regime table is not in regime order")

        expected_low = 0
        for index, regime in enumerate(self._regimes):
            low, high = regime.fear_greed_index
            if low != expected_low or high < low:
                raise CatalogError(f"{regime.id.value}: fear/greed range {low}-{high} is not contiguous")
            expected_low = high + 1

            if regime.allocation.total != 100:
                raise CatalogError(f"{regime.id.value}: allocation sums to {regime.allocation.total}, not 100")

            strategies = regime.strategies
            if index in SINGLE_STRATEGY_INDICES and (strategies.from_left or strategies.from_right):
                raise CatalogError(f"{regime.id.value}: only the default strategy is allowed here")

            for strategy in strategies.variants():
                use_case = strategy.use_case
                if use_case is None:
                    continue
                for name, breakdown in (("before", use_case.allocation_before), ("after", use_case.allocation_after)):
                    if breakdown.total != 100:
                        raise CatalogError(
                            f"{regime.id.value}/{strategy.title}: allocation {name} sums to {breakdown.total}"
                        )
        if expected_low != 101:
            raise CatalogError("Fear/greed ranges must cover 0-100")

    # --- lookups -----------------------------------------------------------

    def find(self, regime_id: RegimeKey) -> Optional[Regime]:
        key = coerce_regime_id(regime_id)
        if key is None:
            return None
        return self._by_id.get(key)

    def by_id(self, regime_id: RegimeKey) -> Regime:
        """Returns the regime, or the first regime when the id is unknown."""
        regime = self.find(regime_id)
        if regime is None:
            self._log.warning("Unknown regime id %r, falling back to %s", regime_id, self._regimes[0].id.value)
            return self._regimes[0]
        return regime

    def index_of(self, regime_id: RegimeKey) -> int:
        key = coerce_regime_id(regime_id)
        if key is None:
            return -1
        return self._order.index(key)

    def at(self, index: int) -> RegimeId:
        if not 0 <= index < len(self._order):
            raise IndexError(f"Regime index {index} out of range")
        return self._order[index]

    def order(self) -> Tuple[RegimeId, ...]:
        return self._order

    def regimes(self) -> Tuple[Regime, ...]:
        return self._regimes

    def is_adjacent(self, a: RegimeKey, b: RegimeKey) -> bool:
        ia, ib = self.index_of(a), self.index_of(b)
        if ia < 0 or ib < 0:
            return False
        return abs(ib - ia) == 1

    def first(self) -> RegimeId:
        return self._order[0]

    def last(self) -> RegimeId:
        return self._order[-1]

    def middle(self) -> RegimeId:
        return self._order[len(self._order) // 2]

    def is_single_strategy(self, regime_id: RegimeKey) -> bool:
        return self.index_of(regime_id) in SINGLE_STRATEGY_INDICES

    def __len__(self) -> int:
        return len(self._regimes)

    def __iter__(self) -> Iterator[Regime]:
        return iter(self._regimes)


_DEFAULT_CATALOG: Optional[RegimeCatalog] = None


def default_catalog() -> RegimeCatalog:
    global _DEFAULT_CATALOG
    if _DEFAULT_CATALOG is None:
        _DEFAULT_CATALOG = RegimeCatalog()
    return _DEFAULT_CATALOG


def regime_number(regime_id: RegimeKey) -> str:
    """Display number for a regime, '01'..'05', or '00' when unknown."""
    index = default_catalog().index_of(regime_id)
    if index < 0:
        return "00"
    return f"{index + 1:02d}"


