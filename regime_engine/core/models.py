from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional, Tuple


class RegimeId(Enum):
    EXTREME_FEAR = "ef"
    FEAR = "f"
    NEUTRAL = "n"
    GREED = "g"
    EXTREME_GREED = "eg"


class Direction(Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


class AssetFlow(Enum):
    HOLD = "hold"
    DCA_BUY = "dca-buy"
    DCA_SELL = "dca-sell"
    LP_TO_SPOT = "lp-to-spot"
    SPOT_TO_LP = "spot-to-lp"
    MONITOR_LEVERAGE = "monitor-leverage"


class EventType(Enum):
    REGIME_CHANGED = "regime_changed"
    AUTOPLAY_PAUSED = "autoplay_paused"
    AUTOPLAY_RESUMED = "autoplay_resumed"
    PATH_STARTED = "path_started"
    PATH_STEP = "path_step"
    PATH_COMPLETE = "path_complete"


@dataclass(frozen=True)
class Allocation:
    crypto: int
    stable: int

    @property
    def total(self) -> int:
        return self.crypto + self.stable


@dataclass(frozen=True)
class AllocationBreakdown:
    spot: int  # Crypto spot holdings %
    lp: int  # LP position %
    stable: int  # Stablecoin %

    @property
    def total(self) -> int:
        return self.spot + self.lp + self.stable


@dataclass(frozen=True)
class LpTransformation:
    source: str  # 'spot' or 'lp'
    target: str
    percentage: float
    duration: str


@dataclass(frozen=True)
class UseCase:
    scenario: str
    user_intent: str
    action: str
    allocation_before: AllocationBreakdown
    allocation_after: AllocationBreakdown


@dataclass(frozen=True)
class Strategy:
    title: str
    description: str
    actions: Tuple[str, ...]
    asset_flow: AssetFlow
    lp_transformation: Optional[LpTransformation] = None
    leverage_action: Optional[str] = None
    use_case: Optional[UseCase] = None


@dataclass(frozen=True)
class StrategySet:
    default: Strategy
    from_left: Optional[Strategy] = None  # Arriving from a lower index
    from_right: Optional[Strategy] = None  # Arriving from a higher index

    def variants(self) -> List[Strategy]:
        return [s for s in (self.from_left, self.from_right, self.default) if s is not None]


@dataclass(frozen=True)
class Regime:
    id: RegimeId
    label: str
    range: str
    fear_greed_index: Tuple[int, int]
    allocation: Allocation
    color: str
    fill_color: str
    author: str
    philosophy: str
    why_this_works: str
    actions: Tuple[str, ...]
    strategies: StrategySet


@dataclass
class AutoplayState:
    current: RegimeId
    previous: RegimeId
    is_auto_playing: bool = True
    direction: Direction = Direction.FORWARD


@dataclass
class RegimeView:
    current: RegimeId
    previous: RegimeId
    is_auto_playing: bool
    direction: Direction
    regime: Regime
    strategy: Strategy
    direction_label: Optional[str]
    preview_path: List[RegimeId] = field(default_factory=list)


@dataclass
class Event:
    type: EventType
    payload: Any
    timestamp: datetime
