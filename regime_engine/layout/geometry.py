from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from regime_engine.config import LayoutConstants

REGIME_COUNT = 5


@dataclass(frozen=True)
class ArcGeometry:
    center_x: float
    center_y: float
    radius: float


@dataclass(frozen=True)
class PanelPosition:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class RegimeLayout:
    view_box_width: float
    view_box_height: float
    panel: PanelPosition
    arc: ArcGeometry

    @property
    def view_box(self) -> str:
        return f"0 0 {self.view_box_width:g} {self.view_box_height:g}"


def layout_for(variant: str = "desktop") -> RegimeLayout:
    try:
        preset = LayoutConstants.PRESETS[variant]
    except KeyError:
        raise ValueError(
            f"Unknown layout variant {variant!r}; expected one of {sorted(LayoutConstants.PRESETS)}"
        ) from None
    return RegimeLayout(
        view_box_width=preset["view_box_width"],
        view_box_height=preset["view_box_height"],
        panel=PanelPosition(
            x=preset["panel_x"],
            y=preset["panel_y"],
            width=preset["panel_width"],
            height=preset["panel_height"],
        ),
        arc=ArcGeometry(
            center_x=preset["center_x"],
            center_y=preset["arc_center_y"],
            radius=preset["arc_radius"],
        ),
    )


def _angles(indices: np.ndarray) -> np.ndarray:
    step = LayoutConstants.ARC_ANGLE_RANGE / (REGIME_COUNT - 1)
    return np.radians(LayoutConstants.ARC_ANGLE_START - indices * step)


def regime_position(index: int, arc: ArcGeometry) -> Tuple[float, float]:
    """Node centre for the regime at ``index`` (0 = left end of the arc)."""
    angle = float(_angles(np.asarray(index, dtype=float)))
    return (
        arc.center_x + arc.radius * float(np.cos(angle)),
        arc.center_y + arc.radius * float(np.sin(angle)),
    )


def regime_positions(arc: ArcGeometry) -> np.ndarray:
    """(5, 2) array of node centres in regime order."""
    angles = _angles(np.arange(REGIME_COUNT, dtype=float))
    return np.column_stack(
        (arc.center_x + arc.radius * np.cos(angles), arc.center_y + arc.radius * np.sin(angles))
    )
