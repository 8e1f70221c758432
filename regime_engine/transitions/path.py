from __future__ import annotations

from typing import List, Optional

from regime_engine.catalog.catalog import RegimeCatalog, RegimeKey, default_catalog
from regime_engine.core.models import RegimeId


def _index(catalog: RegimeCatalog, regime_id: RegimeKey) -> int:
    index = catalog.index_of(regime_id)
    if index < 0:
        raise ValueError(f"Unknown regime id: {regime_id!r}")
    return index


def resolve_path(
    source: RegimeKey,
    target: RegimeKey,
    catalog: Optional[RegimeCatalog] = None,
) -> List[RegimeId]:
    """
    Ordered run of regimes from source to target, both inclusive.

    Regimes form a path graph, so the route is just the contiguous slice of
    the order walked toward the target.
    """
    catalog = catalog or default_catalog()
    start = _index(catalog, source)
    end = _index(catalog, target)
    order = catalog.order()

    if start == end:
        return [order[start]]
    if abs(end - start) == 1:
        return [order[start], order[end]]

    step = 1 if end > start else -1
    return [order[i] for i in range(start, end + step, step)]


def describe_path(
    source: RegimeKey,
    target: RegimeKey,
    catalog: Optional[RegimeCatalog] = None,
) -> str:
    path = resolve_path(source, target, catalog)
    if len(path) == 1:
        return "Already there"
    if len(path) == 2:
        return "Direct transition"
    intermediate = len(path) - 2
    return f"Must pass through {intermediate} regime{'s' if intermediate > 1 else ''}"
