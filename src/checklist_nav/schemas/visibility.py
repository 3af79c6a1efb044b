"""Viewport visibility models."""

from __future__ import annotations

from typing import Callable, NamedTuple


class AnchorBounds(NamedTuple):
    """Vertical extent of an anchor in scroll-container coordinates."""

    top: float
    height: float

    @property
    def bottom(self) -> float:
        return self.top + self.height


class VisibilityEntry(NamedTuple):
    """Intersection state change for one anchor."""

    anchor_id: str
    is_intersecting: bool


VisibilityBatch = tuple[VisibilityEntry, ...]
BoundsProvider = Callable[[], AnchorBounds]
VisibilityCallback = Callable[[VisibilityBatch], None]
