"""Active section tracking for the navigation panel."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Iterable

from checklist_nav.exceptions import TrackerClosedError, UnknownAnchorError
from checklist_nav.schemas import AnchorBounds, BoundsProvider, VisibilityBatch
from checklist_nav.visibility import Subscription, VisibilitySource

logger = logging.getLogger(__name__)


def _empty_bounds() -> AnchorBounds:
    return AnchorBounds(0.0, 0.0)


class ActiveSectionTracker:
    """Keep a single "active" section id from visibility batches.

    The active id only changes when an observed anchor reports that it is
    intersecting; anchors leaving the viewport never clear it. Within one
    batch the last intersecting entry wins.

    A tracker serves one rendered set of sections. Call ``unobserve_all``
    (or leave its ``with`` block) before registering a new set on a fresh
    tracker; a torn-down tracker ignores every later batch.

    Args:
        anchor_ids: Section ids of the currently rendered tree.
        source: Optional visibility source the observed anchors are
            registered with.
    """

    def __init__(self, anchor_ids: Iterable[str], source: VisibilitySource | None = None) -> None:
        self._known_ids = frozenset(anchor_ids)
        self._observed: dict[str, BoundsProvider] = {}
        self._active_id: str | None = None
        self._closed = False
        self._subscription: Subscription | None = None
        if source is not None:
            self._subscription = source.subscribe(self.handle_batch)
        logger.debug("Tracker created for %d anchors", len(self._known_ids))

    @property
    def active_id(self) -> str | None:
        return self._active_id

    @property
    def observed_ids(self) -> tuple[str, ...]:
        return tuple(self._observed)

    @property
    def closed(self) -> bool:
        return self._closed

    def observe(self, anchor_id: str, bounds_provider: BoundsProvider | None = None) -> None:
        """Register a section anchor.

        Raises:
            UnknownAnchorError: If ``anchor_id`` is not a section of the tree.
            TrackerClosedError: If the tracker was already torn down.
        """
        if self._closed:
            raise TrackerClosedError(f"Cannot observe {anchor_id!r}: tracker was torn down")
        if anchor_id not in self._known_ids:
            raise UnknownAnchorError(anchor_id)

        provider = bounds_provider or _empty_bounds
        self._observed[anchor_id] = provider
        if self._subscription is not None:
            self._subscription.observe(anchor_id, provider)

    def unobserve_all(self) -> None:
        """Cancel every registration and stop reacting to batches."""
        if self._closed:
            return
        self._closed = True
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None
        released = len(self._observed)
        self._observed.clear()
        logger.debug("Tracker torn down, released %d anchors", released)

    def handle_batch(self, batch: VisibilityBatch) -> None:
        """Apply one batch of visibility entries in delivery order."""
        if self._closed:
            logger.debug("Ignoring visibility batch of %d entries after teardown", len(batch))
            return
        for entry in batch:
            if entry.is_intersecting and entry.anchor_id in self._observed:
                if entry.anchor_id != self._active_id:
                    logger.debug("Active section changed: %s -> %s", self._active_id, entry.anchor_id)
                self._active_id = entry.anchor_id

    def __enter__(self) -> ActiveSectionTracker:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.unobserve_all()
