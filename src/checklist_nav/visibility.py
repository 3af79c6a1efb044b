"""Viewport visibility detection.

``ViewportVisibilitySource`` reproduces the behaviour of a browser
IntersectionObserver with ``threshold: 0`` for a single vertical scroll
container. Anchors are registered through a ``Subscription``; each
subscriber receives batches of ``VisibilityEntry`` whenever an anchor's
intersection state changes, plus one initial entry per newly observed anchor.
"""

from __future__ import annotations

import asyncio
import logging
import re
from typing import Mapping, NamedTuple, Protocol

from checklist_nav.config import CHECKLIST_NAV_ROOT_MARGIN
from checklist_nav.exceptions import ConfigurationError
from checklist_nav.schemas import (
    AnchorBounds,
    BoundsProvider,
    VisibilityCallback,
    VisibilityEntry,
)

logger = logging.getLogger(__name__)

_LENGTH_RE = re.compile(r"^(-?\d+(?:\.\d+)?)(px|%)$")


class _Length(NamedTuple):
    value: float
    percent: bool

    def resolve(self, reference: float) -> float:
        return self.value * reference / 100 if self.percent else self.value


class RootMargin(NamedTuple):
    """Margins applied to the viewport before intersection testing."""

    top: _Length
    right: _Length
    bottom: _Length
    left: _Length


def parse_root_margin(value: str) -> RootMargin:
    """Parse a CSS-like margin string such as ``"0px 0px -50% 0px"``.

    Accepts one to four ``px`` or ``%`` lengths using the CSS shorthand rules.

    Raises:
        ConfigurationError: If the string is not a valid margin.
    """
    parts = value.split()
    if not 1 <= len(parts) <= 4:
        raise ConfigurationError(f"Root margin must have 1-4 values, got {value!r}")

    lengths: list[_Length] = []
    for part in parts:
        match = _LENGTH_RE.match(part)
        if not match:
            raise ConfigurationError(f"Invalid root margin length {part!r} in {value!r}")
        lengths.append(_Length(float(match.group(1)), match.group(2) == "%"))

    if len(lengths) == 1:
        lengths *= 4
    elif len(lengths) == 2:
        lengths = [lengths[0], lengths[1], lengths[0], lengths[1]]
    elif len(lengths) == 3:
        lengths = [lengths[0], lengths[1], lengths[2], lengths[1]]
    return RootMargin(*lengths)


class Subscription:
    """A registration of anchors with a visibility source.

    States are sampled when a batch is flushed, not when a change is
    requested, and compared with the last state delivered for each anchor.
    Several scrolls within one event-loop tick therefore yield at most one
    entry per anchor, and none for an anchor that ended where it started.

    Batches are delivered to ``callback`` until ``unsubscribe`` is called.
    Batches already scheduled on the event loop at that point are dropped.
    """

    def __init__(self, source: ViewportVisibilitySource, callback: VisibilityCallback) -> None:
        self._source = source
        self._callback = callback
        self._anchors: dict[str, BoundsProvider] = {}
        self._delivered: dict[str, bool] = {}
        self._flush_scheduled = False
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    @property
    def anchor_ids(self) -> tuple[str, ...]:
        return tuple(self._anchors)

    def observe(self, anchor_id: str, bounds_provider: BoundsProvider) -> None:
        """Start watching an anchor and report its current state."""
        if not self._active:
            return
        is_new = anchor_id not in self._anchors
        self._anchors[anchor_id] = bounds_provider
        if is_new:
            self._schedule()

    def unsubscribe(self) -> None:
        """Stop all deliveries. Safe to call more than once."""
        if not self._active:
            return
        self._active = False
        self._anchors.clear()
        self._delivered.clear()
        self._source._detach(self)

    def refresh(self) -> None:
        """Report anchors whose state differs from what was last delivered."""
        self._schedule()

    def _schedule(self) -> None:
        loop = self._source.loop
        if loop is None:
            self._flush()
        elif not self._flush_scheduled:
            self._flush_scheduled = True
            loop.call_soon(self._flush)

    def _flush(self) -> None:
        self._flush_scheduled = False
        if not self._active:
            logger.debug("Dropping visibility batch for closed subscription")
            return
        batch: list[VisibilityEntry] = []
        for anchor_id, provider in self._anchors.items():
            state = self._source.is_intersecting(provider())
            # Newly observed anchors have no delivered state and always report.
            if self._delivered.get(anchor_id) != state:
                self._delivered[anchor_id] = state
                batch.append(VisibilityEntry(anchor_id, state))
        if batch:
            self._callback(tuple(batch))


class VisibilitySource(Protocol):
    """Anything that can push visibility batches to a callback."""

    def subscribe(
        self,
        callback: VisibilityCallback,
        anchors: Mapping[str, BoundsProvider] | None = None,
    ) -> Subscription: ...


class ViewportVisibilitySource:
    """Intersection detection for a vertically scrolling container.

    Args:
        viewport_height: Visible height of the scroll container.
        root_margin: CSS-like margin applied to the viewport before testing.
        scroll_top: Initial scroll offset.
        loop: When given, batches are posted to this event loop instead of
            being delivered synchronously.
    """

    def __init__(
        self,
        viewport_height: float,
        *,
        root_margin: str = CHECKLIST_NAV_ROOT_MARGIN,
        scroll_top: float = 0.0,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        if viewport_height < 0:
            raise ConfigurationError(f"Viewport height must not be negative, got {viewport_height}")
        self.viewport_height = viewport_height
        self.scroll_top = scroll_top
        self.root_margin = parse_root_margin(root_margin)
        self.loop = loop
        self._subscriptions: list[Subscription] = []

    def subscribe(
        self,
        callback: VisibilityCallback,
        anchors: Mapping[str, BoundsProvider] | None = None,
    ) -> Subscription:
        """Register a callback, optionally observing an initial set of anchors."""
        subscription = Subscription(self, callback)
        self._subscriptions.append(subscription)
        for anchor_id, provider in (anchors or {}).items():
            subscription.observe(anchor_id, provider)
        return subscription

    def root_bounds(self) -> tuple[float, float]:
        """Return the (top, bottom) of the margin-adjusted viewport."""
        top = self.scroll_top - self.root_margin.top.resolve(self.viewport_height)
        bottom = self.scroll_top + self.viewport_height + self.root_margin.bottom.resolve(self.viewport_height)
        return top, bottom

    def is_intersecting(self, bounds: AnchorBounds) -> bool:
        root_top, root_bottom = self.root_bounds()
        return bounds.top < root_bottom and bounds.bottom > root_top

    def scroll_to(self, offset: float) -> None:
        """Move the viewport and notify subscribers of state changes."""
        self.scroll_top = offset
        self.refresh()

    def resize(self, viewport_height: float) -> None:
        """Change the viewport height and notify subscribers of state changes."""
        if viewport_height < 0:
            raise ConfigurationError(f"Viewport height must not be negative, got {viewport_height}")
        self.viewport_height = viewport_height
        self.refresh()

    def refresh(self) -> None:
        for subscription in list(self._subscriptions):
            subscription.refresh()

    @property
    def subscription_count(self) -> int:
        return len(self._subscriptions)

    def _detach(self, subscription: Subscription) -> None:
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)
