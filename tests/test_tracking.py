"""Tests for the active section tracker."""

from __future__ import annotations

import pytest

from checklist_nav.exceptions import TrackerClosedError, UnknownAnchorError
from checklist_nav.schemas import AnchorBounds, VisibilityEntry
from checklist_nav.tracking import ActiveSectionTracker
from checklist_nav.visibility import ViewportVisibilitySource


def _batch(*pairs: tuple[str, bool]) -> tuple[VisibilityEntry, ...]:
    return tuple(VisibilityEntry(anchor_id, state) for anchor_id, state in pairs)


@pytest.fixture
def tracker() -> ActiveSectionTracker:
    tracker = ActiveSectionTracker(["A", "B", "C"])
    for anchor_id in ("A", "B", "C"):
        tracker.observe(anchor_id)
    return tracker


class TestHandleBatch:
    """Tests for batch processing."""

    def test_starts_empty(self) -> None:
        """A new tracker has no active section."""
        assert ActiveSectionTracker(["A"]).active_id is None

    def test_last_intersecting_entry_wins(self, tracker: ActiveSectionTracker) -> None:
        """The last intersecting anchor in a batch becomes active."""
        tracker.handle_batch(_batch(("A", False), ("B", True), ("C", True)))
        assert tracker.active_id == "C"

    def test_exiting_does_not_clear(self, tracker: ActiveSectionTracker) -> None:
        """A non-intersecting entry leaves the active id unchanged."""
        tracker.handle_batch(_batch(("A", False), ("B", True), ("C", True)))
        tracker.handle_batch(_batch(("C", False)))
        assert tracker.active_id == "C"

    def test_delivery_order_not_registration_order(self, tracker: ActiveSectionTracker) -> None:
        """Order within the batch decides, not the order anchors were observed."""
        tracker.handle_batch(_batch(("C", True), ("A", True)))
        assert tracker.active_id == "A"

    def test_later_batch_replaces_active(self, tracker: ActiveSectionTracker) -> None:
        """A positive entry in a later batch moves the active id."""
        tracker.handle_batch(_batch(("B", True)))
        tracker.handle_batch(_batch(("B", False), ("A", True)))
        assert tracker.active_id == "A"

    def test_unobserved_anchor_is_ignored(self) -> None:
        """Entries for known but unobserved anchors do not change state."""
        tracker = ActiveSectionTracker(["A", "B"])
        tracker.observe("A")
        tracker.handle_batch(_batch(("B", True)))
        assert tracker.active_id is None

    def test_empty_batch(self, tracker: ActiveSectionTracker) -> None:
        """An empty batch is a no-op."""
        tracker.handle_batch(())
        assert tracker.active_id is None


class TestRegistration:
    """Tests for observe and teardown."""

    def test_unknown_anchor_is_rejected(self) -> None:
        """Observing an id outside the tree raises."""
        tracker = ActiveSectionTracker(["A"])
        with pytest.raises(UnknownAnchorError, match="'Z'"):
            tracker.observe("Z")

    def test_observe_after_teardown_raises(self, tracker: ActiveSectionTracker) -> None:
        """A torn-down tracker refuses new registrations."""
        tracker.unobserve_all()
        with pytest.raises(TrackerClosedError):
            tracker.observe("A")

    def test_events_after_teardown_are_ignored(self, tracker: ActiveSectionTracker) -> None:
        """Batches delivered after unobserve_all do not change state."""
        tracker.handle_batch(_batch(("A", True)))
        tracker.unobserve_all()
        tracker.handle_batch(_batch(("B", True), ("C", True)))
        assert tracker.active_id == "A"
        assert tracker.closed
        assert tracker.observed_ids == ()

    def test_unobserve_all_is_idempotent(self, tracker: ActiveSectionTracker) -> None:
        """Calling teardown twice is safe."""
        tracker.unobserve_all()
        tracker.unobserve_all()
        assert tracker.closed

    def test_reobserve_does_not_duplicate(self, tracker: ActiveSectionTracker) -> None:
        """Observing the same id twice keeps one registration."""
        tracker.observe("A", lambda: AnchorBounds(10.0, 5.0))
        assert tracker.observed_ids == ("A", "B", "C")

    def test_context_manager_tears_down_on_error(self) -> None:
        """Leaving the with block releases registrations even on error."""
        with pytest.raises(RuntimeError):
            with ActiveSectionTracker(["A"]) as tracker:
                tracker.observe("A")
                raise RuntimeError("render failed")
        assert tracker.closed
        assert tracker.observed_ids == ()


class TestWithVisibilitySource:
    """Tests wiring the tracker to a viewport source."""

    def test_initial_state_sets_active(self) -> None:
        """Anchors already in the top half activate on observe."""
        source = ViewportVisibilitySource(viewport_height=800)
        tracker = ActiveSectionTracker(["A", "B"], source)
        tracker.observe("A", lambda: AnchorBounds(0, 300))
        tracker.observe("B", lambda: AnchorBounds(300, 600))
        assert tracker.active_id == "B"

    def test_scrolling_moves_active(self) -> None:
        """Scrolling a section into the top half makes it active."""
        source = ViewportVisibilitySource(viewport_height=800)
        tracker = ActiveSectionTracker(["A", "B"], source)
        tracker.observe("A", lambda: AnchorBounds(0, 1000))
        tracker.observe("B", lambda: AnchorBounds(1000, 1000))
        assert tracker.active_id == "A"

        source.scroll_to(700)
        assert tracker.active_id == "B"

        # A never left the root, so scrolling back reports nothing for it.
        source.scroll_to(0)
        assert tracker.active_id == "B"

        source.scroll_to(1500)
        source.scroll_to(0)
        assert tracker.active_id == "A"

    def test_teardown_unsubscribes(self) -> None:
        """unobserve_all detaches from the source."""
        source = ViewportVisibilitySource(viewport_height=800)
        tracker = ActiveSectionTracker(["A", "B"], source)
        tracker.observe("A", lambda: AnchorBounds(0, 100))
        tracker.observe("B", lambda: AnchorBounds(2000, 100))
        assert source.subscription_count == 1

        tracker.unobserve_all()
        source.scroll_to(1900)
        assert source.subscription_count == 0
        assert tracker.active_id == "A"
