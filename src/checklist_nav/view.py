"""Composed checklist view state.

``ChecklistView`` owns the query, the filtered tree and the tracker for the
rendered sections. Every query change rebuilds the tracker: the previous one
is torn down first so no stale anchor can report into the new one.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Mapping

from checklist_nav.exceptions import ViewClosedError
from checklist_nav.output_formatter import ChecklistDocument, format_checklist
from checklist_nav.schemas import BoundsProvider, ContentTree, Section
from checklist_nav.sections import filter_sections
from checklist_nav.tracking import ActiveSectionTracker
from checklist_nav.visibility import VisibilitySource

logger = logging.getLogger(__name__)


class ChecklistView:
    """Search and navigation state for one rendered checklist.

    Args:
        tree: The immutable content tree.
        source: Visibility source the rendered section anchors register with.
        anchor_bounds: Bounds provider per section id. Sections without one
            are observed with empty bounds.
        title: Page heading used when rendering.
    """

    def __init__(
        self,
        tree: ContentTree,
        source: VisibilitySource | None = None,
        *,
        anchor_bounds: Mapping[str, BoundsProvider] | None = None,
        title: str | None = None,
    ) -> None:
        self._tree = tree
        self._source = source
        self._anchor_bounds = dict(anchor_bounds or {})
        self._title = title
        self._query = ""
        self._filtered: tuple[Section, ...] = ()
        self._tracker: ActiveSectionTracker | None = None
        self._closed = False
        self._rebuild()

    @property
    def tree(self) -> ContentTree:
        return self._tree

    @property
    def query(self) -> str:
        return self._query

    @property
    def filtered(self) -> tuple[Section, ...]:
        return self._filtered

    @property
    def has_results(self) -> bool:
        return bool(self._filtered)

    @property
    def tracker(self) -> ActiveSectionTracker | None:
        return self._tracker

    @property
    def active_section_id(self) -> str | None:
        if self._tracker is None:
            return None
        return self._tracker.active_id

    @property
    def closed(self) -> bool:
        return self._closed

    def set_query(self, query: str) -> tuple[Section, ...]:
        """Apply a new search query and re-register the rendered anchors.

        Raises:
            ViewClosedError: If the view was closed.
        """
        self._check_open()
        if query == self._query:
            return self._filtered
        self._query = query
        self._rebuild()
        return self._filtered

    def set_tree(self, tree: ContentTree) -> tuple[Section, ...]:
        """Swap in new content, keeping the current query.

        Raises:
            ViewClosedError: If the view was closed.
        """
        self._check_open()
        self._tree = tree
        self._rebuild()
        return self._filtered

    def set_anchor_bounds(self, anchor_id: str, provider: BoundsProvider) -> None:
        """Record where a section anchor is laid out; used from the next rebuild."""
        self._anchor_bounds[anchor_id] = provider

    def render(self, *, include_toc: bool = True) -> ChecklistDocument:
        return format_checklist(
            self._filtered,
            title=self._title,
            query=self._query,
            active_id=self.active_section_id,
            include_toc=include_toc,
        )

    def close(self) -> None:
        """Release the tracker. The view cannot be re-queried afterwards."""
        self._closed = True
        self._teardown()

    def _check_open(self) -> None:
        if self._closed:
            raise ViewClosedError("Checklist view is closed")

    def _teardown(self) -> None:
        if self._tracker is not None:
            self._tracker.unobserve_all()
            self._tracker = None

    def _rebuild(self) -> None:
        self._teardown()
        self._filtered = filter_sections(self._tree, self._query)
        tracker = ActiveSectionTracker((section.id for section in self._filtered), self._source)
        for section in self._filtered:
            tracker.observe(section.id, self._anchor_bounds.get(section.id))
        self._tracker = tracker
        logger.debug(
            "Rebuilt view for query %r: %d sections observed",
            self._query,
            len(self._filtered),
        )

    def __enter__(self) -> ChecklistView:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
