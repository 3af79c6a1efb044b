"""Custom exceptions for checklist_nav."""

from __future__ import annotations


class ChecklistNavError(Exception):
    """Base exception for checklist_nav operations."""


class ContentError(ChecklistNavError):
    """Content tree failed validation."""


class DuplicateIdError(ContentError):
    """Section or step ids are not unique across the tree."""

    def __init__(self, duplicates: list[str]) -> None:
        self.duplicates = duplicates
        super().__init__(f"Duplicate anchor ids in content tree: {', '.join(duplicates)}")


class TrackerError(ChecklistNavError):
    """Error raised by the active section tracker."""


class UnknownAnchorError(TrackerError):
    """Anchor id is not part of the rendered tree."""

    def __init__(self, anchor_id: str) -> None:
        self.anchor_id = anchor_id
        super().__init__(f"Anchor {anchor_id!r} is not a section of the current tree")


class TrackerClosedError(TrackerError):
    """Tracker was used after teardown."""


class ViewClosedError(ChecklistNavError):
    """Checklist view was used after it was closed."""


class ConfigurationError(ChecklistNavError):
    """Invalid configuration value."""
