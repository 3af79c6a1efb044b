"""checklist_nav: searchable, scroll-tracked checklist navigation."""

from checklist_nav.content import iter_anchor_ids, load_content, parse_content
from checklist_nav.exceptions import (
    ChecklistNavError,
    ConfigurationError,
    ContentError,
    DuplicateIdError,
    TrackerClosedError,
    TrackerError,
    UnknownAnchorError,
    ViewClosedError,
)
from checklist_nav.schemas import (
    AnchorBounds,
    CommandBlock,
    ContentTree,
    PitfallBlock,
    Section,
    Step,
    TextBlock,
    VisibilityEntry,
)
from checklist_nav.sections import filter_sections, matches
from checklist_nav.tracking import ActiveSectionTracker
from checklist_nav.view import ChecklistView
from checklist_nav.visibility import ViewportVisibilitySource

__all__ = [
    "ActiveSectionTracker",
    "AnchorBounds",
    "ChecklistNavError",
    "ChecklistView",
    "CommandBlock",
    "ConfigurationError",
    "ContentError",
    "ContentTree",
    "DuplicateIdError",
    "PitfallBlock",
    "Section",
    "Step",
    "TextBlock",
    "TrackerClosedError",
    "TrackerError",
    "UnknownAnchorError",
    "ViewClosedError",
    "ViewportVisibilitySource",
    "VisibilityEntry",
    "filter_sections",
    "iter_anchor_ids",
    "load_content",
    "matches",
    "parse_content",
]
