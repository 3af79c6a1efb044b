"""Shared schemas for checklist_nav."""

from checklist_nav.schemas.content import (
    CommandBlock,
    ContentBlock,
    ContentTree,
    PitfallBlock,
    Section,
    Step,
    TextBlock,
)
from checklist_nav.schemas.visibility import (
    AnchorBounds,
    BoundsProvider,
    VisibilityBatch,
    VisibilityCallback,
    VisibilityEntry,
)

__all__ = [
    "AnchorBounds",
    "BoundsProvider",
    "CommandBlock",
    "ContentBlock",
    "ContentTree",
    "PitfallBlock",
    "Section",
    "Step",
    "TextBlock",
    "VisibilityBatch",
    "VisibilityCallback",
    "VisibilityEntry",
]
