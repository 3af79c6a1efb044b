"""Section filtering and utilities.

Filtering is two independent passes over the original tree:

* a section is *included* when its own title matches or any of its
  original steps matches;
* the steps *returned* for an included section are the original steps that
  match on their own.

A section that is included only because of its title therefore comes back
with no steps. Both passes are pure and leave the input tree untouched.
"""

from __future__ import annotations

import logging
from typing import Iterable

from checklist_nav.schemas import (
    CommandBlock,
    ContentBlock,
    PitfallBlock,
    Section,
    Step,
    TextBlock,
)

logger = logging.getLogger(__name__)


def matches(text: str | None, query: str) -> bool:
    """Case-insensitive substring test; the empty query matches everything."""
    if not query:
        return True
    if not text:
        return False
    return query.lower() in text.lower()


def block_matches(block: ContentBlock, query: str) -> bool:
    """Check a single content block against the query."""
    if isinstance(block, CommandBlock):
        return any(matches(command, query) for command in block.commands)
    if isinstance(block, PitfallBlock):
        return matches(block.title, query) or matches(block.content, query) or matches(block.fix, query)
    if isinstance(block, TextBlock):
        return matches(block.content, query)
    return False


def step_matches(step: Step, query: str) -> bool:
    """Check a step's title, description and blocks against the query."""
    return (
        matches(step.title, query)
        or matches(step.description, query)
        or any(block_matches(block, query) for block in step.blocks)
    )


def section_included(section: Section, query: str) -> bool:
    """Decide whether a section appears in the filtered result."""
    return matches(section.title, query) or any(step_matches(step, query) for step in section.steps)


def filter_steps(section: Section, query: str) -> tuple[Step, ...]:
    """Return the original steps of ``section`` that match on their own."""
    return tuple(step for step in section.steps if step_matches(step, query))


def filter_sections(sections: Iterable[Section], query: str) -> tuple[Section, ...]:
    """Filter a content tree by query, preserving order and ids.

    Args:
        sections: The content tree.
        query: Search text typed by the user.

    Returns:
        The included sections, each a copy carrying only its matching steps.
    """
    result = tuple(
        section.model_copy(update={"steps": filter_steps(section, query)})
        for section in sections
        if section_included(section, query)
    )
    logger.debug("Filtered content for query %r: %d sections", query, len(result))
    return result


def count_steps(sections: Iterable[Section]) -> int:
    """Count steps across all sections."""
    return sum(len(section.steps) for section in sections)
