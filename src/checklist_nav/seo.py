"""Page metadata and structured data."""

from __future__ import annotations

from typing import Any

from checklist_nav.config import CHECKLIST_NAV_PAGE_DESCRIPTION, CHECKLIST_NAV_PAGE_TITLE
from checklist_nav.schemas import ContentTree, PitfallBlock, Step, TextBlock

PAGE_TITLE = CHECKLIST_NAV_PAGE_TITLE
PAGE_DESCRIPTION = CHECKLIST_NAV_PAGE_DESCRIPTION


def page_metadata() -> dict[str, str]:
    """Return the document title and meta description."""
    return {"title": PAGE_TITLE, "description": PAGE_DESCRIPTION}


def _answer_text(step: Step) -> str:
    answer = step.description or ""
    for block in step.blocks:
        if isinstance(block, TextBlock):
            answer += " " + block.content
        elif isinstance(block, PitfallBlock):
            answer += f" Pitfall: {block.content}. Solution: {block.fix}."
    return answer.strip()


def generate_faq_schema(tree: ContentTree) -> dict[str, Any]:
    """Build a schema.org FAQPage with one question per step.

    Always uses the full tree, independent of any search filter. Command
    blocks do not contribute to answers.
    """
    questions = [
        {
            "@type": "Question",
            "name": step.title,
            "acceptedAnswer": {"@type": "Answer", "text": _answer_text(step)},
        }
        for section in tree
        for step in section.steps
    ]
    return {
        "@context": "https://schema.org",
        "@type": "FAQPage",
        "mainEntity": questions,
    }
