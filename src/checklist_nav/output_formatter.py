"""Format checklist sections into a table of contents and Markdown content."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from checklist_nav.schemas import (
    CommandBlock,
    ContentBlock,
    PitfallBlock,
    Section,
    Step,
    TextBlock,
)
from checklist_nav.sections import count_steps

_DEFAULT_LANGUAGE = "bash"


@dataclass(frozen=True)
class ChecklistDocument:
    """Rendered checklist output."""

    summary: str
    toc: str
    content: str


def format_checklist(
    sections: Iterable[Section],
    *,
    title: str | None = None,
    query: str = "",
    active_id: str | None = None,
    include_toc: bool = True,
) -> ChecklistDocument:
    """Render filtered sections as Markdown.

    Args:
        sections: Filtered sections, in display order.
        title: Optional page heading.
        query: The query that produced ``sections``; used in the summary and
            the empty-result message.
        active_id: Section or step id to mark as active in the contents.
        include_toc: If False, the contents list is left out of ``content``.
    """
    sections = list(sections)
    toc = _render_toc(sections, active_id=active_id)

    blocks: list[str] = []
    if title:
        blocks.append(f"# {title}")
    if include_toc and toc:
        blocks.append("## Contents\n" + toc)
    if sections:
        for section in sections:
            blocks.extend(_render_section(section))
    else:
        blocks.append(f'No results found for "{query}". Try a different search term.')
    content = "\n\n".join(block for block in blocks if block).strip()

    summary_lines = []
    if title:
        summary_lines.append(f"Title: {title}")
    if query:
        summary_lines.append(f"Query: {query}")
    summary_lines.append(f"Sections: {len(sections)}")
    summary_lines.append(f"Steps: {count_steps(sections)}")
    if active_id:
        summary_lines.append(f"Active: {active_id}")

    return ChecklistDocument(summary="\n".join(summary_lines), toc=toc, content=content)


def copy_text(block: CommandBlock) -> str:
    """Return the clipboard payload for a command block."""
    return "\n".join(block.commands)


def _toc_entry(item: Section | Step, active_id: str | None) -> str:
    link = f"[{item.title}](#{item.id})"
    if item.id == active_id:
        return f"**{link}** (active)"
    return link


def _render_toc(sections: list[Section], *, active_id: str | None) -> str:
    lines: list[str] = []
    for section in sections:
        lines.append("- " + _toc_entry(section, active_id))
        for step in section.steps:
            lines.append("  - " + _toc_entry(step, active_id))
    return "\n".join(lines)


def _render_section(section: Section) -> list[str]:
    blocks = [f'<a id="{section.id}"></a>\n## {section.title}']
    if section.description:
        blocks.append(section.description)
    for step in section.steps:
        blocks.extend(_render_step(step))
    return blocks


def _render_step(step: Step) -> list[str]:
    blocks = [f'<a id="{step.id}"></a>\n### {step.title}']
    if step.description:
        blocks.append(step.description)
    for block in step.blocks:
        rendered = _render_block(block)
        if rendered:
            blocks.append(rendered)
    return blocks


def _render_block(block: ContentBlock) -> str:
    if isinstance(block, CommandBlock):
        parts = []
        if block.platform:
            parts.append(f"**{block.platform}**")
        if block.description:
            parts.append(block.description)
        language = block.language or _DEFAULT_LANGUAGE
        parts.append(f"```{language}\n{copy_text(block)}\n```")
        return "\n\n".join(parts)
    if isinstance(block, PitfallBlock):
        lines = [f"> **{block.title}**", ">", f"> Pitfall: {block.content}"]
        if block.fix:
            lines.extend([">", f"> Solution: {block.fix}"])
        return "\n".join(lines)
    if isinstance(block, TextBlock):
        return block.content
    return ""
