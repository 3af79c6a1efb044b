"""Checklist content tree models."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class CommandBlock(_Frozen):
    """Shell commands for one platform."""

    type: Literal["command"] = "command"
    platform: str
    language: str | None = None
    commands: tuple[str, ...] = ()
    description: str | None = None


class PitfallBlock(_Frozen):
    """A common mistake together with its fix."""

    type: Literal["pitfall"] = "pitfall"
    title: str
    content: str
    fix: str


class TextBlock(_Frozen):
    """A plain paragraph."""

    type: Literal["text"] = "text"
    content: str


ContentBlock = Annotated[
    Union[CommandBlock, PitfallBlock, TextBlock],
    Field(discriminator="type"),
]


class Step(_Frozen):
    """A subsection of a checklist section.

    Attributes:
        id: Anchor id, unique across the whole tree.
        title: Heading shown in the navigation panel.
        description: Short summary shown above the blocks.
        blocks: Ordered content blocks.
    """

    id: str = Field(..., min_length=1)
    title: str
    description: str = ""
    blocks: tuple[ContentBlock, ...] = ()


class Section(_Frozen):
    """A top-level checklist chapter.

    Attributes:
        id: Anchor id, unique across the whole tree.
        title: Heading shown in the navigation panel.
        description: Optional chapter summary.
        steps: Ordered steps.
    """

    id: str = Field(..., min_length=1)
    title: str
    description: str | None = None
    steps: tuple[Step, ...] = ()


ContentTree = tuple[Section, ...]
