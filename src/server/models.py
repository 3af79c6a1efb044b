"""Pydantic response models for the API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from checklist_nav.schemas import Section


class ChecklistResponse(BaseModel):
    """Filtered checklist returned by ``/api/checklist``.

    Attributes
    ----------
    query : str
        The search query that was applied.
    section_count : int
        Number of sections in ``sections``.
    step_count : int
        Number of steps across ``sections``.
    sections : list[Section]
        The filtered sections in document order.

    """

    query: str = Field(default="", description="Search query that was applied")
    section_count: int = Field(..., ge=0)
    step_count: int = Field(..., ge=0)
    sections: list[Section] = Field(default_factory=list)


class PageMetadataResponse(BaseModel):
    """Document title and meta description."""

    title: str
    description: str


class FAQSchemaResponse(BaseModel):
    """schema.org FAQPage payload."""

    model_config = ConfigDict(populate_by_name=True)

    context: str = Field(..., alias="@context")
    type: str = Field(..., alias="@type")
    main_entity: list[dict[str, Any]] = Field(..., alias="mainEntity")


class HealthResponse(BaseModel):
    status: str = "ok"
