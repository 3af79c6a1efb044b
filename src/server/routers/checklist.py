"""Checklist endpoints for the API."""

from fastapi import APIRouter, Query, Request
from fastapi.responses import PlainTextResponse

from checklist_nav.output_formatter import format_checklist
from checklist_nav.schemas import ContentTree
from checklist_nav.sections import count_steps, filter_sections
from checklist_nav.seo import PAGE_TITLE, generate_faq_schema, page_metadata
from server.models import ChecklistResponse, FAQSchemaResponse, PageMetadataResponse

router = APIRouter()


def _tree(request: Request) -> ContentTree:
    return request.app.state.tree


@router.get("/api/checklist")
async def get_checklist(
    request: Request,
    q: str = Query(default="", description="Search query"),
) -> ChecklistResponse:
    """Return the checklist filtered by ``q``.

    **Query Parameters**
    - **q** (`str`, optional): case-insensitive search text; empty returns everything

    **Returns**
    - **ChecklistResponse**: the matching sections in document order
    """
    sections = filter_sections(_tree(request), q)
    return ChecklistResponse(
        query=q,
        section_count=len(sections),
        step_count=count_steps(sections),
        sections=list(sections),
    )


@router.get("/api/checklist/markdown", response_class=PlainTextResponse)
async def get_checklist_markdown(
    request: Request,
    q: str = Query(default="", description="Search query"),
    active: str | None = Query(default=None, description="Section id to highlight"),
) -> PlainTextResponse:
    """Render the filtered checklist as Markdown."""
    sections = filter_sections(_tree(request), q)
    document = format_checklist(sections, title=PAGE_TITLE, query=q, active_id=active)
    return PlainTextResponse(document.content, media_type="text/markdown")


@router.get("/api/faq-schema", response_model_by_alias=True)
async def get_faq_schema(request: Request) -> FAQSchemaResponse:
    """Return the FAQPage JSON-LD for the full checklist."""
    return FAQSchemaResponse.model_validate(generate_faq_schema(_tree(request)))


@router.get("/api/meta")
async def get_meta() -> PageMetadataResponse:
    return PageMetadataResponse(**page_metadata())
