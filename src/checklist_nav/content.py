"""Load and validate checklist content."""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import Any, Iterator

from pydantic import TypeAdapter, ValidationError

from checklist_nav.config import CHECKLIST_NAV_CONTENT_PATH
from checklist_nav.exceptions import ContentError, DuplicateIdError
from checklist_nav.schemas import ContentTree
from checklist_nav.sections import count_steps

logger = logging.getLogger(__name__)

_TREE_ADAPTER: TypeAdapter[ContentTree] = TypeAdapter(ContentTree)


def iter_anchor_ids(tree: ContentTree) -> Iterator[str]:
    """Yield every section and step id in tree order."""
    for section in tree:
        yield section.id
        for step in section.steps:
            yield step.id


def _check_unique_ids(tree: ContentTree) -> None:
    counts = Counter(iter_anchor_ids(tree))
    duplicates = [anchor_id for anchor_id, count in counts.items() if count > 1]
    if duplicates:
        raise DuplicateIdError(duplicates)


def parse_content(data: Any) -> ContentTree:
    """Validate in-memory content into an immutable tree.

    Args:
        data: A list of section mappings, or already built sections.

    Returns:
        The validated content tree.

    Raises:
        ContentError: If the data does not describe a valid tree.
        DuplicateIdError: If any section or step id is repeated.
    """
    try:
        tree = _TREE_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise ContentError(f"Invalid checklist content: {exc}") from exc
    _check_unique_ids(tree)
    return tree


def load_content(path: Path | None = None) -> ContentTree:
    """Read a content tree from a JSON file.

    Args:
        path: JSON file to read. Defaults to ``CHECKLIST_NAV_CONTENT_PATH``.

    Raises:
        ContentError: If the file cannot be read or is not a valid tree.
    """
    content_path = path or CHECKLIST_NAV_CONTENT_PATH
    try:
        raw = content_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ContentError(f"Cannot read checklist content from {content_path}: {exc}") from exc

    try:
        tree = _TREE_ADAPTER.validate_json(raw)
    except ValidationError as exc:
        raise ContentError(f"Invalid checklist content in {content_path}: {exc}") from exc
    _check_unique_ids(tree)

    logger.info(
        "Loaded checklist content from %s: %d sections, %d steps",
        content_path,
        len(tree),
        count_steps(tree),
    )
    return tree
