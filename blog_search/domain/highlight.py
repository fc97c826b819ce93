# blog_search/domain/highlight.py

import re
from datetime import datetime
from typing import List, Optional, Tuple

from .models import Document


MAX_TAGS_SHOWN = 3

# Fixed English abbreviations; strftime("%b") follows LC_TIME.
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def highlight_spans(text: str, query: str) -> List[Tuple[str, bool]]:
    """
    Split `text` into (segment, is_match) pairs.

    Every case-insensitive occurrence of the literal query string is a
    match. The query is not split into terms.
    """
    if not text:
        return []
    if not query:
        return [(text, False)]

    pattern = re.compile(re.escape(query), re.IGNORECASE)
    spans: List[Tuple[str, bool]] = []
    cursor = 0
    for match in pattern.finditer(text):
        if match.start() > cursor:
            spans.append((text[cursor:match.start()], False))
        spans.append((match.group(0), True))
        cursor = match.end()
    if cursor < len(text):
        spans.append((text[cursor:], False))
    return spans


def format_date(value: Optional[datetime]) -> str:
    """Short human date, e.g. 'Jan 5, 2024'."""
    if value is None:
        return ""
    return f"{MONTH_ABBREVIATIONS[value.month - 1]} {value.day}, {value.year}"


def primary_category(document: Document) -> Optional[str]:
    return document.categories[0] if document.categories else None


def visible_tags(document: Document) -> Tuple[str, ...]:
    return document.tags[:MAX_TAGS_SHOWN]
