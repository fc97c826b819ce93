# blog_search/interface/html_renderer.py

import html
from typing import Sequence

from blog_search.domain.highlight import format_date, highlight_spans, primary_category, visible_tags
from blog_search.domain.models import Document, NO_SELECTION


EMPTY_STATE_HTML = '<div class="search-empty">No posts found.</div>'


def highlight_html(text: str, query: str) -> str:
    """Escape `text` and wrap every literal query occurrence in <mark>."""
    return "".join(
        f"<mark>{html.escape(segment)}</mark>" if is_match else html.escape(segment)
        for segment, is_match in highlight_spans(text, query)
    )


def render_result_html(document: Document, query: str, selected: bool = False) -> str:
    css_class = "search-result selected" if selected else "search-result"
    meta = [f'<time class="search-result-date">{html.escape(format_date(document.date))}</time>']

    category = primary_category(document)
    if category:
        meta.append(f'<span class="search-result-category">{html.escape(category)}</span>')

    tags = "".join(
        f'<span class="search-result-tag">#{html.escape(tag)}</span>'
        for tag in visible_tags(document)
    )
    if tags:
        meta.append(f'<span class="search-result-tags">{tags}</span>')

    return (
        f'<a class="{css_class}" role="option" '
        f'aria-selected="{"true" if selected else "false"}" '
        f'href="{html.escape(document.url, quote=True)}">'
        f'<div class="search-result-title">{highlight_html(document.title, query)}</div>'
        f'<div class="search-result-excerpt">{highlight_html(document.excerpt, query)}</div>'
        f'<div class="search-result-meta">{"".join(meta)}</div>'
        f"</a>"
    )


def render_results_html(
    results: Sequence[Document],
    query: str,
    selected_index: int = NO_SELECTION,
) -> str:
    """
    Render the whole result list. Output replaces any earlier markup;
    an empty result list renders the empty-state block instead of the list.
    """
    if not results:
        return EMPTY_STATE_HTML

    items = "".join(
        render_result_html(document, query, selected=(i == selected_index))
        for i, document in enumerate(results)
    )
    return f'<div class="search-results" role="listbox">{items}</div>'
