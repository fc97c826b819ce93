# blog_search/domain/selection.py
#
# Pure transitions of the result-selection state machine.
# Every function takes a QueryState and returns a new one.

from dataclasses import replace
from typing import Optional, Sequence

from .models import Document, KeyEvent, QueryState, NO_SELECTION


ARROW_DOWN = "ArrowDown"
ARROW_UP = "ArrowUp"
ENTER = "Enter"
ESCAPE = "Escape"
SHORTCUT_KEY = "k"


def with_results(
    state: QueryState,
    raw_query: str,
    terms: Sequence[str],
    results: Sequence[Document],
) -> QueryState:
    """New results always drop the previous selection."""
    return replace(
        state,
        raw_query=raw_query,
        terms=tuple(terms),
        results=tuple(results),
        selected_index=NO_SELECTION,
    )


def move_down(state: QueryState) -> QueryState:
    count = len(state.results)
    if count == 0:
        return state
    if state.selected_index == NO_SELECTION:
        return replace(state, selected_index=0)
    return replace(state, selected_index=(state.selected_index + 1) % count)


def move_up(state: QueryState) -> QueryState:
    count = len(state.results)
    if count == 0:
        return state
    if state.selected_index in (NO_SELECTION, 0):
        return replace(state, selected_index=count - 1)
    return replace(state, selected_index=state.selected_index - 1)


def enter_target(state: QueryState) -> Optional[str]:
    """URL that Enter navigates to, or None when there is nothing to open."""
    selected = state.selected_document
    if selected is not None:
        return selected.url
    if state.results:
        return state.results[0].url
    return None


def reset() -> QueryState:
    return QueryState()


def is_open_shortcut(event: KeyEvent) -> bool:
    """Ctrl+K or Meta+K, whichever modifier the platform uses."""
    return (event.ctrl_key or event.meta_key) and event.key.lower() == SHORTCUT_KEY
