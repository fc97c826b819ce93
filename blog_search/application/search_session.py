# blog_search/application/search_session.py

from typing import Optional

from blog_search.application.search_service import BlogSearchService
from blog_search.domain import selection
from blog_search.domain.interfaces import ClipboardPort, NavigatorPort, ResultSurfacePort
from blog_search.domain.models import KeyEvent, QueryState
from blog_search.domain.scoring import parse_terms


class SearchSession:
    """
    One search overlay: open → query* → close.

    Holds the current QueryState and pushes every change to the injected
    surface. All handlers run to completion before returning, so a later
    keystroke always sees the state left by the previous one.
    """

    def __init__(
        self,
        service: BlogSearchService,
        surface: ResultSurfacePort,
        navigator: NavigatorPort,
        clipboard: Optional[ClipboardPort] = None,
    ):
        self._service = service
        self._surface = surface
        self._navigator = navigator
        self._clipboard = clipboard
        self._state = selection.reset()
        self._is_open = False

    @property
    def state(self) -> QueryState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._is_open

    # ─── Lifecycle ────────────────────────────────────────────────────────────

    def open(self) -> None:
        if self._is_open:
            return
        self._is_open = True
        self._surface.show()

    def close(self) -> None:
        """Close the overlay and forget the query, results and selection."""
        self._state = selection.reset()
        self._surface.clear()
        self._surface.set_empty_visible(False)
        self._surface.select(self._state.selected_index)
        if self._is_open:
            self._is_open = False
            self._surface.hide()

    def click_overlay(self, inside_content: bool) -> None:
        if not inside_content:
            self.close()

    # ─── Input ────────────────────────────────────────────────────────────────

    def update_query(self, raw_query: str) -> None:
        if not self._is_open:
            return

        query = raw_query.strip()
        results = self._service.search(raw_query)

        if results is None:
            self._state = selection.with_results(self._state, raw_query, (), ())
            self._surface.clear()
            self._surface.set_empty_visible(False)
            return

        documents = [result.document for result in results]
        self._state = selection.with_results(
            self._state, raw_query, parse_terms(raw_query), documents
        )

        if documents:
            self._surface.set_empty_visible(False)
            self._surface.render(documents, query)
        else:
            self._surface.clear()
            self._surface.set_empty_visible(True)

    def handle_key(self, event: KeyEvent) -> Optional[str]:
        """
        Apply one key press. Returns the URL navigated to, if any.
        """
        if selection.is_open_shortcut(event):
            self.open()
            return None

        if not self._is_open:
            return None

        if event.key == selection.ESCAPE:
            self.close()
        elif event.key == selection.ARROW_DOWN:
            self._move(selection.move_down(self._state))
        elif event.key == selection.ARROW_UP:
            self._move(selection.move_up(self._state))
        elif event.key == selection.ENTER:
            url = selection.enter_target(self._state)
            if url is not None:
                self._navigator.navigate(url)
            return url
        return None

    def copy_selected_link(self) -> bool:
        """
        Copy the URL Enter would open. Failures are logged and reported
        as False; the search state is never touched.
        """
        url = selection.enter_target(self._state)
        if url is None or self._clipboard is None:
            return False
        try:
            self._clipboard.write_text(url)
        except (OSError, RuntimeError) as error:
            print(f"[SearchSession] ⚠ Could not copy link: {error}")
            return False
        return True

    def _move(self, new_state: QueryState) -> None:
        self._state = new_state
        self._surface.select(new_state.selected_index)
