# main.py

from blog_search.infrastructure.index_loader import IndexLoader
from blog_search.infrastructure.document_index import InMemoryDocumentIndex
from blog_search.infrastructure.browser import BrowserNavigator, TerminalClipboard
from blog_search.application.search_service import BlogSearchService
from blog_search.application.search_session import SearchSession
from blog_search.domain import selection
from blog_search.domain.models import KeyEvent
from blog_search.interface.cli import (
    RichResultSurface,
    display_welcome_banner,
    display_index_status,
    prompt_for_input,
    display_error,
    display_notice,
)


SEARCH_INDEX_PATH = "data/search.json"
SITE_BASE_URL = "http://localhost:4000"

# Terminal stand-ins for the overlay's key presses
COMMAND_KEYS = {
    "/down": KeyEvent(selection.ARROW_DOWN),
    "/up": KeyEvent(selection.ARROW_UP),
    "/enter": KeyEvent(selection.ENTER),
    "/esc": KeyEvent(selection.ESCAPE),
    "/k": KeyEvent(selection.SHORTCUT_KEY, ctrl_key=True),
}
QUIT_COMMAND = "/quit"
COPY_COMMAND = "/copy"


def main() -> None:
    display_welcome_banner()

    # ── 1. Initialize infrastructure ─────────────────────────────────────────
    document_index = InMemoryDocumentIndex()
    search_service = BlogSearchService(document_index=document_index)

    # ── 2. Load the build-time index; a bad index disables search ────────────
    _load_index(search_service)
    display_index_status(document_index.document_count(), search_service.is_enabled)

    session = SearchSession(
        service=search_service,
        surface=RichResultSurface(),
        navigator=BrowserNavigator(base_url=SITE_BASE_URL),
        clipboard=TerminalClipboard(),
    )
    session.open()

    # ── 3. Interactive search loop ────────────────────────────────────────────
    while True:
        line = prompt_for_input()
        command = line.strip().lower()

        if command == QUIT_COMMAND:
            break

        if command == COPY_COMMAND:
            if session.copy_selected_link():
                display_notice("Link copied.")
            continue

        if command in COMMAND_KEYS:
            try:
                session.handle_key(COMMAND_KEYS[command])
            except RuntimeError as error:
                display_error(str(error))
            continue

        if not session.is_open:
            display_notice("Search is closed — type /k to open it.")
            continue

        session.update_query(line)


def _load_index(service: BlogSearchService) -> None:
    loader = IndexLoader()
    try:
        documents = loader.load_file(SEARCH_INDEX_PATH)
        service.build_index(documents)
    except (RuntimeError, ValueError) as error:
        service.disable(str(error))


if __name__ == "__main__":
    main()
