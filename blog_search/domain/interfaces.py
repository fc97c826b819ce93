# blog_search/domain/interfaces.py

from abc import ABC, abstractmethod
from typing import List, Sequence

from .models import Document, SearchResult


class DocumentIndexPort(ABC):

    @abstractmethod
    def index_documents(self, documents: List[Document]) -> None: ...

    @abstractmethod
    def search(self, terms: Sequence[str], top_k: int) -> List[SearchResult]: ...

    @abstractmethod
    def is_ready(self) -> bool: ...

    @abstractmethod
    def document_count(self) -> int: ...

    @abstractmethod
    def get_document_stats(self) -> List[dict]:
        """
        Return a list of categories with their document counts.
        """
        ...


class ResultSurfacePort(ABC):
    """
    Port for whatever displays the search overlay: a terminal, a page, a test double.
    """

    @abstractmethod
    def show(self) -> None: ...

    @abstractmethod
    def hide(self) -> None: ...

    @abstractmethod
    def render(self, results: Sequence[Document], query: str) -> None:
        """Replace all previously rendered results."""
        ...

    @abstractmethod
    def clear(self) -> None: ...

    @abstractmethod
    def set_empty_visible(self, visible: bool) -> None: ...

    @abstractmethod
    def select(self, index: int) -> None:
        """
        Mark `index` as the only selected item and scroll it into view.
        -1 clears the selection.
        """
        ...


class NavigatorPort(ABC):

    @abstractmethod
    def navigate(self, url: str) -> None: ...


class ClipboardPort(ABC):

    @abstractmethod
    def write_text(self, text: str) -> None: ...
