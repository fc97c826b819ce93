# blog_search/domain/models.py

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple


MAX_RESULTS = 10
MIN_QUERY_LENGTH = 2
NO_SELECTION = -1


@dataclass(frozen=True)
class Document:
    """
    Represents a single blog post as emitted by the build-time index.
    """
    title: str
    url: str
    excerpt: str = ""
    content: str = field(default="", repr=False)
    tags: Tuple[str, ...] = ()
    categories: Tuple[str, ...] = ()
    date: Optional[datetime] = None


@dataclass(frozen=True)
class SearchResult:
    """
    Represents a ranked document together with its relevance score.
    """
    document: Document
    score: int

    def __repr__(self) -> str:
        return (
            f"SearchResult(score={self.score}, "
            f"title='{self.document.title}', "
            f"url='{self.document.url}')"
        )


@dataclass(frozen=True)
class QueryState:
    """
    Snapshot of one search session.

    Transitions never mutate a state in place; they return a new one
    (see domain/selection.py).
    """
    raw_query: str = ""
    terms: Tuple[str, ...] = ()
    results: Tuple[Document, ...] = ()
    selected_index: int = NO_SELECTION

    @property
    def selected_document(self) -> Optional[Document]:
        if self.selected_index == NO_SELECTION:
            return None
        return self.results[self.selected_index]


@dataclass(frozen=True)
class KeyEvent:
    key: str
    ctrl_key: bool = False
    meta_key: bool = False
