# tests/test_document_index.py

import pytest
from blog_search.domain.models import Document
from blog_search.infrastructure.document_index import InMemoryDocumentIndex


def _make_document(title: str, categories=(), tags=()) -> Document:
    return Document(title=title, url=f"/{title.lower()}/", categories=categories, tags=tags)


def test_search_returns_ranked_results_with_scores():
    index = InMemoryDocumentIndex()
    index.index_documents([
        _make_document("Go", tags=("rust",)),
        _make_document("Rust"),
    ])

    results = index.search(["rust"], top_k=10)

    assert [r.document.title for r in results] == ["Rust", "Go"]
    assert [r.score for r in results] == [15, 5]


def test_top_k_never_exceeds_ten():
    index = InMemoryDocumentIndex()
    index.index_documents([_make_document(f"Post{i}", tags=("x",)) for i in range(30)])

    assert len(index.search(["x"], top_k=50)) == 10
    assert len(index.search(["x"], top_k=3)) == 3


def test_search_before_indexing_raises():
    index = InMemoryDocumentIndex()
    assert index.is_ready() is False
    with pytest.raises(RuntimeError):
        index.search(["rust"], top_k=10)


def test_empty_index_is_ready_with_no_hits():
    index = InMemoryDocumentIndex()
    index.index_documents([])

    assert index.is_ready() is True
    assert index.search(["rust"], top_k=10) == []
    assert index.get_document_stats() == []


def test_index_documents_rejects_missing_url():
    with pytest.raises(ValueError, match="missing a url"):
        InMemoryDocumentIndex().index_documents([Document(title="Draft", url="")])


def test_document_stats_count_categories():
    index = InMemoryDocumentIndex()
    index.index_documents([
        _make_document("A", categories=("Programming",)),
        _make_document("B", categories=("Programming", "Rust")),
        _make_document("C"),
    ])

    assert index.document_count() == 3
    assert index.get_document_stats() == [
        {"category": "Programming", "count": 2},
        {"category": "Rust", "count": 1},
        {"category": "uncategorized", "count": 1},
    ]
