# tests/test_scoring.py

from blog_search.domain.models import Document
from blog_search.domain.scoring import parse_terms, rank, rank_with_scores, score


def _make_document(title: str, **fields) -> Document:
    return Document(title=title, url=f"/{title.lower().replace(' ', '-')}/", **fields)


def test_parse_terms_lowercases_and_drops_empty_terms():
    assert parse_terms("  Rust   GO\tpatterns ") == ["rust", "go", "patterns"]
    assert parse_terms("   ") == []


def test_title_equal_to_sole_term_scores_fifteen():
    assert score(_make_document("Rust"), ["rust"]) == 15


def test_every_matching_field_adds_its_weight():
    document = _make_document(
        "Python tips",
        excerpt="Some python idioms",
        content="python everywhere",
        tags=("python",),
        categories=("Python",),
    )
    # title 10 + tag 5 + category 5 + excerpt 3 + content 1
    assert score(document, ["python"]) == 24


def test_score_sums_over_terms():
    document = _make_document("Rust Basics", tags=("rust",))
    # "rust": title 10 + tag 5; "basics": title 10
    assert score(document, ["rust", "basics"]) == 25


def test_matching_is_case_insensitive_substring():
    assert score(_make_document("Smart Home Notes"), ["art"]) == 10
    assert score(_make_document("Other", tags=("WebGL",)), ["webg"]) == 5


def test_no_match_scores_zero():
    assert score(_make_document("Go Patterns", excerpt="channels"), ["haskell"]) == 0


def test_rank_scenario_rust():
    documents = [
        _make_document("Rust Basics", tags=("rust",)),
        _make_document("Go Patterns", tags=("go", "rust")),
    ]

    results = rank_with_scores(documents, ["rust"])

    assert [r.document.title for r in results] == ["Rust Basics", "Go Patterns"]
    assert [r.score for r in results] == [15, 5]


def test_rank_orders_by_score_descending():
    documents = [
        _make_document("Notes", content="rust"),
        _make_document("Rust"),
        _make_document("More notes", excerpt="rust"),
    ]

    assert [d.title for d in rank(documents, ["rust"])] == ["Rust", "More notes", "Notes"]


def test_rank_is_stable_for_equal_scores():
    documents = [
        _make_document("First", tags=("python",)),
        _make_document("Unrelated"),
        _make_document("Second", tags=("python",)),
        _make_document("Third", tags=("python",)),
    ]

    assert [d.title for d in rank(documents, ["python"])] == ["First", "Second", "Third"]


def test_rank_drops_non_matching_documents():
    documents = [_make_document("Rust Basics"), _make_document("Go Patterns")]
    assert [d.title for d in rank(documents, ["rust"])] == ["Rust Basics"]


def test_rank_returns_at_most_ten_documents():
    documents = [_make_document(f"Post {i}", tags=("common",)) for i in range(25)]

    results = rank(documents, ["common"])

    assert len(results) == 10
    assert results[0].title == "Post 0"


def test_rank_with_no_terms_or_documents_is_empty():
    assert rank([], ["rust"]) == []
    assert rank([_make_document("Rust")], []) == []
