# blog_search/domain/scoring.py

from typing import List, Sequence

import numpy as np

from .models import Document, SearchResult, MAX_RESULTS


# ── Field weights ─────────────────────────────────────────────────────────────
TITLE_WEIGHT = 10
EXACT_TITLE_BONUS = 5
TAG_WEIGHT = 5
CATEGORY_WEIGHT = 5
EXCERPT_WEIGHT = 3
CONTENT_WEIGHT = 1


def parse_terms(query: str) -> List[str]:
    """Lowercase the query and split it on whitespace, dropping empty terms."""
    return [term for term in query.lower().split() if term]


def score(document: Document, terms: Sequence[str]) -> int:
    """
    Sum the weighted field hits of every term against one document.

    Matching is plain case-insensitive substring containment, so "art"
    also hits "Smart". A term that appears in several fields collects
    every applicable weight.
    """
    title = document.title.lower()
    excerpt = document.excerpt.lower()
    content = document.content.lower()
    tags = [tag.lower() for tag in document.tags]
    categories = [category.lower() for category in document.categories]

    total = 0
    for term in terms:
        term = term.lower()
        if term in title:
            total += TITLE_WEIGHT
        if title == term:
            total += EXACT_TITLE_BONUS
        if any(term in tag for tag in tags):
            total += TAG_WEIGHT
        if any(term in category for category in categories):
            total += CATEGORY_WEIGHT
        if term in excerpt:
            total += EXCERPT_WEIGHT
        if term in content:
            total += CONTENT_WEIGHT
    return total


def rank_with_scores(
    documents: Sequence[Document],
    terms: Sequence[str],
    limit: int = MAX_RESULTS,
) -> List[SearchResult]:
    """
    Score every document, keep positive scores and return the best `limit`.

    Equal scores keep their original index order (stable sort). The whole
    index is rescored on every call, so cost grows linearly with the
    number of posts.
    """
    if not documents or not terms:
        return []

    scores = np.array([score(document, terms) for document in documents])
    matching = np.flatnonzero(scores > 0)
    ordered = matching[np.argsort(-scores[matching], kind="stable")][:limit]

    return [
        SearchResult(document=documents[i], score=int(scores[i]))
        for i in ordered
    ]


def rank(
    documents: Sequence[Document],
    terms: Sequence[str],
    limit: int = MAX_RESULTS,
) -> List[Document]:
    return [result.document for result in rank_with_scores(documents, terms, limit)]
