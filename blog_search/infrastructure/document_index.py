# blog_search/infrastructure/document_index.py

from typing import List, Sequence

from blog_search.domain.interfaces import DocumentIndexPort
from blog_search.domain.models import Document, SearchResult, MAX_RESULTS
from blog_search.domain.scoring import rank_with_scores


class InMemoryDocumentIndex(DocumentIndexPort):
    """
    In-memory post index. No inverted index or caching: every search
    rescans all documents, which is fine for a blog-sized corpus
    (hundreds of posts) and is the first thing to replace past that.
    """

    def __init__(self):
        self._documents: List[Document] = []
        self._is_indexed = False

    def index_documents(self, documents: List[Document]) -> None:
        missing = [d.title or "<untitled>" for d in documents if not d.url]
        if missing:
            raise ValueError(f"Documents missing a url: {missing}")

        self._documents = list(documents)
        self._is_indexed = True
        print(f"[DocumentIndex] Indexed {len(self._documents)} documents.")

    def is_ready(self) -> bool:
        """Ready only once documents were indexed this session."""
        return self._is_indexed

    def document_count(self) -> int:
        return len(self._documents)

    def get_document_stats(self) -> List[dict]:
        """Document counts per category, posts without one under 'uncategorized'."""
        counts = {}
        for document in self._documents:
            for category in document.categories or ("uncategorized",):
                counts[category] = counts.get(category, 0) + 1
        return [{"category": name, "count": count} for name, count in sorted(counts.items())]

    def search(
        self,
        terms: Sequence[str],
        top_k: int = MAX_RESULTS,
    ) -> List[SearchResult]:
        if not self._is_indexed:
            raise RuntimeError("Document index is empty. Call index_documents() first.")

        return rank_with_scores(self._documents, terms, limit=min(top_k, MAX_RESULTS))
