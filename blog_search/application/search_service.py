# blog_search/application/search_service.py

from typing import List, Optional

from blog_search.domain.interfaces import DocumentIndexPort
from blog_search.domain.models import Document, SearchResult, MAX_RESULTS, MIN_QUERY_LENGTH
from blog_search.domain.scoring import parse_terms


class BlogSearchService:
     """
     Core use case: rank indexed posts against a free-text query.

     Lifecycle:
     - Index loaded       → search() returns ranked results
     - Index unavailable  → service is disabled, search() always returns []

     This service never loads the index itself —
     that decision belongs to main.py / api.py (composition roots).
     """

     def __init__(
         self,
         document_index: DocumentIndexPort,
         top_k: int = MAX_RESULTS,
         min_query_length: int = MIN_QUERY_LENGTH,
     ):
         self._document_index = document_index
         self._top_k = top_k
         self._min_query_length = min_query_length
         self._is_enabled = False

     def build_index(self, documents: List[Document]) -> None:
         """
         Hand the loaded documents to the index and enable searching.
         An empty list is a valid index: every query then finds zero hits.
         """
         self._document_index.index_documents(documents)
         self._is_enabled = True
         print(f"[SearchService] Index built with {len(documents)} documents.")

     def disable(self, reason: str) -> None:
         """
         Turn search into a no-op for the rest of the session.
         Called when the index could not be loaded at startup.
         """
         self._is_enabled = False
         print(f"[SearchService] Search disabled: {reason}")

     @property
     def is_enabled(self) -> bool:
         return self._is_enabled

     def is_active_query(self, query: str) -> bool:
         return len(query.strip()) >= self._min_query_length

     def search(self, query: str) -> Optional[List[SearchResult]]:
         """
         Return ranked results, or None when the query is too short to search.

         None ("not searched") and [] ("searched, zero hits") are different:
         only the latter shows the empty indicator.
         """
         if not self.is_active_query(query):
             return None

         if not self._is_enabled:
             return None

         return self._document_index.search(parse_terms(query), self._top_k)
