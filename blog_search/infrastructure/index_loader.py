# blog_search/infrastructure/index_loader.py

import json
from datetime import datetime
from pathlib import Path
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError, field_validator

from blog_search.domain.models import Document


# Jekyll writes "2024-01-15 10:00:00 +0000"; hand-written indexes tend to be ISO.
DATE_FORMATS = [
    "%Y-%m-%d %H:%M:%S %z",
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%d",
]

# Keys under which a wrapped index may carry its post list.
WRAPPER_KEYS = ("posts", "documents")


class DocumentRecord(BaseModel):
    """Wire format of one entry in search.json."""

    model_config = ConfigDict(extra="ignore")

    title: str
    url: str
    excerpt: str = ""
    content: str = ""
    tags: List[str] = []
    categories: List[str] = []
    date: Optional[datetime] = None

    @field_validator("excerpt", "content", mode="before")
    @classmethod
    def _none_as_blank(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("tags", "categories", mode="before")
    @classmethod
    def _single_value_as_list(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        value = value.strip()
        if not value:
            return None
        for date_format in DATE_FORMATS:
            try:
                return datetime.strptime(value, date_format)
            except ValueError:
                continue
        # Let pydantic try the remaining ISO-8601 variants (and report failure)
        return value

    def to_document(self) -> Document:
        return Document(
            title=self.title,
            url=self.url,
            excerpt=self.excerpt,
            content=self.content,
            tags=tuple(self.tags),
            categories=tuple(self.categories),
            date=self.date,
        )


_RECORDS_ADAPTER = TypeAdapter(List[DocumentRecord])


class IndexLoader:
    """
    Loads the build-time search index and turns it into Documents.

    Any malformed record rejects the whole index: a half-loaded index
    would silently hide posts, so callers get a RuntimeError instead and
    decide whether to run with search disabled.
    """

    def load_file(self, index_path: Path) -> List[Document]:
        index_path = Path(index_path)
        if not index_path.exists():
            raise RuntimeError(f"Search index not found: {index_path}")

        try:
            text = index_path.read_text(encoding="utf-8")
        except OSError as error:
            raise RuntimeError(
                f"Search index '{index_path}' could not be read.\n"
                f"Original error: {error}"
            ) from error

        documents = self.parse(text, source=str(index_path))
        print(f"[IndexLoader] Loaded {len(documents)} documents from {index_path}")
        return documents

    def parse(self, text: str, source: str = "<string>") -> List[Document]:
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as error:
            raise RuntimeError(
                f"Search index '{source}' is not valid JSON.\n"
                f"Original error: {error}"
            ) from error

        payload = self._unwrap(payload, source)

        try:
            records = _RECORDS_ADAPTER.validate_python(payload)
        except ValidationError as error:
            raise RuntimeError(
                f"Search index '{source}' has malformed records.\n"
                f"Original error: {error}"
            ) from error

        return [record.to_document() for record in records]

    # ─── Private ──────────────────────────────────────────────────────────────

    @staticmethod
    def _unwrap(payload: Any, source: str) -> Any:
        if isinstance(payload, list):
            return payload
        if isinstance(payload, dict):
            for key in WRAPPER_KEYS:
                if isinstance(payload.get(key), list):
                    return payload[key]
        raise RuntimeError(
            f"Search index '{source}' must be a list of posts "
            f"or an object with one of {list(WRAPPER_KEYS)}."
        )
