from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from typing import List, Optional
import uvicorn

from blog_search.infrastructure.index_loader import IndexLoader
from blog_search.infrastructure.document_index import InMemoryDocumentIndex
from blog_search.infrastructure.file_hasher import compute_file_hash, index_has_changed
from blog_search.application.search_service import BlogSearchService
from blog_search.domain.highlight import format_date
from blog_search.interface.html_renderer import render_results_html

# ── Configuration ────────────────────────────────────────────────────────────
SEARCH_INDEX_PATH = "data/search.json"

# ── API Models ───────────────────────────────────────────────────────────────
class SearchRequest(BaseModel):
    query: str

class ResultSchema(BaseModel):
    title: str
    url: str
    date: str
    excerpt: str
    categories: List[str]
    tags: List[str]
    score: int

class SearchResponse(BaseModel):
    query: str
    active: bool
    empty: bool
    results: List[ResultSchema]
    html: str

# ── App Initialization ───────────────────────────────────────────────────────
app = FastAPI(
    title="Blog Search API",
    description="Scored keyword search over the blog's build-time post index.",
    version="1.0.0"
)

# ── CORS Middleware ──────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:4000", "http://127.0.0.1:4000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Service state (global scope for singleton behavior); swapped whole on reload
document_index = InMemoryDocumentIndex()
search_service = BlogSearchService(document_index=document_index)
index_hash: Optional[str] = None


def load_search_index() -> bool:
    """(Re)build the service from SEARCH_INDEX_PATH. Returns whether search is enabled."""
    global document_index, search_service, index_hash

    new_index = InMemoryDocumentIndex()
    new_service = BlogSearchService(document_index=new_index)
    try:
        documents = IndexLoader().load_file(SEARCH_INDEX_PATH)
        new_service.build_index(documents)
    except (RuntimeError, ValueError) as error:
        new_service.disable(str(error))

    document_index, search_service = new_index, new_service
    index_hash = compute_file_hash(SEARCH_INDEX_PATH)
    return search_service.is_enabled


if load_search_index():
    print("[API] Search index loaded. Service is READY.")
else:
    print(f"[API] WARNING: No usable search index at '{SEARCH_INDEX_PATH}'. Search is disabled.")

# ── Endpoints ────────────────────────────────────────────────────────────────
@app.get("/")
def read_root():
    return {
        "message": "Blog Search API is running.",
        "status": "ready" if search_service.is_enabled else "index_unavailable",
        "documents_indexed": document_index.document_count()
    }

@app.get("/status")
def get_status():
    """Returns the readiness of the search index and where it was loaded from."""
    return {
        "is_ready": search_service.is_enabled,
        "documents_indexed": document_index.document_count(),
        "index_path": SEARCH_INDEX_PATH,
        "index_hash": index_hash
    }

@app.get("/documents")
def get_documents():
    """Returns the indexed categories and their post counts."""
    return {"categories": document_index.get_document_stats()}

@app.post("/reindex")
def trigger_reindex():
    """Reload the search index if the site build changed it."""
    if not index_has_changed(SEARCH_INDEX_PATH, index_hash):
        return {
            "message": "Search index unchanged.",
            "reloaded": False,
            "is_ready": search_service.is_enabled
        }

    is_ready = load_search_index()
    print(f"[API] Search index reloaded ({document_index.document_count()} documents).")
    return {
        "message": "Re-indexing complete.",
        "reloaded": True,
        "is_ready": is_ready,
        "documents_indexed": document_index.document_count()
    }

@app.post("/search", response_model=SearchResponse)
def search(request: SearchRequest):
    try:
        results = search_service.search(request.query)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

    # Too-short query, or search disabled by an unusable index
    if results is None:
        return SearchResponse(query=request.query, active=False, empty=False, results=[], html="")

    documents = [r.document for r in results]
    return SearchResponse(
        query=request.query,
        active=True,
        empty=not results,
        results=[
            ResultSchema(
                title=r.document.title,
                url=r.document.url,
                date=format_date(r.document.date),
                excerpt=r.document.excerpt,
                categories=list(r.document.categories),
                tags=list(r.document.tags),
                score=r.score,
            )
            for r in results
        ],
        html=render_results_html(documents, request.query.strip()),
    )

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
