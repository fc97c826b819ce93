import hashlib
from pathlib import Path
from typing import Optional


def compute_file_hash(file_path: str) -> Optional[str]:
    """
    Compute SHA-256 hash of the search index file.
    Used to detect whether the site was rebuilt since the index was loaded.
    Returns None if the file does not exist.
    """
    path = Path(file_path)
    if not path.is_file():
        return None

    sha256 = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            sha256.update(chunk)
    return sha256.hexdigest()


def index_has_changed(file_path: str, known_hash: Optional[str]) -> bool:
    return compute_file_hash(file_path) != known_hash
