"""
Phonebook Backend: Frontend Static Files
===========================================

What:  Serves the compiled frontend from settings.static_root.
How:   A catch-all GET route, registered after every API router. If the
       requested path is a file under the static root it is returned;
       "/" maps to index.html. Anything else raises 404, which the global
       handler renders as {"error": "unknown endpoint"}.

Security:
    The resolved path must stay inside the static root, so "../" segments
    cannot reach the rest of the filesystem.
"""

from pathlib import Path

from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse

from phonebook.config import settings

router = APIRouter(tags=["Frontend"])


def resolve_static_file(file_path: str, root: str) -> Path:
    """
    Maps a request path to a file under root.

    Raises:
        HTTPException(404): no such file, or the path escapes root
    """
    static_root = Path(root).resolve()
    full_path = (static_root / (file_path or "index.html")).resolve()

    if not full_path.is_relative_to(static_root):
        raise HTTPException(status_code=404)
    if full_path.is_dir():
        full_path = full_path / "index.html"
    if not full_path.is_file():
        raise HTTPException(status_code=404)
    return full_path


@router.get("/{file_path:path}", include_in_schema=False)
async def serve_static(file_path: str) -> FileResponse:
    return FileResponse(path=str(resolve_static_file(file_path, settings.static_root)))
