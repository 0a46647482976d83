"""Client shell and the JSON 404 for unknown API paths.

Mounted last: the catch-all route below would otherwise shadow every other
GET endpoint.
"""


from __future__ import annotations
from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import FileResponse
from ..core.config import settings
from ..core.errors import api_route_not_found

router = APIRouter(include_in_schema=False)


@router.get("/{full_path:path}")
def client_shell(full_path: str, request: Request):
    path = request.url.path
    if path == "/api" or path.startswith("/api/"):
        return api_route_not_found(path)
    index = settings.STATIC_DIR / "index.html"
    if not index.is_file():
        raise HTTPException(404, "Client application is not installed")
    return FileResponse(index, media_type="text/html")
