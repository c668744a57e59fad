"""Static site pages with index.html fallback (single-page front-end)."""
from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import FileResponse, JSONResponse, RedirectResponse

from lusciana.core.guards import TrustedHeaderIdentity

router = APIRouter(tags=["pages"])

_home_guard = TrustedHeaderIdentity(required=False)


def _public_dir(request: Request) -> Path:
    settings = request.app.state.settings
    return Path(settings.public_dir).resolve()


def _index(request: Request):
    index = _public_dir(request) / "index.html"
    if index.is_file():
        return FileResponse(index, media_type="text/html")
    return JSONResponse({"error": "Page introuvable"}, status_code=404)


def _resolve(request: Request, rel_path: str) -> Path | None:
    base = _public_dir(request)
    candidate = (base / rel_path).resolve()
    if candidate != base and base not in candidate.parents:
        return None
    return candidate if candidate.is_file() else None


@router.get("/", include_in_schema=False)
def index(request: Request):
    return _index(request)


@router.get("/home.html", include_in_schema=False)
def home(request: Request):
    if _home_guard.check(request) is None:
        return RedirectResponse("/login.html", status_code=303)
    page = _resolve(request, "home.html")
    return FileResponse(page) if page else _index(request)


@router.get("/{rel_path:path}", include_in_schema=False)
def static_or_index(rel_path: str, request: Request):
    if rel_path == "api" or rel_path.startswith("api/"):
        return JSONResponse({"error": "Route introuvable"}, status_code=404)
    page = _resolve(request, rel_path)
    if page:
        return FileResponse(page)
    return _index(request)
