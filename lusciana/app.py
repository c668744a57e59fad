from __future__ import annotations

import json
import time
from contextlib import asynccontextmanager
from typing import Optional

import requests
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from lusciana.core.config import Settings, get_settings
from lusciana.core.errors import ServiceError, UpstreamError
from lusciana.core.guards import ADMIN_PASSWORD_HEADER, USER_EMAIL_HEADER, USER_PSEUDO_HEADER
from lusciana.core.logging_setup import configure_logging, get_logger, mask_secrets
from lusciana.repositories import CollectionStore, build_store
from lusciana.routers import auth as auth_router
from lusciana.routers import bugs as bugs_router
from lusciana.routers import devis as devis_router
from lusciana.routers import pages as pages_router

logger = get_logger("app")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request and turn unexpected exceptions into a JSON 500."""

    def __init__(self, app, *, log_bodies: bool) -> None:
        super().__init__(app)
        self._log_bodies = log_bodies

    async def dispatch(self, request, call_next):
        started = time.perf_counter()
        if self._log_bodies and request.method in ("POST", "PUT", "PATCH"):
            raw = await request.body()
            try:
                body = mask_secrets(json.loads(raw or b"null"))
            except ValueError:
                body = f"<{len(raw)} bytes>"
            logger.info("%s %s body=%s", request.method, request.url.path, body)
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            response = JSONResponse({"error": "Erreur serveur", "details": str(exc)}, status_code=500)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info("%s %s -> %s (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms)
        return response


async def _service_error_handler(request: Request, exc: ServiceError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s (%s)", request.method, request.url.path, exc.message, exc.details)
    return JSONResponse(exc.to_payload(), status_code=exc.status_code)


async def _validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse({"error": "Données invalides", "details": "Corps JSON attendu"}, status_code=400)


def create_app(settings: Optional[Settings] = None, store: Optional[CollectionStore] = None) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn (``uvicorn --factory lusciana.app:create_app``)."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    store = store or build_store(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            created = store.ensure_all()
        except (UpstreamError, requests.RequestException) as exc:
            # Reads still fall back to empty collections, so the site can serve.
            logger.warning("Could not initialise %s collections: %s", store.backend, exc)
        else:
            if created:
                logger.info("Created empty collections: %s", ", ".join(created))
        logger.info("Lusciana backend ready (storage=%s, env=%s)", store.backend, settings.app_env)
        yield

    app = FastAPI(title="Lusciana API", lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization", ADMIN_PASSWORD_HEADER, USER_EMAIL_HEADER, USER_PSEUDO_HEADER],
    )
    app.add_middleware(RequestLoggingMiddleware, log_bodies=settings.log_bodies)
    app.add_exception_handler(ServiceError, _service_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    @app.get("/api/health", tags=["health"])
    def health():
        return {"ok": True, "storage": store.backend}

    app.include_router(auth_router.router)
    app.include_router(bugs_router.router)
    app.include_router(devis_router.router)
    # Catch-all static routes must come last.
    app.include_router(pages_router.router)
    return app
