from __future__ import annotations

from fastapi import Request

from lusciana.repositories.base import CollectionStore
from lusciana.services.auth_service import AuthService
from lusciana.services.bug_service import BugReportService
from lusciana.services.quote_service import QuoteService


def get_store(request: Request) -> CollectionStore:
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Collection store not configured")
    return store


def get_auth_service(request: Request) -> AuthService:
    return AuthService(get_store(request))


def get_bug_service(request: Request) -> BugReportService:
    return BugReportService(get_store(request))


def get_quote_service(request: Request) -> QuoteService:
    return QuoteService(get_store(request))
