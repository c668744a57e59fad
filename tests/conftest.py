from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional

import pytest
from fastapi.testclient import TestClient

# Make the package importable for local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from lusciana.app import create_app  # noqa: E402
from lusciana.core import config as core_config  # noqa: E402
from lusciana.core.errors import VersionConflictError  # noqa: E402
from lusciana.repositories.github_storage import GitHubCollectionStore, RemoteContent  # noqa: E402
from lusciana.repositories.json_storage import LocalJsonStore  # noqa: E402


class FakeContentsClient:
    """In-memory stand-in for GitHubContentsClient keyed by path, with sha checks."""

    def __init__(self) -> None:
        self.files: dict[str, RemoteContent] = {}
        self.gets: list[str] = []
        self.puts: list[tuple[str, Optional[str]]] = []
        self._counter = 0

    def get_content(self, path: str) -> Optional[RemoteContent]:
        self.gets.append(path)
        current = self.files.get(path)
        return RemoteContent(current.text, current.sha) if current else None

    def put_content(self, path: str, text: str, sha: Optional[str], message: str) -> str:
        self.puts.append((path, sha))
        current = self.files.get(path)
        if (current.sha if current else None) != sha:
            raise VersionConflictError(details=path)
        self._counter += 1
        new_sha = f"sha{self._counter}"
        self.files[path] = RemoteContent(text, new_sha)
        return new_sha


@pytest.fixture()
def local_store(tmp_path):
    return LocalJsonStore(tmp_path / "data")


@pytest.fixture()
def fake_client():
    return FakeContentsClient()


@pytest.fixture()
def github_store(fake_client):
    return GitHubCollectionStore(fake_client, "data")


@pytest.fixture()
def settings(tmp_path, monkeypatch):
    """Settings read from a clean environment pointing at temporary directories."""
    for var in ("STORAGE_BACKEND", "ADMIN_PASSWORD", "LOG_BODIES", "CORS_ORIGINS"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("DATA_DIR", str(tmp_path / "data"))
    public = tmp_path / "public"
    public.mkdir()
    (public / "index.html").write_text("<html>index</html>", encoding="utf-8")
    (public / "home.html").write_text("<html>home</html>", encoding="utf-8")
    (public / "devis.html").write_text("<html>devis</html>", encoding="utf-8")
    monkeypatch.setenv("PUBLIC_DIR", str(public))
    core_config.get_settings.cache_clear()
    yield core_config.get_settings()
    core_config.get_settings.cache_clear()


@pytest.fixture()
def client(settings, local_store):
    app = create_app(replace(settings, log_bodies=True), store=local_store)
    with TestClient(app) as test_client:
        yield test_client
