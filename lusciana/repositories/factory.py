"""Build the configured collection store."""
from __future__ import annotations

from lusciana.core.config import Settings
from lusciana.repositories.base import CollectionStore
from lusciana.repositories.github_storage import GitHubCollectionStore, GitHubContentsClient
from lusciana.repositories.json_storage import LocalJsonStore


def build_store(settings: Settings) -> CollectionStore:
    backend = settings.storage_backend
    if backend == "local":
        return LocalJsonStore(settings.data_dir)
    if backend == "github":
        if not settings.github_repo:
            raise RuntimeError("GITHUB_REPO must be configured to use the github storage backend.")
        client = GitHubContentsClient(
            settings.github_repo,
            settings.github_token,
            branch=settings.github_branch,
            api_url=settings.github_api_url,
            timeout=settings.remote_timeout_seconds,
        )
        return GitHubCollectionStore(client, settings.github_data_path)
    raise RuntimeError(f"Unknown STORAGE_BACKEND: {backend!r} (expected 'local' or 'github')")
