"""
GitHub-backed persistence adapter.

A repository is used as a crude database: each collection is a JSON file
under ``<data_path>/`` on one branch, read and replaced through the REST
"contents" API. GitHub requires the blob sha of the current file on every
update, which doubles as the collection's version token.
"""

from __future__ import annotations

import base64
import json
from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote

import requests

from lusciana.core.errors import RemoteAuthError, VersionConflictError
from lusciana.core.logging_setup import get_logger
from lusciana.repositories.base import CollectionStore, empty_collection, with_defaults

logger = get_logger("repositories.github")

GITHUB_API_URL = "https://api.github.com"


@dataclass
class RemoteContent:
    text: str
    sha: str


class GitHubContentsClient:
    """Minimal get/put client for ``/repos/{repo}/contents/{path}``."""

    def __init__(
        self,
        repo: str,
        token: str,
        *,
        branch: str = "main",
        api_url: str = GITHUB_API_URL,
        timeout: int = 10,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.repo = repo.strip("/")
        self.branch = branch
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            }
        )
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"

    def _url(self, path: str) -> str:
        return f"{self.api_url}/repos/{self.repo}/contents/{quote(path.strip('/'))}"

    def _raise_for_auth(self, resp: requests.Response, path: str) -> None:
        if resp.status_code in (401, 403):
            logger.warning("GitHub refused access to %s (%s)", path, resp.status_code)
            raise RemoteAuthError(details=f"GitHub a répondu {resp.status_code} pour {path}")

    def get_content(self, path: str) -> Optional[RemoteContent]:
        """Return the decoded file and its sha, or None when the file does not exist."""
        resp = self.session.get(self._url(path), params={"ref": self.branch}, timeout=self.timeout)
        if resp.status_code == 404:
            return None
        self._raise_for_auth(resp, path)
        resp.raise_for_status()
        payload = resp.json()
        raw = base64.b64decode(payload.get("content") or "")
        return RemoteContent(text=raw.decode("utf-8"), sha=payload["sha"])

    def put_content(self, path: str, text: str, sha: Optional[str], message: str) -> str:
        """Create or replace a file. Returns the new blob sha."""
        body = {
            "message": message,
            "content": base64.b64encode(text.encode("utf-8")).decode("ascii"),
            "branch": self.branch,
        }
        if sha:
            body["sha"] = sha
        resp = self.session.put(self._url(path), json=body, timeout=self.timeout)
        self._raise_for_auth(resp, path)
        if resp.status_code in (409, 422):
            logger.warning("GitHub rejected write to %s: stale sha %s", path, sha)
            raise VersionConflictError(details=f"sha {sha} obsolète pour {path}")
        resp.raise_for_status()
        return resp.json()["content"]["sha"]


class GitHubCollectionStore(CollectionStore):
    backend = "github"

    def __init__(self, client: GitHubContentsClient, data_path: str = "data") -> None:
        self.client = client
        self.data_path = data_path.strip("/")

    def path_for(self, name: str) -> str:
        empty_collection(name)
        filename = f"{name}.json"
        return f"{self.data_path}/{filename}" if self.data_path else filename

    def exists(self, name: str) -> bool:
        return self.client.get_content(self.path_for(name)) is not None

    def read(self, name: str) -> tuple[dict, Optional[str]]:
        path = self.path_for(name)
        current = self.client.get_content(path)
        if current is None:
            logger.debug("remote collection %s missing, using empty default", path)
            return empty_collection(name), None
        return with_defaults(name, json.loads(current.text or "{}")), current.sha

    def write(self, name: str, document: dict, version_token: Optional[str] = None) -> None:
        path = self.path_for(name)
        # GitHub wants the sha of the file as it is right now, not as it was read.
        current = self.client.get_content(path)
        sha = current.sha if current else None
        if version_token and version_token != sha:
            logger.warning("collection %s changed since it was read (%s -> %s); overwriting", name, version_token, sha)
        text = json.dumps(document, ensure_ascii=False, indent=2)
        new_sha = self.client.put_content(path, text, sha, f"Update {name}.json")
        logger.debug("remote collection %s written (sha %s)", path, new_sha)
