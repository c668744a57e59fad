"""
Account use cases: signup and login against the users collection.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import requests

from lusciana.core.errors import (
    DuplicateEmailError,
    DuplicatePseudoError,
    InvalidCredentialsError,
    MissingFieldsError,
    UpstreamError,
    ValidationError,
)
from lusciana.core.logging_setup import get_logger
from lusciana.core.security import hash_password, is_hashed, verify_password
from lusciana.domain.records import new_id, public_user
from lusciana.repositories.base import USERS, CollectionStore

logger = get_logger("services.auth")


@dataclass
class AuthService:
    """Handles signup and login. Signup is a read-modify-write of ``users``; login only reads it
    except for the one-time rehash of a legacy plaintext password."""

    store: CollectionStore

    def _find(self, users: list[dict], field: str, value: str) -> Optional[dict]:
        for user in users:
            if user.get(field) == value:
                return user
        return None

    # -------------------------------------- inscription --------------------------------------
    def signup(self, email: str, pseudo: str, password: str) -> dict:
        fields = (("email", email), ("pseudo", pseudo), ("password", password))
        missing = [name for name, value in fields if not value]
        if missing:
            raise MissingFieldsError(missing)
        not_text = [name for name, value in fields if not isinstance(value, str)]
        if not_text:
            raise ValidationError(details=f"Les champs suivants doivent être du texte: {', '.join(not_text)}")
        users, document, version = self.store.records(USERS)
        if self._find(users, "email", email):
            raise DuplicateEmailError()
        if self._find(users, "pseudo", pseudo):
            raise DuplicatePseudoError()
        user = {
            "id": new_id(),
            "email": email,
            "pseudo": pseudo,
            "password": hash_password(password),
        }
        users.append(user)
        self.store.write(USERS, document, version)
        logger.info("user %s signed up as %s", user["id"], pseudo)
        return public_user(user)

    # -------------------------------------- connexion --------------------------------------
    def login(self, email: str, password: str) -> dict:
        if not email or not isinstance(password, str) or not password:
            raise InvalidCredentialsError()
        users, document, version = self.store.records(USERS)
        user = self._find(users, "email", email)
        if not user or not verify_password(password, user.get("password")):
            raise InvalidCredentialsError()
        if not is_hashed(user.get("password")):
            self._upgrade_legacy_password(user, password, document, version)
        return public_user(user)

    def _upgrade_legacy_password(self, user: dict, password: str, document: dict, version: Optional[str]) -> None:
        """Best-effort rehash of a plaintext record; the login succeeds either way."""
        user["password"] = hash_password(password)
        try:
            self.store.write(USERS, document, version)
        except (UpstreamError, requests.RequestException, OSError) as exc:
            logger.warning("could not rehash legacy password for user %s: %s", user.get("id"), exc)
            return
        logger.info("rehashed legacy password for user %s", user.get("id"))
