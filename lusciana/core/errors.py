"""Error taxonomy shared by services, stores and the HTTP boundary."""

from __future__ import annotations

from typing import Any


class ServiceError(Exception):
    """Base class for failures that map to a JSON error response."""

    status_code = 500
    default_message = "Erreur serveur"

    def __init__(self, message: str | None = None, details: Any = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_payload(self) -> dict:
        payload: dict[str, Any] = {"error": self.message}
        if self.details is not None:
            payload["details"] = self.details
        return payload


# -------------------------------------- 400 --------------------------------------
class ValidationError(ServiceError):
    status_code = 400
    default_message = "Données invalides"


class DuplicateEmailError(ValidationError):
    default_message = "Cet email est déjà utilisé"


class DuplicatePseudoError(ValidationError):
    default_message = "Ce pseudo est déjà utilisé"


class MissingReporterInfoError(ValidationError):
    default_message = "Informations utilisateur manquantes"


class MissingFieldsError(ValidationError):
    default_message = "Données manquantes"

    def __init__(self, fields: list[str]):
        self.fields = list(fields)
        super().__init__(details=f"Les champs suivants sont requis: {', '.join(self.fields)}")


# -------------------------------------- 401 --------------------------------------
class AuthError(ServiceError):
    status_code = 401
    default_message = "Non authentifié"


class InvalidCredentialsError(AuthError):
    default_message = "Email ou mot de passe incorrect"


class UnauthenticatedError(AuthError):
    default_message = "Non authentifié"


class AdminRequiredError(AuthError):
    default_message = "Non autorisé"

    def __init__(self, message: str | None = None, details: Any = "Accès admin requis"):
        super().__init__(message, details)


# -------------------------------------- 500 --------------------------------------
class UpstreamError(ServiceError):
    """The remote collection store failed in a way the request cannot recover from."""

    status_code = 500
    default_message = "Erreur du stockage distant"


class RemoteAuthError(UpstreamError):
    default_message = "Authentification refusée par le stockage distant"


class VersionConflictError(UpstreamError):
    default_message = "Version distante obsolète, écriture rejetée"


class CorruptCollectionError(ServiceError):
    """A stored collection does not have the ``{name: [...]}`` shape."""

    default_message = "Collection illisible"
