"""Bug-report inbox use cases."""

from __future__ import annotations

from dataclasses import dataclass

from lusciana.core.errors import MissingReporterInfoError
from lusciana.core.logging_setup import get_logger
from lusciana.domain.records import new_id, utc_now_iso
from lusciana.repositories.base import BUGS, CollectionStore

logger = get_logger("services.bugs")

STATUS_NEW = "new"


@dataclass
class BugReportService:
    store: CollectionStore

    def submit(self, category: str | None, description: str | None, email: str | None, pseudo: str | None) -> dict:
        if not email or not pseudo:
            raise MissingReporterInfoError()
        bugs, document, version = self.store.records(BUGS)
        bug = {
            "id": new_id(),
            "category": category,
            "description": description,
            "status": STATUS_NEW,
            "createdAt": utc_now_iso(),
            "reportedBy": {"email": email, "pseudo": pseudo},
        }
        bugs.append(bug)
        self.store.write(BUGS, document, version)
        logger.info("bug %s reported by %s (%s)", bug["id"], pseudo, category)
        return bug

    def list_all(self) -> dict:
        document, _ = self.store.read(BUGS)
        return document
