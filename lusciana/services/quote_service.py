"""
Quote ("devis") use cases: pricing, submission and per-owner listing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from lusciana.core.errors import MissingFieldsError, UnauthenticatedError
from lusciana.core.guards import Identity
from lusciana.core.logging_setup import get_logger
from lusciana.domain.pricing import REQUIRED_FIELDS, calculate_total_price, missing_fields, normalize_quote_fields
from lusciana.domain.records import new_id, utc_now_iso
from lusciana.repositories.base import DEVIS, CollectionStore

logger = get_logger("services.devis")

STATUS_PENDING = "pending"


@dataclass
class PricedQuote:
    fields: dict
    total: int


@dataclass
class QuoteService:
    store: CollectionStore

    def price(self, payload: Mapping[str, Any] | None) -> PricedQuote:
        fields = normalize_quote_fields(payload)
        missing = missing_fields(fields)
        if missing:
            raise MissingFieldsError(missing)
        return PricedQuote(fields=fields, total=calculate_total_price(fields))

    def submit(self, payload: Mapping[str, Any] | None, owner: Optional[Identity] = None) -> dict:
        priced = self.price(payload)
        quotes, document, version = self.store.records(DEVIS)
        quote = {"id": new_id()}
        quote.update({name: priced.fields.get(name) for name in REQUIRED_FIELDS})
        quote.update(
            {
                "prixTotal": priced.total,
                "createdAt": utc_now_iso(),
                "status": STATUS_PENDING,
            }
        )
        if owner:
            quote["ownerEmail"] = owner.email
            quote["ownerPseudo"] = owner.pseudo
        quotes.append(quote)
        self.store.write(DEVIS, document, version)
        logger.info("devis %s saved (%s, total %s)", quote["id"], quote["type"], priced.total)
        return quote

    def list_for_owner(self, owner_email: str | None) -> list[dict]:
        if not owner_email:
            raise UnauthenticatedError()
        document, _ = self.store.read(DEVIS)
        return [quote for quote in document[DEVIS] if quote.get("ownerEmail") == owner_email]
