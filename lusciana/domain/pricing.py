"""Quote ("devis") field handling and price computation."""
from __future__ import annotations

from typing import Any, Mapping

BASE_PRICES = {
    "standard": 1000,
    "premium": 2000,
}

OPTION_SURCHARGES = {
    "exclusivite": 500,
    "organiques": 300,
    "terraforming": 400,
    "painting": 200,
    "eau": 600,
    "arbres": 400,
}

# English names accepted from newer clients.
FIELD_ALIASES = {
    "exclusivity": "exclusivite",
    "organics": "organiques",
    "water": "eau",
    "trees": "arbres",
}

REQUIRED_FIELDS = ("type", *OPTION_SURCHARGES)


def normalize_quote_fields(payload: Mapping[str, Any] | None) -> dict:
    """Map aliases onto the canonical keys; canonical keys win when both are sent."""
    data = dict(payload or {})
    for alias, canonical in FIELD_ALIASES.items():
        if alias in data:
            value = data.pop(alias)
            data.setdefault(canonical, value)
    return data


def missing_fields(fields: Mapping[str, Any]) -> list[str]:
    """Required fields that are absent or falsy, in declaration order."""
    return [name for name in REQUIRED_FIELDS if not fields.get(name)]


def calculate_total_price(fields: Mapping[str, Any]) -> int:
    total = BASE_PRICES.get(fields.get("type"), 0)
    for option, surcharge in OPTION_SURCHARGES.items():
        if fields.get(option):
            total += surcharge
    return total
