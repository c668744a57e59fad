from __future__ import annotations

from lusciana.domain.pricing import calculate_total_price, missing_fields, normalize_quote_fields
from lusciana.domain.records import new_id, public_user


ALL_OPTIONS = {
    "exclusivite": True,
    "organiques": True,
    "terraforming": True,
    "painting": True,
    "eau": True,
    "arbres": True,
}


def test_standard_without_options_costs_base_price():
    assert calculate_total_price({"type": "standard"}) == 1000


def test_premium_with_every_option():
    assert calculate_total_price({"type": "premium", **ALL_OPTIONS}) == 4400


def test_unknown_type_without_options_is_free():
    assert calculate_total_price({"type": "deluxe"}) == 0
    assert calculate_total_price({}) == 0


def test_falsy_options_add_nothing():
    fields = {"type": "standard", "exclusivite": False, "eau": 0, "arbres": "", "painting": True}
    assert calculate_total_price(fields) == 1200


def test_english_aliases_are_normalized():
    fields = normalize_quote_fields({"type": "standard", "water": True, "trees": True, "organics": 1, "exclusivity": "oui"})
    assert fields == {"type": "standard", "eau": True, "arbres": True, "organiques": 1, "exclusivite": "oui"}
    assert calculate_total_price(fields) == 1000 + 600 + 400 + 300 + 500


def test_canonical_key_wins_over_alias():
    fields = normalize_quote_fields({"eau": False, "water": True})
    assert fields == {"eau": False}


def test_missing_fields_lists_absent_and_falsy_in_order():
    assert missing_fields({"type": "standard", "eau": True, "painting": False}) == [
        "exclusivite",
        "organiques",
        "terraforming",
        "painting",
        "arbres",
    ]
    assert missing_fields({"type": "premium", **ALL_OPTIONS}) == []


def test_new_id_is_unique_and_increasing():
    ids = [int(new_id()) for _ in range(500)]
    assert len(set(ids)) == 500
    assert ids == sorted(ids)


def test_public_user_drops_password():
    user = {"id": "1", "email": "a@x.com", "pseudo": "alice", "password": "secret"}
    assert public_user(user) == {"id": "1", "email": "a@x.com", "pseudo": "alice"}
