"""Pure domain helpers (pricing, ids, record projections) with no storage access."""
