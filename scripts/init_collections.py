"""Create the empty users/bugs/devis collections in the configured store."""
from __future__ import annotations

import argparse
from dataclasses import replace
import sys
from pathlib import Path

# Make the package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from lusciana.core.config import get_settings
from lusciana.core.logging_setup import configure_logging
from lusciana.repositories import COLLECTIONS, build_store


def main() -> None:
    ap = argparse.ArgumentParser(description="Initialise empty collections (users, bugs, devis)")
    ap.add_argument("--backend", choices=["local", "github"], help="override STORAGE_BACKEND")
    args = ap.parse_args()

    settings = get_settings()
    if args.backend:
        settings = replace(settings, storage_backend=args.backend)
    log = configure_logging(settings.log_level)
    store = build_store(settings)
    for name in COLLECTIONS:
        if store.ensure(name):
            log.info("created %s (%s)", name, store.backend)
        else:
            log.info("%s already present (%s)", name, store.backend)


if __name__ == "__main__":
    main()
