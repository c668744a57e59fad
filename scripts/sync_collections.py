"""One-off copy: local JSON collections (DATA_DIR) -> GitHub repository."""
from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

# Make the package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from lusciana.core.config import get_settings
from lusciana.core.logging_setup import configure_logging
from lusciana.repositories import COLLECTIONS, build_store
from lusciana.repositories.json_storage import LocalJsonStore


def main() -> None:
    ap = argparse.ArgumentParser(description="Push local collections to the GitHub store")
    ap.add_argument("--data-dir", help="local directory holding users.json, bugs.json, devis.json")
    ap.add_argument("--only", choices=COLLECTIONS, action="append", help="collection to copy (repeatable)")
    ap.add_argument("--dry-run", action="store_true", help="show what would be written")
    args = ap.parse_args()

    settings = get_settings()
    log = configure_logging(settings.log_level)
    source = LocalJsonStore(args.data_dir or settings.data_dir)
    target = build_store(replace(settings, storage_backend="github"))

    for name in args.only or COLLECTIONS:
        if not source.exists(name):
            log.warning("skipping %s: %s not found", name, source.path_for(name))
            continue
        document, _ = source.read(name)
        count = len(document[name])
        if args.dry_run:
            log.info("[dry-run] would write %s (%d records)", name, count)
            continue
        _, sha = target.read(name)
        target.write(name, document, sha)
        log.info("wrote %s (%d records)", name, count)


if __name__ == "__main__":
    main()
