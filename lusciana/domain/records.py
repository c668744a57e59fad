"""Id and timestamp helpers for stored records."""
from __future__ import annotations

import threading
import time
from datetime import datetime, timezone

_lock = threading.Lock()
_last_id = 0


def new_id() -> str:
    """Millisecond timestamp id, bumped so two calls in the same ms never collide."""
    global _last_id
    with _lock:
        candidate = int(time.time() * 1000)
        if candidate <= _last_id:
            candidate = _last_id + 1
        _last_id = candidate
        return str(candidate)


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def public_user(user: dict) -> dict:
    """Projection of a stored user that is safe to send to the client."""
    return {"id": user.get("id"), "email": user.get("email"), "pseudo": user.get("pseudo")}
