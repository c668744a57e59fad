"""Logging setup for the app, the stores and the maintenance scripts."""

from __future__ import annotations

import logging

LOGGER_NAME = "lusciana"
_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_MASKED_KEYS = {"password", "pwd", "token"}


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stream handler to the package logger (idempotent)."""
    log = logging.getLogger(LOGGER_NAME)
    if not log.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        log.addHandler(handler)
    log.setLevel(getattr(logging, (level or "INFO").upper(), logging.INFO))
    log.propagate = False
    return log


def get_logger(name: str) -> logging.Logger:
    if name.startswith(LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def mask_secrets(payload):
    """Return a copy of a JSON-like body with password-ish values hidden."""
    if isinstance(payload, dict):
        return {
            key: ("***" if str(key).lower() in _MASKED_KEYS else mask_secrets(value))
            for key, value in payload.items()
        }
    if isinstance(payload, list):
        return [mask_secrets(item) for item in payload]
    return payload
