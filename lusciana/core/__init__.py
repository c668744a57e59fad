"""
Core utilities shared across the Lusciana backend.

This package hosts:
- configuration helpers (env vars, storage selection, secrets)
- cross-cutting pieces such as logging setup, the error taxonomy,
  password hashing and the request guards.

Routers and services depend on these primitives instead of reading
os.environ or building HTTP errors by hand.
"""
