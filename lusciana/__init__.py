"""Lusciana website backend: accounts, bug-report inbox and quote calculator."""
from lusciana.app import create_app

__all__ = ["create_app"]
