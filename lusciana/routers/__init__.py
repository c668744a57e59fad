"""
FastAPI routers grouped by domain (accounts, bugs, devis, pages).

Each module exposes an APIRouter included by ``lusciana.app.create_app``.
Services are built per request around the store held in ``app.state``.
"""
