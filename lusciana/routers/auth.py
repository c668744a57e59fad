from __future__ import annotations

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from lusciana.routers.deps import get_auth_service
from lusciana.services.auth_service import AuthService

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/signup", status_code=201)
def signup(payload: dict = Body(...), service: AuthService = Depends(get_auth_service)):
    user = service.signup(payload.get("email"), payload.get("pseudo"), payload.get("password"))
    return JSONResponse({"message": "Compte créé avec succès", "user": user}, status_code=201)


@router.post("/login")
def login(payload: dict = Body(...), service: AuthService = Depends(get_auth_service)):
    user = service.login(payload.get("email"), payload.get("password"))
    return {"message": "Connexion réussie", "user": user}
