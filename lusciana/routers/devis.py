from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from lusciana.core.guards import Identity, optional_identity, require_bearer, require_identity
from lusciana.routers.deps import get_quote_service
from lusciana.services.quote_service import QuoteService

router = APIRouter(prefix="/api/devis", tags=["devis"])


@router.post("/estimate")
def estimate_devis(payload: dict = Body(...), service: QuoteService = Depends(get_quote_service)):
    priced = service.price(payload)
    return {"message": "Devis calculé avec succès", "prixTotal": priced.total}


@router.post("", status_code=201, dependencies=[Depends(require_bearer)])
def submit_devis(
    payload: dict = Body(...),
    owner: Optional[Identity] = Depends(optional_identity),
    service: QuoteService = Depends(get_quote_service),
):
    quote = service.submit(payload, owner)
    return JSONResponse(
        {"message": "Devis enregistré avec succès", "prixTotal": quote["prixTotal"], "devis": quote},
        status_code=201,
    )


@router.get("")
def list_my_devis(owner: Identity = Depends(require_identity), service: QuoteService = Depends(get_quote_service)):
    return service.list_for_owner(owner.email)
