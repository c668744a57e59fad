from __future__ import annotations

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from lusciana.core.guards import require_admin
from lusciana.routers.deps import get_bug_service
from lusciana.services.bug_service import BugReportService

router = APIRouter(prefix="/api", tags=["bugs"])


@router.post("/bug-report", status_code=201)
def submit_bug_report(payload: dict = Body(...), service: BugReportService = Depends(get_bug_service)):
    bug = service.submit(
        payload.get("category"),
        payload.get("description"),
        payload.get("email"),
        payload.get("pseudo"),
    )
    return JSONResponse({"message": "Signalement envoyé avec succès", "bug": bug}, status_code=201)


# require_admin runs before the store is touched.
@router.get("/bugs", dependencies=[Depends(require_admin)])
def list_bug_reports(service: BugReportService = Depends(get_bug_service)):
    return service.list_all()
