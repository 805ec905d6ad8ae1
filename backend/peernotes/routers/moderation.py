"""Moderation API router. Exposes the gateway verdict for ad hoc checks."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from peernotes.routers.notes import get_moderation_service
from peernotes.schemas.moderation import ModerationRequest
from peernotes.services.moderation_service import ModerationService

router = APIRouter(prefix="/api", tags=["moderation"])


@router.post("/moderate")
def moderate(req: ModerationRequest, moderation: ModerationService = Depends(get_moderation_service)):
    verdict = moderation.classify(req.title, req.content)
    status_code = 500 if verdict.service_failed else 200
    return JSONResponse(status_code=status_code, content=verdict.to_payload())
