"""API routes for cascade visibility."""
from fastapi import APIRouter, Depends

from copsoq.api.deps import get_cascade_resolver
from copsoq.schemas.cascade import CascadeRequest, CascadeVisibility
from copsoq.services.cascade_service import CascadeResolver

router = APIRouter()


@router.post(
    "/evaluate",
    response_model=CascadeVisibility,
    summary="Evaluate visible items",
)
async def evaluate_cascade(
    payload: CascadeRequest,
    resolver: CascadeResolver = Depends(get_cascade_resolver),
) -> CascadeVisibility:
    """Return the items the respondent must currently see given the answers so far."""
    return resolver.evaluate(payload.respostas)
