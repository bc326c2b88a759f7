"""API routes for assessment finalization."""
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from copsoq.api.deps import get_results_service
from copsoq.models.enums import FinalizeOutcome
from copsoq.schemas.errors import ErrorResponse
from copsoq.schemas.results import FinalizeDecision, FinalizeRequest
from copsoq.services.answer_service import AnswerSet
from copsoq.services.results_service import ResultsService

router = APIRouter()


@router.post(
    "/finalize-check",
    response_model=FinalizeDecision,
    responses={
        400: {"model": ErrorResponse, "description": "Assessment incomplete"},
        409: {"model": ErrorResponse, "description": "Assessment already locked"},
    },
    summary="Check and compute finalization",
)
async def finalize_check(
    payload: FinalizeRequest,
    service: ResultsService = Depends(get_results_service),
):
    """Decide whether an assessment can be completed and compute its results.

    Nothing is persisted; the caller stores the results and the new status
    atomically with its own completeness check.
    """
    answer_set = AnswerSet(
        assessment_id=payload.assessment_id,
        status=payload.status,
        answers=payload.respostas,
    )
    decision = service.finalize(answer_set)

    if decision.outcome == FinalizeOutcome.INCOMPLETE:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(
                error="assessment_incomplete",
                message=decision.message,
                details={"answered": decision.answered, "required": decision.required},
            ).model_dump(),
        )
    if decision.outcome == FinalizeOutcome.LOCKED:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content=ErrorResponse(
                error="assessment_locked",
                message=decision.message,
                details={"status": decision.status.value},
            ).model_dump(),
        )
    return decision
