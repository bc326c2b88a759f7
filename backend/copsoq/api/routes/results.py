"""API routes for domain results."""
from fastapi import APIRouter, Depends

from copsoq.api.deps import get_results_service
from copsoq.schemas.answer import AnswersSubmission
from copsoq.schemas.results import ResultsResponse
from copsoq.services.results_service import ResultsService

router = APIRouter()


@router.post(
    "/compute",
    response_model=ResultsResponse,
    summary="Compute domain results",
)
async def compute_results(
    submission: AnswersSubmission,
    service: ResultsService = Depends(get_results_service),
) -> ResultsResponse:
    """Score, check and classify every domain from raw answers.

    Flagged domains are signals for manual review, never errors. Values off
    the response scale (0, 25, 50, 75, 100) are refused with 422 before any
    scoring happens.
    """
    results = service.compute(submission.respostas)
    return ResultsResponse(
        results=results,
        answered=len(submission.respostas),
        flagged_domains=[r.domain_id for r in results if r.anomaly and r.anomaly.is_anomalous],
    )
