"""API routes for batch (cohort) statistics."""
from fastapi import APIRouter, Depends

from copsoq.api.deps import get_domain_catalog
from copsoq.core.domain_catalog import DomainCatalog
from copsoq.schemas.cohort import CohortRequest, CohortResponse
from copsoq.services.cohort_service import cohort_tertiles, summarize_cohort
from copsoq.services.results_service import group_answers

router = APIRouter()


@router.post(
    "/summary",
    response_model=CohortResponse,
    summary="Summarize a batch of assessments",
)
async def cohort_summary(
    payload: CohortRequest,
    catalog: DomainCatalog = Depends(get_domain_catalog),
) -> CohortResponse:
    """Per-domain mean, deviation and traffic light across a batch."""
    grouped = group_answers(payload.respostas)
    values_by_domain = {
        domain_id: [a.value for a in answers] for domain_id, answers in grouped.items()
    }
    tertile_33, tertile_66 = cohort_tertiles([a.value for a in payload.respostas])
    return CohortResponse(
        domains=summarize_cohort(catalog, values_by_domain),
        tertile_33=tertile_33,
        tertile_66=tertile_66,
        total_responses=len(payload.respostas),
    )
