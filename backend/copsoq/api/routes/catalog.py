"""API routes for the questionnaire catalog."""
from fastapi import APIRouter, Depends, Query

from copsoq.api.deps import get_domain_catalog
from copsoq.core.domain_catalog import CATALOG_VERSION, RESPONSE_SCALE, DomainCatalog
from copsoq.models.enums import JobLevel
from copsoq.schemas.catalog import CatalogDomain, CatalogResponse

router = APIRouter()


@router.get(
    "",
    response_model=CatalogResponse,
    summary="Get questionnaire catalog",
)
async def get_questionnaire(
    nivel_cargo: JobLevel = Query(JobLevel.OPERATIONAL),
    catalog: DomainCatalog = Depends(get_domain_catalog),
) -> CatalogResponse:
    """Get all domains and items, worded for the respondent's job level."""
    return CatalogResponse(
        version=CATALOG_VERSION,
        total_items=catalog.total_items(),
        scale=RESPONSE_SCALE,
        domains=[CatalogDomain(**d) for d in catalog.domains_for_level(nivel_cargo)],
    )
