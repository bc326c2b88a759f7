"""Cohort report schemas."""

from pydantic import BaseModel, Field

from copsoq.schemas.answer import Answer
from copsoq.services.cohort_service import CohortDomainSummary


class CohortRequest(BaseModel):
    """Pooled answers of every completed assessment in a batch."""

    respostas: list[Answer] = Field(default_factory=list, max_length=100_000)


class CohortResponse(BaseModel):
    """Per-domain cohort summaries plus pooled tertiles."""

    domains: list[CohortDomainSummary]
    tertile_33: float
    tertile_66: float
    total_responses: int = Field(..., ge=0)
