"""Domain result and finalization schemas."""

from pydantic import AliasChoices, BaseModel, Field

from copsoq.core.anomaly import AnomalyReport
from copsoq.models.enums import (
    AssessmentStatus,
    DomainType,
    FinalizeOutcome,
    RiskCategory,
    TrafficLight,
)
from copsoq.schemas.answer import Answer


class DomainResult(BaseModel):
    """Derived result of one domain for one assessment.

    Persisted copies (keyed by assessment and domain) are a cache; this is
    always recomputable from the answers.
    """

    domain_id: int = Field(..., ge=1)
    domain_name: str
    type: DomainType
    score: float = Field(..., ge=0, le=100, description="Domain score (0-100)")
    category: RiskCategory
    color: TrafficLight
    color_hex: str
    label: str
    answered_items: int = Field(0, ge=0)
    anomaly: AnomalyReport | None = None


class ResultsResponse(BaseModel):
    """All domain results of one assessment."""

    results: list[DomainResult] = Field(default_factory=list)
    answered: int = Field(..., ge=0)
    flagged_domains: list[int] = Field(
        default_factory=list,
        description="Domains whose score was flagged for manual review",
    )


class FinalizeRequest(BaseModel):
    """Request schema for checking whether an assessment can be finalized."""

    assessment_id: int | str | None = Field(
        None, validation_alias=AliasChoices("assessment_id", "avaliacao_id")
    )
    status: AssessmentStatus = AssessmentStatus.IN_PROGRESS
    respostas: list[Answer] = Field(default_factory=list, max_length=500)


class FinalizeDecision(BaseModel):
    """Outcome of a finalization attempt."""

    outcome: FinalizeOutcome
    answered: int = Field(..., ge=0)
    required: int = Field(..., ge=0)
    status: AssessmentStatus
    results: list[DomainResult] = Field(default_factory=list)
    message: str | None = None

    @property
    def completed(self) -> bool:
        return self.outcome == FinalizeOutcome.COMPLETED
