"""Cohort statistics for batch reports (laudos).

Summarizes the answers of every completed assessment in a batch per domain.
The label is taken from mean + standard deviation compared with fixed
tertiles of the 0-100 scale; color and risk category follow the label.
"""

import math
from collections.abc import Mapping, Sequence
from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, Field

from copsoq.core.domain_catalog import DomainCatalog
from copsoq.models.catalog import Domain
from copsoq.models.enums import DomainType, RiskCategory, TrafficLight

TERTILE_LOW = 33.3333
TERTILE_HIGH = 66.6666
ONE_PLACE = Decimal("0.1")

LABEL_EXCELLENT = "Excelente"
LABEL_MONITOR = "Monitorar"
LABEL_ATTENTION = "Atenção Necessária"

INSUFFICIENT_DATA_ACTION = "Dados insuficientes para avaliação"

LABEL_CLASSIFICATION: dict[str, tuple[RiskCategory, TrafficLight]] = {
    LABEL_EXCELLENT: (RiskCategory.LOW, TrafficLight.GREEN),
    LABEL_MONITOR: (RiskCategory.MEDIUM, TrafficLight.YELLOW),
    LABEL_ATTENTION: (RiskCategory.HIGH, TrafficLight.RED),
}

RECOMMENDED_ACTIONS: dict[TrafficLight, str] = {
    TrafficLight.GREEN: "Manter; monitorar anualmente",
    TrafficLight.YELLOW: "Atenção; intervenções preventivas (treinamentos)",
    TrafficLight.RED: "Ação imediata; plano de mitigação (PGR/NR-1)",
}


class CohortDomainSummary(BaseModel):
    """Batch-level statistics of one domain."""

    domain_id: int
    domain_name: str
    description: str = ""
    type: DomainType
    responses: int = Field(..., ge=0)
    mean: float
    std_dev: float
    mean_minus_sd: float
    mean_plus_sd: float
    category: RiskCategory
    color: TrafficLight
    label: str
    recommended_action: str


def percentile(values: Sequence[float], p: float) -> float:
    """Percentile with linear interpolation between closest ranks."""
    if not values:
        return 0.0
    ordered = sorted(values)
    index = (p / 100) * (len(ordered) - 1)
    lower = math.floor(index)
    upper = math.ceil(index)
    if upper >= len(ordered):
        return float(ordered[-1])
    weight = index - lower
    return ordered[lower] * (1 - weight) + ordered[upper] * weight


def mean(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


def sample_std(values: Sequence[float], avg: float | None = None) -> float:
    """Sample standard deviation (n - 1); 0 for fewer than two values."""
    if len(values) <= 1:
        return 0.0
    avg = mean(values) if avg is None else avg
    variance = sum((v - avg) ** 2 for v in values) / (len(values) - 1)
    return math.sqrt(variance)


def cohort_tertiles(all_values: Sequence[float]) -> tuple[float, float]:
    """33rd and 66th percentiles of the pooled answer values."""
    return percentile(all_values, 33), percentile(all_values, 66)


def label_for(reference: float, domain_type: DomainType) -> str:
    """Label a domain from its mean + sd reference value."""
    if domain_type == DomainType.POSITIVE:
        if reference > TERTILE_HIGH:
            return LABEL_EXCELLENT
        if reference >= TERTILE_LOW:
            return LABEL_MONITOR
        return LABEL_ATTENTION

    if reference < TERTILE_LOW:
        return LABEL_EXCELLENT
    if reference <= TERTILE_HIGH:
        return LABEL_MONITOR
    return LABEL_ATTENTION


def _one_decimal(value: float) -> float:
    return float(Decimal(str(value)).quantize(ONE_PLACE, rounding=ROUND_HALF_UP))


def summarize_domain(domain: Domain, values: Sequence[float]) -> CohortDomainSummary:
    """Summarize the pooled answer values of one domain."""
    if not values:
        return CohortDomainSummary(
            domain_id=domain.id,
            domain_name=domain.name,
            description=domain.description,
            type=domain.type,
            responses=0,
            mean=0.0,
            std_dev=0.0,
            mean_minus_sd=0.0,
            mean_plus_sd=0.0,
            category=RiskCategory.LOW,
            color=TrafficLight.GREEN,
            label=LABEL_EXCELLENT,
            recommended_action=INSUFFICIENT_DATA_ACTION,
        )

    avg = mean(values)
    std = sample_std(values, avg)
    label = label_for(avg + std, domain.type)
    category, light = LABEL_CLASSIFICATION[label]

    return CohortDomainSummary(
        domain_id=domain.id,
        domain_name=domain.name,
        description=domain.description,
        type=domain.type,
        responses=len(values),
        mean=_one_decimal(avg),
        std_dev=_one_decimal(std),
        mean_minus_sd=_one_decimal(max(0.0, avg - std)),
        mean_plus_sd=_one_decimal(avg + std),
        category=category,
        color=light,
        label=label,
        recommended_action=RECOMMENDED_ACTIONS[light],
    )


def summarize_cohort(
    catalog: DomainCatalog,
    values_by_domain: Mapping[int, Sequence[float]],
) -> list[CohortDomainSummary]:
    """Summaries for every catalog domain, ordered by id."""
    return [
        summarize_domain(domain, list(values_by_domain.get(domain.id) or []))
        for domain in catalog.get_domains()
    ]
