"""Anomaly detection for domain scores.

Out-of-range scores are corrected (clamped to 0..100). A score equal to one of
the canonical scale values is only flagged: it suggests every item got the same
answer, which deserves manual review but is not evidence of fraud by itself.
"""

from pydantic import BaseModel

from copsoq.core.domain_catalog import SCALE_VALUES
from copsoq.models.enums import DomainType

MIN_SCORE = 0.0
MAX_SCORE = 100.0

REASON_BELOW_RANGE = "Score abaixo do intervalo válido (0-100)"
REASON_ABOVE_RANGE = "Score acima do intervalo válido (0-100)"
REASON_UNIFORM_PATTERN = "Possível padrão de resposta uniforme"


class AnomalyReport(BaseModel):
    """Outcome of an anomaly check."""

    is_anomalous: bool
    adjusted_score: float
    reason: str | None = None


def detect_anomaly(score: float, domain_type: DomainType | str | None = None) -> AnomalyReport:
    """Check a domain score for range violations and uniform answer patterns.

    Args:
        score: Domain score as produced by the aggregator
        domain_type: Domain type; accepted for symmetry with the classifier,
            the checks are the same for both types

    Returns:
        AnomalyReport; adjusted_score differs from score only when out of range
    """
    if score < MIN_SCORE:
        return AnomalyReport(is_anomalous=True, adjusted_score=MIN_SCORE, reason=REASON_BELOW_RANGE)
    if score > MAX_SCORE:
        return AnomalyReport(is_anomalous=True, adjusted_score=MAX_SCORE, reason=REASON_ABOVE_RANGE)
    if score in SCALE_VALUES:
        return AnomalyReport(is_anomalous=True, adjusted_score=score, reason=REASON_UNIFORM_PATTERN)
    return AnomalyReport(is_anomalous=False, adjusted_score=score)
