"""Domain score aggregation.

A domain score is the arithmetic mean of the supplied item values, rounded
to two decimals (half up). Some domains carry a correction policy applied
after averaging; see DOMAIN_CORRECTIONS.
"""

import logging
from collections.abc import Callable, Iterable
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from copsoq.core.structured_logging import log_json
from copsoq.models.enums import DomainType

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")


def _clamp_negative(score: Decimal) -> Decimal:
    return score if score >= 0 else Decimal("0")


# Correction policies by name
CORRECTION_POLICIES: dict[str, Callable[[Decimal], Decimal]] = {
    "clamp_negative": _clamp_negative,
}

# Domain id -> correction policy name.
# Domain 2 (Organização e Conteúdo) can arrive negative from upstream transformations.
DOMAIN_CORRECTIONS: dict[int, str] = {
    2: "clamp_negative",
}


def _value_of(answer: Any) -> Decimal | None:
    """Read the numeric value of an answer given as a model, dict or bare number."""
    if isinstance(answer, dict):
        raw = answer.get("value", answer.get("valor"))
    elif isinstance(answer, (int, float, Decimal)) and not isinstance(answer, bool):
        raw = answer
    else:
        raw = getattr(answer, "value", None)

    if raw is None or isinstance(raw, bool):
        return None
    try:
        return Decimal(str(raw))
    except (InvalidOperation, ValueError):
        return None


def round_score(value: Decimal | float) -> float:
    """Round to two decimals using round-half-up."""
    return float(Decimal(str(value)).quantize(TWO_PLACES, rounding=ROUND_HALF_UP))


def score_domain(
    domain_id: int,
    domain_type: DomainType,
    answers: Iterable[Any],
    corrections: dict[int, str] | None = None,
) -> float:
    """Calculate the score of one domain.

    Args:
        domain_id: Domain identifier (selects the correction policy)
        domain_type: Domain type; the mean is not inverted for either type
        answers: Answers to include; the caller selects domain membership
        corrections: Optional override of DOMAIN_CORRECTIONS

    Returns:
        Mean value rounded to 2 decimals, or 0.0 when there is nothing to average
    """
    values = [v for v in (_value_of(a) for a in answers) if v is not None]
    if not values:
        return 0.0

    mean = sum(values, Decimal("0")) / Decimal(len(values))

    policy_name = (DOMAIN_CORRECTIONS if corrections is None else corrections).get(domain_id)
    if policy_name:
        policy = CORRECTION_POLICIES.get(policy_name)
        if policy is None:
            log_json(
                logger,
                logging.WARNING,
                "unknown_correction_policy",
                domain_id=domain_id,
                policy=policy_name,
            )
        else:
            corrected = policy(mean)
            if corrected != mean:
                log_json(
                    logger,
                    logging.INFO,
                    "score_corrected",
                    domain_id=domain_id,
                    domain_type=domain_type,
                    policy=policy_name,
                    raw_score=str(mean),
                    corrected_score=str(corrected),
                )
            mean = corrected

    return round_score(mean)
