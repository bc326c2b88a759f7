"""Results orchestration: domain results and finalization."""

import logging
from collections.abc import Iterable, Mapping, Sequence
from contextlib import nullcontext

from copsoq.core.anomaly import detect_anomaly
from copsoq.core.domain_catalog import DomainCatalog, get_catalog
from copsoq.core.metrics import observe_anomaly, observe_finalize
from copsoq.core.request_context import assessment_context
from copsoq.core.risk import classify
from copsoq.core.scoring import score_domain
from copsoq.core.structured_logging import log_json
from copsoq.models.catalog import DomainMeta
from copsoq.models.enums import FinalizeOutcome, RiskCategory
from copsoq.schemas.answer import Answer
from copsoq.schemas.results import DomainResult, FinalizeDecision
from copsoq.services.answer_service import AnswerSet

logger = logging.getLogger(__name__)

INCOMPLETE_MESSAGE = (
    "A avaliação não está completa. Responda todas as perguntas antes de finalizar."
)
LOCKED_MESSAGE = "A avaliação já foi concluída ou inativada e não aceita alterações."


def group_answers(answers: Iterable[Answer]) -> dict[int, list[Answer]]:
    """Group answers by domain id, keeping their order."""
    grouped: dict[int, list[Answer]] = {}
    for answer in answers:
        grouped.setdefault(answer.domain_id, []).append(answer)
    return grouped


def compute_all_results(
    answers_by_domain: Mapping[int, Sequence],
    domain_meta: Mapping[int, DomainMeta],
) -> list[DomainResult]:
    """Compute the result of every domain present in domain_meta.

    Domains without answers get score 0 and the NOT_ANSWERED category. Answer
    groups whose domain id has no metadata are skipped; they are stale or
    unknown ids in the raw data, not an error.

    Args:
        answers_by_domain: Domain id -> answers (Answer models, dicts or numbers)
        domain_meta: Domain id -> name and type

    Returns:
        DomainResult list ordered by domain id
    """
    unknown = sorted(set(answers_by_domain) - set(domain_meta))
    if unknown:
        log_json(logger, logging.DEBUG, "unknown_domains_skipped", domain_ids=unknown)

    results = []
    for domain_id in sorted(domain_meta):
        meta = domain_meta[domain_id]
        answers = list(answers_by_domain.get(domain_id) or [])

        raw_score = score_domain(domain_id, meta.type, answers)
        anomaly = detect_anomaly(raw_score, meta.type)
        score = anomaly.adjusted_score

        # Negative raw means stay a maximal risk signal even though the score is clamped
        classification = classify(raw_score, meta.type)
        category = classification.category if answers else RiskCategory.NOT_ANSWERED

        if answers and anomaly.is_anomalous:
            observe_anomaly(anomaly.reason)
            log_json(
                logger,
                logging.INFO,
                "score_anomaly_flagged",
                domain_id=domain_id,
                score=raw_score,
                adjusted_score=score,
                reason=anomaly.reason,
            )

        results.append(
            DomainResult(
                domain_id=domain_id,
                domain_name=meta.name,
                type=meta.type,
                score=score,
                category=category,
                color=classification.color,
                color_hex=classification.color_hex,
                label=classification.label,
                answered_items=len(answers),
                anomaly=anomaly if answers else None,
            )
        )
    return results


def can_finalize(answer_count: int, required_count: int) -> bool:
    """An assessment may be completed once every catalog item is answered.

    The required count is the full questionnaire length, not the number of
    items currently visible through the cascade.
    """
    return answer_count >= required_count


class ResultsService:
    """Service composing the catalog, aggregator, detector and classifier."""

    def __init__(self, catalog: DomainCatalog | None = None, required_count: int | None = None):
        """Initialize results service.

        Args:
            catalog: Domain catalog; defaults to the process-wide catalog
            required_count: Answers needed to finalize; defaults to the
                catalog's total item count

        Raises:
            ValueError: If the required count is below one
        """
        self.catalog = catalog if catalog is not None else get_catalog()
        self.required_count = (
            required_count if required_count is not None else self.catalog.total_items()
        )
        if self.required_count < 1:
            raise ValueError("required_count must be at least 1")

    def compute(self, answers: Iterable[Answer]) -> list[DomainResult]:
        """Compute domain results from raw answers."""
        return compute_all_results(group_answers(answers), self.catalog.domain_meta())

    def finalize(self, answer_set: AnswerSet) -> FinalizeDecision:
        """Attempt to complete an assessment.

        Business rejections are returned as outcomes, never raised. The
        answer set is only changed when the outcome is COMPLETED.
        """
        if answer_set is None:
            raise ValueError("answer_set is required")

        answered = len(answer_set)
        # Keep a caller-provided correlation id when the set carries none
        tagged = (
            assessment_context(answer_set.assessment_id)
            if answer_set.assessment_id is not None
            else nullcontext()
        )
        with tagged:
            if answer_set.is_locked:
                decision = FinalizeDecision(
                    outcome=FinalizeOutcome.LOCKED,
                    answered=answered,
                    required=self.required_count,
                    status=answer_set.status,
                    message=LOCKED_MESSAGE,
                )
            elif not can_finalize(answered, self.required_count):
                decision = FinalizeDecision(
                    outcome=FinalizeOutcome.INCOMPLETE,
                    answered=answered,
                    required=self.required_count,
                    status=answer_set.status,
                    message=INCOMPLETE_MESSAGE,
                )
            else:
                results = compute_all_results(answer_set.by_domain(), self.catalog.domain_meta())
                answer_set.mark_completed()
                decision = FinalizeDecision(
                    outcome=FinalizeOutcome.COMPLETED,
                    answered=answered,
                    required=self.required_count,
                    status=answer_set.status,
                    results=results,
                )

            observe_finalize(decision.outcome.value)
            log_json(
                logger,
                logging.INFO if decision.completed else logging.WARNING,
                "finalize_decision",
                outcome=decision.outcome,
                answered=answered,
                required=self.required_count,
            )
        return decision
