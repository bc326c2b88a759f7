"""Answer set aggregate for a single assessment."""

import logging
from collections.abc import Iterable

from copsoq.core.assessment_workflow import (
    accepts_answers,
    is_valid_transition,
    path_to_in_progress,
)
from copsoq.core.domain_catalog import DomainCatalog
from copsoq.core.structured_logging import log_json
from copsoq.models.enums import AssessmentStatus, RecordOutcome
from copsoq.schemas.answer import Answer

logger = logging.getLogger(__name__)


class AnswerSet:
    """Answers of one assessment with upsert semantics.

    At most one answer is kept per (domain_id, item_id); recording the same
    pair again overwrites the value. Once the assessment is completed or
    deactivated the set refuses further changes.
    """

    def __init__(
        self,
        assessment_id: int | str | None = None,
        status: AssessmentStatus = AssessmentStatus.NOT_STARTED,
        answers: Iterable[Answer] = (),
    ):
        self.assessment_id = assessment_id
        self.status = AssessmentStatus(status)
        self._answers: dict[tuple[int, str], Answer] = {}
        for answer in answers:
            self._answers[(answer.domain_id, answer.item_id)] = answer
        if self._answers:
            # Loaded answers imply the assessment is already under way
            for step in path_to_in_progress(self.status):
                self.status = step

    def __len__(self) -> int:
        return len(self._answers)

    def __contains__(self, key: tuple[int, str]) -> bool:
        return key in self._answers

    @property
    def is_locked(self) -> bool:
        return not accepts_answers(self.status)

    def record(self, answer: Answer) -> RecordOutcome:
        """Upsert an answer.

        Returns:
            CREATED or UPDATED, or LOCKED when the assessment no longer
            accepts answers (nothing is changed in that case)
        """
        if self.is_locked:
            log_json(
                logger,
                logging.WARNING,
                "answer_rejected_locked",
                assessment_id=self.assessment_id,
                status=self.status,
                item_id=answer.item_id,
            )
            return RecordOutcome.LOCKED

        for step in path_to_in_progress(self.status):
            self._transition(step)

        key = (answer.domain_id, answer.item_id)
        outcome = RecordOutcome.UPDATED if key in self._answers else RecordOutcome.CREATED
        self._answers[key] = answer.model_copy(update={"assessment_id": self.assessment_id})
        return outcome

    def record_many(self, answers: Iterable[Answer]) -> list[RecordOutcome]:
        return [self.record(a) for a in answers]

    def answers(self) -> list[Answer]:
        """Answers in first-recorded order."""
        return list(self._answers.values())

    def as_item_map(self) -> dict[str, int]:
        """Item id -> value map, the input shape of the cascade resolver."""
        return {a.item_id: a.value for a in self._answers.values()}

    def by_domain(self) -> dict[int, list[Answer]]:
        grouped: dict[int, list[Answer]] = {}
        for answer in self._answers.values():
            grouped.setdefault(answer.domain_id, []).append(answer)
        return grouped

    def current_group(self, catalog: DomainCatalog) -> int | None:
        """First domain whose items are not all answered; None when all are."""
        for domain in catalog.get_domains():
            if any((domain.id, item_id) not in self._answers for item_id in domain.item_ids):
                return domain.id
        return None

    def mark_completed(self) -> None:
        self._transition(AssessmentStatus.COMPLETED)

    def deactivate(self) -> None:
        """Administrative deactivation; allowed from any non-terminal status."""
        self._transition(AssessmentStatus.DEACTIVATED)

    def _transition(self, to_status: AssessmentStatus) -> None:
        if not is_valid_transition(self.status, to_status):
            raise ValueError(
                f"Invalid status transition: {self.status.value} -> {to_status.value}"
            )
        log_json(
            logger,
            logging.INFO,
            "assessment_status_changed",
            assessment_id=self.assessment_id,
            from_status=self.status,
            to_status=to_status,
        )
        self.status = to_status
