"""Cascade visibility resolution.

Decides, from the answers collected so far, which items the respondent must
currently see. Core items are always visible; gated items appear when their
condition rule matches or a hard trigger fires.
"""

import logging
from collections.abc import Iterable, Mapping

from copsoq.core.condition_rules import (
    DEFAULT_TRIGGERS,
    CascadeTriggers,
    evaluate_condition,
    get_condition_rules,
)
from copsoq.core.metrics import CASCADE_EVALUATIONS_TOTAL
from copsoq.core.structured_logging import log_json
from copsoq.models.catalog import ConditionRule
from copsoq.schemas.cascade import CascadeVisibility, CategoryVisibility

logger = logging.getLogger(__name__)


def _item_key(number: int) -> str:
    return f"Q{number}"


class CascadeResolver:
    """Evaluate condition rules and triggers against an answer map."""

    def __init__(
        self,
        rules: Iterable[ConditionRule] | None = None,
        triggers: CascadeTriggers = DEFAULT_TRIGGERS,
    ):
        """Initialize the resolver.

        Args:
            rules: Condition rule table; defaults to the configured table
            triggers: Hard-wired trigger configuration
        """
        self.rules = tuple(get_condition_rules() if rules is None else rules)
        self.triggers = triggers

    def evaluate(self, answers: Mapping[str, object] | None) -> CascadeVisibility:
        """Compute the currently visible items.

        Args:
            answers: Item id -> numeric answer ("Q59": 50); missing or None
                values count as unanswered

        Returns:
            CascadeVisibility with the ascending item list, the per-category
            partition and the evaluation counts
        """
        answers = answers or {}
        visible: set[int] = set(self.triggers.core_items)

        for rule in self.rules:
            value = answers.get(_item_key(rule.depends_on_item))
            if value is None:
                continue
            if evaluate_condition(value, rule.operator, rule.threshold):
                visible.add(rule.target_item)

        harassment = answers.get(_item_key(self.triggers.harassment_item))
        if evaluate_condition(harassment, "gt", 0):
            visible.update(self.triggers.violence_followups)

        visible.update(self.triggers.always_visible_leads)

        ordered = sorted(visible)
        by_category = CategoryVisibility(
            core=[q for q in self.triggers.core_items if q in visible],
            behavioral=[q for q in self.triggers.behavioral_items if q in visible],
            financial=[q for q in self.triggers.financial_items if q in visible],
        )

        CASCADE_EVALUATIONS_TOTAL.inc()
        log_json(
            logger,
            logging.DEBUG,
            "cascade_evaluated",
            answered=len(answers),
            total_visible=len(ordered),
            conditions_evaluated=len(self.rules),
        )

        return CascadeVisibility(
            visible_items=ordered,
            by_category=by_category,
            total_visible=len(ordered),
            total_possible=self.triggers.total_possible,
            conditions_evaluated=len(self.rules),
        )
