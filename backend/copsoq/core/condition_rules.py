"""Cascade condition rules and trigger configuration.

The dependency graph between items is data: each rule shows a target item
when the answer to another item satisfies a comparison. A deployment can
replace the default table with a JSON file (CONDITION_RULES_PATH).
"""

import json
import logging
import operator
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, ConfigDict, TypeAdapter

from copsoq.core.config import get_settings
from copsoq.core.structured_logging import log_json
from copsoq.models.catalog import ConditionRule
from copsoq.models.enums import CascadeCategory, ConditionOperator

logger = logging.getLogger(__name__)

OPERATORS: dict[str, Callable[[float, float], bool]] = {
    ConditionOperator.GT.value: operator.gt,
    ConditionOperator.GTE.value: operator.ge,
    ConditionOperator.LT.value: operator.lt,
    ConditionOperator.LTE.value: operator.le,
    ConditionOperator.EQ.value: operator.eq,
    ConditionOperator.NE.value: operator.ne,
}


class CascadeTriggers(BaseModel):
    """Hard-wired cascade triggers of this deployment's numbering."""

    model_config = ConfigDict(frozen=True)

    core_range: tuple[int, int] = (1, 56)
    total_possible: int = 70
    # Harassment answer > 0 reveals the violence follow-ups
    harassment_item: int = 56
    violence_followups: tuple[int, ...] = (57, 58)
    # Lead items are always visible so respondents can trigger their own cascade
    always_visible_leads: tuple[int, ...] = (59, 65)
    # Reporting partition (behavioral overlaps the harassment item by convention)
    behavioral_items: tuple[int, ...] = (56, 57, 58, 59, 60, 61, 62, 63, 64)
    financial_items: tuple[int, ...] = (65, 66, 67, 68, 69, 70)

    @property
    def core_items(self) -> tuple[int, ...]:
        return tuple(range(self.core_range[0], self.core_range[1] + 1))


def _gated_on(lead: int, targets: range, category: CascadeCategory) -> list[ConditionRule]:
    return [
        ConditionRule(
            target_item=target,
            depends_on_item=lead,
            operator=ConditionOperator.GT,
            threshold=0,
            category=category,
        )
        for target in targets
    ]


# Gambling sub-items (Q60-Q64) follow the gambling lead Q59;
# indebtedness sub-items (Q66-Q70) follow the indebtedness lead Q65.
DEFAULT_CONDITION_RULES: tuple[ConditionRule, ...] = tuple(
    _gated_on(59, range(60, 65), CascadeCategory.BEHAVIORAL)
    + _gated_on(65, range(66, 71), CascadeCategory.FINANCIAL)
)

DEFAULT_TRIGGERS = CascadeTriggers()

_rules_adapter = TypeAdapter(list[ConditionRule])


def evaluate_condition(answer_value, rule_operator: str, threshold: float) -> bool:
    """Apply a rule operator; unknown operators and non-numeric answers never match."""
    compare = OPERATORS.get(rule_operator)
    if compare is None:
        return False
    if isinstance(answer_value, bool):
        return False
    try:
        return bool(compare(float(answer_value), float(threshold)))
    except (TypeError, ValueError):
        return False


def load_condition_rules(path: str | Path) -> tuple[ConditionRule, ...]:
    """Load a rule table from a JSON file.

    The file holds a list of objects with target_item, depends_on_item,
    operator, threshold and optionally category. Rows with an unknown
    operator are kept; they are logged and will simply never match.

    Raises:
        FileNotFoundError: If the file does not exist
        pydantic.ValidationError: If a row is structurally malformed
    """
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    rules = tuple(_rules_adapter.validate_python(raw))

    for rule in rules:
        if rule.operator not in OPERATORS:
            log_json(
                logger,
                logging.WARNING,
                "condition_rule_unknown_operator",
                target_item=rule.target_item,
                depends_on_item=rule.depends_on_item,
                operator=rule.operator,
            )
    log_json(logger, logging.INFO, "condition_rules_loaded", path=str(path), count=len(rules))
    return rules


@lru_cache
def get_condition_rules() -> tuple[ConditionRule, ...]:
    """Get the configured rule table (file override or defaults)."""
    settings = get_settings()
    if settings.condition_rules_path:
        return load_condition_rules(settings.condition_rules_path)
    return DEFAULT_CONDITION_RULES
