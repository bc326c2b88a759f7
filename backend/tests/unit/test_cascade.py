"""Unit tests for cascade visibility resolution."""
import pytest

from copsoq.core.condition_rules import DEFAULT_CONDITION_RULES
from copsoq.models.catalog import ConditionRule
from copsoq.services.cascade_service import CascadeResolver

CORE = list(range(1, 57))


@pytest.fixture()
def resolver() -> CascadeResolver:
    return CascadeResolver(rules=DEFAULT_CONDITION_RULES)


def test_empty_answers_show_core_and_leads(resolver):
    visibility = resolver.evaluate({})

    assert visibility.visible_items == CORE + [59, 65]
    assert visibility.total_visible == 58
    assert visibility.total_possible == 70
    assert visibility.conditions_evaluated == len(DEFAULT_CONDITION_RULES)


def test_none_answers_treated_as_empty(resolver):
    assert resolver.evaluate(None).visible_items == CORE + [59, 65]


def test_harassment_reveals_violence_followups(resolver):
    visibility = resolver.evaluate({"Q56": 25})

    assert visibility.is_visible(57)
    assert visibility.is_visible("Q58")
    assert visibility.by_category.behavioral == [56, 57, 58, 59]


def test_harassment_zero_keeps_followups_hidden(resolver):
    visibility = resolver.evaluate({"Q56": 0})

    assert not visibility.is_visible(57)
    assert not visibility.is_visible(58)


def test_gambling_lead_reveals_sub_items(resolver):
    visibility = resolver.evaluate({"Q59": 50})

    assert visibility.by_category.behavioral == [56, 59, 60, 61, 62, 63, 64]
    assert visibility.by_category.financial == [65]


def test_indebtedness_lead_reveals_sub_items(resolver):
    visibility = resolver.evaluate({"Q65": 100, "Q59": 0})

    assert visibility.by_category.financial == [65, 66, 67, 68, 69, 70]
    assert not visibility.is_visible(60)


def test_all_triggers_show_every_item(resolver):
    visibility = resolver.evaluate({"Q56": 75, "Q59": 25, "Q65": 25})

    assert visibility.visible_items == list(range(1, 71))
    assert visibility.total_visible == visibility.total_possible


def test_output_is_ascending_without_duplicates(resolver):
    visibility = resolver.evaluate({"Q56": 25, "Q59": 25, "Q65": 25})
    assert visibility.visible_items == sorted(set(visibility.visible_items))


def test_core_partition_always_complete(resolver):
    assert resolver.evaluate({"Q65": 50}).by_category.core == CORE


def test_non_numeric_answer_does_not_reveal(resolver):
    visibility = resolver.evaluate({"Q59": "sim", "Q56": None})

    assert not visibility.is_visible(60)
    assert not visibility.is_visible(57)


def test_unknown_operator_rule_never_matches():
    rules = [ConditionRule(target_item=60, depends_on_item=59, operator="between", threshold=0)]
    visibility = CascadeResolver(rules=rules).evaluate({"Q59": 100})

    assert not visibility.is_visible(60)
    assert visibility.conditions_evaluated == 1


def test_custom_rule_table():
    rules = [ConditionRule(target_item=62, depends_on_item=59, operator="gte", threshold=75)]
    resolver = CascadeResolver(rules=rules)

    assert not resolver.evaluate({"Q59": 50}).is_visible(62)
    assert resolver.evaluate({"Q59": 75}).is_visible(62)
    # Only the configured target follows the lead
    assert not resolver.evaluate({"Q59": 75}).is_visible(60)


def test_symbol_operator_rule_reveals_target():
    rules = [ConditionRule(target_item=60, depends_on_item=59, operator=">", threshold=0)]
    visibility = CascadeResolver(rules=rules).evaluate({"Q59": 50})

    assert visibility.is_visible(60)
    assert visibility.by_category.behavioral == [56, 59, 60]
