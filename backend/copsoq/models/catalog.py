"""Immutable catalog entities: domains, items and cascade condition rules."""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

from copsoq.models.enums import CascadeCategory, ConditionOperator, DomainType

ITEM_ID_PATTERN = re.compile(r"^Q(\d+)$")

# Item number ranges of the cascade partition (inclusive)
CORE_ITEM_RANGE = (1, 56)
BEHAVIORAL_ITEM_RANGE = (57, 64)
FINANCIAL_ITEM_RANGE = (65, 70)

# Comparison symbols accepted in rule tables
OPERATOR_SYMBOLS: dict[str, ConditionOperator] = {
    ">": ConditionOperator.GT,
    ">=": ConditionOperator.GTE,
    "<": ConditionOperator.LT,
    "<=": ConditionOperator.LTE,
    "==": ConditionOperator.EQ,
    "!=": ConditionOperator.NE,
}


def item_number(item_id: str) -> int | None:
    """Extract the numeric part of an item id ("Q12" -> 12).

    Returns None when the id does not follow the Q<n> convention.
    """
    match = ITEM_ID_PATTERN.match(item_id or "")
    if not match:
        return None
    return int(match.group(1))


def category_for_number(number: int) -> CascadeCategory | None:
    if CORE_ITEM_RANGE[0] <= number <= CORE_ITEM_RANGE[1]:
        return CascadeCategory.CORE
    if BEHAVIORAL_ITEM_RANGE[0] <= number <= BEHAVIORAL_ITEM_RANGE[1]:
        return CascadeCategory.BEHAVIORAL
    if FINANCIAL_ITEM_RANGE[0] <= number <= FINANCIAL_ITEM_RANGE[1]:
        return CascadeCategory.FINANCIAL
    return None


class Item(BaseModel):
    """Single questionnaire item."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., pattern=r"^Q\d+$")
    text: str
    management_text: str | None = None
    reversed: bool = False

    @property
    def number(self) -> int:
        return item_number(self.id)

    @property
    def category(self) -> CascadeCategory | None:
        return category_for_number(self.number)


class Domain(BaseModel):
    """Questionnaire domain (group) with its ordered items."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=1)
    title: str
    name: str
    description: str = ""
    type: DomainType
    items: tuple[Item, ...]

    @property
    def item_ids(self) -> list[str]:
        return [item.id for item in self.items]


class DomainMeta(BaseModel):
    """Name and type of a domain, as consumed by the results orchestrator."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: DomainType


class ConditionRule(BaseModel):
    """Cascade rule: show target_item when depends_on_item satisfies the comparison.

    The operator is kept as a raw string so rule rows carrying an unknown
    operator can still be loaded; such rows never match.
    """

    model_config = ConfigDict(frozen=True)

    target_item: int = Field(..., ge=1)
    depends_on_item: int = Field(..., ge=1)
    operator: str
    threshold: float
    category: CascadeCategory | None = None

    @field_validator("operator", mode="before")
    @classmethod
    def _normalize_operator(cls, v):
        if isinstance(v, ConditionOperator):
            return v.value
        if isinstance(v, str):
            v = v.strip().lower()
            symbol = OPERATOR_SYMBOLS.get(v)
            return symbol.value if symbol else v
        return v
