"""Catalog models and enumerations."""

from copsoq.models.catalog import ConditionRule, Domain, DomainMeta, Item
from copsoq.models.enums import (
    AssessmentStatus,
    CascadeCategory,
    ConditionOperator,
    DomainType,
    FinalizeOutcome,
    JobLevel,
    RecordOutcome,
    RiskCategory,
    TrafficLight,
)

__all__ = [
    "AssessmentStatus",
    "CascadeCategory",
    "ConditionOperator",
    "ConditionRule",
    "Domain",
    "DomainMeta",
    "DomainType",
    "FinalizeOutcome",
    "Item",
    "JobLevel",
    "RecordOutcome",
    "RiskCategory",
    "TrafficLight",
]
