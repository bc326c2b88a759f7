"""Enumerations for domain types, risk categories and assessment lifecycle."""

from enum import Enum


class DomainType(str, Enum):
    """Direction of a questionnaire domain.

    POSITIVE domains are favorable when the score is high (e.g. social support).
    NEGATIVE domains are unfavorable when the score is high (e.g. work demands).
    """

    POSITIVE = "positiva"
    NEGATIVE = "negativa"


class RiskCategory(str, Enum):
    """Three numeric buckets of a domain score plus the unanswered marker."""

    LOW = "baixo"
    MEDIUM = "medio"
    HIGH = "alto"
    NOT_ANSWERED = "nao_respondido"


class TrafficLight(str, Enum):
    """Traffic-light color shown next to a domain result."""

    GREEN = "verde"
    YELLOW = "amarelo"
    RED = "vermelho"

    @property
    def hex(self) -> str:
        """Hex color used by the dashboards and reports."""
        return {
            TrafficLight.GREEN: "#10B981",
            TrafficLight.YELLOW: "#F59E0B",
            TrafficLight.RED: "#EF4444",
        }[self]


class AssessmentStatus(str, Enum):
    """Assessment lifecycle.

    Flow: NOT_STARTED -> STARTED -> IN_PROGRESS -> COMPLETED.
    DEACTIVATED is a terminal state set by an administrator.
    """

    NOT_STARTED = "nao_iniciada"
    STARTED = "iniciada"
    IN_PROGRESS = "em_andamento"
    COMPLETED = "concluida"
    DEACTIVATED = "inativada"


class ConditionOperator(str, Enum):
    """Comparison operators allowed in cascade condition rules."""

    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    EQ = "eq"
    NE = "ne"


class JobLevel(str, Enum):
    """Respondent job level; selects the item wording."""

    OPERATIONAL = "operacional"
    MANAGEMENT = "gestao"


class CascadeCategory(str, Enum):
    """Reporting partition of the item range."""

    CORE = "core"
    BEHAVIORAL = "behavioral"
    FINANCIAL = "financial"


class FinalizeOutcome(str, Enum):
    """Result kinds of a finalization attempt."""

    COMPLETED = "completed"
    INCOMPLETE = "incomplete"
    LOCKED = "locked"


class RecordOutcome(str, Enum):
    """Result kinds of recording an answer."""

    CREATED = "created"
    UPDATED = "updated"
    LOCKED = "locked"
