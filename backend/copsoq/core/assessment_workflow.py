"""Assessment status workflow state machine."""

from copsoq.models.enums import AssessmentStatus

# Valid status transitions for the assessment lifecycle
# Key: current status, Value: list of allowed next statuses
VALID_TRANSITIONS: dict[AssessmentStatus, list[AssessmentStatus]] = {
    AssessmentStatus.NOT_STARTED: [AssessmentStatus.STARTED, AssessmentStatus.DEACTIVATED],
    AssessmentStatus.STARTED: [AssessmentStatus.IN_PROGRESS, AssessmentStatus.DEACTIVATED],
    AssessmentStatus.IN_PROGRESS: [AssessmentStatus.COMPLETED, AssessmentStatus.DEACTIVATED],
    AssessmentStatus.COMPLETED: [],  # Terminal state
    AssessmentStatus.DEACTIVATED: [],  # Terminal state (administrative)
}

# Statuses in which answers may no longer be recorded
LOCKED_STATUSES = frozenset({AssessmentStatus.COMPLETED, AssessmentStatus.DEACTIVATED})


def is_valid_transition(from_status: AssessmentStatus, to_status: AssessmentStatus) -> bool:
    """Check if a status transition is valid.

    Examples:
        >>> is_valid_transition(AssessmentStatus.IN_PROGRESS, AssessmentStatus.COMPLETED)
        True
        >>> is_valid_transition(AssessmentStatus.STARTED, AssessmentStatus.COMPLETED)
        False
        >>> is_valid_transition(AssessmentStatus.COMPLETED, AssessmentStatus.IN_PROGRESS)
        False
    """
    return to_status in VALID_TRANSITIONS.get(from_status, [])


def get_allowed_transitions(from_status: AssessmentStatus) -> list[AssessmentStatus]:
    """Get list of allowed transitions from a given status.

    Examples:
        >>> get_allowed_transitions(AssessmentStatus.COMPLETED)
        []
    """
    return VALID_TRANSITIONS.get(from_status, [])


def accepts_answers(status: AssessmentStatus) -> bool:
    """Completed and deactivated assessments refuse further answer mutation."""
    return AssessmentStatus(status) not in LOCKED_STATUSES


def path_to_in_progress(status: AssessmentStatus) -> list[AssessmentStatus]:
    """Statuses to walk through so an answer can be recorded.

    Recording the first answer moves a fresh assessment along
    NOT_STARTED -> STARTED -> IN_PROGRESS.
    """
    steps = {
        AssessmentStatus.NOT_STARTED: [AssessmentStatus.STARTED, AssessmentStatus.IN_PROGRESS],
        AssessmentStatus.STARTED: [AssessmentStatus.IN_PROGRESS],
    }
    return steps.get(AssessmentStatus(status), [])
