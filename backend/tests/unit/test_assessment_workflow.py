"""Unit tests for the assessment status workflow."""
import pytest

from copsoq.core.assessment_workflow import (
    accepts_answers,
    get_allowed_transitions,
    is_valid_transition,
    path_to_in_progress,
)
from copsoq.models.enums import AssessmentStatus


@pytest.mark.parametrize(
    "from_status,to_status",
    [
        (AssessmentStatus.NOT_STARTED, AssessmentStatus.STARTED),
        (AssessmentStatus.STARTED, AssessmentStatus.IN_PROGRESS),
        (AssessmentStatus.IN_PROGRESS, AssessmentStatus.COMPLETED),
        (AssessmentStatus.NOT_STARTED, AssessmentStatus.DEACTIVATED),
        (AssessmentStatus.IN_PROGRESS, AssessmentStatus.DEACTIVATED),
    ],
)
def test_valid_transitions(from_status, to_status):
    assert is_valid_transition(from_status, to_status) is True


@pytest.mark.parametrize(
    "from_status,to_status",
    [
        (AssessmentStatus.NOT_STARTED, AssessmentStatus.COMPLETED),
        (AssessmentStatus.STARTED, AssessmentStatus.COMPLETED),
        (AssessmentStatus.COMPLETED, AssessmentStatus.IN_PROGRESS),
        (AssessmentStatus.COMPLETED, AssessmentStatus.DEACTIVATED),
        (AssessmentStatus.DEACTIVATED, AssessmentStatus.STARTED),
    ],
)
def test_invalid_transitions(from_status, to_status):
    assert is_valid_transition(from_status, to_status) is False


def test_terminal_statuses_have_no_transitions():
    assert get_allowed_transitions(AssessmentStatus.COMPLETED) == []
    assert get_allowed_transitions(AssessmentStatus.DEACTIVATED) == []


def test_locked_statuses_refuse_answers():
    assert accepts_answers(AssessmentStatus.COMPLETED) is False
    assert accepts_answers(AssessmentStatus.DEACTIVATED) is False
    assert accepts_answers(AssessmentStatus.STARTED) is True
    assert accepts_answers("em_andamento") is True


def test_path_to_in_progress():
    assert path_to_in_progress(AssessmentStatus.NOT_STARTED) == [
        AssessmentStatus.STARTED,
        AssessmentStatus.IN_PROGRESS,
    ]
    assert path_to_in_progress(AssessmentStatus.STARTED) == [AssessmentStatus.IN_PROGRESS]
    assert path_to_in_progress(AssessmentStatus.IN_PROGRESS) == []
