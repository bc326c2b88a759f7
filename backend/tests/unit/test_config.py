"""Unit tests for settings validation."""
import pytest
from pydantic import ValidationError

from copsoq.core.config import Settings


def test_csv_lists_are_parsed():
    settings = Settings(cors_allow_origins="https://a.example, https://b.example,")
    assert settings.cors_allow_origins == ["https://a.example", "https://b.example"]


def test_wildcard_origin_rejected_in_production():
    with pytest.raises(ValidationError, match="CORS_ALLOW_ORIGINS"):
        Settings(environment="production", cors_allow_origins=["*"])


def test_wildcard_allowed_in_development():
    assert Settings(cors_allow_origins=["*"]).cors_allow_origins == ["*"]


@pytest.mark.parametrize("count", [0, -70])
def test_required_answer_count_must_be_positive(count):
    with pytest.raises(ValidationError):
        Settings(required_answer_count=count)


def test_required_answer_count_defaults_to_catalog():
    assert Settings().required_answer_count is None
