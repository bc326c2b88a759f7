"""Pydantic schemas for questionnaire answers."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from copsoq.core.domain_catalog import SCALE_VALUES


class Answer(BaseModel):
    """Single answer to a questionnaire item.

    Accepts both the English field names and the storage column names
    (grupo, item, valor) used by the persistence layer.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    assessment_id: int | str | None = Field(
        None, validation_alias=AliasChoices("assessment_id", "avaliacao_id")
    )
    domain_id: int = Field(..., ge=1, validation_alias=AliasChoices("domain_id", "grupo"))
    item_id: str = Field(
        ...,
        pattern=r"^Q\d+$",
        validation_alias=AliasChoices("item_id", "item"),
    )
    value: int = Field(..., validation_alias=AliasChoices("value", "valor"))

    @field_validator("item_id", mode="before")
    @classmethod
    def _normalize_item_id(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("value")
    @classmethod
    def _value_on_scale(cls, v: int) -> int:
        if v not in SCALE_VALUES:
            raise ValueError(f"value must be one of {sorted(SCALE_VALUES)}")
        return v


class AnswersSubmission(BaseModel):
    """Request schema carrying the raw answers of one assessment."""

    model_config = ConfigDict(extra="forbid")

    respostas: list[Answer] = Field(default_factory=list, max_length=500)
