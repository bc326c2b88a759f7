"""Cascade visibility schemas."""

from pydantic import BaseModel, Field


class CascadeRequest(BaseModel):
    """Answers collected so far, keyed by item id ("Q56": 25)."""

    respostas: dict[str, float | None] = Field(default_factory=dict)


class CategoryVisibility(BaseModel):
    """Visible items per reporting category."""

    core: list[int] = Field(default_factory=list)
    behavioral: list[int] = Field(default_factory=list)
    financial: list[int] = Field(default_factory=list)


class CascadeVisibility(BaseModel):
    """Items the respondent must currently see."""

    visible_items: list[int] = Field(..., description="Visible item numbers, ascending")
    by_category: CategoryVisibility
    total_visible: int = Field(..., ge=0)
    total_possible: int = Field(..., ge=0)
    conditions_evaluated: int = Field(..., ge=0)

    def is_visible(self, item: int | str) -> bool:
        if isinstance(item, str):
            item = int(item.lstrip("Qq"))
        return item in self.visible_items
