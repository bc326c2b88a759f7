"""Error response schemas."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Standard error response schema.

    Used for business-rule rejections surfaced over HTTP (4xx).
    """

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "error": "assessment_incomplete",
                    "message": "A avaliação não está completa. Responda todas as perguntas antes de finalizar.",
                    "details": {"answered": 69, "required": 70},
                },
                {
                    "error": "assessment_locked",
                    "message": "A avaliação já foi concluída ou inativada e não aceita alterações.",
                },
            ]
        }
    )

    error: str = Field(
        ...,
        description="Error type identifier",
        examples=["assessment_incomplete", "assessment_locked"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: Optional[dict] = Field(
        None,
        description="Additional error context",
        examples=[{"answered": 69, "required": 70}],
    )
