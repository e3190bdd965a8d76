# src/agents_lint/validation/models.py

from pydantic import BaseModel, Field

from agents_lint.rules.models import ValidationSuggestion


class ValidationResult(BaseModel):
    """Outcome of one validation run.

    This is the only type front ends ever see. A new run always produces a
    new result; nothing is updated in place.
    """

    suggestions: tuple[ValidationSuggestion, ...]
    score: int = Field(ge=0, le=100)
    summary: str

    class Config:
        extra = "forbid"
        frozen = True
