# src/agents_lint/rules/models.py

from typing import Literal

from pydantic import BaseModel

Priority = Literal["low", "medium", "high"]
SuggestionType = Literal["tip", "info", "success"]

PRIORITY_RANK: dict[str, int] = {"high": 0, "medium": 1, "low": 2}


class ValidationSuggestion(BaseModel):
    """A single unit of advisory feedback."""

    type: SuggestionType
    title: str
    message: str
    suggestion: str | None = None
    example: str | None = None
    priority: Priority

    class Config:
        extra = "forbid"
        frozen = True
