# src/agents_lint/validation/__init__.py

"""Validation entry point for agents-lint.

Parses a document once, runs every rule in the catalogue, and folds the
suggestions into a score and a one-line summary.

Design principles:
- Pure: the result depends only on the input text and config
- Total: every string yields a result, nothing is raised
- Advisory: a low score never blocks anything

Example:
    >>> from agents_lint.validation import validate
    >>>
    >>> result = validate(open("AGENTS.md").read())
    >>> for s in result.suggestions:
    ...     print(s.priority, s.title)
    >>> print(result.score, result.summary)
"""

from .models import ValidationResult
from .validator import (
    calculate_score,
    generate_summary,
    score_band,
    sort_suggestions,
    validate,
)

__all__ = [
    # Entry point
    "validate",
    # Types
    "ValidationResult",
    # Helpers
    "calculate_score",
    "generate_summary",
    "score_band",
    "sort_suggestions",
]
