# src/agents_lint/validation/validator.py

import logging
from collections.abc import Sequence
from time import monotonic
from typing import Literal

from agents_lint.config import DEFAULT_CONFIG, ValidatorConfig
from agents_lint.observability import names
from agents_lint.observability.base import MetricsHook, NoOpMetricsHook
from agents_lint.parsers.markdown_parser import parse_markdown
from agents_lint.parsers.models import ParsedMarkdown
from agents_lint.rules.catalogue import run_rules
from agents_lint.rules.models import PRIORITY_RANK, ValidationSuggestion

from .models import ValidationResult

logger = logging.getLogger(__name__)

ScoreBand = Literal["good", "fair", "poor"]

EMPTY_SUMMARY = "Empty file - add content to get started"

GET_STARTED_EXAMPLE = """# AGENTS.md

## Setup
- Install dependencies: `npm install`
- Start dev server: `npm run dev`

## Testing
- Run tests: `npm test`

## Code style
- Use TypeScript strict mode
- Prefer functional components"""

SUMMARY_WELL_FORMED = (
    "Your AGENTS.md is well-structured and ready to help agents work effectively!"
)
SUMMARY_LOOKS_GOOD = (
    "Your AGENTS.md looks good with just a few suggestions for improvement."
)
SUMMARY_GOOD_BASICS = (
    "Your AGENTS.md has good basics but could be improved in a few areas."
)
SUMMARY_NEEDS_WORK = (
    "Your AGENTS.md needs some work. Focus on the high-priority suggestions first."
)
SUMMARY_HIGH_PRIORITY = (
    "Start by addressing the high-priority suggestions to improve your AGENTS.md."
)
SUMMARY_ADD_CONTENT = (
    "Add more content and structure to help agents understand your project."
)


def _empty_result() -> ValidationResult:
    return ValidationResult(
        suggestions=(
            ValidationSuggestion(
                type="tip",
                title="Get started with AGENTS.md",
                message="Your file is empty. Start by adding a title and basic sections.",
                suggestion=(
                    "Add setup commands, testing instructions, and code style guidelines."
                ),
                example=GET_STARTED_EXAMPLE,
                priority="high",
            ),
        ),
        score=0,
        summary=EMPTY_SUMMARY,
    )


def sort_suggestions(
    suggestions: Sequence[ValidationSuggestion],
) -> list[ValidationSuggestion]:
    """Order by priority, high first. Ties keep their catalogue order."""
    return sorted(suggestions, key=lambda s: PRIORITY_RANK[s.priority])


def calculate_score(
    parsed: ParsedMarkdown,
    suggestions: Sequence[ValidationSuggestion],
    config: ValidatorConfig = DEFAULT_CONFIG,
) -> int:
    """Quality score in ``[0, 100]``.

    Each non-success suggestion costs points by priority. The running total
    is floored at 0 before structure bonuses are added, then capped at 100.
    """
    penalties = {
        "high": config.high_penalty,
        "medium": config.medium_penalty,
        "low": config.low_penalty,
    }

    score = 100
    for suggestion in suggestions:
        if suggestion.type == "success":
            continue
        score -= penalties[suggestion.priority]

    score = max(0, score)

    if len(parsed.sections) >= config.min_sections:
        score += config.structure_bonus
    if parsed.code_blocks:
        score += config.structure_bonus
    if config.good_min_lines <= parsed.line_count <= config.recommended_max_lines:
        score += config.structure_bonus

    return min(100, score)


def generate_summary(suggestions: Sequence[ValidationSuggestion], score: int) -> str:
    if any(s.type == "success" for s in suggestions):
        return SUMMARY_WELL_FORMED
    if score >= 80:
        return SUMMARY_LOOKS_GOOD
    if score >= 60:
        return SUMMARY_GOOD_BASICS
    if score >= 40:
        return SUMMARY_NEEDS_WORK
    if any(s.priority == "high" for s in suggestions):
        return SUMMARY_HIGH_PRIORITY
    return SUMMARY_ADD_CONTENT


def score_band(score: int) -> ScoreBand:
    """Coarse rating for display: good (>= 80), fair (>= 60), poor."""
    if score >= 80:
        return "good"
    if score >= 60:
        return "fair"
    return "poor"


def validate(
    content: str,
    *,
    config: ValidatorConfig = DEFAULT_CONFIG,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ValidationResult:
    """Validate an agent-instruction document.

    Args:
        content: Raw Markdown text. Any string is accepted.
        config: Rule thresholds and scoring weights.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        A fresh ValidationResult with suggestions sorted by priority.

    Example:
        >>> result = validate("# AGENTS.md\\n\\n## Setup\\n- `pnpm install`\\n")
        >>> result.score
        81
    """
    start = monotonic()

    if not content.replace("\ufeff", "").strip():
        logger.debug("Empty content, skipping rules")
        result = _empty_result()
    else:
        parsed = parse_markdown(content, metrics_hook=metrics_hook)
        suggestions = sort_suggestions(run_rules(parsed, content, config))
        score = calculate_score(parsed, suggestions, config)
        result = ValidationResult(
            suggestions=tuple(suggestions),
            score=score,
            summary=generate_summary(suggestions, score),
        )
        logger.debug(
            "Validated %d lines: suggestions=%s, score=%d",
            parsed.line_count,
            [s.title for s in suggestions],
            score,
        )

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.VALIDATION_DURATION, elapsed_ms)
    metrics_hook.increment(names.VALIDATIONS_TOTAL)
    for priority in PRIORITY_RANK:
        count = sum(1 for s in result.suggestions if s.priority == priority)
        if count:
            metrics_hook.increment(
                names.VALIDATION_SUGGESTIONS_TOTAL,
                count,
                labels={"priority": priority},
            )
    metrics_hook.record_gauge(names.VALIDATION_SCORE, result.score)
    return result
