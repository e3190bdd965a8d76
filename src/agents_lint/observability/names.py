# src/agents_lint/observability/names.py

"""Standard metric names for agents-lint observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
Units are handled by the metrics backend (e.g., converted to seconds in Prometheus).
"""

# ============================================================================
# Parser Metrics
# ============================================================================

# Duration
MARKDOWN_PARSE_DURATION = "markdown_parse_duration"

# Counters
MARKDOWN_CODE_BLOCKS_TOTAL = "markdown_code_blocks_total"


# ============================================================================
# Validation Metrics
# ============================================================================

# Duration
VALIDATION_DURATION = "validation_duration"

# Counters
VALIDATIONS_TOTAL = "validations_total"
VALIDATION_SUGGESTIONS_TOTAL = "validation_suggestions_total"

# Gauges
VALIDATION_SCORE = "validation_score"
