from .catalogue import (
    RULES,
    Rule,
    check_command_formatting,
    check_common_sections,
    check_length,
    check_minimum_content,
    check_readability,
    check_version_specificity,
    check_well_formed,
    run_rules,
)
from .models import PRIORITY_RANK, Priority, SuggestionType, ValidationSuggestion

__all__ = [
    "PRIORITY_RANK",
    "RULES",
    "Priority",
    "Rule",
    "SuggestionType",
    "ValidationSuggestion",
    "check_command_formatting",
    "check_common_sections",
    "check_length",
    "check_minimum_content",
    "check_readability",
    "check_version_specificity",
    "check_well_formed",
    "run_rules",
]
