# Config
from .config import DEFAULT_CONFIG, ConfigError, ValidatorConfig, load_config

# Heuristics
from .heuristics import (
    SectionKeywords,
    detect_section_keywords,
    extract_commands,
    find_unversioned_tools,
    has_version_specificity,
)

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    CodeBlock,
    Heading,
    MarkdownParser,
    ParsedMarkdown,
    Section,
    parse_markdown,
)

# Rules
from .rules import RULES, ValidationSuggestion

# Validation
from .validation import ValidationResult, score_band, validate

__all__ = [
    # Config
    "DEFAULT_CONFIG",
    "ConfigError",
    "ValidatorConfig",
    "load_config",
    # Heuristics
    "SectionKeywords",
    "detect_section_keywords",
    "extract_commands",
    "find_unversioned_tools",
    "has_version_specificity",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "CodeBlock",
    "Heading",
    "MarkdownParser",
    "ParsedMarkdown",
    "Section",
    "parse_markdown",
    # Rules
    "RULES",
    "ValidationSuggestion",
    # Validation
    "ValidationResult",
    "score_band",
    "validate",
]
