from .lexical import (
    SectionKeywords,
    detect_section_keywords,
    extract_commands,
    find_unversioned_tools,
    has_version_specificity,
)

__all__ = [
    "SectionKeywords",
    "detect_section_keywords",
    "extract_commands",
    "find_unversioned_tools",
    "has_version_specificity",
]
