# src/agents_lint/heuristics/lexical.py

"""Stateless text scanners used by the validation rules.

Word boundaries are ASCII, so ``café`` never counts as a word ending in
``caf``. Every function is total over arbitrary strings.
"""

import re
from dataclasses import dataclass

INLINE_CODE_RE = re.compile(r"`([^`]+)`")

COMMAND_PREFIXES = ("npm ", "pnpm ", "yarn ", "bun ", "git ", "docker ", "make ")
COMMAND_MARKERS = ("test", "build", "dev", "start")

# Whitespace as JavaScript regexes see it; re.ASCII narrows \s to ASCII only.
SPACE = r"[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]"

VERSION_PATTERNS = (
    # "React 18.2.0" or "Node 20"
    re.compile(rf"\b\w+{SPACE}+\d+(\.\d+)?(\.\d+)?\b", re.ASCII),
    # "Node v20.0.0"
    re.compile(rf"\b\w+{SPACE}+v\d+(\.\d+)?(\.\d+)?\b", re.ASCII),
)

# Checked independently of VERSION_PATTERNS; the two do not agree on every input.
TOOL_PATTERNS = (
    ("React", re.compile(rf"\bReact\b(?!{SPACE}+\d)", re.ASCII)),
    ("Node", re.compile(rf"\bNode(?:\.js)?\b(?!{SPACE}+v?\d)", re.ASCII)),
    ("Python", re.compile(rf"\bPython\b(?!{SPACE}+\d)", re.ASCII)),
    ("TypeScript", re.compile(rf"\bTypeScript\b(?!{SPACE}+\d)", re.ASCII)),
    ("Next.js", re.compile(rf"\bNext(?:\.js)?\b(?!{SPACE}+\d)", re.ASCII)),
)


def _topic(*words: str) -> re.Pattern[str]:
    return re.compile(r"\b(" + "|".join(words) + r")\b", re.ASCII)


SETUP_RE = _topic(
    "setup", "install", "dependencies", "requirements", "getting started", "dev environment"
)
TESTING_RE = _topic("test", "testing", "qa", "quality")
CODE_STYLE_RE = _topic("style", "lint", "format", "convention", "standards")
ARCHITECTURE_RE = _topic("architecture", "structure", "design", "organization", "overview")
SECURITY_RE = _topic("security", "auth", "authentication", "secrets", "credentials")
GIT_WORKFLOW_RE = _topic("git", "commit", "pr", "pull request", "branch", "workflow")


@dataclass(frozen=True)
class SectionKeywords:
    has_setup: bool
    has_testing: bool
    has_code_style: bool
    has_architecture: bool
    has_security: bool
    has_git_workflow: bool


def _looks_like_command(code: str) -> bool:
    return (
        " " in code
        or code.startswith(COMMAND_PREFIXES)
        or any(marker in code for marker in COMMAND_MARKERS)
    )


def extract_commands(text: str) -> list[str]:
    """Return inline code spans that look like shell commands.

    Spans are returned in order of appearance; duplicates are kept.
    """
    return [
        code for code in INLINE_CODE_RE.findall(text) if _looks_like_command(code)
    ]


def has_version_specificity(text: str) -> bool:
    """True if any word in ``text`` is followed by a version number."""
    return any(pattern.search(text) for pattern in VERSION_PATTERNS)


def find_unversioned_tools(text: str) -> list[str]:
    """Names of well-known tools mentioned without an adjacent version."""
    return [name for name, pattern in TOOL_PATTERNS if pattern.search(text)]


def detect_section_keywords(text: str) -> SectionKeywords:
    lower = text.lower()
    return SectionKeywords(
        has_setup=bool(SETUP_RE.search(lower)),
        has_testing=bool(TESTING_RE.search(lower)),
        has_code_style=bool(CODE_STYLE_RE.search(lower)),
        has_architecture=bool(ARCHITECTURE_RE.search(lower)),
        has_security=bool(SECURITY_RE.search(lower)),
        has_git_workflow=bool(GIT_WORKFLOW_RE.search(lower)),
    )
