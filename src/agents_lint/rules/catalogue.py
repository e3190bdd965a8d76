# src/agents_lint/rules/catalogue.py

"""The fixed catalogue of validation rules.

Every rule is a plain function ``(parsed, content, config)`` returning a
suggestion, a list of suggestions, or ``None``. Rules never look at each
other's output; :data:`RULES` fixes the order in which they are reported.
"""

from collections.abc import Callable

from agents_lint.config import DEFAULT_CONFIG, ValidatorConfig
from agents_lint.heuristics.lexical import (
    SectionKeywords,
    detect_section_keywords,
    extract_commands,
    find_unversioned_tools,
    has_version_specificity,
)
from agents_lint.parsers.models import ParsedMarkdown

from .models import ValidationSuggestion

RuleOutput = ValidationSuggestion | list[ValidationSuggestion] | None
Rule = Callable[[ParsedMarkdown, str, ValidatorConfig], RuleOutput]

STARTER_EXAMPLE = """# AGENTS.md

## Setup
- Install: `npm install`
- Start dev: `npm run dev`

## Testing
- Run tests: `npm test`

## Code style
- Use TypeScript strict mode
- Prefer functional components"""

SETUP_EXAMPLE = """## Setup
- Install dependencies: `pnpm install`
- Start dev server: `pnpm dev`
- Build: `pnpm build`"""

TESTING_EXAMPLE = """## Testing
- Run all tests: `pnpm test`
- Run specific test: `pnpm test -- <pattern>`
- Lint code: `pnpm lint`"""

CODE_STYLE_EXAMPLE = """## Code style
- TypeScript strict mode enabled
- Use functional components with hooks
- Single quotes, no semicolons
- Prefer named exports"""

CODE_BLOCK_EXAMPLE = """```bash
npm install
npm run dev
npm test
```"""


def section_keywords(parsed: ParsedMarkdown) -> SectionKeywords:
    """Keyword scan over every section title and body."""
    all_text = " ".join(f"{s.title} {s.content}" for s in parsed.sections)
    return detect_section_keywords(all_text)


def check_length(
    parsed: ParsedMarkdown, content: str, config: ValidatorConfig = DEFAULT_CONFIG
) -> ValidationSuggestion | None:
    line_count = parsed.line_count
    limit = config.recommended_max_lines

    if line_count > config.max_lines:
        return ValidationSuggestion(
            type="tip",
            title="Consider keeping it concise",
            message=(
                f"Your AGENTS.md is {line_count} lines. "
                f"Best practice is ≤{limit} lines for readability."
            ),
            suggestion=(
                "Try focusing on the most critical information agents need. "
                "Remove outdated or overly detailed sections."
            ),
            priority="medium",
        )

    if line_count > limit:
        return ValidationSuggestion(
            type="tip",
            title="File is getting long",
            message=(
                f"Your AGENTS.md is {line_count} lines. "
                f"Consider trimming to ≤{limit} lines."
            ),
            suggestion=(
                "Focus on essential commands, conventions, and agent-specific context."
            ),
            priority="low",
        )

    return None


def check_minimum_content(
    parsed: ParsedMarkdown, content: str, config: ValidatorConfig = DEFAULT_CONFIG
) -> ValidationSuggestion | None:
    # A short file gets "add more context" only; headings are checked after that.
    if parsed.line_count < config.min_lines:
        return ValidationSuggestion(
            type="tip",
            title="Add more context",
            message=(
                "Your AGENTS.md is quite short. "
                "Adding more details will help agents work more effectively."
            ),
            suggestion=(
                "Consider adding setup commands, testing instructions, "
                "and code style guidelines."
            ),
            example=STARTER_EXAMPLE,
            priority="medium",
        )

    if not parsed.sections:
        return ValidationSuggestion(
            type="tip",
            title="Add section headings",
            message="No section headings found. Organize your content with clear headings.",
            suggestion='Use ## for main sections like "Setup", "Testing", "Code Style".',
            priority="high",
        )

    return None


def check_common_sections(
    parsed: ParsedMarkdown, content: str, config: ValidatorConfig = DEFAULT_CONFIG
) -> list[ValidationSuggestion]:
    keywords = section_keywords(parsed)
    suggestions: list[ValidationSuggestion] = []

    if not keywords.has_setup:
        suggestions.append(
            ValidationSuggestion(
                type="tip",
                title="Consider adding setup instructions",
                message=(
                    "No setup or installation section found. "
                    "Agents work better with clear setup commands."
                ),
                suggestion=(
                    "Add a section with installation and development environment setup."
                ),
                example=SETUP_EXAMPLE,
                priority="high",
            )
        )

    if not keywords.has_testing:
        suggestions.append(
            ValidationSuggestion(
                type="tip",
                title="Consider adding testing instructions",
                message=(
                    "No testing section found. "
                    "Test commands help agents verify their changes."
                ),
                suggestion="Add a section describing how to run tests and what to check.",
                example=TESTING_EXAMPLE,
                priority="medium",
            )
        )

    if not keywords.has_code_style:
        suggestions.append(
            ValidationSuggestion(
                type="tip",
                title="Consider documenting code style",
                message=(
                    "No code style section found. "
                    "Style guidelines help agents write consistent code."
                ),
                suggestion=(
                    "Add a section with formatting rules, naming conventions, "
                    "and patterns to follow."
                ),
                example=CODE_STYLE_EXAMPLE,
                priority="low",
            )
        )

    return suggestions


def check_command_formatting(
    parsed: ParsedMarkdown, content: str, config: ValidatorConfig = DEFAULT_CONFIG
) -> ValidationSuggestion | None:
    commands = extract_commands(content)

    if len(commands) > config.inline_command_limit and not parsed.code_blocks:
        return ValidationSuggestion(
            type="tip",
            title="Consider using code blocks",
            message=(
                f"Found {len(commands)} commands in inline code. "
                "Multi-line commands are easier to read in code blocks."
            ),
            suggestion="Use triple backticks (```) for multi-line commands or command lists.",
            example=CODE_BLOCK_EXAMPLE,
            priority="low",
        )

    return None


def check_version_specificity(
    parsed: ParsedMarkdown, content: str, config: ValidatorConfig = DEFAULT_CONFIG
) -> ValidationSuggestion | None:
    found_tools = find_unversioned_tools(content)

    if found_tools and not has_version_specificity(content):
        return ValidationSuggestion(
            type="tip",
            title="Be more specific about versions",
            message=f"Found {', '.join(found_tools)} mentioned without version numbers.",
            suggestion="Specify versions to help agents use the right APIs and patterns.",
            example='Use "React 18" or "Node.js 20" instead of just "React" or "Node".',
            priority="low",
        )

    return None


def check_readability(
    parsed: ParsedMarkdown, content: str, config: ValidatorConfig = DEFAULT_CONFIG
) -> list[ValidationSuggestion]:
    suggestions: list[ValidationSuggestion] = []

    top_level = [h for h in parsed.headings if h.level == 1]
    if len(top_level) > 1:
        suggestions.append(
            ValidationSuggestion(
                type="info",
                title="Multiple top-level headings",
                message=(
                    f"Found {len(top_level)} # headings. "
                    "AGENTS.md typically uses one # heading as the title."
                ),
                suggestion="Use ## for main sections instead of # to maintain clear hierarchy.",
                priority="low",
            )
        )

    # content ends with a newline, so split() yields one extra item
    long_sections = [
        s
        for s in parsed.sections
        if len(s.content.split("\n")) > config.long_section_lines
    ]
    if long_sections:
        suggestions.append(
            ValidationSuggestion(
                type="tip",
                title="Some sections are very long",
                message=(
                    f"{len(long_sections)} section(s) have more than "
                    f"{config.long_section_lines} lines."
                ),
                suggestion=(
                    "Consider breaking long sections into subsections "
                    "or removing verbose details."
                ),
                priority="low",
            )
        )

    empty_sections = [
        s for s in parsed.sections if len(s.content.strip()) < config.empty_section_chars
    ]
    if empty_sections:
        suggestions.append(
            ValidationSuggestion(
                type="tip",
                title="Empty sections detected",
                message=f"{len(empty_sections)} section(s) have little or no content.",
                suggestion="Remove empty section headings or add content to make them useful.",
                priority="medium",
            )
        )

    return suggestions


def check_well_formed(
    parsed: ParsedMarkdown, content: str, config: ValidatorConfig = DEFAULT_CONFIG
) -> ValidationSuggestion | None:
    keywords = section_keywords(parsed)

    has_good_length = (
        config.good_min_lines <= parsed.line_count <= config.recommended_max_lines
    )
    has_sections = len(parsed.sections) >= config.min_sections
    has_commands = bool(extract_commands(content)) or bool(parsed.code_blocks)
    key_topics = sum(
        [keywords.has_setup, keywords.has_testing, keywords.has_code_style]
    )

    if (
        has_good_length
        and has_sections
        and has_commands
        and key_topics >= config.min_key_topics
    ):
        return ValidationSuggestion(
            type="success",
            title="Well-structured AGENTS.md",
            message=(
                "Your AGENTS.md looks great! It has good structure, "
                "clear sections, and helpful commands."
            ),
            suggestion="Agents should be able to work effectively with this file.",
            priority="high",
        )

    return None


RULES: tuple[Rule, ...] = (
    check_length,
    check_minimum_content,
    check_common_sections,
    check_command_formatting,
    check_version_specificity,
    check_readability,
    check_well_formed,
)


def run_rules(
    parsed: ParsedMarkdown,
    content: str,
    config: ValidatorConfig = DEFAULT_CONFIG,
    rules: tuple[Rule, ...] = RULES,
) -> list[ValidationSuggestion]:
    """Run each rule once and flatten the output in catalogue order."""
    suggestions: list[ValidationSuggestion] = []
    for rule in rules:
        output = rule(parsed, content, config)
        if output is None:
            continue
        if isinstance(output, list):
            suggestions.extend(output)
        else:
            suggestions.append(output)
    return suggestions
