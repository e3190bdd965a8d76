# parsers/markdown_parser.py

import logging
import re
from time import monotonic

from agents_lint.observability import names
from agents_lint.observability.base import MetricsHook, NoOpMetricsHook

from .base import DocumentParser
from .models import CodeBlock, Heading, ParsedMarkdown, Section

logger = logging.getLogger(__name__)

FENCE = "```"
DEFAULT_LANGUAGE = "text"
BOM = "\ufeff"
HEADING_RE = re.compile(r"^(#{1,6})\s+(.*\S.*)$")


class MarkdownParser(DocumentParser):
    """
    Structural Markdown parser.
    - Single forward pass over lines
    - Recognizes ATX headings and backtick fences only
    - Unterminated fences are dropped, never reported
    """

    def __init__(self, metrics_hook: MetricsHook = NoOpMetricsHook()) -> None:
        self.metrics_hook = metrics_hook

    def parse(self, text: str) -> ParsedMarkdown:
        start = monotonic()
        lines = text.split("\n")
        lines[0] = lines[0].removeprefix(BOM)

        sections: list[Section] = []
        headings: list[Heading] = []
        code_blocks: list[CodeBlock] = []

        # open section: (title, level, line_number, content lines)
        current_section: tuple[str, int, int, list[str]] | None = None

        in_fence = False
        fence_language = DEFAULT_LANGUAGE
        fence_line = 0
        fence_lines: list[str] = []

        for line_number, line in enumerate(lines, start=1):
            stripped = line.strip()

            if stripped.startswith(FENCE):
                if not in_fence:
                    fence_language = stripped[len(FENCE) :].strip() or DEFAULT_LANGUAGE
                    fence_line = line_number
                    fence_lines = []
                    in_fence = True
                else:
                    code_blocks.append(
                        CodeBlock(
                            language=fence_language,
                            code="".join(fence_lines),
                            line_number=fence_line,
                        )
                    )
                    in_fence = False
                continue

            if in_fence:
                fence_lines.append(line + "\n")
                continue

            match = HEADING_RE.match(line)
            if match:
                level = len(match.group(1))
                title = match.group(2).strip()
                headings.append(Heading(text=title, level=level, line_number=line_number))

                if current_section is not None:
                    sections.append(self._close_section(current_section))
                current_section = (title, level, line_number, [])
            elif current_section is not None:
                current_section[3].append(line + "\n")

        if current_section is not None:
            sections.append(self._close_section(current_section))

        if in_fence:
            logger.debug("Dropping unterminated code fence opened on line %d", fence_line)

        parsed = ParsedMarkdown(
            sections=tuple(sections),
            headings=tuple(headings),
            code_blocks=tuple(code_blocks),
            line_count=len(lines),
            character_count=len(text),
        )

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.MARKDOWN_PARSE_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.MARKDOWN_CODE_BLOCKS_TOTAL, len(code_blocks))
        logger.debug(
            "Parsed markdown: lines=%d, headings=%d, code_blocks=%d",
            parsed.line_count,
            len(headings),
            len(code_blocks),
        )
        return parsed

    def _close_section(
        self, section: tuple[str, int, int, list[str]]
    ) -> Section:
        title, level, line_number, content = section
        return Section(
            title=title,
            level=level,
            line_number=line_number,
            content="".join(content),
        )


def parse_markdown(
    text: str, metrics_hook: MetricsHook = NoOpMetricsHook()
) -> ParsedMarkdown:
    """Parse ``text`` with a fresh :class:`MarkdownParser`."""
    return MarkdownParser(metrics_hook=metrics_hook).parse(text)
