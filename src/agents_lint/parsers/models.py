# parsers/models.py

from dataclasses import dataclass


@dataclass(frozen=True)
class Heading:
    text: str
    level: int
    line_number: int


@dataclass(frozen=True)
class CodeBlock:
    language: str
    code: str
    line_number: int


@dataclass(frozen=True)
class Section:
    title: str
    level: int
    line_number: int
    content: str


@dataclass(frozen=True)
class ParsedMarkdown:
    """Immutable snapshot of one Markdown input.

    ``line_count`` counts ``\\n``-delimited lines, so a trailing newline adds
    one empty line. ``character_count`` is the raw string length.
    """

    sections: tuple[Section, ...]
    headings: tuple[Heading, ...]
    code_blocks: tuple[CodeBlock, ...]
    line_count: int
    character_count: int
