from .base import DocumentParser
from .markdown_parser import MarkdownParser, parse_markdown
from .models import CodeBlock, Heading, ParsedMarkdown, Section

__all__ = [
    "CodeBlock",
    "DocumentParser",
    "Heading",
    "MarkdownParser",
    "ParsedMarkdown",
    "Section",
    "parse_markdown",
]
