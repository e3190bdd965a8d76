"""
Command line front end for agents-lint.

Reports are advisory: once a report is printed the exit status is 0,
whatever the score.
"""

import json
import logging
from dataclasses import asdict
from typing import TextIO

import click

from .config import DEFAULT_CONFIG, ConfigError, load_config
from .parsers.markdown_parser import parse_markdown
from .validation.models import ValidationResult
from .validation.validator import score_band, validate

PRIORITY_LABELS = {"high": "HIGH", "medium": "MEDIUM", "low": "LOW"}


def _render_text(result: ValidationResult) -> str:
    lines = [
        f"Score: {result.score}/100 ({score_band(result.score)})",
        result.summary,
    ]
    for s in result.suggestions:
        lines.append("")
        lines.append(f"[{PRIORITY_LABELS[s.priority]}] {s.type}: {s.title}")
        lines.append(f"  {s.message}")
        if s.suggestion:
            lines.append(f"  -> {s.suggestion}")
        if s.example:
            lines.append("  Example:")
            lines.extend(f"    {line}" for line in s.example.split("\n"))
    return "\n".join(lines)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool) -> None:
    """Check AGENTS.md files and suggest improvements."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )


@main.command()
@click.argument("source", type=click.File("r", encoding="utf-8-sig", errors="replace"))
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML file overriding rule thresholds",
)
def check(source: TextIO, output_format: str, config_path: str | None) -> None:
    """Validate SOURCE (use - for stdin) and print a report."""
    try:
        config = load_config(config_path) if config_path else DEFAULT_CONFIG
    except ConfigError as e:
        raise click.BadParameter(str(e), param_hint="--config") from e

    result = validate(source.read(), config=config)

    if output_format == "json":
        click.echo(result.model_dump_json(indent=2))
    else:
        click.echo(_render_text(result))


@main.command()
@click.argument("source", type=click.File("r", encoding="utf-8-sig", errors="replace"))
def parse(source: TextIO) -> None:
    """Print the structure of SOURCE as JSON."""
    parsed = parse_markdown(source.read())
    click.echo(
        json.dumps(
            {
                "line_count": parsed.line_count,
                "character_count": parsed.character_count,
                "headings": [asdict(h) for h in parsed.headings],
                "sections": [
                    {
                        "title": s.title,
                        "level": s.level,
                        "line_number": s.line_number,
                    }
                    for s in parsed.sections
                ],
                "code_blocks": [
                    {"language": b.language, "line_number": b.line_number}
                    for b in parsed.code_blocks
                ],
            },
            indent=2,
        )
    )


if __name__ == "__main__":
    main()
