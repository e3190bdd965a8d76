import pytest

from agents_lint.parsers.markdown_parser import MarkdownParser, parse_markdown
from agents_lint.parsers.models import CodeBlock, Heading, ParsedMarkdown, Section


class TestHeadings:
    def test_extracts_heading_levels_and_line_numbers(self) -> None:
        result = parse_markdown("# Title\ntext\n## Setup\n###### Deep")

        assert result.headings == (
            Heading(text="Title", level=1, line_number=1),
            Heading(text="Setup", level=2, line_number=3),
            Heading(text="Deep", level=6, line_number=4),
        )

    def test_heading_text_is_trimmed(self) -> None:
        result = parse_markdown("##    Code style   ")

        assert result.headings[0].text == "Code style"

    @pytest.mark.parametrize(
        "line",
        ["#NoSpace", "####### seven", " # indented", "text # not a heading"],
    )
    def test_irregular_heading_syntax_is_plain_content(self, line: str) -> None:
        result = parse_markdown(f"# Title\n{line}")

        assert len(result.headings) == 1
        assert result.sections[0].content == f"{line}\n"

    @pytest.mark.parametrize("line", ["# \r", "#   ", "###\t\r", "# \u00a0"])
    def test_blank_heading_title_is_plain_content(self, line: str) -> None:
        result = parse_markdown(f"# Title\n{line}\nbody")

        assert [h.text for h in result.headings] == ["Title"]
        assert result.sections[0].content == f"{line}\nbody\n"

    def test_crlf_heading_text_drops_carriage_return(self) -> None:
        result = parse_markdown("# Title\r\nbody\r\n")

        assert result.headings == (Heading(text="Title", level=1, line_number=1),)

    def test_leading_bom_does_not_hide_first_heading(self) -> None:
        result = parse_markdown("\ufeff# Title\nbody")

        assert result.headings == (Heading(text="Title", level=1, line_number=1),)


class TestSections:
    def test_section_collects_lines_until_next_heading(self) -> None:
        result = parse_markdown("# A\none\ntwo\n## B\nthree")

        assert result.sections == (
            Section(title="A", level=1, line_number=1, content="one\ntwo\n"),
            Section(title="B", level=2, line_number=4, content="three\n"),
        )

    def test_lines_before_first_heading_are_discarded(self) -> None:
        result = parse_markdown("preamble\nmore\n# Title\nbody")

        assert len(result.sections) == 1
        assert result.sections[0].content == "body\n"
        assert result.line_count == 4

    def test_trailing_newline_adds_empty_content_line(self) -> None:
        result = parse_markdown("# A\nbody\n")

        assert result.sections[0].content == "body\n\n"

    def test_heading_without_content_has_empty_section(self) -> None:
        result = parse_markdown("# A\n# B")

        assert [s.content for s in result.sections] == ["", ""]

    def test_fence_lines_are_not_section_content(self) -> None:
        result = parse_markdown("# A\nbefore\n```\ncode\n```\nafter")

        assert result.sections[0].content == "before\nafter\n"


class TestCodeBlocks:
    def test_extracts_code_block_with_language(self) -> None:
        result = parse_markdown("```python\nprint(1)\nprint(2)\n```")

        assert result.code_blocks == (
            CodeBlock(language="python", code="print(1)\nprint(2)\n", line_number=1),
        )

    def test_language_defaults_to_text(self) -> None:
        result = parse_markdown("intro\n```\nls -la\n```")

        assert result.code_blocks[0].language == "text"
        assert result.code_blocks[0].line_number == 2

    def test_indented_fence_is_recognized(self) -> None:
        result = parse_markdown("  ```bash  \nmake\n  ```")

        assert result.code_blocks[0].language == "bash"
        assert result.code_blocks[0].code == "make\n"

    def test_fenced_hash_lines_are_not_headings(self) -> None:
        result = parse_markdown("```bash\n# install deps\nnpm install\n```")

        assert result.headings == ()
        assert result.sections == ()
        assert result.code_blocks[0].code == "# install deps\nnpm install\n"

    def test_unterminated_fence_is_dropped(self) -> None:
        result = parse_markdown("# A\ntext\n```\n# not a heading\nstill code")

        assert result.code_blocks == ()
        assert len(result.headings) == 1
        assert result.sections[0].content == "text\n"

    def test_leading_bom_does_not_hide_opening_fence(self) -> None:
        result = parse_markdown("\ufeff```python\nx = 1\n```")

        assert result.code_blocks == (
            CodeBlock(language="python", code="x = 1\n", line_number=1),
        )

    def test_empty_code_block(self) -> None:
        result = parse_markdown("```\n```")

        assert result.code_blocks == (CodeBlock(language="text", code="", line_number=1),)

    @pytest.mark.parametrize("pairs", [0, 1, 2, 5])
    def test_balanced_fences_yield_one_block_per_pair(self, pairs: int) -> None:
        text = "\n".join(["```sh", "echo hi", "```", "between"] * pairs)

        assert len(parse_markdown(text).code_blocks) == pairs

    @pytest.mark.parametrize("markers", [1, 3, 5, 7])
    def test_odd_fence_markers_drop_last_block(self, markers: int) -> None:
        text = "\n".join(["```", "x"] * markers)

        assert len(parse_markdown(text).code_blocks) == markers // 2


class TestStatistics:
    @pytest.mark.parametrize(
        "text",
        ["", "\n", "one line", "a\nb\nc\n", "\n\n\n", "# A\r\nbody\r\n"],
    )
    def test_line_count_matches_newline_split(self, text: str) -> None:
        assert parse_markdown(text).line_count == len(text.split("\n"))

    def test_character_count_is_raw_length(self) -> None:
        text = "# Título\ncafé ☕\n"

        assert parse_markdown(text).character_count == len(text)

    def test_bom_counts_as_a_character(self) -> None:
        assert parse_markdown("\ufeff# A").character_count == 4

    def test_empty_input_yields_empty_result(self) -> None:
        assert parse_markdown("") == ParsedMarkdown(
            sections=(),
            headings=(),
            code_blocks=(),
            line_count=1,
            character_count=0,
        )


class TestInvariants:
    @pytest.mark.parametrize(
        "text",
        [
            "",
            "# A\n## B\n### C",
            "```\n# hidden\n```\n# shown",
            "# A\n```\n# open fence",
            "#### \n#\n# x",
            "\x00\x01� binary ### garbage",
        ],
    )
    def test_one_section_per_heading(self, text: str) -> None:
        result = parse_markdown(text)

        assert len(result.headings) == len(result.sections)

    def test_parsing_is_deterministic(self, well_formed_doc: str) -> None:
        parser = MarkdownParser()

        assert parser.parse(well_formed_doc) == parser.parse(well_formed_doc)

    def test_parsed_markdown_is_frozen(self) -> None:
        result = parse_markdown("# A")

        with pytest.raises(AttributeError):
            result.line_count = 10  # type: ignore


class TestMetrics:
    def test_records_parse_duration_and_block_count(self, metrics_hook) -> None:
        parse_markdown("```\na\n```\n```\nb\n```", metrics_hook=metrics_hook)

        assert [name for name, _ in metrics_hook.latencies] == [
            "markdown_parse_duration"
        ]
        assert metrics_hook.counters == [("markdown_code_blocks_total", 2, {})]
