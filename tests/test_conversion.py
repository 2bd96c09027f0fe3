"""Tests for the HTML to Markdown conversion strategies."""

import logging
import re

import pytest
from pagepull.conversion import (
    RulesStrategy,
    TranslatorStrategy,
    clean_markdown,
    create_converter,
    html_to_markdown,
)
from pagepull.models.config import ConversionConfig, Strategy

SEPARATOR_RE = re.compile(r"^\|(\s*-{3,}\s*\|)+$")

SIMPLE_TABLE = "<table><tr><th>A</th><th>B</th></tr><tr><td>1</td><td>2</td></tr></table>"

PAGE = """<!DOCTYPE html>
<html>
<head>
    <title>Reference Guide</title>
    <style>.hidden { display: none; }</style>
</head>
<body>
    <header>Site Banner</header>
    <nav><a href="/">Home</a> Menu</nav>
    <main>
        <h1>Glossary</h1>
        <p>Body text.</p>
        <dl><dt>Latency</dt><dd>Time to first byte</dd><dt>Throughput</dt><dd>Bytes per second</dd></dl>
        <table>
            <tr><th>Name</th><th>Value</th></tr>
            <tr><td>alpha</td><td>1</td></tr>
            <tr><td>beta</td><td>2</td></tr>
        </table>
    </main>
    <script>window.tracking = true;</script>
    <footer>Copyright 2024</footer>
</body>
</html>"""


@pytest.fixture(params=[Strategy.RULES, Strategy.TRANSLATORS], ids=["rules", "translators"])
def converter(request):
    """Each conversion strategy in turn."""
    return create_converter(request.param)


def separator_lines(markdown: str) -> list[str]:
    return [line for line in markdown.splitlines() if SEPARATOR_RE.match(line.strip())]


class TestSharedBehaviour:
    """Properties both strategies must satisfy."""

    def test_table_has_header_separator_and_rows(self, converter):
        """Test that a table renders header, separator and one line per data row."""
        result = converter.convert(SIMPLE_TABLE)

        assert "| A | B |" in result
        assert "| 1 | 2 |" in result
        separators = separator_lines(result)
        assert len(separators) == 1
        assert separators[0].count("-") >= 6

    @pytest.mark.parametrize(
        "html",
        [
            "<table><caption>Cap</caption><tr><th>A</th></tr><tr><td>1</td></tr></table>",
            "<table><colgroup><col></colgroup><tr><th>A</th></tr><tr><td>1</td></tr></table>",
            "<table><caption>Cap</caption><tbody><tr><td>A</td></tr><tr><td>1</td></tr></tbody></table>",
            "<table><caption>Cap</caption><thead><tr><th>A</th></tr></thead>"
            "<tbody><tr><td>1</td></tr></tbody></table>",
        ],
        ids=["caption", "colgroup", "caption-tbody", "caption-thead"],
    )
    def test_header_row_after_caption_or_colgroup(self, converter, html):
        """Test that leading caption/colgroup elements do not hide the header row."""
        lines = converter.convert(html).splitlines()

        separators = [i for i, line in enumerate(lines) if SEPARATOR_RE.match(line)]
        assert len(separators) == 1
        assert lines[separators[0] - 1] == "| A |"
        assert lines[separators[0] + 1] == "| 1 |"

    def test_definition_list_marks_terms(self, converter):
        """Test that definition lists yield bold term markers."""
        result = converter.convert("<dl><dt>Term</dt><dd>Def</dd></dl>")

        assert "**Term:** Def" in result

    def test_definition_pairs_in_source_order(self, converter):
        """Test that multiple pairs keep their order."""
        html = "<dl><dt>First</dt><dd>one</dd><dt>Second</dt><dd>two</dd></dl>"

        result = converter.convert(html)

        assert "**First:** one" in result
        assert "**Second:** two" in result
        assert result.index("**First:**") < result.index("**Second:**")

    def test_empty_term_emits_no_marker(self, converter):
        """Test that an empty dt produces no empty bold marker."""
        result = converter.convert("<dl><dt></dt><dd>Def</dd></dl>")

        assert "**:**" not in result
        assert "Def" in result

    def test_main_only_drops_navigation(self, converter):
        """Test that main_only removes nav content."""
        result = converter.convert("<nav>Menu</nav><p>Body</p>", main_only=True)

        assert "Menu" not in result
        assert "Body" in result

    def test_full_page_keeps_navigation(self, converter):
        """Test that nav content is kept without main_only."""
        result = converter.convert("<nav>Menu</nav><p>Body</p>", main_only=False)

        assert "Menu" in result
        assert "Body" in result

    @pytest.mark.parametrize("main_only", [False, True])
    def test_header_footer_nav_filtering(self, converter, main_only):
        """Test header/footer/nav text presence follows main_only."""
        result = converter.convert(PAGE, main_only=main_only)

        for chrome in ("Site Banner", "Menu", "Copyright 2024"):
            assert (chrome in result) is not main_only
        assert "Body text." in result

    @pytest.mark.parametrize("main_only", [False, True])
    def test_scripts_and_styles_always_removed(self, converter, main_only):
        """Test that script and style content never reaches the output."""
        html = "<p>Visible</p><script>var secret = 1;</script><style>.x { color: red; }</style>"

        result = converter.convert(html, main_only=main_only)

        assert "Visible" in result
        assert "secret" not in result
        assert "color" not in result

    def test_empty_table_contributes_nothing(self, converter):
        """Test that a table without rows renders as empty."""
        assert converter.convert("<table></table>") == ""

    def test_fully_filtered_document_is_empty_string(self, converter):
        """Test that removing everything yields an empty string."""
        result = converter.convert("<header><p>Only chrome</p></header>", main_only=True)

        assert result == ""

    def test_empty_input(self, converter):
        """Test that empty HTML converts to an empty string."""
        assert converter.convert("") == ""

    def test_generic_elements(self, converter):
        """Test that headings, emphasis and links use the default mapping."""
        html = '<h1>Title</h1><p><strong>Bold</strong> and <a href="https://example.com/x">link</a></p>'

        result = converter.convert(html)

        assert "# Title" in result
        assert "**Bold**" in result
        assert "[link](https://example.com/x)" in result

    def test_malformed_markup_does_not_raise(self, converter):
        """Test robustness against unclosed and partial markup."""
        html = "<div><table><tr><td>a<td>b</table><p>unclosed <em>text"

        result = converter.convert(html)

        assert "a" in result
        assert "unclosed" in result

    def test_full_page(self, converter):
        """Test conversion of a realistic page."""
        result = converter.convert(PAGE, main_only=True)

        assert "# Glossary" in result
        assert "**Latency:** Time to first byte" in result
        assert "**Throughput:** Bytes per second" in result
        assert "tracking" not in result
        assert "display: none" not in result
        assert any("alpha" in line and "1" in line for line in result.splitlines())

    def test_output_ends_with_single_newline(self, converter):
        """Test output normalization."""
        result = converter.convert("<p>One</p>\n\n\n\n<p>Two</p>")

        assert result.endswith("\n")
        assert not result.endswith("\n\n")
        assert "\n\n\n" not in result


class TestRulesStrategy:
    """Tests specific to the rule-based strategy."""

    def test_simple_table_exact(self):
        """Test the exact table sub-grammar."""
        result = RulesStrategy().convert(SIMPLE_TABLE)

        assert result == "| A | B |\n|---|---|\n| 1 | 2 |\n"

    @pytest.mark.parametrize("width,rows", [(1, 0), (2, 1), (3, 4)])
    def test_table_line_count(self, width, rows):
        """Test that a table block is exactly n+2 lines with w dash groups."""
        header = "".join(f"<th>h{i}</th>" for i in range(width))
        body = "".join(
            "<tr>" + "".join(f"<td>r{r}c{c}</td>" for c in range(width)) + "</tr>" for r in range(rows)
        )
        html = f"<table><tr>{header}</tr>{body}</table>"

        lines = RulesStrategy().convert(html).splitlines()

        assert len(lines) == rows + 2
        assert lines[1] == "|" + "|".join(["---"] * width) + "|"

    def test_first_row_is_header_even_with_td(self):
        """Test that a td-only first row becomes the header."""
        html = "<table><tr><td>x</td><td>y</td></tr><tr><td>1</td><td>2</td></tr></table>"

        lines = RulesStrategy().convert(html).splitlines()

        assert lines[0] == "| x | y |"
        assert lines[1] == "|---|---|"

    def test_ragged_rows_are_not_padded(self):
        """Test that later rows keep their own cell count."""
        html = "<table><tr><th>A</th><th>B</th><th>C</th></tr><tr><td>1</td></tr></table>"

        lines = RulesStrategy().convert(html).splitlines()

        assert lines[1] == "|---|---|---|"
        assert lines[2] == "| 1 |"

    def test_pipes_escaped_when_configured(self):
        """Test the opt-in pipe escaping for table cells."""
        html = "<table><tr><th>a|b</th></tr></table>"
        config = ConversionConfig(escape_table_pipes=True)

        assert "| a|b |" in RulesStrategy().convert(html)
        assert "| a\\|b |" in create_converter(Strategy.RULES, config).convert(html)

    def test_dangling_term_is_preserved(self):
        """Test that a term without a definition is left as a bare label."""
        html = "<dl><dt>Lonely</dt><dt>Paired</dt><dd>value</dd></dl>"

        result = RulesStrategy().convert(html)

        assert "**Lonely:****Paired:** value" in result

    def test_table_inside_nav_removed_with_main_only(self):
        """Test that excluded regions take nested tables with them."""
        html = f"<nav>{SIMPLE_TABLE}</nav><p>Body</p>"

        result = RulesStrategy().convert(html, main_only=True)

        assert "| A | B |" not in result
        assert "Body" in result


class TestTranslatorStrategy:
    """Tests specific to the translator-table strategy."""

    def test_head_reduced_to_title(self):
        """Test that the document head renders only its title."""
        html = (
            "<html><head><title>My Page</title><meta name='description' content='ignored meta'>"
            "</head><body><p>Body</p></body></html>"
        )

        result = TranslatorStrategy().convert(html)

        assert result.startswith("My Page")
        assert "ignored meta" not in result
        assert "Body" in result

    def test_head_without_title(self):
        """Test that a head without title contributes nothing."""
        html = "<html><head><meta charset='utf-8'></head><body><p>Body</p></body></html>"

        result = TranslatorStrategy().convert(html)

        assert result == "Body\n"

    def test_table_uses_builtin_support(self):
        """Test that tables come from markdownify's own table rendering."""
        html = "<table><tr><td>x</td><td>y</td></tr><tr><td>1</td><td>2</td></tr></table>"

        result = TranslatorStrategy().convert(html)

        assert len(separator_lines(result)) == 1
        assert "| 1 | 2 |" in result

    def test_separator_counts_colspan(self):
        """Test that spanning header cells widen the separator."""
        html = '<table><caption>Cap</caption><tr><th colspan="2">A</th></tr><tr><td>1</td><td>2</td></tr></table>'

        result = TranslatorStrategy().convert(html)

        assert separator_lines(result) == ["| --- | --- |"]


class TestStrategySelection:
    """Tests for create_converter and html_to_markdown."""

    def test_create_by_name(self):
        """Test creating converters from strategy names."""
        assert isinstance(create_converter("rules"), RulesStrategy)
        assert isinstance(create_converter("translators"), TranslatorStrategy)

    @pytest.mark.parametrize("strategy", list(Strategy))
    def test_strategy_name_in_debug_log(self, strategy, caplog, monkeypatch):
        """Test that each converter reports its strategy name when logging."""
        monkeypatch.setattr(logging.getLogger("pagepull"), "propagate", True)
        converter = create_converter(strategy)

        with caplog.at_level("DEBUG", logger="pagepull.conversion"):
            converter.convert("<p>Body</p>")

        assert converter.name == strategy
        assert f"{strategy.value} strategy produced" in caplog.text

    def test_unknown_strategy(self):
        """Test that unknown strategy names are rejected."""
        with pytest.raises(ValueError):
            create_converter("regex")

    def test_html_to_markdown(self):
        """Test the one-call helper."""
        result = html_to_markdown("<dl><dt>Term</dt><dd>Def</dd></dl>", strategy="translators")

        assert "**Term:** Def" in result

    def test_strategies_are_stateless(self):
        """Test that repeated calls give identical results."""
        strategy = create_converter(Strategy.TRANSLATORS)

        first = strategy.convert(PAGE, main_only=True)
        strategy.convert(PAGE, main_only=False)

        assert strategy.convert(PAGE, main_only=True) == first


class TestCleanMarkdown:
    """Tests for clean_markdown."""

    def test_collapses_blank_lines(self):
        """Test that three or more newlines collapse to two."""
        assert clean_markdown("a\n\n\n\nb") == "a\n\nb\n"

    def test_strips_trailing_spaces(self):
        """Test that trailing whitespace is removed per line."""
        assert clean_markdown("a   \nb\t\n") == "a\nb\n"

    def test_empty_stays_empty(self):
        """Test that whitespace-only output becomes an empty string."""
        assert clean_markdown("\n\n  \n") == ""
