"""Tests for example and citation rendering in both locales."""

import pytest

from ainuwikt.citation import citation_ref, example_line, example_template, format_sentence
from ainuwikt.models import Example, RefAttribution, Source, SourceAttribution


class TestPlainExamples:
    """Examples without attribution use {{ux}} in both locales."""

    @pytest.mark.parametrize("locale", ["en", "ja"])
    def test_ux(self, locale):
        example = Example(text="ek", translation="to come")
        assert example_line(example, locale) == "#: {{ux|ain|ek|to come}}"


class TestRefExamples:
    """Short ref keys."""

    def test_english_uses_ux(self):
        example = Example("Simple example", "Simple translation", RefAttribution("Simple Ref"))
        assert example_line(example, "en") == (
            "#: {{ux|ain|Simple example|Simple translation|ref=Simple Ref}}"
        )

    def test_japanese_uses_quote(self):
        example = Example("Simple example", "Simple translation", RefAttribution("Simple Ref"))
        assert example_line(example, "ja") == (
            "#* {{quote|ain|Simple example|Simple translation|ref=Simple Ref}}"
        )


class TestSourceExamples:
    """Full bibliographic sources."""

    def test_japanese_citation_ref(self, full_source):
        example = Example("Quote example", "Quote translation", SourceAttribution(full_source))
        expected_ref = (
            "|ref=<ref>{{citation|author=Author Name|title=Book Title"
            "|publisher=Publisher Name|year=2023|url=http://example.com}}</ref>"
        )
        assert example_line(example, "ja") == (
            f"#* {{{{quote|ain|Quote example|Quote translation{expected_ref}}}}}"
        )

    def test_english_quote_book(self, full_source):
        example = Example("Quote example", "Quote translation", SourceAttribution(full_source))
        expected_params = "|".join([
            "ain",
            "year=2023",
            "author=Author Name",
            "title=Publisher Name",
            "chapter=Book Title",
            "url=http://example.com",
            "text=Quote example",
            "t=Quote translation",
        ])
        assert example_line(example, "en") == f"#* {{{{quote-book|{expected_params}}}}}"

    def test_missing_fields_are_omitted(self):
        source = Source(author="Kayano", year="1996")
        example = Example("a", "b", SourceAttribution(source))
        assert example_line(example, "en") == (
            "#* {{quote-book|ain|year=1996|author=Kayano|text=a|t=b}}"
        )
        assert citation_ref(source) == "<ref>{{citation|author=Kayano|year=1996}}</ref>"

    def test_unknown_locale_uses_japanese_path(self, full_source):
        example = Example("a", "b", SourceAttribution(full_source))
        marker, tmpl = example_template(example, "de")
        assert marker == "#*"
        assert tmpl.name == "quote"


class TestFormatSentence:

    def test_pass_through(self):
        assert format_sentence("sonko omante") == "sonko omante"


def test_unknown_attribution_type_rejected():
    example = Example("a", "b", attribution="not-an-attribution")
    with pytest.raises(TypeError):
        example_template(example, "en")
