"""
Citation formatter: renders one usage example as a definition sub-line.

    none   -> #: {{ux|ain|text|translation}}
    ref    -> #: {{ux|...|ref=KEY}}            (en)
              #* {{quote|...|ref=KEY}}         (ja)
    source -> #* {{quote-book|ain|year=..|author=..|title=..|chapter=..|url=..|text=..|t=..}}  (en)
              #* {{quote|ain|text|translation|ref=<ref>{{citation|...}}</ref>}}            (ja)

The source record's `book` field becomes title= on English Wiktionary and
publisher= on Japanese Wiktionary, while its `title` becomes chapter= and
title= respectively.
"""

from ainuwikt.models import (
    Example,
    NoAttribution,
    RefAttribution,
    Source,
    SourceAttribution,
)
from ainuwikt.selectors import LANG_CODE
from ainuwikt.style import Locale, locale_table, resolve_locale
from ainuwikt.wikitext import Template

# List markers: plain usage examples vs. quotations
UX_MARKER = "#:"
QUOTE_MARKER = "#*"


def format_sentence(sentence: str) -> str:
    """Hook for sentence segmentation; currently returns its input."""
    # TODO: segment sentences with a morphological analyzer once one is packaged
    return sentence


def citation_ref(source: Source) -> str:
    """<ref>{{citation|author=|title=|publisher=|year=|url=}}</ref>"""
    citation = Template("citation")
    citation.add_named("author", source.author)
    citation.add_named("title", source.title)
    citation.add_named("publisher", source.book)
    citation.add_named("year", source.year)
    citation.add_named("url", source.url)
    return f"<ref>{citation.render()}</ref>"


def quote_book_template(example: Example, source: Source) -> Template:
    quote = Template("quote-book", [LANG_CODE])
    quote.add_named("year", source.year)
    quote.add_named("author", source.author)
    quote.add_named("title", source.book)
    quote.add_named("chapter", source.title)
    quote.add_named("url", source.url)
    quote.add_named("text", format_sentence(example.text))
    quote.add_named("t", example.translation)
    return quote


def usage_template(name: str, example: Example) -> Template:
    return Template(name, [LANG_CODE, format_sentence(example.text), example.translation])


def example_template(example: Example, locale: Locale | str | None) -> tuple[str, Template]:
    """
    Choose the list marker and template for one example.

    Returns:
        (marker, template) where marker is "#:" or "#*"
    """
    locale = resolve_locale(locale)
    attribution = example.attribution

    if isinstance(attribution, NoAttribution):
        return UX_MARKER, usage_template("ux", example)

    if isinstance(attribution, RefAttribution):
        name = locale_table(locale).ref_example_template
        marker = UX_MARKER if name == "ux" else QUOTE_MARKER
        return marker, usage_template(name, example).add_named("ref", attribution.ref)

    if isinstance(attribution, SourceAttribution):
        if locale is Locale.EN:
            return QUOTE_MARKER, quote_book_template(example, attribution.source)
        quote = usage_template("quote", example)
        quote.add_named("ref", citation_ref(attribution.source))
        return QUOTE_MARKER, quote

    raise TypeError(f"Unknown attribution type: {type(attribution).__name__}")


def example_line(example: Example, locale: Locale | str | None) -> str:
    marker, tmpl = example_template(example, locale)
    return f"{marker} {tmpl.render()}"
