"""
Locale resolution and per-locale formatting tables.

Two locales are supported: English Wiktionary ("en") and Japanese
Wiktionary ("ja"). Any missing or unrecognized code resolves to Japanese.
Adding a locale means adding a Locale member, a Style and a LocaleTable.
"""

from dataclasses import dataclass
from enum import Enum


class Locale(str, Enum):
    EN = "en"
    JA = "ja"


DEFAULT_LOCALE = Locale.JA


@dataclass(frozen=True)
class Style:
    """Heading decoration policy of one Wiktionary edition."""

    space_in_headings: bool = False
    empty_line_after_headings: bool = False
    empty_line_before_headings: bool = False


STYLE_JA = Style(
    space_in_headings=False,
    empty_line_after_headings=False,
    empty_line_before_headings=False,
)

STYLE_EN = Style(
    space_in_headings=False,
    empty_line_after_headings=False,
    empty_line_before_headings=True,
)


@dataclass(frozen=True)
class LocaleTable:
    """Section titles and fixed lines for one locale.

    Titles may be plain text or a template invocation; the header emitter
    treats both the same way. `pos_heading` is None when the POS heading is
    taken from the English label table instead of a {{tag}} template.
    """

    language: str
    script_line: str | None
    pronunciation: str
    ipa_line: str
    etymology: str
    usage: str
    derived: str
    related: str
    synonyms: str
    antonyms: str
    references: str
    use_pos_labels: bool
    # template used for examples carrying a short ref
    ref_example_template: str


LOCALE_TABLES: dict[Locale, LocaleTable] = {
    Locale.EN: LocaleTable(
        language="Ainu",
        script_line=None,
        pronunciation="Pronunciation",
        ipa_line="* {{IPA|ain|...}}",
        etymology="Etymology",
        usage="Usage",
        derived="Derived terms",
        related="Related terms",
        synonyms="Synonyms",
        antonyms="Antonyms",
        references="References",
        use_pos_labels=True,
        ref_example_template="ux",
    ),
    Locale.JA: LocaleTable(
        language="{{L|ain}}",
        script_line="{{ain-kana}}",
        pronunciation="{{pron}}",
        ipa_line="* {{ain-IPA}}",
        etymology="{{etym}}",
        usage="{{usage}}",
        derived="{{drv}}",
        related="{{rel}}",
        synonyms="{{syn}}",
        antonyms="{{ant}}",
        references="脚注",
        use_pos_labels=False,
        ref_example_template="quote",
    ),
}

STYLES: dict[Locale, Style] = {
    Locale.EN: STYLE_EN,
    Locale.JA: STYLE_JA,
}


def resolve_locale(code: str | Locale | None) -> Locale:
    """Map a locale code to a Locale, falling back to the default."""
    if isinstance(code, Locale):
        return code
    if not code:
        return DEFAULT_LOCALE
    try:
        return Locale(code.strip().lower())
    except ValueError:
        return DEFAULT_LOCALE


def resolve_style(code: str | Locale | None) -> Style:
    return STYLES[resolve_locale(code)]


def locale_table(code: str | Locale | None) -> LocaleTable:
    return LOCALE_TABLES[resolve_locale(code)]
