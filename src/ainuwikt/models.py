"""
Data model for Ainu dictionary entries.

All records are frozen dataclasses: an Entry is built once by the caller
(usually via ainuwikt.loader) and consumed read-only by the renderer.

Example attribution is an explicit sum type with three cases:
- NoAttribution: plain usage example
- RefAttribution: short literal reference key
- SourceAttribution: full bibliographic record (Source)
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Union


# =============================================================================
# Enumerations
# =============================================================================


class PartOfSpeech(str, Enum):
    """Grammatical categories used by the Ainu entries."""

    NOUN = "noun"
    VERB = "verb"
    ADJ = "adj"
    ADV = "adv"
    PARTICIPLE = "participle"
    AUX = "aux"
    PARTICLE = "particle"
    PRON = "pron"
    PREP = "prep"
    CONJ = "conj"
    INTERJ = "interj"
    ROOT = "root"
    PREFIX = "prefix"
    SUFFIX = "suffix"


class Transitivity(IntEnum):
    """Verb valency class, rendered as its number in {{ain-verb}}."""

    COMPLETE = 0
    INTRANSITIVE = 1
    TRANSITIVE = 2
    DITRANSITIVE = 3


def pos_tag(pos: Union[PartOfSpeech, str]) -> str:
    """Return the raw tag for a POS value (unknown tags pass through)."""
    if isinstance(pos, PartOfSpeech):
        return pos.value
    return str(pos)


# =============================================================================
# Attribution variants
# =============================================================================


@dataclass(frozen=True)
class Source:
    """Bibliographic record of a quoted example."""

    author: str | None = None
    title: str | None = None
    book: str | None = None  # publisher / containing book
    year: str | None = None
    url: str | None = None


@dataclass(frozen=True)
class NoAttribution:
    """Example without any reference."""


@dataclass(frozen=True)
class RefAttribution:
    """Example cited by a short literal key."""

    ref: str


@dataclass(frozen=True)
class SourceAttribution:
    """Example quoted from a fully described source."""

    source: Source


Attribution = Union[NoAttribution, RefAttribution, SourceAttribution]


# =============================================================================
# Entry records
# =============================================================================


@dataclass(frozen=True)
class Example:
    text: str
    translation: str
    attribution: Attribution = field(default_factory=NoAttribution)

    @property
    def is_attributed(self) -> bool:
        return not isinstance(self.attribution, NoAttribution)


@dataclass(frozen=True)
class Definition:
    gloss: str
    examples: tuple[Example, ...] = ()


@dataclass(frozen=True)
class LinkMeta:
    """A linked term (etymology component or related term)."""

    term: str
    tran: str | None = None
    pos: str | None = None


@dataclass(frozen=True)
class PosArgs:
    transitivity: Transitivity | None = None
    plural: str | None = None
    possessive: str | None = None


@dataclass(frozen=True)
class Pronunciation:
    ipa: bool = True


@dataclass(frozen=True)
class Entry:
    """One lexical entry, the unit of rendering."""

    lemma: str
    pos: Union[PartOfSpeech, str]
    definitions: tuple[Definition, ...]
    pos_args: PosArgs | None = None
    sub_type: str | None = None
    etymology: tuple[LinkMeta, ...] = ()
    derived: tuple[LinkMeta, ...] = ()
    related: tuple[LinkMeta, ...] = ()
    synonyms: tuple[LinkMeta, ...] = ()
    antonyms: tuple[LinkMeta, ...] = ()
    dialects: tuple[str, ...] = ()
    usage: str | None = None
    pronunciation: Pronunciation | None = None
    add_separator: bool = False

    @property
    def has_attributed_examples(self) -> bool:
        """True if any example in any definition carries a ref or source."""
        return any(
            example.is_attributed
            for definition in self.definitions
            for example in definition.examples
        )
