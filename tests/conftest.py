"""Pytest configuration and shared fixtures."""
import pytest
import tempfile
from pathlib import Path

from ainuwikt.models import (
    Definition,
    Entry,
    Example,
    LinkMeta,
    PartOfSpeech,
    PosArgs,
    RefAttribution,
    Source,
    SourceAttribution,
    Transitivity,
)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def suffix_entry():
    """Suffix entry with plain examples, etymology and a usage note."""
    return Entry(
        lemma="test",
        pos=PartOfSpeech.SUFFIX,
        definitions=(
            Definition(
                gloss="causative suffix",
                examples=(
                    Example(text="ek", translation="to come"),
                    Example(text="ekte", translation="to make come"),
                ),
            ),
        ),
        etymology=(LinkMeta(term="-re"), LinkMeta(term="-e")),
        usage="Usage note here.",
        add_separator=False,
    )


@pytest.fixture
def full_source():
    return Source(
        author="Author Name",
        title="Book Title",
        book="Publisher Name",
        year="2023",
        url="http://example.com",
    )


@pytest.fixture
def quote_entry(full_source):
    """Noun entry with one ref-attributed and one source-attributed example."""
    return Entry(
        lemma="test",
        pos=PartOfSpeech.NOUN,
        definitions=(
            Definition(
                gloss="test definition",
                examples=(
                    Example(
                        text="Simple example",
                        translation="Simple translation",
                        attribution=RefAttribution("Simple Ref"),
                    ),
                    Example(
                        text="Quote example",
                        translation="Quote translation",
                        attribution=SourceAttribution(full_source),
                    ),
                ),
            ),
        ),
    )


@pytest.fixture
def verb_entry():
    """Transitive verb entry exercising every optional section."""
    return Entry(
        lemma="omante",
        pos=PartOfSpeech.VERB,
        pos_args=PosArgs(transitivity=Transitivity.TRANSITIVE, plural="omanpa"),
        sub_type="causative",
        definitions=(
            Definition(gloss="to send", examples=(Example("sonko omante", "to send a letter"),)),
            Definition(gloss="to let go"),
        ),
        etymology=(LinkMeta(term="oman", tran="to go", pos="verb"), LinkMeta(term="-te")),
        derived=(LinkMeta(term="omantekar", tran="to dispatch"),),
        related=(LinkMeta(term="oman"),),
        synonyms=(LinkMeta(term="ekte", tran="to send for"),),
        antonyms=(LinkMeta(term="ek", tran="to come"),),
        dialects=("Saru", "Chitose"),
        usage="Takes a direct object.",
        add_separator=True,
    )


@pytest.fixture
def verb_record():
    """Raw camelCase record equivalent to a small verb entry."""
    return {
        "lemma": "omante",
        "pos": "verb",
        "posArgs": {"transitivity": 2, "plural": "omanpa", "possessive": "omantehe"},
        "subType": "causative",
        "definitions": [
            {
                "gloss": "to send",
                "examples": [
                    {"text": "sonko omante", "translation": "to send a letter", "ref": "K1"},
                    {
                        "text": "tan sonko omante",
                        "translation": "to send this letter",
                        "source": {"author": "Kayano", "book": "Sanseido", "year": 1996},
                    },
                    {"text": "omante", "translation": "send"},
                ],
            }
        ],
        "etymology": [{"term": "oman", "tran": "to go"}, "-te"],
        "dialects": ["Saru"],
        "addSeparator": True,
    }
