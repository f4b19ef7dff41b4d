"""Tests for template selectors (POS labels, headword, etymology, links)."""

from dataclasses import replace

import pytest

from ainuwikt.models import Entry, Definition, LinkMeta, PartOfSpeech, PosArgs, Transitivity
from ainuwikt.selectors import (
    POS_LABELS,
    etymology_template,
    headword_line,
    headword_template,
    link_line,
    pos_heading_title,
    pos_label,
)
from ainuwikt.style import Locale


def make_entry(pos, **kwargs):
    return Entry(lemma="w", pos=pos, definitions=(Definition(gloss="g"),), **kwargs)


class TestPosLabels:
    """English POS heading table."""

    def test_table_covers_every_category(self):
        assert len(POS_LABELS) == 14
        for pos in PartOfSpeech:
            assert pos.value in POS_LABELS

    @pytest.mark.parametrize("pos,label", [
        (PartOfSpeech.NOUN, "Noun"),
        (PartOfSpeech.ADJ, "Adjective"),
        (PartOfSpeech.AUX, "Auxiliary verb"),
        (PartOfSpeech.INTERJ, "Interjection"),
        (PartOfSpeech.SUFFIX, "Suffix"),
    ])
    def test_labels(self, pos, label):
        assert pos_label(pos) == label

    def test_unknown_tag_passes_through(self):
        assert pos_label("classifier") == "classifier"

    def test_heading_title_per_locale(self):
        assert pos_heading_title(PartOfSpeech.SUFFIX, Locale.EN) == "Suffix"
        assert pos_heading_title(PartOfSpeech.SUFFIX, Locale.JA) == "{{suffix}}"
        assert pos_heading_title("classifier", Locale.JA) == "{{classifier}}"


class TestHeadword:
    """Verb-specific vs. generic headword template."""

    def test_generic(self):
        assert headword_template(make_entry(PartOfSpeech.SUFFIX)).render() == "{{head|ain|suffix}}"

    def test_verb_with_transitivity(self):
        entry = make_entry(PartOfSpeech.VERB, pos_args=PosArgs(transitivity=Transitivity.TRANSITIVE))
        assert headword_template(entry).render() == "{{ain-verb|2}}"

    def test_verb_complete_class_is_zero(self):
        entry = make_entry(PartOfSpeech.VERB, pos_args=PosArgs(transitivity=Transitivity.COMPLETE))
        assert headword_template(entry).render() == "{{ain-verb|0}}"

    def test_verb_with_plural(self):
        entry = make_entry(
            PartOfSpeech.VERB,
            pos_args=PosArgs(transitivity=Transitivity.INTRANSITIVE, plural="paye"),
        )
        assert headword_template(entry).render() == "{{ain-verb|1|pl=paye}}"

    def test_verb_without_transitivity_is_generic(self):
        entry = make_entry(PartOfSpeech.VERB, pos_args=PosArgs(plural="paye"))
        assert headword_template(entry).render() == "{{head|ain|verb}}"

    def test_transitivity_ignored_for_non_verbs(self):
        entry = make_entry(PartOfSpeech.NOUN, pos_args=PosArgs(transitivity=Transitivity.TRANSITIVE))
        assert headword_template(entry).render() == "{{head|ain|noun}}"

    def test_annotations_order(self):
        entry = make_entry(PartOfSpeech.NOUN, sub_type="locative", dialects=("Saru", "Chitose"))
        assert headword_line(entry) == (
            "{{head|ain|noun}} {{context|locative|lang=ain}} {{tlb|ain|Saru|Chitose}}"
        )

    def test_no_annotations(self):
        entry = make_entry(PartOfSpeech.NOUN)
        assert headword_line(entry) == "{{head|ain|noun}}"
        assert headword_line(replace(entry, dialects=())) == "{{head|ain|noun}}"


class TestEtymology:
    """Positional terms then numbered keyed arguments."""

    def test_terms_only(self):
        parts = [LinkMeta("-re"), LinkMeta("-e")]
        assert etymology_template(parts).render() == "{{affix|ain|-re|-e}}"

    def test_keyed_arguments_numbered_by_position(self):
        parts = [
            LinkMeta("oman", tran="to go", pos="verb"),
            LinkMeta("-te"),
            LinkMeta("-pa", pos="suffix"),
        ]
        assert etymology_template(parts).render() == (
            "{{affix|ain|oman|-te|-pa|t1=to go|pos1=verb|pos3=suffix}}"
        )


class TestLinkLine:

    def test_plain(self):
        assert link_line(LinkMeta("oman")) == "* {{l|ain|oman}}"

    def test_with_translation(self):
        assert link_line(LinkMeta("ek", tran="to come")) == "* {{l|ain|ek}} (to come)"
