"""
Template selectors: pure functions choosing which template to emit and
with which parameters.
"""

from typing import Sequence

from ainuwikt.models import Entry, LinkMeta, PartOfSpeech, Transitivity, pos_tag
from ainuwikt.style import Locale, locale_table
from ainuwikt.wikitext import Template, template

LANG_CODE = "ain"

# English Wiktionary POS headings
POS_LABELS: dict[str, str] = {
    "noun": "Noun",
    "verb": "Verb",
    "adj": "Adjective",
    "adv": "Adverb",
    "participle": "Participle",
    "aux": "Auxiliary verb",
    "particle": "Particle",
    "pron": "Pronoun",
    "prep": "Preposition",
    "conj": "Conjunction",
    "interj": "Interjection",
    "root": "Root",
    "prefix": "Prefix",
    "suffix": "Suffix",
}


def pos_label(pos: PartOfSpeech | str) -> str:
    """English heading for a POS tag; unmapped tags are returned verbatim."""
    tag = pos_tag(pos)
    return POS_LABELS.get(tag, tag)


def pos_heading_title(pos: PartOfSpeech | str, locale: Locale) -> str:
    if locale_table(locale).use_pos_labels:
        return pos_label(pos)
    return f"{{{{{pos_tag(pos)}}}}}"


def etymology_template(components: Sequence[LinkMeta]) -> Template:
    """
    Build {{affix|ain|a|b|...}} for the etymology components.

    Terms go positionally in order, followed by t<n>= and pos<n>= for each
    component that has them, numbered by 1-based position.
    """
    affix = Template("affix", [LANG_CODE])
    for meta in components:
        affix.add(meta.term)
    for i, meta in enumerate(components, 1):
        affix.add_named(f"t{i}", meta.tran)
        affix.add_named(f"pos{i}", meta.pos)
    return affix


def headword_template(entry: Entry) -> Template:
    """{{ain-verb|n}} for verbs with a transitivity class, else {{head|ain|pos}}."""
    args = entry.pos_args
    if pos_tag(entry.pos) == PartOfSpeech.VERB.value and args and args.transitivity is not None:
        head = Template("ain-verb", [str(int(Transitivity(args.transitivity)))])
        head.add_named("pl", args.plural)
        return head
    return Template("head", [LANG_CODE, pos_tag(entry.pos)])


def headword_line(entry: Entry) -> str:
    """Headword template followed by subtype and dialect annotations."""
    line = headword_template(entry).render()
    if entry.sub_type:
        line += " " + Template("context", [entry.sub_type, f"lang={LANG_CODE}"]).render()
    if entry.dialects:
        line += " " + template("tlb", LANG_CODE, *entry.dialects)
    return line


def link_line(item: LinkMeta) -> str:
    """Bulleted {{l|ain|term}} with an optional parenthesized gloss."""
    link = template("l", LANG_CODE, item.term)
    if item.tran:
        link += f" ({item.tran})"
    return f"* {link}"
