"""
Load Entry records from plain dicts and from JSON, JSONL or YAML files.

Accepted record shape (camelCase and snake_case keys both work):

    {
      "lemma": "omante",
      "pos": "verb",
      "posArgs": {"transitivity": 2, "plural": "omanpa"},
      "definitions": [
        {"gloss": "to send",
         "examples": [{"text": "...", "translation": "...", "ref": "K1"}]}
      ],
      "etymology": [{"term": "oman", "tran": "to go"}, {"term": "-te"}],
      "dialects": ["Saru"],
      "addSeparator": true
    }

An example's "source" (a mapping with author/title/book/year/url) takes
precedence over its "ref" unless every source field is empty. Flags such as
"addSeparator" must be real booleans; other values are ignored with a warning.
"""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, List, Optional

import orjson
import yaml

from ainuwikt.models import (
    Definition,
    Entry,
    Example,
    LinkMeta,
    NoAttribution,
    PartOfSpeech,
    PosArgs,
    Pronunciation,
    RefAttribution,
    Source,
    SourceAttribution,
    Transitivity,
)

logger = logging.getLogger(__name__)

SOURCE_FIELDS = ('author', 'title', 'book', 'year', 'url')


class EntryFormatError(ValueError):
    """Raised when a record cannot be turned into an Entry."""

    pass


def _get(data: Dict[str, Any], *keys: str) -> Any:
    """Return the first present key among aliases."""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return None


def _text(value: Any) -> Optional[str]:
    """Stringify scalar values; empty strings become None."""
    if value is None:
        return None
    text = str(value)
    return text if text else None


def _require_text(data: Dict[str, Any], key: str, context: str) -> str:
    value = _text(data.get(key))
    if value is None:
        raise EntryFormatError(f"{context}: missing required field '{key}'")
    return value


def _require_mapping(data: Any, context: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise EntryFormatError(f"{context}: expected a mapping, got {type(data).__name__}")
    return data


def _list(data: Dict[str, Any], context: str, *keys: str) -> List[Any]:
    value = _get(data, *keys)
    if value is None:
        return []
    if not isinstance(value, list):
        raise EntryFormatError(f"{context}: '{keys[0]}' must be a list")
    return value


def parse_pos(value: Any, context: str = "entry"):
    """Return a PartOfSpeech, or the raw tag if it is not a known category."""
    tag = _text(value)
    if tag is None:
        raise EntryFormatError(f"{context}: missing required field 'pos'")
    try:
        return PartOfSpeech(tag)
    except ValueError:
        logger.warning(f"{context}: unknown part of speech '{tag}', rendering verbatim")
        return tag


def parse_transitivity(value: Any, context: str = "entry") -> Optional[Transitivity]:
    """Accept 0-3 or a class name ('transitive', ...); drop anything else."""
    if value is None:
        return None
    if isinstance(value, str) and not value.isdigit():
        try:
            return Transitivity[value.strip().upper()]
        except KeyError:
            pass
    else:
        try:
            return Transitivity(int(value))
        except (TypeError, ValueError):
            pass
    logger.warning(f"{context}: ignoring unknown transitivity {value!r}")
    return None


def parse_flag(value: Any, context: str = "entry") -> Optional[bool]:
    """Accept only real booleans; log and ignore anything else."""
    if value is None or isinstance(value, bool):
        return value
    logger.warning(f"{context}: ignoring non-boolean flag {value!r}")
    return None


def link_from_dict(data: Any, context: str) -> LinkMeta:
    if isinstance(data, str):
        return LinkMeta(term=data)
    data = _require_mapping(data, context)
    return LinkMeta(
        term=_require_text(data, 'term', context),
        tran=_text(data.get('tran')),
        pos=_text(data.get('pos')),
    )


def source_from_dict(data: Any, context: str) -> Source:
    data = _require_mapping(data, context)
    return Source(**{name: _text(data.get(name)) for name in SOURCE_FIELDS})


def example_from_dict(data: Any, context: str) -> Example:
    data = _require_mapping(data, context)
    text = _require_text(data, 'text', context)
    translation = _text(data.get('translation')) or ""

    source = None
    if data.get('source') is not None:
        source = source_from_dict(data['source'], f"{context}.source")

    # A source with no fields at all counts as absent
    if source is not None and source != Source():
        attribution = SourceAttribution(source)
    elif _text(data.get('ref')):
        attribution = RefAttribution(ref=_text(data['ref']))
    else:
        attribution = NoAttribution()

    return Example(text=text, translation=translation, attribution=attribution)


def definition_from_dict(data: Any, context: str) -> Definition:
    data = _require_mapping(data, context)
    gloss = _require_text(data, 'gloss', context)
    examples = tuple(
        example_from_dict(ex, f"{context}.examples[{i}]")
        for i, ex in enumerate(_list(data, context, 'examples'))
    )
    return Definition(gloss=gloss, examples=examples)


def entry_from_dict(data: Any) -> Entry:
    """
    Build an Entry from a decoded record.

    Raises:
        EntryFormatError: If required fields are missing or malformed
    """
    data = _require_mapping(data, "entry")
    lemma = _require_text(data, 'lemma', "entry")
    context = f"entry '{lemma}'"

    definitions = tuple(
        definition_from_dict(d, f"{context}.definitions[{i}]")
        for i, d in enumerate(_list(data, context, 'definitions'))
    )
    if not definitions:
        raise EntryFormatError(f"{context}: 'definitions' must not be empty")

    pos_args = None
    raw_args = _get(data, 'pos_args', 'posArgs')
    if raw_args is not None:
        raw_args = _require_mapping(raw_args, f"{context}.pos_args")
        pos_args = PosArgs(
            transitivity=parse_transitivity(raw_args.get('transitivity'), context),
            plural=_text(raw_args.get('plural')),
            possessive=_text(raw_args.get('possessive')),
        )

    pronunciation = None
    raw_pron = data.get('pronunciation')
    if isinstance(raw_pron, dict):
        ipa = parse_flag(raw_pron.get('ipa'), f"{context}.pronunciation.ipa")
        pronunciation = Pronunciation(ipa=True if ipa is None else ipa)
    elif raw_pron is not None:
        ipa = parse_flag(raw_pron, f"{context}.pronunciation")
        if ipa is not None:
            pronunciation = Pronunciation(ipa=ipa)

    def links(*keys: str):
        return tuple(
            link_from_dict(item, f"{context}.{keys[0]}[{i}]")
            for i, item in enumerate(_list(data, context, *keys))
        )

    return Entry(
        lemma=lemma,
        pos=parse_pos(data.get('pos'), context),
        definitions=definitions,
        pos_args=pos_args,
        sub_type=_text(_get(data, 'sub_type', 'subType')),
        etymology=links('etymology'),
        derived=links('derived'),
        related=links('related'),
        synonyms=links('synonyms'),
        antonyms=links('antonyms'),
        dialects=tuple(str(d) for d in _list(data, context, 'dialects') if d),
        usage=_text(data.get('usage')),
        pronunciation=pronunciation,
        add_separator=bool(parse_flag(_get(data, 'add_separator', 'addSeparator'),
                                      f"{context}.add_separator")),
    )


# =============================================================================
# File loading
# =============================================================================


def iter_entry_dicts(
    path: Path,
    on_error: Optional[Callable[[EntryFormatError], None]] = None,
) -> Iterator[Dict[str, Any]]:
    """
    Yield raw entry records from a .json, .jsonl or .yaml/.yml file.

    Args:
        path: Entry file
        on_error: Called with the error for each undecodable JSONL line,
            which is then skipped. Without it the first such line raises.

    Raises:
        FileNotFoundError: If the file does not exist
        EntryFormatError: If the file cannot be decoded
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Entry file not found: {path}")

    suffix = path.suffix.lower()

    if suffix == '.jsonl':
        with open(path, 'rb') as f:
            for line_num, line in enumerate(f, 1):
                line = line.strip()
                if not line:
                    continue
                try:
                    yield orjson.loads(line)
                except orjson.JSONDecodeError as e:
                    error = EntryFormatError(f"{path}:{line_num}: invalid JSON: {e}")
                    if on_error is None:
                        raise error from e
                    on_error(error)
        return

    if suffix in ('.yaml', '.yml'):
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise EntryFormatError(f"Invalid YAML in {path}: {e}") from e
    else:
        try:
            data = orjson.loads(path.read_bytes())
        except orjson.JSONDecodeError as e:
            raise EntryFormatError(f"Invalid JSON in {path}: {e}") from e

    if data is None:
        return
    if isinstance(data, list):
        yield from data
    else:
        yield data


def load_entries(path: Path) -> List[Entry]:
    """Load and validate every entry in a file."""
    entries = [entry_from_dict(record) for record in iter_entry_dicts(path)]
    logger.debug(f"Loaded {len(entries)} entries from {path}")
    return entries
