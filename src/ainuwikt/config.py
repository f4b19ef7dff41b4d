"""
Settings for the command-line tools.

Settings come from an optional YAML file; command-line flags override them.

    # ainuwikt.yaml
    locale: en
    output_format: jsonl
    skip_invalid: true
    examples_db: data/corpus.sqlite
    examples_limit: 20
"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

OUTPUT_FORMATS = ('text', 'jsonl')


class ConfigError(ValueError):
    """Raised when a settings file is missing or invalid."""

    pass


@dataclass
class RenderSettings:
    locale: str = 'ja'
    output_format: str = 'text'
    skip_invalid: bool = False
    examples_db: Optional[Path] = None
    examples_limit: Optional[int] = None

    def merged(self, **overrides: Any) -> "RenderSettings":
        """Return a copy with every non-None override applied."""
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values.update({k: v for k, v in overrides.items() if v is not None})
        return RenderSettings(**values)


# Expected YAML type per key
_FIELD_TYPES: Dict[str, tuple] = {
    'locale': (str,),
    'output_format': (str,),
    'skip_invalid': (bool,),
    'examples_db': (str,),
    'examples_limit': (int,),
}


def load_settings(path: Optional[Path]) -> RenderSettings:
    """
    Load settings from a YAML file.

    Args:
        path: Settings file, or None for the defaults

    Raises:
        ConfigError: If the file is missing, not valid YAML, or holds
            unknown keys or values of the wrong type
    """
    if path is None:
        return RenderSettings()

    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Settings file not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return RenderSettings()
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping of settings")

    unknown = sorted(set(data) - set(_FIELD_TYPES))
    if unknown:
        raise ConfigError(f"{path}: unknown settings: {', '.join(unknown)}")

    for key, value in data.items():
        if value is None:
            continue
        expected = _FIELD_TYPES[key]
        # bool is an int subclass; reject it for integer settings
        if not isinstance(value, expected) or (expected == (int,) and isinstance(value, bool)):
            raise ConfigError(
                f"{path}: '{key}' should be {expected[0].__name__}, got {type(value).__name__}"
            )

    if data.get('output_format') and data['output_format'] not in OUTPUT_FORMATS:
        raise ConfigError(
            f"{path}: output_format must be one of {', '.join(OUTPUT_FORMATS)}"
        )

    settings = RenderSettings().merged(**data)
    if settings.examples_db is not None:
        settings.examples_db = Path(settings.examples_db)
    return settings
