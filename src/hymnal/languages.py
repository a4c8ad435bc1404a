"""
Language descriptors - which hymnals exist and where their output goes.

The default set ships as languages.yaml next to this module. A different
file can be passed to migrate a subset or add a hymnal.
"""

from pathlib import Path
from typing import Optional

import yaml

from .models import LanguageDescriptor

DEFAULT_LANGUAGES_FILE = Path(__file__).parent / 'languages.yaml'

REQUIRED_FIELDS = ('code', 'dir', 'title')


def parse_languages(yaml_content: str) -> list[LanguageDescriptor]:
    """Parse descriptor YAML, keeping the file's order"""
    data = yaml.safe_load(yaml_content) or {}
    if not isinstance(data, dict):
        raise ValueError("Language config must be a mapping of source name to descriptor")

    languages = []
    for key, entry in data.items():
        if not isinstance(entry, dict):
            raise ValueError(f"Language '{key}' must be a mapping")
        missing = [name for name in REQUIRED_FIELDS if not entry.get(name)]
        if missing:
            raise ValueError(f"Language '{key}' is missing: {', '.join(missing)}")
        languages.append(LanguageDescriptor(
            key=str(key),
            code=str(entry['code']),
            directory=str(entry['dir']),
            title=str(entry['title']),
        ))
    return languages


def load_languages(path: Optional[Path] = None) -> list[LanguageDescriptor]:
    """Load descriptors from path, or the packaged defaults"""
    path = Path(path) if path else DEFAULT_LANGUAGES_FILE
    with open(path, encoding='utf-8') as f:
        return parse_languages(f.read())
