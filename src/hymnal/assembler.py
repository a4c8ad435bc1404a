"""
Hymn record assembly

Reads a per-language source file (a JSON list of hymn objects) and turns
each hymn into a HymnRecord, choosing the parser by which content field
the hymn carries.
"""

import json
from pathlib import Path
from typing import Callable, Optional

from bs4 import BeautifulSoup

from .models import HymnRecord, LanguageDescriptor, Stanza
from .parser import parse_html_content, parse_markdown_content

# Field name -> parser, checked in order
CONTENT_PARSERS: dict[str, Callable[[str], list[Stanza]]] = {
    'content': parse_html_content,
    'markdown': parse_markdown_content,
}


class HymnalSourceError(Exception):
    """A hymnal source file could not be read or is not a list of hymns"""


def load_hymnal(path: Path) -> list[dict]:
    """Load and sanity check a per-language source file"""
    path = Path(path)
    try:
        with open(path, encoding='utf-8') as f:
            hymns = json.load(f)
    except OSError as e:
        raise HymnalSourceError(f"Failed to read {path.name}: {e}") from e
    except UnicodeDecodeError as e:
        raise HymnalSourceError(f"{path.name} is not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise HymnalSourceError(f"{path.name} is not valid JSON: {e}") from e

    if not isinstance(hymns, list):
        raise HymnalSourceError(f"{path.name} must contain a list of hymns")
    for i, hymn in enumerate(hymns):
        if not isinstance(hymn, dict):
            raise HymnalSourceError(f"{path.name}: entry {i} is not a hymn object")
        for field_name in CONTENT_PARSERS:
            value = hymn.get(field_name)
            if value is not None and not isinstance(value, str):
                raise HymnalSourceError(
                    f"{path.name}: entry {i} has a non-text '{field_name}' field"
                )
    return hymns


def hymn_number(value):
    """Integral floats (1.0) become ints; anything else passes through"""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def heading_title(html: Optional[str]) -> Optional[str]:
    """Text of the first <h1> in HTML content, if any"""
    if not html:
        return None
    soup = BeautifulSoup(html, 'html.parser')
    heading = soup.find('h1')
    if heading:
        return ' '.join(heading.get_text(' ').split()) or None
    return None


def parse_stanzas(hymn: dict) -> Optional[list[Stanza]]:
    """Run the parser for the first content field present, None if none is"""
    for field_name, parse in CONTENT_PARSERS.items():
        if hymn.get(field_name):
            return parse(hymn[field_name])
    return None


def assemble_hymn(hymn: dict, language: LanguageDescriptor,
                  warnings: Optional[list] = None) -> HymnRecord:
    """
    Build a HymnRecord from one source hymn.

    A hymn with no content is still recorded, with no stanzas, and a
    warning is printed (and appended to warnings when given).
    """
    stanzas = parse_stanzas(hymn)
    if stanzas is None:
        message = f"Hymn {hymn.get('number')} has no content or markdown"
        print(f"  Warning: {message}")
        if warnings is not None:
            warnings.append(message)
        stanzas = []

    title = hymn.get('title') or heading_title(hymn.get('content')) or ''

    return HymnRecord(
        number=hymn_number(hymn.get('number')),
        language=language.code,
        title=title,
        stanzas=stanzas,
    )


def process_hymnal(path: Path, language: LanguageDescriptor) -> tuple[list[HymnRecord], list[str]]:
    """
    Assemble every hymn in a source file.

    Hymns without a number are skipped with a warning.

    Returns: (hymn records, warning messages)
    Raises HymnalSourceError if the file as a whole is unusable.
    """
    print(f"Processing {Path(path).name}...")
    warnings = []
    records = []
    for i, hymn in enumerate(load_hymnal(path)):
        if hymn.get('number') is None:
            message = f"Entry {i} ({hymn.get('title') or 'untitled'}) has no number, skipped"
            print(f"  Warning: {message}")
            warnings.append(message)
            continue
        records.append(assemble_hymn(hymn, language, warnings))
    return records, warnings
