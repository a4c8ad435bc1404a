"""
Hymnal - convert per-language hymnal sources to structured stanza files

Modules:
- parser: HTML and markdown lyric text to verse/chorus stanzas
- assembler: source hymn objects to hymn records
- catalog: per-hymn files, language index and cross-reference template
- migrate: end-to-end migration run and CLI
"""

from .models import Stanza, HymnRecord, LanguageDescriptor
from .parser import (
    ChorusDetector,
    parse_html_content,
    parse_markdown_content,
)
from .assembler import HymnalSourceError, assemble_hymn, load_hymnal, process_hymnal
from .catalog import CatalogWriter
from .languages import load_languages
from .migrate import HymnalMigrator

__version__ = "0.1.0"

__all__ = [
    # Data structures
    'Stanza',
    'HymnRecord',
    'LanguageDescriptor',
    # Parsers
    'ChorusDetector',
    'parse_html_content',
    'parse_markdown_content',
    # Assembly and output
    'HymnalSourceError',
    'assemble_hymn',
    'load_hymnal',
    'process_hymnal',
    'CatalogWriter',
    'load_languages',
    'HymnalMigrator',
]
