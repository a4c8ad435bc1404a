"""
Hymn content parsers - HTML and markdown lyric text to Stanza records
"""

from .chorus import ChorusDetector, DEFAULT_CHORUS_LABELS
from .html_content import parse_html_content
from .markdown_content import parse_markdown_content
from .text import TextNormalizer

__all__ = [
    'ChorusDetector',
    'DEFAULT_CHORUS_LABELS',
    'parse_html_content',
    'parse_markdown_content',
    'TextNormalizer',
]
