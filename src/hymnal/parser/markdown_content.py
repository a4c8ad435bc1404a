"""
Markdown hymn content parser

Some hymnals were stored as lightweight markdown instead of HTML:
stanzas separated by blank lines, verse numbers and chorus labels in
**bold** or _italic_. One block always yields at most one stanza.
"""

import re
from typing import Optional

from ..models import Stanza
from .chorus import ChorusDetector, DEFAULT_DETECTOR
from .text import TextNormalizer

BLANK_LINES_RE = re.compile(r'\n[ \t]*\n(?:[ \t]*\n)*')
VERSE_NUMBER_RE = re.compile(r'(\*\*|__)\s*\d+\s*\1')
EMPHASIS_DELIMITER_RE = re.compile(r'\*\*|__|\*|_')


def split_blocks(markdown: str) -> list[str]:
    markdown = markdown.replace('\r\n', '\n')
    blocks = (block.strip() for block in BLANK_LINES_RE.split(markdown))
    return [block for block in blocks if block]


def strip_markdown(block: str, detector: ChorusDetector) -> str:
    """Drop verse numbers, chorus labels and emphasis delimiters"""
    text = VERSE_NUMBER_RE.sub('', block)
    text = detector.strip_markdown_labels(text)
    return EMPHASIS_DELIMITER_RE.sub('', text)


def parse_markdown_content(markdown: Optional[str],
                           chorus_detector: Optional[ChorusDetector] = None) -> list[Stanza]:
    """Parse markdown hymn content into an ordered list of stanzas"""
    if not markdown:
        return []

    detector = chorus_detector or DEFAULT_DETECTOR
    stanzas = []
    verse_number = 1

    for block in split_blocks(markdown):
        is_chorus = detector.is_markdown_chorus(block)
        lines = TextNormalizer.split_lines(strip_markdown(block, detector))
        if not lines:
            continue

        if is_chorus:
            stanzas.append(Stanza.chorus(lines))
        else:
            stanzas.append(Stanza.verse(verse_number, lines))
            verse_number += 1

    return stanzas
