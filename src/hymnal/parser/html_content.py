"""
HTML hymn content parser

Hymnal sources store lyrics as loosely formatted HTML: a title heading,
one <p> per stanza (sometimes several verses run together in one <p>),
<br> between lines, verse numbers as small bold/colored numerals and
chorus labels in emphasis. This module turns that into Stanza records.
"""

import re
from typing import Optional

from ..models import Stanza
from .chorus import ChorusDetector, DEFAULT_DETECTOR
from .text import TextNormalizer

HEADING_RE = re.compile(r'<h1\b[^>]*>.*?</h1\s*>', re.IGNORECASE | re.DOTALL)
PARAGRAPH_RE = re.compile(r'</?p\b[^>]*>', re.IGNORECASE)

# <font color="red"><b>2</b></font> or a bare <b>2</b>
VERSE_MARKER_RE = re.compile(
    r'(?:<font\b[^>]*>\s*)?<b>\s*(\d+)\s*</b>(?:\s*</font>)?',
    re.IGNORECASE
)


def split_paragraphs(html: str) -> list[str]:
    """Drop title headings and split on paragraph tags, skipping empty blocks"""
    content = HEADING_RE.sub('', html)
    blocks = (block.strip() for block in PARAGRAPH_RE.split(content))
    return [block for block in blocks if block]


def split_numbered_verses(block: str) -> list[Stanza]:
    """
    Split a block at each explicit verse marker.

    The marker's number is used as-is. Text before the first marker and
    markers with nothing after them are dropped.
    """
    stanzas = []
    parts = VERSE_MARKER_RE.split(block)
    # parts = [leading, num, text, num, text, ...]
    for i in range(1, len(parts), 2):
        lines = TextNormalizer.split_lines(TextNormalizer.html_to_text(parts[i + 1]))
        if lines:
            stanzas.append(Stanza.verse(int(parts[i]), lines))
    return stanzas


def parse_html_content(html: Optional[str],
                       chorus_detector: Optional[ChorusDetector] = None) -> list[Stanza]:
    """
    Parse HTML hymn content into an ordered list of stanzas.

    Verses without an explicit marker are numbered from a per-hymn
    counter starting at 1. Choruses never take a number.
    """
    if not html:
        return []

    detector = chorus_detector or DEFAULT_DETECTOR
    stanzas = []
    verse_number = 1

    for block in split_paragraphs(html):
        is_chorus = detector.is_html_chorus(block)

        if not is_chorus and VERSE_MARKER_RE.search(block):
            stanzas.extend(split_numbered_verses(block))
            continue

        text = TextNormalizer.html_to_text(block)
        if is_chorus:
            text = detector.strip_label(text)

        lines = TextNormalizer.split_lines(text)
        if not lines:
            continue

        if is_chorus:
            stanzas.append(Stanza.chorus(lines))
        else:
            stanzas.append(Stanza.verse(verse_number, lines))
            verse_number += 1

    return stanzas
