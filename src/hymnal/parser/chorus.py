"""
Chorus detection for hymn lyric markup.

Hymnals mark a refrain by putting its label in emphasis, e.g.
<i><b>Chorus</b></i> in HTML sources or **KWAYA** in markdown sources.
The label set differs per language and is passed in, so new hymnals
only need new labels.
"""

import re
from typing import Iterable

from .text import TAG_RE

DEFAULT_CHORUS_LABELS = ('CHORUS', 'Chorus', 'NNYESO', 'Nnyeso', 'KWAYA')

# Inline emphasis elements, content may contain nested tags
HTML_EMPHASIS_RE = re.compile(
    r'<(?P<tag>i|b|em|strong)\b[^>]*>(?P<body>.*?)</(?P=tag)\s*>',
    re.IGNORECASE | re.DOTALL
)

# Bold before italic so ** is not read as two empty * runs
MARKDOWN_EMPHASIS_RE = re.compile(r'(\*\*|__|\*|_)(?P<body>.+?)\1')


class ChorusDetector:
    """Classifies raw lyric blocks as chorus or not by label matching"""

    def __init__(self, labels: Iterable[str] = DEFAULT_CHORUS_LABELS):
        self.labels = tuple(labels)
        if not self.labels:
            raise ValueError("ChorusDetector needs at least one label")
        alternation = '|'.join(re.escape(label) for label in self.labels)
        # Whole words only: 'Choruses of heaven' is not a label
        self.label_re = re.compile(rf'(?<!\w)(?:{alternation})(?!\w)', re.IGNORECASE)
        self.prefix_re = re.compile(rf'^(?:{alternation})(?!\w)[:\s]*', re.IGNORECASE)

    def is_label_text(self, text: str) -> bool:
        """True if text contains one of the chorus labels as a whole word"""
        return bool(self.label_re.search(text))

    def is_html_chorus(self, block: str) -> bool:
        """
        True if an <i>/<b>/<em>/<strong> run in the block holds a label.
        A bare label outside emphasis does not count.
        """
        for match in HTML_EMPHASIS_RE.finditer(block):
            if self.is_label_text(TAG_RE.sub('', match.group('body'))):
                return True
        return False

    def is_markdown_chorus(self, block: str) -> bool:
        """True if a **bold**, __bold__, *italic* or _italic_ run holds a label"""
        return any(
            self.is_label_text(match.group('body'))
            for match in MARKDOWN_EMPHASIS_RE.finditer(block)
        )

    def strip_markdown_labels(self, block: str) -> str:
        """Remove emphasis runs that hold a chorus label"""
        def replace(match):
            return '' if self.is_label_text(match.group('body')) else match.group(0)
        return MARKDOWN_EMPHASIS_RE.sub(replace, block)

    def strip_label(self, text: str) -> str:
        """Remove a leading 'Chorus:' style prefix"""
        return self.prefix_re.sub('', text, count=1)


DEFAULT_DETECTOR = ChorusDetector()
