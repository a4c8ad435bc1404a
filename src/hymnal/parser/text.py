"""Text cleanup shared by the HTML and markdown segmenters"""

import html
import re

TAG_RE = re.compile(r'<[^>]+>')
BR_RE = re.compile(r'<br\s*/?>', re.IGNORECASE)
SPACE_RUN_RE = re.compile(r'[ \t]+')


class TextNormalizer:
    """Turns lightly marked-up lyric text into clean lines"""

    @staticmethod
    def strip_tags(text: str) -> str:
        """Remove anything shaped like a tag, leaving stray fragments' text"""
        return TAG_RE.sub('', text)

    @staticmethod
    def html_to_text(fragment: str) -> str:
        """
        Convert an HTML fragment to plain text with one lyric line per
        line break.

        <br> becomes a newline, tags are dropped, entities decoded
        (&nbsp; to a plain space), space runs collapsed and the stray
        space renderers leave next to a line break removed.
        """
        text = BR_RE.sub('\n', fragment)
        text = TextNormalizer.strip_tags(text)
        text = html.unescape(text).replace('\u00a0', ' ')
        return TextNormalizer.normalize_whitespace(text)

    @staticmethod
    def normalize_whitespace(text: str) -> str:
        text = SPACE_RUN_RE.sub(' ', text)
        text = text.replace('\n ', '\n').replace(' \n', '\n')
        return text.strip()

    @staticmethod
    def split_lines(text: str) -> list[str]:
        """Trimmed, non-empty lines in order"""
        lines = (line.strip() for line in text.split('\n'))
        return [line for line in lines if line]
