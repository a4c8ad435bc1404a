"""
Data structures for migrated hymnals.

A hymn is a list of stanzas, each either a numbered verse or an
unnumbered chorus. Records serialize to plain dicts for the per-hymn
JSON files.
"""

from dataclasses import dataclass, field
from typing import Optional, Union

VERSE = 'verse'
CHORUS = 'chorus'


@dataclass
class Stanza:
    """One block of lyric lines"""
    type: str  # 'verse' or 'chorus'
    lines: list[str]
    number: Optional[int] = None  # Only set for verses

    @classmethod
    def verse(cls, number: int, lines: list[str]) -> 'Stanza':
        return cls(type=VERSE, lines=lines, number=number)

    @classmethod
    def chorus(cls, lines: list[str]) -> 'Stanza':
        return cls(type=CHORUS, lines=lines)

    @property
    def is_chorus(self) -> bool:
        return self.type == CHORUS

    def to_dict(self) -> dict:
        data = {'type': self.type}
        if self.number is not None:
            data['number'] = self.number
        data['lines'] = list(self.lines)
        return data


@dataclass
class HymnRecord:
    """A single hymn as written to hymnals/<language>/hymn-NNN.json"""
    number: Union[int, str]
    language: str  # Language code from the descriptor, e.g. 'sw'
    title: str
    stanzas: list[Stanza] = field(default_factory=list)

    @property
    def file_name(self) -> str:
        """hymn-001.json style name, zero-padded to three digits"""
        return f"hymn-{str(self.number).rjust(3, '0')}.json"

    def to_dict(self) -> dict:
        return {
            'number': self.number,
            'language': self.language,
            'title': self.title,
            'stanzas': [s.to_dict() for s in self.stanzas],
        }


@dataclass(frozen=True)
class LanguageDescriptor:
    """Static metadata for one hymnal"""
    key: str  # Source file base name (english -> english.json)
    code: str  # Short language code
    directory: str  # Output directory under hymnals/
    title: str  # Display title of the hymnal

    @property
    def source_file_name(self) -> str:
        return f"{self.key}.json"
