"""
Catalog writer - persists migrated hymnals.

Output layout under the output root:
    hymnals/<language dir>/hymn-001.json
    index.json              language-aware index, rebuilt every run
    cross-references.json   template for hand-curated translation links
"""

import json
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from .models import HymnRecord, LanguageDescriptor

INDEX_VERSION = '3.0'
INDEX_DESCRIPTION = ('Language-aware hymnal structure. '
                     'Each language hymnal maintains its original numbering.')

CROSS_REFERENCES_TEMPLATE = {
    'version': '1.0',
    'description': ('Cross-references between hymns in different language hymnals '
                    'that are translations of each other.'),
    'note': ('This file can be populated manually or through community '
             'contributions as translations are verified.'),
    'crossReferences': [
        {
            'id': 'example-001',
            'note': 'Example entry - replace with actual verified translations',
            'hymns': {
                'english': {'number': 1, 'title': 'Example Title'},
                'swahili': {'number': 1, 'title': 'Example Title in Swahili'},
            },
        }
    ],
}


def write_json(path: Path, data) -> None:
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def iso_timestamp(moment: Optional[datetime] = None) -> str:
    """UTC timestamp like 2024-05-01T12:00:00.000Z"""
    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class CatalogWriter:
    """Writes hymn files, the index and the cross-reference template"""

    def __init__(self, output_root: Path):
        self.output_root = Path(output_root)
        self.hymnals_dir = self.output_root / 'hymnals'
        self.index_path = self.output_root / 'index.json'
        self.cross_references_path = self.output_root / 'cross-references.json'

    def backup_existing(self, timestamp_ms: Optional[int] = None) -> Optional[Path]:
        """
        Move an existing hymnals/ directory aside as hymnals_backup_<ms>.

        Returns the backup path, or None if there was nothing to move.
        """
        if not self.hymnals_dir.exists():
            return None
        if timestamp_ms is None:
            timestamp_ms = int(time.time() * 1000)
        backup_dir = self.output_root / f"hymnals_backup_{timestamp_ms}"
        self.hymnals_dir.rename(backup_dir)
        return backup_dir

    def write_hymnal(self, language: LanguageDescriptor, hymns: list[HymnRecord]) -> dict:
        """Write one file per hymn and return the language's index entry"""
        language_dir = self.hymnals_dir / language.directory
        language_dir.mkdir(parents=True, exist_ok=True)

        for hymn in hymns:
            write_json(language_dir / hymn.file_name, hymn.to_dict())

        return {
            'code': language.code,
            'title': language.title,
            'hymnCount': len(hymns),
            'directory': f"hymnals/{language.directory}",
        }

    def write_index(self, entries: dict, generated_at: Optional[datetime] = None) -> Path:
        """entries: language dir -> entry from write_hymnal()"""
        self.output_root.mkdir(parents=True, exist_ok=True)
        write_json(self.index_path, {
            'version': INDEX_VERSION,
            'description': INDEX_DESCRIPTION,
            'generatedAt': iso_timestamp(generated_at),
            'hymnals': entries,
        })
        return self.index_path

    def write_cross_references(self) -> Path:
        """Always overwrite with a fresh template"""
        self.output_root.mkdir(parents=True, exist_ok=True)
        write_json(self.cross_references_path, CROSS_REFERENCES_TEMPLATE)
        return self.cross_references_path
