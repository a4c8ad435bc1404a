#!/usr/bin/env python3
"""
Language-aware hymnal migration

Builds a hymnals/ tree where every language hymnal keeps its own
numbering, since the hymnals are not 1:1 translations of each other:

    hymnals/english/hymn-001.json
    hymnals/swahili/hymn-001.json
    index.json
    cross-references.json

Usage:
    hymnal-migrate --repo-dir . --ref 91a3e5f~1
    hymnal-migrate --source-dir data/original --output-dir out
"""

import argparse
import json
import sys
import tempfile
from pathlib import Path
from typing import Optional

from .assembler import HymnalSourceError, process_hymnal
from .catalog import CatalogWriter
from .languages import load_languages
from .models import LanguageDescriptor
from .sources import DEFAULT_GIT_REF, extract_from_git, find_source_files


class HymnalMigrator:
    """Runs the migration for a set of languages"""

    def __init__(self, output_root: Path, languages: list[LanguageDescriptor]):
        self.writer = CatalogWriter(output_root)
        self.languages = languages
        self.stats = {
            'languages_processed': [],
            'languages_skipped': [],
            'languages_failed': [],
            'hymn_count': 0,
            'warnings': [],
            'backup_dir': None,
        }

    def migrate_language(self, language: LanguageDescriptor, source_file: Path) -> Optional[dict]:
        """
        Parse and write one hymnal.

        Returns the index entry, or None if the source was unusable.
        """
        try:
            hymns, warnings = process_hymnal(source_file, language)
        except HymnalSourceError as e:
            print(f"  Error: {e}")
            self.stats['languages_failed'].append({'language': language.key, 'error': str(e)})
            return None

        entry = self.writer.write_hymnal(language, hymns)
        self.stats['languages_processed'].append(language.key)
        self.stats['hymn_count'] += len(hymns)
        self.stats['warnings'].extend(
            {'language': language.key, 'warning': w} for w in warnings
        )
        print(f"  Created {len(hymns)} hymns in {language.directory}/")
        return entry

    def run(self, source_files: dict[str, Path], generated_at=None) -> dict:
        """
        Migrate every configured language that has a source file.

        source_files: language key -> source JSON file
        Returns: statistics dictionary
        """
        print('Starting language-aware migration...')

        backup_dir = self.writer.backup_existing()
        if backup_dir:
            print(f"Backed up existing hymnals directory to {backup_dir.name}")
            self.stats['backup_dir'] = str(backup_dir)
        self.writer.hymnals_dir.mkdir(parents=True, exist_ok=True)

        index_entries = {}
        for language in self.languages:
            source_file = source_files.get(language.key)
            if source_file is None:
                print(f"Skipping {language.key} (not found)")
                self.stats['languages_skipped'].append(language.key)
                continue

            entry = self.migrate_language(language, source_file)
            if entry is not None:
                index_entries[language.directory] = entry

        self.writer.write_index(index_entries, generated_at=generated_at)
        self.writer.write_cross_references()
        return self.stats

    def print_report(self):
        print("\n" + "=" * 60)
        print("MIGRATION REPORT")
        print("=" * 60)
        print(f"  Language directories created: {len(self.stats['languages_processed'])}")
        print(f"  Hymns written: {self.stats['hymn_count']}")
        print(f"  Warnings: {len(self.stats['warnings'])}")

        if self.stats['languages_skipped']:
            print(f"  Skipped (no source): {', '.join(self.stats['languages_skipped'])}")

        if self.stats['languages_failed']:
            print("\nFailed languages:")
            for failure in self.stats['languages_failed']:
                print(f"  {failure['language']}: {failure['error']}")

        if self.stats['backup_dir']:
            print(f"\nPrevious output moved to: {self.stats['backup_dir']}")
        print(f"Index written to: {self.writer.index_path}")
        print(f"Cross-reference template written to: {self.writer.cross_references_path}")

    def save_report(self, report_file: Path):
        with open(report_file, 'w', encoding='utf-8') as f:
            json.dump(self.stats, f, indent=2, ensure_ascii=False)
        print(f"\nDetailed report saved to: {report_file}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Migrate per-language hymnal JSON files to a language-aware structure'
    )
    parser.add_argument(
        '-o', '--output-dir',
        type=Path,
        default=Path('.'),
        help='Where hymnals/, index.json and cross-references.json are written (default: .)'
    )
    parser.add_argument(
        '-s', '--source-dir',
        type=Path,
        help='Read <language>.json files from this directory instead of git history'
    )
    parser.add_argument(
        '--repo-dir',
        type=Path,
        default=Path('.'),
        help='Git repository holding the original language files (default: .)'
    )
    parser.add_argument(
        '--ref',
        default=DEFAULT_GIT_REF,
        help=f'Git revision to extract the original files from (default: {DEFAULT_GIT_REF})'
    )
    parser.add_argument(
        '-l', '--languages',
        type=Path,
        help='YAML file of language descriptors (default: bundled languages.yaml)'
    )
    parser.add_argument(
        '-r', '--report',
        type=Path,
        help='Optional JSON file for migration statistics'
    )
    args = parser.parse_args(argv)

    try:
        languages = load_languages(args.languages)
    except (OSError, ValueError) as e:
        print(f"Error: Could not load language config: {e}")
        sys.exit(1)

    migrator = HymnalMigrator(args.output_dir, languages)

    if args.source_dir:
        if not args.source_dir.is_dir():
            print(f"Error: Source directory not found: {args.source_dir}")
            sys.exit(1)
        migrator.run(find_source_files(args.source_dir, languages))
    else:
        with tempfile.TemporaryDirectory(prefix='hymnal_sources_') as temp_dir:
            source_files = extract_from_git(args.repo_dir, args.ref, Path(temp_dir), languages)
            migrator.run(source_files)

    migrator.print_report()
    if args.report:
        migrator.save_report(args.report)


if __name__ == '__main__':
    main()
