"""
Locating per-language source files.

Sources are either live <key>.json files in a directory, or pulled out
of a git snapshot taken before the earlier flat migration overwrote them.
"""

import subprocess
from pathlib import Path

from .models import LanguageDescriptor

# Commit before the flat migration replaced the original language files
DEFAULT_GIT_REF = '91a3e5f~1'


def git_show(repo_dir: Path, ref: str, file_name: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        ['git', 'show', f'{ref}:{file_name}'],
        cwd=repo_dir,
        capture_output=True,
        text=True,
        encoding='utf-8',
    )


def extract_from_git(repo_dir: Path, ref: str, dest_dir: Path,
                     languages: list[LanguageDescriptor]) -> dict[str, Path]:
    """
    Write each language's source file as of ref into dest_dir.

    Returns: language key -> extracted file, for the files that existed
    """
    print('Extracting original language files from git history...')
    dest_dir = Path(dest_dir)
    dest_dir.mkdir(parents=True, exist_ok=True)

    extracted = {}
    for language in languages:
        file_name = language.source_file_name
        print(f"  Extracting {file_name}...")
        try:
            result = git_show(Path(repo_dir), ref, file_name)
        except OSError as e:
            print(f"  Warning: Could not run git for {file_name}: {e}")
            continue
        except UnicodeDecodeError as e:
            print(f"  Warning: {file_name} at {ref} is not valid UTF-8: {e}")
            continue

        if result.returncode != 0:
            print(f"  Warning: Could not extract {file_name} (file may not exist in history)")
            continue

        output_path = dest_dir / file_name
        output_path.write_text(result.stdout, encoding='utf-8')
        extracted[language.key] = output_path

    print(f"Extracted {len(extracted)}/{len(languages)} files")
    return extracted


def find_source_files(source_dir: Path, languages: list[LanguageDescriptor]) -> dict[str, Path]:
    """Use live <key>.json files from source_dir; missing ones are left out"""
    source_dir = Path(source_dir)
    found = {}
    for language in languages:
        path = source_dir / language.source_file_name
        if path.is_file():
            found[language.key] = path
    return found
