"""Tests for sources.py - locating and extracting language files."""

import shutil
import subprocess

import pytest

from hymnal.sources import extract_from_git, find_source_files


class TestFindSourceFiles:

    def test_only_existing_files(self, tmp_path, english, swahili):
        (tmp_path / 'english.json').write_text('[]')
        found = find_source_files(tmp_path, [english, swahili])
        assert found == {'english': tmp_path / 'english.json'}


def git(repo, *args):
    subprocess.run(['git', *args], cwd=repo, check=True, capture_output=True)


@pytest.mark.skipif(shutil.which('git') is None, reason="Requires git")
class TestExtractFromGit:

    @pytest.fixture
    def repo(self, tmp_path):
        repo = tmp_path / 'repo'
        repo.mkdir()
        git(repo, 'init', '-q')
        git(repo, 'config', 'user.email', 'test@example.com')
        git(repo, 'config', 'user.name', 'Test')
        (repo / 'english.json').write_text('[{"number": 1}]', encoding='utf-8')
        git(repo, 'add', 'english.json')
        git(repo, 'commit', '-q', '-m', 'original')
        (repo / 'english.json').write_text('[]', encoding='utf-8')
        git(repo, 'commit', '-q', '-am', 'flat migration')
        return repo

    def test_extracts_old_revision(self, repo, tmp_path, english):
        extracted = extract_from_git(repo, 'HEAD~1', tmp_path / 'out', [english])
        assert extracted['english'].read_text(encoding='utf-8') == '[{"number": 1}]'

    def test_missing_file_skipped(self, repo, tmp_path, english, swahili, capsys):
        extracted = extract_from_git(repo, 'HEAD', tmp_path / 'out', [english, swahili])
        assert list(extracted) == ['english']
        assert 'Warning: Could not extract swahili.json' in capsys.readouterr().out

    def test_undecodable_file_skipped(self, repo, tmp_path, english, swahili, capsys):
        (repo / 'swahili.json').write_bytes(b'[{"title": "\xff\xfe"}]')
        git(repo, 'add', 'swahili.json')
        git(repo, 'commit', '-q', '-m', 'latin-1 swahili')

        extracted = extract_from_git(repo, 'HEAD', tmp_path / 'out', [swahili, english])
        assert list(extracted) == ['english']
        assert 'Warning: swahili.json at HEAD is not valid UTF-8' in capsys.readouterr().out
