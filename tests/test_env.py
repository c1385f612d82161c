"""Tests for gradmap.core.env — .env loading and configuration getters."""

import os
from pathlib import Path

import pytest
from gradmap.core.env import default_colors, default_workers, find_dotenv, load_env, parse_dotenv


class TestParseDotenv:
    def test_simple_key_value(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('GRADMAP_COLORS=000000,FFFFFF\n')
        assert parse_dotenv(f) == {'GRADMAP_COLORS': '000000,FFFFFF'}

    def test_quoted_values(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('A="#000000 #FFFFFF"\nB=\'single\'\n')
        assert parse_dotenv(f) == {'A': '#000000 #FFFFFF', 'B': 'single'}

    def test_comments_and_blanks_ignored(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('# comment\n\nFOO=bar\n\n')
        assert parse_dotenv(f) == {'FOO': 'bar'}

    def test_export_prefix(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('export GRADMAP_WORKERS=4\n')
        assert parse_dotenv(f) == {'GRADMAP_WORKERS': '4'}

    def test_line_without_equals_skipped(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('NOEQUALS\nFOO=bar\n')
        assert parse_dotenv(f) == {'FOO': 'bar'}


class TestFindDotenv:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert find_dotenv(tmp_path) == dotenv

    def test_finds_in_parent(self, tmp_path: Path) -> None:
        sub = tmp_path / 'sub'
        sub.mkdir()
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert find_dotenv(sub) == dotenv

    def test_stops_at_git_dir(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        (repo / '.git').mkdir(parents=True)
        (repo / 'src').mkdir()
        (tmp_path / '.env').write_text('X=1\n')
        assert find_dotenv(repo / 'src') is None

    def test_stops_at_git_file(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        repo.mkdir()
        (repo / '.git').write_text('gitdir: ../elsewhere\n')
        (repo / 'src').mkdir()
        (tmp_path / '.env').write_text('X=1\n')
        assert find_dotenv(repo / 'src') is None


class TestLoadEnv:
    def test_sets_missing_vars(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('GRADMAP_TEST_KEY', 'placeholder')
        monkeypatch.delenv('GRADMAP_TEST_KEY')
        (tmp_path / '.git').mkdir()
        (tmp_path / '.env').write_text('GRADMAP_TEST_KEY=loaded\n')
        monkeypatch.chdir(tmp_path)
        assert load_env() == tmp_path / '.env'
        assert os.environ.get('GRADMAP_TEST_KEY') == 'loaded'

    def test_does_not_overwrite_existing(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('GRADMAP_TEST_KEY2', 'original')
        dotenv = tmp_path / 'custom.env'
        dotenv.write_text('GRADMAP_TEST_KEY2=fromfile\n')
        load_env(env_file=str(dotenv))
        assert os.environ.get('GRADMAP_TEST_KEY2') == 'original'

    def test_explicit_missing_file(self, tmp_path: Path) -> None:
        assert load_env(env_file=str(tmp_path / 'missing.env')) is None

    def test_returns_none_at_repo_root(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / '.git').mkdir()
        monkeypatch.chdir(tmp_path)
        assert load_env() is None


class TestSettings:
    def test_default_colors(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('GRADMAP_COLORS', '000000 FFFFFF')
        assert default_colors() == '000000 FFFFFF'

    def test_default_colors_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('GRADMAP_COLORS', raising=False)
        assert default_colors() == ''

    def test_workers_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('GRADMAP_WORKERS', raising=False)
        assert default_workers() == 1

    def test_workers_set(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('GRADMAP_WORKERS', ' 4 ')
        assert default_workers() == 4

    @pytest.mark.parametrize('raw', ['0', '-2', 'many'])
    def test_workers_invalid(self, raw: str, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('GRADMAP_WORKERS', raw)
        with pytest.raises(ValueError):
            default_workers()
