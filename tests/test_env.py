"""Tests for a11y_checker.core.env (.env loading, walk-up logic and Settings)."""

import os
from pathlib import Path

import pytest
from a11y_checker.core.env import Settings, _find_dotenv, _parse_dotenv, load_env


class TestParseDotenv:
    def test_simple_key_value(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('A11Y_LEVEL=AAA\n')
        assert _parse_dotenv(f) == {'A11Y_LEVEL': 'AAA'}

    def test_quoted_values(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('KEY="hello world"\nKEY2=\'single\'\n')
        assert _parse_dotenv(f) == {'KEY': 'hello world', 'KEY2': 'single'}

    def test_comments_and_blank_lines_ignored(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('# comment\n\nFOO=bar\n\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}

    def test_no_value(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('NOEQUALS\nFOO=bar\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}

    def test_export_prefix(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('export A11Y_LOCALE=de_DE\n')
        assert _parse_dotenv(f) == {'A11Y_LOCALE': 'de_DE'}


class TestFindDotenv:
    def test_finds_in_parent(self, tmp_path: Path) -> None:
        subdir = tmp_path / 'sub'
        subdir.mkdir()
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert _find_dotenv(subdir) == dotenv

    def test_stops_at_git_dir(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        repo.mkdir()
        (tmp_path / '.env').write_text('X=1\n')
        (repo / '.git').mkdir()
        subdir = repo / 'src'
        subdir.mkdir()
        assert _find_dotenv(subdir) is None

    def test_stops_at_git_file(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        repo.mkdir()
        (tmp_path / '.env').write_text('X=1\n')
        (repo / '.git').write_text('gitdir: ../somewhere\n')
        assert _find_dotenv(repo) is None


class TestLoadEnv:
    def test_sets_missing_vars(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('A11Y_TEST_KEY', 'unset')
        monkeypatch.delenv('A11Y_TEST_KEY')
        (tmp_path / '.env').write_text('A11Y_TEST_KEY=from-file\n')
        (tmp_path / '.git').mkdir()
        monkeypatch.chdir(tmp_path)
        load_env()
        assert os.environ.get('A11Y_TEST_KEY') == 'from-file'

    def test_does_not_overwrite_existing(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('A11Y_TEST_KEY2', 'original')
        (tmp_path / '.env').write_text('A11Y_TEST_KEY2=fromfile\n')
        monkeypatch.chdir(tmp_path)
        load_env()
        assert os.environ.get('A11Y_TEST_KEY2') == 'original'

    def test_explicit_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('A11Y_TEST_KEY3', 'unset')
        monkeypatch.delenv('A11Y_TEST_KEY3')
        dotenv = tmp_path / 'custom.env'
        dotenv.write_text('A11Y_TEST_KEY3=custom\n')
        assert load_env(env_file=str(dotenv)) == dotenv
        assert os.environ.get('A11Y_TEST_KEY3') == 'custom'

    def test_explicit_missing_file(self, tmp_path: Path) -> None:
        assert load_env(env_file=str(tmp_path / 'missing.env')) is None

    def test_returns_none_when_no_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / '.git').mkdir()
        monkeypatch.chdir(tmp_path)
        assert load_env() is None


class TestSettings:
    @pytest.fixture(autouse=True)
    def _clean_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key in ('A11Y_LEVEL', 'A11Y_MIN_TOUCH_SIZE', 'A11Y_LOCALE'):
            monkeypatch.delenv(key, raising=False)

    def test_defaults(self) -> None:
        assert Settings.from_env() == Settings(level='AA', min_touch_size=44, locale='en_US')

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('A11Y_LEVEL', 'aaa')
        monkeypatch.setenv('A11Y_MIN_TOUCH_SIZE', '48')
        monkeypatch.setenv('A11Y_LOCALE', 'en_GB')
        assert Settings.from_env() == Settings(level='AAA', min_touch_size=48.0, locale='en_GB')

    def test_bad_values_fall_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('A11Y_LEVEL', 'gold')
        monkeypatch.setenv('A11Y_MIN_TOUCH_SIZE', 'big')
        settings = Settings.from_env()
        assert settings.level == 'AA'
        assert settings.min_touch_size == 44
