"""Tests for environment configuration."""

from pathlib import Path

import pytest

from teamstats.config import Config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("GIT_REPO_PATH", "GIT_TEAMS", "DEFAULT_DAYS", "GIT_TEAM_STATS_FETCH"):
        monkeypatch.delenv(name, raising=False)


class TestFromEnv:
    """Tests for Config.from_env."""

    def test_defaults(self):
        config = Config.from_env()

        assert config.repository is None
        assert config.teams == []
        assert config.default_days is None
        assert config.fetch is True

    def test_reads_all_settings(self, monkeypatch):
        monkeypatch.setenv("GIT_REPO_PATH", "/srv/repo")
        monkeypatch.setenv("GIT_TEAMS", " example.com, ,corp.io ")
        monkeypatch.setenv("DEFAULT_DAYS", "14")
        monkeypatch.setenv("GIT_TEAM_STATS_FETCH", "false")

        config = Config.from_env()

        assert config.repository == Path("/srv/repo")
        assert config.teams == ["example.com", "corp.io"]
        assert config.default_days == 14
        assert config.fetch is False

    @pytest.mark.parametrize("raw", ["soon", "-3", ""])
    def test_invalid_days_ignored(self, monkeypatch, raw):
        monkeypatch.setenv("DEFAULT_DAYS", raw)
        assert Config.from_env().default_days is None


class TestRepoPath:
    """Tests for get_repo_path."""

    def test_default_without_env(self):
        assert Config().get_repo_path(Path(".")) == Path(".")

    def test_default_uses_env(self):
        config = Config(repository=Path("/srv/repo"))
        assert config.get_repo_path(Path(".")) == Path("/srv/repo")

    def test_explicit_path_wins(self):
        config = Config(repository=Path("/srv/repo"))
        assert config.get_repo_path(Path("/tmp/other")) == Path("/tmp/other")


class TestFilterByTeams:
    """Tests for filter_by_teams."""

    def test_no_teams_keeps_everything(self):
        items = ["alice@example.com", "bob@example.com"]
        assert Config().filter_by_teams(items, lambda s: s) == items

    def test_filters_by_email_fragment(self):
        config = Config(teams=["example.com"])
        items = ["alice@example.com", "bob@other.com"]
        assert config.filter_by_teams(items, lambda s: s) == ["alice@example.com"]


class TestGetDays:
    """Tests for get_days."""

    def test_cli_value_wins(self):
        assert Config(default_days=14).get_days(3, 30) == 3

    def test_explicit_zero_wins(self):
        assert Config(default_days=14).get_days(0, 30) == 0

    def test_env_default_used_when_not_given(self):
        assert Config(default_days=14).get_days(None, 30) == 14

    def test_command_fallback(self):
        assert Config().get_days(None, 30) == 30


class TestGetPeriodDays:
    """Tests for get_period_days."""

    def test_periods_without_env(self):
        assert Config().get_period_days("weekly") == 7
        assert Config().get_period_days("monthly") == 30

    def test_env_default_replaces_monthly(self):
        assert Config(default_days=90).get_period_days("monthly") == 90

    def test_weekly_is_fixed(self):
        assert Config(default_days=90).get_period_days("weekly") == 7
