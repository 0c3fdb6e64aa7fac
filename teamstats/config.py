"""Configuration for teamstats."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, TypeVar

from dotenv import load_dotenv

# Load .env file from the working directory
load_dotenv()

# Width of the longest bar in terminal distributions (characters)
BAR_WIDTH = 50

# Rows shown by the files command and in reports
DEFAULT_TOP_FILES = 20
REPORT_TOP_FILES = 10

# Report periods (days)
REPORT_PERIODS = {
    "weekly": 7,
    "monthly": 30,
}

T = TypeVar("T")


def _parse_teams(raw: Optional[str]) -> list[str]:
    if not raw:
        return []
    return [team.strip() for team in raw.split(",") if team.strip()]


def _parse_days(raw: Optional[str]) -> Optional[int]:
    if raw is None:
        return None
    try:
        days = int(raw)
    except ValueError:
        return None
    # Negative windows are meaningless
    return days if days >= 0 else None


def _parse_flag(raw: Optional[str], default: bool = True) -> bool:
    if raw is None:
        return default
    return raw.strip().lower() not in ("0", "false", "no", "off")


@dataclass
class Config:
    """Settings read from the environment (and a .env file)."""

    repository: Optional[Path] = None
    teams: list[str] = field(default_factory=list)
    default_days: Optional[int] = None
    fetch: bool = True

    @classmethod
    def from_env(cls) -> "Config":
        """Build a Config from GIT_REPO_PATH, GIT_TEAMS, DEFAULT_DAYS
        and GIT_TEAM_STATS_FETCH."""
        repository = os.getenv("GIT_REPO_PATH")
        return cls(
            repository=Path(repository) if repository else None,
            teams=_parse_teams(os.getenv("GIT_TEAMS")),
            default_days=_parse_days(os.getenv("DEFAULT_DAYS")),
            fetch=_parse_flag(os.getenv("GIT_TEAM_STATS_FETCH")),
        )

    def get_repo_path(self, cli_repo: Optional[Path] = None) -> Path:
        """Repository to open.

        An explicit --repo wins; the default "." defers to GIT_REPO_PATH.
        """
        if cli_repo is None or str(cli_repo) == ".":
            return self.repository or Path(".")
        return Path(cli_repo)

    def filter_by_teams(self, items: list[T], get_email: Callable[[T], str]) -> list[T]:
        """Keep items whose email contains one of the configured teams.

        Returns the list unchanged when no teams are configured.
        """
        if not self.teams:
            return items
        return [
            item
            for item in items
            if any(team in get_email(item) for team in self.teams)
        ]

    def get_days(self, cli_days: Optional[int], fallback: int) -> int:
        """Window for a command.

        Args:
            cli_days: Value of --days, None when not given
            fallback: The command's own default

        Returns:
            cli_days if given, else DEFAULT_DAYS, else fallback
        """
        if cli_days is not None:
            return cli_days
        if self.default_days is not None:
            return self.default_days
        return fallback

    def get_period_days(self, period: str) -> int:
        """Window for a report period.

        The weekly report always covers 7 days. The monthly report is
        open-ended: DEFAULT_DAYS replaces its 30 days when set.

        Args:
            period: Key of REPORT_PERIODS

        Returns:
            Number of days the report aggregates over
        """
        days = REPORT_PERIODS[period]
        if period == "monthly":
            return self.get_days(None, days)
        return days
