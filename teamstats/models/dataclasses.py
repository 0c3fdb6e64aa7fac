"""Data models for git history aggregation."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class TraversalScope(Enum):
    """Which refs a history walk starts from."""

    HEAD = "HEAD"
    ALL_REFS = "--all"


@dataclass(frozen=True)
class CommitInfo:
    """A commit as seen by the aggregators."""

    sha: str
    author: str
    author_email: str
    timestamp: datetime
    parents: tuple[str, ...] = ()

    @property
    def is_root(self) -> bool:
        """True for a commit without parents."""
        return not self.parents

    @property
    def is_merge(self) -> bool:
        """True for a commit with more than one parent."""
        return len(self.parents) > 1


@dataclass
class DiffStats:
    """Line and file counts of a commit against its first parent."""

    insertions: int = 0
    deletions: int = 0
    files_changed: int = 0
    paths: tuple[str, ...] = ()

    @property
    def total_changes(self) -> int:
        """Total lines changed (inserted + deleted)."""
        return self.insertions + self.deletions


@dataclass
class ContributorRecord:
    """Accumulated activity of one author identity."""

    name: str
    email: str
    commits: int = 0
    insertions: int = 0
    deletions: int = 0
    files_changed: int = 0

    @staticmethod
    def identity_key(name: str, email: str) -> str:
        """Key two commits must share to count as the same contributor."""
        return f"{name}|{email}"

    @property
    def key(self) -> str:
        return self.identity_key(self.name, self.email)

    @property
    def net(self) -> int:
        """Net line change (insertions - deletions)."""
        return self.insertions - self.deletions

    def add(self, stats: DiffStats) -> None:
        """Count one more commit and its diff totals."""
        self.commits += 1
        self.insertions += stats.insertions
        self.deletions += stats.deletions
        self.files_changed += stats.files_changed


@dataclass
class FileRecord:
    """Change frequency of a single path."""

    path: str
    changes: int = 0
    contributors: list[str] = field(default_factory=list)

    @property
    def contributor_count(self) -> int:
        return len(self.contributors)

    def touch(self, author: str) -> None:
        """Record one more change by ``author``."""
        self.changes += 1
        if author not in self.contributors:
            self.contributors.append(author)


@dataclass
class TimeDistribution:
    """Commit counts by local hour of day and by weekday (Monday = 0)."""

    hours: dict[int, int] = field(default_factory=dict)
    days: dict[int, int] = field(default_factory=dict)

    def add(self, hour: int, weekday: int) -> None:
        self.hours[hour] = self.hours.get(hour, 0) + 1
        self.days[weekday] = self.days.get(weekday, 0) + 1

    def hour_count(self, hour: int) -> int:
        return self.hours.get(hour, 0)

    def day_count(self, weekday: int) -> int:
        return self.days.get(weekday, 0)

    @property
    def total_commits(self) -> int:
        """Number of commits bucketed."""
        return sum(self.hours.values())

    @property
    def busiest_hour(self) -> Optional[int]:
        """Hour with the most commits, or None when empty."""
        if not self.hours:
            return None
        return max(sorted(self.hours), key=lambda h: self.hours[h])

    @property
    def busiest_day(self) -> Optional[int]:
        """Weekday with the most commits, or None when empty."""
        if not self.days:
            return None
        return max(sorted(self.days), key=lambda d: self.days[d])


@dataclass
class TeamSummary:
    """Totals over a list of contributors."""

    total_contributors: int = 0
    total_commits: int = 0
    total_insertions: int = 0
    total_deletions: int = 0
    days: int = 0

    @property
    def net_change(self) -> int:
        """Net line change across the team."""
        return self.total_insertions - self.total_deletions

    @property
    def period_label(self) -> str:
        """Human readable window description."""
        if self.days == 0:
            return "All Time"
        return f"Last {self.days} days"
