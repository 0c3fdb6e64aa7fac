"""Shared pytest fixtures for teamstats tests."""

from datetime import datetime, timedelta, timezone

import pytest

from teamstats.models import CommitInfo, ContributorRecord, DiffStats, FileRecord, TimeDistribution, TraversalScope

# Reference time injected into every aggregation pass under test
NOW = datetime(2024, 6, 12, 12, 0, 0, tzinfo=timezone.utc)


class FakeHistory:
    """In-memory history source.

    Commits added with ``on_head=False`` are only reachable from
    other refs, like work on an unmerged branch.
    """

    def __init__(self):
        self.commits: dict[str, CommitInfo] = {}
        self.diffs: dict[str, DiffStats] = {}
        self.head: list[str] = []
        self.branches: list[str] = []
        self.broken: dict[str, Exception] = {}
        self.walked_scopes: list[TraversalScope] = []

    def add(
        self,
        sha,
        author="Alice",
        email="a@x.com",
        timestamp=NOW,
        parents=(),
        insertions=0,
        deletions=0,
        paths=(),
        on_head=True,
    ):
        self.commits[sha] = CommitInfo(
            sha=sha,
            author=author,
            author_email=email,
            timestamp=timestamp,
            parents=tuple(parents),
        )
        self.diffs[sha] = DiffStats(
            insertions=insertions,
            deletions=deletions,
            files_changed=len(paths),
            paths=tuple(paths),
        )
        (self.head if on_head else self.branches).append(sha)
        return self.commits[sha]

    def reorder(self, order):
        """Copy of this history walked in a different order."""
        other = FakeHistory()
        other.commits = dict(self.commits)
        other.diffs = dict(self.diffs)
        other.broken = dict(self.broken)
        other.head = [sha for sha in order if sha in self.head]
        other.branches = [sha for sha in order if sha in self.branches]
        return other

    def iter_commits(self, scope=TraversalScope.HEAD):
        self.walked_scopes.append(scope)
        shas = list(self.head)
        if scope is TraversalScope.ALL_REFS:
            shas += self.branches
        for sha in shas:
            if sha in self.broken:
                raise self.broken[sha]
            yield self.commits[sha]

    def diff_stats(self, commit):
        return self.diffs[commit.sha]

    def changed_paths(self, commit):
        return list(self.diffs[commit.sha].paths)


@pytest.fixture
def now():
    """Fixed reference time."""
    return NOW


@pytest.fixture
def history():
    """Empty in-memory history."""
    return FakeHistory()


@pytest.fixture
def team_history():
    """Three commits by Alice, one by Bob, one on an unmerged branch by Carol."""
    h = FakeHistory()
    for i in range(3):
        h.add(
            f"a{i}",
            author="Alice",
            email="a@x.com",
            timestamp=NOW - timedelta(hours=i + 1),
            insertions=10,
            paths=["README.md"] if i == 0 else [f"src/a{i}.py"],
        )
    h.add(
        "b0",
        author="Bob",
        email="b@x.com",
        timestamp=NOW - timedelta(hours=5),
        insertions=5,
        deletions=2,
        paths=["README.md", "src/b.py"],
    )
    h.add(
        "c0",
        author="Carol",
        email="c@y.org",
        timestamp=NOW - timedelta(hours=6),
        insertions=7,
        paths=["src/feature.py"],
        on_head=False,
    )
    return h


@pytest.fixture
def sample_contributors():
    """Ranked contributor records."""
    return [
        ContributorRecord(name="Alice", email="a@x.com", commits=3, insertions=30, files_changed=3),
        ContributorRecord(name="Bob", email="b@x.com", commits=1, insertions=5, deletions=2, files_changed=2),
    ]


@pytest.fixture
def sample_files():
    """Ranked file records."""
    return [
        FileRecord(path="README.md", changes=2, contributors=["Alice", "Bob"]),
        FileRecord(path="src/b.py", changes=1, contributors=["Bob"]),
    ]


@pytest.fixture
def sample_distribution():
    """Commits spread over a few hours and weekdays."""
    return TimeDistribution(hours={9: 2, 14: 5, 22: 1}, days={0: 3, 2: 4, 5: 1})
