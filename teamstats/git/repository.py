"""GitPython wrapper exposing repository history to the aggregators."""

import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Iterator

from git import Repo
from git.exc import (
    GitCommandError,
    InvalidGitRepositoryError,
    NoSuchPathError,
    ODBError,
)

from teamstats.models import CommitInfo, DiffStats, TraversalScope

logger = logging.getLogger(__name__)


def _count(value: bytes) -> int:
    # Binary files report "-" instead of line counts
    return int(value) if value.isdigit() else 0


def parse_numstat(raw: bytes) -> DiffStats:
    """Parse ``git diff-tree --numstat -z --no-renames`` output.

    Each record is ``added<TAB>deleted<TAB>path`` terminated by NUL.
    Paths are decoded as UTF-8, replacing undecodable bytes.

    Args:
        raw: Raw command output

    Returns:
        DiffStats summed over every record
    """
    insertions = deletions = 0
    paths = []

    for record in raw.split(b"\0"):
        if not record.strip():
            continue
        parts = record.split(b"\t", 2)
        if len(parts) != 3 or not parts[2]:
            logger.debug("Skipping unparsable numstat record: %r", record)
            continue
        added, deleted, path = parts
        insertions += _count(added.strip())
        deletions += _count(deleted)
        paths.append(path.decode("utf-8", errors="replace"))

    return DiffStats(
        insertions=insertions,
        deletions=deletions,
        files_changed=len(paths),
        paths=tuple(paths),
    )


class GitRepositoryError(Exception):
    """Exception raised for git repository errors."""

    pass


class HistoryUnavailableError(GitRepositoryError):
    """The repository cannot be opened or its refs cannot be walked."""


class ObjectUnreadableError(GitRepositoryError):
    """A commit or tree failed to resolve during traversal."""


class GitRepository:
    """Read-only history source backed by GitPython.

    Walks commits reachable from HEAD or from every ref, and
    summarizes each commit's diff against its first parent.
    """

    def __init__(self, path: str):
        """Initialize the repository wrapper.

        Args:
            path: Path to the git repository

        Raises:
            HistoryUnavailableError: If path is not a valid git repository
        """
        self.path = Path(path)

        try:
            self._repo = Repo(self.path)
        except (InvalidGitRepositoryError, NoSuchPathError) as e:
            raise HistoryUnavailableError(f"Not a git repository: {path}") from e

    @property
    def name(self) -> str:
        """Get the repository name from the directory."""
        return self.path.resolve().name

    @property
    def working_dir(self) -> Path:
        """Top-level directory of the repository."""
        return Path(self._repo.working_tree_dir or self._repo.git_dir)

    @property
    def remotes(self) -> list[str]:
        """Names of the configured remotes."""
        return [remote.name for remote in self._repo.remotes]

    def iter_commits(self, scope: TraversalScope = TraversalScope.HEAD) -> Iterator[CommitInfo]:
        """Iterate over the commits reachable from ``scope``.

        Args:
            scope: HEAD only, or the union of all refs

        Yields:
            CommitInfo for every reachable commit, newest first

        Raises:
            HistoryUnavailableError: If the refs cannot be walked
            ObjectUnreadableError: If a commit object cannot be read
        """
        try:
            for git_commit in self._repo.iter_commits(rev=scope.value):
                yield self._convert_commit(git_commit)
        except GitCommandError as e:
            raise HistoryUnavailableError(
                f"Cannot walk history from {scope.name}: {e}"
            ) from e

    def _convert_commit(self, git_commit) -> CommitInfo:
        """Convert a GitPython commit to our CommitInfo model.

        The timestamp keeps the committer's recorded UTC offset.
        """
        try:
            author = git_commit.author
            offset = timezone(timedelta(seconds=-git_commit.committer_tz_offset))
            timestamp = datetime.fromtimestamp(git_commit.committed_date, tz=offset)
            parents = tuple(parent.hexsha for parent in git_commit.parents)
        except (ValueError, ODBError) as e:
            raise ObjectUnreadableError(
                f"Cannot read commit {git_commit.hexsha}: {e}"
            ) from e

        return CommitInfo(
            sha=git_commit.hexsha,
            author=author.name or "unknown",
            author_email=author.email or "unknown",
            timestamp=timestamp,
            parents=parents,
        )

    def diff_stats(self, commit: CommitInfo) -> DiffStats:
        """Summarize a commit's diff against its first parent.

        Root commits are compared with the empty tree, so all of their
        content counts as insertions. Further parents of a merge are
        ignored. Renames show up as a deletion plus an addition.

        Args:
            commit: Commit to summarize

        Returns:
            DiffStats with line counts and changed paths; zero counts when
            git fails to compute the diff

        Raises:
            ObjectUnreadableError: If the commit or one of the compared
                trees is missing from the object database
        """
        git_commit = self._resolve_commit(commit.sha)

        # First parent, or the empty tree (--root) for the initial commit
        revs = [git_commit.hexsha]
        if git_commit.parents:
            revs.insert(0, git_commit.parents[0].hexsha)

        try:
            # -z leaves paths unquoted; --no-renames overrides diff.renames
            raw = self._repo.git.diff_tree(
                *revs,
                "--",
                r=True,
                root=True,
                no_commit_id=True,
                numstat=True,
                no_renames=True,
                z=True,
                stdout_as_string=False,
            )
        except GitCommandError as e:
            logger.debug("Diff failed for %s, counting zero: %s", commit.sha[:8], e)
            return DiffStats()

        return parse_numstat(raw)

    def changed_paths(self, commit: CommitInfo) -> list[str]:
        """Paths touched by a commit relative to its first parent."""
        return list(self.diff_stats(commit).paths)

    def _resolve_commit(self, sha: str):
        """Look up a commit and make sure both compared trees exist."""
        try:
            git_commit = self._repo.commit(sha)
            trees = [git_commit.tree]
            if git_commit.parents:
                trees.append(git_commit.parents[0].tree)
            for tree in trees:
                self._repo.odb.info(tree.binsha)
        except (ValueError, ODBError) as e:
            raise ObjectUnreadableError(f"Cannot resolve commit {sha}: {e}") from e
        return git_commit

    def fetch_remotes(self) -> int:
        """Fetch the branches of every remote into remote-tracking refs.

        A remote that fails to fetch (offline, auth) is skipped.

        Returns:
            Number of remotes fetched successfully
        """
        fetched = 0
        for remote in self._repo.remotes:
            refspec = f"+refs/heads/*:refs/remotes/{remote.name}/*"
            try:
                remote.fetch(refspec)
            except GitCommandError as e:
                logger.debug("Fetch from %s failed: %s", remote.name, e)
                continue
            fetched += 1
        return fetched
