"""Per-contributor activity over the history reachable from HEAD."""

import logging
from datetime import datetime
from typing import Optional

from teamstats.analysis.window import iter_window, utc_now
from teamstats.models import ContributorRecord, TraversalScope

logger = logging.getLogger(__name__)


class ContributorAggregator:
    """Group commits by author identity and sum their diff statistics.

    Only commits reachable from HEAD are counted, so work that lives
    solely on unmerged branches does not show up here. Two commits
    belong to the same contributor when both author name and email
    match exactly.
    """

    SCOPE = TraversalScope.HEAD

    def __init__(self, source, days: int = 0, now: Optional[datetime] = None):
        """Initialize the aggregator.

        Args:
            source: History source (``iter_commits`` and ``diff_stats``)
            days: Window length in days, 0 for all time
            now: Fixed reference time; defaults to the clock at each pass
        """
        self.source = source
        self.days = days
        self.now = now

    def aggregate(self) -> list[ContributorRecord]:
        """Run one pass over the history.

        Returns:
            Records sorted by commit count, highest first. Records with
            equal counts stay in the order they were first seen.

        Raises:
            GitRepositoryError: If the history cannot be read
        """
        now = self.now or utc_now()
        records: dict[str, ContributorRecord] = {}

        for commit in iter_window(self.source, self.SCOPE, self.days, now):
            key = ContributorRecord.identity_key(commit.author, commit.author_email)
            record = records.get(key)
            if record is None:
                record = ContributorRecord(name=commit.author, email=commit.author_email)
                records[key] = record
            record.add(self.source.diff_stats(commit))

        logger.debug("Aggregated %d contributors (days=%d)", len(records), self.days)
        return sorted(records.values(), key=lambda r: r.commits, reverse=True)


def aggregate_contributors(
    source, days: int = 0, now: Optional[datetime] = None
) -> list[ContributorRecord]:
    """Contributor view of the history reachable from HEAD."""
    return ContributorAggregator(source, days, now).aggregate()
