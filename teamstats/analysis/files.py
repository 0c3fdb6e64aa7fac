"""File change frequency over the history reachable from every ref."""

import logging
from datetime import datetime
from typing import Optional

from teamstats.analysis.window import iter_window, utc_now
from teamstats.models import FileRecord, TraversalScope

logger = logging.getLogger(__name__)


class FileAggregator:
    """Count how often each path changes and who changes it.

    Walks every branch and tag, not just HEAD, so hotspots include
    work on unmerged branches. A path counts once per commit whose
    first-parent diff reports it.
    """

    SCOPE = TraversalScope.ALL_REFS

    def __init__(self, source, days: int = 0, now: Optional[datetime] = None):
        """Initialize the aggregator.

        Args:
            source: History source (``iter_commits`` and ``changed_paths``)
            days: Window length in days, 0 for all time
            now: Fixed reference time; defaults to the clock at each pass
        """
        self.source = source
        self.days = days
        self.now = now

    def aggregate(self) -> list[FileRecord]:
        """Run one pass over the history.

        Returns:
            Every touched path, sorted by change count, highest first.
            The list is never truncated; limiting happens at display time.
        """
        now = self.now or utc_now()
        records: dict[str, FileRecord] = {}

        for commit in iter_window(self.source, self.SCOPE, self.days, now):
            for path in self.source.changed_paths(commit):
                record = records.get(path)
                if record is None:
                    record = FileRecord(path=path)
                    records[path] = record
                record.touch(commit.author)

        logger.debug("Aggregated %d files (days=%d)", len(records), self.days)
        return sorted(records.values(), key=lambda r: r.changes, reverse=True)


def aggregate_files(source, days: int = 0, now: Optional[datetime] = None) -> list[FileRecord]:
    """File view of the history reachable from all refs."""
    return FileAggregator(source, days, now).aggregate()
