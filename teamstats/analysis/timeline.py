"""Commit distribution by local hour of day and weekday."""

import logging
from datetime import datetime, tzinfo
from typing import Optional

from teamstats.analysis.window import iter_window, utc_now
from teamstats.models import TimeDistribution, TraversalScope

logger = logging.getLogger(__name__)


class TimeAggregator:
    """Bucket commits from every ref by hour (0-23) and weekday (Monday = 0).

    Timestamps are converted to the evaluating machine's local time
    zone, not the committer's recorded offset.
    """

    SCOPE = TraversalScope.ALL_REFS

    def __init__(
        self,
        source,
        days: int = 0,
        now: Optional[datetime] = None,
        tz: Optional[tzinfo] = None,
    ):
        """Initialize the aggregator.

        Args:
            source: History source providing ``iter_commits``
            days: Window length in days, 0 for all time
            now: Fixed reference time; defaults to the clock at each pass
            tz: Time zone to bucket in; defaults to the local zone
        """
        self.source = source
        self.days = days
        self.now = now
        self.tz = tz

    def aggregate(self) -> TimeDistribution:
        now = self.now or utc_now()
        distribution = TimeDistribution()

        for commit in iter_window(self.source, self.SCOPE, self.days, now):
            local = commit.timestamp.astimezone(self.tz)
            distribution.add(local.hour, local.weekday())

        logger.debug(
            "Bucketed %d commits by time (days=%d)",
            distribution.total_commits,
            self.days,
        )
        return distribution


def aggregate_time_distribution(
    source,
    days: int = 0,
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None,
) -> TimeDistribution:
    """Time-of-day and day-of-week view of the history reachable from all refs."""
    return TimeAggregator(source, days, now, tz).aggregate()
