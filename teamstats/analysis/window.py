"""Day-count time window applied to commit timestamps."""

from datetime import datetime, timedelta, timezone
from typing import Optional


def utc_now() -> datetime:
    """Reference time for a pass that was not given one."""
    return datetime.now(timezone.utc)


def window_cutoff(days: int, now: datetime) -> Optional[datetime]:
    """Oldest timestamp still inside the window.

    Args:
        days: Window length in days, 0 for all time
        now: Reference time the window ends at

    Returns:
        The cutoff datetime, or None when the window covers all time
    """
    if days == 0:
        return None
    return now - timedelta(days=days)


def within_window(timestamp: datetime, days: int, now: datetime) -> bool:
    """Check whether a commit timestamp falls inside the window.

    The lower bound is inclusive: a commit exactly ``days`` days old
    is kept, one a second older is not. Negative ``days`` is not
    rejected here.

    Args:
        timestamp: Timezone-aware commit timestamp
        days: Window length in days, 0 for all time
        now: Reference time, captured once per aggregation pass

    Returns:
        True if the commit should be counted
    """
    cutoff = window_cutoff(days, now)
    if cutoff is None:
        return True
    return timestamp >= cutoff


def iter_window(source, scope, days: int, now: datetime):
    """Yield the commits reachable from ``scope`` that fall inside the window.

    Args:
        source: History source providing ``iter_commits(scope)``
        scope: TraversalScope to walk
        days: Window length in days, 0 for all time
        now: Reference time for the whole pass

    Yields:
        CommitInfo objects inside the window, in traversal order
    """
    for commit in source.iter_commits(scope):
        if within_window(commit.timestamp, days, now):
            yield commit
