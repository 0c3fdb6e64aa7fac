"""Team-level totals derived from the contributor view."""

from teamstats.models import ContributorRecord, TeamSummary


def summarize(contributors: list[ContributorRecord], days: int = 0) -> TeamSummary:
    """Sum a contributor list into a TeamSummary.

    Args:
        contributors: Records from the contributor aggregator, possibly
            filtered down to configured teams
        days: Window the records were aggregated over, 0 for all time

    Returns:
        TeamSummary with commit and line totals
    """
    return TeamSummary(
        total_contributors=len(contributors),
        total_commits=sum(c.commits for c in contributors),
        total_insertions=sum(c.insertions for c in contributors),
        total_deletions=sum(c.deletions for c in contributors),
        days=days,
    )
