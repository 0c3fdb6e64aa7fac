"""Data models for teamstats."""

from teamstats.models.dataclasses import (
    TraversalScope,
    CommitInfo,
    DiffStats,
    ContributorRecord,
    FileRecord,
    TimeDistribution,
    TeamSummary,
)

__all__ = [
    "TraversalScope",
    "CommitInfo",
    "DiffStats",
    "ContributorRecord",
    "FileRecord",
    "TimeDistribution",
    "TeamSummary",
]
