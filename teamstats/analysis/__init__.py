"""Analysis module."""

from teamstats.analysis.window import within_window, window_cutoff
from teamstats.analysis.contributors import ContributorAggregator, aggregate_contributors
from teamstats.analysis.files import FileAggregator, aggregate_files
from teamstats.analysis.timeline import TimeAggregator, aggregate_time_distribution
from teamstats.analysis.summary import summarize

__all__ = [
    "within_window",
    "window_cutoff",
    "ContributorAggregator",
    "aggregate_contributors",
    "FileAggregator",
    "aggregate_files",
    "TimeAggregator",
    "aggregate_time_distribution",
    "summarize",
]
