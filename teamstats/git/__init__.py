"""Git operations module."""

from teamstats.git.repository import (
    GitRepository,
    GitRepositoryError,
    HistoryUnavailableError,
    ObjectUnreadableError,
)

__all__ = [
    "GitRepository",
    "GitRepositoryError",
    "HistoryUnavailableError",
    "ObjectUnreadableError",
]
