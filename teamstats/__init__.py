"""Team git statistics: contributors, file hotspots and commit timing."""

__version__ = "0.1.0"
