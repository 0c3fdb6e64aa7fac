"""Visualization module."""

from teamstats.visualization.charts import ChartGenerator
from teamstats.visualization.report import ReportGenerator

__all__ = ["ChartGenerator", "ReportGenerator"]
