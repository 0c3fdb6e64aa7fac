"""HTML and JSON report generator using Jinja2."""

from dataclasses import asdict
from datetime import datetime
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader
import plotly.graph_objects as go

from teamstats.models import ContributorRecord, FileRecord, TeamSummary, TimeDistribution
from teamstats.visualization.tables import WEEKDAYS


class ReportGenerator:
    """Generate reports from charts and aggregates.

    Uses Jinja2 templates to create self-contained HTML reports
    with embedded Plotly charts.
    """

    def __init__(
        self,
        figures: list[go.Figure],
        summary: Optional[TeamSummary] = None,
        contributors: Optional[list[ContributorRecord]] = None,
        files: Optional[list[FileRecord]] = None,
        distribution: Optional[TimeDistribution] = None,
        title: str = "Team Git Report",
        repo_path: Optional[str] = None,
        top_files: int = 10,
    ):
        """Initialize the report generator.

        Args:
            figures: List of Plotly Figure objects to include
            summary: Optional TeamSummary for the summary section
            contributors: Ranked contributor records
            files: Ranked file records; only ``top_files`` are listed
            distribution: Hour and weekday commit counts
            title: Report title
            repo_path: Optional repository path for display
            top_files: Number of files listed in the report
        """
        self.figures = figures
        self.summary = summary
        self.contributors = contributors or []
        self.files = files or []
        self.distribution = distribution or TimeDistribution()
        self.title = title
        self.repo_path = repo_path
        self.top_files = top_files

        # Set up Jinja2 environment
        template_dir = Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=True,
        )

    def generate_html(self) -> str:
        """Generate HTML report with embedded charts.

        Returns:
            Complete HTML document as string
        """
        template = self.env.get_template("report.html")

        # Template loads Plotly.js from the CDN once
        chart_htmls = [
            fig.to_html(full_html=False, include_plotlyjs=False) for fig in self.figures
        ]

        return template.render(
            title=self.title,
            repo_path=self.repo_path,
            summary=self._build_summary(),
            contributors=self.contributors,
            files=self.files[: self.top_files],
            charts=chart_htmls,
            generated_at=datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        )

    def write_html(self, output_path: str | Path) -> Path:
        """Write HTML report to file.

        Args:
            output_path: Path to write the HTML file

        Returns:
            The path written
        """
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.generate_html(), encoding="utf-8")
        return path

    def to_json(self) -> dict:
        """Export report data as JSON-serializable dict.

        Returns:
            Dictionary with summary, aggregates and chart specifications
        """
        return {
            "title": self.title,
            "repository": self.repo_path,
            "summary": self._build_summary(),
            "contributors": [asdict(c) for c in self.contributors],
            "files": [asdict(f) for f in self.files[: self.top_files]],
            "time_distribution": {
                "hours": {str(h): self.distribution.hour_count(h) for h in range(24)},
                "days": {
                    day: self.distribution.day_count(i) for i, day in enumerate(WEEKDAYS)
                },
            },
            "charts": [
                {
                    "title": fig.layout.title.text if fig.layout.title.text else None,
                    "spec": fig.to_json(),
                }
                for fig in self.figures
            ],
        }

    def _build_summary(self) -> dict[str, str]:
        """Build summary dictionary for template.

        Returns:
            Dictionary of summary key-value pairs
        """
        if not self.summary:
            return {}

        net = self.summary.net_change
        summary = {
            "Period": self.summary.period_label,
            "Contributors": f"{self.summary.total_contributors:,}",
            "Total Commits": f"{self.summary.total_commits:,}",
            "Lines Added": f"+{self.summary.total_insertions:,}",
            "Lines Deleted": f"-{self.summary.total_deletions:,}",
            "Net Change": f"+{net:,}" if net >= 0 else f"{net:,}",
        }

        busiest_hour = self.distribution.busiest_hour
        if busiest_hour is not None:
            summary["Busiest Hour"] = f"{busiest_hour:02d}:00"

        busiest_day = self.distribution.busiest_day
        if busiest_day is not None:
            summary["Busiest Day"] = WEEKDAYS[busiest_day]

        return summary
