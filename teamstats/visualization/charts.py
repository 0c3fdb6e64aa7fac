"""Plotly chart generators."""

from typing import Optional

import plotly.graph_objects as go

from teamstats.models import ContributorRecord, FileRecord, TimeDistribution
from teamstats.visualization.tables import WEEKDAYS


class ChartGenerator:
    """Generate Plotly charts from the aggregates.

    All chart methods return Plotly Figure objects that can be
    rendered to HTML or serialized to JSON.
    """

    # Color palette for charts
    COLORS = {
        "primary": "#2563eb",
        "secondary": "#7c3aed",
        "success": "#16a34a",
        "danger": "#dc2626",
        "warning": "#d97706",
        "info": "#0891b2",
    }

    # Bars shown in ranked charts
    MAX_BARS = 15

    def __init__(
        self,
        contributors: Optional[list[ContributorRecord]] = None,
        files: Optional[list[FileRecord]] = None,
        distribution: Optional[TimeDistribution] = None,
    ):
        """Initialize the chart generator.

        Args:
            contributors: Ranked contributor records
            files: Ranked file records
            distribution: Hour and weekday commit counts
        """
        self.contributors = contributors or []
        self.files = files or []
        self.distribution = distribution or TimeDistribution()

    def hourly_chart(self) -> go.Figure:
        """Generate activity by hour chart.

        Returns:
            Plotly Figure with one bar per hour of the day
        """
        if not self.distribution.hours:
            return self._empty_figure("No commit time data available")

        hours = list(range(24))
        counts = [self.distribution.hour_count(h) for h in hours]

        fig = go.Figure(
            data=[
                go.Bar(
                    x=[f"{h:02d}:00" for h in hours],
                    y=counts,
                    marker=dict(
                        color=counts,
                        colorscale="Blues",
                        showscale=True,
                        colorbar=dict(title="Commits"),
                    ),
                    hovertemplate="%{x}<br>%{y} commits<extra></extra>",
                )
            ]
        )

        fig.update_layout(
            title="Commit Activity by Hour",
            xaxis_title="Hour of Day",
            yaxis_title="Commits",
            template="plotly_white",
            xaxis=dict(tickangle=-45),
        )

        return fig

    def weekday_chart(self) -> go.Figure:
        """Generate activity by day of week chart."""
        if not self.distribution.days:
            return self._empty_figure("No commit time data available")

        counts = [self.distribution.day_count(d) for d in range(7)]

        fig = go.Figure(
            data=[
                go.Bar(
                    x=WEEKDAYS,
                    y=counts,
                    marker_color=self.COLORS["secondary"],
                    hovertemplate="%{x}<br>%{y} commits<extra></extra>",
                )
            ]
        )

        fig.update_layout(
            title="Commit Activity by Day of Week",
            xaxis_title="Day",
            yaxis_title="Commits",
            template="plotly_white",
        )

        return fig

    def contributor_chart(self) -> go.Figure:
        """Generate bar chart of commits by contributor.

        Returns:
            Plotly Figure with the top contributors in ranked order
        """
        if not self.contributors:
            return self._empty_figure("No contributor data available")

        top = self.contributors[: self.MAX_BARS]

        fig = go.Figure(
            data=[
                go.Bar(
                    x=[c.name for c in top],
                    y=[c.commits for c in top],
                    marker_color=self.COLORS["info"],
                    customdata=[c.email for c in top],
                    hovertemplate="%{x} &lt;%{customdata}&gt;<br>%{y} commits<extra></extra>",
                )
            ]
        )

        fig.update_layout(
            title="Commits by Contributor",
            xaxis_title="Contributor",
            yaxis_title="Commits",
            template="plotly_white",
            xaxis=dict(tickangle=-45),
        )

        return fig

    def churn_chart(self) -> go.Figure:
        """Generate additions vs deletions per contributor.

        Returns:
            Plotly Figure with grouped bars and the team net change
        """
        if not self.contributors:
            return self._empty_figure("No contributor data available")

        top = self.contributors[: self.MAX_BARS]
        names = [c.name for c in top]

        fig = go.Figure(
            data=[
                go.Bar(
                    name="Lines Added",
                    x=names,
                    y=[c.insertions for c in top],
                    marker_color=self.COLORS["success"],
                ),
                go.Bar(
                    name="Lines Deleted",
                    x=names,
                    y=[c.deletions for c in top],
                    marker_color=self.COLORS["danger"],
                ),
            ]
        )

        fig.update_layout(
            title="Code Churn by Contributor",
            yaxis_title="Lines",
            template="plotly_white",
            barmode="group",
            showlegend=True,
        )

        # Net change across every contributor, not just the plotted ones
        net_change = sum(c.net for c in self.contributors)
        sign = "+" if net_change >= 0 else ""
        fig.add_annotation(
            text=f"Net: {sign}{net_change:,} lines",
            xref="paper",
            yref="paper",
            x=0.5,
            y=1.05,
            showarrow=False,
            font=dict(size=12),
        )

        return fig

    def hotspot_chart(self) -> go.Figure:
        """Generate horizontal bar chart of the most changed files."""
        if not self.files:
            return self._empty_figure("No file change data available")

        # Reverse so the hottest file ends up on top
        top = list(reversed(self.files[: self.MAX_BARS]))

        fig = go.Figure(
            data=[
                go.Bar(
                    x=[f.changes for f in top],
                    y=[f.path for f in top],
                    orientation="h",
                    marker_color=self.COLORS["warning"],
                    customdata=[f.contributor_count for f in top],
                    hovertemplate="%{y}<br>%{x} changes, %{customdata} contributors<extra></extra>",
                )
            ]
        )

        fig.update_layout(
            title="File Hotspots",
            xaxis_title="Changes",
            template="plotly_white",
        )

        return fig

    def all_charts(self) -> list[go.Figure]:
        """Generate all available charts.

        Returns:
            List of Plotly Figure objects
        """
        return [
            self.contributor_chart(),
            self.churn_chart(),
            self.hotspot_chart(),
            self.hourly_chart(),
            self.weekday_chart(),
        ]

    def _empty_figure(self, message: str) -> go.Figure:
        """Create an empty figure with a message.

        Args:
            message: Message to display

        Returns:
            Empty Plotly Figure with centered message
        """
        fig = go.Figure()
        fig.add_annotation(
            text=message,
            xref="paper",
            yref="paper",
            x=0.5,
            y=0.5,
            showarrow=False,
            font=dict(size=16, color="#6b7280"),
        )
        fig.update_layout(
            template="plotly_white",
            xaxis=dict(showgrid=False, showticklabels=False, zeroline=False),
            yaxis=dict(showgrid=False, showticklabels=False, zeroline=False),
        )
        return fig
