"""Rich terminal rendering of the aggregates."""

from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from teamstats.config import BAR_WIDTH
from teamstats.models import ContributorRecord, FileRecord, TeamSummary, TimeDistribution

WEEKDAYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def format_net(net: int) -> str:
    """Signed, colored net line change."""
    if net >= 0:
        return f"[green]+{net:,}[/green]"
    return f"[red]{net:,}[/red]"


def bar(count: int, maximum: int, width: int = BAR_WIDTH) -> str:
    """Bar of block characters proportional to count / maximum."""
    if maximum <= 0:
        return ""
    return "█" * int(count / maximum * width)


def contributors_table(records: list[ContributorRecord]) -> Table:
    """Table of contributors in the order given."""
    table = Table(title="Contributor Statistics")
    table.add_column("Contributor", style="cyan")
    table.add_column("Commits", style="green", justify="right")
    table.add_column("Additions", style="green", justify="right")
    table.add_column("Deletions", style="red", justify="right")
    table.add_column("Files", style="yellow", justify="right")
    table.add_column("Net", justify="right")

    for record in records:
        table.add_row(
            escape(f"{record.name} <{record.email}>"),
            f"{record.commits:,}",
            f"{record.insertions:,}",
            f"{record.deletions:,}",
            f"{record.files_changed:,}",
            format_net(record.net),
        )

    return table


def files_table(records: list[FileRecord], top: int) -> Table:
    """Table of the ``top`` most changed files."""
    table = Table(title="Most Changed Files")
    table.add_column("Rank", style="cyan", justify="right")
    table.add_column("File Path", style="cyan")
    table.add_column("Changes", style="green", justify="right")
    table.add_column("Contributors", style="yellow", justify="right")

    for rank, record in enumerate(records[:top], start=1):
        table.add_row(
            str(rank),
            escape(record.path),
            f"{record.changes:,}",
            str(record.contributor_count),
        )

    return table


def print_time_distribution(console: Console, distribution: TimeDistribution) -> None:
    """Print hour-of-day and day-of-week bars, scaled to the busiest bucket."""
    console.print("\n[bold cyan]Time-based Commit Analysis[/bold cyan]\n")

    console.print("[bold]Commits by Hour:[/bold]")
    max_hour = max(distribution.hours.values(), default=1)
    for hour in range(24):
        count = distribution.hour_count(hour)
        console.print(
            f"{hour:02d}:00 │ [green]{bar(count, max_hour)}[/green] [dim]({count})[/dim]"
        )

    console.print()
    console.print("[bold]Commits by Day of Week:[/bold]")
    max_day = max(distribution.days.values(), default=1)
    for index, day in enumerate(WEEKDAYS):
        count = distribution.day_count(index)
        console.print(
            f"{day} │ [cyan]{bar(count, max_day)}[/cyan] [dim]({count})[/dim]"
        )
    console.print()


def print_summary(
    console: Console, summary: TeamSummary, repo_path: Optional[Path] = None
) -> None:
    """Print team totals for the window."""
    console.print("\n[bold cyan]Team Summary[/bold cyan]\n")

    table = Table(show_header=False)
    table.add_column("Metric", style="bold")
    table.add_column("Value")

    table.add_row("Period", f"[yellow]{summary.period_label}[/yellow]")
    table.add_row("Total Contributors", f"[green]{summary.total_contributors:,}[/green]")
    table.add_row("Total Commits", f"[cyan]{summary.total_commits:,}[/cyan]")
    table.add_row("Lines Added", f"[green]+{summary.total_insertions:,}[/green]")
    table.add_row("Lines Deleted", f"[red]-{summary.total_deletions:,}[/red]")
    table.add_row("Net Change", format_net(summary.net_change))
    if repo_path is not None:
        table.add_row("Repository", f"[yellow]{escape(str(repo_path))}[/yellow]")

    console.print(table)
