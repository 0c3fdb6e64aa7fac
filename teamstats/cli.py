"""CLI interface for teamstats."""

import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.rule import Rule

from teamstats.config import (
    DEFAULT_TOP_FILES,
    REPORT_PERIODS,
    REPORT_TOP_FILES,
    Config,
)
from teamstats.git.repository import GitRepository, GitRepositoryError
from teamstats.analysis import (
    aggregate_contributors,
    aggregate_files,
    aggregate_time_distribution,
    summarize,
)
from teamstats.visualization.charts import ChartGenerator
from teamstats.visualization.report import ReportGenerator
from teamstats.visualization.tables import (
    contributors_table,
    files_table,
    print_summary,
    print_time_distribution,
)


console = Console()
logger = logging.getLogger(__name__)


def days_option(fallback: int):
    """--days option; None when not given so DEFAULT_DAYS can apply."""
    return click.option(
        "-d",
        "--days",
        type=click.IntRange(min=0),
        default=None,
        help=f"Number of days to analyze, 0 = all time [default: {fallback}]",
    )


@dataclass
class CliState:
    """Options shared by every command."""

    config: Config
    repo_path: Path
    fetch: bool


def setup_logging(verbose: bool) -> None:
    """Send teamstats log records to the console through rich."""
    package_logger = logging.getLogger("teamstats")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(
            RichHandler(console=console, show_path=False, show_time=False)
        )


def fail(error: Exception) -> None:
    """Print an error and exit with status 1."""
    console.print(f"[red]Error: {escape(str(error))}[/red]")
    sys.exit(1)


def fetch_remotes(repo: GitRepository) -> None:
    """Fetch every remote before analysis, reporting but never failing."""
    if not repo.remotes:
        console.print("[dim]No remotes configured, skipping fetch[/dim]")
        return

    with console.status("Fetching latest data from remotes..."):
        fetched = repo.fetch_remotes()

    if fetched:
        console.print(f"[green]Fetched {fetched} remote(s)[/green]")
    else:
        console.print("[yellow]Could not fetch remotes, using local data[/yellow]")


def open_repository(state: CliState) -> GitRepository:
    """Open the configured repository and optionally fetch its remotes."""
    logger.info("Opening repository: %s", state.repo_path)
    repo = GitRepository(str(state.repo_path))
    if state.fetch:
        fetch_remotes(repo)
    return repo


@click.group()
@click.version_option(package_name="git-team-stats")
@click.option(
    "-r",
    "--repo",
    type=click.Path(path_type=Path),
    default=".",
    help="Path to the Git repository (defaults to current directory)",
)
@click.option(
    "--fetch/--no-fetch",
    default=None,
    help="Fetch all remotes before analysis (default: on)",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
@click.pass_context
def cli(ctx, repo, fetch, verbose):
    """Team Git statistics and analysis tool."""
    setup_logging(verbose)
    config = Config.from_env()
    ctx.obj = CliState(
        config=config,
        repo_path=config.get_repo_path(repo),
        fetch=config.fetch if fetch is None else fetch,
    )


@cli.command()
@days_option(0)
@click.pass_obj
def contributors(state: CliState, days: Optional[int]):
    """Show contributor statistics."""
    days = state.config.get_days(days, 0)
    try:
        repo = open_repository(state)
        records = aggregate_contributors(repo, days)
    except GitRepositoryError as e:
        fail(e)

    records = state.config.filter_by_teams(records, lambda r: r.email)
    if not records:
        console.print("[yellow]No commits found matching criteria.[/yellow]")
        return

    console.print(contributors_table(records))


@cli.command("time-analysis")
@days_option(30)
@click.pass_obj
def time_analysis(state: CliState, days: Optional[int]):
    """Show time-based commit analysis."""
    days = state.config.get_days(days, 30)
    try:
        repo = open_repository(state)
        distribution = aggregate_time_distribution(repo, days)
    except GitRepositoryError as e:
        fail(e)

    if not distribution.total_commits:
        console.print("[yellow]No commits found matching criteria.[/yellow]")
        return

    print_time_distribution(console, distribution)


@cli.command()
@click.option(
    "-t",
    "--top",
    type=click.IntRange(min=1),
    default=DEFAULT_TOP_FILES,
    show_default=True,
    help="Number of top files to show",
)
@days_option(0)
@click.pass_obj
def files(state: CliState, top: int, days: Optional[int]):
    """Show file change frequency ranking."""
    days = state.config.get_days(days, 0)
    try:
        repo = open_repository(state)
        records = aggregate_files(repo, days)
    except GitRepositoryError as e:
        fail(e)

    if not records:
        console.print("[yellow]No commits found matching criteria.[/yellow]")
        return

    console.print(files_table(records, top))


@cli.command()
@days_option(30)
@click.pass_obj
def summary(state: CliState, days: Optional[int]):
    """Show overall team summary."""
    days = state.config.get_days(days, 30)
    try:
        repo = open_repository(state)
        records = aggregate_contributors(repo, days)
    except GitRepositoryError as e:
        fail(e)

    records = state.config.filter_by_teams(records, lambda r: r.email)
    print_summary(console, summarize(records, days), repo.working_dir)


@cli.command()
@click.option(
    "-p",
    "--period",
    type=click.Choice(list(REPORT_PERIODS)),
    default="weekly",
    show_default=True,
    help="Report period",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "html", "json"]),
    default="text",
    show_default=True,
)
@click.option("-o", "--output", type=click.Path(path_type=Path), help="Output file path")
@click.pass_obj
def report(state: CliState, period: str, output_format: str, output: Optional[Path]):
    """Generate a comprehensive report."""
    days = state.config.get_period_days(period)
    try:
        repo = open_repository(state)
        logger.info("Aggregating contributors, time distribution and files")
        records = aggregate_contributors(repo, days)
        distribution = aggregate_time_distribution(repo, days)
        file_records = aggregate_files(repo, days)
    except GitRepositoryError as e:
        fail(e)

    records = state.config.filter_by_teams(records, lambda r: r.email)
    team_summary = summarize(records, days)

    if output_format == "text":
        console.print(Rule(f"[bold cyan]{period.upper()} Report[/bold cyan]"))
        print_summary(console, team_summary, repo.working_dir)
        console.print(contributors_table(records))
        print_time_distribution(console, distribution)
        console.print(files_table(file_records, REPORT_TOP_FILES))
        return

    chart_gen = ChartGenerator(records, file_records, distribution)
    generator = ReportGenerator(
        figures=chart_gen.all_charts(),
        summary=team_summary,
        contributors=records,
        files=file_records,
        distribution=distribution,
        title=f"{period.capitalize()} Report: {repo.name}",
        repo_path=str(repo.working_dir),
        top_files=REPORT_TOP_FILES,
    )

    try:
        if output_format == "html":
            path = generator.write_html(output or Path("report.html"))
            console.print(f"[green]Report written to {escape(str(path))}[/green]")
        else:
            path = output or Path("report.json")
            path.write_text(json.dumps(generator.to_json(), indent=2, default=str))
            console.print(f"[green]JSON written to {escape(str(path))}[/green]")
    except OSError as e:
        fail(e)


if __name__ == "__main__":
    cli()
