"""CLI interface for GitHub Insights."""

import asyncio
import logging

import typer
from rich.console import Console

from github_insights import __version__
from github_insights.config import get_config
from github_insights.coordinator import InsightsCoordinator
from github_insights.models.insights import InsightsSnapshot
from github_insights.output.console import Console as OutputConsole
from github_insights.services.contribution_aggregator import fill_gaps

app = typer.Typer(
    name="github-insights",
    help="Dashboard view of a GitHub user's public profile and activity",
    add_completion=False,
)

console = Console()


def setup_logging(verbose: bool = False):
    """Configure logging based on verbosity level."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        console.print(f"github-insights version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """GitHub Insights - profile, repositories, languages and recent activity."""
    pass


@app.command()
def show(
    username: str = typer.Argument(..., help="GitHub username to load"),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the snapshot as JSON instead of tables",
    ),
    all_languages: bool = typer.Option(
        False,
        "--all-languages",
        help="List every language instead of rolling the long tail into 'Other'",
    ),
    gap_fill: bool = typer.Option(
        False,
        "--fill-gaps",
        help="Show days without pushes as zero-count days",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Debug logging",
    ),
):
    """Load and display a GitHub user's dashboard.

    Examples:
        github-insights show octocat
        github-insights show octocat --fill-gaps --all-languages
        github-insights show octocat --json
    """
    setup_logging(verbose)

    try:
        snapshot = asyncio.run(_load(username, quiet=as_json))
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled[/yellow]")
        raise typer.Exit(1)

    if gap_fill:
        snapshot = snapshot.model_copy(
            update={"contributions": tuple(fill_gaps(snapshot.contributions))}
        )

    output_console = OutputConsole(quiet=as_json)
    if as_json:
        typer.echo(snapshot.model_dump_json(indent=2))
    else:
        output_console.print_snapshot(snapshot, all_languages=all_languages)

    if snapshot.error:
        # JSON output already carries the error field
        if not as_json:
            output_console.print_error(snapshot.error)
        raise typer.Exit(1)


async def _load(username: str, quiet: bool = False) -> InsightsSnapshot:
    """Run one load with a spinner."""
    output_console = OutputConsole(quiet=quiet)

    async with InsightsCoordinator(config=get_config()) as coordinator:
        with output_console.create_progress() as progress:
            progress.add_task(f"Loading {username.strip()}...", total=None)
            return await coordinator.load(username)


if __name__ == "__main__":
    app()
