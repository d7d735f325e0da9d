"""Rich console rendering of an insights snapshot."""

from collections.abc import Sequence

from rich.console import Console as RichConsole
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from github_insights.models.contribution import ContributionPoint, ContributionSummary
from github_insights.models.insights import InsightsSnapshot
from github_insights.models.language import LanguageStat
from github_insights.models.repository import Repository
from github_insights.models.user import UserProfile

BAR_WIDTH = 40


def render_bar(count: int, max_count: int, width: int = BAR_WIDTH) -> str:
    """Horizontal bar proportional to ``count``; non-zero counts get at least one cell."""
    if count <= 0 or max_count <= 0:
        return ""
    return "█" * max(1, round(count / max_count * width))


class Console:
    """Wrapper for rich console output."""

    def __init__(self, quiet: bool = False, console: RichConsole | None = None):
        self.console = console or RichConsole()
        self.quiet = quiet

    def print(self, *args, **kwargs):
        """Print to console (respects quiet mode)."""
        if not self.quiet:
            self.console.print(*args, **kwargs)

    def print_error(self, message: str):
        """Print error message."""
        self.console.print(f"[red]Error:[/red] {message}")

    def print_warning(self, message: str):
        """Print warning message."""
        self.console.print(f"[yellow]Warning:[/yellow] {message}")

    def create_progress(self) -> Progress:
        """Create a spinner for the load."""
        return Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=self.console,
            transient=True,
            disable=self.quiet,
        )

    def print_profile(self, profile: UserProfile | None):
        """Print user profile card."""
        if self.quiet:
            return
        if profile is None:
            self.console.print("[dim]No profile loaded.[/dim]")
            return

        body = f"[bold]{profile.display_name}[/bold]\n[dim]@{profile.username}[/dim]"
        if profile.bio:
            body += f"\n\n{profile.bio}"
        body += (
            f"\n\nRepos: {profile.public_repos}   "
            f"Followers: {profile.followers}   "
            f"Following: {profile.following}"
        )
        self.console.print(Panel(body, title="Profile", expand=False))
        self.console.print()

    def print_repositories(self, repositories: Sequence[Repository], truncated: bool = False):
        """Print repository list."""
        if self.quiet:
            return
        if not repositories:
            self.console.print("[dim]This user has no public repositories.[/dim]\n")
            return

        table = Table(title=f"Repositories ({len(repositories)})", expand=False)
        table.add_column("Name")
        table.add_column("Language", style="dim")
        table.add_column("Stars", justify="right")
        table.add_column("Forks", justify="right")
        table.add_column("Description", overflow="ellipsis", max_width=50)

        for repo in repositories:
            table.add_row(
                repo.name,
                repo.language or "-",
                str(repo.stargazers_count),
                str(repo.forks_count),
                repo.description or "",
            )

        self.console.print(table)
        if truncated:
            self.print_warning("Repository list may be incomplete (a page request failed).")
        self.console.print()

    def print_languages(self, stats: Sequence[LanguageStat]):
        """Print language distribution."""
        if self.quiet:
            return
        if not stats:
            self.console.print("[dim]No language data.[/dim]\n")
            return

        max_count = max(stat.count for stat in stats)
        table = Table(title="Language Distribution", show_header=False, expand=False)
        table.add_column("Language")
        table.add_column("Bar", style="cyan")
        table.add_column("Count", justify="right")

        for stat in stats:
            table.add_row(stat.display_label, render_bar(stat.count, max_count), str(stat.count))

        self.console.print(table)
        self.console.print()

    def print_contributions(self, points: Sequence[ContributionPoint]):
        """Print daily contribution histogram and its summary."""
        if self.quiet:
            return
        if not points:
            self.console.print("[dim]No recent public push events found.[/dim]\n")
            return

        summary = ContributionSummary.from_points(points)
        table = Table(title="Contribution Activity", show_header=False, expand=False)
        table.add_column("Day", style="dim")
        table.add_column("Bar", style="green")
        table.add_column("Pushes", justify="right")

        for point in points:
            table.add_row(
                point.day.isoformat(),
                render_bar(point.count, summary.max_count),
                str(point.count),
            )
        self.console.print(table)

        busiest = summary.busiest_day
        self.console.print(
            f"[dim]{summary.total} pushes on {summary.active_days} days"
            f" · longest streak {summary.longest_streak} days"
            + (f" · busiest {busiest.day.isoformat()} ({busiest.count})" if busiest else "")
            + "[/dim]"
        )
        self.console.print()

    def print_snapshot(self, snapshot: InsightsSnapshot, all_languages: bool = False):
        """Print every section of the dashboard."""
        if self.quiet:
            return

        self.print_profile(snapshot.profile)
        self.print_repositories(snapshot.repositories, truncated=snapshot.repositories_truncated)
        self.print_languages(
            snapshot.languages.ranked if all_languages else snapshot.languages.capped
        )
        self.print_contributions(snapshot.contributions)
