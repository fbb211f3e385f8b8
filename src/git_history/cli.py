"""Command-line interface for browsing normalized git history."""

import asyncio
import json
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .config import Config
from .exceptions import GitHistoryError
from .logging import configure_logging, get_logger
from .models import Commit, HistoryQuery, HistoryResult
from .service import HistoryService
from .sources.gitpython import GitPythonSource


app = typer.Typer(
    name="git-history",
    help="Query normalized git commit history",
    add_completion=False
)
console = Console()
logger = get_logger(__name__)


def build_service(config: Config, repo: Optional[str] = None) -> HistoryService:
    """Create a history service for the given or configured repository."""
    return HistoryService(GitPythonSource(repo or config.repository.repo_path))


def _load(repo: Optional[str]) -> tuple:
    config = Config.load()
    configure_logging(config.app)
    return config, build_service(config, repo)


def _run(coro):
    try:
        return asyncio.run(coro)
    except GitHistoryError as e:
        console.print(f"[red]{e.message}[/red]")
        logger.debug("command failed", kind=e.kind.value, error=str(e))
        raise typer.Exit(1)


def _commit_table(title: str, result: HistoryResult) -> Table:
    table = Table(title=title)
    table.add_column("Hash", style="cyan")
    table.add_column("Date", style="magenta")
    table.add_column("Author", style="green")
    table.add_column("Subject", max_width=60)
    table.add_column("Merge", style="yellow")

    for commit in result.commits:
        table.add_row(
            commit.short_hash,
            commit.timestamp.strftime("%Y-%m-%d %H:%M"),
            commit.author.name,
            commit.subject,
            "yes" if commit.is_merge else "",
        )
    return table


def display_history(title: str, result: HistoryResult, output: str) -> None:
    """Render a history result as a table or JSON."""
    if output == "json":
        console.print_json(result.model_dump_json())
        return

    if not result.commits:
        console.print("[yellow]No commits found[/yellow]")
        return

    console.print(_commit_table(title, result))
    footer = f"Showing {len(result.commits)} of {result.total_count} commits"
    if result.has_more:
        footer += " (more available)"
    console.print(f"[blue]{footer}[/blue]")


def display_commit(commit: Commit, output: str) -> None:
    """Render one commit with its file changes."""
    if output == "json":
        console.print_json(commit.model_dump_json())
        return

    header = f"[cyan]{commit.hash}[/cyan]\n"
    header += f"Author: {commit.author.name} <{commit.author.email}>\n"
    header += f"Date:   {commit.timestamp.isoformat()}"
    if commit.parents:
        header += f"\nParents: {', '.join(p[:7] for p in commit.parents)}"
    console.print(Panel(header, title=commit.subject))

    if commit.body:
        console.print(commit.body)

    if not commit.files:
        return

    table = Table(title="Files")
    table.add_column("Change", style="yellow")
    table.add_column("Path", style="green")
    table.add_column("+", style="green", justify="right")
    table.add_column("-", style="red", justify="right")
    for change in commit.files:
        path = f"{change.old_path} -> {change.path}" if change.old_path else change.path
        table.add_row(change.change_type.value, path, str(change.insertions or 0), str(change.deletions or 0))
    console.print(table)

    if commit.stats:
        console.print(
            f"[blue]{commit.stats.files_changed} files changed, "
            f"{commit.stats.total_insertions} insertions(+), "
            f"{commit.stats.total_deletions} deletions(-)[/blue]"
        )


@app.command()
def version() -> None:
    """Show version information."""
    from . import __version__
    console.print(f"[green]git-history v{__version__}[/green]")


@app.command()
def log(
    repo: Optional[str] = typer.Option(None, "--repo", "-r", help="Repository path"),
    max_count: Optional[int] = typer.Option(None, "--max-count", "-n", help="Maximum commits to show"),
    skip: Optional[int] = typer.Option(None, "--skip", help="Skip the newest N commits"),
    output: str = typer.Option("table", "--output", "-o", help="Output format (table, json)"),
):
    """Show commit history."""
    config, service = _load(repo)
    query = HistoryQuery(max_count=max_count or config.app.default_max_count, skip=skip)
    result = _run(service.query_history(query))
    display_history("Commit History", result, output)


@app.command("file-history")
def file_history(
    path: str = typer.Argument(..., help="File path relative to the repository root"),
    repo: Optional[str] = typer.Option(None, "--repo", "-r", help="Repository path"),
    max_count: Optional[int] = typer.Option(None, "--max-count", "-n", help="Maximum commits to show"),
    output: str = typer.Option("table", "--output", "-o", help="Output format (table, json)"),
):
    """Show the commits that touched a file."""
    config, service = _load(repo)
    query = HistoryQuery(max_count=max_count or config.app.default_max_count)
    result = _run(service.get_file_history(path, query))
    display_history(f"History of {path}", result, output)


@app.command()
def show(
    commit_hash: str = typer.Argument(..., help="Commit hash or revision"),
    repo: Optional[str] = typer.Option(None, "--repo", "-r", help="Repository path"),
    enhanced: bool = typer.Option(False, "--enhanced", "-e", help="Include files parsed from the commit diff"),
    output: str = typer.Option("table", "--output", "-o", help="Output format (table, json)"),
):
    """Show a single commit."""
    config, service = _load(repo)

    commit = _run(service.get_commit(commit_hash, enhanced=enhanced or config.app.enhance_commits))
    if commit is None:
        console.print(f"[red]Commit not found: {commit_hash}[/red]")
        raise typer.Exit(1)

    display_commit(commit, output)


@app.command()
def branches(
    repo: Optional[str] = typer.Option(None, "--repo", "-r", help="Repository path"),
    include_remote: bool = typer.Option(False, "--all", "-a", help="Include remote branches"),
):
    """List branches."""
    _, service = _load(repo)
    names = _run(service.get_branches(include_remote))
    current = _run(service.get_current_branch())

    for name in names:
        marker = "* " if name == current else "  "
        console.print(f"{marker}{name}")


@app.command()
def info(
    repo: Optional[str] = typer.Option(None, "--repo", "-r", help="Repository path"),
    output: str = typer.Option("table", "--output", "-o", help="Output format (table, json)"),
):
    """Show repository information."""
    _, service = _load(repo)
    repo_info = _run(service.get_repository_info())

    if output == "json":
        console.print_json(json.dumps(repo_info.model_dump(mode="json")))
        return

    table = Table(title="Repository")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Path", repo_info.path)
    table.add_row("Repository", "yes" if repo_info.is_repository else "no")
    if repo_info.is_repository:
        table.add_row("Branch", repo_info.current_branch or "(detached)")
        table.add_row("Remotes", ", ".join(repo_info.remotes or ()) or "-")
        if repo_info.last_commit:
            table.add_row("Last commit", f"{repo_info.last_commit.short_hash} {repo_info.last_commit.subject}")
    console.print(table)


if __name__ == "__main__":
    app()
