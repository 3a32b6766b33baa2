"""CLI commands for miniblog using Typer."""

import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from miniblog.config import get_settings
from miniblog.models.post import Post
from miniblog.services.post_loader import PostLoadError, load_post, load_posts
from miniblog.utils.logging import setup_logging
from miniblog.utils.text_utils import create_slug


app = typer.Typer(
    name="miniblog",
    help="Slug and content rendering tools for blog posts",
    no_args_is_help=True,
)

console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Configure logging before any command runs."""
    try:
        settings = get_settings()
    except ValidationError as exc:
        console.print("[red]Invalid configuration:[/red]")
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"])
            console.print(f"  - {field}: {error['msg']}")
        raise typer.Exit(1)

    setup_logging(
        logging.DEBUG if verbose else settings.log_level,
        log_file=settings.log_file,
    )


def _load_or_exit(path: Path) -> Post:
    settings = get_settings()
    try:
        return load_post(path, max_length=settings.slug_max_length)
    except PostLoadError as exc:
        console.print(f"[red]Could not load post:[/red] {exc}")
        raise typer.Exit(1)


# --- Slug Command ---


@app.command()
def slug(
    title: str = typer.Argument(..., help="Post title"),
    max_length: Optional[int] = typer.Option(
        None, "--max-length", "-m", help="Maximum slug length"
    ),
):
    """Print the slug for a title."""
    if max_length is None:
        max_length = get_settings().slug_max_length
    # Plain print, the slug may be piped into other tools
    print(create_slug(title, max_length))


# --- Render Command ---


@app.command()
def render(
    file: Path = typer.Argument(..., help="Post file with YAML front matter"),
):
    """Print the rendered HTML of a post."""
    post = _load_or_exit(file)
    print(post.render_content())


# --- Show Command ---


@app.command()
def show(
    file: Path = typer.Argument(..., help="Post file with YAML front matter"),
):
    """Show a post's links and visibility."""
    settings = get_settings()
    post = _load_or_exit(file)

    table = Table(title=post.title or str(file), show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    table.add_row("Slug", post.slug)
    table.add_row("Link", post.get_link())
    table.add_row("Encoded link", post.get_encoded_link())
    table.add_row("Published", post.pub_date.isoformat())
    table.add_row("Visible", _yes_no(post.is_visible()))
    table.add_row(
        "Comments open",
        _yes_no(post.are_comments_open(settings.comments_close_after_days)),
    )
    table.add_row("Categories", ", ".join(post.categories) or "-")
    table.add_row("Tags", ", ".join(post.tags) or "-")

    console.print(table)


# --- List Command ---


@app.command("list")
def list_posts(
    directory: Optional[Path] = typer.Argument(None, help="Directory of post files"),
):
    """List every post in a directory."""
    settings = get_settings()
    directory = directory or settings.posts_dir

    try:
        posts = load_posts(directory, max_length=settings.slug_max_length)
    except PostLoadError as exc:
        console.print(f"[red]Could not load posts:[/red] {exc}")
        raise typer.Exit(1)

    if not posts:
        console.print(f"[yellow]No posts found in {directory}[/yellow]")
        return

    table = Table(title=f"Posts in {directory}")
    table.add_column("Date")
    table.add_column("Title", style="cyan")
    table.add_column("Link")
    table.add_column("Visible", justify="center")

    for post in posts:
        table.add_row(
            post.pub_date.strftime("%Y-%m-%d"),
            post.title,
            post.get_link(),
            _yes_no(post.is_visible()),
        )

    console.print(table)


def _yes_no(value: bool) -> str:
    return "[green]yes[/green]" if value else "[red]no[/red]"


if __name__ == "__main__":
    app()
