"""Command-line tools for checking the content directory."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer

from portfolio.content import ContentLoader, FrontmatterValidationError, split_frontmatter, validate_frontmatter
from portfolio.core.config import get_settings
from portfolio.schemas.content import ContentType

app = typer.Typer(name="portfolio", help="Validate and inspect portfolio site content.", no_args_is_help=True)


def _loader(content_dir: Optional[Path]) -> ContentLoader:
    settings = get_settings()
    return ContentLoader(content_dir or Path(settings.content_dir), settings.content_extensions)


@app.command()
def validate(
    content_dir: Annotated[Optional[Path], typer.Argument(help="Directory of content files.")] = None,
) -> None:
    """Check every content file's frontmatter; exit 1 if any file is invalid."""
    loader = _loader(content_dir)
    files = loader.eligible_files()
    failures = 0

    for path in files:
        try:
            metadata, _ = split_frontmatter(path.read_text(encoding="utf-8"))
            validate_frontmatter(metadata)
        except FrontmatterValidationError as exc:
            failures += 1
            typer.echo(f"\nValidation errors in {path}:", err=True)
            for issue in exc.issues:
                typer.echo(f"- {issue.field}: {issue.message}", err=True)

    if failures:
        typer.echo(f"\n{failures} of {len(files)} content files are invalid", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"All {len(files)} content files validated successfully")


@app.command("list")
def list_items(
    content_dir: Annotated[Optional[Path], typer.Argument(help="Directory of content files.")] = None,
    content_type: Annotated[Optional[ContentType], typer.Option("--type", help="Only show this content type.")] = None,
) -> None:
    """Print loaded items newest first."""
    loader = _loader(content_dir)
    items = loader.load_by_type(content_type) if content_type else loader.load_all()
    for item in items:
        typer.echo(f"{item.date}  {item.type.value:<7}  {item.slug}  {item.title}")


if __name__ == "__main__":
    app()
