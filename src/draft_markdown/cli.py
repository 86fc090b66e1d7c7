"""Command-line interface for draft-markdown."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn

from draft_markdown import __version__
from draft_markdown.config import get_settings
from draft_markdown.core.converter import DocumentConverter
from draft_markdown.formats import SUPPORTED_EXTENSIONS

app = typer.Typer(
    name="draft-markdown",
    help="Convert raw rich-text content state (JSON) to Markdown.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"draft-markdown v{__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool) -> None:
    """Route library logging through rich."""
    level = "DEBUG" if verbose else get_settings().log_level.upper()
    handler = RichHandler(console=console, show_path=verbose, markup=False)
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))

    logger = logging.getLogger("draft_markdown")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level, logging.WARNING))


def generate_output_path(input_path: Path, output_dir: Optional[Path] = None) -> Path:
    """Generate output path by swapping the extension for the markdown suffix."""
    output_name = f"{input_path.stem}{get_settings().output_suffix}"

    if output_dir:
        return output_dir / output_name
    return input_path.parent / output_name


def process_file(
    input_path: Path,
    output_path: Optional[Path],
    verbose: bool,
    indent_width: Optional[int] = None,
) -> bool:
    """Process a single file. Returns True on success."""
    if not input_path.exists():
        console.print(f"[red]Error:[/red] File not found: {input_path}")
        return False

    ext = input_path.suffix.lower()
    if ext not in SUPPORTED_EXTENSIONS:
        console.print(
            f"[yellow]Skipping:[/yellow] {input_path.name} "
            f"(unsupported format: {ext})"
        )
        return False

    if output_path is None:
        output_path = generate_output_path(input_path)

    if verbose:
        console.print(f"[blue]Processing:[/blue] {input_path}")
        console.print(f"[blue]Output:[/blue] {output_path}")

    try:
        converter = DocumentConverter(indent_width=indent_width)
        converter.convert_file(input_path, output_path)
        console.print(f"[green]Success:[/green] {output_path}")
        return True
    except Exception as e:
        console.print(f"[red]Error processing {input_path.name}:[/red] {e}")
        if verbose:
            console.print_exception()
        return False


def process_folder(
    folder_path: Path,
    verbose: bool,
    indent_width: Optional[int] = None,
    recursive: bool = True,
) -> tuple[int, int]:
    """Process all supported files in a folder. Returns (success_count, fail_count)."""
    if not folder_path.is_dir():
        console.print(f"[red]Error:[/red] Not a directory: {folder_path}")
        return 0, 0

    files: list[Path] = []
    for ext in SUPPORTED_EXTENSIONS:
        if recursive:
            files.extend(sorted(folder_path.rglob(f"*{ext}")))
        else:
            files.extend(sorted(folder_path.glob(f"*{ext}")))

    if not files:
        console.print(
            f"[yellow]No supported files found in {folder_path}[/yellow]\n"
            f"Supported formats: {', '.join(SUPPORTED_EXTENSIONS)}"
        )
        return 0, 0

    console.print(f"[blue]Found {len(files)} file(s) to process[/blue]")

    success_count = 0
    fail_count = 0

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Converting files...", total=len(files))

        for file_path in files:
            progress.update(task, description=f"Converting {file_path.name}...")
            if process_file(file_path, None, verbose, indent_width):
                success_count += 1
            else:
                fail_count += 1
            progress.advance(task)

    return success_count, fail_count


@app.command()
def main(
    path: Path = typer.Argument(
        ...,
        help="Content file or folder to convert",
        exists=True,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output path (for single file only)",
    ),
    indent_width: Optional[int] = typer.Option(
        None,
        "--indent-width",
        "-i",
        min=0,
        help="Spaces per nesting level for list items (default: 4)",
    ),
    recursive: bool = typer.Option(
        True,
        "--recursive/--no-recursive",
        help="Search sub-folders in folder mode",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Convert raw content state files to Markdown.

    Examples:

        python draft2md.py post.json

        python draft2md.py post.json -o README.md

        python draft2md.py /path/to/folder --no-recursive

        python draft2md.py post.json --indent-width 2
    """
    setup_logging(verbose)

    if path.is_file():
        # Single file mode
        success = process_file(path, output, verbose, indent_width)
        raise typer.Exit(0 if success else 1)
    else:
        # Folder mode
        if output is not None:
            console.print(
                "[yellow]Warning:[/yellow] --output is ignored in folder mode. "
                "Files will be saved alongside originals."
            )

        success, fail = process_folder(path, verbose, indent_width, recursive)
        console.print(
            f"\n[bold]Complete:[/bold] {success} succeeded, {fail} failed"
        )
        raise typer.Exit(0 if fail == 0 else 1)


if __name__ == "__main__":
    app()
