"""Command line interface for substring."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from substring.bounds import UNBOUNDED, Bound, Excluded, Included, UnitRange
from substring.config import AppConfig
from substring.errors import SubstringError
from substring.index.indexer import GRAPHEMES, UnitIndexer
from substring.models import TextSlice
from substring.units.graphemes import grapheme_available
from substring.utils.text import as_buffer

console = Console()
app = typer.Typer(help="substring - slice UTF-8 text by character or grapheme position")

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _read_source(text: Optional[str], file: Optional[Path]) -> TextSlice:
    if file is not None and text is not None:
        raise typer.BadParameter("Pass either TEXT or --file, not both.")
    if file is not None:
        data = file.read_bytes()
        logger.debug(f"Read {len(data)} bytes from {file}")
    elif text is not None:
        data = text.encode("utf-8", "surrogateescape")
    else:
        raise typer.BadParameter("Missing TEXT (or --file).")
    try:
        return TextSlice.whole(as_buffer(data))
    except SubstringError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _resolve_indexer(unit: str) -> UnitIndexer:
    config = AppConfig(unit=unit)  # type: ignore[arg-type]
    try:
        indexer = config.resolve_indexer()
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if indexer is GRAPHEMES and not grapheme_available():
        raise typer.BadParameter(
            "--unit grapheme needs the regex package. "
            "Install the grapheme extras with \"python -m pip install 'substring[grapheme]'\""
        )
    return indexer


def _build_range(
    start: Optional[int], end: Optional[int], exclusive_start: bool, inclusive_end: bool
) -> UnitRange:
    start_bound: Bound = UNBOUNDED
    end_bound: Bound = UNBOUNDED
    if start is not None:
        start_bound = Excluded(start) if exclusive_start else Included(start)
    if end is not None:
        end_bound = Included(end) if inclusive_end else Excluded(end)
    return UnitRange(start_bound, end_bound)


@app.command("slice")
def slice_command(
    text: Optional[str] = typer.Argument(None, help="Text to slice."),
    start: Optional[int] = typer.Option(None, "--start", "-s", min=0, help="First unit position"),
    end: Optional[int] = typer.Option(None, "--end", "-e", min=0, help="Last unit position"),
    exclusive_start: bool = typer.Option(False, "--exclusive-start", help="Do not include --start"),
    inclusive_end: bool = typer.Option(False, "--inclusive-end", help="Include --end"),
    unit: str = typer.Option(AppConfig().unit, "--unit", "-u", help="Counting unit: char or grapheme"),
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", exists=True, dir_okay=False, help="Read UTF-8 text from a file"
    ),
    offsets: bool = typer.Option(AppConfig().show_offsets, "--offsets", help="Print the byte range"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Print the units of TEXT between --start and --end."""
    _setup_logging(verbose)
    indexer = _resolve_indexer(unit)
    source = _read_source(text, file)
    index = _build_range(start, end, exclusive_start, inclusive_end)

    try:
        result = indexer.substring(source, index)
    except SubstringError as exc:
        raise typer.BadParameter(str(exc)) from exc

    console.print(str(result), markup=False, highlight=False, soft_wrap=True)
    if offsets and isinstance(result, TextSlice):
        console.print(f"[dim]bytes {result.start}..{result.stop} of {len(source)}[/dim]")


@app.command()
def units(
    text: Optional[str] = typer.Argument(None, help="Text to split into units."),
    unit: str = typer.Option(AppConfig().unit, "--unit", "-u", help="Counting unit: char or grapheme"),
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", exists=True, dir_okay=False, help="Read UTF-8 text from a file"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """List every unit of TEXT with its byte offset."""
    _setup_logging(verbose)
    indexer = _resolve_indexer(unit)
    source = _read_source(text, file)

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Unit")
    table.add_column("Offset")
    table.add_column("Bytes")
    table.add_column("Code points")
    table.add_column("Text")

    try:
        for position, piece in enumerate(indexer.units(source)):
            decoded = str(piece)
            code_points = " ".join(f"U+{ord(char):04X}" for char in decoded)
            table.add_row(str(position), str(piece.start), str(len(piece)), code_points, decoded)
    except SubstringError as exc:
        raise typer.BadParameter(str(exc)) from exc

    if not table.row_count:
        console.print("[yellow]No units found.[/yellow]")
        return
    console.print(table)


@app.command()
def count(
    text: Optional[str] = typer.Argument(None, help="Text to count."),
    unit: str = typer.Option(AppConfig().unit, "--unit", "-u", help="Counting unit: char or grapheme"),
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", exists=True, dir_okay=False, help="Read UTF-8 text from a file"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Print how many units TEXT holds."""
    _setup_logging(verbose)
    indexer = _resolve_indexer(unit)
    source = _read_source(text, file)
    try:
        total = indexer.count(source)
    except SubstringError as exc:
        raise typer.BadParameter(str(exc)) from exc
    console.print(f"{total} {indexer.name} units, {len(source)} bytes")
