"""CLI entry point — Typer app for lotsort commands.

Usage:
    lotsort convert fidelity.csv robinhood.csv -o out/
    lotsort inspect coinbase.csv
    lotsort preview *.csv --rows 50
    lotsort status
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

app = typer.Typer(
    name="lotsort",
    help="Normalize Fidelity, Robinhood and Coinbase CSV exports into one schedule.",
    no_args_is_help=True,
)

console = Console()

_FILES = typer.Argument(..., help="Broker CSV exports, in the order to merge them")


def _configure_logging(verbose: bool) -> None:
    from lotsort.config import load_settings

    level = "DEBUG" if verbose else load_settings().logging.level.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """lotsort — broker trade CSV organizer and converter."""
    _configure_logging(verbose)


def _load_batch(files: list[Path]):
    from lotsort.config import load_settings
    from lotsort.documents.loader import DocumentLoader
    from lotsort.pipeline.aggregator import TransactionSet
    from lotsort.pipeline.ingest import IngestPipeline

    settings = load_settings()
    loader = DocumentLoader(
        encodings=settings.ingestion.encodings,
        supported_extensions=settings.ingestion.supported_formats,
    )
    pipeline = IngestPipeline(loader=loader)
    try:
        results = pipeline.ingest_batch_sync(files)
    except (FileNotFoundError, ValueError) as exc:
        console.print(f"[bold red]Error:[/] {exc}")
        raise typer.Exit(code=1) from exc

    txset = TransactionSet()
    txset.add_batch(results)
    return settings, txset


def _files_table(txset) -> Table:
    table = Table(title="Files")
    table.add_column("File", style="cyan")
    table.add_column("Source")
    table.add_column("Transactions", justify="right")
    table.add_column("Skipped rows", justify="right")
    table.add_column("Chars", justify="right")

    for result in txset.files:
        source = result.detected_source.value
        if not result.recognized:
            source = f"[yellow]{source}[/]"
        table.add_row(
            result.filename, source, str(result.count),
            str(result.rows_skipped), str(result.char_count),
        )
    return table


def _summary_table(txset) -> Table:
    view = txset.summary()
    table = Table(title="Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("Files processed", str(view.file_count))
    table.add_row("Total transactions", str(view.transaction_count))
    table.add_row("Short-term", str(len(view.short_term)))
    table.add_row("Long-term", str(len(view.long_term)))
    table.add_row("Total proceeds", f"{view.total_proceeds:,.2f}")
    table.add_row("Total cost basis", f"{view.total_cost_basis:,.2f}")
    table.add_row("Total gain/loss", f"{view.total_gain_loss:,.2f}")
    return table


def _print_warnings(txset) -> None:
    for result in txset.files:
        for w in result.warnings:
            console.print(f"  [yellow]Warning:[/] {result.filename}: {w}")


@app.command()
def convert(
    files: Annotated[list[Path], _FILES],
    output_dir: Path = typer.Option(
        Path("."), "--output-dir", "-o", help="Directory for the exported CSVs",
    ),
) -> None:
    """Merge the exports and write all / short-term / long-term CSVs."""
    from lotsort.pipeline.export import write_exports

    settings, txset = _load_batch(files)
    console.print(_files_table(txset))
    _print_warnings(txset)

    transactions = txset.current_transactions()
    if not transactions:
        console.print("[bold red]No transactions found.[/] Nothing written.")
        raise typer.Exit(code=1)

    written = write_exports(transactions, output_dir, settings.export)
    console.print(_summary_table(txset))
    for path in written:
        console.print(f"[bold green]Wrote:[/] {path}")


@app.command()
def inspect(files: Annotated[list[Path], _FILES]) -> None:
    """Show the detected source and row counts for each file."""
    _, txset = _load_batch(files)
    console.print(_files_table(txset))
    _print_warnings(txset)


@app.command()
def preview(
    files: Annotated[list[Path], _FILES],
    rows: int | None = typer.Option(
        None, "--rows", "-n", help="Rows to show (default from settings)",
    ),
) -> None:
    """Show the first transactions of the merged schedule."""
    settings, txset = _load_batch(files)
    limit = rows if rows is not None else settings.display.preview_rows
    transactions = txset.current_transactions()

    table = Table(title=f"Transactions (first {min(limit, len(transactions))} of {len(transactions)})")
    table.add_column("Description", style="cyan")
    table.add_column("Acquired")
    table.add_column("Sold")
    table.add_column("Proceeds", justify="right")
    table.add_column("Cost", justify="right")
    table.add_column("Gain/Loss", justify="right")
    table.add_column("Term")
    table.add_column("Box")

    for txn in transactions[:limit]:
        style = "green" if txn.gain_loss >= 0 else "red"
        table.add_row(
            txn.description,
            txn.date_acquired,
            txn.date_sold,
            f"{txn.proceeds:.2f}",
            f"{txn.cost_basis:.2f}",
            f"[{style}]{txn.gain_loss:.2f}[/]",
            txn.term.value,
            txn.box_code,
        )

    console.print(table)
    console.print(_summary_table(txset))


@app.command()
def status() -> None:
    """Show version and supported broker formats."""
    from lotsort import __version__
    from lotsort.parsing.factory import available_extractors

    console.print(f"\n[bold green]lotsort[/] v{__version__}\n")

    table = Table(title="Available Components")
    table.add_column("Layer", style="cyan")
    table.add_column("Available")
    table.add_row("Extractors", ", ".join(available_extractors()))
    console.print(table)


if __name__ == "__main__":
    app()
