"""CLI entry point for termweight."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from termweight.config import settings
from termweight.documents import load_documents
from termweight.exceptions import CorpusFileError, TermWeightError
from termweight.logging import setup_logging
from termweight.output import format_csv, format_json, format_text
from termweight.scoring import CorpusModel, DocumentVector, ModelSummary

app = typer.Typer(
    name="termweight",
    help="TF-IDF scoring for pre-tokenized document corpora.",
    add_completion=False,
)

console = Console()
error_console = Console(stderr=True)


class OutputFormat(StrEnum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"
    CSV = "csv"


@app.command()
def score(
    corpus: Annotated[
        Path,
        typer.Argument(
            ...,
            help="Corpus file (.json array of token arrays, or one document per line)",
        ),
    ],
    add: Annotated[
        list[Path] | None,
        typer.Option(
            "--add",
            "-a",
            help="File of documents to add after fitting (can be used multiple times)",
        ),
    ] = None,
    top: Annotated[
        int | None,
        typer.Option(
            "--top",
            "-t",
            help="Number of top terms to show per document",
            min=1,
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    output_file: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output file path (default: stdout)",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose debug output to stderr",
        ),
    ] = False,
) -> None:
    """Fit a corpus, add further documents, and show TF-IDF vectors."""
    setup_logging(level=settings.log_level, verbose=verbose)
    top_terms = top if top is not None else settings.default_top_terms

    try:
        model = CorpusModel(unknown_term=settings.unknown_term)
        model.fit_documents(load_documents(corpus))
        for path in add or []:
            for document in load_documents(path):
                model.add_document(document)
    except CorpusFileError as e:
        error_console.print(f"[red]Error:[/red] Cannot load documents: {escape(str(e))}")
        raise typer.Exit(1) from None
    except TermWeightError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None

    vectors = model.vectors()
    summary = model.summary()

    if not vectors:
        error_console.print("[yellow]Warning:[/yellow] No documents to score")
        raise typer.Exit(0)

    if output_file:
        output_content = format_output(vectors, summary, top_terms, output_format)
        output_file.write_text(output_content, encoding="utf-8")
        console.print(f"Results written to [bold]{output_file}[/bold]")
    elif output_format == OutputFormat.TABLE:
        display_tables(vectors, summary, top_terms)
    else:
        # Plain print keeps JSON/CSV free of rich markup and wrapping
        typer.echo(format_output(vectors, summary, top_terms, output_format))


def format_output(
    vectors: tuple[DocumentVector, ...],
    summary: ModelSummary,
    top: int,
    output_format: OutputFormat,
) -> str:
    """Format scored documents for output."""
    if output_format == OutputFormat.JSON:
        return format_json(vectors, summary, top)
    elif output_format == OutputFormat.CSV:
        return format_csv(vectors, top)
    else:  # TABLE format for file output
        return format_text(vectors, summary, top)


def display_tables(
    vectors: tuple[DocumentVector, ...],
    summary: ModelSummary,
    top: int,
) -> None:
    """Display one Rich table per scored document."""
    console.print()
    console.print(f"[bold]Documents processed:[/bold] {summary.documents_processed:,}")
    console.print(f"[bold]Vocabulary size:[/bold] {summary.vocabulary_size:,}")
    console.print(f"[bold]Tracked terms:[/bold] {summary.tracked_terms:,}")

    for vector in vectors:
        console.print()
        table = Table(title=f"Document {vector.index}")
        table.add_column("Rank", justify="right", style="dim")
        table.add_column("Term", style="cyan")
        table.add_column("Score", justify="right", style="green")

        for rank, s in enumerate(vector.top_terms(top), 1):
            table.add_row(str(rank), escape(s.term), f"{s.score:.4f}")

        console.print(table)


@app.command()
def config() -> None:
    """Show current configuration."""
    table = Table(title="termweight Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("TERMWEIGHT_UNKNOWN_TERM", escape(settings.unknown_term))
    table.add_row("TERMWEIGHT_DEFAULT_TOP_TERMS", str(settings.default_top_terms))
    table.add_row("TERMWEIGHT_LOG_LEVEL", settings.log_level)

    console.print(table)


if __name__ == "__main__":
    app()
