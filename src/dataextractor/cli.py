"""Command-line interface for inspecting and validating lookup tables."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

app = typer.Typer(
    name="dataextractor",
    help="Load and check CSV lookup tables.",
    no_args_is_help=True,
)

console = Console()


@app.command()
def inspect(
    file: Annotated[
        Path,
        typer.Argument(
            help="Path to the lookup table file.",
            exists=True,
            dir_okay=False,
        ),
    ],
    group: Annotated[
        str,
        typer.Option(
            "--group",
            "-g",
            help="Group label identifying the payload column.",
        ),
    ],
    delimiter: Annotated[
        str,
        typer.Option("--delimiter", "-d", help="Cell delimiter."),
    ] = ",",
    rows: Annotated[
        int,
        typer.Option("--rows", "-n", min=0, help="Number of rows to preview."),
    ] = 10,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Log level for diagnostics on stderr."),
    ] = "WARNING",
) -> None:
    """Load a table and show its columns and first rows."""
    from dataextractor.backends import create_backend
    from dataextractor.errors import DataExtractorError
    from dataextractor.utils.logging import configure_logging

    configure_logging(log_level)

    try:
        table = create_backend(file, delimiter=delimiter).load(group)
    except DataExtractorError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    summary = Table(title=f"Lookup table {file.name}")
    summary.add_column("Column", style="cyan")
    summary.add_column("Role", style="blue")
    summary.add_column("Type")
    summary.add_column("Dimension", justify="right")
    for name in table.coordinate_names:
        summary.add_row(
            name,
            "coordinate",
            table.coord_values[name].column_type.value,
            str(table.coord_to_dim[name]),
        )
    summary.add_row(table.payload_name, "payload", "float", "-")
    console.print(summary)
    console.print(f"[green]Rows loaded: {table.num_rows}[/green]")

    if rows:
        preview = table.to_frame().head(rows)
        console.print(preview.to_string(index=False), markup=False, highlight=False)


@app.command()
def validate(
    config: Annotated[
        Path,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration YAML file.",
            exists=True,
            dir_okay=False,
        ),
    ],
) -> None:
    """Load every configured table and report problems."""
    from dataextractor.config.loader import load_config
    from dataextractor.utils.logging import configure_logging
    from dataextractor.validation import ConsoleReporter, ValidationRunner

    extractor_config = load_config(config)
    configure_logging(
        extractor_config.logging.level,
        json_output=extractor_config.logging.json_output,
    )

    console.print(f"[blue]Validating {len(extractor_config.tables)} table(s)...[/blue]")
    results = ValidationRunner(extractor_config).run()
    ConsoleReporter(console).print_results(results)

    if any(r.valid is not True for r in results):
        raise typer.Exit(code=1)


@app.command()
def version() -> None:
    """Show version information."""
    from dataextractor import __version__

    console.print(f"dataextractor version {__version__}")


if __name__ == "__main__":
    app()
