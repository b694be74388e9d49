"""
Console reporter for validation results.

Formats validation results using Rich.
"""

from rich.console import Console
from rich.table import Table

from dataextractor.validation.core import ValidationResult


class ConsoleReporter:
    """Formats and displays validation results to the console."""

    def __init__(self, console: Console) -> None:
        """
        Initialize console reporter.

        Args:
            console: Rich Console instance for output.
        """
        self.console = console

    def print_results(self, results: list[ValidationResult]) -> None:
        """
        Print validation results as a table, a summary and error details.

        Args:
            results: Validation results to display.
        """
        table = Table(title="Lookup Table Validation", show_header=True)
        table.add_column("Table", style="cyan", no_wrap=True)
        table.add_column("File", style="dim")
        table.add_column("Status", justify="center")
        table.add_column("Rows", justify="right")
        table.add_column("Payload", style="blue")

        for result in results:
            table.add_row(
                result.table_name,
                str(result.file_path),
                self._format_status(result),
                str(result.row_count) if result.row_count is not None else "-",
                result.payload_column or "-",
            )

        self.console.print(table)
        self._print_summary(results)
        self._print_errors(results)

    @staticmethod
    def _format_status(result: ValidationResult) -> str:
        if not result.exists:
            return "[yellow]Missing[/yellow]"
        if result.valid:
            return "[green]Pass[/green]"
        return "[red]Fail[/red]"

    def _print_summary(self, results: list[ValidationResult]) -> None:
        passed = sum(1 for r in results if r.valid is True)
        failed = sum(1 for r in results if r.valid is False)
        missing = sum(1 for r in results if not r.exists)

        self.console.print()
        self.console.print("[bold]Summary:[/bold]")
        self.console.print(f"  Total tables: {len(results)}")
        self.console.print(f"  [green]Passed: {passed}[/green]")
        self.console.print(f"  [red]Failed: {failed}[/red]")
        self.console.print(f"  [yellow]Missing: {missing}[/yellow]")

    def _print_errors(self, results: list[ValidationResult]) -> None:
        failed = [r for r in results if r.valid is False]
        if not failed:
            return

        self.console.print()
        self.console.print("[bold red]Errors:[/bold red]")
        for result in failed:
            self.console.print()
            self.console.print(f"[bold]{result.table_name}[/bold] ({result.error_type}):")
            for line in (result.error_message or "").split("\n"):
                self.console.print(f"  {line}", markup=False)
