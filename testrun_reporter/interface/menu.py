"""Interactive summary menu."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from rich.console import Console
from rich.table import Table

from ..core.statistics import summarize
from ..models.test_record import LineValidationError, TestRecord, TestStatus


_MENU_OPTIONS: dict[int, str] = {
    1: "Show total number of cases",
    2: "Show count by status",
    3: "Show total execution time",
    4: "Show detected errors",
    5: "Open report folder",
    0: "Exit",
}

_STATUS_COLORS: dict[TestStatus, str] = {
    TestStatus.PASSED: "green",
    TestStatus.FAILED: "red",
    TestStatus.SKIPPED: "yellow",
}


def open_in_file_browser(path: Path) -> None:
    """Open a directory in the platform file browser."""
    target = str(path.resolve())
    if sys.platform.startswith("win"):
        command = ["explorer", target]
    elif sys.platform == "darwin":
        command = ["open", target]
    else:
        command = ["xdg-open", target]
    subprocess.Popen(command)


class SummaryMenu:
    """Console menu over the results of one report run."""

    def __init__(
        self,
        records: Sequence[TestRecord],
        errors: Sequence[LineValidationError],
        out_dir: Path,
        console: Console | None = None,
        input_func: Callable[[str], str] | None = None,
        opener: Callable[[Path], None] | None = None,
    ) -> None:
        self.records = records
        self.errors = errors
        self.out_dir = Path(out_dir)
        self.console = console or Console()
        self.input_func = input_func or self.console.input
        self.opener = opener or open_in_file_browser
        self.snapshot = summarize(records)

    def run(self) -> None:
        option = None
        while option != 0:
            self._print_menu()
            option = self._read_int("Select an option: ")
            handler = self._handlers().get(option)
            if handler is not None:
                handler()
            elif option == 0:
                self.console.print("Leaving menu...")
            else:
                self.console.print("[red]Invalid option, try again.[/red]")
            self.console.print()

    def _handlers(self) -> dict[int, Callable[[], None]]:
        return {
            1: self.show_total,
            2: self.show_counts_by_status,
            3: self.show_total_time,
            4: self.show_errors,
            5: self.open_report_folder,
        }

    def _print_menu(self) -> None:
        self.console.rule("SUMMARY MENU")
        for key in (1, 2, 3, 4, 5, 0):
            self.console.print(f"{key}) {_MENU_OPTIONS[key]}")
        self.console.rule()

    def _read_int(self, prompt: str) -> int:
        while True:
            answer = self.input_func(prompt).strip()
            try:
                return int(answer)
            except ValueError:
                self.console.print("Please enter a valid number.")

    def show_total(self) -> None:
        self.console.print(f"Total number of cases: {self.snapshot.total}")

    def show_counts_by_status(self) -> None:
        table = Table(show_header=True, header_style="bold")
        table.add_column("Status")
        table.add_column("Count", justify="right")
        table.add_column("Share", justify="right")
        for status in TestStatus:
            color = _STATUS_COLORS[status]
            table.add_row(
                f"[{color}]{status}[/{color}]",
                str(self.snapshot.count(status)),
                f"{self.snapshot.percent(status):.2f}%",
            )
        self.console.print(table)

    def show_total_time(self) -> None:
        self.console.print(f"Total execution time: {self.snapshot.total_duration:.2f} seconds")

    def show_errors(self) -> None:
        if not self.errors:
            self.console.print("No errors detected in the CSV.")
            return
        self.console.print("Detected errors:")
        for error in self.errors:
            self.console.print(f" - {error}", markup=False)

    def open_report_folder(self) -> None:
        self.console.print(f"Report folder: {self.out_dir.resolve()}", markup=False)
        try:
            self.opener(self.out_dir)
        except OSError:
            self.console.print("[yellow]Could not open the folder automatically.[/yellow]")
