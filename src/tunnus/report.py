"""Report of a Tunnus check: one row per checked identifier column."""

import json
from dataclasses import dataclass, field

from rich.console import Console
from rich.table import Table

from tunnus.types import IdentifierKind, Severity
from tunnus.validators.base import ValidationIssue

SEVERITY_STYLES = {
    Severity.CRITICAL: "bold red",
    Severity.HIGH: "red",
    Severity.MEDIUM: "yellow",
    Severity.LOW: "dim",
}


@dataclass
class Report:
    """Invalid identifiers found by :func:`tunnus.check`.

    ``checked`` maps every checked column to its identifier kind, so columns
    without issues still show up as passing.
    """

    issues: list[ValidationIssue] = field(default_factory=list)
    checked: dict[str, IdentifierKind] = field(default_factory=dict)
    source: str = ""
    row_count: int = 0

    def __str__(self) -> str:
        console = Console(force_terminal=True, width=88)
        with console.capture() as output:
            self._render(console)
        return output.get()

    def _render(self, console: Console) -> None:
        console.print()
        origin = f"{self.source}, " if self.source else ""
        console.print(f"[bold]Tunnus Report[/bold] ({origin}{self.row_count:,} rows)")

        table = Table(header_style="bold")
        table.add_column("Column", style="cyan", no_wrap=True)
        table.add_column("Identifier")
        table.add_column("Invalid", justify="right")
        table.add_column("Severity")

        by_column = {issue.column: issue for issue in self.issues}
        for column, kind in self.checked.items():
            issue = by_column.pop(column, None)
            if issue is None:
                table.add_row(column, kind.value, "0", "[green]ok[/green]")
            else:
                table.add_row(column, kind.value, *self._issue_cells(issue))
        for issue in by_column.values():
            table.add_row(issue.column, issue.kind.value, *self._issue_cells(issue))

        console.print(table)
        if self.issues:
            console.print(
                f"{self.invalid_count:,} invalid identifiers in "
                f"{len(self.issues)} of {len(self.checked) or len(self.issues)} columns"
            )
        else:
            console.print("[green]✓ No invalid identifiers found[/green]")
        console.print()

    @staticmethod
    def _issue_cells(issue: ValidationIssue) -> tuple[str, str]:
        style = SEVERITY_STYLES[issue.severity]
        return (
            f"{issue.count:,} / {issue.checked:,} ({issue.ratio:.1%})",
            f"[{style}]{issue.severity.value}[/{style}]",
        )

    def print(self) -> None:
        self._render(Console())

    @property
    def invalid_count(self) -> int:
        return sum(issue.count for issue in self.issues)

    def by_kind(self) -> dict[IdentifierKind, int]:
        """Invalid value counts per identifier kind, zero for passing kinds."""
        counts = {kind: 0 for kind in self.checked.values()}
        for issue in self.issues:
            counts[issue.kind] = counts.get(issue.kind, 0) + issue.count
        return counts

    def to_dict(self) -> dict:
        return {
            "source": self.source,
            "row_count": self.row_count,
            "checked": {column: kind.value for column, kind in self.checked.items()},
            "invalid_by_kind": {kind.value: n for kind, n in self.by_kind().items()},
            "issues": [issue.to_dict() for issue in self.issues],
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def filter_by_severity(self, min_severity: Severity) -> "Report":
        """Return a new report keeping issues at or above min_severity."""
        return Report(
            issues=[i for i in self.issues if i.severity >= min_severity],
            checked=dict(self.checked),
            source=self.source,
            row_count=self.row_count,
        )

    @property
    def has_issues(self) -> bool:
        return bool(self.issues)
