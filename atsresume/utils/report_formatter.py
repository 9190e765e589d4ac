"""
Utility functions for formatting text-based reports and tables.

Used by the CLI to print ATS score breakdowns.
"""

from typing import Any, List


class Column:
    """Column definition for table formatting."""

    def __init__(self, name: str, width: int, align: str = "<"):
        """
        Args:
            name: Column header name
            width: Column width in characters
            align: Alignment ('<' left, '>' right, '^' center)
        """
        self.name = name
        self.width = width
        self.align = align

    def format_header(self) -> str:
        return f"{self.name:{self.align}{self.width}}"

    def format_value(self, value: Any) -> str:
        return f"{value:{self.align}{self.width}}"


class TableFormatter:
    """Builder for formatted text tables with aligned columns."""

    def __init__(self, columns: List[Column], total_width: int = 80):
        """
        Args:
            columns: List of Column definitions
            total_width: Total report width for separators
        """
        self.columns = columns
        self.total_width = total_width
        self.lines: List[str] = []

    def add_section_header(self, title: str) -> "TableFormatter":
        """Add section header with top/bottom separator lines."""
        self.lines.append("=" * self.total_width)
        self.lines.append(title)
        self.lines.append("=" * self.total_width)
        return self

    def add_table_header(self) -> "TableFormatter":
        """Add table header row with column names."""
        self.lines.append(" ".join(col.format_header() for col in self.columns))
        return self

    def add_separator(self, char: str = "-") -> "TableFormatter":
        self.lines.append(char * self.total_width)
        return self

    def add_row(self, values: List[Any]) -> "TableFormatter":
        """
        Add data row with column values.

        Raises:
            ValueError: If number of values doesn't match columns
        """
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")

        self.lines.append(" ".join(col.format_value(val) for col, val in zip(self.columns, values)))
        return self

    def add_bullets(self, title: str, items: List[str], marker: str = "-") -> "TableFormatter":
        """
        Add a titled bullet list, or '(none)' when the list is empty.

        Args:
            title: Heading printed above the items
            items: Lines to list
            marker: Bullet marker
        """
        self.lines.append("")
        self.lines.append(f"{title} ({len(items)}):")
        if not items:
            self.lines.append("  (none)")
        for item in items:
            self.lines.append(f"  {marker} {item}")
        return self

    def render(self) -> str:
        """Render accumulated lines to string."""
        return "\n".join(self.lines)


def format_score_bar(score: int, width: int = 20, fill: str = "#", empty: str = ".") -> str:
    """
    Render a 0-100 score as a fixed-width bar.

    Example:
        >>> format_score_bar(50, width=10)
        '#####.....'
    """
    filled = max(0, min(width, round(score * width / 100)))
    return fill * filled + empty * (width - filled)
