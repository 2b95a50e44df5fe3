"""Centralized layout constants for column widths.

This module provides a single source of truth for column dimensions
used across the task list, its header, and the search modal.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ColumnWidths:
    """Column widths for task display.

    Fixed columns have constant widths, dynamic columns expand based on
    available terminal width.
    """

    # Fixed-width columns
    id: int = 6
    priority: int = 8
    status: int = 12

    # Dynamic-width columns (calculated based on terminal width)
    title: int = 40
    location: int = 18

    # Spacing between columns
    col_spacing: int = 2

    @property
    def fixed_width(self) -> int:
        """Total width of fixed columns plus spacing."""
        # 4 gaps between 5 columns
        return self.id + self.priority + self.status + (4 * self.col_spacing)

    @property
    def dynamic_width(self) -> int:
        """Total width of dynamic columns."""
        return self.title + self.location

    @property
    def total_width(self) -> int:
        """Total width of all columns including spacing."""
        return self.fixed_width + self.dynamic_width


# Default column widths (for standard 100+ char terminals)
DEFAULT_WIDTHS = ColumnWidths()

# Minimum widths for dynamic columns
MIN_TITLE = 20
MIN_LOCATION = 10


def calculate_column_widths(terminal_width: int) -> ColumnWidths:
    """Calculate optimal column widths based on terminal width.

    Args:
        terminal_width: Available terminal width in characters.

    Returns:
        ColumnWidths with dimensions optimized for the terminal.
    """
    # Account for border/padding (2 chars on each side)
    available = terminal_width - 4
    remaining = available - DEFAULT_WIDTHS.fixed_width

    if remaining <= 0:
        # Terminal too narrow, use minimums
        return ColumnWidths(title=MIN_TITLE, location=MIN_LOCATION)

    default_dynamic = DEFAULT_WIDTHS.dynamic_width

    if remaining >= default_dynamic:
        # Title takes most of the extra room
        extra = remaining - default_dynamic
        title_extra = int(extra * 0.75)
        return ColumnWidths(
            title=DEFAULT_WIDTHS.title + title_extra,
            location=DEFAULT_WIDTHS.location + (extra - title_extra),
        )

    ratio = remaining / default_dynamic
    return ColumnWidths(
        title=max(MIN_TITLE, int(DEFAULT_WIDTHS.title * ratio)),
        location=max(MIN_LOCATION, int(DEFAULT_WIDTHS.location * ratio)),
    )


def format_header_row(widths: ColumnWidths) -> str:
    """Format the column header row.

    Args:
        widths: Column widths to use.

    Returns:
        Formatted header string.
    """
    sp = " " * widths.col_spacing
    return (
        f"{'ID':<{widths.id}}{sp}"
        f"{'Title':<{widths.title}}{sp}"
        f"{'Priority':<{widths.priority}}{sp}"
        f"{'Sprint':<{widths.location}}{sp}"
        f"{'Status':<{widths.status}}"
    )
