"""
Table renderer with ASCII border drawing.

This module provides a TableRenderer class and the generate_table()
convenience function for rendering a grid of strings as a bordered table.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from .ansi import pad_ansi_cell, visible_length
from .exceptions import ConfigurationError
from .models import RenderConfig, TableStyle

logger = logging.getLogger(__name__)

Cell = Any
Row = Sequence[Cell]


def _cell(row: Row | None, index: int) -> str | None:
    """Cell at index, or None when the row is shorter (ragged grid)."""
    if row is None or index >= len(row):
        return None
    value = row[index]
    if value is None or isinstance(value, str):
        return value
    return str(value)


def max_array_index(rows: Sequence[Row | None]) -> int:
    """Highest last-index across all rows (-1 when every row is empty)."""
    return max((len(row) if row is not None else 0) for row in rows) - 1


def column_widths(rows: Sequence[Row | None], ansi: bool = False) -> list[int]:
    """
    Compute the width of every column.

    Args:
        rows: Grid rows, possibly of differing lengths
        ansi: Measure cells without their colour escape sequences

    Returns:
        One width per column; the widest row decides the column count
    """
    return [
        max(visible_length(_cell(row, i), ansi=ansi) for row in rows)
        for i in range(max_array_index(rows) + 1)
    ]


class TableRenderer:
    """Render a grid of strings as a bordered text table.

    Example output (header_row=True):
        +-------+----------+----------+
        | Name  | Rank     | Serial   |
        +-------+----------+----------+
        | alice | pvt      | 123456   |
        | bob   | cpl      | 98765321 |
        | carol | brig gen | 8745     |
        +-------+----------+----------+
    """

    def __init__(self, config: RenderConfig | None = None) -> None:
        """Initialize the table renderer.

        Args:
            config: Layout options and glyphs. Defaults to RenderConfig().
        """
        self._config = config if config is not None else RenderConfig()

    @property
    def config(self) -> RenderConfig:
        return self._config

    @property
    def style(self) -> TableStyle:
        return self._config.style

    def format_row(self, widths: Sequence[int], values: Sequence[str]) -> str:
        """Join left-justified cells with the column separator.

        Cells longer than their column are not truncated.
        """
        sep = self.style.column_separator
        cells = [value.ljust(w) for value, w in zip(values, widths, strict=True)]
        return f"{sep} " + f" {sep} ".join(cells) + f" {sep}"

    def row_separator(self, widths: Sequence[int]) -> str:
        """Build the ordinary rule line, e.g. ``+-------+-----+``."""
        return self._rule(widths, self.style.row_separator, self.style.corner_marker)

    def header_separator(self, widths: Sequence[int]) -> str:
        """Build the rule drawn below the header when rows are separated."""
        return self._rule(
            widths, self.style.header_row_separator, self.style.header_corner_marker
        )

    @staticmethod
    def _rule(widths: Sequence[int], fill: str, corner: str) -> str:
        inner = f"{fill}{corner}{fill}".join(fill * w for w in widths)
        return f"{corner}{fill}{inner}{fill}{corner}"

    def render(self, rows: Sequence[Row | None] | None) -> str:
        """Render rows as a formatted table.

        Args:
            rows: List of rows, each row a list of cell values. Missing
                trailing cells and None cells render as empty.

        Returns:
            Table lines joined with newlines, without a trailing newline

        Raises:
            ConfigurationError: If rows is None, empty, or has no columns
        """
        if rows is None:
            raise ConfigurationError("you must pass the 'rows' argument", option="rows")
        if len(rows) == 0:
            raise ConfigurationError("rows must contain at least one row", option="rows")

        config = self._config
        max_index = max_array_index(rows)
        if max_index < 0:
            raise ConfigurationError("rows must contain at least one column", option="rows")

        widths = column_widths(rows, ansi=config.ansi)
        logger.debug(
            "Rendering %d row(s) x %d column(s), widths=%s", len(rows), len(widths), widths
        )

        row_sep = self.row_separator(widths)
        head_row_sep = self.header_separator(widths)
        columns = range(max_index + 1)

        lines: list[str] = []
        if not config.top_and_tail:
            lines.append(row_sep)

        data_begins = 0
        if config.header_row:
            data_begins = 1
            lines.append(self.format_row(widths, [_cell(rows[0], i) or "" for i in columns]))
            lines.append(head_row_sep if config.separate_rows else row_sep)

        data_rows = rows[data_begins:]
        last_row_number = len(data_rows)
        for row_number, row in enumerate(data_rows, start=1):
            values = [_cell(row, i) or "" for i in columns]
            if config.ansi:
                values = self._pad_ansi(row, values, widths)

            lines.append(self.format_row(widths, values))

            if config.separate_rows and (
                not config.top_and_tail or row_number < last_row_number
            ):
                lines.append(row_sep)

        # separate_rows already drew the bottom rule after the last row
        if not (config.separate_rows or config.top_and_tail):
            lines.append(row_sep)

        return "\n".join(line for line in lines if line)

    def _pad_ansi(
        self, row: Row | None, values: list[str], widths: Sequence[int]
    ) -> list[str]:
        """Pad the cells present in row to visible width, on a copy."""
        padded = list(values)
        present = len(row) if row is not None else 0
        for i in range(present):
            padded[i], pad = pad_ansi_cell(_cell(row, i), widths[i])
            if pad < 0:
                logger.debug("Clamped negative ANSI padding %d in column %d", pad, i)
        return padded


def generate_table(
    rows: Sequence[Row | None] | None = None,
    *,
    header_row: Any = False,
    separate_rows: Any = False,
    top_and_tail: Any = False,
    ansi: Any = False,
    style: TableStyle | None = None,
    column_separator: str | None = None,
    row_separator: str | None = None,
    corner_marker: str | None = None,
    header_row_separator: str | None = None,
    header_corner_marker: str | None = None,
) -> str:
    """
    Format a two-dimensional grid as a text table.

    Args:
        rows: Grid of cells (required). Rows may differ in length.
        header_row: Treat the first row as a header and rule it off
        separate_rows: Draw a rule between every row, and a heavier
            header rule when header_row is also set
        top_and_tail: Skip the top and bottom border lines
        ansi: Cells contain ANSI colour escapes; compensate when padding
        style: Base glyph set, TableStyle() by default
        column_separator: Override for style.column_separator
        row_separator: Override for style.row_separator
        corner_marker: Override for style.corner_marker
        header_row_separator: Override for style.header_row_separator
        header_corner_marker: Override for style.header_corner_marker

    Returns:
        The rendered table, lines joined with "\\n"

    Raises:
        ConfigurationError: If rows is missing or empty, or a glyph is invalid

    Example:
        >>> print(generate_table([["a", "bb"], ["ccc", "d"]], header_row=True))
        +-----+----+
        | a   | bb |
        +-----+----+
        | ccc | d  |
        +-----+----+
    """
    if rows is None:
        raise ConfigurationError(
            "generate_table(): you must pass the 'rows' argument", option="rows"
        )

    config = RenderConfig.from_options(
        header_row=header_row,
        separate_rows=separate_rows,
        top_and_tail=top_and_tail,
        ansi=ansi,
        style=style,
        column_separator=column_separator,
        row_separator=row_separator,
        corner_marker=corner_marker,
        header_row_separator=header_row_separator,
        header_corner_marker=header_corner_marker,
    )
    return TableRenderer(config).render(rows)


# Backwards-compatible name
table = generate_table
