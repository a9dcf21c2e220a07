"""Aligned text tables with multi-line, ANSI-styled cells.

Column widths are resolved once from the visible width of every line of
every cell and reused for each row.  A row renders as many output lines as
its tallest cell; shorter cells contribute blank fields padded to their
column width so that later columns stay aligned.

A ``Table`` is not thread-safe.  Rendering fills a width cache that
``append`` and ``append_cells`` clear, so build and render from a single
thread or synchronize externally.
"""

from __future__ import annotations

import io
import logging
from typing import Iterable, TextIO

from tablelite.cell import Cell
from tablelite.settings import TableSettings
from tablelite.utils import PadFunction, WidthMeasurer, strip_ansi

logger = logging.getLogger(__name__)

Row = list[Cell]


class Table:
    """An append-only sequence of rows rendered as aligned columns."""

    def __init__(
        self,
        column_spacer: str | None = None,
        default_pad: PadFunction | None = None,
        width_measurer: WidthMeasurer | None = None,
        settings: TableSettings | None = None,
    ) -> None:
        if settings is None:
            settings = TableSettings.from_env()

        self.column_spacer = (
            column_spacer if column_spacer is not None else settings.column_spacer
        )
        self._width_measurer: WidthMeasurer = (
            width_measurer
            if width_measurer is not None
            else settings.condition().string_width
        )
        self._settings = settings
        self._custom_pad = default_pad is not None
        self.default_pad: PadFunction = (
            default_pad
            if default_pad is not None
            else settings.pad_function(self._width_measurer)
        )

        self._rows: list[Row] = []
        self._column_widths: list[int] | None = None

    # ------------------------------------------------------------------
    # Rows
    # ------------------------------------------------------------------

    def append(self, row: Iterable[str]) -> None:
        """Append a row of plain strings, one per column."""
        self.append_cells(Cell(text) for text in row)

    def append_cells(self, row: Iterable[Cell]) -> None:
        """Append a row of prebuilt cells."""
        self._rows.append(list(row))
        self.invalidate()

    def extend(self, rows: Iterable[Iterable[str]]) -> None:
        for row in rows:
            self.append(row)

    @property
    def rows(self) -> tuple[Row, ...]:
        return tuple(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    # ------------------------------------------------------------------
    # Width resolution
    # ------------------------------------------------------------------

    @property
    def width_measurer(self) -> WidthMeasurer:
        return self._width_measurer

    @width_measurer.setter
    def width_measurer(self, measurer: WidthMeasurer) -> None:
        self._width_measurer = measurer
        if not self._custom_pad:
            self.default_pad = self._settings.pad_function(measurer)
        self.invalidate()

    def invalidate(self) -> None:
        """Drop the cached column widths."""
        if self._column_widths is not None:
            logger.debug("Invalidating cached column widths")
        self._column_widths = None

    def column_widths(self) -> list[int]:
        """Return the visible width of each column, computing it if needed."""
        if self._column_widths is not None:
            return self._column_widths

        widths: list[int] = []
        for row in self._rows:
            for index, cell in enumerate(row):
                if len(widths) <= index:
                    widths.append(0)
                for line in cell.lines:
                    width = self._width_measurer(strip_ansi(line))
                    if widths[index] < width:
                        widths[index] = width

        logger.debug("Resolved widths for %d rows: %s", len(self._rows), widths)
        self._column_widths = widths
        return widths

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_row(self, row: Row) -> list[str]:
        """Render one row into output lines (without trailing newlines)."""
        widths = self.column_widths()
        lines: list[str] = []

        line_index = 0
        while True:
            found = False
            parts: list[str] = []
            use_spacer = False
            for col_index, cell in enumerate(row):
                text, exists = cell.render_line(
                    line_index, widths[col_index], self.default_pad
                )
                if use_spacer and not cell.no_spacer:
                    parts.append(self.column_spacer)
                # No spacer after an empty column.
                use_spacer = widths[col_index] > 0
                parts.append(text)
                if exists:
                    found = True
            if not found:
                break
            lines.append("".join(parts))
            line_index += 1

        return lines

    def render_lines(self) -> list[str]:
        lines: list[str] = []
        for row in self._rows:
            lines.extend(self.render_row(row))
        return lines

    def render_to(self, sink: TextIO) -> None:
        """Write every rendered line, newline-terminated, to *sink*."""
        for row in self._rows:
            for line in self.render_row(row):
                sink.write(line)
                sink.write("\n")

    def render(self) -> str:
        buf = io.StringIO()
        self.render_to(buf)
        return buf.getvalue()

    def __str__(self) -> str:
        return self.render()
