"""Table cell: text plus optional per-cell padding and decoration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from tablelite.utils import PadFunction


@dataclass
class Cell:
    """One table entry, possibly spanning several lines.

    ``decorate`` is applied to each padded content line, so colour can be
    added around text without affecting width measurement.  ``no_spacer``
    suppresses the column spacer immediately before this cell.
    """

    text: str = ""
    decorate: Callable[[str], str] | None = None
    pad: PadFunction | None = None
    no_spacer: bool = False

    _lines: list[str] | None = field(
        default=None, init=False, repr=False, compare=False
    )

    @property
    def lines(self) -> list[str]:
        # Split once; later edits to ``text`` are not picked up.
        if self._lines is None:
            self._lines = self.text.split("\n")
        return self._lines

    def filler(self, default: PadFunction) -> PadFunction:
        return self.pad if self.pad is not None else default

    def render_line(
        self, index: int, width: int, default_pad: PadFunction
    ) -> tuple[str, bool]:
        """Return line *index* padded to *width*, and whether it exists.

        Past the last line a blank field of the full width is returned so
        that following columns stay aligned.  Blank fields are not decorated.
        """
        pad = self.filler(default_pad)
        lines = self.lines
        if index >= len(lines):
            return pad("", width), False

        padded = pad(lines[index], width)
        if self.decorate is not None:
            padded = self.decorate(padded)
        return padded, True
