"""Terminal text utilities: escape stripping, width measurement, padding.

Provides the visible-width oracle used to size table columns and the fill
functions used to pad cell lines to a column width.  Widths are measured on
grapheme clusters so that wide East-Asian characters and emoji sequences
occupy two columns while combining marks occupy none.
"""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass, field
from typing import Callable

import grapheme
import wcwidth as _wcwidth

WidthMeasurer = Callable[[str], int]
PadFunction = Callable[[str, int], str]


# ---------------------------------------------------------------------------
# Escape sequences
# ---------------------------------------------------------------------------

_STRIP_RE = re.compile(
    r"\x1b\[[0-?]*[ -/]*[@-~]"                # CSI (SGR, cursor, private modes)
    r"|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)"     # OSC (titles, OSC 8 hyperlinks)
    r"|\x1b[P^_X][^\x07\x1b]*(?:\x07|\x1b\\)"  # DCS / PM / APC / SOS
    r"|\x1b[@-Z\\-_]"                         # two-byte Fe sequences
)


def strip_ansi(text: str) -> str:
    """Return *text* with terminal escape sequences removed."""
    if "\x1b" not in text:
        return text
    return _STRIP_RE.sub("", text)


# ---------------------------------------------------------------------------
# Grapheme width
# ---------------------------------------------------------------------------

def _codepoint_width(ch: str, east_asian: bool) -> int:
    cp = ord(ch)
    # Control characters
    if cp < 0x20 or (0x7F <= cp <= 0x9F):
        return 0
    if east_asian and unicodedata.east_asian_width(ch) == "A":
        return 2
    return max(_wcwidth.wcwidth(ch), 0)


def _grapheme_width(g: str, east_asian: bool = False) -> int:
    """Return the terminal display width of a single grapheme cluster.

    Rules:
    1. Zero-width characters (control, combining marks, etc.) -> 0
    2. Emoji (VS16, ZWJ sequences, skin tones, flags) -> 2
    3. Otherwise the width of the first codepoint.
    """
    if not g:
        return 0

    if len(g) == 1:
        return _codepoint_width(g, east_asian)

    for ch in g:
        cp = ord(ch)
        if cp == 0xFE0F:  # VS16
            return 2
        if cp == 0x200D:  # ZWJ
            return 2
        if 0x1F3FB <= cp <= 0x1F3FF:  # Skin tone modifiers
            return 2
        if 0x1F1E6 <= cp <= 0x1F1FF:  # Regional indicators
            return 2

    first = g[0]
    if ord(first) >= 0x1F000:
        return 2

    cat = unicodedata.category(first)
    if cat.startswith("M") or cat == "Cf":
        return 0

    return _codepoint_width(first, east_asian)


def _is_printable_ascii(text: str) -> bool:
    for ch in text:
        cp = ord(ch)
        if cp < 0x20 or cp > 0x7E:
            return False
    return True


# ---------------------------------------------------------------------------
# Fill functions
# ---------------------------------------------------------------------------

def fill_right(text: str, width: int, measure: WidthMeasurer | None = None) -> str:
    """Left-justify *text* by appending spaces up to *width* columns."""
    w = (measure or visible_width)(strip_ansi(text))
    if w >= width:
        return text
    return text + " " * (width - w)


def fill_left(text: str, width: int, measure: WidthMeasurer | None = None) -> str:
    """Right-justify *text* by prepending spaces up to *width* columns."""
    w = (measure or visible_width)(strip_ansi(text))
    if w >= width:
        return text
    return " " * (width - w) + text


def fill_center(text: str, width: int, measure: WidthMeasurer | None = None) -> str:
    """Center *text* within *width* columns; odd padding goes to the right."""
    w = (measure or visible_width)(strip_ansi(text))
    if w >= width:
        return text
    left = (width - w) // 2
    return " " * left + text + " " * (width - w - left)


FILLERS: dict[str, Callable[..., str]] = {
    "left": fill_right,
    "right": fill_left,
    "center": fill_center,
}


# ---------------------------------------------------------------------------
# WidthCondition
# ---------------------------------------------------------------------------

_WIDTH_CACHE_MAX = 512


@dataclass(frozen=True)
class WidthCondition:
    """Width policy for one terminal/locale combination.

    With *east_asian_width* set, characters of ambiguous East-Asian width
    (box drawing, Greek, Cyrillic in CJK fonts, ...) count as two columns.
    """

    east_asian_width: bool = False
    _cache: dict[str, int] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def string_width(self, text: str) -> int:
        """Visible width of *text*, ignoring escape sequences."""
        if not text:
            return 0

        stripped = strip_ansi(text)
        if not stripped:
            return 0

        if _is_printable_ascii(stripped):
            return len(stripped)

        cached = self._cache.get(stripped)
        if cached is not None:
            return cached

        total = 0
        for g in grapheme.graphemes(stripped):
            total += _grapheme_width(g, self.east_asian_width)

        if len(self._cache) >= _WIDTH_CACHE_MAX:
            self._cache.clear()
        self._cache[stripped] = total
        return total

    def fill_right(self, text: str, width: int) -> str:
        return fill_right(text, width, self.string_width)

    def fill_left(self, text: str, width: int) -> str:
        return fill_left(text, width, self.string_width)

    def fill_center(self, text: str, width: int) -> str:
        return fill_center(text, width, self.string_width)


NARROW_CONDITION = WidthCondition()


def visible_width(text: str) -> int:
    """Calculate the visible terminal width of *text*.

    Uses the narrow condition: ambiguous-width characters count as one column.
    """
    return NARROW_CONDITION.string_width(text)
