"""tablelite: aligned, ANSI-aware text tables for the terminal."""

from tablelite.cell import Cell
from tablelite.settings import (
    TableSettings,
    detect_east_asian_width,
    is_east_asian_locale,
)
from tablelite.table import Table

# Utilities
from tablelite.utils import (
    NARROW_CONDITION,
    WidthCondition,
    fill_center,
    fill_left,
    fill_right,
    strip_ansi,
    visible_width,
)

__all__ = [
    # Table
    "Cell",
    "Table",
    # Settings
    "TableSettings",
    "detect_east_asian_width",
    "is_east_asian_locale",
    # Utilities
    "NARROW_CONDITION",
    "WidthCondition",
    "fill_center",
    "fill_left",
    "fill_right",
    "strip_ansi",
    "visible_width",
]
