"""Table configuration with environment-variable defaults.

Recognized variables:

* ``TABLELITE_COLUMN_SPACER`` -- separator inserted between columns.
* ``TABLELITE_ALIGN`` -- default alignment: ``left``, ``right`` or ``center``.
* ``TABLELITE_EASTASIAN`` -- force ambiguous-width characters to two columns
  (``1``) or one column (``0``).  When unset the locale decides.
"""

from __future__ import annotations

import functools
import logging
import os
import re
from dataclasses import dataclass
from typing import Literal

from tablelite.utils import FILLERS, PadFunction, WidthCondition, WidthMeasurer

logger = logging.getLogger(__name__)

Align = Literal["left", "right", "center"]

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")

_LOCALE_RE = re.compile(r"^[a-z][a-z][a-z]?(?:_[A-Z][A-Z])?\.(.+)")

# Legacy multibyte charsets whose fonts render ambiguous characters wide.
_CJK_CHARSETS = frozenset(
    {
        "big5",
        "big5hkscs",
        "cp932",
        "cp936",
        "cp949",
        "cp950",
        "euc-jp",
        "euc-kr",
        "euc-tw",
        "eucjp",
        "euckr",
        "gb18030",
        "gb2312",
        "gbk",
        "shift_jis",
        "sjis",
    }
)


def _parse_bool(name: str, value: str) -> bool | None:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    logger.warning("Ignoring %s=%r: expected a boolean", name, value)
    return None


def is_east_asian_locale(locale: str) -> bool:
    """Return ``True`` if *locale* implies ambiguous-width characters are wide."""
    if not locale or locale in ("C", "POSIX"):
        return False

    charset = locale.lower()
    match = _LOCALE_RE.match(locale)
    if match:
        charset = match.group(1).lower()
    if charset.endswith("@cjk_narrow"):
        return False
    charset = charset.split("@", 1)[0]

    if charset in _CJK_CHARSETS:
        return True
    if charset in ("utf-8", "utf8"):
        return locale.startswith(("ja", "ko", "zh"))
    return False


def detect_east_asian_width() -> bool:
    """Decide the ambiguous-width policy from the environment."""
    forced = os.environ.get("TABLELITE_EASTASIAN", "")
    if forced:
        parsed = _parse_bool("TABLELITE_EASTASIAN", forced)
        if parsed is not None:
            return parsed

    for name in ("LC_ALL", "LC_CTYPE", "LANG"):
        locale = os.environ.get(name, "")
        if locale:
            return is_east_asian_locale(locale)
    return False


@dataclass
class TableSettings:
    """Defaults applied to a ``Table`` for anything not passed explicitly."""

    column_spacer: str = " "
    align: Align = "left"
    east_asian_width: bool | None = None

    def __post_init__(self) -> None:
        if self.align not in FILLERS:
            raise ValueError(
                f"align must be one of {sorted(FILLERS)}, got {self.align!r}"
            )

    @classmethod
    def from_env(cls) -> TableSettings:
        kwargs: dict[str, object] = {}

        spacer = os.environ.get("TABLELITE_COLUMN_SPACER")
        if spacer is not None:
            kwargs["column_spacer"] = spacer

        align = os.environ.get("TABLELITE_ALIGN", "").strip().lower()
        if align in FILLERS:
            kwargs["align"] = align
        elif align:
            logger.warning("Ignoring TABLELITE_ALIGN=%r: unknown alignment", align)

        return cls(**kwargs)  # type: ignore[arg-type]

    def condition(self) -> WidthCondition:
        east_asian = self.east_asian_width
        if east_asian is None:
            east_asian = detect_east_asian_width()
        return WidthCondition(east_asian_width=east_asian)

    def pad_function(self, measure: WidthMeasurer) -> PadFunction:
        """Return the fill function for ``align`` measuring with *measure*."""
        return functools.partial(FILLERS[self.align], measure=measure)
