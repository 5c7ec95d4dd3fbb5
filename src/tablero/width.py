"""Display width measurement for cell content.

All column-width decisions go through ``display_width``. Swapping the
measurement (e.g. for a terminal with a different Unicode table) only
requires ``FormatConfig.text_width``; the formatter never measures text
any other way.

Measurement rules (default):
- NFC normalization first, when ``config.normalize`` is set
- ``config.wide_chars`` count 2, ``config.narrow_chars`` count 1
- zero-width characters (per wcwidth) count 0; control characters fall
  through to the East Asian Width rules
- East Asian Fullwidth/Wide count 2
- East Asian Ambiguous count 2 only when ``config.ambiguous_as_wide``
- everything else counts 1

"""

from __future__ import annotations

import unicodedata
from typing import TYPE_CHECKING

import wcwidth

if TYPE_CHECKING:
    from tablero.config import FormatConfig


def char_width(char: str, config: FormatConfig) -> int:
    """Return the display width of a single character."""
    if char in config.wide_chars:
        return 2
    if char in config.narrow_chars:
        return 1
    if wcwidth.wcwidth(char) == 0:
        return 0
    eaw = unicodedata.east_asian_width(char)
    if eaw in ("F", "W"):
        return 2
    if eaw == "A":
        return 2 if config.ambiguous_as_wide else 1
    return 1


def display_width(text: str, config: FormatConfig) -> int:
    """Calculate the display width of a string.

    Args:
        text: The string to measure.
        config: Active format configuration.

    Returns:
        The display width in columns.

    Example:
        >>> display_width("表", FormatConfig())
        2
    """
    if config.text_width is not None:
        return config.text_width(text)
    if config.normalize:
        text = unicodedata.normalize("NFC", text)
    return sum(char_width(char, config) for char in text)
