"""Parsers for the loosely typed values found in plugin configuration."""

from __future__ import annotations

import re
from typing import Any

TRUTHY_VALUES = ("on", "1", "true")
FALSY_VALUES = ("off", "0", "false", "null")

# Accepts 100,100,100 and 100 100 100
RGB_PATTERN = re.compile(r"([0-9]{1,3})[^0-9]+([0-9]{1,3})[^0-9]+([0-9]{1,3})")
HEX_PATTERN = re.compile(r"[0-9a-fA-F]{3}|[0-9a-fA-F]{6}")


def _expand_hex(value: str) -> str | None:
    """Convert ``#rgb`` / ``#rrggbb`` into the ``r, g, b`` decimal form."""
    digits = value[1:]
    if not HEX_PATTERN.fullmatch(digits):
        return None
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)

    channels = [int(digits[i:i + 2], 16) for i in (0, 2, 4)]
    return ", ".join(str(channel) for channel in channels)


def parse_color(value: Any) -> int | None:
    """Parse a color into its 24-bit integer form.

    Accepted formats:

    - ``#RGB`` and ``#RRGGBB``
    - ``rrr, ggg, bbb``
    - ``rrr ggg bbb`` (any non-digit separator works)

    Returns:
        The packed ``0xRRGGBB`` integer, or ``None`` when the value is not a
        color or any channel is above 255.
    """
    if not isinstance(value, str):
        return None

    text = value.strip()
    if text.startswith("#"):
        expanded = _expand_hex(text)
        if expanded is None:
            return None
        text = expanded

    match = RGB_PATTERN.fullmatch(text)
    if not match:
        return None

    red, green, blue = (int(group, 10) for group in match.groups())
    if red > 255 or green > 255 or blue > 255:
        return None

    return (red << 16) + (green << 8) + blue


def parse_custom_boolean(value: Any) -> bool | None:
    """Parse a truthy/falsy token.

    Native booleans pass through. Strings are matched case-sensitively against
    ``TRUTHY_VALUES`` and ``FALSY_VALUES``; anything else returns ``None``.
    """
    if isinstance(value, bool):
        return value

    if value in TRUTHY_VALUES:
        return True
    if value in FALSY_VALUES:
        return False

    return None
