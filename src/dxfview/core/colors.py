"""Hex color parsing for the renderer."""

import re

RGBA = tuple[int, int, int, int]

FALLBACK_RGB = (128, 128, 128)

_SHORT_HEX = re.compile(r"^#([0-9a-fA-F]{3})$")
_LONG_HEX = re.compile(r"^#([0-9a-fA-F]{6})$")


def normalize_hex_color(value: str) -> str | None:
    """Expand #rgb to #rrggbb and validate #rrggbb.

    Args:
        value: Color text, surrounding whitespace allowed

    Returns:
        Six-digit hex color, or None if the value is not a hex color
    """
    trimmed = value.strip()
    short = _SHORT_HEX.match(trimmed)
    if short:
        r, g, b = short.group(1)
        return f"#{r}{r}{g}{g}{b}{b}"
    if _LONG_HEX.match(trimmed):
        return trimmed
    return None


def parse_hex_color(value: str, alpha: float = 1.0) -> RGBA | None:
    """Parse a hex color into an RGBA tuple.

    Args:
        value: #rgb or #rrggbb
        alpha: Opacity in [0, 1], clamped

    Returns:
        (r, g, b, a) with 0-255 channels, or None if the value is invalid
    """
    normalized = normalize_hex_color(value)
    if normalized is None:
        return None
    return (
        int(normalized[1:3], 16),
        int(normalized[3:5], 16),
        int(normalized[5:7], 16),
        _alpha_channel(alpha),
    )


def with_alpha(value: str, alpha: float) -> RGBA:
    """Apply an opacity to a hex color, falling back to grey when invalid."""
    parsed = parse_hex_color(value, alpha)
    if parsed is None:
        return (*FALLBACK_RGB, _alpha_channel(alpha))
    return parsed


def _alpha_channel(alpha: float) -> int:
    return round(min(1.0, max(0.0, alpha)) * 255)
