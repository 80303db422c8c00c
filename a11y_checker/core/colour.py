"""Colour parsing: hex, rgb()/rgba(), hsl()/hsla() and white/black.

Everything normalises to an RGB triple of ints in [0, 255].
Malformed input raises ColourParseError rather than producing NaN channels.
"""

import re
from typing import NamedTuple

from PIL import ImageColor


class ColourParseError(ValueError):
    """Raised when a colour string is not in one of the accepted forms."""

    def __init__(self, value: str, reason: str = 'unrecognised colour'):
        super().__init__(f'{reason}: {value!r}')
        self.value = value


class RGB(NamedTuple):
    r: int
    g: int
    b: int


# Only these two names are accepted; token files use hex everywhere else
NAMED = {
    'white': '#FFFFFF',
    'black': '#000000',
}

_RGB_RE = re.compile(
    r'^rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*[\d.]+\s*)?\)$',
    re.IGNORECASE,
)
_HSL_RE = re.compile(
    r'^hsla?\(\s*(\d+(?:\.\d+)?)\s*,\s*(\d+(?:\.\d+)?)%\s*,\s*(\d+(?:\.\d+)?)%\s*(?:,\s*[\d.]+\s*)?\)$',
    re.IGNORECASE,
)
_HEX_RE = re.compile(r'^[0-9a-fA-F]{6}$')


def parse_colour(value: str) -> RGB:
    """Parse a colour string into an RGB triple.

    Accepts 3/6-digit hex (with or without '#'), rgb(r, g, b), rgba(...)
    with alpha ignored, hsl(h, s%, l%), hsla(...), and the case-insensitive
    literals 'white' and 'black'.
    """
    if not isinstance(value, str):
        raise ColourParseError(repr(value), 'colour must be a string')
    text = value.strip()

    named = NAMED.get(text.lower())
    if named:
        text = named

    m = _RGB_RE.match(text)
    if m:
        channels = tuple(int(g) for g in m.groups())
        if any(c > 255 for c in channels):
            raise ColourParseError(value, 'rgb channel out of range')
        return RGB(*channels)

    m = _HSL_RE.match(text)
    if m:
        h, s, l = m.groups()
        # ImageColor does not clamp, so s/l over 100% would give channels outside 0-255
        if float(s) > 100 or float(l) > 100:
            raise ColourParseError(value, 'hsl percentage out of range')
        # ImageColor only understands the 3-argument form
        r, g, b = ImageColor.getrgb(f'hsl({h},{s}%,{l}%)')[:3]
        return RGB(r, g, b)

    hex_part = text[1:] if text.startswith('#') else text
    if len(hex_part) == 3:
        hex_part = ''.join(ch * 2 for ch in hex_part)
    if not _HEX_RE.match(hex_part):
        raise ColourParseError(value)
    return RGB(int(hex_part[0:2], 16), int(hex_part[2:4], 16), int(hex_part[4:6], 16))


def try_parse_colour(value: str) -> RGB | None:
    """Like parse_colour, but returns None for malformed input."""
    try:
        return parse_colour(value)
    except ColourParseError:
        return None


def is_valid_colour(value: str) -> bool:
    return try_parse_colour(value) is not None


def rgb_to_hex(rgb: tuple[int, int, int]) -> str:
    r, g, b = rgb
    return f'#{r:02x}{g:02x}{b:02x}'
