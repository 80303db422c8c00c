"""WCAG relative luminance and contrast ratio.

Scalar functions take a colour string or an RGB triple. The *_array /
contrast_matrix variants do the same maths over a whole palette with numpy.

Gamma correction uses the 0.03928 threshold (WCAG 2.0 text) so results
match the component libraries these checks run against.
"""

from collections.abc import Sequence

import numpy as np

from a11y_checker.core.colour import RGB, parse_colour

LINEAR_THRESHOLD = 0.03928
# ITU-R BT.709
COEFFICIENTS = (0.2126, 0.7152, 0.0722)

Colour = str | tuple[int, int, int]


def _as_rgb(colour: Colour) -> RGB:
    if isinstance(colour, str):
        return parse_colour(colour)
    r, g, b = colour
    return RGB(int(r), int(g), int(b))


def _linearise(channel: int) -> float:
    c = channel / 255
    if c <= LINEAR_THRESHOLD:
        return c / 12.92
    return float(((c + 0.055) / 1.055) ** 2.4)


def relative_luminance(colour: Colour) -> float:
    """Relative luminance in [0, 1] of a colour string or RGB triple."""
    r, g, b = _as_rgb(colour)
    kr, kg, kb = COEFFICIENTS
    return kr * _linearise(r) + kg * _linearise(g) + kb * _linearise(b)


def contrast_ratio(foreground: Colour, background: Colour) -> float:
    """WCAG contrast ratio (1.0 to 21.0). Symmetric in its arguments."""
    l1 = relative_luminance(foreground)
    l2 = relative_luminance(background)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def luminance_array(colours: Sequence[Colour]) -> np.ndarray:
    """Relative luminance of every colour, as a float64 array of shape (n,)."""
    if not colours:
        return np.zeros(0, dtype=np.float64)
    # Plain int lists, not uint8, so the division in float64
    arr = np.array([list(_as_rgb(c)) for c in colours], dtype=np.float64) / 255.0
    linear = np.where(arr <= LINEAR_THRESHOLD, arr / 12.92, ((arr + 0.055) / 1.055) ** 2.4)
    return linear @ np.array(COEFFICIENTS, dtype=np.float64)


def contrast_matrix(colours: Sequence[Colour]) -> np.ndarray:
    """Pairwise contrast ratios, shape (n, n). Symmetric with a unit diagonal."""
    lum = luminance_array(colours)
    lighter = np.maximum.outer(lum, lum)
    darker = np.minimum.outer(lum, lum)
    return (lighter + 0.05) / (darker + 0.05)
