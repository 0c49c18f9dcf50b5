"""
WCAG 2.1 contrast utilities.

Pure functions for measuring and adjusting color contrast. Text must meet
AAA (7:1 for normal text). Adjustment keeps hue and saturation fixed and
searches lightness only.
"""

from __future__ import annotations

import logging
import math
import re
from typing import NamedTuple

from .errors import ContrastUnattainable

logger = logging.getLogger(__name__)

__all__ = [
    "AAA_NORMAL_TEXT",
    "AA_NORMAL_TEXT",
    "HSL",
    "RGB",
    "linearize",
    "parse_hex",
    "relative_luminance",
    "contrast_ratio",
    "meets_contrast",
    "hex_to_hsl",
    "hsl_to_hex",
    "adjust_for_contrast",
]

AAA_NORMAL_TEXT = 7.0
AA_NORMAL_TEXT = 4.5

MAX_ITERATIONS = 50
INTERVAL_TOLERANCE = 0.1
RATIO_TOLERANCE = 0.1

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


class RGB(NamedTuple):
    r: int
    g: int
    b: int


class HSL(NamedTuple):
    """Hue in degrees (0-360), saturation and lightness in percent (0-100)."""

    h: float
    s: float
    l: float  # noqa: E741


# =============================================================================
# Parsing & luminance
# =============================================================================


def parse_hex(hex_color: str) -> RGB:
    """Parse #rgb, #rgba, #rrggbb or #rrggbbaa into channels. Alpha is ignored."""
    match = _HEX_RE.match(hex_color.strip())
    if not match:
        raise ValueError(f"Not a hex color: {hex_color!r}")
    digits = match.group(1)
    if len(digits) in (3, 4):
        digits = "".join(c + c for c in digits)
    return RGB(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def linearize(channel: float) -> float:
    """Convert an sRGB channel (0-255) to linear light (0-1)."""
    c = channel / 255
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(hex_color: str) -> float:
    """WCAG 2.1 relative luminance (0-1)."""
    r, g, b = parse_hex(hex_color)
    return 0.2126 * linearize(r) + 0.7152 * linearize(g) + 0.0722 * linearize(b)


def contrast_ratio(color1: str, color2: str) -> float:
    """WCAG 2.1 contrast ratio (1-21). Symmetric in its arguments."""
    l1 = relative_luminance(color1)
    l2 = relative_luminance(color2)
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def meets_contrast(
    foreground: str, background: str, target: float = AAA_NORMAL_TEXT
) -> bool:
    """Whether the pair reaches ``target`` (default AAA normal text)."""
    return contrast_ratio(foreground, background) >= target


# =============================================================================
# HSL conversions
# =============================================================================


def hex_to_hsl(hex_color: str) -> HSL:
    """Convert a hex color to HSL (h: 0-360, s/l: 0-100)."""
    rgb = parse_hex(hex_color)
    r, g, b = (c / 255 for c in rgb)

    high = max(r, g, b)
    low = min(r, g, b)
    delta = high - low

    h = 0.0
    s = 0.0
    l = (high + low) / 2  # noqa: E741

    if delta != 0:
        s = delta / (2 - high - low) if l > 0.5 else delta / (high + low)
        if high == r:
            h = ((g - b) / delta + (6 if g < b else 0)) / 6
        elif high == g:
            h = ((b - r) / delta + 2) / 6
        else:
            h = ((r - g) / delta + 4) / 6

    return HSL(h * 360, s * 100, l * 100)


def _to_byte(value: float) -> int:
    # Round half up, matching CSS serializers rather than banker's rounding.
    return min(255, max(0, math.floor(value * 255 + 0.5)))


def hsl_to_hex(h: float, s: float, l: float) -> str:  # noqa: E741
    """Convert HSL (h: 0-360, s/l: 0-100) to a lowercase #rrggbb string."""
    h_norm = (h % 360) / 360
    s_norm = s / 100
    l_norm = l / 100

    c = (1 - abs(2 * l_norm - 1)) * s_norm
    x = c * (1 - abs((h_norm * 6) % 2 - 1))
    m = l_norm - c / 2

    if h_norm < 1 / 6:
        r, g, b = c, x, 0.0
    elif h_norm < 2 / 6:
        r, g, b = x, c, 0.0
    elif h_norm < 3 / 6:
        r, g, b = 0.0, c, x
    elif h_norm < 4 / 6:
        r, g, b = 0.0, x, c
    elif h_norm < 5 / 6:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return "#" + "".join(f"{_to_byte(v + m):02x}" for v in (r, g, b))


# =============================================================================
# Adjustment
# =============================================================================


def adjust_for_contrast(
    foreground: str, background: str, target: float = AAA_NORMAL_TEXT
) -> str:
    """
    Adjust a foreground color until it meets ``target`` against ``background``.

    Hue and saturation are held fixed; lightness is binary-searched in
    [0, 100] for at most MAX_ITERATIONS steps or until the interval is
    narrower than INTERVAL_TOLERANCE. The search lightens on dark
    backgrounds (luminance < 0.5) and darkens otherwise, and stops early
    once a passing candidate is within RATIO_TOLERANCE of the target.

    Args:
        foreground: Hex color to adjust
        background: Hex background color
        target: Target contrast ratio (default 7:1, AAA normal text)

    Returns:
        ``foreground`` unchanged if it already passes, else the adjusted hex.

    Raises:
        ContrastUnattainable: If no candidate in the search direction passes.
    """
    if meets_contrast(foreground, background, target):
        return foreground

    hue, saturation, _ = hex_to_hsl(foreground)
    lighten = relative_luminance(background) < 0.5

    low, high = 0.0, 100.0
    best_lightness: float | None = None
    best_ratio = contrast_ratio(foreground, background)
    iterations = 0

    while iterations < MAX_ITERATIONS and high - low > INTERVAL_TOLERANCE:
        test_lightness = (low + high) / 2
        candidate = hsl_to_hex(hue, saturation, test_lightness)
        ratio = contrast_ratio(candidate, background)
        best_ratio = max(best_ratio, ratio)

        if ratio >= target:
            best_lightness = test_lightness
            if ratio - target < RATIO_TOLERANCE:
                break
            # Enough contrast: step back toward the original to land near target
            if lighten:
                high = test_lightness
            else:
                low = test_lightness
        elif lighten:
            low = test_lightness
        else:
            high = test_lightness

        iterations += 1

    if best_lightness is not None:
        adjusted = hsl_to_hex(hue, saturation, best_lightness)
        if meets_contrast(adjusted, background, target):
            logger.debug(
                "Adjusted %s -> %s on %s after %d iteration(s)",
                foreground,
                adjusted,
                background,
                iterations,
            )
            return adjusted

    raise ContrastUnattainable(foreground, background, target, best_ratio)
