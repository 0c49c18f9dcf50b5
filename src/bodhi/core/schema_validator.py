"""
Brand spec schema validation.

Checks a BrandSpec against the category rules and the CSS color grammar.
All problems are collected and returned together; nothing short-circuits
on the first error. Unknown keys are warnings so newer specs keep working
with older compilers.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from .ir.brandspec import (
    CATEGORY_META,
    DARK_KEY,
    OPTIONAL_CATEGORIES,
    REQUIRED_CATEGORIES,
    BrandSpec,
    CategoryId,
)
from .ir.results import ValidationResult
from .registry import SPATIAL_TOKEN_NAMES, VOICE_TOKEN_NAMES

logger = logging.getLogger(__name__)

# =============================================================================
# CSS color grammar
# =============================================================================

CSS_COLOR_RE = re.compile(
    r"^(#([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})"
    r"|rgba?\(.*\)|hsla?\(.*\)|oklch\(.*\)"
    r"|var\(--[\w-]+\)"
    r"|transparent|currentcolor|inherit|initial|unset|revert)$",
    re.IGNORECASE,
)

NAMED_COLORS = frozenset(
    {
        "black", "silver", "gray", "grey", "white", "maroon", "red", "purple",
        "fuchsia", "green", "lime", "olive", "yellow", "navy", "blue", "teal",
        "aqua", "orange", "aliceblue", "antiquewhite", "aquamarine", "azure",
        "beige", "bisque", "blanchedalmond", "blueviolet", "brown", "burlywood",
        "cadetblue", "chartreuse", "chocolate", "coral", "cornflowerblue",
        "cornsilk", "crimson", "cyan", "darkblue", "darkcyan", "darkgoldenrod",
        "darkgray", "darkgreen", "darkgrey", "darkkhaki", "darkmagenta",
        "darkolivegreen", "darkorange", "darkorchid", "darkred", "darksalmon",
        "darkseagreen", "darkslateblue", "darkslategray", "darkslategrey",
        "darkturquoise", "darkviolet", "deeppink", "deepskyblue", "dimgray",
        "dimgrey", "dodgerblue", "firebrick", "floralwhite", "forestgreen",
        "gainsboro", "ghostwhite", "gold", "goldenrod", "greenyellow", "honeydew",
        "hotpink", "indianred", "indigo", "ivory", "khaki", "lavender",
        "lavenderblush", "lawngreen", "lemonchiffon", "lightblue", "lightcoral",
        "lightcyan", "lightgoldenrodyellow", "lightgray", "lightgreen", "lightgrey",
        "lightpink", "lightsalmon", "lightseagreen", "lightskyblue",
        "lightslategray", "lightslategrey", "lightsteelblue", "lightyellow",
        "limegreen", "linen", "magenta", "mediumaquamarine", "mediumblue",
        "mediumorchid", "mediumpurple", "mediumseagreen", "mediumslateblue",
        "mediumspringgreen", "mediumturquoise", "mediumvioletred", "midnightblue",
        "mintcream", "mistyrose", "moccasin", "navajowhite", "oldlace",
        "olivedrab", "orangered", "orchid", "palegoldenrod", "palegreen",
        "paleturquoise", "palevioletred", "papayawhip", "peachpuff", "peru",
        "pink", "plum", "powderblue", "rosybrown", "royalblue", "saddlebrown",
        "salmon", "sandybrown", "seagreen", "seashell", "sienna", "skyblue",
        "slateblue", "slategray", "slategrey", "snow", "springgreen", "steelblue",
        "tan", "thistle", "tomato", "turquoise", "violet", "wheat", "whitesmoke",
        "yellowgreen", "rebeccapurple",
    }
)  # fmt: skip


def is_valid_css_color(value: Any) -> bool:
    """Test whether ``value`` is a CSS color the compiler accepts."""
    if not isinstance(value, str):
        return False
    trimmed = value.strip().lower()
    return bool(CSS_COLOR_RE.match(trimmed)) or trimmed in NAMED_COLORS


def _validate_color_values(tree: dict[str, Any], path: str, errors: list[str]) -> None:
    """Walk a color tree, skipping the reserved dark block."""
    for key, value in tree.items():
        if key == DARK_KEY:
            continue
        full_path = f"{path}.{key}"
        if isinstance(value, dict):
            _validate_color_values(value, full_path, errors)
        elif isinstance(value, str) and not is_valid_css_color(value):
            errors.append(f'Invalid CSS color at {full_path}: "{value}"')


def _describe(category: CategoryId) -> str:
    meta = CATEGORY_META[category]
    return f"{meta.sanskrit} — {meta.english}"


# =============================================================================
# Validation
# =============================================================================


def validate(spec: BrandSpec) -> ValidationResult:
    """
    Validate a brand spec.

    Args:
        spec: Parsed brand spec

    Returns:
        ValidationResult with every error and warning found
    """
    errors: list[str] = []
    warnings: list[str] = []

    for key in spec.extras:
        warnings.append(f'Unknown top-level key: "{key}" — will be ignored.')

    for category in REQUIRED_CATEGORIES:
        if not spec.has_category(category):
            errors.append(
                f'Missing required category: "{category}" ({_describe(category)}). '
                f'Add a "{category}" object to your Rūpa file.'
            )

    for category in OPTIONAL_CATEGORIES:
        if not spec.has_category(category):
            warnings.append(
                f'Optional category "{category}" ({_describe(category)}) not defined. '
                "Defaults will be used."
            )

    for category in CategoryId:
        value = spec.categories.get(category.value)
        if value is not None and not isinstance(value, dict):
            errors.append(
                f'Category "{category}" must be an object, got {type(value).__name__}.'
            )

    varna = spec.category(CategoryId.VARNA)
    if varna:
        _validate_color_values(varna, CategoryId.VARNA.value, errors)
        dark = varna.get(DARK_KEY)
        if isinstance(dark, dict):
            _validate_color_values(dark, f"{CategoryId.VARNA}.{DARK_KEY}", errors)
        elif dark is not None:
            errors.append(f'"{CategoryId.VARNA}.{DARK_KEY}" must be an object of colors.')

    scale = spec.category(CategoryId.LIPI).get("scale")
    if isinstance(scale, dict):
        for key in scale:
            if key not in VOICE_TOKEN_NAMES:
                warnings.append(
                    f'lipi.scale key "{key}" is not a recognized voice token. '
                    f"Known voices: {', '.join(VOICE_TOKEN_NAMES)}"
                )

    for key in spec.category(CategoryId.AKASA):
        if key not in SPATIAL_TOKEN_NAMES:
            warnings.append(
                f'akasa key "{key}" is not a recognized spatial token. '
                f"Known spatial tokens: {', '.join(SPATIAL_TOKEN_NAMES)}"
            )

    result = ValidationResult(errors=errors, warnings=warnings)
    logger.debug(
        "Validated brand %s: %d error(s), %d warning(s)",
        spec.name,
        len(errors),
        len(warnings),
    )
    return result
