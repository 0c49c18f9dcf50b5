"""
Bodhi - Rūpa design tokens compiled into accessible, deterministic CSS.

Poetic tokens resolve through a fixed registry and brand overrides; text
colors on structural components are adjusted to meet WCAG AAA contrast.
"""

from __future__ import annotations

from ._version import get_version
from .core import (
    BodhiError,
    BrandValidationError,
    ContrastUnattainable,
    SpecParseError,
    UnknownTokenError,
    compile_brand,
    load_brand_spec,
    validate,
)

__version__ = get_version()

__all__ = [
    "__version__",
    "compile_brand",
    "load_brand_spec",
    "validate",
    "BodhiError",
    "SpecParseError",
    "BrandValidationError",
    "UnknownTokenError",
    "ContrastUnattainable",
]
