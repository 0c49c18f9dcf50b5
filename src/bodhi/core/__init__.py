"""
Bodhi core: brand spec IR, validation, resolution, contrast, and CSS generation.
"""

from .brandspec_loader import load_brand_spec, loads_brand_spec, parse_brand_spec
from .compiler import compile_brand, write_stylesheet
from .errors import (
    BodhiError,
    BrandValidationError,
    ContrastUnattainable,
    ManifestError,
    SpecParseError,
    UnknownTokenError,
)
from .registry import get_all_tokens, resolve_token
from .schema_validator import validate

__all__ = [
    "load_brand_spec",
    "loads_brand_spec",
    "parse_brand_spec",
    "compile_brand",
    "write_stylesheet",
    "validate",
    "resolve_token",
    "get_all_tokens",
    "BodhiError",
    "SpecParseError",
    "BrandValidationError",
    "UnknownTokenError",
    "ContrastUnattainable",
    "ManifestError",
]
