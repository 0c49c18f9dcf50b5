"""
Bodhi intermediate representation.

Frozen pydantic models shared by the loader, validator, resolver,
contrast adjustor, and stylesheet generator.
"""

from .brandspec import (
    CATEGORY_META,
    DARK_KEY,
    METADATA_FIELDS,
    OPTIONAL_CATEGORIES,
    REQUIRED_CATEGORIES,
    BrandSpec,
    CategoryId,
    CategoryMeta,
    ColorScheme,
)
from .results import (
    CompileResult,
    ContrastAdjustment,
    ContrastShortfall,
    ValidationResult,
)
from .tokens import PaletteRole, TokenCategory, TokenDefinition

__all__ = [
    # Brand spec
    "BrandSpec",
    "CategoryId",
    "CategoryMeta",
    "ColorScheme",
    "CATEGORY_META",
    "REQUIRED_CATEGORIES",
    "OPTIONAL_CATEGORIES",
    "METADATA_FIELDS",
    "DARK_KEY",
    # Tokens
    "TokenDefinition",
    "TokenCategory",
    "PaletteRole",
    # Results
    "ValidationResult",
    "ContrastAdjustment",
    "ContrastShortfall",
    "CompileResult",
]
