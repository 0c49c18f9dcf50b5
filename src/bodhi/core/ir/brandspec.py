"""
Brand spec IR types.

A brand Rūpa document has top-level metadata (name, version, $schema) and
one object per token category. The color category may carry a reserved
``dark`` sub-object with dark-mode overrides.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CategoryId(StrEnum):
    """Fixed brand category identifiers, in emission order."""

    VARNA = "varna"
    LIPI = "lipi"
    AKASA = "akasa"
    PRAMANA = "pramana"
    SIMA = "sima"
    CHAYA = "chaya"
    PRATIMA = "pratima"
    CALANA = "calana"
    GHANATVA = "ghanatva"
    YUKTI = "yukti"
    NIRMANA = "nirmana"


class ColorScheme(StrEnum):
    """Palette a contrast pass runs against."""

    LIGHT = "light"
    DARK = "dark"


class CategoryMeta(BaseModel):
    """Human-facing description of a category, used in headers and messages."""

    model_config = ConfigDict(frozen=True)

    sanskrit: str
    devanagari: str
    english: str
    description: str


CATEGORY_META: dict[CategoryId, CategoryMeta] = {
    CategoryId.VARNA: CategoryMeta(
        sanskrit="Varṇa",
        devanagari="वर्ण",
        english="Color",
        description="Semantic color roles, not hue names.",
    ),
    CategoryId.LIPI: CategoryMeta(
        sanskrit="Lipi",
        devanagari="लिपि",
        english="Typography",
        description="Typeface families, scale, weight, and leading.",
    ),
    CategoryId.AKASA: CategoryMeta(
        sanskrit="Ākāśa",
        devanagari="आकाश",
        english="Spacing",
        description="Spatial intent — how much breathing room an element needs.",
    ),
    CategoryId.PRAMANA: CategoryMeta(
        sanskrit="Pramāṇa",
        devanagari="प्रमाण",
        english="Sizing",
        description="Widths, heights, and region dimensions.",
    ),
    CategoryId.SIMA: CategoryMeta(
        sanskrit="Sīmā",
        devanagari="सीमा",
        english="Borders",
        description="Border widths, radii, and focus rings.",
    ),
    CategoryId.CHAYA: CategoryMeta(
        sanskrit="Chāyā",
        devanagari="छाया",
        english="Shadows",
        description="Elevation and depth scale.",
    ),
    CategoryId.PRATIMA: CategoryMeta(
        sanskrit="Pratimā",
        devanagari="प्रतिमा",
        english="Icons",
        description="Icon set, sizes, and alignment.",
    ),
    CategoryId.CALANA: CategoryMeta(
        sanskrit="Calana",
        devanagari="चलन",
        english="Motion",
        description="Duration and easing curves.",
    ),
    CategoryId.GHANATVA: CategoryMeta(
        sanskrit="Ghanatva",
        devanagari="घनत्व",
        english="Density",
        description="Compact, comfortable, and spacious modes.",
    ),
    CategoryId.YUKTI: CategoryMeta(
        sanskrit="Yukti",
        devanagari="युक्ति",
        english="Special Treatments",
        description="Per-Yantra treatments and effects.",
    ),
    CategoryId.NIRMANA: CategoryMeta(
        sanskrit="Nirmāṇa",
        devanagari="निर्माण",
        english="Structural Defaults",
        description=(
            "Default appearance for Aṅga and Maṇḍala components.\n"
            "Override per-brand by changing which tokens are referenced."
        ),
    ),
}

REQUIRED_CATEGORIES: tuple[CategoryId, ...] = (
    CategoryId.VARNA,
    CategoryId.LIPI,
    CategoryId.AKASA,
)

OPTIONAL_CATEGORIES: tuple[CategoryId, ...] = (
    CategoryId.PRAMANA,
    CategoryId.SIMA,
    CategoryId.CHAYA,
    CategoryId.PRATIMA,
    CategoryId.CALANA,
    CategoryId.GHANATVA,
    CategoryId.YUKTI,
    CategoryId.NIRMANA,
)

METADATA_FIELDS: frozenset[str] = frozenset({"name", "version", "$schema"})

DARK_KEY = "dark"


class BrandSpec(BaseModel):
    """A parsed brand Rūpa document.

    Only known category ids land in ``categories``; anything else at the top
    level is kept in ``extras`` so the validator can warn about it.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(default="unnamed")
    version: str = Field(default="0.0.0")
    schema_id: str | None = Field(default=None, alias="$schema")
    categories: dict[str, Any] = Field(default_factory=dict)
    extras: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> BrandSpec:
        known = {c.value for c in CategoryId}
        categories: dict[str, Any] = {}
        extras: dict[str, Any] = {}
        for key, value in document.items():
            if key in METADATA_FIELDS:
                continue
            if key in known:
                categories[key] = value
            else:
                extras[key] = value
        return cls(
            name=str(document.get("name") or "unnamed"),
            version=str(document.get("version") or "0.0.0"),
            schema_id=document.get("$schema"),
            categories=categories,
            extras=extras,
        )

    def has_category(self, category: CategoryId | str) -> bool:
        """Present means the key exists with a non-null value."""
        return self.categories.get(str(category)) is not None

    def category(self, category: CategoryId | str) -> dict[str, Any]:
        """Return the category mapping, or an empty dict when absent or malformed."""
        value = self.categories.get(str(category))
        return value if isinstance(value, dict) else {}

    @property
    def dark_palette(self) -> dict[str, Any]:
        dark = self.category(CategoryId.VARNA).get(DARK_KEY)
        return dark if isinstance(dark, dict) else {}

    @property
    def has_dark_palette(self) -> bool:
        return bool(self.dark_palette)
