"""
Token IR types for the poetic token registry.

A poetic token is a named handle that resolves to a brand-specific value.
Communicative (color) tokens do not hold literals: they point at a palette
role, which the resolver dereferences against the brand's base palette.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class TokenCategory(StrEnum):
    """Poetic token families and the brand category each one lives in."""

    SPATIAL = "akasa"
    COMMUNICATIVE = "varna"
    VOICE = "lipi"


class PaletteRole(StrEnum):
    """Base palette roles a communicative token may point at."""

    PRIMARY = "primary"
    DANGER = "danger"
    SURFACE = "surface"
    SUCCESS = "success"

    @property
    def css_reference(self) -> str:
        return f"var(--bodhi-varna-{self.value})"


class TokenDefinition(BaseModel):
    """A single entry in the token registry."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Registry key, ASCII transliteration (e.g. 'vicara')")
    category: TokenCategory
    sanskrit: str = Field(description="Diacritic Sanskrit name used in comments")
    devanagari: str
    intent: str = Field(description="What the token communicates")
    marker_integration: str = Field(default="", description="Relation to the ethics markers")
    literal_default: str | None = Field(
        default=None, description="Literal default value; None for palette indirections"
    )
    points_at: PaletteRole | None = Field(
        default=None, description="Palette role this token dereferences to"
    )
    css_property: str

    @property
    def default_value(self) -> str:
        """Default CSS value: the literal, or a var() reference to the palette role."""
        if self.points_at is not None:
            return self.points_at.css_reference
        return self.literal_default or ""

    @property
    def is_indirect(self) -> bool:
        return self.points_at is not None
