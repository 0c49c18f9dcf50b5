"""
Poetic token registry.

Poetic tokens are handles pointing to brand-specific values, the way
"chartreuse" names #7FFF00 regardless of context: "vicāra" is 1rem in one
brand and 1.5rem in another. This module holds the default lookup table.
Brands override values in their Rūpa files; resolution never needs more
than this table and the brand's overrides.

Three families:
  1. Spatial intent (Ākāśa): how much room something needs
  2. Communicative acts (Varṇa): what a color says
  3. Voices (Lipi): how text speaks
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from .errors import UnknownTokenError
from .ir.tokens import PaletteRole, TokenCategory, TokenDefinition

logger = logging.getLogger(__name__)

# =============================================================================
# Spatial Intent (Ākāśa)
# =============================================================================

SPATIAL_TOKENS: tuple[TokenDefinition, ...] = (
    TokenDefinition(
        name="sparsa",
        category=TokenCategory.SPATIAL,
        sanskrit="sparśa",
        devanagari="स्पर्श",
        intent="Touch — intimate contact, deliberately close",
        marker_integration="At decision points: potential M6 (cognitive overload)",
        literal_default="0.125rem",
        css_property="--bodhi-akasa-sparsa",
    ),
    TokenDefinition(
        name="svasa",
        category=TokenCategory.SPATIAL,
        sanskrit="śvāsa",
        devanagari="श्वास",
        intent="Breath — just enough room to exist separately",
        marker_integration="Default micro-spacing",
        literal_default="0.5rem",
        css_property="--bodhi-akasa-svasa",
    ),
    TokenDefinition(
        name="vicara",
        category=TokenCategory.SPATIAL,
        sanskrit="vicāra",
        devanagari="विचार",
        intent="Contemplation — space inviting the mind to process",
        marker_integration="At checkout: supports decision quality",
        literal_default="1rem",
        css_property="--bodhi-akasa-vicara",
    ),
    TokenDefinition(
        name="vistara",
        category=TokenCategory.SPATIAL,
        sanskrit="vistāra",
        devanagari="विस्तार",
        intent="Expanse — deliberate openness for decision to form",
        marker_integration="After urgency cues: counteracts M1",
        literal_default="2rem",
        css_property="--bodhi-akasa-vistara",
    ),
)

# =============================================================================
# Communicative Acts (Varṇa)
# =============================================================================

COMMUNICATIVE_TOKENS: tuple[TokenDefinition, ...] = (
    TokenDefinition(
        name="ahvana",
        category=TokenCategory.COMMUNICATIVE,
        sanskrit="āhvāna",
        devanagari="आह्वान",
        intent="Invitation — invites action without demanding it",
        marker_integration="On cancel: potential M7 (if asymmetric with confirm)",
        points_at=PaletteRole.PRIMARY,
        css_property="--bodhi-varna-ahvana",
    ),
    TokenDefinition(
        name="raksa",
        category=TokenCategory.COMMUNICATIVE,
        sanskrit="rakṣā",
        devanagari="रक्षा",
        intent="Protection — warns, guards, prevents",
        marker_integration="On irreversible actions: appropriate",
        points_at=PaletteRole.DANGER,
        css_property="--bodhi-varna-raksa",
    ),
    TokenDefinition(
        name="sthiti",
        category=TokenCategory.COMMUNICATIVE,
        sanskrit="sthiti",
        devanagari="स्थिति",
        intent="Steadiness — grounds, stabilizes, recedes",
        marker_integration="Default surface color",
        points_at=PaletteRole.SURFACE,
        css_property="--bodhi-varna-sthiti",
    ),
    TokenDefinition(
        name="ullasa",
        category=TokenCategory.COMMUNICATIVE,
        sanskrit="ullāsa",
        devanagari="उल्लास",
        intent="Delight — celebrates, rewards, affirms",
        marker_integration="Post-action confirmation",
        points_at=PaletteRole.SUCCESS,
        css_property="--bodhi-varna-ullasa",
    ),
)

# =============================================================================
# Voices (Lipi)
# =============================================================================

VOICE_TOKENS: tuple[TokenDefinition, ...] = (
    TokenDefinition(
        name="japa",
        category=TokenCategory.VOICE,
        sanskrit="japa",
        devanagari="जप",
        intent="Murmur — fine print, supporting detail",
        marker_integration="Marketing text + japa for terms: potential M4",
        literal_default="0.75rem",
        css_property="--bodhi-lipi-japa",
    ),
    TokenDefinition(
        name="katha",
        category=TokenCategory.VOICE,
        sanskrit="kathā",
        devanagari="कथा",
        intent="Storytelling — body text, natural voice",
        marker_integration="Default content voice",
        literal_default="1rem",
        css_property="--bodhi-lipi-katha",
    ),
    TokenDefinition(
        name="ghosana",
        category=TokenCategory.VOICE,
        sanskrit="ghoṣaṇā",
        devanagari="घोषणा",
        intent="Proclamation — headings, carrying voice",
        marker_integration="Terms text + ghoṣaṇā for marketing: reversed M4",
        literal_default="1.5rem",
        css_property="--bodhi-lipi-ghosana",
    ),
)


def _build_registry(groups: Iterable[tuple[TokenDefinition, ...]]) -> Mapping[str, TokenDefinition]:
    """Merge token groups into one read-only mapping, rejecting duplicate names."""
    merged: dict[str, TokenDefinition] = {}
    for group in groups:
        for token in group:
            if token.name in merged:
                raise ValueError(f"Duplicate token name in registry: {token.name}")
            merged[token.name] = token
    return MappingProxyType(merged)


TOKEN_REGISTRY: Mapping[str, TokenDefinition] = _build_registry(
    (SPATIAL_TOKENS, COMMUNICATIVE_TOKENS, VOICE_TOKENS)
)

SPATIAL_TOKEN_NAMES: tuple[str, ...] = tuple(t.name for t in SPATIAL_TOKENS)
VOICE_TOKEN_NAMES: tuple[str, ...] = tuple(t.name for t in VOICE_TOKENS)
COMMUNICATIVE_TOKEN_NAMES: tuple[str, ...] = tuple(t.name for t in COMMUNICATIVE_TOKENS)


# =============================================================================
# Lookup
# =============================================================================


def get_token(name: str) -> TokenDefinition:
    """Return the definition for ``name`` or raise UnknownTokenError."""
    try:
        return TOKEN_REGISTRY[name]
    except KeyError:
        raise UnknownTokenError(name, list(TOKEN_REGISTRY)) from None


def resolve_token(name: str, overrides: Mapping[str, str] | None = None) -> str:
    """
    Resolve a poetic token name to a CSS value.

    Two stages, in order: the brand override for ``name`` if one is set,
    otherwise the registry default.

    Args:
        name: Token name, e.g. 'vicara', 'ahvana', 'katha'
        overrides: Brand-specific values keyed by token name

    Returns:
        The resolved CSS value

    Raises:
        UnknownTokenError: If ``name`` is not in the registry
    """
    token = get_token(name)
    if overrides is not None:
        value = overrides.get(name)
        if value is not None:
            logger.debug("Token %s resolved from brand override: %s", name, value)
            return str(value)
    return token.default_value


def get_all_tokens() -> Mapping[str, TokenDefinition]:
    """Return a read-only snapshot of the whole registry (for docs and tooling)."""
    return TOKEN_REGISTRY


def tokens_in_category(category: TokenCategory) -> tuple[TokenDefinition, ...]:
    """Return the tokens of one family, in declaration order."""
    return tuple(t for t in TOKEN_REGISTRY.values() if t.category == category)
