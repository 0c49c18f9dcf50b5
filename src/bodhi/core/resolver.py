"""
Token resolver.

Merges brand values with registry defaults into flat CSS property maps and
dereferences communicative tokens that point at palette roles.

Precedence for every poetic token is explicit and per key:
1. Brand value at exactly that key
2. Registry default
Sibling tokens never inherit from each other.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any

from .contrast import parse_hex
from .defaults import CATEGORY_DEFAULTS
from .ir.brandspec import DARK_KEY, METADATA_FIELDS, BrandSpec, CategoryId
from .ir.tokens import TokenCategory, TokenDefinition
from .registry import COMMUNICATIVE_TOKENS, resolve_token, tokens_in_category

logger = logging.getLogger(__name__)

ColorMap = dict[str, str]

_VARNA_REF_RE = re.compile(r"^var\(--bodhi-varna-([\w-]+)\)$")


@dataclass(frozen=True)
class ResolvedToken:
    """A poetic token with its final value."""

    definition: TokenDefinition
    value: str
    overridden: bool

    @property
    def css_property(self) -> str:
        return self.definition.css_property


# =============================================================================
# Flattening
# =============================================================================


def flatten_tokens(tree: dict[str, Any], prefix: str) -> dict[str, str]:
    """
    Flatten a nested token tree into CSS custom properties.

    ``{"width": {"thin": "1px"}}`` with prefix ``--bodhi-sima`` becomes
    ``{"--bodhi-sima-width-thin": "1px"}``. Metadata keys and the reserved
    dark block are skipped.
    """
    result: dict[str, str] = {}
    for raw_key, value in tree.items():
        key = str(raw_key)
        if key.startswith("$") or key in METADATA_FIELDS or key == DARK_KEY:
            continue
        prop_name = f"{prefix}-{key}"
        if isinstance(value, dict):
            result.update(flatten_tokens(value, prop_name))
        elif value is not None:
            result[prop_name] = _css_value(value)
    return result


def _css_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


# =============================================================================
# Category data
# =============================================================================


def resolve_category(spec: BrandSpec, category: CategoryId) -> dict[str, Any]:
    """Return brand data for a category, or its defaults when the brand omits it."""
    if spec.has_category(category):
        return spec.category(category)
    return dict(CATEGORY_DEFAULTS.get(category, {}))


def resolve_poetic_tokens(
    category: TokenCategory, brand_values: dict[str, Any] | None
) -> list[ResolvedToken]:
    """Resolve every registry token of one family against the brand's values."""
    overrides = {
        k: _css_value(v)
        for k, v in (brand_values or {}).items()
        if v is not None and not isinstance(v, dict)
    }
    resolved: list[ResolvedToken] = []
    for token in tokens_in_category(category):
        value = resolve_token(token.name, overrides)
        resolved.append(ResolvedToken(token, value, token.name in overrides))
    return resolved


def poetic_brand_values(spec: BrandSpec, category: TokenCategory) -> dict[str, Any]:
    """Locate the brand values that can override one token family."""
    if category == TokenCategory.SPATIAL:
        return spec.category(CategoryId.AKASA)
    if category == TokenCategory.VOICE:
        scale = spec.category(CategoryId.LIPI).get("scale")
        return scale if isinstance(scale, dict) else {}
    return spec.category(CategoryId.VARNA)


# =============================================================================
# Color maps
# =============================================================================


def _is_hex(value: str) -> bool:
    try:
        parse_hex(value)
    except ValueError:
        return False
    return True


def _literal_hex_map(palette: dict[str, Any]) -> ColorMap:
    return {
        key: value
        for key, value in palette.items()
        if key != DARK_KEY and isinstance(value, str) and value.startswith("#") and _is_hex(value)
    }


def _dereference(color_map: ColorMap) -> ColorMap:
    """Add communicative tokens whose palette role is present in ``color_map``."""
    resolved = dict(color_map)
    for token in COMMUNICATIVE_TOKENS:
        if token.name in color_map:
            # Brand supplied a literal for the token itself.
            continue
        role = token.points_at
        if role is None:
            continue
        target = color_map.get(role.value)
        if target is None:
            logger.debug(
                "Palette role %s missing; %s dropped from color map", role, token.name
            )
            continue
        resolved[token.name] = target
    return resolved


def build_color_map(varna: dict[str, Any]) -> ColorMap:
    """Build the light-mode color map: palette hex literals, then indirections."""
    return _dereference(_literal_hex_map(varna))


def build_dark_color_map(varna: dict[str, Any]) -> ColorMap:
    """Build the dark-mode color map from ``varna.dark`` only."""
    dark = varna.get(DARK_KEY)
    if not isinstance(dark, dict):
        return {}
    return _dereference(_literal_hex_map(dark))


def resolve_color_reference(value: Any, color_map: ColorMap) -> str | None:
    """Resolve a hex literal or ``var(--bodhi-varna-key)`` through ``color_map``."""
    if not isinstance(value, str):
        return None
    value = value.strip()
    if value.startswith("#"):
        if not _is_hex(value):
            logger.debug("Malformed hex color %r treated as unresolvable", value)
            return None
        return value
    match = _VARNA_REF_RE.match(value)
    if not match:
        return None
    return color_map.get(match.group(1))
