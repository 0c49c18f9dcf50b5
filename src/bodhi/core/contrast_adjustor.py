"""
Contrast adjustment for structural components (Nirmāṇa).

Each component with a background reference is checked against its text
roles. Pairs below the target ratio get a lightness-adjusted replacement.
Light and dark palettes are checked in two independent passes; a pass only
ever looks at its own color map.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from .contrast import AAA_NORMAL_TEXT, adjust_for_contrast, contrast_ratio
from .errors import ContrastUnattainable
from .ir.brandspec import BrandSpec, CategoryId, ColorScheme
from .ir.results import ContrastAdjustment, ContrastShortfall
from .resolver import ColorMap, build_color_map, build_dark_color_map, resolve_color_reference

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextRole:
    """A text role checked on every component, and the palette keys that feed it."""

    name: str
    sources: tuple[str, ...]

    @property
    def override_key(self) -> str:
        return f"color-{self.name}"

    def lookup(self, color_map: ColorMap) -> tuple[str, str] | None:
        for source in self.sources:
            hex_value = color_map.get(source)
            if hex_value:
                return source, hex_value
        return None


TEXT_ROLES: tuple[TextRole, ...] = (
    TextRole("foreground", ("foreground", "text")),
    TextRole("muted", ("muted", "text-muted")),
    TextRole("link", ("ahvana",)),
)


@dataclass
class AdjustmentPass:
    """Results of one contrast pass over the components."""

    scheme: ColorScheme
    adjustments: list[ContrastAdjustment] = field(default_factory=list)
    shortfalls: list[ContrastShortfall] = field(default_factory=list)


def _check_pair(
    result: AdjustmentPass,
    *,
    component: str,
    role: str,
    source: str,
    text_hex: str,
    bg_hex: str,
    target: float,
) -> None:
    ratio = contrast_ratio(text_hex, bg_hex)
    if ratio >= target:
        return

    try:
        adjusted = adjust_for_contrast(text_hex, bg_hex, target)
    except ContrastUnattainable as e:
        logger.warning(
            "%s %s/%s: %s (keeping original)",
            result.scheme,
            component,
            role or "color",
            e.message,
        )
        result.shortfalls.append(
            ContrastShortfall(
                component=component,
                role=role,
                source=source,
                scheme=result.scheme,
                bg_hex=bg_hex,
                original_hex=text_hex,
                original_ratio=ratio,
                target=target,
            )
        )
        return

    if adjusted.lower() == text_hex.lower():
        return

    result.adjustments.append(
        ContrastAdjustment(
            component=component,
            role=role,
            source=source,
            scheme=result.scheme,
            bg_hex=bg_hex,
            original_hex=text_hex,
            adjusted_hex=adjusted,
            original_ratio=ratio,
            new_ratio=contrast_ratio(adjusted, bg_hex),
        )
    )


def compute_adjustments(
    nirmana: dict[str, Any],
    color_map: ColorMap,
    scheme: ColorScheme = ColorScheme.LIGHT,
    target: float = AAA_NORMAL_TEXT,
) -> AdjustmentPass:
    """
    Check every component's text colors against its background.

    Args:
        nirmana: Component entries keyed by component id
        color_map: Role name to hex for this pass only
        scheme: Which palette the map was built from
        target: Minimum contrast ratio

    Returns:
        AdjustmentPass with adjustments and unreachable pairs
    """
    result = AdjustmentPass(scheme=scheme)

    for component, data in nirmana.items():
        if not isinstance(data, dict) or not data.get("bg"):
            continue

        bg_hex = resolve_color_reference(data["bg"], color_map)
        if bg_hex is None:
            continue

        # The component's own color reference, if any
        if data.get("color"):
            color_hex = resolve_color_reference(data["color"], color_map)
            if color_hex is not None:
                _check_pair(
                    result,
                    component=component,
                    role="",
                    source="color",
                    text_hex=color_hex,
                    bg_hex=bg_hex,
                    target=target,
                )

        for role in TEXT_ROLES:
            if data.get(role.override_key):
                continue
            found = role.lookup(color_map)
            if found is None:
                continue
            source, text_hex = found
            _check_pair(
                result,
                component=component,
                role=role.name,
                source=source,
                text_hex=text_hex,
                bg_hex=bg_hex,
                target=target,
            )

    logger.debug(
        "%s contrast pass: %d adjustment(s), %d shortfall(s)",
        scheme,
        len(result.adjustments),
        len(result.shortfalls),
    )
    return result


def adjust_brand_contrast(
    spec: BrandSpec, target: float = AAA_NORMAL_TEXT
) -> tuple[AdjustmentPass, AdjustmentPass]:
    """Run the light pass and, when a dark palette exists, the dark pass."""
    nirmana = spec.category(CategoryId.NIRMANA)
    varna = spec.category(CategoryId.VARNA)

    light = AdjustmentPass(scheme=ColorScheme.LIGHT)
    dark = AdjustmentPass(scheme=ColorScheme.DARK)
    if not nirmana:
        return light, dark

    light = compute_adjustments(nirmana, build_color_map(varna), ColorScheme.LIGHT, target)
    if spec.has_dark_palette:
        dark = compute_adjustments(
            nirmana, build_dark_color_map(varna), ColorScheme.DARK, target
        )
    return light, dark
