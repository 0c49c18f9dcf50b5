"""
CSS generator for compiled brand tokens.

Serializes resolved tokens into one stylesheet of CSS custom properties, in
a fixed category order. Each category gets a header comment, a block of
literal tokens, then its poetic tokens annotated with their intent. The
document always ends with the Bodhi-enforced accessibility blocks, which
brand input cannot change.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from .defaults import NIRMANA_LABELS
from .ir.brandspec import CATEGORY_META, BrandSpec, CategoryId
from .ir.results import ContrastAdjustment
from .ir.tokens import TokenCategory
from .registry import COMMUNICATIVE_TOKEN_NAMES, SPATIAL_TOKEN_NAMES, VOICE_TOKEN_NAMES
from .resolver import (
    ResolvedToken,
    flatten_tokens,
    poetic_brand_values,
    resolve_category,
    resolve_poetic_tokens,
)

GENERIC_CATEGORIES: tuple[CategoryId, ...] = (
    CategoryId.PRAMANA,
    CategoryId.SIMA,
    CategoryId.CHAYA,
    CategoryId.PRATIMA,
    CategoryId.CALANA,
    CategoryId.GHANATVA,
    CategoryId.YUKTI,
)

_SECTION_RULE = "═" * 56
_SUB_RULE = "─" * 45


@dataclass
class Section:
    """Lines for one part of the stylesheet and how many tokens it declares."""

    lines: list[str] = field(default_factory=list)
    count: int = 0


@dataclass
class Stylesheet:
    css: str
    category_counts: dict[str, int]


# =============================================================================
# Formatting helpers
# =============================================================================


def section_header(category: CategoryId) -> str:
    meta = CATEGORY_META[category]
    lines = [
        f"/* {_SECTION_RULE}",
        f" * {meta.sanskrit} ({meta.devanagari}) — {meta.english}",
    ]
    lines.extend(f" * {line}" for line in meta.description.splitlines())
    lines.append(f" * {_SECTION_RULE} */")
    return "\n".join(lines)


def sub_section_header(title: str) -> str:
    return f"/* ── {title} {_SUB_RULE[len(title) + 4:]} */"


def poetic_comment(token: ResolvedToken) -> str:
    d = token.definition
    return f"/* {d.sanskrit} ({d.devanagari}) — {d.intent} */"


def root_block(declarations: dict[str, str], indent: int = 0) -> list[str]:
    pad = " " * indent
    lines = [f"{pad}:root {{"]
    lines.extend(f"{pad}  {prop}: {value};" for prop, value in declarations.items())
    lines.append(f"{pad}}}")
    return lines


def _poetic_lines(tokens: Iterable[ResolvedToken]) -> list[str]:
    lines: list[str] = []
    for token in tokens:
        lines.append(poetic_comment(token))
        lines.append(f":root {{ {token.css_property}: {token.value}; }}")
    return lines


def _without(tree: dict[str, Any], keys: Iterable[str]) -> dict[str, Any]:
    excluded = set(keys)
    return {k: v for k, v in tree.items() if k not in excluded}


# =============================================================================
# Sections
# =============================================================================


def generate_file_header(spec: BrandSpec, generated_at: datetime) -> str:
    timestamp = generated_at.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")
    return "\n".join(
        [
            "/**",
            " * Bodhi Design Tokens",
            f" * Brand: {spec.name} v{spec.version}",
            f" * Generated: {timestamp}",
            " *",
            " * बोधि — Awakening for the web.",
            " * Do not edit directly. Modify your .rupa.json and recompile.",
            " */",
        ]
    )


def generate_varna_section(spec: BrandSpec) -> Section:
    varna = spec.category(CategoryId.VARNA)
    section = Section(lines=["", section_header(CategoryId.VARNA), ""])

    base = flatten_tokens(_without(varna, COMMUNICATIVE_TOKEN_NAMES), "--bodhi-varna")
    if base:
        section.lines.extend(root_block(base))

    poetic = resolve_poetic_tokens(
        TokenCategory.COMMUNICATIVE, poetic_brand_values(spec, TokenCategory.COMMUNICATIVE)
    )
    section.lines.append("")
    section.lines.append(sub_section_header("Varṇa: Communicative Acts"))
    section.lines.extend(_poetic_lines(poetic))

    section.count = len(base) + len(poetic)
    return section


def generate_dark_mode(spec: BrandSpec) -> Section:
    dark = flatten_tokens(spec.dark_palette, "--bodhi-varna")
    if not dark:
        return Section()

    section = Section(
        lines=[
            "",
            sub_section_header("Varṇa: Dark Mode"),
            "",
            "@media (prefers-color-scheme: dark) {",
        ]
    )
    section.lines.extend(root_block(dark, indent=2))
    section.lines.append("}")
    section.count = len(dark)
    return section


def generate_lipi_section(spec: BrandSpec) -> Section:
    lipi = spec.category(CategoryId.LIPI)
    section = Section(lines=["", section_header(CategoryId.LIPI), ""])

    base = flatten_tokens(_without(lipi, ["scale"]), "--bodhi-lipi")
    scale = lipi.get("scale")
    if isinstance(scale, dict):
        base.update(flatten_tokens(_without(scale, VOICE_TOKEN_NAMES), "--bodhi-lipi-scale"))
    if base:
        section.lines.extend(root_block(base))

    voices = resolve_poetic_tokens(
        TokenCategory.VOICE, poetic_brand_values(spec, TokenCategory.VOICE)
    )
    section.lines.append("")
    section.lines.append(sub_section_header("Lipi: Voices"))
    section.lines.extend(_poetic_lines(voices))

    section.count = len(base) + len(voices)
    return section


def generate_akasa_section(spec: BrandSpec) -> Section:
    akasa = spec.category(CategoryId.AKASA)
    section = Section(lines=["", section_header(CategoryId.AKASA), ""])

    # Keys outside the registry pass through so brands can extend the scale
    base = flatten_tokens(_without(akasa, SPATIAL_TOKEN_NAMES), "--bodhi-akasa")
    if base:
        section.lines.extend(root_block(base))
        section.lines.append("")

    spatial = resolve_poetic_tokens(
        TokenCategory.SPATIAL, poetic_brand_values(spec, TokenCategory.SPATIAL)
    )
    section.lines.append(sub_section_header("Ākāśa: Spatial Intent"))
    section.lines.extend(_poetic_lines(spatial))

    section.count = len(base) + len(spatial)
    return section


def generate_generic_section(category: CategoryId, data: dict[str, Any]) -> Section:
    tokens = flatten_tokens(data, f"--bodhi-{category}")
    section = Section(lines=["", section_header(category), ""])
    if tokens:
        section.lines.extend(root_block(tokens))
    section.count = len(tokens)
    return section


def _component_label(component: str) -> str:
    label = NIRMANA_LABELS.get(component)
    if label is None:
        text = component
    else:
        sanskrit, devanagari, english = label
        native = f" ({devanagari})" if devanagari else ""
        text = f"{sanskrit}{native} — {english}"
    return f"/* ── {text} {'─' * max(0, 45 - len(text) - 4)} */"


def _component_name(component: str) -> str:
    label = NIRMANA_LABELS.get(component)
    return f"{label[0]} ({component})" if label else component


def generate_nirmana_section(
    spec: BrandSpec, adjustments: list[ContrastAdjustment]
) -> Section:
    nirmana = spec.category(CategoryId.NIRMANA)
    section = Section(lines=["", section_header(CategoryId.NIRMANA), "", ":root {"])

    # A component color replaced by a light-mode adjustment is emitted there instead
    replaced = {adj.component for adj in adjustments if not adj.role}

    components = list(nirmana.items())
    for index, (component, data) in enumerate(components):
        section.lines.append(f"  {_component_label(component)}")
        if isinstance(data, dict):
            props = data
            if component in replaced:
                props = _without(data, ["color"])
            for prop, value in flatten_tokens(props, f"--bodhi-nirmana-{component}").items():
                section.lines.append(f"  {prop}: {value};")
                section.count += 1
        if index < len(components) - 1:
            section.lines.append("")

    section.lines.append("}")
    return section


def _group_by_component(
    adjustments: list[ContrastAdjustment],
) -> dict[str, list[ContrastAdjustment]]:
    grouped: dict[str, list[ContrastAdjustment]] = {}
    for adj in adjustments:
        grouped.setdefault(adj.component, []).append(adj)
    return grouped


def _adjustment_blocks(adjustments: list[ContrastAdjustment], indent: int) -> list[str]:
    pad = " " * indent
    lines: list[str] = []
    for component, group in _group_by_component(adjustments).items():
        lines.append(f"{pad}/* {_component_name(component)} on {group[0].bg_hex} */")
        lines.append(f"{pad}:root {{")
        for adj in group:
            lines.append(f"{pad}  /* adjusted from {adj.original_hex} ({adj.ratio_note()}) */")
            lines.append(f"{pad}  {adj.css_property}: {adj.adjusted_hex};")
        lines.append(f"{pad}}}")
        lines.append("")
    return lines


def generate_contrast_adjustments(
    adjustments: list[ContrastAdjustment], target: float = 7.0
) -> Section:
    if not adjustments:
        return Section()
    section = Section(
        lines=[
            "",
            "/* ── Nirmāṇa: Contrast-Adjusted Colors ─────── */",
            f"/* Auto-calculated for AAA compliance ({target:g}:1 minimum) */",
            "",
        ]
    )
    section.lines.extend(_adjustment_blocks(adjustments, indent=0))
    section.count = len(adjustments)
    return section


def generate_dark_contrast_adjustments(adjustments: list[ContrastAdjustment]) -> Section:
    if not adjustments:
        return Section()
    section = Section(
        lines=[
            "",
            "/* ── Nirmāṇa: Dark Mode Contrast Adjustments ── */",
            "",
            "@media (prefers-color-scheme: dark) {",
        ]
    )
    section.lines.extend(_adjustment_blocks(adjustments, indent=2))
    section.lines.append("}")
    section.count = len(adjustments)
    return section


def generate_accessibility_overrides(duration_properties: Iterable[str] = ()) -> list[str]:
    """Bodhi-enforced policy blocks. Brand values never reach these."""
    durations = ["--bodhi-calana-duration"]
    durations.extend(p for p in duration_properties if p not in durations)

    lines = [
        "",
        "\n".join(
            [
                f"/* {_SECTION_RULE}",
                " * Bodhi Enforced — Non-negotiable accessibility",
                " * These cannot be overridden by brand tokens.",
                f" * {_SECTION_RULE} */",
            ]
        ),
        "",
        "@media (prefers-reduced-motion: reduce) {",
        "  :root {",
    ]
    lines.extend(f"    {prop}: 0ms;" for prop in durations)
    lines.extend(
        [
            "    --bodhi-calana-easing: linear;",
            "  }",
            "}",
            "",
            "@media (prefers-contrast: more) {",
            "  :root {",
            "    --bodhi-sima-focus-ring: 3px solid currentColor;",
            "  }",
            "}",
        ]
    )
    return lines


# =============================================================================
# Document
# =============================================================================


def generate_stylesheet(
    spec: BrandSpec,
    light_adjustments: list[ContrastAdjustment] | None = None,
    dark_adjustments: list[ContrastAdjustment] | None = None,
    *,
    generated_at: datetime | None = None,
    target: float = 7.0,
) -> Stylesheet:
    """
    Generate the full stylesheet for a validated brand spec.

    Args:
        spec: Validated brand spec
        light_adjustments: Contrast adjustments from the light pass
        dark_adjustments: Contrast adjustments from the dark pass
        generated_at: Timestamp for the header (defaults to now, UTC)
        target: Contrast target quoted in the adjustment comment

    Returns:
        Stylesheet text and per-category token counts, in emission order
    """
    light_adjustments = light_adjustments or []
    dark_adjustments = dark_adjustments or []
    generated_at = generated_at or datetime.now(timezone.utc)

    lines: list[str] = [generate_file_header(spec, generated_at)]
    counts: dict[str, int] = {}

    def emit(key: str, section: Section, *, always: bool = True) -> None:
        if always or section.count > 0:
            lines.extend(section.lines)
            counts[key] = section.count

    emit("varna", generate_varna_section(spec))
    emit("varna (dark)", generate_dark_mode(spec), always=False)
    emit("lipi", generate_lipi_section(spec))
    emit("akasa", generate_akasa_section(spec))

    duration_properties: list[str] = []
    for category in GENERIC_CATEGORIES:
        data = resolve_category(spec, category)
        if not data:
            continue
        section = generate_generic_section(category, data)
        emit(category.value, section)
        if category == CategoryId.CALANA:
            duration_properties = [
                prop
                for prop in flatten_tokens(data, "--bodhi-calana")
                if "duration" in prop
            ]

    if spec.category(CategoryId.NIRMANA):
        emit("nirmana", generate_nirmana_section(spec, light_adjustments))
        emit(
            "nirmana (adjusted)",
            generate_contrast_adjustments(light_adjustments, target),
            always=False,
        )
    emit(
        "nirmana (dark adjusted)",
        generate_dark_contrast_adjustments(dark_adjustments),
        always=False,
    )

    lines.extend(generate_accessibility_overrides(duration_properties))
    lines.append("")

    return Stylesheet(css="\n".join(lines), category_counts=counts)
