"""Tests for stylesheet generation."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from bodhi.core.brandspec_loader import parse_brand_spec
from bodhi.core.css_generator import (
    generate_accessibility_overrides,
    generate_file_header,
    generate_stylesheet,
    section_header,
)
from bodhi.core.ir.brandspec import CategoryId, ColorScheme
from bodhi.core.ir.results import ContrastAdjustment

FIXED_TIME = datetime(2025, 3, 1, 12, 30, 45, tzinfo=timezone.utc)


def _adjustment(**overrides) -> ContrastAdjustment:
    data = {
        "component": "siras",
        "role": "muted",
        "source": "text-muted",
        "bg_hex": "#1a1a1a",
        "original_hex": "#4b5563",
        "adjusted_hex": "#a3acb9",
        "original_ratio": 2.34,
        "new_ratio": 7.04,
    }
    data.update(overrides)
    return ContrastAdjustment(**data)


@pytest.fixture
def css(brand_spec) -> str:
    return generate_stylesheet(brand_spec, generated_at=FIXED_TIME).css


class TestHeader:
    def test_file_header(self, brand_spec):
        header = generate_file_header(brand_spec, FIXED_TIME)
        assert " * Brand: Test Brand v1.2.0" in header
        assert " * Generated: 2025-03-01 12:30:45 UTC" in header
        assert header.startswith("/**")

    def test_section_header(self):
        header = section_header(CategoryId.AKASA)
        assert " * Ākāśa (आकाश) — Spacing" in header


class TestSections:
    def test_category_order(self, css):
        positions = [
            css.index("Varṇa (वर्ण) — Color"),
            css.index("Lipi (लिपि) — Typography"),
            css.index("Ākāśa (आकाश) — Spacing"),
            css.index("Pramāṇa (प्रमाण) — Sizing"),
            css.index("Sīmā (सीमा) — Borders"),
            css.index("Chāyā (छाया) — Shadows"),
            css.index("Calana (चलन) — Motion"),
            css.index("Nirmāṇa (निर्माण) — Structural Defaults"),
            css.index("Bodhi Enforced"),
        ]
        assert positions == sorted(positions)

    def test_base_palette(self, css):
        assert "  --bodhi-varna-primary: #1e40af;" in css
        assert "  --bodhi-varna-text-muted: #334155;" in css

    def test_communicative_tokens(self, css):
        assert "/* āhvāna (आह्वान) — Invitation — invites action without demanding it */" in css
        assert ":root { --bodhi-varna-ahvana: var(--bodhi-varna-primary); }" in css
        assert ":root { --bodhi-varna-ullasa: var(--bodhi-varna-success); }" in css

    def test_communicative_literal_override(self, brand_document):
        brand_document["varna"]["raksa"] = "#b91c1c"
        css = generate_stylesheet(parse_brand_spec(brand_document)).css
        assert ":root { --bodhi-varna-raksa: #b91c1c; }" in css
        assert "  --bodhi-varna-raksa: #b91c1c;" not in css

    def test_lipi_section(self, css):
        assert "  --bodhi-lipi-family-body: system-ui, sans-serif;" in css
        assert ":root { --bodhi-lipi-katha: 1rem; }" in css
        assert ":root { --bodhi-lipi-ghosana: 1.5rem; }" in css

    def test_unknown_voice_emitted_as_scale_token(self, brand_document):
        brand_document["lipi"]["scale"]["shout"] = "3rem"
        css = generate_stylesheet(parse_brand_spec(brand_document)).css
        assert "  --bodhi-lipi-scale-shout: 3rem;" in css

    def test_akasa_section(self, css):
        assert "/* ── Ākāśa: Spatial Intent" in css
        assert ":root { --bodhi-akasa-vistara: 2rem; }" in css

    def test_unknown_spatial_key_emitted(self, brand_document):
        brand_document["akasa"]["gutter"] = "3rem"
        css = generate_stylesheet(parse_brand_spec(brand_document)).css
        assert "  --bodhi-akasa-gutter: 3rem;" in css

    def test_optional_defaults_emitted(self, css):
        assert "  --bodhi-sima-focus-ring: 2px solid currentColor;" in css
        assert "  --bodhi-pramana-content-width: 65ch;" in css

    def test_empty_optional_defaults_skipped(self, css):
        assert "Pratimā" not in css
        assert "Ghanatva" not in css

    def test_nirmana_section(self, css):
        assert "/* ── Card — Reusable container" in css
        assert "  --bodhi-nirmana-card-bg: var(--bodhi-varna-surface);" in css
        assert "  --bodhi-nirmana-card-padding: var(--bodhi-akasa-vicara);" in css

    def test_no_nirmana_section_without_components(self, brand_document):
        del brand_document["nirmana"]
        css = generate_stylesheet(parse_brand_spec(brand_document)).css
        assert "Nirmāṇa" not in css

    def test_dark_mode_block(self, dark_brand_document):
        css = generate_stylesheet(parse_brand_spec(dark_brand_document)).css
        assert "@media (prefers-color-scheme: dark) {" in css
        assert "    --bodhi-varna-surface: #0f172a;" in css
        assert "--bodhi-varna-dark" not in css

    def test_no_dark_block_without_palette(self, css):
        assert "prefers-color-scheme" not in css

    def test_ends_with_newline(self, css):
        assert css.endswith("}\n")


class TestContrastAdjustmentBlocks:
    def test_light_adjustment(self, brand_spec):
        css = generate_stylesheet(brand_spec, [_adjustment()]).css
        assert "/* Auto-calculated for AAA compliance (7:1 minimum) */" in css
        assert "/* Śiras (siras) on #1a1a1a */" in css
        assert "  /* adjusted from #4b5563 (was 2.3:1 → now 7.0:1) */" in css
        assert "  --bodhi-nirmana-siras-color-muted: #a3acb9;" in css

    def test_dark_adjustment(self, brand_spec):
        adj = _adjustment(scheme=ColorScheme.DARK)
        stylesheet = generate_stylesheet(brand_spec, [], [adj])
        assert "/* ── Nirmāṇa: Dark Mode Contrast Adjustments ── */" in stylesheet.css
        assert "    --bodhi-nirmana-siras-color-muted: #a3acb9;" in stylesheet.css
        assert stylesheet.category_counts["nirmana (dark adjusted)"] == 1

    def test_component_color_replaced(self, brand_document):
        brand_document["nirmana"]["card"]["color"] = "#93c5fd"
        spec = parse_brand_spec(brand_document)
        adj = _adjustment(
            component="card",
            role="",
            source="color",
            bg_hex="#ffffff",
            original_hex="#93c5fd",
            adjusted_hex="#1d4ed8",
        )
        css = generate_stylesheet(spec, [adj]).css

        assert "  --bodhi-nirmana-card-color: #93c5fd;" not in css
        assert "  --bodhi-nirmana-card-color: #1d4ed8;" in css


class TestAccessibilityOverrides:
    def test_reduced_motion(self):
        lines = "\n".join(generate_accessibility_overrides())
        assert "@media (prefers-reduced-motion: reduce) {" in lines
        assert "    --bodhi-calana-duration: 0ms;" in lines
        assert "    --bodhi-calana-easing: linear;" in lines

    def test_high_contrast(self):
        lines = "\n".join(generate_accessibility_overrides())
        assert "@media (prefers-contrast: more) {" in lines
        assert "    --bodhi-sima-focus-ring: 3px solid currentColor;" in lines

    def test_brand_durations_zeroed(self, brand_document):
        brand_document["calana"]["duration-slow"] = "400ms"
        css = generate_stylesheet(parse_brand_spec(brand_document)).css
        enforced = css[css.index("Bodhi Enforced") :]
        assert "    --bodhi-calana-duration-slow: 0ms;" in enforced
        assert enforced.count("--bodhi-calana-duration: 0ms;") == 1

    def test_brand_cannot_change_enforced_values(self, brand_document):
        brand_document["calana"]["easing"] = "ease-in"
        brand_document["sima"] = {"focus-ring": "none"}
        css = generate_stylesheet(parse_brand_spec(brand_document)).css
        enforced = css[css.index("Bodhi Enforced") :]
        assert "    --bodhi-calana-easing: linear;" in enforced
        assert "    --bodhi-sima-focus-ring: 3px solid currentColor;" in enforced
        assert "ease-in" not in enforced


class TestCounts:
    def test_category_counts(self, brand_spec):
        counts = generate_stylesheet(brand_spec).category_counts
        assert counts["varna"] == 6 + 4
        assert counts["lipi"] == 1 + 3
        assert counts["akasa"] == 4
        assert counts["calana"] == 2
        assert counts["nirmana"] == 2
        assert "varna (dark)" not in counts
        assert "nirmana (adjusted)" not in counts

    def test_dark_count(self, dark_brand_document):
        counts = generate_stylesheet(parse_brand_spec(dark_brand_document)).category_counts
        assert counts["varna (dark)"] == 4
