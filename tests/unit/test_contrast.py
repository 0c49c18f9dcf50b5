"""Tests for WCAG contrast math and lightness adjustment."""

from __future__ import annotations

import pytest

from bodhi.core.contrast import (
    AAA_NORMAL_TEXT,
    RGB,
    adjust_for_contrast,
    contrast_ratio,
    hex_to_hsl,
    hsl_to_hex,
    meets_contrast,
    parse_hex,
    relative_luminance,
)
from bodhi.core.errors import ContrastUnattainable


class TestParseHex:
    def test_long_form(self):
        assert parse_hex("#2563eb") == RGB(0x25, 0x63, 0xEB)

    def test_short_form(self):
        assert parse_hex("#fff") == RGB(255, 255, 255)

    def test_alpha_ignored(self):
        assert parse_hex("#00000080") == RGB(0, 0, 0)
        assert parse_hex("#f00c") == RGB(255, 0, 0)

    def test_without_hash(self):
        assert parse_hex("1a1a1a") == RGB(26, 26, 26)

    @pytest.mark.parametrize("value", ["", "#12", "#12345", "#gggggg", "red"])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            parse_hex(value)


class TestRatio:
    def test_luminance_extremes(self):
        assert relative_luminance("#000000") == 0.0
        assert relative_luminance("#ffffff") == pytest.approx(1.0)

    def test_black_on_white(self):
        assert contrast_ratio("#000000", "#ffffff") == pytest.approx(21.0)

    def test_same_color(self):
        assert contrast_ratio("#777777", "#777777") == pytest.approx(1.0)

    def test_symmetric(self):
        assert contrast_ratio("#2563eb", "#f8fafc") == contrast_ratio("#f8fafc", "#2563eb")

    def test_range(self):
        for fg, bg in [("#123456", "#abcdef"), ("#ff0000", "#00ff00"), ("#ccc", "#ddd")]:
            assert 1.0 <= contrast_ratio(fg, bg) <= 21.0

    def test_meets_contrast(self):
        assert meets_contrast("#000000", "#ffffff")
        assert not meets_contrast("#777777", "#ffffff")
        assert meets_contrast("#777777", "#ffffff", target=4.0)


class TestHSL:
    def test_primaries(self):
        assert hsl_to_hex(0, 100, 50) == "#ff0000"
        assert hsl_to_hex(0, 0, 100) == "#ffffff"
        assert hsl_to_hex(0, 0, 0) == "#000000"

    def test_hex_to_hsl(self):
        h, s, l = hex_to_hsl("#ff0000")  # noqa: E741
        assert (h, s, l) == (0.0, 100.0, 50.0)

    def test_gray_has_no_saturation(self):
        _, s, _ = hex_to_hsl("#808080")
        assert s == 0.0

    @pytest.mark.parametrize("color", ["#2563eb", "#4b5563", "#16a34a", "#dc2626"])
    def test_round_trip(self, color):
        assert hsl_to_hex(*hex_to_hsl(color)) == color

    def test_output_is_lowercase(self):
        assert hsl_to_hex(*hex_to_hsl("#ABCDEF")) == "#abcdef"


class TestAdjustForContrast:
    def test_passing_color_unchanged(self):
        assert adjust_for_contrast("#0F172A", "#ffffff") == "#0F172A"

    def test_lightens_on_dark_background(self):
        bg = "#1e293b"
        adjusted = adjust_for_contrast("#2563eb", bg)

        assert contrast_ratio(adjusted, bg) >= AAA_NORMAL_TEXT
        assert relative_luminance(adjusted) > relative_luminance("#2563eb")

    def test_darkens_on_light_background(self):
        adjusted = adjust_for_contrast("#93c5fd", "#ffffff")

        assert contrast_ratio(adjusted, "#ffffff") >= AAA_NORMAL_TEXT
        assert relative_luminance(adjusted) < relative_luminance("#93c5fd")

    def test_preserves_hue_and_saturation(self):
        original = hex_to_hsl("#2563eb")
        adjusted = hex_to_hsl(adjust_for_contrast("#2563eb", "#1e293b"))

        assert adjusted.h == pytest.approx(original.h, abs=2.0)
        assert adjusted.s == pytest.approx(original.s, abs=2.0)

    def test_lands_near_target(self):
        adjusted = adjust_for_contrast("#4b5563", "#1a1a1a")
        ratio = contrast_ratio(adjusted, "#1a1a1a")
        assert AAA_NORMAL_TEXT <= ratio < AAA_NORMAL_TEXT + 1.0

    def test_custom_target(self):
        adjusted = adjust_for_contrast("#93c5fd", "#ffffff", target=4.5)
        assert contrast_ratio(adjusted, "#ffffff") >= 4.5

    def test_deterministic(self):
        results = {adjust_for_contrast("#4b5563", "#1a1a1a") for _ in range(5)}
        assert len(results) == 1

    def test_unattainable(self):
        # Mid-gray background: even pure white only reaches about 4.5:1
        with pytest.raises(ContrastUnattainable) as exc_info:
            adjust_for_contrast("#888888", "#777777")

        err = exc_info.value
        assert err.foreground == "#888888"
        assert err.background == "#777777"
        assert err.target == AAA_NORMAL_TEXT
        assert 1.0 <= err.best_ratio < AAA_NORMAL_TEXT
