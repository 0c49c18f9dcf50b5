"""Tests for the poetic token registry."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from bodhi.core.errors import UnknownTokenError
from bodhi.core.ir.tokens import PaletteRole, TokenCategory
from bodhi.core.registry import (
    COMMUNICATIVE_TOKEN_NAMES,
    SPATIAL_TOKEN_NAMES,
    TOKEN_REGISTRY,
    VOICE_TOKEN_NAMES,
    get_all_tokens,
    get_token,
    resolve_token,
    tokens_in_category,
)


class TestRegistryContents:
    def test_families(self):
        assert SPATIAL_TOKEN_NAMES == ("sparsa", "svasa", "vicara", "vistara")
        assert COMMUNICATIVE_TOKEN_NAMES == ("ahvana", "raksa", "sthiti", "ullasa")
        assert VOICE_TOKEN_NAMES == ("japa", "katha", "ghosana")
        assert len(TOKEN_REGISTRY) == 11

    def test_names_unique_across_families(self):
        names = [*SPATIAL_TOKEN_NAMES, *COMMUNICATIVE_TOKEN_NAMES, *VOICE_TOKEN_NAMES]
        assert len(names) == len(set(names))

    def test_spatial_defaults(self):
        defaults = {t.name: t.default_value for t in tokens_in_category(TokenCategory.SPATIAL)}
        assert defaults == {
            "sparsa": "0.125rem",
            "svasa": "0.5rem",
            "vicara": "1rem",
            "vistara": "2rem",
        }

    def test_communicative_tokens_point_at_roles(self):
        roles = {
            t.name: t.points_at for t in tokens_in_category(TokenCategory.COMMUNICATIVE)
        }
        assert roles == {
            "ahvana": PaletteRole.PRIMARY,
            "raksa": PaletteRole.DANGER,
            "sthiti": PaletteRole.SURFACE,
            "ullasa": PaletteRole.SUCCESS,
        }
        assert all(get_token(n).is_indirect for n in COMMUNICATIVE_TOKEN_NAMES)

    def test_css_property_prefix(self):
        for token in get_all_tokens().values():
            assert token.css_property == f"--bodhi-{token.category}-{token.name}"

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            TOKEN_REGISTRY["new"] = get_token("vicara")  # type: ignore[index]

    def test_definitions_are_frozen(self):
        token = get_token("vicara")
        with pytest.raises(ValidationError):
            token.literal_default = "5rem"  # type: ignore[misc]


class TestResolveToken:
    def test_default(self):
        assert resolve_token("vicara") == "1rem"
        assert resolve_token("ghosana") == "1.5rem"

    def test_indirect_default_is_var_reference(self):
        assert resolve_token("ahvana") == "var(--bodhi-varna-primary)"
        assert resolve_token("raksa") == "var(--bodhi-varna-danger)"

    def test_override_wins(self):
        assert resolve_token("vicara", {"vicara": "1.5rem"}) == "1.5rem"

    def test_override_is_per_key(self):
        overrides = {"vistara": "4rem"}
        assert resolve_token("vistara", overrides) == "4rem"
        assert resolve_token("vicara", overrides) == "1rem"

    def test_none_override_falls_back(self):
        assert resolve_token("katha", {"katha": None}) == "1rem"  # type: ignore[dict-item]

    def test_unknown_token(self):
        with pytest.raises(UnknownTokenError) as exc_info:
            resolve_token("moksha")
        assert exc_info.value.name == "moksha"
        assert "vicara" in exc_info.value.available
        assert 'Unknown Bodhi token: "moksha"' in str(exc_info.value)
