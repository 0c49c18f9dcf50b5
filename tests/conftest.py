"""Shared pytest fixtures for Bodhi tests."""

import copy
import json
from pathlib import Path
from typing import Any

import pytest

from bodhi.core.brandspec_loader import parse_brand_spec
from bodhi.core.ir.brandspec import BrandSpec

BRAND_DOCUMENT: dict[str, Any] = {
    "$schema": "https://bodhi.dev/schema/rupa-v1.json",
    "name": "Test Brand",
    "version": "1.2.0",
    "varna": {
        "primary": "#1e40af",
        "surface": "#ffffff",
        "text": "#0f172a",
        "text-muted": "#334155",
        "danger": "#dc2626",
        "success": "#16a34a",
    },
    "lipi": {
        "family": {"body": "system-ui, sans-serif"},
        "scale": {"katha": "1rem"},
    },
    "akasa": {
        "vicara": "1rem",
    },
    "calana": {
        "duration": "150ms",
        "easing": "cubic-bezier(0.4, 0, 0.2, 1)",
    },
    "nirmana": {
        "card": {
            "bg": "var(--bodhi-varna-surface)",
            "padding": "var(--bodhi-akasa-vicara)",
        },
    },
}

DARK_PALETTE: dict[str, str] = {
    "surface": "#0f172a",
    "text": "#f1f5f9",
    "text-muted": "#475569",
    "primary": "#93c5fd",
}


@pytest.fixture
def brand_document() -> dict[str, Any]:
    """Return a fresh, valid brand document that needs no contrast fixes."""
    return copy.deepcopy(BRAND_DOCUMENT)


@pytest.fixture
def brand_spec(brand_document: dict[str, Any]) -> BrandSpec:
    return parse_brand_spec(brand_document)


@pytest.fixture
def dark_brand_document(brand_document: dict[str, Any]) -> dict[str, Any]:
    """Brand document with a dark palette whose muted text fails AAA."""
    brand_document["varna"]["dark"] = dict(DARK_PALETTE)
    return brand_document


@pytest.fixture
def rupa_file(tmp_path: Path, brand_document: dict[str, Any]) -> Path:
    """Write the brand document to a JSON file and return its path."""
    path = tmp_path / "bodhi.rupa.json"
    path.write_text(json.dumps(brand_document, ensure_ascii=False), encoding="utf-8")
    return path
