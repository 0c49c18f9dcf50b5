"""
Default values for optional categories and the starter brand document.

Optional categories missing from a brand spec fall back to these values;
``bodhi init`` writes DEFAULT_RUPA as the project's starting brand file.
"""

from __future__ import annotations

from typing import Any

from .ir.brandspec import CategoryId

CATEGORY_DEFAULTS: dict[CategoryId, dict[str, Any]] = {
    CategoryId.PRAMANA: {
        "content-width": "65ch",
        "sidebar-width": "16rem",
        "header-height": "3.5rem",
    },
    CategoryId.SIMA: {
        "width-thin": "1px",
        "width-medium": "2px",
        "radius-md": "0.5rem",
        "focus-ring": "2px solid currentColor",
    },
    CategoryId.CHAYA: {
        "sm": "0 1px 2px 0 rgba(0, 0, 0, 0.05)",
        "md": "0 4px 6px -1px rgba(0, 0, 0, 0.1)",
        "lg": "0 10px 15px -3px rgba(0, 0, 0, 0.1)",
    },
    CategoryId.PRATIMA: {},
    CategoryId.CALANA: {
        "duration-normal": "200ms",
        "easing-default": "cubic-bezier(0.4, 0, 0.2, 1)",
    },
    CategoryId.GHANATVA: {},
    CategoryId.YUKTI: {},
}

# Labels for the well-known structural components (Aṅga and Maṇḍala).
NIRMANA_LABELS: dict[str, tuple[str, str | None, str]] = {
    "siras": ("Śiras", "शिरस्", "Header"),
    "pada": ("Pāda", "पाद", "Footer"),
    "garbha": ("Garbha", "गर्भ", "Body"),
    "bindu": ("Bindu", "बिन्दु", "Single Focus"),
    "sangraha": ("Saṅgraha", "सङ्ग्रह", "Collection"),
    "paricaya": ("Paricaya", "परिचय", "Profile"),
    "card": ("Card", None, "Reusable container"),
}

DEFAULT_RUPA: dict[str, Any] = {
    "$schema": "https://bodhi.dev/schema/rupa-v1.json",
    "name": "Default Brand",
    "version": "1.0.0",
    "varna": {
        "primary": "#2563eb",
        "secondary": "#64748b",
        "surface": "#ffffff",
        "surface-alt": "#f8fafc",
        "text": "#0f172a",
        "text-muted": "#64748b",
        "danger": "#dc2626",
        "success": "#16a34a",
        "warning": "#d97706",
        "focus": "#2563eb",
    },
    "lipi": {
        "family": {
            "body": "system-ui, -apple-system, sans-serif",
            "heading": "system-ui, -apple-system, sans-serif",
            "mono": "ui-monospace, monospace",
        },
        "scale": {
            "japa": "0.75rem",
            "katha": "1rem",
            "ghosana": "1.5rem",
        },
    },
    "akasa": {
        "sparsa": "0.125rem",
        "svasa": "0.5rem",
        "vicara": "1rem",
        "vistara": "2rem",
    },
    "pramana": {
        "content-max": "65ch",
        "page-max": "1200px",
    },
    "sima": {
        "width": "1px",
        "radius": "0.375rem",
        "radius-full": "9999px",
        "focus-ring": "2px solid var(--bodhi-varna-focus)",
    },
    "chaya": {
        "sm": "0 1px 2px rgba(0,0,0,0.05)",
        "md": "0 4px 6px rgba(0,0,0,0.1)",
        "lg": "0 10px 15px rgba(0,0,0,0.1)",
    },
    "calana": {
        "duration": "150ms",
        "easing": "cubic-bezier(0.4, 0, 0.2, 1)",
    },
}
