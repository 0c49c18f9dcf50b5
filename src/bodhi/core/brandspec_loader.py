"""
Brand Rūpa document loading.

Reads a brand spec from JSON or YAML into a BrandSpec. Parsing problems are
fatal and raised as SpecParseError before any validation runs.

Default location: {project_root}/bodhi.rupa.json
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .defaults import DEFAULT_RUPA
from .errors import SpecParseError
from .ir.brandspec import BrandSpec

logger = logging.getLogger(__name__)

RUPA_FILE = "bodhi.rupa.json"

_YAML_SUFFIXES = {".yaml", ".yml"}


def get_rupa_path(project_root: Path) -> Path:
    """Get the default brand file path."""
    return project_root / RUPA_FILE


def _string_keys(value: Any) -> Any:
    """YAML reads keys such as ``1:`` as ints; property paths need strings."""
    if isinstance(value, dict):
        return {str(k): _string_keys(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_string_keys(v) for v in value]
    return value


def parse_brand_spec(data: Any) -> BrandSpec:
    """Build a BrandSpec from an already-parsed document."""
    if not isinstance(data, dict):
        raise SpecParseError(
            f"Rūpa document must be an object, got {type(data).__name__}"
        )
    try:
        return BrandSpec.from_document(_string_keys(data))
    except ValidationError as e:
        raise SpecParseError(f"Invalid Rūpa metadata: {e}") from e


def loads_brand_spec(content: str, *, fmt: str = "json") -> BrandSpec:
    """Parse brand spec text in the given format ("json" or "yaml")."""
    try:
        if fmt == "yaml":
            data = yaml.safe_load(content)
        else:
            data = json.loads(content)
    except json.JSONDecodeError as e:
        raise SpecParseError(f"Invalid JSON: {e}") from e
    except yaml.YAMLError as e:
        raise SpecParseError(f"Invalid YAML: {e}") from e
    return parse_brand_spec(data)


def load_brand_spec(path: Path) -> BrandSpec:
    """Load a brand spec from ``path``.

    Args:
        path: JSON file, or YAML when the suffix is .yaml/.yml.

    Returns:
        Parsed BrandSpec.

    Raises:
        SpecParseError: If the file is missing, unreadable, or malformed.
    """
    if not path.exists():
        raise SpecParseError(f"Brand file not found: {path}")

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SpecParseError(f"Cannot read {path}: {e}") from e

    fmt = "yaml" if path.suffix.lower() in _YAML_SUFFIXES else "json"
    logger.debug("Loading brand spec from %s (%s)", path, fmt)
    try:
        return loads_brand_spec(content, fmt=fmt)
    except SpecParseError as e:
        raise SpecParseError(f"Failed to parse {path}: {e.message}") from e


def save_default_rupa(path: Path) -> Path:
    """Write the starter brand document to ``path``."""
    path.write_text(json.dumps(DEFAULT_RUPA, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    logger.info("Wrote default brand file to %s", path)
    return path
