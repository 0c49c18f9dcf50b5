"""
Brand token compiler.

Validate → resolve → adjust contrast → generate CSS. A compile is a pure
function of its input spec: maps and adjustment lists are rebuilt on every
call, and nothing is written until a stylesheet is complete.
"""

from __future__ import annotations

import logging
import os
import tempfile
from datetime import datetime
from pathlib import Path

from .contrast import AAA_NORMAL_TEXT
from .contrast_adjustor import adjust_brand_contrast
from .css_generator import generate_stylesheet
from .errors import BrandValidationError
from .ir.brandspec import BrandSpec
from .ir.results import CompileResult
from .schema_validator import validate

logger = logging.getLogger(__name__)


def compile_brand(
    spec: BrandSpec,
    *,
    generated_at: datetime | None = None,
    target: float = AAA_NORMAL_TEXT,
) -> CompileResult:
    """
    Compile a brand spec into a stylesheet.

    Args:
        spec: Parsed brand spec
        generated_at: Header timestamp (defaults to now)
        target: Minimum text contrast ratio

    Returns:
        CompileResult with CSS, token counts, warnings and contrast findings

    Raises:
        BrandValidationError: If the spec has validation errors. No CSS is
            generated in that case.
    """
    validation = validate(spec)
    if not validation.valid:
        logger.debug("Aborting compile of %s: %d error(s)", spec.name, len(validation.errors))
        raise BrandValidationError(validation)

    light, dark = adjust_brand_contrast(spec, target)
    stylesheet = generate_stylesheet(
        spec,
        light.adjustments,
        dark.adjustments,
        generated_at=generated_at,
        target=target,
    )

    result = CompileResult(
        css=stylesheet.css,
        category_counts=stylesheet.category_counts,
        validation=validation,
        adjustments=[*light.adjustments, *dark.adjustments],
        shortfalls=[*light.shortfalls, *dark.shortfalls],
    )
    logger.info(
        "Compiled %s v%s: %d tokens, %d contrast adjustment(s)",
        spec.name,
        spec.version,
        result.total_tokens,
        len(result.adjustments),
    )
    return result


def write_stylesheet(css: str, path: Path) -> Path:
    """Write ``css`` to ``path`` atomically (temp file in the same directory, then replace)."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(css)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    logger.debug("Wrote %d bytes to %s", len(css.encode("utf-8")), path)
    return path
