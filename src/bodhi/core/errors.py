"""
Error types for Bodhi brand-spec parsing, validation, and compilation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .ir.results import ValidationResult


class BodhiError(Exception):
    """Base exception for all Bodhi errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class SpecParseError(BodhiError):
    """
    Raised when a brand Rūpa document cannot be parsed.

    Examples:
    - Invalid JSON or YAML syntax
    - Top-level value is not an object
    - File cannot be read
    """

    pass


class BrandValidationError(BodhiError):
    """
    Raised when a brand spec fails validation.

    Carries the full ValidationResult so every error is reported together.
    """

    def __init__(self, result: ValidationResult):
        self.result = result
        count = len(result.errors)
        lines = [f"{count} validation error(s):"]
        lines.extend(f"  - {error}" for error in result.errors)
        super().__init__("\n".join(lines))


class UnknownTokenError(BodhiError):
    """Raised when a token name is absent from the registry."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = available
        super().__init__(
            f'Unknown Bodhi token: "{name}". Available tokens: {", ".join(available)}'
        )


class ContrastUnattainable(BodhiError):
    """
    Raised when lightness search cannot reach the target contrast ratio.

    The caller keeps the original color; this is never fatal to a compile.
    """

    def __init__(self, foreground: str, background: str, target: float, best_ratio: float):
        self.foreground = foreground
        self.background = background
        self.target = target
        self.best_ratio = best_ratio
        super().__init__(
            f"Cannot reach {target:.1f}:1 for {foreground} on {background} "
            f"(best candidate {best_ratio:.2f}:1)"
        )


class ManifestError(BodhiError):
    """Raised when bodhi.toml cannot be read or has the wrong shape."""

    pass
