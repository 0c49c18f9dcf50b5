"""
Result types produced by validation, contrast adjustment, and compilation.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .brandspec import ColorScheme


class ValidationResult(BaseModel):
    """Outcome of validating a brand spec.

    Errors are fatal to a compile; warnings are returned alongside output.
    """

    model_config = ConfigDict(frozen=True)

    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors


class ContrastAdjustment(BaseModel):
    """A text color replaced so it meets the target ratio on its background."""

    model_config = ConfigDict(frozen=True)

    component: str
    role: str = Field(description="Text role, or '' for the component's own color")
    source: str = Field(description="Where the original color came from")
    scheme: ColorScheme = ColorScheme.LIGHT
    bg_hex: str
    original_hex: str
    adjusted_hex: str
    original_ratio: float
    new_ratio: float

    @property
    def css_property(self) -> str:
        if self.role:
            return f"--bodhi-nirmana-{self.component}-color-{self.role}"
        return f"--bodhi-nirmana-{self.component}-color"

    def ratio_note(self) -> str:
        return (
            f"was {self.original_ratio:.1f}:1 → now {self.new_ratio:.1f}:1"
        )


class ContrastShortfall(BaseModel):
    """A text color that fails the target and could not be adjusted."""

    model_config = ConfigDict(frozen=True)

    component: str
    role: str
    source: str
    scheme: ColorScheme = ColorScheme.LIGHT
    bg_hex: str
    original_hex: str
    original_ratio: float
    target: float


class CompileResult(BaseModel):
    """Everything a front end needs after a successful compile."""

    model_config = ConfigDict(frozen=True)

    css: str
    category_counts: dict[str, int] = Field(default_factory=dict)
    validation: ValidationResult = Field(default_factory=ValidationResult)
    adjustments: list[ContrastAdjustment] = Field(default_factory=list)
    shortfalls: list[ContrastShortfall] = Field(default_factory=list)

    @property
    def total_tokens(self) -> int:
        return sum(self.category_counts.values())

    @property
    def warnings(self) -> list[str]:
        return self.validation.warnings
