"""Pydantic schemas for tax rules validation.

These schemas validate the taxes/rules/*.yaml files (and any override in
the config directory) and provide typed access to the standard deduction,
bracket table, FICA parameters and the flat state rate.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TaxBracket(BaseModel):
    """Single tax bracket entry."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    up_to: Optional[float] = Field(default=None, gt=0, description="Upper bound (None for the top bracket)")
    rate: float = Field(..., ge=0, le=1, description="Marginal rate as decimal")

    @property
    def upper_bound(self) -> float:
        return float("inf") if self.up_to is None else self.up_to


class SocialSecurityRules(BaseModel):
    """Social Security tax rules."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    wage_cap: float = Field(..., gt=0, description="SS wage base (max taxable)")
    tax_rate: float = Field(..., ge=0, le=1, description="SS tax rate (employee portion)")


class MedicareRules(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    tax_rate: float = Field(..., ge=0, le=1, description="Medicare rate, no wage cap")


class StateRules(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    flat_rate: float = Field(..., ge=0, le=1, description="Flat approximation of state income tax")


class TaxRules(BaseModel):
    """Complete tax rules for a year."""
    model_config = ConfigDict(extra="ignore", frozen=True)  # Allow unknown fields for forward compat

    year: int
    filing_status: str = "single"
    standard_deduction: float = Field(..., ge=0)
    tax_brackets: List[TaxBracket] = Field(..., min_length=1)
    social_security: SocialSecurityRules
    medicare: MedicareRules
    state: StateRules

    @model_validator(mode="after")
    def check_brackets(self) -> "TaxRules":
        """Brackets must ascend strictly and end with an unbounded bracket."""
        bounds = [b.up_to for b in self.tax_brackets]
        if bounds[-1] is not None:
            raise ValueError("last tax bracket must be unbounded (up_to: null)")
        finite = bounds[:-1]
        if any(b is None for b in finite):
            raise ValueError("only the last tax bracket may be unbounded")
        if any(later <= earlier for earlier, later in zip(finite, finite[1:])):
            raise ValueError(f"tax bracket bounds must strictly increase: {finite}")
        return self
