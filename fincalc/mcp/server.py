"""Fin Calc MCP Server - FastMCP implementation for finance calculation tools."""

import logging
from typing import Any, Optional

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from fincalc.sdk import (
    BudgetProportions,
    IncomeStream,
    LoanParameters,
    TaxRulesCache,
    amortize_loan as sdk_amortize_loan,
    aggregate_income_streams as sdk_aggregate_income_streams,
    allocate_budget as sdk_allocate_budget,
    estimate_taxes as sdk_estimate_taxes,
    evaluate_affordability as sdk_evaluate_affordability,
    new_stream_id,
    project_income as sdk_project_income,
    project_inflation_impact as sdk_project_inflation_impact,
    salary_affordability as sdk_salary_affordability,
    suggested_stability,
)
from fincalc.sdk.inflation import DEFAULT_YEAR_OFFSETS

logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("fin-calc")

# Tax rules parsed once per server process
_tax_rules = TaxRulesCache()


# --- Tools ---

@mcp.tool()
async def project_income(
    start_date: str = Field(description="First day worked (YYYY-MM-DD); earlier years clamp to Jan 1"),
    as_of_date: str = Field(description="Date the YTD figure runs through (YYYY-MM-DD)"),
    ytd_income: float = Field(description="Gross income received so far this year"),
) -> dict[str, Any]:
    """Project daily, weekly, monthly and annual income from year-to-date pay."""
    try:
        return sdk_project_income(start_date, as_of_date, ytd_income).model_dump()
    except Exception as e:
        logger.error(f"Error projecting income: {e}")
        return {"error": str(e)}


@mcp.tool()
async def estimate_taxes(
    gross_income: float = Field(description="Annual gross income"),
    year: int = Field(default=2024, description="Tax rules year (e.g., 2024, 2025)"),
    state_rate: Optional[float] = Field(default=None, description="Flat state tax rate as a decimal (default 0.05)"),
) -> dict[str, Any]:
    """Estimate annual federal income tax, FICA and state tax, with net income."""
    try:
        rules = _tax_rules.get(year)
        return sdk_estimate_taxes(gross_income, rules, state_rate=state_rate).model_dump()
    except Exception as e:
        logger.error(f"Error estimating taxes: {e}")
        return {"error": str(e)}


@mcp.tool()
async def allocate_budget(
    net_monthly_income: float = Field(description="Net (take-home) monthly income"),
    needs: float = Field(default=0.50, description="Needs share as a decimal"),
    wants: float = Field(default=0.30, description="Wants share as a decimal"),
    savings: float = Field(default=0.20, description="Savings share as a decimal"),
) -> dict[str, Any]:
    """Split net monthly income into needs, wants and savings (50/30/20 by default)."""
    try:
        proportions = BudgetProportions(needs=needs, wants=wants, savings=savings)
        return sdk_allocate_budget(net_monthly_income, proportions).model_dump()
    except Exception as e:
        logger.error(f"Error allocating budget: {e}")
        return {"error": str(e)}


@mcp.tool()
async def aggregate_income_streams(
    streams: list[dict] = Field(description=(
        "Income streams: each has name, amount, frequency (weekly|biweekly|monthly|annually), "
        "optional type (w2|freelance|gig|rental|side-hustle|other) and stability_rating (1-5)"
    )),
) -> dict[str, Any]:
    """Combine household income streams into annual and stability-weighted totals."""
    try:
        parsed = []
        for raw in streams:
            income_type = raw.get("type", "other")
            parsed.append(IncomeStream(
                id=raw.get("id") or new_stream_id(),
                name=raw["name"],
                amount=raw["amount"],
                frequency=raw["frequency"],
                type=income_type,
                stability_rating=raw.get("stability_rating", suggested_stability(income_type)),
            ))
        return sdk_aggregate_income_streams(parsed).model_dump()
    except Exception as e:
        logger.error(f"Error aggregating income streams: {e}")
        return {"error": str(e)}


@mcp.tool()
async def amortize_loan(
    principal: float = Field(description="Loan principal"),
    annual_rate_percent: float = Field(description="Annual interest rate in percent (e.g., 6.5)"),
    term_months: int = Field(description="Loan term in months"),
    include_schedule: bool = Field(default=False, description="Include the per-month schedule"),
) -> dict[str, Any]:
    """Monthly payment, total interest and (optionally) the full amortization schedule."""
    try:
        result = sdk_amortize_loan(LoanParameters(
            principal=principal,
            annual_rate_percent=annual_rate_percent,
            term_months=term_months,
        ))
        data = result.model_dump()
        if not include_schedule:
            data["periods"] = len(data.pop("schedule"))
        return data
    except Exception as e:
        logger.error(f"Error amortizing loan: {e}")
        return {"error": str(e)}


@mcp.tool()
async def evaluate_affordability(
    income: float = Field(description="Monthly income figure (gross for rent/auto/mortgage)"),
    ratio: str = Field(description="Decimal ratio (e.g., '0.30') or name: rent, rent-conservative, auto, mortgage, dti"),
    candidate_amount: Optional[float] = Field(default=None, description="Amount to test against the maximum"),
) -> dict[str, Any]:
    """Maximum affordable amount at a ratio of income, and whether a candidate fits."""
    try:
        return sdk_evaluate_affordability(income, ratio, candidate_amount).model_dump()
    except Exception as e:
        logger.error(f"Error evaluating affordability: {e}")
        return {"error": str(e)}


@mcp.tool()
async def project_inflation_impact(
    present_value: float = Field(description="Amount in today's dollars"),
    annual_rate_percent: float = Field(default=3.0, description="Annual inflation in percent"),
    years: list[int] = Field(default=list(DEFAULT_YEAR_OFFSETS), description="Year offsets to project"),
) -> dict[str, Any]:
    """Purchasing power, percent lost and raise needed after each year offset."""
    try:
        projections = sdk_project_inflation_impact(present_value, annual_rate_percent, years)
        return {"projections": [p.model_dump() for p in projections]}
    except Exception as e:
        logger.error(f"Error projecting inflation: {e}")
        return {"error": str(e), "projections": []}


@mcp.tool()
async def salary_affordability(
    salary: float = Field(description="Annual gross salary"),
    year: int = Field(default=2024, description="Tax rules year"),
    state_rate: Optional[float] = Field(default=None, description="Flat state tax rate as a decimal"),
) -> dict[str, Any]:
    """Take-home pay, 50/30/20 budget and rent/car/mortgage limits for a salary."""
    try:
        rules = _tax_rules.get(year)
        return sdk_salary_affordability(salary, rules, state_rate).model_dump()
    except Exception as e:
        logger.error(f"Error computing salary affordability: {e}")
        return {"error": str(e)}


def run_server():
    """Run the MCP server in stdio mode."""
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()
