"""Unit tests for the MCP tool functions.

Tools are called directly as coroutines; every argument is passed
explicitly since the defaults are pydantic Field declarations.
"""

import asyncio

import pytest

from fincalc.mcp import server


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    monkeypatch.setenv("FIN_CALC_CONFIG_PATH", str(tmp_path / "config"))


class TestMcpTools:
    """Tests for tool results and error handling."""

    def test_project_income(self):
        result = asyncio.run(server.project_income("2024-01-01", "2024-01-10", 1000))
        assert result["annual_rate"] == pytest.approx(36500)

    def test_project_income_error_returned(self):
        result = asyncio.run(server.project_income("2024-02-01", "2024-01-10", 1000))
        assert "error" in result

    def test_estimate_taxes(self):
        result = asyncio.run(server.estimate_taxes(85000, 2024, None))
        assert result["total_tax"] == pytest.approx(21293.5)

    def test_aggregate_income_streams(self):
        streams = [
            {"name": "Job", "amount": 5000, "frequency": "monthly", "stability_rating": 5},
            {"name": "Gig", "amount": 1000, "frequency": "monthly", "type": "gig"},
        ]
        result = asyncio.run(server.aggregate_income_streams(streams))

        assert result["total_annual"] == pytest.approx(72000)
        assert result["reliable_annual"] < result["total_annual"]

    def test_amortize_loan_without_schedule(self):
        result = asyncio.run(server.amortize_loan(20000, 6, 60, False))

        assert result["periods"] == 60
        assert "schedule" not in result

    def test_evaluate_affordability(self):
        result = asyncio.run(server.evaluate_affordability(6000, "0.30", None))
        assert result["max_affordable"] == pytest.approx(1800)

    def test_allocate_budget_rejects_bad_split(self):
        result = asyncio.run(server.allocate_budget(5000, 0.5, 0.5, 0.5))
        assert "sum to 1.0" in result["error"]

    def test_project_inflation_impact(self):
        result = asyncio.run(server.project_inflation_impact(50000, 3, [5]))
        assert result["projections"][0]["purchasing_power"] == pytest.approx(43130, abs=1)

    def test_salary_affordability(self):
        result = asyncio.run(server.salary_affordability(85000, 2024, None))
        assert result["take_home_pay"] == pytest.approx(63706.5)
