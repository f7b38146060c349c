"""Unit tests for YTD income projection."""

import pytest

from fincalc.sdk.errors import InvalidInputError, InvalidRangeError
from fincalc.sdk.income_projection import income_from_annual, income_from_monthly, project_income


class TestProjectIncome:
    """Tests for project_income()."""

    def test_ten_days(self):
        result = project_income("2024-01-01", "2024-01-10", 1000)

        assert result.days_worked == 10
        assert result.daily_rate == pytest.approx(100)
        assert result.weekly_rate == pytest.approx(700)
        assert result.annual_rate == pytest.approx(36500)
        assert result.monthly_rate == pytest.approx(36500 / 12)

    def test_annual_uses_365_days_in_leap_year(self):
        result = project_income("2024-01-01", "2024-06-30", 42000)

        assert result.days_worked == 182
        assert result.annual_rate == pytest.approx(42000 / 182 * 365)

    @pytest.mark.parametrize("ytd,start,as_of", [
        (0, "2024-01-01", "2024-01-01"),
        (12345.67, "2024-02-10", "2024-08-31"),
        (250000, "2023-07-01", "2024-12-31"),
    ])
    def test_monthly_times_twelve_matches_annual(self, ytd, start, as_of):
        result = project_income(start, as_of, ytd)
        assert result.monthly_rate * 12 == pytest.approx(result.annual_rate)

    def test_quick_reference_caps(self):
        result = project_income("2024-01-01", "2024-01-10", 1000)

        assert result.max_auto_payment == pytest.approx(result.monthly_rate * 0.12)
        assert result.max_rent == pytest.approx(result.monthly_rate * 0.30)

    def test_cross_year_start(self):
        result = project_income("2023-12-01", "2024-01-10", 2000)
        assert result.days_worked == 10
        assert result.daily_rate == pytest.approx(200)

    def test_zero_ytd_gives_zero_rates(self):
        result = project_income("2024-01-01", "2024-03-01", 0)
        assert result.annual_rate == 0

    def test_negative_ytd_raises(self):
        with pytest.raises(InvalidInputError):
            project_income("2024-01-01", "2024-01-10", -1)

    @pytest.mark.parametrize("ytd", [float("nan"), float("inf")])
    def test_non_finite_ytd_raises(self, ytd):
        with pytest.raises(InvalidInputError):
            project_income("2024-01-01", "2024-01-10", ytd)

    def test_inverted_range_raises(self):
        with pytest.raises(InvalidRangeError):
            project_income("2024-02-01", "2024-01-10", 1000)

    def test_repeat_calls_identical(self):
        first = project_income("2024-01-01", "2024-04-15", 31000)
        second = project_income("2024-01-01", "2024-04-15", 31000)
        assert first == second


class TestIncomeRates:
    """Tests for income_from_annual() and income_from_monthly()."""

    def test_from_annual(self):
        rates = income_from_annual(52000)

        assert rates.monthly == pytest.approx(52000 / 12)
        assert rates.biweekly == pytest.approx(2000)
        assert rates.weekly == pytest.approx(1000)
        assert rates.hourly == pytest.approx(25)

    def test_from_monthly(self):
        assert income_from_monthly(5000).annual == pytest.approx(60000)

    def test_negative_raises(self):
        with pytest.raises(InvalidInputError):
            income_from_annual(-100)
