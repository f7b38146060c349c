"""Unit tests for tax estimation and tax rules loading."""

import pytest
import yaml

from fincalc.sdk.errors import InvalidConfigurationError, InvalidInputError
from fincalc.sdk.taxes import (
    TaxRulesCache,
    calculate_federal_income_tax,
    calculate_fica,
    estimate_gig_income,
    estimate_taxes,
    get_available_years,
    load_tax_rules,
    parse_tax_rules,
)


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Point config at an empty directory so no user tax-rule overrides apply."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setenv("FIN_CALC_CONFIG_PATH", str(config_dir))
    return config_dir


@pytest.fixture
def rules_2024(isolated_env):
    return load_tax_rules(2024)


def _raw_rules(**overrides):
    raw = {
        "year": 2030,
        "standard_deduction": 10000,
        "tax_brackets": [
            {"up_to": 10000, "rate": 0.10},
            {"up_to": None, "rate": 0.20},
        ],
        "social_security": {"wage_cap": 100000, "tax_rate": 0.062},
        "medicare": {"tax_rate": 0.0145},
        "state": {"flat_rate": 0.05},
    }
    raw.update(overrides)
    return raw


class TestFederalIncomeTax:
    """Tests for calculate_federal_income_tax()."""

    def test_zero_income(self, rules_2024):
        assert calculate_federal_income_tax(0, rules_2024.tax_brackets) == 0

    def test_within_first_bracket(self, rules_2024):
        assert calculate_federal_income_tax(10000, rules_2024.tax_brackets) == pytest.approx(1000)

    def test_at_bracket_boundary_taxed_at_lower_rate(self, rules_2024):
        assert calculate_federal_income_tax(11600, rules_2024.tax_brackets) == pytest.approx(1160)

    def test_spans_three_brackets(self, rules_2024):
        # 11600 * 10% + 35550 * 12% + 23250 * 22%
        assert calculate_federal_income_tax(70400, rules_2024.tax_brackets) == pytest.approx(10541)


class TestFica:
    """Tests for calculate_fica()."""

    def test_below_wage_cap(self, rules_2024):
        fica = calculate_fica(85000, rules_2024)
        assert fica.social_security == pytest.approx(5270)
        assert fica.medicare == pytest.approx(1232.5)
        assert fica.total == pytest.approx(6502.5)

    def test_social_security_capped(self, rules_2024):
        fica = calculate_fica(200000, rules_2024)
        assert fica.social_security == pytest.approx(168600 * 0.062)
        assert fica.medicare == pytest.approx(2900)


class TestEstimateTaxes:
    """Tests for estimate_taxes()."""

    def test_85k_single_filer_2024(self, rules_2024):
        estimate = estimate_taxes(85000, rules_2024)

        assert estimate.taxable_income == pytest.approx(70400)
        assert estimate.federal_tax == pytest.approx(10541)
        assert estimate.fica_tax == pytest.approx(6502.5)
        assert estimate.state_tax_estimate == pytest.approx(4250)
        assert estimate.total_tax == pytest.approx(21293.5)
        assert estimate.net_income == pytest.approx(63706.5)
        assert estimate.effective_rate == pytest.approx(21293.5 / 85000)
        assert estimate.tax_year == 2024

    def test_income_below_deduction_owes_no_federal_tax(self, rules_2024):
        estimate = estimate_taxes(10000, rules_2024)
        assert estimate.taxable_income == 0
        assert estimate.federal_tax == 0
        assert estimate.fica_tax == pytest.approx(765)

    def test_zero_income(self, rules_2024):
        estimate = estimate_taxes(0, rules_2024)
        assert estimate.total_tax == 0
        assert estimate.effective_rate == 0

    def test_state_rate_override(self, rules_2024):
        estimate = estimate_taxes(85000, rules_2024, state_rate=0.0)
        assert estimate.state_tax_estimate == 0
        assert estimate.total_tax == pytest.approx(10541 + 6502.5)

    def test_negative_income_raises(self, rules_2024):
        with pytest.raises(InvalidInputError):
            estimate_taxes(-1, rules_2024)

    def test_nan_income_raises(self, rules_2024):
        with pytest.raises(InvalidInputError):
            estimate_taxes(float("nan"), rules_2024)

    def test_nan_state_rate_raises(self, rules_2024):
        with pytest.raises(InvalidInputError):
            estimate_taxes(50000, rules_2024, state_rate=float("nan"))

    def test_negative_state_rate_raises(self, rules_2024):
        with pytest.raises(InvalidInputError):
            estimate_taxes(50000, rules_2024, state_rate=-0.01)

    def test_default_rules_when_none_given(self, isolated_env):
        assert estimate_taxes(50000).tax_year == 2024

    def test_total_tax_never_decreases_with_income(self, rules_2024):
        incomes = [0, 5000, 14600, 14601, 26200, 61750, 115125, 168600, 168601, 250000, 700000]
        totals = [estimate_taxes(income, rules_2024).total_tax for income in incomes]
        assert totals == sorted(totals)

    def test_2025_rules_differ(self, isolated_env):
        estimate = estimate_taxes(85000, load_tax_rules(2025))
        assert estimate.tax_year == 2025
        assert estimate.taxable_income == pytest.approx(70000)


class TestTaxRulesLoading:
    """Tests for rules files, overrides and the rules cache."""

    def test_bundled_years_available(self, isolated_env):
        years = get_available_years()
        assert 2024 in years
        assert 2025 in years
        assert years == sorted(years, reverse=True)

    def test_missing_year_raises(self, isolated_env):
        with pytest.raises(FileNotFoundError, match="1999"):
            load_tax_rules(1999)

    def test_year_as_string(self, isolated_env):
        assert load_tax_rules("2024").year == 2024

    def test_config_override_takes_precedence(self, isolated_env):
        override_dir = isolated_env / "tax-rules"
        override_dir.mkdir()
        raw = _raw_rules(year=2024, standard_deduction=20000)
        (override_dir / "2024.yaml").write_text(yaml.dump(raw))

        assert load_tax_rules(2024).standard_deduction == 20000

    def test_override_adds_new_year(self, isolated_env):
        override_dir = isolated_env / "tax-rules"
        override_dir.mkdir()
        (override_dir / "2030.yaml").write_text(yaml.dump(_raw_rules()))

        assert 2030 in get_available_years()
        assert load_tax_rules(2030).standard_deduction == 10000

    def test_parse_rejects_bounded_last_bracket(self):
        raw = _raw_rules(tax_brackets=[{"up_to": 10000, "rate": 0.1}])
        with pytest.raises(InvalidConfigurationError, match="unbounded"):
            parse_tax_rules(raw)

    def test_parse_rejects_descending_brackets(self):
        raw = _raw_rules(tax_brackets=[
            {"up_to": 20000, "rate": 0.1},
            {"up_to": 10000, "rate": 0.2},
            {"up_to": None, "rate": 0.3},
        ])
        with pytest.raises(InvalidConfigurationError, match="strictly increase"):
            parse_tax_rules(raw)

    def test_parse_ignores_unknown_keys(self):
        raw = _raw_rules(notes="forward compatible")
        assert parse_tax_rules(raw).year == 2030

    def test_cache_loads_each_year_once(self, isolated_env):
        cache = TaxRulesCache()
        first = cache.get(2024)
        second = cache.get("2024")

        assert first is second
        assert len(cache) == 1

    def test_cache_clear(self, isolated_env):
        cache = TaxRulesCache()
        cache.get(2024)
        cache.get(2025)
        assert len(cache) == 2

        cache.clear()
        assert len(cache) == 0

    def test_load_through_cache(self, isolated_env):
        cache = TaxRulesCache()
        rules = load_tax_rules(2025, cache=cache)
        assert rules is cache.get(2025)


class TestGigIncome:
    """Tests for estimate_gig_income()."""

    def test_rideshare_preset(self, rules_2024):
        result = estimate_gig_income(40000, platform="uber", rules=rules_2024)

        assert result.expense_rate == 0.30
        assert result.expenses == pytest.approx(12000)
        assert result.net_before_tax == pytest.approx(28000)
        assert result.self_employment_tax == pytest.approx(28000 * 0.9235 * 0.153)
        assert result.lender_visible_income == pytest.approx(21000)
        assert result.true_net_income == pytest.approx(
            28000 - result.self_employment_tax - result.estimated_income_tax
        )
        assert result.quarterly_tax_set_aside == pytest.approx(
            (result.self_employment_tax + result.estimated_income_tax) / 4
        )

    def test_unknown_platform_uses_other(self, rules_2024):
        result = estimate_gig_income(30000, platform="taskrabbit", rules=rules_2024)
        assert result.platform == "other"
        assert result.expense_rate == 0.20

    def test_hourly_rate_only_with_hours(self, rules_2024):
        assert estimate_gig_income(30000, rules=rules_2024).effective_hourly_rate is None

        result = estimate_gig_income(30000, hours_per_week=20, rules=rules_2024)
        assert result.effective_hourly_rate == pytest.approx(result.true_net_income / (20 * 52))

    def test_expense_rate_out_of_range_raises(self, rules_2024):
        with pytest.raises(InvalidInputError):
            estimate_gig_income(30000, expense_rate=1.5, rules=rules_2024)
