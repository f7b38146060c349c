"""Unit tests for loan payments and amortization."""

import pytest

from fincalc.sdk.errors import InvalidInputError
from fincalc.sdk.loans import (
    CREDIT_TIERS,
    amortize_loan,
    calculate_loan_amount,
    calculate_loan_estimates,
    calculate_monthly_payment,
    calculate_mortgage,
)
from fincalc.sdk.schemas import LoanParameters


def amortize(principal, rate, term):
    return amortize_loan(LoanParameters(principal=principal, annual_rate_percent=rate, term_months=term))


class TestMonthlyPayment:
    """Tests for calculate_monthly_payment()."""

    def test_standard_auto_loan(self):
        assert calculate_monthly_payment(20000, 6, 60) == pytest.approx(386.66, abs=0.01)

    def test_zero_rate_is_straight_division(self):
        assert calculate_monthly_payment(12000, 0, 60) == 200

    @pytest.mark.parametrize("principal,rate,term", [
        (0, 6, 60),
        (-1000, 6, 60),
        (20000, -1, 60),
        (20000, 6, 0),
        (float("nan"), 6, 60),
        (20000, float("nan"), 60),
        (20000, float("inf"), 60),
    ])
    def test_invalid_terms_raise(self, principal, rate, term):
        with pytest.raises(InvalidInputError):
            calculate_monthly_payment(principal, rate, term)

    def test_rate_too_large_to_compound_raises(self):
        with pytest.raises(InvalidInputError, match="too large"):
            calculate_monthly_payment(1000, 10000, 360)


class TestAmortizeLoan:
    """Tests for amortize_loan()."""

    def test_schedule_retires_principal(self):
        result = amortize(20000, 6, 60)

        assert len(result.schedule) == 60
        assert result.schedule[-1].balance == pytest.approx(0, abs=0.01)
        assert sum(p.principal for p in result.schedule) == pytest.approx(20000, abs=0.01)

    def test_totals(self):
        result = amortize(20000, 6, 60)

        assert result.monthly_payment == pytest.approx(386.66, abs=0.01)
        assert result.total_interest == pytest.approx(sum(p.interest for p in result.schedule))
        assert result.total_paid == pytest.approx(20000 + result.total_interest)

    def test_interest_falls_and_principal_rises(self):
        schedule = amortize(30000, 7.5, 48).schedule

        assert schedule[0].interest == pytest.approx(30000 * 0.075 / 12)
        assert schedule[0].interest > schedule[-1].interest
        assert schedule[0].principal < schedule[-1].principal

    def test_balance_never_negative_and_decreasing(self):
        schedule = amortize(250000, 6.5, 360).schedule
        balances = [p.balance for p in schedule]

        assert all(b >= 0 for b in balances)
        assert balances == sorted(balances, reverse=True)
        assert balances[-1] == pytest.approx(0, abs=0.01)

    def test_zero_rate(self):
        result = amortize(12000, 0, 60)

        assert result.monthly_payment == 12000 / 60
        assert result.total_interest == 0
        assert all(p.interest == 0 for p in result.schedule)
        assert result.schedule[-1].balance == 0

    def test_invalid_principal_raises(self):
        with pytest.raises(InvalidInputError):
            amortize(0, 6, 60)

    def test_rate_too_large_to_compound_raises(self):
        with pytest.raises(InvalidInputError):
            amortize(1000, 10000, 360)

    def test_very_large_principal_ends_at_zero(self):
        result = amortize(1e12, 7, 360)

        assert len(result.schedule) == 360
        assert result.schedule[-1].balance == 0
        assert sum(p.principal for p in result.schedule) == pytest.approx(1e12)

    def test_repeat_calls_identical(self):
        assert amortize(15000, 5.25, 36) == amortize(15000, 5.25, 36)


class TestReverseAmortization:
    """Tests for calculate_loan_amount() and calculate_loan_estimates()."""

    def test_inverts_monthly_payment(self):
        payment = calculate_monthly_payment(25000, 8.49, 60)
        assert calculate_loan_amount(payment, 8.49, 60) == pytest.approx(25000)

    def test_zero_rate(self):
        assert calculate_loan_amount(400, 0, 60) == 24000

    def test_very_high_rate_approaches_payment_over_rate(self):
        monthly_rate = 10000 / 100 / 12
        assert calculate_loan_amount(100, 10000, 360) == pytest.approx(100 / monthly_rate)

    def test_estimates_per_tier(self):
        estimates = calculate_loan_estimates(500, 60)

        assert [e.credit_tier.name for e in estimates] == [t.name for t in CREDIT_TIERS]
        amounts = [e.loan_amount for e in estimates]
        assert amounts == sorted(amounts, reverse=True)
        for estimate in estimates:
            assert estimate.total_cost == pytest.approx(30000)
            assert estimate.total_interest == pytest.approx(30000 - estimate.loan_amount)


class TestMortgage:
    """Tests for calculate_mortgage()."""

    def test_twenty_percent_down_has_no_pmi(self):
        result = calculate_mortgage(400000, 20, 6.5)

        assert result.down_payment == pytest.approx(80000)
        assert result.loan_amount == pytest.approx(320000)
        assert result.pmi == 0
        assert result.principal_interest == pytest.approx(calculate_monthly_payment(320000, 6.5, 360))
        assert result.property_tax == pytest.approx(400)
        assert result.insurance == pytest.approx(125)
        assert result.total_monthly == pytest.approx(result.principal_interest + 400 + 125)

    def test_low_down_payment_adds_pmi(self):
        result = calculate_mortgage(300000, 10, 6.5)
        assert result.pmi == pytest.approx(270000 * 0.005 / 12)

    def test_full_down_payment_raises(self):
        with pytest.raises(InvalidInputError):
            calculate_mortgage(300000, 100, 6.5)
