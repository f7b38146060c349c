"""Unit tests for budget allocation and income-stream aggregation."""

import re

import pytest

from fincalc.sdk.budget import (
    BudgetProportions,
    aggregate_income_streams,
    allocate_budget,
    budget_subcategories,
    from_annual,
    new_stream_id,
    suggested_stability,
    to_annual,
)
from fincalc.sdk.errors import InvalidConfigurationError, InvalidInputError
from fincalc.sdk.schemas import IncomeStream


def make_stream(amount, frequency="monthly", stability_rating=5, income_type="w2", name="Job"):
    return IncomeStream(
        id=new_stream_id(),
        name=name,
        amount=amount,
        frequency=frequency,
        type=income_type,
        stability_rating=stability_rating,
    )


class TestAllocateBudget:
    """Tests for allocate_budget()."""

    def test_default_50_30_20(self):
        allocation = allocate_budget(5000)

        assert allocation.needs == pytest.approx(2500)
        assert allocation.wants == pytest.approx(1500)
        assert allocation.savings == pytest.approx(1000)
        assert [c.name for c in allocation.categories] == ["Needs", "Wants", "Savings"]

    @pytest.mark.parametrize("net", [0, 1, 1234.56, 4200, 987654.32])
    def test_parts_sum_to_net(self, net):
        allocation = allocate_budget(net)
        assert allocation.needs + allocation.wants + allocation.savings == pytest.approx(net, abs=1)

    def test_weekly_and_daily_breakdown(self):
        needs = allocate_budget(4330).categories[0]
        assert needs.weekly == pytest.approx(500)
        assert needs.daily == pytest.approx(2165 / 30)

    def test_custom_proportions(self):
        allocation = allocate_budget(1000, BudgetProportions(needs=0.6, wants=0.2, savings=0.2))
        assert allocation.needs == pytest.approx(600)

    def test_proportions_not_summing_to_one_raise(self):
        with pytest.raises(InvalidConfigurationError, match="sum to 1.0"):
            allocate_budget(1000, BudgetProportions(needs=0.5, wants=0.3, savings=0.3))

    def test_negative_proportion_raises(self):
        with pytest.raises(InvalidConfigurationError, match="non-negative"):
            allocate_budget(1000, BudgetProportions(needs=1.2, wants=-0.2, savings=0.0))

    def test_negative_income_raises(self):
        with pytest.raises(InvalidInputError):
            allocate_budget(-1)

    def test_nan_income_raises(self):
        with pytest.raises(InvalidInputError):
            allocate_budget(float("nan"))

    def test_subcategories_cover_whole_income(self):
        items = budget_subcategories(4000)
        assert sum(item.monthly for item in items) == pytest.approx(4000)
        housing = next(item for item in items if item.name == "Housing")
        assert housing.monthly == pytest.approx(1000)


class TestFrequencyConversion:
    """Tests for to_annual() and from_annual()."""

    @pytest.mark.parametrize("frequency,periods", [
        ("weekly", 52), ("biweekly", 26), ("monthly", 12), ("annually", 1),
    ])
    def test_to_annual(self, frequency, periods):
        assert to_annual(100, frequency) == 100 * periods

    def test_from_annual(self):
        assert from_annual(52000, "weekly") == pytest.approx(1000)

    def test_unknown_frequency_raises(self):
        with pytest.raises(InvalidInputError, match="frequency"):
            to_annual(100, "daily")


class TestIncomeStreams:
    """Tests for aggregate_income_streams()."""

    def test_reliable_income_below_total_when_variable(self):
        streams = [
            make_stream(5000, stability_rating=5),
            make_stream(1000, stability_rating=2, income_type="gig", name="Gig"),
        ]
        summary = aggregate_income_streams(streams)

        assert summary.total_annual == pytest.approx(72000)
        assert summary.reliable_annual == pytest.approx(60000 + 12000 * 0.65)
        assert summary.reliable_annual < summary.total_annual
        assert summary.monthly == pytest.approx(6000)
        assert summary.stream_count == 2

    def test_by_type_totals(self):
        streams = [
            make_stream(4000, income_type="w2"),
            make_stream(250, frequency="weekly", income_type="gig", stability_rating=2),
        ]
        summary = aggregate_income_streams(streams)

        assert summary.by_type["w2"] == pytest.approx(48000)
        assert summary.by_type["gig"] == pytest.approx(13000)
        assert summary.by_type["rental"] == 0

    def test_order_does_not_matter(self):
        streams = [
            make_stream(3000),
            make_stream(800, frequency="biweekly", stability_rating=3, income_type="freelance"),
            make_stream(12000, frequency="annually", stability_rating=4, income_type="rental"),
        ]
        forward = aggregate_income_streams(streams)
        backward = aggregate_income_streams(list(reversed(streams)))

        assert forward.total_annual == pytest.approx(backward.total_annual)
        assert forward.reliable_annual == pytest.approx(backward.reliable_annual)

    def test_all_stable_is_fully_reliable(self):
        summary = aggregate_income_streams([make_stream(5000)])
        assert summary.reliability_percent == pytest.approx(100)

    def test_empty(self):
        summary = aggregate_income_streams([])
        assert summary.total_annual == 0
        assert summary.reliability_percent == 0
        assert summary.stream_count == 0

    def test_rating_out_of_range_rejected_by_schema(self):
        with pytest.raises(ValueError):
            make_stream(1000, stability_rating=6)

    def test_suggested_stability(self):
        assert suggested_stability("w2") == 5
        assert suggested_stability("gig") == 2
        assert suggested_stability("unknown") == 3

    def test_stream_ids_unique(self):
        ids = {new_stream_id() for _ in range(100)}
        assert len(ids) == 100
        assert all(re.fullmatch(r"stream_[0-9a-f]{12}", i) for i in ids)
