import pytest

from cashplan_core.domain.models import CAPPED_RATE_BOUNDS, BudgetItem, PlannerAssumptions
from cashplan_core.services.budget import total_planned
from cashplan_core.services.calculator import calculate_cashflow, summarize


def _items(*planned):
    return [BudgetItem(category=f"cat{i}", current=0.0, planned=p) for i, p in enumerate(planned)]


def test_zero_input_gives_all_zero_summary():
    raw = {"grossYearly": 0, "taxRate": 0, "savingsRate": 0, "returnRate": 0, "startingNetWorth": 0}
    result = calculate_cashflow(raw, [])
    assert all(value == 0 for value in result.to_dict().values())


def test_concrete_scenario():
    raw = PlannerAssumptions(gross_yearly=120000, tax_rate=0.28, savings_rate=0.25)
    result = calculate_cashflow(raw, _items(2000, 500, 1000))
    assert result.gross_monthly == pytest.approx(10000)
    assert result.tax_monthly == pytest.approx(2800)
    assert result.net_monthly == pytest.approx(7200)
    assert result.invest_monthly == pytest.approx(1800)
    assert result.planned_lifestyle_monthly == pytest.approx(3500)
    assert result.surplus_monthly == pytest.approx(1900)
    assert result.contribution_monthly == pytest.approx(3700)


def test_scalar_and_list_forms_agree():
    raw = {"grossYearly": 120000, "taxRate": 0.28, "savingsRate": 0.25}
    from_items = calculate_cashflow(raw, _items(2000, 1500))
    from_scalar = calculate_cashflow(raw, 3500.0)
    assert from_items == from_scalar


def test_doubling_income_scales_monthly_figures():
    items = _items(6000)  # deficit in both runs
    base = calculate_cashflow({"grossYearly": 60000, "taxRate": 0.25, "savingsRate": 0.10}, items)
    doubled = calculate_cashflow({"grossYearly": 120000, "taxRate": 0.25, "savingsRate": 0.10}, items)

    for field in ("gross_monthly", "tax_monthly", "net_monthly", "invest_monthly"):
        assert getattr(doubled, field) == pytest.approx(2 * getattr(base, field))
    assert doubled.planned_lifestyle_monthly == base.planned_lifestyle_monthly

    kept_base = base.net_monthly - base.invest_monthly
    kept_doubled = doubled.net_monthly - doubled.invest_monthly
    assert doubled.surplus_monthly - base.surplus_monthly == pytest.approx(kept_doubled - kept_base)


def test_doubling_income_doubles_contribution_without_spend():
    base = calculate_cashflow({"grossYearly": 50000, "taxRate": 0.2, "savingsRate": 0.3}, [])
    doubled = calculate_cashflow({"grossYearly": 100000, "taxRate": 0.2, "savingsRate": 0.3}, [])
    assert doubled.contribution_monthly == pytest.approx(2 * base.contribution_monthly)


def test_tax_rate_above_one_is_clamped_to_default_cap():
    result = calculate_cashflow({"grossYearly": 120000, "taxRate": 1.5, "savingsRate": 0.2}, 0.0)
    assert result.tax_monthly == pytest.approx(result.gross_monthly)
    assert result.net_monthly == pytest.approx(0.0)


def test_tax_rate_above_one_is_clamped_to_capped_bound():
    result = calculate_cashflow({"grossYearly": 120000, "taxRate": 1.5}, 0.0, CAPPED_RATE_BOUNDS)
    assert result.tax_monthly == pytest.approx(10000 * 0.9)
    assert result.tax_monthly <= result.gross_monthly * 0.9


def test_deficit_keeps_rate_implied_contribution():
    raw = {"grossYearly": 60000, "taxRate": 0.25, "savingsRate": 0.10}
    result = calculate_cashflow(raw, 5000.0)
    assert result.surplus_monthly < 0
    assert result.contribution_monthly == result.invest_monthly


def test_surplus_is_folded_into_contribution():
    raw = {"grossYearly": 60000, "taxRate": 0.25, "savingsRate": 0.10}
    result = calculate_cashflow(raw, 1000.0)
    assert result.surplus_monthly > 0
    assert result.contribution_monthly == result.invest_monthly + result.surplus_monthly


def test_summarize_propagates_negative_spend():
    assumptions = PlannerAssumptions(gross_yearly=12000, tax_rate=0.0, savings_rate=0.0)
    result = summarize(assumptions, -100.0)
    assert result.surplus_monthly == pytest.approx(1100.0)
    assert result.planned_lifestyle_monthly == -100.0


def test_aggregation_is_deterministic():
    items = _items(120.5, 80.25, 0, None, 1000)
    first = total_planned(items)
    second = total_planned(list(items))
    assert first == second == pytest.approx(1200.75)


def test_aggregation_accepts_mappings_and_missing_planned():
    items = [{"category": "rent", "planned": 900}, {"category": "misc"}, {"category": "food", "planned": float("nan")}]
    assert total_planned(items) == 900.0
    assert total_planned([]) == 0.0


def test_summary_is_immutable():
    result = calculate_cashflow({"grossYearly": 12000}, 0.0)
    with pytest.raises(AttributeError):
        result.net_monthly = 1.0
