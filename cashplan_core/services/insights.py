from __future__ import annotations

from collections import OrderedDict
from typing import Dict, Iterable, List

from cashplan_core.domain.models import BudgetFlag, BudgetInsights, CashflowSummary, CutSuggestion
from cashplan_core.services.budget import BudgetLike, category_of, planned_amount

# Share of net monthly pay each category should stay under.
CATEGORY_GUIDELINES: Dict[str, float] = {
    "rent": 0.35,
    "transportation": 0.15,
    "debt": 0.20,
}

DISCRETIONARY_CATEGORIES = ("eating_out", "shopping", "entertainment", "subscriptions", "travel")
DISCRETIONARY_GUIDELINE = 0.20

CATEGORY_LABELS: Dict[str, str] = {
    "rent": "Rent/Mortgage",
    "utilities": "Utilities",
    "groceries": "Groceries",
    "transportation": "Transportation",
    "insurance": "Insurance",
    "debt": "Debt payments",
    "eating_out": "Eating out",
    "subscriptions": "Subscriptions",
    "shopping": "Shopping",
    "entertainment": "Entertainment",
    "travel": "Travel",
    "other": "Other",
    "discretionary": "Discretionary spending",
}


def _label(category: str) -> str:
    return CATEGORY_LABELS.get(category, category)


def planned_by_category(items: Iterable[BudgetLike]) -> Dict[str, float]:
    totals: Dict[str, float] = OrderedDict()
    for item in items:
        key = category_of(item)
        totals[key] = totals.get(key, 0.0) + planned_amount(item)
    return totals


def compute_flags(totals: Dict[str, float], net_monthly: float) -> List[BudgetFlag]:
    def share(amount: float) -> float:
        return amount / net_monthly if net_monthly > 0 else 0.0

    flags: List[BudgetFlag] = []
    for category, amount in totals.items():
        guideline = CATEGORY_GUIDELINES.get(category)
        if guideline is None:
            continue
        pct = share(amount)
        if pct > guideline:
            flags.append(BudgetFlag(category=category, label=_label(category), share=pct, guideline=guideline))

    discretionary = sum(totals.get(c, 0.0) for c in DISCRETIONARY_CATEGORIES)
    pct = share(discretionary)
    if pct > DISCRETIONARY_GUIDELINE:
        flags.append(
            BudgetFlag(
                category="discretionary",
                label=_label("discretionary"),
                share=pct,
                guideline=DISCRETIONARY_GUIDELINE,
            )
        )
    return flags


def compute_cut_suggestions(totals: Dict[str, float], surplus_monthly: float) -> List[CutSuggestion]:
    """Cover a deficit from the largest discretionary categories first."""
    if surplus_monthly >= 0:
        return []

    remaining = abs(surplus_monthly)
    # budget order breaks ties
    candidates = [(c, amount) for c, amount in totals.items() if c in DISCRETIONARY_CATEGORIES and amount > 0]
    candidates.sort(key=lambda pair: pair[1], reverse=True)

    suggestions: List[CutSuggestion] = []
    for category, amount in candidates:
        if remaining <= 0:
            break
        cut = min(amount, remaining)
        suggestions.append(CutSuggestion(category=category, current_amount=amount, suggested_cut=cut))
        remaining -= cut
    return suggestions


def compute_insights(items: Iterable[BudgetLike], summary: CashflowSummary) -> BudgetInsights:
    totals = planned_by_category(items)
    flags = compute_flags(totals, summary.net_monthly)
    cuts = compute_cut_suggestions(totals, summary.surplus_monthly)

    messages: List[str] = []
    if summary.surplus_monthly < 0:
        messages.append(
            f"You're overspending by ${abs(summary.surplus_monthly):,.0f}/mo. "
            "Consider cutting discretionary spending."
        )
    elif summary.surplus_monthly > 0:
        messages.append(f"Great! You have a surplus of ${summary.surplus_monthly:,.0f}/mo after savings.")

    if flags:
        names = ", ".join(f.label for f in flags)
        messages.append(f"{names} exceeds recommended guidelines.")

    return BudgetInsights(flags=flags, cut_suggestions=cuts, messages=messages)
