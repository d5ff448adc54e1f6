from __future__ import annotations

import logging
import numbers
from typing import Iterable, Union

from cashplan_core.domain.models import DEFAULT_RATE_BOUNDS, CashflowSummary, PlannerAssumptions, RateBounds
from cashplan_core.services import budget as budget_service
from cashplan_core.services.normalizer import RawAssumptions, normalize_assumptions

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12

PlannedSpend = Union[float, Iterable[budget_service.BudgetLike]]


def summarize(assumptions: PlannerAssumptions, planned_lifestyle_monthly: float) -> CashflowSummary:
    """
    Monthly breakdown from already-normalized assumptions.
    The planned spend is used as given; a negative value propagates.
    """
    gross_monthly = assumptions.gross_yearly / MONTHS_PER_YEAR
    tax_monthly = gross_monthly * assumptions.tax_rate
    net_monthly = gross_monthly - tax_monthly
    invest_monthly = net_monthly * assumptions.savings_rate

    surplus_monthly = net_monthly - invest_monthly - planned_lifestyle_monthly
    # a deficit never eats into the rate-implied investment
    contribution_monthly = invest_monthly + max(0.0, surplus_monthly)

    return CashflowSummary(
        gross_monthly=gross_monthly,
        tax_monthly=tax_monthly,
        net_monthly=net_monthly,
        invest_monthly=invest_monthly,
        planned_lifestyle_monthly=planned_lifestyle_monthly,
        surplus_monthly=surplus_monthly,
        contribution_monthly=contribution_monthly,
    )


def calculate_cashflow(
    raw: RawAssumptions,
    planned: PlannedSpend,
    bounds: RateBounds = DEFAULT_RATE_BOUNDS,
) -> CashflowSummary:
    """
    Normalize raw assumptions, then summarize.
    `planned` is either the planned lifestyle total or the budget items to sum.
    """
    assumptions = normalize_assumptions(raw, bounds)
    if isinstance(planned, numbers.Real):
        lifestyle = float(planned)
    else:
        lifestyle = budget_service.total_planned(planned)

    summary = summarize(assumptions, lifestyle)
    logger.debug(
        "Cashflow: net %.2f, invest %.2f, lifestyle %.2f, surplus %.2f",
        summary.net_monthly,
        summary.invest_monthly,
        summary.planned_lifestyle_monthly,
        summary.surplus_monthly,
    )
    return summary
