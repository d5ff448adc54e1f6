from cashplan_core.domain.models import (  # noqa: F401
    CAPPED_RATE_BOUNDS,
    CAPPED_RATE_CAP,
    DEFAULT_RATE_BOUNDS,
    FULL_RATE_CAP,
    BudgetFlag,
    BudgetInsights,
    BudgetItem,
    CashflowSummary,
    CutSuggestion,
    InvalidAssumptionError,
    PlannerAssumptions,
    RateBounds,
)

__all__ = [
    "CAPPED_RATE_BOUNDS",
    "CAPPED_RATE_CAP",
    "DEFAULT_RATE_BOUNDS",
    "FULL_RATE_CAP",
    "BudgetFlag",
    "BudgetInsights",
    "BudgetItem",
    "CashflowSummary",
    "CutSuggestion",
    "InvalidAssumptionError",
    "PlannerAssumptions",
    "RateBounds",
]
