from __future__ import annotations

import dataclasses
from typing import Dict, List, Optional

FULL_RATE_CAP = 1.0
CAPPED_RATE_CAP = 0.9


class InvalidAssumptionError(ValueError):
    """Raised by the strict validation layer for non-finite inputs."""


@dataclasses.dataclass(frozen=True)
class RateBounds:
    rate_cap: float = FULL_RATE_CAP

    def __post_init__(self) -> None:
        if not 0.0 < self.rate_cap <= 1.0:
            raise ValueError(f"rate_cap must be in (0, 1], got {self.rate_cap}")


DEFAULT_RATE_BOUNDS = RateBounds(FULL_RATE_CAP)
CAPPED_RATE_BOUNDS = RateBounds(CAPPED_RATE_CAP)


@dataclasses.dataclass(frozen=True)
class PlannerAssumptions:
    gross_yearly: float = 0.0
    tax_rate: float = 0.0
    savings_rate: float = 0.0
    return_rate: Optional[float] = None  # carried for projections, unused here
    starting_net_worth: Optional[float] = None


@dataclasses.dataclass(frozen=True)
class BudgetItem:
    category: str
    current: float = 0.0
    planned: float = 0.0


@dataclasses.dataclass(frozen=True)
class CashflowSummary:
    gross_monthly: float
    tax_monthly: float
    net_monthly: float
    invest_monthly: float
    planned_lifestyle_monthly: float
    surplus_monthly: float
    contribution_monthly: float

    def to_dict(self) -> Dict[str, float]:
        return {
            "grossMonthly": self.gross_monthly,
            "taxMonthly": self.tax_monthly,
            "netMonthly": self.net_monthly,
            "investMonthly": self.invest_monthly,
            "plannedLifestyleMonthly": self.planned_lifestyle_monthly,
            "surplusMonthly": self.surplus_monthly,
            "contributionMonthly": self.contribution_monthly,
        }


@dataclasses.dataclass(frozen=True)
class BudgetFlag:
    category: str
    label: str
    share: float  # of net monthly pay
    guideline: float


@dataclasses.dataclass(frozen=True)
class CutSuggestion:
    category: str
    current_amount: float
    suggested_cut: float


@dataclasses.dataclass(frozen=True)
class BudgetInsights:
    flags: List[BudgetFlag]
    cut_suggestions: List[CutSuggestion]
    messages: List[str]

    def to_dict(self) -> Dict[str, list]:
        return {
            "flags": [dataclasses.asdict(f) for f in self.flags],
            "cut_suggestions": [dataclasses.asdict(c) for c in self.cut_suggestions],
            "messages": list(self.messages),
        }
