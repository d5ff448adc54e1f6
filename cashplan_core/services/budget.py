from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Union

from cashplan_core.domain.models import BudgetItem
from cashplan_core.services.normalizer import coerce_number

logger = logging.getLogger(__name__)

BudgetLike = Union[BudgetItem, Mapping[str, Any]]


def planned_amount(item: BudgetLike) -> float:
    if isinstance(item, BudgetItem):
        return coerce_number(item.planned)
    return coerce_number(item.get("planned"))


def category_of(item: BudgetLike) -> str:
    if isinstance(item, BudgetItem):
        return item.category
    return str(item.get("category", ""))


def total_planned(items: Iterable[BudgetLike]) -> float:
    """Planned lifestyle spend: sum of `planned` over the items, 0 when empty."""
    total = 0.0
    count = 0
    for item in items:
        total += planned_amount(item)
        count += 1
    logger.debug("Aggregated %d budget items to %.2f planned", count, total)
    return total
