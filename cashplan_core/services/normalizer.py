from __future__ import annotations

import dataclasses
import logging
import math
from typing import Any, Dict, Mapping, Union

from cashplan_core.domain.models import (
    DEFAULT_RATE_BOUNDS,
    InvalidAssumptionError,
    PlannerAssumptions,
    RateBounds,
)

logger = logging.getLogger(__name__)

RawAssumptions = Union[PlannerAssumptions, Mapping[str, Any]]

_FIELD_ALIASES = {
    "gross_yearly": ("gross_yearly", "grossYearly"),
    "tax_rate": ("tax_rate", "taxRate"),
    "savings_rate": ("savings_rate", "savingsRate"),
    "return_rate": ("return_rate", "returnRate", "investmentReturn"),
    "starting_net_worth": ("starting_net_worth", "startingNetWorth"),
}

_NUMERIC_FIELDS = ("gross_yearly", "tax_rate", "savings_rate", "return_rate", "starting_net_worth")


def coerce_number(value: Any) -> float:
    """Missing, falsy, unparseable and NaN values all read as 0."""
    if not value:
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number):
        return 0.0
    return number


def clamp(value: float, low: float, high: float) -> float:
    if math.isnan(value):
        return low
    return max(low, min(high, value))


def _fields(raw: RawAssumptions) -> Dict[str, Any]:
    if isinstance(raw, PlannerAssumptions):
        return dataclasses.asdict(raw)
    values: Dict[str, Any] = {}
    for name, aliases in _FIELD_ALIASES.items():
        values[name] = None
        for key in aliases:
            if key in raw:
                values[name] = raw[key]
                break
    return values


def normalize_assumptions(raw: RawAssumptions, bounds: RateBounds = DEFAULT_RATE_BOUNDS) -> PlannerAssumptions:
    """
    Clamp raw assumptions into a numerically safe domain:
    - gross_yearly >= 0 and finite (non-finite income reads as 0)
    - tax_rate and savings_rate in [0, bounds.rate_cap]
    Out-of-range input is clamped silently, never rejected.
    """
    values = _fields(raw)

    gross = coerce_number(values["gross_yearly"])
    if not math.isfinite(gross):
        gross = 0.0
    gross = max(0.0, gross)

    tax_raw = coerce_number(values["tax_rate"])
    savings_raw = coerce_number(values["savings_rate"])
    tax_rate = clamp(tax_raw, 0.0, bounds.rate_cap)
    savings_rate = clamp(savings_raw, 0.0, bounds.rate_cap)

    if tax_rate != tax_raw or savings_rate != savings_raw:
        logger.debug(
            "Clamped rates to [0, %s]: tax %r -> %r, savings %r -> %r",
            bounds.rate_cap,
            tax_raw,
            tax_rate,
            savings_raw,
            savings_rate,
        )

    return PlannerAssumptions(
        gross_yearly=gross,
        tax_rate=tax_rate,
        savings_rate=savings_rate,
        return_rate=values["return_rate"],
        starting_net_worth=values["starting_net_worth"],
    )


def validate_strict(raw: RawAssumptions) -> RawAssumptions:
    """
    Opt-in check run in front of the normalizer: rejects NaN and infinite
    numeric fields instead of letting them be defaulted or clamped.
    """
    values = _fields(raw)
    for name in _NUMERIC_FIELDS:
        value = values[name]
        if value is None or isinstance(value, bool):
            continue
        try:
            number = float(value)
        except (TypeError, ValueError):
            continue
        if not math.isfinite(number):
            raise InvalidAssumptionError(f"{name} must be a finite number, got {value!r}")
    return raw
