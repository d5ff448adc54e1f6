from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from cashplan_core.domain.models import DEFAULT_RATE_BOUNDS, FULL_RATE_CAP, InvalidAssumptionError, RateBounds
from cashplan_core.services.normalizer import validate_strict

logger = logging.getLogger(__name__)

RATE_CAP_ENV = "CASHPLAN_RATE_CAP"


def load_assumptions(path: str | Path, strict: bool = False) -> Dict[str, Any]:
    """
    Read raw planner assumptions from a JSON object. The result is left
    un-normalized; pass it to normalize_assumptions or calculate_cashflow.
    With strict=True, NaN/Infinity values are rejected.
    """
    data = _read_json(path, strict=strict)
    if not isinstance(data, dict):
        raise ValueError(f"Assumptions file must contain a JSON object: {path}")
    if strict:
        validate_strict(data)
    return data


def load_rate_bounds(path: Optional[str | Path] = None) -> RateBounds:
    if path is not None:
        data = _read_json(path)
        if not isinstance(data, dict):
            raise ValueError(f"Bounds file must contain a JSON object: {path}")
        cap = data.get("rate_cap", FULL_RATE_CAP)
        if isinstance(cap, bool) or not isinstance(cap, (int, float)):
            raise ValueError(f"rate_cap must be a number, got {cap!r}")
        return RateBounds(rate_cap=float(cap))

    env_cap = os.environ.get(RATE_CAP_ENV)
    if env_cap:
        logger.debug("Using rate cap %s from %s", env_cap, RATE_CAP_ENV)
        return RateBounds(rate_cap=float(env_cap))
    return DEFAULT_RATE_BOUNDS


def _reject_constant(name: str) -> float:
    raise InvalidAssumptionError(f"Non-finite value {name} is not allowed")


def _read_json(path: str | Path, strict: bool = False) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        if strict:
            return json.load(f, parse_constant=_reject_constant)
        return json.load(f)
