from __future__ import annotations

import dataclasses
from types import MappingProxyType
from typing import List, Mapping, Optional

from cashplan_core.domain.models import PlannerAssumptions

PRESET_PROFILES: Mapping[str, Mapping[str, float]] = MappingProxyType(
    {
        "conservative": MappingProxyType({"tax_rate": 0.30, "savings_rate": 0.15, "return_rate": 0.06}),
        "standard": MappingProxyType({"tax_rate": 0.28, "savings_rate": 0.25, "return_rate": 0.08}),
        "aggressive": MappingProxyType({"tax_rate": 0.25, "savings_rate": 0.35, "return_rate": 0.10}),
    }
)


def preset_names() -> List[str]:
    return list(PRESET_PROFILES)


def get_preset_profile(name: str) -> Optional[Mapping[str, float]]:
    return PRESET_PROFILES.get(name.strip().lower())


def apply_preset(assumptions: PlannerAssumptions, name: str) -> PlannerAssumptions:
    """Overlay a preset's rates on the given assumptions."""
    profile = get_preset_profile(name)
    if profile is None:
        raise KeyError(f"Unknown preset profile: {name!r}")
    return dataclasses.replace(assumptions, **profile)
