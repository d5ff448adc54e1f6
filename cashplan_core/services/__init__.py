from cashplan_core.services.budget import total_planned  # noqa: F401
from cashplan_core.services.calculator import calculate_cashflow, summarize  # noqa: F401
from cashplan_core.services.insights import compute_insights  # noqa: F401
from cashplan_core.services.normalizer import normalize_assumptions, validate_strict  # noqa: F401
from cashplan_core.services.presets import (  # noqa: F401
    PRESET_PROFILES,
    apply_preset,
    get_preset_profile,
    preset_names,
)

__all__ = [
    "PRESET_PROFILES",
    "apply_preset",
    "calculate_cashflow",
    "compute_insights",
    "get_preset_profile",
    "normalize_assumptions",
    "preset_names",
    "summarize",
    "total_planned",
    "validate_strict",
]
