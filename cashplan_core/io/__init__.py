from cashplan_core.io.budget import load_budget  # noqa: F401
from cashplan_core.io.config import load_assumptions, load_rate_bounds  # noqa: F401
from cashplan_core.io.parsing import parse_currency, parse_rate  # noqa: F401

__all__ = ["load_budget", "load_assumptions", "load_rate_bounds", "parse_currency", "parse_rate"]
