from __future__ import annotations

import math
import re
from typing import Union

_NON_NUMERIC = re.compile(r"[^0-9.\-]")


def parse_rate(raw: Union[str, float, int, None]) -> float:
    """
    Parse a rate typed by a user. Accepts "0.28", "28%", or "28" (treated as 28%).
    Anything unparseable reads as 0.
    """
    if raw is None:
        return 0.0
    if isinstance(raw, str):
        txt = raw.strip().replace("%", "")
        if not txt:
            return 0.0
        try:
            val = float(txt)
        except ValueError:
            return 0.0
    else:
        val = float(raw)
    if math.isnan(val):
        return 0.0
    return val / 100.0 if val > 1 else val


def parse_currency(raw: Union[str, float, int, None]) -> float:
    """Parse an amount such as "$120,000" or "-45.50"; unparseable reads as 0."""
    if raw is None:
        return 0.0
    if isinstance(raw, (int, float)):
        val = float(raw)
        return 0.0 if math.isnan(val) else val
    txt = _NON_NUMERIC.sub("", str(raw))
    try:
        val = float(txt)
    except ValueError:
        return 0.0
    return 0.0 if math.isnan(val) else val
