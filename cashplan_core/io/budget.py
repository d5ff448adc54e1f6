from __future__ import annotations

from pathlib import Path
from typing import List

import pandas as pd

from cashplan_core.domain.models import BudgetItem
from cashplan_core.io.parsing import parse_currency


REQUIRED_COLUMNS = {"category", "planned"}


def load_budget(csv_path: str | Path) -> List[BudgetItem]:
    path = Path(csv_path)
    if not path.exists():
        raise FileNotFoundError(path)

    df = pd.read_csv(path)
    missing = REQUIRED_COLUMNS - set(df.columns)
    if missing:
        raise ValueError(f"Missing columns in budget CSV: {missing}")

    if "current" not in df.columns:
        df["current"] = 0.0
    df["category"] = df["category"].fillna("").astype(str).str.strip()
    df["planned"] = df["planned"].map(parse_currency)
    df["current"] = df["current"].map(parse_currency)

    items: List[BudgetItem] = []
    for _, row in df.iterrows():
        items.append(
            BudgetItem(
                category=row["category"],
                current=float(row["current"]),
                planned=float(row["planned"]),
            )
        )
    return items
