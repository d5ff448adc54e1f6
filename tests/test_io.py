import json
from pathlib import Path

import pytest

from cashplan_core.domain.models import DEFAULT_RATE_BOUNDS, InvalidAssumptionError
from cashplan_core.io.budget import load_budget
from cashplan_core.io.config import RATE_CAP_ENV, load_assumptions, load_rate_bounds
from cashplan_core.io.parsing import parse_currency, parse_rate

FIXTURE = Path(__file__).parent / "data" / "budget.csv"


@pytest.mark.parametrize(
    "raw,expected",
    [("0.28", 0.28), ("28%", 0.28), ("28", 0.28), (" 7.5 % ", 0.075), ("", 0.0), ("abc", 0.0), (None, 0.0), (35, 0.35)],
)
def test_parse_rate(raw, expected):
    assert parse_rate(raw) == pytest.approx(expected)


@pytest.mark.parametrize(
    "raw,expected",
    [("$120,000", 120000.0), ("-45.50", -45.5), ("USD 1 200", 1200.0), ("n/a", 0.0), (float("nan"), 0.0), (99, 99.0)],
)
def test_parse_currency(raw, expected):
    assert parse_currency(raw) == expected


def test_load_budget_fixture():
    items = load_budget(FIXTURE)
    assert [i.category for i in items] == ["rent", "groceries", "eating_out", "shopping", "travel"]
    assert sum(i.planned for i in items) == 3500.0
    assert items[0].current == 2100.0


def test_load_budget_blank_and_formatted_cells(tmp_path: Path):
    path = tmp_path / "budget.csv"
    path.write_text('category,planned\nrent,"$1,200"\nfun,\n')
    items = load_budget(path)
    assert [(i.category, i.planned, i.current) for i in items] == [("rent", 1200.0, 0.0), ("fun", 0.0, 0.0)]


def test_load_budget_errors(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_budget(tmp_path / "missing.csv")
    path = tmp_path / "bad.csv"
    path.write_text("category,current\nrent,100\n")
    with pytest.raises(ValueError, match="planned"):
        load_budget(path)


def test_load_assumptions_permissive_and_strict(tmp_path: Path):
    path = tmp_path / "assumptions.json"
    path.write_text(json.dumps({"grossYearly": 90000, "taxRate": float("nan")}))

    raw = load_assumptions(path)
    assert raw["grossYearly"] == 90000

    with pytest.raises(InvalidAssumptionError):
        load_assumptions(path, strict=True)


def test_load_assumptions_strict_rejects_overflowing_numbers(tmp_path: Path):
    path = tmp_path / "assumptions.json"
    path.write_text('{"grossYearly": 1e999}')
    with pytest.raises(InvalidAssumptionError):
        load_assumptions(path, strict=True)


def test_load_assumptions_requires_object(tmp_path: Path):
    path = tmp_path / "assumptions.json"
    path.write_text("[1, 2]")
    with pytest.raises(ValueError):
        load_assumptions(path)


def test_load_rate_bounds_sources(tmp_path: Path, monkeypatch):
    monkeypatch.delenv(RATE_CAP_ENV, raising=False)
    assert load_rate_bounds() == DEFAULT_RATE_BOUNDS

    monkeypatch.setenv(RATE_CAP_ENV, "0.9")
    assert load_rate_bounds().rate_cap == 0.9

    path = tmp_path / "bounds.json"
    path.write_text(json.dumps({"rate_cap": 0.8}))
    assert load_rate_bounds(path).rate_cap == 0.8


@pytest.mark.parametrize("content", ['{"rate_cap": null}', "[0.9]", '{"rate_cap": "0.9"}', '{"rate_cap": true}'])
def test_load_rate_bounds_rejects_malformed_file(tmp_path: Path, content: str):
    path = tmp_path / "bounds.json"
    path.write_text(content)
    with pytest.raises(ValueError):
        load_rate_bounds(path)
