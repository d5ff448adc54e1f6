from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from cashplan_core.domain.models import BudgetItem, CashflowSummary, InvalidAssumptionError, RateBounds
from cashplan_core.io import budget as budget_io
from cashplan_core.io import config as config_io
from cashplan_core.io.parsing import parse_currency, parse_rate
from cashplan_core.services import calculator, insights as insights_service
from cashplan_core.services import normalizer, presets

app = typer.Typer(help="Cashflow planner CLI: monthly breakdowns from income, rates and a budget.")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log clamping and aggregation details")):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _to_json(payload) -> str:
    try:
        return json.dumps(payload, indent=2, allow_nan=False)
    except ValueError as exc:
        raise typer.BadParameter("Result has non-finite values; check --planned and the budget amounts") from exc


def _save_json(path: Path, payload):
    text = _to_json(payload)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        f.write(text)


def _emit(payload: dict, out: Optional[Path], label: str) -> None:
    if out:
        _save_json(out, payload)
        typer.echo(f"{label} written to {out}")
    else:
        typer.echo(_to_json(payload))


def _resolve_bounds(rate_cap: Optional[float], bounds_config: Optional[Path]) -> RateBounds:
    if rate_cap is not None:
        return RateBounds(rate_cap=rate_cap)
    return config_io.load_rate_bounds(bounds_config)


def _raw_assumptions(
    assumptions: Optional[Path],
    gross: Optional[str],
    tax_rate: Optional[str],
    savings_rate: Optional[str],
    strict: bool,
) -> Dict[str, Any]:
    raw: Dict[str, Any] = {}
    if assumptions:
        raw.update(config_io.load_assumptions(assumptions, strict=strict))
    # typed overrides win over file values
    if gross is not None:
        raw.pop("grossYearly", None)
        raw["gross_yearly"] = parse_currency(gross)
    if tax_rate is not None:
        raw.pop("taxRate", None)
        raw["tax_rate"] = parse_rate(tax_rate)
    if savings_rate is not None:
        raw.pop("savingsRate", None)
        raw["savings_rate"] = parse_rate(savings_rate)
    if strict:
        normalizer.validate_strict(raw)
    return raw


def _build(
    assumptions: Optional[Path],
    budget: Optional[Path],
    planned: Optional[float],
    preset: Optional[str],
    gross: Optional[str],
    tax_rate: Optional[str],
    savings_rate: Optional[str],
    rate_cap: Optional[float],
    bounds_config: Optional[Path],
    strict: bool,
) -> Tuple[CashflowSummary, List[BudgetItem]]:
    try:
        bounds = _resolve_bounds(rate_cap, bounds_config)
        raw = _raw_assumptions(assumptions, gross, tax_rate, savings_rate, strict)
        normalized = normalizer.normalize_assumptions(raw, bounds)
        if preset:
            normalized = presets.apply_preset(normalized, preset)
        items = budget_io.load_budget(budget) if budget else []
    except (InvalidAssumptionError, KeyError, ValueError, FileNotFoundError) as exc:
        raise typer.BadParameter(str(exc)) from exc

    if strict and planned is not None and not math.isfinite(planned):
        raise typer.BadParameter(f"planned must be a finite number, got {planned!r}")

    if planned is not None:
        result = calculator.calculate_cashflow(normalized, planned, bounds)
    else:
        result = calculator.calculate_cashflow(normalized, items, bounds)
    return result, items


@app.command()
def summary(
    assumptions: Optional[Path] = typer.Option(None, help="JSON file with grossYearly, taxRate, savingsRate, ..."),
    budget: Optional[Path] = typer.Option(None, help="CSV budget with category,current,planned"),
    planned: Optional[float] = typer.Option(None, help="Planned lifestyle spend per month (overrides --budget)"),
    preset: Optional[str] = typer.Option(None, help="Preset profile: conservative|standard|aggressive"),
    gross: Optional[str] = typer.Option(None, help="Gross yearly income, e.g. '$120,000'"),
    tax_rate: Optional[str] = typer.Option(None, help="Tax rate, e.g. 0.28 or 28%"),
    savings_rate: Optional[str] = typer.Option(None, help="Savings rate, e.g. 0.25 or 25%"),
    rate_cap: Optional[float] = typer.Option(None, help="Upper bound for tax/savings rates (default 1.0)"),
    bounds_config: Optional[Path] = typer.Option(None, help="JSON file with rate_cap"),
    strict: bool = typer.Option(False, help="Reject NaN/Infinity inputs instead of clamping"),
    out: Optional[Path] = typer.Option(None, help="Output path for summary JSON"),
):
    """Compute the monthly cashflow summary."""
    result, _ = _build(
        assumptions, budget, planned, preset, gross, tax_rate, savings_rate, rate_cap, bounds_config, strict
    )
    _emit(result.to_dict(), out, "Summary")


@app.command()
def insights(
    assumptions: Optional[Path] = typer.Option(None, help="JSON file with grossYearly, taxRate, savingsRate, ..."),
    budget: Optional[Path] = typer.Option(None, help="CSV budget with category,current,planned"),
    preset: Optional[str] = typer.Option(None, help="Preset profile: conservative|standard|aggressive"),
    gross: Optional[str] = typer.Option(None, help="Gross yearly income, e.g. '$120,000'"),
    tax_rate: Optional[str] = typer.Option(None, help="Tax rate, e.g. 0.28 or 28%"),
    savings_rate: Optional[str] = typer.Option(None, help="Savings rate, e.g. 0.25 or 25%"),
    rate_cap: Optional[float] = typer.Option(None, help="Upper bound for tax/savings rates (default 1.0)"),
    bounds_config: Optional[Path] = typer.Option(None, help="JSON file with rate_cap"),
    strict: bool = typer.Option(False, help="Reject NaN/Infinity inputs instead of clamping"),
    out: Optional[Path] = typer.Option(None, help="Output path for insights JSON"),
):
    """Summary plus guideline flags and deficit cut suggestions for a budget."""
    result, items = _build(
        assumptions, budget, None, preset, gross, tax_rate, savings_rate, rate_cap, bounds_config, strict
    )
    found = insights_service.compute_insights(items, result)
    payload = {"summary": result.to_dict(), "insights": found.to_dict()}
    _emit(payload, out, "Insights")


@app.command("presets")
def list_presets():
    """Show the preset assumption profiles."""
    console = Console()
    table = Table(title="Preset profiles")
    table.add_column("Profile", style="cyan")
    table.add_column("Tax rate", justify="right")
    table.add_column("Savings rate", justify="right")
    table.add_column("Return rate", justify="right")
    for name in presets.preset_names():
        profile = presets.get_preset_profile(name)
        table.add_row(
            name,
            f"{profile['tax_rate'] * 100:.0f}%",
            f"{profile['savings_rate'] * 100:.0f}%",
            f"{profile['return_rate'] * 100:.0f}%",
        )
    console.print(table)


if __name__ == "__main__":
    app()
