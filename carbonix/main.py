"""
main.py – CLI entry point for the CARBONIX estimation engine.

Usage
-----
Industry footprint (monthly figures, flags default to 0):
    carbonix calculate --fuel-type diesel --fuel-consumption 5000 \\
        --vehicle-count 50 --employee-commute 25000
    carbonix calculate --input request.json --json out/report.json

NGO sequestration prediction:
    carbonix predict --soil-type alluvial --trees 12500 --area 450 --rainfall 1200

Credit purchase:
    carbonix quote --credits 500
    carbonix bulk-order --credit-amount 2000 --max-price 95 --project-type mangrove

Emission factor table:
    carbonix factors

Common options:
    --log-level DEBUG
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError as SchemaError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from carbonix.config import Config, get_config
from carbonix.formatting import format_inr
from carbonix.schemas import (
    BulkOrderRequest,
    CreditQuoteRequest,
    EcosystemInput,
    EmissionsRequest,
    LogisticsInput,
    ManufacturingInput,
    OperationsInput,
    TransportInput,
)
from carbonix.service import (
    handle_bulk_order,
    handle_calculate,
    handle_factors,
    handle_predict,
    handle_quote,
)
from carbonix.validators import ValidationError

console = Console()


# ─────────────────────────────────────────────────────────────
# Rendering helpers
# ─────────────────────────────────────────────────────────────

def _print_calculation(payload: dict[str, Any]) -> None:
    """Render headline figures, the breakdown table and advisories."""
    console.print(
        Panel(
            f"[bold red]{payload['total_emissions']}[/] tons CO₂/year   "
            f"[bold]{payload['credits_needed']}[/] credits   "
            f"[bold green]{payload['estimated_cost_display']}[/] estimated cost",
            title="Carbon Footprint Calculated",
            style="blue",
        )
    )

    table = Table(title="Emission breakdown (tons CO₂/year)")
    table.add_column("Category", style="cyan")
    table.add_column("Tons", justify="right")
    breakdown = payload["breakdown"]
    for category in ("transport", "manufacturing", "operations", "logistics"):
        table.add_row(category.capitalize(), str(breakdown[category]))
    console.print(table)

    if payload["recommendations"]:
        console.print("[bold]Recommended actions:[/]")
        for action in payload["recommendations"]:
            console.print(f"  [yellow]•[/] {action}")


def _print_prediction(payload: dict[str, Any]) -> None:
    table = Table(title="AI Prediction Generated")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("CO₂ sequestered / year (tons)", str(payload["co2_per_year"]))
    table.add_row("Credits", str(payload["credits_needed"]))
    table.add_row("Recommended ecosystem", payload["recommended_ecosystem"])
    console.print(table)


def _print_validation_error(exc: ValidationError) -> None:
    console.print(f"[red]Missing data:[/] {exc.message}")
    if exc.missing:
        console.print(f"  fields: {', '.join(exc.missing)}")


# ─────────────────────────────────────────────────────────────
# Sub-commands
# ─────────────────────────────────────────────────────────────

def _emissions_request(args: argparse.Namespace) -> EmissionsRequest:
    """Build the request from --input JSON, or from individual flags."""
    if args.input:
        return EmissionsRequest.model_validate_json(Path(args.input).read_text(encoding="utf-8"))
    return EmissionsRequest(
        transport=TransportInput(
            fuel_type=args.fuel_type,
            fuel_consumption=args.fuel_consumption,
            vehicle_count=args.vehicle_count,
            employee_commute=args.employee_commute,
        ),
        manufacturing=ManufacturingInput(
            process_type=args.process_type,
            energy_consumption=args.energy_consumption,
            raw_materials=args.raw_materials,
            waste_generated=args.waste_generated,
        ),
        operations=OperationsInput(
            electricity_usage=args.electricity_usage,
            natural_gas_usage=args.natural_gas_usage,
            facility_size=args.facility_size,
            employee_count=args.employee_count,
        ),
        logistics=LogisticsInput(
            shipping_mode=args.shipping_mode,
            shipping_distance=args.shipping_distance,
            packaging_type=args.packaging_type,
            packaging_materials=args.packaging_materials,
        ),
    )


def cmd_calculate(args: argparse.Namespace, config: Config) -> int:
    try:
        request = _emissions_request(args)
    except FileNotFoundError:
        console.print(f"[red]Error:[/] File not found: {args.input}")
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        console.print(f"[red]Error:[/] Cannot read {args.input}: {exc}")
        return 1
    except SchemaError as exc:
        console.print(f"[red]Invalid input:[/] {exc}")
        return 1

    export = Path(args.json) if args.json else None
    payload = handle_calculate(request, config, export_path=export)
    _print_calculation(payload)
    if export:
        console.print(f"[green]Report saved →[/] {export}")
    return 0


def cmd_predict(args: argparse.Namespace, config: Config) -> int:
    try:
        ecosystem = EcosystemInput(
            soil_type=args.soil_type,
            trees_count=args.trees,
            area_size=args.area,
            rainfall=args.rainfall,
        )
    except SchemaError as exc:
        console.print(f"[red]Invalid input:[/] {exc}")
        return 1
    export = Path(args.json) if args.json else None
    try:
        payload = handle_predict(ecosystem, config, export_path=export)
    except ValidationError as exc:
        _print_validation_error(exc)
        return 1
    _print_prediction(payload)
    if export:
        console.print(f"[green]Report saved →[/] {export}")
    return 0


def cmd_quote(args: argparse.Namespace, config: Config) -> int:
    if args.credits < 0:
        console.print("[red]Error:[/] --credits must not be negative")
        return 1
    payload = handle_quote(CreditQuoteRequest(credits=args.credits), config)
    console.print(payload["summary"])
    return 0


def cmd_bulk_order(args: argparse.Namespace, config: Config) -> int:
    request = BulkOrderRequest(
        credit_amount=args.credit_amount,
        max_price=args.max_price,
        project_type=args.project_type,
    )
    try:
        payload = handle_bulk_order(request, config)
    except ValidationError as exc:
        _print_validation_error(exc)
        return 1
    console.print(Panel(payload["summary"], title="Bulk Order Submitted", style="green"))
    console.print(f"  Maximum budget: {format_inr(payload['max_budget'])}")
    return 0


def cmd_factors(_args: argparse.Namespace, _config: Config) -> int:
    table = Table(title="Emission factors (kg CO₂e per unit)")
    table.add_column("Factor", style="cyan")
    table.add_column("Value", justify="right")
    for name, value in handle_factors().items():
        if isinstance(value, dict):
            for key, sub in value.items():
                table.add_row(f"{name}.{key}", f"{sub:g}")
        else:
            table.add_row(name, f"{value:g}")
    console.print(table)
    return 0


# ─────────────────────────────────────────────────────────────
# Argument parsing
# ─────────────────────────────────────────────────────────────

def _add_export_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--json",
        default=None,
        metavar="PATH",
        help="Also write the result as a JSON report to PATH",
    )


def build_parser() -> argparse.ArgumentParser:
    """Construct and return the top-level argument parser."""
    root = argparse.ArgumentParser(
        prog="carbonix",
        description="CARBONIX emission, sequestration and credit estimator.",
    )
    root.add_argument(
        "--log-level",
        default=None,
        dest="log_level",
        help="Logging level (default: CARBONIX_LOG_LEVEL or INFO)",
    )
    sub = root.add_subparsers(dest="command", required=True)

    # ── calculate ──────────────────────────────────────────────
    p_calc = sub.add_parser("calculate", help="Estimate annual industry emissions and credits.")
    p_calc.add_argument("--input", default=None, help="JSON file with the four category payloads")
    p_calc.add_argument("--fuel-type", default=None, help="diesel, petrol, cng or electric")
    p_calc.add_argument("--fuel-consumption", type=float, default=0.0, help="Litres/month per vehicle")
    p_calc.add_argument("--vehicle-count", type=float, default=0.0)
    p_calc.add_argument("--employee-commute", type=float, default=0.0, help="Person-km/month")
    p_calc.add_argument("--process-type", default=None)
    p_calc.add_argument("--energy-consumption", type=float, default=0.0, help="kWh/month")
    p_calc.add_argument("--raw-materials", type=float, default=0.0, help="Tons/month")
    p_calc.add_argument("--waste-generated", type=float, default=0.0, help="Tons/month")
    p_calc.add_argument("--electricity-usage", type=float, default=0.0, help="kWh/month")
    p_calc.add_argument("--natural-gas-usage", type=float, default=0.0, help="m³/month")
    p_calc.add_argument("--facility-size", type=float, default=0.0, help="Square feet")
    p_calc.add_argument("--employee-count", type=float, default=0.0)
    p_calc.add_argument("--shipping-mode", default=None, help="truck, ship, air or rail")
    p_calc.add_argument("--shipping-distance", type=float, default=0.0, help="km/month")
    p_calc.add_argument("--packaging-type", default=None)
    p_calc.add_argument("--packaging-materials", type=float, default=0.0, help="kg/month")
    _add_export_arg(p_calc)

    # ── predict ────────────────────────────────────────────────
    p_pred = sub.add_parser("predict", help="Predict ecosystem CO₂ sequestration.")
    p_pred.add_argument("--soil-type", default=None, help="alluvial, coastal, clayey or saline")
    p_pred.add_argument("--trees", type=float, default=None, help="Number of trees")
    p_pred.add_argument("--area", type=float, default=None, help="Area in hectares")
    p_pred.add_argument("--rainfall", type=float, default=None, help="Annual rainfall in mm")
    _add_export_arg(p_pred)

    # ── quote ──────────────────────────────────────────────────
    p_quote = sub.add_parser("quote", help="Price a credit purchase.")
    p_quote.add_argument("--credits", type=int, required=True)

    # ── bulk-order ─────────────────────────────────────────────
    p_bulk = sub.add_parser("bulk-order", help="Validate a bulk credit order.")
    p_bulk.add_argument("--credit-amount", type=int, default=None)
    p_bulk.add_argument("--max-price", type=float, default=None, help="Max price per credit")
    p_bulk.add_argument("--project-type", default="any", help="mangrove, seagrass, marsh or any")

    # ── factors ────────────────────────────────────────────────
    sub.add_parser("factors", help="Print the emission factor table.")

    return root


# ─────────────────────────────────────────────────────────────
# Entry point
# ─────────────────────────────────────────────────────────────

def run(argv: list[str] | None = None) -> int:
    """Parse *argv*, dispatch to the sub-command, and return its exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = get_config(log_level=args.log_level)
    except EnvironmentError as exc:
        console.print(f"[red]Config error:[/] {exc}")
        return 1
    config.configure_logging()

    dispatch = {
        "calculate": cmd_calculate,
        "predict": cmd_predict,
        "quote": cmd_quote,
        "bulk-order": cmd_bulk_order,
        "factors": cmd_factors,
    }
    handler = dispatch.get(args.command)
    if handler is None:
        parser.print_help()
        return 1
    return handler(args, config)


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
