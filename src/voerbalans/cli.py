"""Command-line interface for requirement, ration, quality and farm balance calculations."""

import argparse
import json
import sys
from dataclasses import asdict, replace
from datetime import date
from enum import Enum
from pathlib import Path

from voerbalans.animal import (
    PhysiologicalState,
    calculate_requirements,
    explain_requirements,
    requirement_from_profile,
)
from voerbalans.core import (
    CatalogError,
    InvalidInputError,
    configure_logging,
    format_mass,
    format_percent,
    format_vem,
    settings,
)
from voerbalans.core.standards import STANDARD_CONCENTRATE, STRUCTURE, QualityTier
from voerbalans.data import load_catalog
from voerbalans.farm import AnnualFarmPlan, calculate_annual_balance
from voerbalans.feeds import FeedInput, assess_feed_quality
from voerbalans.ration import (
    balance_ration,
    calculate_base_milk_support,
    calculate_concentrate_cost,
    calculate_concentrate_gap,
)

# Exit status for invalid input or catalog
EXIT_INVALID = 2


def _json_default(obj):
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, date):
        return obj.isoformat()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, default=_json_default))


def _state_from_args(args: argparse.Namespace) -> PhysiologicalState:
    return PhysiologicalState(
        weight_kg=args.weight,
        parity=args.parity,
        days_in_milk=args.dim,
        days_pregnant=args.pregnant,
        milk_yield_kg=args.milk,
        fat_percent=args.fat,
        protein_percent=args.protein,
        grazing=args.grazing,
        lactating=not args.dry,
    )


def parse_feed_arg(value: str) -> FeedInput:
    """Parse NAME=KG or NAME=KG@DS% into a FeedInput."""
    name, sep, amount = value.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=KG[@DS%], got {value!r}")
    amount, _, dm = amount.partition("@")
    try:
        return FeedInput(
            feed_name=name,
            amount_kg=float(amount),
            dry_matter_percent=float(dm) if dm else None,
        )
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid amount in {value!r}") from e


# =============================================================================
# Commands
# =============================================================================


def cmd_requirement(args: argparse.Namespace) -> None:
    """Daily requirement of one cow or a catalog profile."""
    if args.profile:
        catalog = load_catalog(args.catalog)
        profile = catalog.get_profile(args.profile)
        if profile is None:
            raise InvalidInputError("profile", args.profile, "not in catalog")
        result = requirement_from_profile(profile, args.grazing)
    else:
        result = calculate_requirements(_state_from_args(args))

    if args.json:
        _print_json(asdict(result))
        return

    print("=" * 50)
    print(f"Daily Requirement ({result.model} model)")
    print("=" * 50)
    for line in explain_requirements(result):
        print(f"  {line}")


def _settings_concentrate():
    return replace(
        STANDARD_CONCENTRATE,
        vem_per_kg_ds=settings.concentrate_vem_per_kg_ds,
        price_per_ton_ds=settings.concentrate_price_per_ton_ds,
    )


def cmd_ration(args: argparse.Namespace) -> None:
    """Balance a ration against a cow or a catalog profile."""
    catalog = load_catalog(args.catalog)
    if args.profile:
        animal = catalog.get_profile(args.profile)
        if animal is None and not catalog.is_empty:
            raise InvalidInputError("profile", args.profile, "not in catalog")
    else:
        animal = _state_from_args(args)

    concentrate = _settings_concentrate()
    structure = replace(STRUCTURE, minimum_per_kg_ds=settings.structure_minimum_per_kg_ds)
    result = None
    if animal:
        result = balance_ration(args.feed or [], catalog.feeds, animal, grazing=args.grazing, structure=structure)
    if result is None:
        print("No feed catalog loaded.", file=sys.stderr)
        return

    gap = calculate_concentrate_gap(
        result.supply,
        result.requirement.vem,
        result.requirement.dve,
        concentrate=concentrate,
        structure=structure,
    )
    cost = calculate_concentrate_cost(gap.concentrate_kg_ds, price_per_ton_ds=concentrate.price_per_ton_ds)
    base = None
    if isinstance(animal, PhysiologicalState):
        base = calculate_base_milk_support(result.supply, animal.weight_kg, structure=structure)

    if args.json:
        _print_json(
            {
                "supply": asdict(result.supply),
                "requirement": asdict(result.requirement),
                "balance": asdict(result.balance),
                "base_milk_support": asdict(base) if base is not None else None,
                "concentrate_gap": asdict(gap),
                "concentrate_cost": asdict(cost),
            }
        )
        return

    balance = result.balance
    print("=" * 70)
    print(f"Ration Balance ({result.supply.dry_matter_kg:.1f} kg DS per cow per day)")
    print("=" * 70)
    print(f"{'Nutrient':<16} {'Supply':>12} {'Requirement':>12} {'Gap':>10} {'Coverage':>9}  {'Status'}")
    print("-" * 70)
    for nb in (balance.vem, balance.dve, balance.oeb, balance.structure, balance.dry_matter):
        if nb is None:
            continue
        print(
            f"{nb.nutrient:<16} {nb.supply:>12,.1f} {nb.requirement:>12,.1f} {nb.gap:>+10,.1f}"
            f" {format_percent(nb.coverage_percent):>9}  {nb.status.value}"
        )

    if balance.intake:
        print(f"\nIntake: {format_percent(balance.intake.utilization_percent)} of capacity - {balance.intake.message}")
    print(f"Target met (VEM and DVE >= 95%): {'yes' if balance.is_target_met else 'no'}")
    if base is not None:
        print(f"Base ration supports {base.milk_support_kg:.1f} kg FPCM after maintenance")

    if gap.limiting_nutrient != "none":
        print("\n--- Concentrate Gap ---")
        print(f"Limiting nutrient: {gap.limiting_nutrient.upper()}")
        print(f"Concentrate needed: {gap.concentrate_kg_ds:.1f} kg DS")
        print(f"Roughage displaced: {gap.roughage_displaced_kg_ds:.1f} kg DS")
        print(f"Structure after substitution: {gap.final_sw_per_kg_ds:.2f} SW/kg DS ({gap.structure_status.value})")
        if gap.straw_needed_kg_ds > 0:
            print(f"Straw to restore structure: {gap.straw_needed_kg_ds:.1f} kg DS")
        print(
            f"Concentrate cost: EUR {cost.daily_cost_per_cow:.2f} per cow per day,"
            f" EUR {cost.annual_cost_total:,.0f} per year"
        )


def cmd_quality(args: argparse.Namespace) -> None:
    """Assess a roughage lot from its lab values."""
    assessment = assess_feed_quality(args.name, args.vem, args.oeb, args.dve)

    if args.json:
        _print_json({**asdict(assessment), "badge": assessment.badge})
        return

    print(f"{args.name}: {assessment.badge} ({assessment.feed_type})")
    for warning in assessment.warnings:
        print(f"  ! {warning}")
    for recommendation in assessment.recommendations:
        print(f"  > {recommendation}")
    if assessment.impact_estimate:
        print(f"  Estimated impact: {assessment.impact_estimate} per cow per day")


def cmd_farm(args: argparse.Namespace) -> None:
    """Annual roughage and energy balance of a crop plan."""
    plan = AnnualFarmPlan(
        hectares_maize=args.maize_ha,
        hectares_grass=args.grass_ha,
        yield_maize_ton_ds_ha=args.maize_yield,
        yield_grass_ton_ds_ha=args.grass_yield,
        milking_cows=args.cows,
        cow_daily_vem=args.cow_vem,
        quality_tier=QualityTier(args.tier),
        young_stock_junior=args.junior,
        young_stock_senior=args.senior,
    )
    result = calculate_annual_balance(plan, concentrate=_settings_concentrate())

    if args.json:
        data = asdict(result)
        data["supply"]["total_kg_ds"] = result.supply.total_kg_ds
        data["demand"]["total"] = result.demand.total
        data["vem_supply"]["total_vem"] = result.vem_supply.total_vem
        data["vem_demand"]["total"] = result.vem_demand.total
        _print_json(data)
        return

    supply, demand, deficit = result.supply, result.demand, result.deficit
    print("=" * 60)
    print(f"Annual Roughage Balance ({plan.quality_tier.value} quality)")
    print("=" * 60)
    print(f"Supply:  maize {format_mass(supply.maize_kg_ds)}, grass {format_mass(supply.grass_kg_ds)}")
    print(f"         total {format_mass(supply.total_kg_ds)}")
    for line in demand.breakdown:
        print(f"Demand:  {line.herd_class.value:<20} {line.count:>4} x {line.daily_per_animal:g} kg DS/day")
    print(f"         total {format_mass(demand.total)}")
    print(f"Covered: {format_percent(deficit.percentage_covered, 0)}")

    if deficit.is_shortage:
        print(f"\nShortage of {deficit.deficit_tons:,.1f} t DS")
    else:
        print(f"\nSurplus of {-deficit.deficit_tons:,.1f} t DS")
    if result.depletion_date:
        print(f"Stocks last until: {result.depletion_date.isoformat()}")

    rec = result.recommendation
    if rec:
        print(f"\nRecommended purchase: {rec.product}")
        print(f"  {rec.reason}")
        print(f"  {rec.quantity_tons} t product ({rec.quantity_loads} loads)")

    vem_gap = result.vem_gap
    print("\n--- Energy (VEM) ---")
    print(f"Supply: {format_vem(result.vem_supply.total_vem)}")
    print(f"Demand: {format_vem(result.vem_demand.total)}")
    print(
        f"Self-sufficiency: {format_percent(vem_gap.self_sufficiency_percent, 0)} ({vem_gap.self_sufficiency_rating})"
    )
    if vem_gap.is_shortage:
        print(f"Concentrate needed: {vem_gap.concentrate_tons_needed:,.1f} t ({vem_gap.truckloads_needed} truckloads)")


# -----------------------------------------------------------------------------
# Main
# -----------------------------------------------------------------------------


def _add_cow_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--profile", help="Catalog profile name (instead of cow data)")
    parser.add_argument("--weight", type=float, default=650.0, help="Body weight in kg (default: 650)")
    parser.add_argument("--parity", type=int, default=3, help="Lactation number (default: 3)")
    parser.add_argument("--dim", type=int, default=100, help="Days in milk (default: 100)")
    parser.add_argument("--pregnant", type=int, default=0, help="Days pregnant (default: 0)")
    parser.add_argument("--milk", type=float, default=30.0, help="Milk yield in kg/day (default: 30)")
    parser.add_argument("--fat", type=float, default=4.4, help="Milk fat %% (default: 4.4)")
    parser.add_argument("--protein", type=float, default=3.5, help="Milk protein %% (default: 3.5)")
    parser.add_argument("--dry", action="store_true", help="Dry (non-lactating) cow")
    parser.add_argument("--grazing", action="store_true", help="Cow grazes (adds activity energy)")
    parser.add_argument("--catalog", type=Path, default=None, help="Catalog JSON file")
    parser.add_argument("--json", action="store_true", help="Output as JSON")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="voerbalans",
        description="Dairy cow nutrient requirements and feed balance",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  voerbalans requirement --milk 41 --fat 4.6 --protein 3.75     Requirement of one cow
  voerbalans requirement --profile heifer_12m                   Requirement of a profile
  voerbalans ration --feed grass_silage=15 --feed maize_silage=10
  voerbalans quality "Grass silage 1st cut" --vem 880 --oeb 45  Assess a silage lot
  voerbalans farm --maize-ha 8 --grass-ha 32 --cows 80          Annual roughage balance
""",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    requirement_parser = subparsers.add_parser("requirement", help="Daily VEM/DVE requirement")
    _add_cow_arguments(requirement_parser)

    ration_parser = subparsers.add_parser("ration", help="Balance a ration against a requirement")
    _add_cow_arguments(ration_parser)
    ration_parser.add_argument(
        "--feed",
        action="append",
        type=parse_feed_arg,
        metavar="NAME=KG[@DS%]",
        help="Feed amount in the feed's basis (repeatable)",
    )

    quality_parser = subparsers.add_parser("quality", help="Assess roughage quality")
    quality_parser.add_argument("name", help="Product name, e.g. 'Grass silage 2025'")
    quality_parser.add_argument("--vem", type=float, required=True, help="VEM per kg DS")
    quality_parser.add_argument("--oeb", type=float, required=True, help="OEB g per kg DS")
    quality_parser.add_argument("--dve", type=float, default=None, help="DVE g per kg DS")
    quality_parser.add_argument("--json", action="store_true", help="Output as JSON")

    farm_parser = subparsers.add_parser("farm", help="Annual farm roughage balance")
    farm_parser.add_argument("--maize-ha", type=float, default=0.0, help="Hectares of maize")
    farm_parser.add_argument("--grass-ha", type=float, default=0.0, help="Hectares of grass")
    farm_parser.add_argument("--maize-yield", type=float, default=12.0, help="Maize t DS/ha (default: 12)")
    farm_parser.add_argument("--grass-yield", type=float, default=11.0, help="Grass t DS/ha (default: 11)")
    farm_parser.add_argument("--tier", choices=[t.value for t in QualityTier], default="average")
    farm_parser.add_argument("--cows", type=int, default=0, help="Milking cows")
    farm_parser.add_argument("--junior", type=int, default=0, help="Young stock < 1 year")
    farm_parser.add_argument("--senior", type=int, default=0, help="Young stock > 1 year")
    farm_parser.add_argument("--cow-vem", type=float, default=22000.0, help="VEM/day per cow (default: 22000)")
    farm_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


def cli_main(argv: list[str] | None = None) -> int:
    """Main CLI entry point. Returns the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging("DEBUG" if args.verbose else None)

    if hasattr(args, "catalog") and args.catalog is None:
        args.catalog = settings.catalog_path

    commands = {
        "requirement": cmd_requirement,
        "ration": cmd_ration,
        "quality": cmd_quality,
        "farm": cmd_farm,
    }
    command = commands.get(args.command)
    if command is None:
        parser.print_help()
        return 0

    try:
        command(args)
    except (InvalidInputError, CatalogError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID
    return 0


def cli() -> None:
    """CLI entry point."""
    sys.exit(cli_main())


if __name__ == "__main__":
    cli()
