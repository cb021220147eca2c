"""CLI entry point for marketing budget recommendations."""

import argparse
import json
import sys
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .catalog import catalog_from_env, load_catalog
from .explain import (
    format_money,
    included_service_note,
    package_reasons,
    service_reason,
    strategy_notes,
    summary,
)
from .intake import parse_request
from .main import Recommender
from .models import (
    BUSINESS_TYPES,
    GOALS,
    INDUSTRIES,
    ONLINE_PRESENCE,
    TIMELINES,
    ClientRequest,
    LineItem,
    PackageRecommendation,
    Recommendation,
)
from .report import generate_report_pdf


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="marketing-recommender",
        description="Recommend a marketing package or service mix for a monthly budget.",
    )
    parser.add_argument("--budget", required=True, help="Monthly marketing budget ($)")
    parser.add_argument("--business-type", required=True, choices=BUSINESS_TYPES)
    parser.add_argument(
        "--goal",
        dest="goals",
        action="append",
        required=True,
        choices=GOALS,
        help="Marketing goal (repeat for several)",
    )
    parser.add_argument(
        "--online-presence", required=True, choices=ONLINE_PRESENCE,
    )
    parser.add_argument("--timeline", required=True, choices=TIMELINES)
    parser.add_argument("--locations", default="1", help="Number of business locations")
    parser.add_argument("--industry", default="", choices=("",) + INDUSTRIES)
    parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="JSON catalog to price against (default: RECOMMENDER_CATALOG or built-in)",
    )
    parser.add_argument("--business-name", default="", help="Name shown on the PDF report")
    parser.add_argument("--json", action="store_true", help="Print the recommendation as JSON")
    parser.add_argument("--pdf", type=Path, default=None, help="Also save a PDF report here")
    return parser


def _service_table(title: str, items: list[LineItem], request: ClientRequest, branch: str) -> Table:
    table = Table(title=title, show_lines=True, expand=True)
    table.add_column("Service", style="bold")
    table.add_column("Why we recommend this")
    table.add_column("Price", justify="right", no_wrap=True)
    for item in items:
        reason = service_reason(item.id, request, branch)
        if item.min_ad_spend:
            reason += (
                f"\n[yellow]Requires {format_money(item.min_ad_spend)}/month minimum "
                "ad spend for optimal results[/]"
            )
        table.add_row(item.name, reason, f"{format_money(item.price)}/mo")
    return table


def print_recommendation(
    console: Console,
    recommendation: Recommendation,
    request: ClientRequest,
    catalog,
) -> None:
    console.print(Panel(summary(recommendation, request, catalog), title="Recommendation"))

    if isinstance(recommendation, PackageRecommendation):
        package = recommendation.package
        body = "\n\n".join([package.description] + package_reasons(recommendation, request))
        console.print(Panel(body, title=f"[bold cyan]{package.name}[/]"))

        included = Table(title="Included Services", expand=True)
        included.add_column("Service", style="bold")
        included.add_column("Notes")
        for service in package.services:
            included.add_row(service.name, included_service_note(service.id, request))
        console.print(included)

        if recommendation.additional_services:
            console.print(
                _service_table(
                    "Recommended Additional Services",
                    recommendation.additional_services,
                    request,
                    "package",
                )
            )
    else:
        console.print(
            _service_table("Recommended Services", recommendation.services, request, "services")
        )

    breakdown = Table(title="Budget Breakdown", show_header=False)
    breakdown.add_column("Item")
    breakdown.add_column("Amount", justify="right")
    if isinstance(recommendation, PackageRecommendation):
        breakdown.add_row(recommendation.package.name, f"{format_money(recommendation.package.price)}/mo")
        if recommendation.additional_services:
            breakdown.add_row("Additional Services", f"{format_money(recommendation.service_cost)}/mo")
    else:
        breakdown.add_row("Services", f"{format_money(recommendation.service_cost)}/mo")
    if recommendation.ad_spend > 0:
        breakdown.add_row("Ad Spend", f"{format_money(recommendation.ad_spend)}/mo")
    breakdown.add_row(
        "[bold]Total Monthly Investment[/]",
        f"[bold]{format_money(recommendation.total_cost)}/mo[/]",
    )
    console.print(breakdown)

    for heading, text in strategy_notes(request):
        console.print(f"[bold]{heading}:[/] {text}")


def main(argv: list[str] | None = None):
    load_dotenv()

    args = build_parser().parse_args(argv)
    console = Console()

    try:
        catalog = load_catalog(args.catalog) if args.catalog else catalog_from_env()
        request = parse_request(
            business_type=args.business_type,
            budget=args.budget,
            goals=args.goals,
            online_presence=args.online_presence,
            timeline=args.timeline,
            locations=args.locations,
            industry=args.industry,
        )
        recommendation = Recommender(catalog).recommend(request)

        if args.json:
            console.print_json(json.dumps(recommendation.to_dict()))
        else:
            print_recommendation(console, recommendation, request, catalog)

        if args.pdf:
            with console.status("[bold cyan]Generating PDF...[/]"):
                pdf_path = generate_report_pdf(
                    recommendation, request, args.pdf, args.business_name, catalog
                )
            console.print(f"\n[bold green]Done![/] Report saved to [bold]{pdf_path}[/]\n")
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled.[/]")
        sys.exit(1)
    except Exception as e:
        console.print(f"\n[bold red]Error:[/] {e}\n")
        sys.exit(1)


if __name__ == "__main__":
    main()
