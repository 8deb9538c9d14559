"""
Energy Alignment — command-line reading.

Builds the three profiles for one person and one date, runs the synthesis
and prints the business insights.

Run:
    python main.py --birth-date 1990-05-15
    python main.py --birth-date 1990-05-15 --date 2026-01-21 --name "Alex Doe"
    python main.py --birth-date 1990-05-15 --lat 40.71 --lon -74.01 --json
    python main.py --birth-date 1990-05-15 --forecast 14
"""
import argparse
import json
import os
import sys
from datetime import datetime

from dateutil.tz import gettz
from loguru import logger
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

import config
from alignment.engine import calculate_energy_reading
from alignment.errors import InvalidBirthDateError
from alignment.forecast import forecast
from alignment.models import Birthplace, to_dict
from alignment.profiles import parse_full_date
from alignment.weekday_table import overall_label

console = Console()


def _score_color(score: int) -> str:
    if score >= config.BAND_EXCEPTIONAL:
        return "bold green"
    if score >= config.BAND_STRONG:
        return "green"
    if score >= config.BAND_MODERATE:
        return "yellow"
    return "red"


# ── Console display ────────────────────────────────────────────────────────────

def display_reading(reading):
    combined = reading.combined
    insights = reading.insights
    color = _score_color(combined.perfect_day_score)

    table = Table(box=box.ROUNDED, show_header=False, padding=(0, 1))
    table.add_column("Key", style="dim")
    table.add_column("Value", style="bold")

    table.add_row("Perfect day", f"[{color}]{combined.perfect_day_score}/100[/{color}]")
    table.add_row("Confidence",  f"{combined.confidence_score}/100")
    table.add_row("Alignment",   f"{combined.overall_alignment}/100")
    table.add_row("Energy type", f"{combined.energy_type} - {combined.energy_description}")
    table.add_row("Day",         overall_label(reading.earth.day))
    table.add_row("", "")
    table.add_row("Top priority", insights.top_priority)
    table.add_row("Why",          insights.top_priority_why)
    table.add_row("", "")
    for label, window in (("Meetings", insights.meetings), ("Decisions", insights.decisions),
                          ("Deals", insights.deals), ("Planning", insights.planning)):
        table.add_row(label, f"{window.time}  [dim]({window.confidence}%)[/dim]")
    table.add_row("", "")
    table.add_row("Best for",    ", ".join(insights.best_for))
    table.add_row("Avoid",       ", ".join(insights.avoid))
    table.add_row("Opportunity", insights.key_opportunity)
    table.add_row("Watch out",   insights.watch_out)
    if not combined.biorhythm_available:
        table.add_row("[yellow]Note[/yellow]", "Personal cycles unavailable, neutral value used")

    console.print(Panel(
        table,
        title=f"[bold]Energy Alignment — {reading.earth.target:%A %Y-%m-%d}[/bold]",
        border_style=color.replace("bold ", ""),
        expand=False,
    ))


def display_forecast(result):
    tbl = Table(box=box.SIMPLE, padding=(0, 1))
    tbl.add_column("Date")
    tbl.add_column("Day", style="dim")
    tbl.add_column("Perfect day", justify="right")
    tbl.add_column("Confidence", justify="right")
    tbl.add_column("Energy type")

    for day in result.days:
        color = _score_color(day.perfect_day_score)
        marker = "  [yellow]![/yellow]" if day.target in result.caution_days else ""
        tbl.add_row(
            day.target.isoformat(),
            day.day_of_week,
            f"[{color}]{day.perfect_day_score}[/{color}]{marker}",
            str(day.confidence_score),
            day.energy_type,
        )

    slope = "n/a" if result.slope is None else f"{result.slope:+.2f}/day"
    mean = "n/a" if result.mean_score is None else f"{result.mean_score:.1f}"
    console.print(Panel(
        tbl,
        title=f"[bold yellow]{len(result.days)}-day outlook[/bold yellow]",
        subtitle=f"mean {mean} · trend {slope} · {len(result.best_days)} strong days",
        border_style="yellow",
        expand=False,
    ))


# ── Entry point ────────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Daily energy alignment reading")
    parser.add_argument("--birth-date", required=True, help="Birth date, e.g. 1990-05-15")
    parser.add_argument("--date", default=None, help="Target date (default: today)")
    parser.add_argument("--name", default="", help="Name used for the challenges profile")
    parser.add_argument("--lat", type=float, default=None, help="Birthplace latitude")
    parser.add_argument("--lon", type=float, default=None, help="Birthplace longitude")
    parser.add_argument("--json", action="store_true", help="Print the full reading as JSON")
    parser.add_argument("--forecast", type=int, default=0, metavar="DAYS",
                        help="Also print an outlook for the next DAYS days")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.date:
        try:
            target = parse_full_date(args.date).date()
        except (ValueError, OverflowError):
            console.print(f"[red]Invalid target date: {args.date!r}[/red]")
            return 2
    else:
        target = datetime.now(gettz(config.CLI_TIMEZONE)).date()

    birthplace = None
    if args.lat is not None and args.lon is not None:
        birthplace = Birthplace(latitude=args.lat, longitude=args.lon)

    try:
        reading = calculate_energy_reading(args.birth_date, target, birthplace, args.name)
    except InvalidBirthDateError as e:
        logger.error(str(e))
        console.print(f"[red]{e}[/red]")
        return 2

    outlook = forecast(reading.personal, target, args.forecast) if args.forecast > 0 else None

    if args.json:
        payload = {"reading": to_dict(reading)}
        if outlook is not None:
            payload["forecast"] = to_dict(outlook)
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return 0

    display_reading(reading)
    if outlook is not None:
        display_forecast(outlook)
    return 0


if __name__ == "__main__":
    # Configure logging
    logger.remove()
    logger.add(
        sys.stderr,
        level=config.LOG_LEVEL,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    os.makedirs(config.LOG_DIR, exist_ok=True)
    logger.add(
        os.path.join(config.LOG_DIR, "alignment_{time:YYYY-MM-DD}.log"),
        rotation="1 day",
        retention="30 days",
        level="DEBUG",
    )

    sys.exit(main())
