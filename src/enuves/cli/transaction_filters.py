"""Shared transaction filter options for listing and exporting."""

from datetime import date
from typing import Optional

import click

from enuves.domain.entities import TransactionFilters
from enuves.utils.amount_parser import parse_amount
from enuves.utils.date_parser import get_date_range, parse_date

PERIODS = ("this-month", "last-month", "this-year", "last-year")

_FILTER_OPTIONS = [
    click.option("--start-date", help="Start date (DD/MM/YYYY, YYYY-MM-DD or relative like 'today')"),
    click.option("--end-date", help="End date (DD/MM/YYYY, YYYY-MM-DD or relative like 'today')"),
    click.option("--this-month", is_flag=True, help="Only the current month"),
    click.option("--last-month", is_flag=True, help="Only the previous month"),
    click.option("--this-year", is_flag=True, help="Only the current year"),
    click.option("--last-year", is_flag=True, help="Only the previous year"),
    click.option("--category", "category_id", type=int, help="Category ID"),
    click.option("--account", "account_id", type=int, help="Account ID"),
    click.option("--description", help="Text contained in the description"),
    click.option("--min-value", help="Minimum value (e.g., 100 or 1.234,56)"),
    click.option("--max-value", help="Maximum value (e.g., 100 or 1.234,56)"),
]


def transaction_filter_options(command):
    """Decorate a command with the transaction filter options."""
    for option in reversed(_FILTER_OPTIONS):
        command = option(command)
    return command


def _fail(ctx: click.Context, message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    ctx.exit(1)


def resolve_date_range(
    ctx: click.Context,
    start_date: Optional[str],
    end_date: Optional[str],
    periods: list[str],
) -> tuple[Optional[date], Optional[date]]:
    """Resolve the selected period flag or the explicit dates into a date range.

    At most one period may be selected, and a period excludes explicit dates.
    """
    if len(periods) > 1:
        _fail(ctx, f"Only one period option ({', '.join('--' + p for p in PERIODS)}) can be used at a time.")
    if periods and (start_date or end_date):
        _fail(ctx, f"--{periods[0]} cannot be combined with --start-date or --end-date.")

    if periods:
        return get_date_range(periods[0])

    bounds = []
    for label, raw in (("start", start_date), ("end", end_date)):
        if not raw:
            bounds.append(None)
            continue
        try:
            bounds.append(parse_date(raw))
        except ValueError as e:
            _fail(ctx, f"Invalid {label} date: {e}")
    return bounds[0], bounds[1]


def build_transaction_filters(ctx: click.Context, **options) -> TransactionFilters:
    """Turn the raw filter option values into TransactionFilters, or exit on bad input."""
    start, end = resolve_date_range(
        ctx,
        options.get("start_date"),
        options.get("end_date"),
        [p for p in PERIODS if options.get(p.replace("-", "_"))],
    )

    values = {}
    for name in ("min_value", "max_value"):
        raw = options.get(name)
        if raw is None:
            values[name] = None
            continue
        try:
            values[name] = parse_amount(raw)
        except ValueError as e:
            _fail(ctx, f"Invalid {name.replace('_', ' ')}: {e}")

    return TransactionFilters(
        start_date=start,
        end_date=end,
        category_id=options.get("category_id"),
        account_id=options.get("account_id"),
        description=options.get("description") or None,
        min_value=values["min_value"],
        max_value=values["max_value"],
    )
