"""Ledger CSV export command."""

from pathlib import Path

import click
from enuves.domain.company import CompanyService
from enuves.domain.csv_export import CSVExportService

from enuves.cli.company_resolution import resolve_company_or_exit
from enuves.cli.error_handling import exit_on_result_error
from enuves.cli.transaction_filters import build_transaction_filters, transaction_filter_options


@click.command("export")
@click.option("--company", required=True, help="Company name or ID")
@transaction_filter_options
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Write the CSV to this file instead of stdout")
@click.pass_context
def export_csv(ctx, company: str, output: str | None, **filter_options):
    """Export transactions as a ledger CSV for the ERP.

    Every category and account in the selection needs an integration code;
    otherwise nothing is exported.

    Examples:
        enuves export --company 1 --last-month --output lancamentos.csv
        enuves export --company "Padaria Sol" --start-date 01/03/2024 --end-date 31/03/2024
    """
    db = ctx.obj["db"]
    company_id = resolve_company_or_exit(ctx, CompanyService(db), company)
    filters = build_transaction_filters(ctx, **filter_options)

    result = CSVExportService(db).export_csv(company_id, filters)
    exit_on_result_error(ctx, result)

    if output is None:
        click.echo(result["csv"])
        return

    Path(output).write_text(result["csv"], encoding="utf-8")
    row_count = result["csv"].count("\n")
    click.echo(f"Exported {row_count} transactions to {output}")


def register_commands(cli):
    """Register export command with main CLI."""
    cli.add_command(export_csv)
