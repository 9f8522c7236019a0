"""Bank statement import command."""

import json
from pathlib import Path

import click
from enuves.domain.company import CompanyService
from enuves.domain.statement_import import StatementImportService
from enuves.utils.amount_parser import format_brl

from enuves.cli.company_resolution import resolve_company_or_exit
from enuves.cli.error_handling import exit_on_result_error


def print_preview(result: dict) -> None:
    """Print ready candidates and ignored lines as two tables."""
    success = result["success"]
    ignored = result["ignored"]

    click.echo(f"\nLayout: {result['layout']}")
    click.echo(f"\nReady to import: {len(success)}")
    if success:
        click.echo("-" * 110)
        click.echo(f"{'Date':<12} {'Value':>14} {'Category':<30} {'Account':<20} {'Description':<30}")
        click.echo("-" * 110)
        for candidate in success:
            value = format_brl(candidate.signed_value)
            click.echo(
                f"{candidate.date:%d/%m/%Y}   {value:>14} {(candidate.category_name or '')[:30]:<30} "
                f"{(candidate.account_name or '-')[:20]:<20} {candidate.description[:30]:<30}"
            )

    click.echo(f"\nIgnored: {len(ignored)}")
    for line in ignored:
        click.echo(f"  [{line.reason}] {line.line}")


@click.command("import")
@click.argument("pdf_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--company", required=True, help="Company name or ID")
@click.option("--save", is_flag=True, help="Save the ready transactions after parsing")
@click.option("--json", "as_json", is_flag=True, help="Print the preview as JSON")
@click.pass_context
def import_statement(ctx, pdf_file: str, company: str, save: bool, as_json: bool):
    """Parse a bank statement PDF and preview the transactions found.

    Lines whose category (and, for tabular statements, account) could not
    be identified are listed as ignored. Use --save to store the ready ones.

    Examples:
        enuves import extrato.pdf --company 1
        enuves import extrato.pdf --company "Padaria Sol" --save
    """
    db = ctx.obj["db"]
    company_id = resolve_company_or_exit(ctx, CompanyService(db), company)
    service = StatementImportService(db)

    result = service.parse_pdf(company_id, Path(pdf_file).read_bytes())
    exit_on_result_error(ctx, result)

    if as_json:
        payload = {
            "layout": result["layout"],
            "success": [candidate.as_dict() for candidate in result["success"]],
            "ignored": [line.as_dict() for line in result["ignored"]],
        }
        click.echo(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print_preview(result)

    if not save:
        return

    saved = service.save_transactions(company_id, result["success"])
    exit_on_result_error(ctx, saved)
    click.echo(f"\nSaved {saved['count']} transactions", err=as_json)


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_statement)
