"""Transaction management commands."""

from decimal import Decimal

import click
from enuves.domain.company import CompanyService
from enuves.domain.errors import DomainError, transaction_not_found
from enuves.domain.transaction import TransactionService
from enuves.utils.amount_parser import format_brl, parse_amount
from enuves.utils.date_parser import parse_date

from enuves.cli.company_resolution import resolve_company_or_exit
from enuves.cli.error_handling import handle_domain_error
from enuves.cli.transaction_filters import build_transaction_filters, transaction_filter_options


@click.group()
def transaction_group():
    """Manage saved transactions."""
    pass


@transaction_group.command("list")
@click.option("--company", required=True, help="Company name or ID")
@transaction_filter_options
@click.pass_context
def list_transactions(ctx, company: str, **filter_options):
    """View a company's transactions, newest first.

    Values are shown with the direction given by the category nature.
    """
    db = ctx.obj["db"]
    company_id = resolve_company_or_exit(ctx, CompanyService(db), company)
    filters = build_transaction_filters(ctx, **filter_options)
    service = TransactionService(db)

    details = service.list_transactions(company_id, filters)
    if not details:
        click.echo("No transactions found.")
        return

    click.echo(f"\nFound {len(details)} transaction(s):")
    click.echo("-" * 110)
    click.echo(f"{'ID':<6} {'Date':<12} {'Value':>14} {'Category':<30} {'Account':<20} {'Description':<30}")
    click.echo("-" * 110)

    for detail in details:
        txn = detail.transaction
        click.echo(
            f"{txn.id:<6} {txn.date:%d/%m/%Y}   {format_brl(detail.signed_value):>14} "
            f"{(detail.category_name or '')[:30]:<30} {(detail.account_name or '-')[:20]:<20} "
            f"{txn.description[:30]:<30}"
        )

    total_out = sum((d.signed_value for d in details if d.signed_value < 0), Decimal("0"))
    total_in = sum((d.signed_value for d in details if d.signed_value > 0), Decimal("0"))
    click.echo("-" * 110)
    click.echo(
        f"{'TOTAL':<6} Saídas: {format_brl(abs(total_out))} | "
        f"Entradas: {format_brl(total_in)} | Count: {len(details)}"
    )


@transaction_group.command("update")
@click.argument("transaction_id", type=int)
@click.option("--date", help="Transaction date (DD/MM/YYYY, YYYY-MM-DD or relative like 'today')")
@click.option("--category", "category_id", type=int, help="Category ID")
@click.option("--account", "account_id", type=int, help="Account ID")
@click.option("--clear-account", is_flag=True, help="Remove the account from the transaction")
@click.option("--description", help="Transaction description")
@click.option("--value", help="Transaction value (e.g., 123.45 or 1.234,56)")
@click.pass_context
def update_transaction(
    ctx,
    transaction_id: int,
    date: str | None,
    category_id: int | None,
    account_id: int | None,
    clear_account: bool,
    description: str | None,
    value: str | None,
) -> None:
    """Update a transaction.

    Updates only the fields that are provided.

    Examples:
        enuves transaction update 1 --value 75,00
        enuves transaction update 1 --category 4 --account 2
        enuves transaction update 1 --clear-account
    """
    db = ctx.obj["db"]
    service = TransactionService(db)

    txn = service.get_transaction(transaction_id)
    if txn is None:
        click.echo(f"Error: {transaction_not_found(transaction_id)}", err=True)
        ctx.exit(1)

    if clear_account and account_id is not None:
        click.echo("Error: --account cannot be combined with --clear-account.", err=True)
        ctx.exit(1)

    txn_date = txn.date
    if date is not None:
        try:
            txn_date = parse_date(date)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    txn_value = txn.value
    if value is not None:
        try:
            txn_value = parse_amount(value)
        except ValueError as e:
            click.echo(f"Error: Invalid value format: {e}", err=True)
            ctx.exit(1)

    if clear_account:
        new_account_id = None
    elif account_id is not None:
        new_account_id = account_id
    else:
        new_account_id = txn.account_id

    try:
        service.update_transaction(
            transaction_id,
            date=txn_date,
            category_id=category_id if category_id is not None else txn.category_id,
            description=description if description is not None else txn.description,
            value=txn_value,
            account_id=new_account_id,
        )
        click.echo(f"Updated transaction {transaction_id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


@transaction_group.command("delete")
@click.argument("transaction_id", type=int)
@click.option("--yes", is_flag=True, help="Skip confirmation")
@click.pass_context
def delete_transaction(ctx, transaction_id: int, yes: bool) -> None:
    """Delete a transaction.

    Examples:
        enuves transaction delete 1
    """
    db = ctx.obj["db"]
    service = TransactionService(db)

    if service.get_transaction(transaction_id) is None:
        click.echo(f"Error: {transaction_not_found(transaction_id)}", err=True)
        ctx.exit(1)

    if not yes and not click.confirm(f"Are you sure you want to delete transaction {transaction_id}?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_transaction(transaction_id)
        click.echo(f"Deleted transaction {transaction_id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli: click.Group) -> None:
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
