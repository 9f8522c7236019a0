"""Account management commands."""

import click
from enuves.domain.account import AccountService
from enuves.domain.company import CompanyService
from enuves.domain.errors import DomainError, account_not_found

from enuves.cli.company_resolution import resolve_company_or_exit
from enuves.cli.error_handling import handle_domain_error


@click.group()
def account_group():
    """Manage a company's accounts."""
    pass


@account_group.command("create")
@click.argument("description", metavar="DESCRIPTION")
@click.option("--company", required=True, help="Company name or ID")
@click.option("--integration-code", help="Ledger account code used by the ERP")
@click.pass_context
def create_account(ctx, description: str, company: str, integration_code: str | None):
    """Create a new account with the next sequential code.

    Examples:
        enuves account create "Banco do Brasil" --company 1
        enuves account create "Caixa" --company "Padaria Sol" --integration-code 1101
    """
    db = ctx.obj["db"]
    company_id = resolve_company_or_exit(ctx, CompanyService(db), company)
    service = AccountService(db)

    try:
        account_id = service.create_account(
            company_id=company_id, description=description, integration_code=integration_code
        )
        account = service.get_account(account_id)
        click.echo(f"Created account '{account.description}' with code {account.code} (ID: {account_id})")
    except DomainError as e:
        handle_domain_error(ctx, e)


@account_group.command("list")
@click.option("--company", required=True, help="Company name or ID")
@click.pass_context
def list_accounts(ctx, company: str):
    """List a company's accounts."""
    db = ctx.obj["db"]
    company_id = resolve_company_or_exit(ctx, CompanyService(db), company)
    service = AccountService(db)

    accounts = service.list_accounts(company_id)
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 80)
    for acc in accounts:
        click.echo(
            f"ID: {acc.id:3d} | Code: {acc.code:>4s} | {acc.description:40s} | "
            f"Integration: {acc.integration_code or '-'}"
        )


@account_group.command("update")
@click.argument("account_id", type=int)
@click.option("--description", help="New description")
@click.option("--integration-code", help="New integration code (empty string to clear)")
@click.pass_context
def update_account(ctx, account_id: int, description: str | None, integration_code: str | None) -> None:
    """Update an account's description or integration code."""
    db = ctx.obj["db"]
    service = AccountService(db)

    current = service.get_account(account_id)
    if current is None:
        click.echo(f"Error: {account_not_found(account_id)}", err=True)
        ctx.exit(1)

    try:
        service.update_account(
            account_id,
            description=description if description is not None else current.description,
            integration_code=(
                integration_code if integration_code is not None else current.integration_code
            ),
        )
        click.echo(f"Updated account {account_id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


@account_group.command("delete")
@click.argument("account_id", type=int)
@click.option("--yes", is_flag=True, help="Skip confirmation")
@click.pass_context
def delete_account(ctx, account_id: int, yes: bool) -> None:
    """Delete an account.

    Transactions that used the account keep their category and are left
    without an account.

    Examples:
        enuves account delete 3
    """
    db = ctx.obj["db"]
    service = AccountService(db)

    account_obj = service.get_account(account_id)
    if account_obj is None:
        click.echo(f"Error: {account_not_found(account_id)}", err=True)
        ctx.exit(1)

    if not yes and not click.confirm(
        f"Are you sure you want to delete account '{account_obj.description}' (ID: {account_id})?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_account(account_id)
        click.echo(f"Deleted account '{account_obj.description}'")
    except DomainError as e:
        handle_domain_error(ctx, e)


@account_group.command("next-code")
@click.option("--company", required=True, help="Company name or ID")
@click.pass_context
def next_code(ctx, company: str):
    """Show the code the next account would receive."""
    db = ctx.obj["db"]
    company_id = resolve_company_or_exit(ctx, CompanyService(db), company)
    click.echo(AccountService(db).next_code(company_id))


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
