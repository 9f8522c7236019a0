"""Company management commands."""

import click
from enuves.domain.company import CompanyService
from enuves.domain.errors import DomainError

from enuves.cli.error_handling import handle_domain_error


@click.group()
def company_group():
    """Manage client companies."""
    pass


@company_group.command("create")
@click.argument("name", metavar="COMPANY_NAME")
@click.option("--cnpj", help="Company CNPJ")
@click.pass_context
def create_company(ctx, name: str, cnpj: str | None):
    """Create a new company.

    Examples:
        enuves company create "Igreja Batista Central"
        enuves company create "Padaria Sol" --cnpj 12.345.678/0001-90
    """
    db = ctx.obj["db"]
    service = CompanyService(db)

    try:
        company_id = service.create_company(name=name, cnpj=cnpj)
        click.echo(f"Created company '{name.strip()}' (ID: {company_id})")
    except DomainError as e:
        handle_domain_error(ctx, e)


@company_group.command("list")
@click.pass_context
def list_companies(ctx):
    """List all companies."""
    db = ctx.obj["db"]
    service = CompanyService(db)

    companies = service.list_companies()
    if not companies:
        click.echo("No companies found.")
        return

    click.echo("\nCompanies:")
    click.echo("-" * 60)
    for company in companies:
        click.echo(f"ID: {company.id:3d} | {company.name:30s} | CNPJ: {company.cnpj or '-'}")


def register_commands(cli):
    """Register company commands with main CLI."""
    cli.add_command(company_group, name="company")
