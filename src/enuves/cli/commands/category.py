"""Category management commands."""

import click
from enuves.domain.category import CategoryService
from enuves.domain.company import CompanyService
from enuves.domain.entities import Nature
from enuves.domain.errors import DomainError, category_not_found

from enuves.cli.company_resolution import resolve_company_or_exit
from enuves.cli.error_handling import handle_domain_error

NATURE_CHOICE = click.Choice([n.value for n in Nature], case_sensitive=False)


@click.group()
def category_group():
    """Manage a company's categories."""
    pass


@category_group.command("list")
@click.option("--company", required=True, help="Company name or ID")
@click.pass_context
def list_categories(ctx, company: str):
    """List a company's categories ordered by code."""
    db = ctx.obj["db"]
    company_id = resolve_company_or_exit(ctx, CompanyService(db), company)
    service = CategoryService(db)

    categories = service.list_categories(company_id)
    if not categories:
        click.echo("No categories found. Run 'category seed' to create default categories.")
        return

    click.echo("\nCategories:")
    click.echo("-" * 100)
    click.echo(f"{'ID':<6} {'Code':<8} {'Nature':<14} {'Integration':<12} {'Description':<50}")
    click.echo("-" * 100)
    for cat in categories:
        click.echo(
            f"{cat.id:<6} {cat.code:<8} {cat.nature.value:<14} "
            f"{cat.integration_code or '-':<12} {cat.description:<50}"
        )


@category_group.command("create")
@click.argument("description")
@click.option("--company", required=True, help="Company name or ID")
@click.option("--nature", required=True, type=NATURE_CHOICE, help="Category nature")
@click.option("--integration-code", help="Ledger account code used by the ERP")
@click.pass_context
def create_category(ctx, description: str, company: str, nature: str, integration_code: str | None):
    """Create a category with the next free code of its nature.

    Examples:
        enuves category create "Dízimo" --company 1 --nature Entrada
        enuves category create "Energia Elétrica" --company 1 --nature Saída --integration-code 4101
    """
    db = ctx.obj["db"]
    company_id = resolve_company_or_exit(ctx, CompanyService(db), company)
    service = CategoryService(db)

    try:
        category_id = service.create_category(
            company_id=company_id,
            description=description,
            nature=nature,
            integration_code=integration_code,
        )
        category = service.get_category(category_id)
        click.echo(f"Created category '{category.description}' with code {category.code} (ID: {category_id})")
    except DomainError as e:
        handle_domain_error(ctx, e)


@category_group.command("update")
@click.argument("category_id", type=int)
@click.option("--description", help="New description")
@click.option("--integration-code", help="New integration code (empty string to clear)")
@click.pass_context
def update_category(ctx, category_id: int, description: str | None, integration_code: str | None):
    """Update a category's description or integration code.

    Fields that are not provided keep their current value.
    """
    db = ctx.obj["db"]
    service = CategoryService(db)

    current = service.get_category(category_id)
    if current is None:
        click.echo(f"Error: {category_not_found(category_id)}", err=True)
        ctx.exit(1)

    try:
        service.update_category(
            category_id,
            description=description if description is not None else current.description,
            integration_code=(
                integration_code if integration_code is not None else current.integration_code
            ),
        )
        click.echo(f"Updated category {category_id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


@category_group.command("delete")
@click.argument("category_id", type=int)
@click.option("--yes", is_flag=True, help="Skip confirmation")
@click.pass_context
def delete_category(ctx, category_id: int, yes: bool):
    """Delete a category that no transaction uses."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    if not yes and not click.confirm(f"Are you sure you want to delete category {category_id}?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_category(category_id)
        click.echo(f"Deleted category {category_id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


@category_group.command("next-code")
@click.option("--company", required=True, help="Company name or ID")
@click.option("--nature", required=True, type=NATURE_CHOICE, help="Category nature")
@click.pass_context
def next_code(ctx, company: str, nature: str):
    """Show the code the next category of a nature would receive."""
    db = ctx.obj["db"]
    company_id = resolve_company_or_exit(ctx, CompanyService(db), company)

    try:
        click.echo(CategoryService(db).next_code(company_id, nature))
    except DomainError as e:
        handle_domain_error(ctx, e)


@category_group.command("seed")
@click.option("--company", required=True, help="Company name or ID")
@click.option("--nature", type=NATURE_CHOICE, default=Nature.SAIDA.value, show_default=True, help="Category nature")
@click.pass_context
def seed_categories(ctx, company: str, nature: str):
    """Create the built-in categories of a nature that the company lacks."""
    db = ctx.obj["db"]
    company_id = resolve_company_or_exit(ctx, CompanyService(db), company)

    try:
        count = CategoryService(db).seed_default_categories(company_id, nature)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if count == 0:
        click.echo("No categories to create.")
    else:
        click.echo(f"Created {count} categories")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
