"""CLI helpers for company resolution."""

from __future__ import annotations

import click
from enuves.domain.company import CompanyService
from enuves.domain.errors import NotFoundError
from enuves.utils.company_resolver import resolve_company

from enuves.cli.error_handling import handle_domain_error


def resolve_company_or_exit(
    ctx: click.Context, company_service: CompanyService, company: str | int
) -> int:
    """Resolve company name or ID, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_company(company_service, company)
    except NotFoundError as exc:
        handle_domain_error(ctx, exc)
