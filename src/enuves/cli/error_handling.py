"""CLI error handling helpers.

Directory services raise ``DomainError``; statement import and export report
failures as an ``error`` entry in their result mapping. Both end up as an
``Error: ...`` line on stderr and exit status 1.
"""

from typing import Any, Mapping

import click

from enuves.domain.errors import DomainError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def exit_on_result_error(ctx: click.Context, result: Mapping[str, Any]) -> None:
    """Exit with failure if a pipeline result carries an error message."""
    if "error" in result:
        click.echo(f"Error: {result['error']}", err=True)
        ctx.exit(1)
