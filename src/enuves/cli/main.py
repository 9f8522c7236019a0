"""Main CLI entry point."""

import logging
import sys

import click
import structlog

from enuves.database.factories import create_sqlite_database

# Import and register all commands at module level
from enuves.cli.commands import (
    company,
    category,
    account,
    import_cmd,
    transaction,
    export,
)

LOG_LEVELS = ["debug", "info", "warning", "error"]


def configure_logging(level: str) -> None:
    """Send structlog output to stderr so stdout carries only command output."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level.upper())),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides ENUVES_DB_PATH environment variable)",
    envvar="ENUVES_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="warning",
    show_default=True,
    help="Log level for diagnostics written to stderr",
    envvar="ENUVES_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Enuves - Bank statement reconciliation.

    Import bank statement PDFs, classify their lines into each company's
    categories and accounts, and export the result as a ledger CSV.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None and "db" not in ctx.obj:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
company.register_commands(cli)
category.register_commands(cli)
account.register_commands(cli)
import_cmd.register_commands(cli)
transaction.register_commands(cli)
export.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
