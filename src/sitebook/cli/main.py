"""Main CLI entry point."""

import logging

import click
from sitebook.database.factories import create_sqlite_database
from sitebook.logging_utils import configure_logging

# Import and register all commands at module level
from sitebook.cli.commands import (
    site,
    expense,
    advance,
    funds,
    invoice,
    balance,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides SITEBOOK_DB_PATH environment variable)",
    envvar="SITEBOOK_DB_PATH",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """Sitebook - Construction site expense tracking.

    Record expenses, advances, funds received from head office and invoices
    per site, and see each site's running balance.
    """
    ctx.ensure_object(dict)
    configure_logging(logging.DEBUG if verbose else None)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
site.register_commands(cli)
expense.register_commands(cli)
advance.register_commands(cli)
funds.register_commands(cli)
invoice.register_commands(cli)
balance.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
