"""Main CLI entry point."""

import click
from walletdues.database.factories import DB_PATH_ENV, create_sqlite_store
from walletdues.domain.ledger import open_ledger
from walletdues.log import configure_logging

# Import and register all commands at module level
from walletdues.cli.commands import contact, expense, summary, category


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help=f"Path to database file (overrides {DB_PATH_ENV} environment variable)",
    envvar=DB_PATH_ENV,
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="WALLETDUES_LOG_LEVEL",
    help="Log verbosity (logs go to stderr)",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Walletdues - Wallet & dues tracker.

    Capture your own spending, log shared costs, and keep a pulse on who
    still owes you money. Everything stays local to your machine.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)

    # Open the store only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is not None:
        store = create_sqlite_store(database_path=db_path)
        store.connect()
        ctx.call_on_close(store.disconnect)
        ctx.obj["store"] = store
        ctx.obj["ledger"] = open_ledger(store)


# Register all commands
contact.register_commands(cli)
expense.register_commands(cli)
summary.register_commands(cli)
category.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
