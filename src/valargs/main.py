import json
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from valargs.args import Args, parse_raw
from valargs.config import load_logging_config
from valargs.logger import get_logger

cli = typer.Typer(
    name="valargs",
    help="Split command-line tokens into positional arguments and options",
    epilog="""
    Examples:
    $ valargs -- exec arg1 --option0 option0_value arg3 -o
    $ valargs --value option0 -- exec --option0 option0_value
    """,
    add_completion=False,
)


def render_tables(args: Args) -> tuple[Table, Table]:
    """Build the positional and option tables for a parse result."""
    positional_table = Table(title="Positional")
    positional_table.add_column("Index", justify="right", style="cyan")
    positional_table.add_column("Token", style="green")
    for index, token in enumerate(args.positional):
        positional_table.add_row(str(index), token)

    options_table = Table(title="Options")
    options_table.add_column("Name", style="cyan")
    options_table.add_column("Value", style="green")
    for name, value in args.options:
        options_table.add_row(name, value if value is not None else "[dim]-[/]")

    return positional_table, options_table


@cli.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def main(
    ctx: typer.Context,
    as_json: bool = typer.Option(False, "--json", help="Print the parse result as JSON"),
    nth: Optional[int] = typer.Option(None, "--nth", help="Print the positional argument at this index"),
    has: Optional[str] = typer.Option(None, "--has", help="Report whether an option is present"),
    value: Optional[str] = typer.Option(None, "--value", help="Print the value of an option"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Parse the tokens given after "--" and show how they were classified."""
    load_dotenv()
    config = load_logging_config()
    if debug:
        config.log_level = "DEBUG"
    config.apply()
    logger = get_logger("main")

    args = parse_raw(ctx.args)
    logger.info(f"Inspecting {len(ctx.args)} tokens")

    queried = nth is not None or has is not None or value is not None
    if not queried:
        if as_json:
            typer.echo(json.dumps(args.to_display_dict(), indent=2))
        else:
            console = Console()
            for table in render_tables(args):
                console.print(table)
        return

    found = True
    if nth is not None:
        token = args.nth(nth)
        typer.echo(token if token is not None else "")
        found = found and token is not None
    if has is not None:
        present = args.has_option(has)
        typer.echo("true" if present else "false")
        found = found and present
    if value is not None:
        option_value = args.option_value(value)
        typer.echo(option_value if option_value is not None else "")
        found = found and option_value is not None

    if not found:
        logger.debug("Query did not match the parsed tokens")
        raise typer.Exit(code=1)


def run():
    """Entry point for the valargs command line."""
    cli()


if __name__ == "__main__":
    run()
