import click
from rich.console import Console
from rich.table import Table

from phraseclock import cli_helper
from phraseclock.main import cli
from phraseclock.utils import timephrase


def build_table(hour, step):
    table = Table(
        title=f"[bold][magenta]Time phrases for hour {hour}[/]",
    )
    table.add_column("Time", style="cyan", no_wrap=True, justify="center")
    table.add_column("Lines", style="bold yellow", justify="center")
    table.add_column("Phrase", style="bold green")
    for minute in range(0, 60, step):
        lines = timephrase.render_time_phrase(hour, minute)
        table.add_row(f"{hour:02d}:{minute:02d}", str(len(lines)), " / ".join(lines))
    return table


@cli.command()
@cli_helper.add_options(cli_helper.common_options)
@click.option(
    "--hour",
    default=9,
    show_default=True,
    type=click.IntRange(0, 23),
    help="The hour to list phrases for.",
)
@click.option(
    "-s",
    "--minute-step",
    "step",
    default=1,
    show_default=True,
    type=click.IntRange(1, 59),
    help="Show every Nth minute.",
)
@click.pass_context
@cli_helper.process_standard_options
def table(ctx, hour, step):
    """Show the phrase for every minute of an hour."""
    console = Console()
    console.print(build_table(hour, step))
