import logging

import click

from phraseclock import cli_helper, exception
from phraseclock.main import cli
from phraseclock.utils import numberwords


LOG = logging.getLogger("PHRASECLOCK")


@cli.command()
@cli_helper.add_options(cli_helper.common_options)
@click.argument("numbers", nargs=-1, type=int, required=True)
@click.pass_context
@cli_helper.process_standard_options
def spell(ctx, numbers):
    """Spell each of the NUMBERS in English words.

    Put negative numbers after '--', ex: phraseclock spell -- -42
    """
    for number in numbers:
        try:
            words = numberwords.spell_number(number)
        except exception.UnsupportedMagnitudeError as ex:
            LOG.error(ex.message)
            click.secho(ex.message, fg="red", err=True)
            ctx.exit(1)
        click.echo(words)
