#
#  render.py prints the time phrase for now, or for a given HH:MM
#
import datetime
import logging
import re

import click
from oslo_config import cfg
import pytz

from phraseclock import cli_helper, exception
from phraseclock.main import cli
from phraseclock.utils import timephrase


CONF = cfg.CONF
LOG = logging.getLogger("PHRASECLOCK")
TIME_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")


def parse_clock_time(value):
    """Split 'HH:MM' (or 'H:MM') into an (hour, minute) tuple of ints.

    Only the shape is checked here, range checks belong to the engine.
    """
    match = TIME_RE.match(value)
    if not match:
        raise ValueError(f"'{value}' is not in HH:MM format")
    return int(match.group(1)), int(match.group(2))


def _get_utcnow():
    return datetime.datetime.now(pytz.utc)


def wall_clock(tz_name=None):
    """Current time, in the named timezone or the local one."""
    # So we can mock this in unit tests
    utcnow = _get_utcnow()
    if tz_name:
        return utcnow.astimezone(pytz.timezone(tz_name))
    return utcnow.astimezone()


@cli.command(aliases=["show"])
@cli_helper.add_options(cli_helper.common_options)
@click.option(
    "-t",
    "--timezone",
    "tz_name",
    default=None,
    help="Timezone to read the wall clock in.  Ex: US/Pacific",
)
@click.option(
    "--numeric-fallback/--no-numeric-fallback",
    default=True,
    show_default=True,
    help="Print HH:MM instead of failing when the time can't be put in words.",
)
@click.argument("clock_time", required=False, default=None)
@click.pass_context
@cli_helper.process_standard_options
def render(ctx, tz_name, numeric_fallback, clock_time):
    """Print the time as words, one phrase line per output line.

    CLOCK_TIME is an optional HH:MM (24 hour) time, the current time is
    used without it.
    """
    if clock_time:
        try:
            hour, minute = parse_clock_time(clock_time)
        except ValueError as ex:
            raise click.BadParameter(str(ex), param_hint="CLOCK_TIME") from ex
    else:
        tz_name = tz_name or CONF.timezone
        try:
            now = wall_clock(tz_name)
        except pytz.UnknownTimeZoneError:
            raise click.BadParameter(
                f"Unknown timezone '{tz_name}'", param_hint="--timezone",
            )
        hour, minute = now.hour, now.minute

    LOG.info(f"Rendering {hour:02d}:{minute:02d}")
    CONF.log_opt_values(LOG, logging.DEBUG)
    try:
        lines = timephrase.render_time_phrase(hour, minute)
    except exception.InvalidTimeError as ex:
        LOG.error(ex.message)
        if not numeric_fallback:
            click.secho(ex.message, fg="red", err=True)
            ctx.exit(1)
        lines = [f"{hour:02d}:{minute:02d}"]

    for line in lines:
        click.echo(line)
