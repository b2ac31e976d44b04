from functools import update_wrapper
import logging
from pathlib import Path
import typing as t

import click
from oslo_config import cfg

import phraseclock
from phraseclock import conf, exception
from phraseclock.log import log
from phraseclock.utils import trace


CONF = cfg.CONF
LOG = logging.getLogger("PHRASECLOCK")
home = str(Path.home())
DEFAULT_CONFIG_FILE = f"{home}/.config/phraseclock/phraseclock.conf"


F = t.TypeVar("F", bound=t.Callable[..., t.Any])

common_options = [
    click.option(
        "--loglevel",
        default=None,
        show_default=True,
        type=click.Choice(
            ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
            case_sensitive=False,
        ),
        show_choices=True,
        help="The log level to use.  Defaults to logging.log_level from the config.",
    ),
    click.option(
        "-c",
        "--config",
        "config_file",
        show_default=True,
        default=DEFAULT_CONFIG_FILE,
        help="The phraseclock config file to use for options.",
    ),
    click.option(
        "--quiet",
        is_flag=True,
        default=False,
        help="Don't log to the console",
    ),
]


class AliasedGroup(click.Group):
    def command(self, *args, **kwargs):
        """A shortcut decorator for declaring and attaching a command to
        the group.  Same arguments as :func:`click.command` plus an
        optional ``aliases`` list of extra names for the command.
        """
        def decorator(f):
            aliases = kwargs.pop("aliases", [])
            cmd = click.decorators.command(*args, **kwargs)(f)
            self.add_command(cmd)
            for alias in aliases:
                self.add_command(cmd, name=alias)
            return cmd
        return decorator


def add_options(options):
    def _add_options(func):
        for option in reversed(options):
            func = option(func)
        return func
    return _add_options


def process_standard_options(f: F) -> F:
    """Load the config file and set up logging before running a command."""
    def new_func(*args, **kwargs):
        ctx = args[0]
        ctx.ensure_object(dict)
        config_file_found = True
        if kwargs["config_file"]:
            default_config_files = [kwargs["config_file"]]
        else:
            default_config_files = None
        try:
            CONF(
                [], project="phraseclock", version=phraseclock.__version__,
                default_config_files=default_config_files,
            )
        except cfg.ConfigFilesNotFoundError:
            config_file_found = False
        ctx.obj["loglevel"] = kwargs["loglevel"]
        ctx.obj["quiet"] = kwargs["quiet"]
        log.setup_logging(
            ctx.obj["loglevel"],
            ctx.obj["quiet"],
        )
        if CONF.trace_enabled:
            trace.setup_tracing()

        if not config_file_found:
            LOG.debug(
                f"No config file at {kwargs['config_file']}, using defaults. "
                "Run 'phraseclock sample-config' to make one.",
            )

        try:
            conf.validate()
        except exception.PhraseClockException as ex:
            raise click.UsageError(ex.message)

        del kwargs["loglevel"]
        del kwargs["config_file"]
        del kwargs["quiet"]
        return f(*args, **kwargs)

    return update_wrapper(t.cast(F, new_func), f)
