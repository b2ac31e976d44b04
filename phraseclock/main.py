#
# Print the current time as words, the way the watch face shows it:
#
#   $ phraseclock render 9:34
#   It's
#   twenty six
#   minutes
#   to ten
#
# Options are read from ~/.config/phraseclock/phraseclock.conf, run
# 'phraseclock sample-config' to generate one.
#

# python included libs
import importlib.metadata as imp
from importlib.metadata import version as metadata_version
import logging
import sys

import click
from oslo_config import cfg, generator

# local imports here
import phraseclock
from phraseclock import cli_helper


CONF = cfg.CONF
LOG = logging.getLogger("PHRASECLOCK")
CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(cls=cli_helper.AliasedGroup, context_settings=CONTEXT_SETTINGS)
@click.version_option(version=phraseclock.__version__)
@click.pass_context
def cli(ctx):
    pass


def load_commands():
    from .cmds import render, spell, table  # noqa


def main():
    # First import all the possible commands for the CLI
    # The commands themselves live in the cmds directory
    load_commands()
    cli(auto_envvar_prefix="PHRASECLOCK")


@cli.command()
@click.pass_context
def sample_config(ctx):
    """Generate a sample config file with every phraseclock option."""

    def get_namespaces():
        args = []

        selected = imp.entry_points(group="oslo.config.opts")
        for entry in selected:
            if "phraseclock" in entry.name:
                args.append("--namespace")
                args.append(entry.name)

        return args

    args = get_namespaces()
    config_version = metadata_version("oslo.config")
    logging.basicConfig(level=logging.WARN)
    conf = cfg.ConfigOpts()
    generator.register_cli_opts(conf)
    try:
        conf(args, version=config_version)
    except cfg.RequiredOptError:
        conf.print_help()
        if not sys.argv[1:]:
            raise SystemExit
        raise
    generator.generate(conf)


@cli.command()
@click.pass_context
def version(ctx):
    """Show the phraseclock version."""
    click.echo(click.style("phraseclock Version : ", fg="white"), nl=False)
    click.secho(f"{phraseclock.__version__}", fg="yellow", bold=True)


if __name__ == "__main__":
    main()
