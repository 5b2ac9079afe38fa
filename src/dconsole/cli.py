"""Top-level console application for the dconsole CLI."""

import logging

import click

from dconsole.application import ConsoleApplication, ConsoleContext
from dconsole.chain_cmd.cli import chain_cmd
from dconsole.generate_cmd.cli import generate_form_cmd, generate_plugin_condition_cmd
from dconsole.list_cmd import list_cmd
from dconsole.site_cmd.cli import site_status_cmd

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _configure_logging(ctx, param, verbose):
    """Enable debug logging while options are parsed, before any command is resolved."""
    if verbose:
        logging.basicConfig(format=LOG_FORMAT, level=logging.DEBUG)


@click.group(cls=ConsoleApplication)
@click.option("--config", "config_file", envvar="DCONSOLE_CONFIG", metavar="FILE",
              help="Extra YAML config file, merged over the default ones")
@click.option("--root", default=".", envvar="DCONSOLE_ROOT", show_default=True,
              help="Drupal root directory")
@click.option("-v", "--verbose", is_flag=True, is_eager=True, expose_value=False,
              callback=_configure_logging, help="Log debug output to stderr")
@click.pass_context
def main(ctx, config_file, root):
    """dconsole - Drupal code generation and site inspection."""
    if ctx.obj is None:
        ctx.obj = ConsoleContext(root=root)


main.add_command(list_cmd)
main.add_command(chain_cmd)
main.add_command(site_status_cmd)
main.add_command(generate_form_cmd)
main.add_command(generate_plugin_condition_cmd)
