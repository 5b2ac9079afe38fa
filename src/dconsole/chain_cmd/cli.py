"""Click command that runs the commands listed in a chain file."""

import logging

import click

from dconsole.chain_cmd.chain import ChainFileError, load_chain_file

logger = logging.getLogger(__name__)


def run_step(ctx, step):
    """Dispatch one chained command through the root application."""
    root = ctx.find_root()
    app = root.command
    with app.make_context(root.info_name, step.to_args(), parent=ctx) as sub_ctx:
        app.invoke(sub_ctx)


@click.command("chain")
@click.option("--file", "chain_file", required=True,
              type=click.Path(exists=True, dir_okay=False),
              help="YAML file listing the commands to run")
@click.pass_context
def chain_cmd(ctx, chain_file):
    """Run a sequence of commands from a chain file."""
    try:
        steps = load_chain_file(chain_file)
    except ChainFileError as e:
        raise click.ClickException(str(e)) from e

    for step in steps:
        logger.info("Running chained command %s", step.command)
        try:
            run_step(ctx, step)
        except click.ClickException as e:
            raise click.ClickException(
                f"Chained command {step.command} failed: {e.format_message()}"
            ) from e
