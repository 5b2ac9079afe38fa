"""List the commands registered on the console."""

from itertools import groupby

import click
from tabulate import tabulate


def _namespace(name):
    return name.split(":", 1)[0] if ":" in name else ""


@click.command("list")
@click.argument("namespace", required=False)
@click.pass_context
def list_cmd(ctx, namespace):
    """List commands, optionally only those in NAMESPACE."""
    root = ctx.find_root()
    app = root.command
    names = sorted(app.list_commands(root), key=lambda name: (_namespace(name), name))
    if namespace:
        names = [name for name in names if _namespace(name) == namespace]
        if not names:
            raise click.UsageError(f"There are no commands defined in the \"{namespace}\" namespace.")

    rows = [(name, app.get_command(root, name).get_short_help_str(limit=80)) for name in names]
    table_lines = iter(tabulate(rows, tablefmt="plain", disable_numparse=True).splitlines())
    for group, group_names in groupby(names, key=_namespace):
        if group:
            click.echo(click.style(group, fg="yellow"))
        for _ in group_names:
            click.echo(f"  {next(table_lines)}".rstrip())
