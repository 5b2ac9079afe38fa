"""Click command for site:status."""

from importlib.metadata import PackageNotFoundError, version

import click

from dconsole.site_cmd.drush_site import DrushSite, SiteError
from dconsole.site_cmd.site_status import collect_site_status, render_json, render_table


def console_version():
    try:
        return version("dconsole")
    except PackageNotFoundError:
        return "unknown"


@click.command("site:status")
@click.option("--format", "output_format", type=click.Choice(["table", "json"]),
              default="table", show_default=True,
              help="Output format")
@click.pass_obj
def site_status_cmd(obj, output_format):
    """View the current Drupal installation status."""
    site = DrushSite(obj.root)
    try:
        site_data = collect_site_status(site, console_version())
    except SiteError as e:
        raise click.ClickException(str(e)) from e

    if output_format == "json":
        click.echo(render_json(site_data))
    else:
        click.echo(render_table(site_data))
