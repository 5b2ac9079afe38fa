"""Click commands for the generate:* code generators."""

import click

from dconsole.generate_cmd.form_opts import FormOpts
from dconsole.generate_cmd.generate_command import GenerateCommand
from dconsole.generate_cmd.generators import GeneratorNotFoundError, load_generator
from dconsole.generate_cmd.plugin_condition_opts import PluginConditionOpts


def _run_generator(opts, generator_name):
    try:
        GenerateCommand(opts, generator_name, loader=load_generator).execute()
    except GeneratorNotFoundError as e:
        raise click.ClickException(str(e)) from e


@click.command("generate:form")
@click.option("--module", required=True, help="Machine name of the module to add the form to")
@click.option("--class-name", default="DefaultForm", show_default=True,
              help="Form class name")
@click.option("--form-id", help="Form id (default: derived from the class name)")
@click.option("--services", multiple=True, metavar="SERVICE",
              help="Service to inject into the form (repeatable)")
@click.option("--inputs", multiple=True, metavar="NAME:TYPE[:LABEL]",
              help="Form element to create (repeatable)")
@click.option("--routing/--no-routing", default=True, show_default=True,
              help="Add a route for the form to the module's routing file")
def generate_form_cmd(module, class_name, form_id, services, inputs, routing):
    """Generate a form class inside a module."""
    opts = FormOpts(
        module=module,
        class_name=class_name,
        form_id=form_id,
        services=tuple(services),
        inputs=tuple(inputs),
        routing=routing,
    )
    _run_generator(opts, "form")
    click.echo(f"Generated form {opts.class_name} ({opts.resolved_form_id}) in module {opts.module}")


@click.command("generate:plugin:condition")
@click.option("--module", required=True, help="Machine name of the module to add the plugin to")
@click.option("--class-name", default="ExampleCondition", show_default=True,
              help="Plugin class name")
@click.option("--label", default="Example condition", show_default=True,
              help="Plugin label")
@click.option("--plugin-id", help="Plugin id (default: derived from the label)")
@click.option("--context-definition-id", default="entity:node", show_default=True,
              help="Context definition id")
@click.option("--context-definition-label", default="Node", show_default=True,
              help="Context definition label")
@click.option("--context-definition-required/--context-definition-optional",
              default=True, show_default=True,
              help="Whether the context is required")
def generate_plugin_condition_cmd(**kwargs):
    """Generate a condition plugin inside a module."""
    opts = PluginConditionOpts(**kwargs)
    _run_generator(opts, "plugin.condition")
    click.echo(
        f"Generated condition plugin {opts.class_name} ({opts.resolved_plugin_id}) in module {opts.module}"
    )
