"""Click group that runs pre-execution hooks before dispatching a command."""

import logging
from dataclasses import dataclass

import click

from dconsole.config import ConfigurationError, load_config
from dconsole.default_values import (
    CommandEvent,
    DefaultValueInjector,
    command_with_definitions,
    parameter_definitions,
)

logger = logging.getLogger(__name__)

CONFIG_META_KEY = "dconsole.config"


@dataclass
class ConsoleContext:
    """Settings shared by every command of one console run."""

    root: str = "."


class ConsoleApplication(click.Group):
    """Console with colon-namespaced commands and a pre-execution hook chain.

    Hooks are called in registration order with a ``CommandEvent``. A hook
    returns the parameter definitions the next hook (and finally the command)
    should see, or ``None`` to leave them as they are.
    """

    def __init__(self, *args, pre_execute_hooks=None, config_loader=load_config, **kwargs):
        super().__init__(*args, **kwargs)
        if pre_execute_hooks is None:
            pre_execute_hooks = [DefaultValueInjector()]
        self.pre_execute_hooks = list(pre_execute_hooks)
        self.config_loader = config_loader

    def add_pre_execute_hook(self, hook):
        self.pre_execute_hooks.append(hook)

    def get_config(self, ctx):
        """Load the configuration once per root invocation.

        Raises:
            click.ClickException: If the configuration cannot be read.
        """
        if CONFIG_META_KEY not in ctx.meta:
            config_file = ctx.find_root().params.get("config_file")
            try:
                ctx.meta[CONFIG_META_KEY] = self.config_loader(config_file)
            except ConfigurationError as e:
                raise click.ClickException(f"Configuration error: {e}") from e
        return ctx.meta[CONFIG_META_KEY]

    def resolve_command(self, ctx, args):
        cmd_name, cmd, args = super().resolve_command(ctx, args)
        if cmd is not None and not ctx.resilient_parsing:
            cmd = self.prepare_command(ctx, cmd_name, cmd)
        return cmd_name, cmd, args

    def prepare_command(self, ctx, cmd_name, cmd):
        """Run the hook chain and return a clone of *cmd* with its final defaults."""
        event = CommandEvent(
            command_name=cmd_name,
            parameters=parameter_definitions(cmd),
            config=self.get_config(ctx),
        )
        for hook in self.pre_execute_hooks:
            parameters = hook(event)
            if parameters is not None:
                event = CommandEvent(event.command_name, tuple(parameters), event.config)
        logger.debug("Dispatching %s", cmd_name)
        return command_with_definitions(cmd, event.parameters)
