"""Inject configured default values into command options and arguments.

Before a command runs, each of its options and arguments is looked up in the
configuration store under a key derived from the command name::

    application.default.commands.<command name with ":" as ".">.<options|arguments>.<name>

A value found there replaces the parameter's built-in default. Values the user
passes on the command line still win over either default.

The injector never mutates registered click parameters. It works on
``ParameterDefinition`` values and ``command_with_definitions`` hands back a
per-invocation clone of the command, so reusing one command object across
several dispatches in a single process does not carry defaults over.

By default a configured value only applies when it is truthy, so ``false``,
``0`` and ``""`` in the config file read as "not configured". Set
``application.default-values.allow-falsy: true`` to apply any non-null value.
"""

import copy
import logging
from dataclasses import dataclass, replace
from typing import Any

import click

from dconsole.config import MISSING

logger = logging.getLogger(__name__)

OPTION = "option"
ARGUMENT = "argument"

SKIP_COMMANDS = frozenset({"self-update", "list", "chain"})

ALLOW_FALSY_KEY = "application.default-values.allow-falsy"


@dataclass(frozen=True)
class ParameterDefinition:
    """One option or positional argument of a command."""

    name: str
    kind: str
    default: Any = None


@dataclass(frozen=True)
class CommandEvent:
    """What a pre-execution hook sees of the command about to run."""

    command_name: str
    parameters: tuple
    config: Any


def default_value_key(command_name: str, kind: str, name: str) -> str:
    """Build the config key holding the default for one parameter."""
    return "application.default.commands.{}.{}s.{}".format(
        command_name.replace(":", "."), kind, name
    )


class DefaultValueInjector:
    """Pre-execution hook that overlays configured defaults on a command."""

    def __init__(self, skip_commands=SKIP_COMMANDS, allow_falsy=None):
        self.skip_commands = frozenset(skip_commands)
        self.allow_falsy = allow_falsy

    def __call__(self, event: CommandEvent):
        return self.inject(event.command_name, event.parameters, event.config)

    def inject(self, command_name, parameters, config) -> tuple:
        """Return *parameters* with configured defaults applied.

        Options are resolved before arguments. The result keeps the original
        declaration order.
        """
        parameters = tuple(parameters)
        if command_name in self.skip_commands:
            logger.debug("Skipping default values for %s", command_name)
            return parameters

        allow_falsy = self._allow_falsy(config)
        resolved = list(parameters)
        for kind in (OPTION, ARGUMENT):
            for index, parameter in enumerate(parameters):
                if parameter.kind != kind:
                    continue
                key = default_value_key(command_name, kind, parameter.name)
                value = config.get(key, MISSING)
                if not self._applies(value, allow_falsy):
                    continue
                logger.debug("Default for %s %s from %s: %r",
                             command_name, parameter.name, key, value)
                resolved[index] = replace(parameter, default=value)
        return tuple(resolved)

    def _allow_falsy(self, config):
        if self.allow_falsy is not None:
            return self.allow_falsy
        return bool(config.get(ALLOW_FALSY_KEY, False))

    @staticmethod
    def _applies(value, allow_falsy):
        if allow_falsy:
            return value is not MISSING and value is not None
        return bool(value)


def _option_name(option: click.Option) -> str:
    for opt in option.opts:
        if opt.startswith("--"):
            return opt[2:]
    if option.opts:
        return option.opts[0].lstrip("-")
    return option.name


def parameter_definitions(command: click.Command) -> tuple:
    """Describe the options and arguments of a click command."""
    definitions = []
    for param in command.params:
        if isinstance(param, click.Option):
            definitions.append(ParameterDefinition(_option_name(param), OPTION, param.default))
        elif isinstance(param, click.Argument):
            definitions.append(ParameterDefinition(param.name, ARGUMENT, param.default))
    return tuple(definitions)


def _as_param_default(param, value):
    """Wrap a single configured value for parameters that take several values."""
    takes_many = getattr(param, "multiple", False) or param.nargs == -1
    if takes_many and value is not None and not isinstance(value, (list, tuple)):
        return (value,)
    return value


def command_with_definitions(command: click.Command, definitions) -> click.Command:
    """Return a shallow clone of *command* whose parameters carry *definitions*' defaults.

    *definitions* must line up with ``parameter_definitions(command)``.
    """
    defaults = iter(definitions)
    params = []
    for param in command.params:
        if isinstance(param, (click.Option, click.Argument)):
            definition = next(defaults)
            if definition.default is not param.default:
                param = copy.copy(param)
                param.default = _as_param_default(param, definition.default)
        params.append(param)

    clone = copy.copy(command)
    clone.params = params
    return clone
