"""Name validation and machine-name helpers shared by the generate commands."""

import re

import click

MODULE_NAME_PATTERN = re.compile(r"^[a-z0-9_]+$")
MACHINE_NAME_PATTERN = re.compile(r"^[a-z0-9_]+$")
CLASS_NAME_PATTERN = re.compile(r"^[a-zA-Z_\x7f-\xff][a-zA-Z0-9_\x7f-\xff]*$")


def camel_case_to_machine_name(name):
    """``DefaultForm`` -> ``default_form``."""
    return re.sub(r"(?<=[a-z0-9])([A-Z])", r"_\1", name).lower()


def create_machine_name(value):
    """``Example condition`` -> ``example_condition``."""
    machine_name = re.sub(r"[^a-z0-9_]+", "_", value.lower())
    machine_name = re.sub(r"_+", "_", machine_name)
    return machine_name.strip("_")


def validate_module_name(value):
    if not value or not MODULE_NAME_PATTERN.match(value):
        raise click.BadParameter(
            f"Module name \"{value}\" is invalid: use lowercase letters, digits and underscores",
            param_hint="'--module'",
        )
    return value


def validate_class_name(value, param_hint="'--class-name'"):
    if not value or not CLASS_NAME_PATTERN.match(value):
        raise click.BadParameter(
            f"Class name \"{value}\" is not a valid PHP class name",
            param_hint=param_hint,
        )
    return value


def validate_machine_name(value, param_hint):
    if not value or not MACHINE_NAME_PATTERN.match(value):
        raise click.BadParameter(
            f"Machine name \"{value}\" is invalid: use lowercase letters, digits and underscores",
            param_hint=param_hint,
        )
    return value
