"""Options dataclass for the generate:form command."""

from dataclasses import dataclass

import click

from dconsole.generate_cmd.validators import (
    camel_case_to_machine_name,
    validate_class_name,
    validate_machine_name,
    validate_module_name,
)

FORM_ELEMENT_TYPES = (
    "checkbox",
    "checkboxes",
    "date",
    "email",
    "number",
    "password",
    "radios",
    "select",
    "tel",
    "textarea",
    "textfield",
    "url",
)


def parse_form_input(value):
    """Parse a ``name:type[:label]`` input definition into a dict."""
    parts = value.split(":", 2)
    if len(parts) < 2 or not parts[0] or not parts[1]:
        raise click.BadParameter(
            f"Input \"{value}\" must look like name:type[:label]",
            param_hint="'--inputs'",
        )
    name, input_type = parts[0], parts[1]
    label = parts[2] if len(parts) == 3 and parts[2] else name.replace("_", " ").capitalize()
    if input_type not in FORM_ELEMENT_TYPES:
        raise click.BadParameter(
            f"Input type \"{input_type}\" is not one of: {', '.join(FORM_ELEMENT_TYPES)}",
            param_hint="'--inputs'",
        )
    validate_machine_name(name, "'--inputs'")
    return {"name": name, "type": input_type, "label": label}


@dataclass
class FormOpts:
    """All options for the generate:form command."""

    module: str
    class_name: str = "DefaultForm"
    form_id: str | None = None
    services: tuple = ()
    inputs: tuple = ()
    routing: bool = True

    @property
    def resolved_form_id(self):
        return self.form_id or camel_case_to_machine_name(self.class_name)

    @property
    def form_inputs(self):
        return [parse_form_input(value) for value in self.inputs]

    def validate(self):
        """Raise click.BadParameter for the first invalid option."""
        validate_module_name(self.module)
        validate_class_name(self.class_name)
        validate_machine_name(self.resolved_form_id, "'--form-id'")

        names = [form_input["name"] for form_input in self.form_inputs]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise click.BadParameter(
                f"Duplicate input names: {', '.join(duplicates)}",
                param_hint="'--inputs'",
            )
