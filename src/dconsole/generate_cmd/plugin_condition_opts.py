"""Options dataclass for the generate:plugin:condition command."""

from dataclasses import dataclass

from dconsole.generate_cmd.validators import (
    create_machine_name,
    validate_class_name,
    validate_machine_name,
    validate_module_name,
)


@dataclass
class PluginConditionOpts:
    """All options for the generate:plugin:condition command."""

    module: str
    class_name: str = "ExampleCondition"
    label: str = "Example condition"
    plugin_id: str | None = None
    context_definition_id: str = "entity:node"
    context_definition_label: str = "Node"
    context_definition_required: bool = True

    @property
    def resolved_plugin_id(self):
        return self.plugin_id or create_machine_name(self.label)

    def validate(self):
        validate_module_name(self.module)
        validate_class_name(self.class_name)
        validate_machine_name(self.resolved_plugin_id, "'--plugin-id'")
