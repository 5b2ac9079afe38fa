"""Read chain files: YAML lists of commands to run one after another.

Example::

    commands:
      - command: generate:form
        options:
          module: example
          class-name: ContactForm
          inputs:
            - email:email
      - command: site:status
        options:
          format: json
"""

from dataclasses import dataclass, field

import yaml


class ChainFileError(Exception):
    """The chain file is missing, malformed, or names an invalid step."""


def option_args(name, value):
    """Turn one option into command-line arguments.

    ``True`` becomes a bare flag, ``False`` and ``None`` are omitted, and lists
    repeat the option once per item.
    """
    flag = f"--{name}"
    if value is True:
        return [flag]
    if value is False or value is None:
        return []
    if isinstance(value, list):
        args = []
        for item in value:
            args.extend([flag, str(item)])
        return args
    return [flag, str(value)]


@dataclass
class ChainStep:
    command: str
    options: dict = field(default_factory=dict)
    arguments: dict = field(default_factory=dict)

    def to_args(self):
        args = [self.command]
        for name, value in self.options.items():
            args.extend(option_args(name, value))
        positional = []
        for value in self.arguments.values():
            if isinstance(value, list):
                positional.extend(str(item) for item in value)
            elif value is not None:
                positional.append(str(value))
        if positional:
            args.append("--")
            args.extend(positional)
        return args


def _parse_step(index, item):
    if not isinstance(item, dict) or not item.get("command"):
        raise ChainFileError(f"Step {index} must be a mapping with a \"command\" key")
    options = item.get("options") or {}
    arguments = item.get("arguments") or {}
    if not isinstance(options, dict) or not isinstance(arguments, dict):
        raise ChainFileError(f"Step {index}: \"options\" and \"arguments\" must be mappings")
    if item["command"] == "chain":
        raise ChainFileError(f"Step {index}: a chain cannot run another chain")
    return ChainStep(command=str(item["command"]), options=options, arguments=arguments)


def load_chain_file(path):
    """Parse *path* into a list of ChainStep, in file order."""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ChainFileError(f"Malformed chain file {path}: {e}") from e
    except OSError as e:
        raise ChainFileError(f"Cannot read chain file {path}: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("commands"), list):
        raise ChainFileError(f"Chain file {path} must contain a \"commands\" list")
    return [_parse_step(index, item) for index, item in enumerate(data["commands"], start=1)]
