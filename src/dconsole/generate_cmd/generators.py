"""Look up code generators registered under the ``dconsole.generators`` entry-point group.

A generator is any object with a ``generate(opts)`` method. Packages expose a
factory (usually the generator class) under the generator's name::

    [project.entry-points."dconsole.generators"]
    form = "my_generators.form:FormGenerator"
    "plugin.condition" = "my_generators.plugin:PluginConditionGenerator"
"""

import logging
from importlib.metadata import entry_points

logger = logging.getLogger(__name__)

GENERATORS_GROUP = "dconsole.generators"


class GeneratorNotFoundError(LookupError):
    """No generator is registered under the requested name."""


def available_generators():
    return sorted(ep.name for ep in entry_points(group=GENERATORS_GROUP))


def load_generator(name):
    """Instantiate the generator registered as *name*.

    Raises:
        GeneratorNotFoundError: If no installed package registers *name*.
    """
    for ep in entry_points(group=GENERATORS_GROUP):
        if ep.name == name:
            logger.debug("Loading generator %s from %s", name, ep.value)
            factory = ep.load()
            return factory()
    raise GeneratorNotFoundError(
        f"No generator registered for \"{name}\" in entry point group {GENERATORS_GROUP}"
    )
