"""Hierarchical configuration store read from YAML files and addressed by dotted keys."""

import logging
import os
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path(__file__).parent / "config.yml"
USER_CONFIG_FILE = os.path.join("~", ".console", "config.yml")
LOCAL_CONFIG_FILE = os.path.join(".console", "config.yml")


class ConfigurationError(Exception):
    """Raised when a configuration file cannot be read or parsed."""


class _Missing:

    def __repr__(self):
        return "MISSING"

    def __bool__(self):
        return False


MISSING = _Missing()


def deep_merge(base, override):
    """Return a new dict with *override* merged into *base*.

    Nested mappings are merged recursively; any other value in *override*
    replaces the one in *base*.
    """
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class Config:
    """Read-only view over merged configuration data."""

    def __init__(self, data=None, sources=()):
        self._data = data or {}
        self.sources = list(sources)

    def get(self, key, default=None):
        """Look up a dotted key such as ``application.default.commands``.

        Returns *default* when any segment is missing or empty, or when an
        intermediate value is not a mapping.
        """
        node = self._data
        for segment in key.split("."):
            if not segment or not isinstance(node, dict) or segment not in node:
                return default
            node = node[segment]
        return node

    def __contains__(self, key):
        return self.get(key, MISSING) is not MISSING


def read_config_file(path):
    """Parse one YAML config file into a dict.

    Raises:
        ConfigurationError: If the file is unreadable, malformed, or its top
            level is not a mapping.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error("Error parsing YAML config file %s: %s", path, e)
        raise ConfigurationError(f"Malformed config file {path}: {e}") from e
    except OSError as e:
        logger.error("Error reading config file %s: %s", path, e)
        raise ConfigurationError(f"Cannot read config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file {path} must contain a mapping, got {type(data).__name__}"
        )
    return data


def default_config_paths():
    """Implicit config files, lowest precedence first."""
    return [
        str(DEFAULT_CONFIG_FILE),
        os.path.expanduser(USER_CONFIG_FILE),
        LOCAL_CONFIG_FILE,
    ]


def load_config(config_file=None, search_paths=None):
    """Merge the implicit config files and an optional explicit one.

    Implicit files that do not exist are skipped. An explicit *config_file*
    must exist.
    """
    paths = default_config_paths() if search_paths is None else list(search_paths)
    data = {}
    sources = []

    for path in paths:
        if not os.path.isfile(path):
            continue
        logger.debug("Loading config file %s", path)
        data = deep_merge(data, read_config_file(path))
        sources.append(path)

    if config_file is not None:
        if not os.path.isfile(config_file):
            raise ConfigurationError(f"Config file not found: {config_file}")
        logger.debug("Loading explicit config file %s", config_file)
        data = deep_merge(data, read_config_file(config_file))
        sources.append(config_file)

    return Config(data, sources)
