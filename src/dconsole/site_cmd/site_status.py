"""Collect and print the status of a Drupal installation."""

import json

from tabulate import tabulate

from dconsole.site_cmd.drush_site import SiteError

GROUPS = ("system", "database", "theme", "directory", "configuration")

CONNECTION_INFO_KEYS = ("driver", "host", "database", "port", "username", "password")

LABELS = {
    "system": "System",
    "database": "Database connection",
    "theme": "Themes",
    "directory": "Directories",
    "configuration": "Configuration",
    "hash_salt": "Hash salt",
    "console": "Console",
    "driver": "Driver",
    "host": "Host",
    "database_name": "Database",
    "port": "Port",
    "username": "Username",
    "password": "Password",
    "connection": "Connection",
    "directory_root": "Root",
    "directory_temporary": "Temporary",
    "directory_theme_default": "Default theme",
    "directory_theme_admin": "Admin theme",
    "active": "Active",
    "staging": "Staging",
}


def format_connection(info):
    """Build the connection string shown under the database group.

    Format: ``driver//username:password@host[:port]/database``.
    """
    port = info.get("port")
    return "{}//{}:{}@{}{}/{}".format(
        info.get("driver", ""),
        info.get("username", ""),
        info.get("password", ""),
        info.get("host", ""),
        f":{port}" if port else "",
        info.get("database", ""),
    )


def _system_data(site, console_version):
    data = {}
    for requirement in site.requirements():
        data[requirement["title"]] = requirement["value"]
    try:
        hash_salt = site.hash_salt()
    except SiteError:
        hash_salt = ""
    data[LABELS["hash_salt"]] = hash_salt
    data[LABELS["console"]] = console_version
    return data


def _database_data(site):
    info = site.connection_info()
    data = {}
    for key in CONNECTION_INFO_KEYS:
        label = LABELS["database_name"] if key == "database" else LABELS[key]
        data[label] = info.get(key, "")
    data[LABELS["connection"]] = format_connection(info)
    return data


def _directory_data(site, themes):
    return {
        LABELS["directory_root"]: site.root,
        LABELS["directory_temporary"]: site.temporary_directory(),
        LABELS["directory_theme_default"]: "/" + site.theme_path(themes["default"]),
        LABELS["directory_theme_admin"]: "/" + site.theme_path(themes["admin"]),
    }


def _configuration_data(site):
    try:
        active = site.config_directory("active")
        staging = site.config_directory("staging")
    except SiteError:
        active = ""
        staging = ""
    return {LABELS["active"]: active, LABELS["staging"]: staging}


def collect_site_status(site, console_version):
    """Gather the status groups of *site*, keyed by group name in display order."""
    themes = site.theme_config()
    return {
        "system": _system_data(site, console_version),
        "database": _database_data(site),
        "theme": {
            "theme_default": themes["default"],
            "theme_admin": themes["admin"],
        },
        "directory": _directory_data(site, themes),
        "configuration": _configuration_data(site),
    }


def render_json(site_data):
    return json.dumps(site_data, indent=4)


def render_table(site_data):
    """Render *site_data* as a compact two-column table, one header per group."""
    if not site_data:
        return ""
    groups = [(group, list(site_data.get(group, {}).items())) for group in GROUPS]
    rows = [
        (str(key), "" if value is None else " ".join(str(value).splitlines()))
        for _, items in groups
        for key, value in items
    ]
    table_lines = iter(tabulate(rows, tablefmt="plain", disable_numparse=True).splitlines())

    lines = []
    for group, items in groups:
        lines.append(LABELS[group])
        for _ in items:
            lines.append(f"  {next(table_lines)}".rstrip())
    return "\n".join(lines)
