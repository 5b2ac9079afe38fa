"""DrushSite: reads the state of a Drupal installation through `drush`."""

import json
import subprocess
from typing import Any, Dict, List


class SiteError(RuntimeError):
    """A drush call failed or returned output that could not be parsed."""


def php_string(value: str) -> str:
    """Quote *value* as a single-quoted PHP string literal."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


class DrushSite:
    """Wraps the drush calls needed to describe a site.

    All subprocess calls go through _run_drush() for consistency.
    """

    def __init__(self, root: str, drush: str = "drush"):
        self.root = root
        self.drush = drush
        self._status_cache = None

    def _run_drush(self, args):
        try:
            return subprocess.run(
                [self.drush, f"--root={self.root}", *args],
                capture_output=True,
                text=True,
            )
        except OSError as e:
            raise SiteError(f"cannot run {self.drush}: {e}") from e

    def _check(self, args, result):
        if result.returncode != 0:
            raise SiteError(f"drush {' '.join(args)} failed: {result.stderr.strip()}")

    def _drush_json(self, args) -> Any:
        result = self._run_drush([*args, "--format=json"])
        self._check(args, result)
        try:
            return json.loads(result.stdout or "null")
        except json.JSONDecodeError as e:
            raise SiteError(f"drush {' '.join(args)} returned invalid JSON: {e}") from e

    def _php_eval(self, code: str) -> str:
        args = ["php:eval", code]
        result = self._run_drush(args)
        self._check(args, result)
        return result.stdout.strip()

    def _status(self) -> Dict[str, Any]:
        if self._status_cache is None:
            self._status_cache = self._drush_json(
                ["core:status", "--fields=*", "--show-passwords"]
            ) or {}
        return self._status_cache

    def requirements(self) -> List[Dict[str, Any]]:
        data = self._drush_json(["core:requirements"]) or []
        rows = data.values() if isinstance(data, dict) else data
        return [
            {"title": row.get("title", ""), "value": row.get("value", "")}
            for row in rows
        ]

    def hash_salt(self) -> str:
        return self._php_eval(r"echo \Drupal\Core\Site\Settings::getHashSalt();")

    def connection_info(self) -> Dict[str, Any]:
        status = self._status()
        return {
            "driver": status.get("db-driver", ""),
            "host": status.get("db-hostname", ""),
            "database": status.get("db-name", ""),
            "port": status.get("db-port", ""),
            "username": status.get("db-username", ""),
            "password": status.get("db-password", ""),
        }

    def theme_config(self) -> Dict[str, str]:
        data = self._drush_json(["config:get", "system.theme"]) or {}
        return {"default": data.get("default", ""), "admin": data.get("admin", "")}

    def theme_path(self, theme: str) -> str:
        return self._php_eval(
            f"echo \\Drupal::service('extension.list.theme')->getPath({php_string(theme)});"
        )

    def temporary_directory(self) -> str:
        return self._status().get("temp", "")

    def config_directory(self, kind: str) -> str:
        return self._php_eval(f"echo config_get_config_directory({php_string(kind)});")
