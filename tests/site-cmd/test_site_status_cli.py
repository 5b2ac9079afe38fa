"""CLI integration tests for site:status."""

import json
from unittest.mock import patch

import yaml
from click.testing import CliRunner

from fake_site import FakeSite

from dconsole.cli import main


def _invoke(args, site=None):
    with patch("dconsole.site_cmd.cli.DrushSite") as mock_site_cls, \
         patch("dconsole.site_cmd.cli.console_version", return_value="0.1.0"):
        mock_site_cls.return_value = site or FakeSite(hash_salt="abc")
        return CliRunner().invoke(main, args)


class TestSiteStatusCommand:

    def test_table_is_default_format(self):
        result = _invoke(["site:status"])
        assert result.exit_code == 0
        assert "Database connection" in result.output
        assert "mysql//drupal:secret@localhost:3306/drupal" in result.output

    def test_json_format(self):
        result = _invoke(["site:status", "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["theme"]["theme_default"] == "olivero"
        assert data["system"]["Console"] == "0.1.0"

    def test_configured_format_used_when_not_given(self, tmp_path):
        config_file = tmp_path / "config.yml"
        config_file.write_text(yaml.safe_dump({"application": {"default": {"commands": {
            "site": {"status": {"options": {"format": "json"}}},
        }}}}))
        result = _invoke(["--config", str(config_file), "site:status"])
        assert result.exit_code == 0
        assert json.loads(result.output)["database"]["Driver"] == "mysql"

    def test_unknown_format_rejected(self):
        result = _invoke(["site:status", "--format", "xml"])
        assert result.exit_code == 2

    def test_site_error_reported(self):
        result = _invoke(["site:status"], site=FakeSite(requirements_error="drush not bootstrapped"))
        assert result.exit_code == 1
        assert "drush not bootstrapped" in result.output

    def test_missing_drush_reported(self):
        with patch("dconsole.site_cmd.drush_site.subprocess.run") as mock_run:
            mock_run.side_effect = FileNotFoundError(2, "No such file or directory", "drush")
            result = CliRunner().invoke(main, ["site:status"])
        assert result.exit_code == 1
        assert "cannot run drush" in result.output
