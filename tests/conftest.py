import pytest

from dconsole import config


@pytest.fixture(autouse=True)
def packaged_config_only(monkeypatch):
    """Keep ~/.console and ./.console config files out of the tests."""
    monkeypatch.setattr(config, "default_config_paths",
                        lambda: [str(config.DEFAULT_CONFIG_FILE)])
