"""Tests for generator discovery and GenerateCommand."""

from unittest.mock import MagicMock, patch

import click
import pytest

from dconsole.generate_cmd.form_opts import FormOpts
from dconsole.generate_cmd.generate_command import GenerateCommand
from dconsole.generate_cmd.generators import (
    GENERATORS_GROUP,
    GeneratorNotFoundError,
    available_generators,
    load_generator,
)


def _entry_point(name, factory):
    ep = MagicMock()
    ep.name = name
    ep.value = f"pkg.generators:{name}"
    ep.load.return_value = factory
    return ep


class FakeFormGenerator:

    def __init__(self):
        self.generated = []

    def generate(self, opts):
        self.generated.append(opts)
        return "ok"


class TestLoadGenerator:

    def test_instantiates_registered_factory(self):
        eps = [_entry_point("form", FakeFormGenerator)]
        with patch("dconsole.generate_cmd.generators.entry_points", return_value=eps) as mock_eps:
            generator = load_generator("form")
        assert isinstance(generator, FakeFormGenerator)
        mock_eps.assert_called_once_with(group=GENERATORS_GROUP)

    def test_unknown_name_raises(self):
        eps = [_entry_point("form", FakeFormGenerator)]
        with patch("dconsole.generate_cmd.generators.entry_points", return_value=eps):
            with pytest.raises(GeneratorNotFoundError, match="plugin.condition"):
                load_generator("plugin.condition")

    def test_only_matching_entry_point_is_loaded(self):
        other = _entry_point("plugin.condition", FakeFormGenerator)
        eps = [other, _entry_point("form", FakeFormGenerator)]
        with patch("dconsole.generate_cmd.generators.entry_points", return_value=eps):
            load_generator("form")
        other.load.assert_not_called()

    def test_available_generators_sorted(self):
        eps = [_entry_point("plugin.condition", object), _entry_point("form", object)]
        with patch("dconsole.generate_cmd.generators.entry_points", return_value=eps):
            assert available_generators() == ["form", "plugin.condition"]


class TestGenerateCommand:

    def test_validates_then_generates(self):
        generator = FakeFormGenerator()
        loaded = []

        def loader(name):
            loaded.append(name)
            return generator

        opts = FormOpts(module="example")
        result = GenerateCommand(opts, "form", loader=loader).execute()

        assert loaded == ["form"]
        assert generator.generated == [opts]
        assert result == "ok"

    def test_invalid_options_skip_generator(self):
        loader = MagicMock()
        with pytest.raises(click.BadParameter):
            GenerateCommand(FormOpts(module="Bad-Name"), "form", loader=loader).execute()
        loader.assert_not_called()
