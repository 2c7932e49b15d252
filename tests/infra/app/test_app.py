"""
Tests for app/app.py.

Tests key functionality including:
- Settings flowing from config into logging, rendering and dispatch
- run() and main() exit codes
- Global flag access after a run
"""

import logging
from unittest.mock import patch

import pytest

from routecli.app import EXIT_INTERRUPTED, App
from routecli.config import Config
from routecli.constants import EXIT_NOT_FOUND, EXIT_OK
from routecli.router import DispatchState
from routecli.ui import BufferedOutput
from tests.helpers.commands import FailingCommand, RecordingCommand


def _config(**sections) -> Config:
    config = Config(enable_env_overrides=False)
    config.output.color = False
    for section, values in sections.items():
        for key, value in values.items():
            config[section][key] = value
    return config


@pytest.fixture
def app() -> App:
    app = App(_config(), name="dm", version="dm 1.0")
    app.out = BufferedOutput()
    app.err = BufferedOutput()
    app.add_category("domain", "Domain Commands")
    app.add("domain create", RecordingCommand("Create Domain"), aliases=["dc"])
    app.add("status", RecordingCommand("Status"))
    return app


@pytest.mark.unit
class TestAppSettings:
    """Test how configuration is applied."""

    def test_name_and_version_from_config(self):
        config = _config(app={"name": "Domain Manager", "version": "DM v2"})

        app = App(config)

        assert app.router.app_name == "Domain Manager"
        assert app.router.version_message == "DM v2"

    def test_arguments_override_config(self):
        config = _config(app={"name": "Domain Manager"})

        assert App(config, name="dm").router.app_name == "dm"

    def test_default_config(self):
        app = App()

        assert app.config.get("output.width") == 80
        assert app.router.app_name == ""

    def test_setup_logging_level(self):
        app = App(_config(logging={"level": "debug", "colors": False}))

        lg = app.setup_logging()

        assert lg.name == "routecli"
        assert lg.level == logging.DEBUG
        assert app.lg is lg

    def test_renderer_settings(self):
        app = App(_config(output={"width": 100, "color": True}))

        renderer = app.create_renderer()

        assert renderer.width == 100
        assert renderer.color is True

    def test_empty_width_env_falls_back_to_default(self, monkeypatch):
        monkeypatch.setenv("ROUTECLI_OUTPUT_WIDTH", "")
        app = App()

        assert app.config.get("output.width") is None
        assert app.create_renderer().width == 80

    @pytest.mark.parametrize("width", ["wide", 0, -5])
    def test_invalid_width_falls_back_to_default(self, width):
        app = App(_config(output={"width": width}))

        assert app.create_renderer().width == 80

    def test_color_detected_when_unset(self):
        config = _config()
        config.output.color = None

        with patch("routecli.app.app.should_use_color", return_value=True):
            assert App(config).create_renderer().color is True

    def test_confirm_typos_setting(self):
        app = App(_config(dispatch={"confirm_typos": True}))

        assert app.create_dispatcher().confirm_typos is True


@pytest.mark.unit
class TestAppRun:
    """Test run() and main()."""

    def test_run_executes_command(self, app):
        assert app.run(["dc", "example.com"]) == EXIT_OK
        assert app.last_outcome.state == DispatchState.EXECUTING
        assert app.last_outcome.descriptor.name == "domain create"

    def test_run_version(self, app):
        assert app.run(["--version"]) == EXIT_OK
        assert app.out.text == "dm 1.0\n"

    def test_run_unknown(self, app):
        assert app.run(["reboot"]) == EXIT_NOT_FOUND
        assert "Command not found: 'reboot'" in app.out.text

    def test_run_reads_sys_argv(self, app):
        with patch("sys.argv", ["dm", "status"]):
            app.run()

        assert app.last_outcome.descriptor.name == "status"

    def test_run_sets_up_logging_once(self, app):
        app.run(["status"])
        lg = app.lg
        app.run(["status"])

        assert lg is not None
        assert app.lg is lg

    def test_main_exits_with_code(self, app):
        with pytest.raises(SystemExit) as exc_info:
            app.main(["reboot"])

        assert exc_info.value.code == EXIT_NOT_FOUND

    def test_main_interrupted(self, app):
        app.add("wait", FailingCommand(KeyboardInterrupt()))

        with pytest.raises(SystemExit) as exc_info:
            app.main(["wait"])

        assert exc_info.value.code == EXIT_INTERRUPTED

    def test_globals_after_run(self, app):
        app.global_flag("-c", "--config", True, "Config file")
        app.ignore("--trace")

        app.run(["status", "--trace", "--config", "dm.yaml"])

        assert app.has_global("-c")
        assert app.get_global("--config") == "dm.yaml"
        assert app.last_outcome.invocation.flags == set()
