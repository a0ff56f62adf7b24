"""Tests for the ajaxwire CLI.

Runs the click commands in-process with CliRunner.
"""

import pytest
from click.testing import CliRunner

import ajaxwire.cli.main as cli_main
from ajaxwire import __version__
from ajaxwire.cli.main import cli, main


@pytest.fixture
def runner():
    """Provide a Click CLI runner for testing."""
    return CliRunner()


class TestShowCommand:
    """Test the show command."""

    def test_show_defaults(self, runner):
        result = runner.invoke(cli, ["show"])
        assert result.exit_code == 0, result.output
        assert "Container Bindings" in result.output
        assert "scriptCompressed" in result.output
        assert "bindings configured" in result.output

    def test_init_params_are_shown(self, runner, resource_root):
        result = runner.invoke(cli, ["show", "-p", "greeting=hello", "--resource-root", str(resource_root)])
        assert result.exit_code == 0, result.output
        assert "greeting" in result.output
        assert "hello" in result.output

    def test_named_resource_is_loaded(self, runner, write_resource, resource_root):
        write_resource("app.yml", "settings:\n  fromFile: loaded\n")
        result = runner.invoke(
            cli, ["show", "--param", "config=/app.yml", "--resource-root", str(resource_root)]
        )
        assert result.exit_code == 0, result.output
        assert "fromFile" in result.output
        assert "loaded" in result.output

    def test_configuration_error_exits_with_status_1(self, runner, resource_root):
        result = runner.invoke(cli, ["show", "-p", "config=missing.yml", "--resource-root", str(resource_root)])
        assert result.exit_code == 1
        assert "Configuration failed" in result.output

    def test_broken_bean_module_exits_with_status_1(self, runner, write_resource, resource_root):
        write_resource("app.yml", "beans:\n  ajaxwire.Remoter: broken_plugin_module:Remoter\n")
        result = runner.invoke(cli, ["show", "-p", "config=app.yml", "--resource-root", str(resource_root)])
        assert result.exit_code == 1
        assert "Configuration failed" in result.output

    def test_malformed_param_is_rejected(self, runner):
        result = runner.invoke(cli, ["show", "-p", "no-equals-sign"])
        assert result.exit_code == 2
        assert "NAME=VALUE" in result.output

    def test_verbose_adds_capability_report(self, runner):
        result = runner.invoke(cli, ["show", "--verbose"])
        assert result.exit_code == 0, result.output
        assert "Capabilities" in result.output
        assert "Bound Type" in result.output

    def test_compact_output_omits_capability_report(self, runner):
        result = runner.invoke(cli, ["show"])
        assert "Bound Type" not in result.output


class TestVersion:
    def test_version_command(self, runner):
        result = runner.invoke(cli, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_version_option(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_lists_commands(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "show" in result.output
        assert "version" in result.output


class TestMainEntryPoint:
    """Test the console script wrapper around the click group."""

    def test_runs_the_group(self, monkeypatch):
        monkeypatch.setattr("sys.argv", ["ajaxwire", "version"])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 0

    def test_keyboard_interrupt_exits_with_130(self, monkeypatch, capsys):
        def interrupted():
            raise KeyboardInterrupt

        monkeypatch.setattr(cli_main, "cli", interrupted)
        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 130
        assert "Goodbye!" in capsys.readouterr().err
