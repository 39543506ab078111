"""Smoke tests for CLI commands.

Uses Click's CliRunner; the TUI itself is patched out.
"""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from hexpicker.cli.main import cli, resolve_log_path
from hexpicker.models import OutputFormat, Theme


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.mark.integration
class TestCLIHelp:
    """Test that all commands have working help text."""

    def test_main_help(self, runner):
        result = runner.invoke(cli, ['--help'])
        assert result.exit_code == 0
        assert 'Hex Picker' in result.output
        assert '--color' in result.output
        assert '--log-file' in result.output

    def test_version_flag(self, runner):
        result = runner.invoke(cli, ['--version'])
        assert result.exit_code == 0
        assert '0.1.0' in result.output

    def test_formats_help(self, runner):
        result = runner.invoke(cli, ['formats', '--help'])
        assert result.exit_code == 0
        assert '--copied' in result.output

    def test_config_help(self, runner):
        result = runner.invoke(cli, ['config', '--help'])
        assert result.exit_code == 0
        assert 'show' in result.output
        assert 'path' in result.output


@pytest.mark.integration
class TestFormatsCommand:
    """The formats command."""

    def test_css_display_text(self, runner):
        result = runner.invoke(cli, ['formats', '#cc85c5'])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "hsl(306  , 41% , 66% )",
            "hsv(306  , 35% , 80% )",
            "rgb(204  , 133 , 197 )",
            "#cc85c5",
        ]

    def test_css_copied_text(self, runner):
        result = runner.invoke(cli, ['formats', '#CC85C5', '--copied'])
        assert result.exit_code == 0
        assert "hsl(305.9, 41%, 66.1%)" in result.output.splitlines()

    def test_literal(self, runner):
        result = runner.invoke(cli, ['formats', '#cc85c5', '--output', 'literal', '--copied'])
        assert result.exit_code == 0
        assert result.output.splitlines()[-1] == 'hex("#cc85c5")'

    def test_invalid_color(self, runner):
        result = runner.invoke(cli, ['formats', 'cc85c5'])
        assert result.exit_code == 2
        assert "is not a hex color" in result.output


@pytest.mark.integration
class TestConfigCommand:
    """The config command group."""

    def test_path(self, runner):
        result = runner.invoke(cli, ['config', 'path'])
        assert result.exit_code == 0
        assert result.output.strip().endswith("config.json")

    def test_show_defaults_for_missing_file(self, runner, temp_dir):
        result = runner.invoke(cli, ['config', 'show', '--config-file', str(temp_dir / 'none.json')])
        assert result.exit_code == 0
        assert 'not created yet' in result.output
        assert '"initial_color": "#000000"' in result.output

    def test_show_field(self, runner, temp_dir):
        path = temp_dir / 'config.json'
        path.write_text(json.dumps({"theme": "light"}))
        result = runner.invoke(cli, ['config', 'show', '-c', str(path), '--field', 'theme'])
        assert result.exit_code == 0
        assert result.output.strip() == "theme: light"

    def test_show_unknown_field(self, runner, temp_dir):
        result = runner.invoke(cli, ['config', 'show', '-c', str(temp_dir / 'x.json'), '-f', 'nope'])
        assert result.exit_code == 2

    def test_show_invalid_file(self, runner, temp_dir):
        path = temp_dir / 'config.json'
        path.write_text('{"theme": "sepia"}')
        result = runner.invoke(cli, ['config', 'show', '-c', str(path)])
        assert result.exit_code == 1
        assert "theme" in result.output


@pytest.mark.integration
class TestRunApp:
    """Starting the TUI from the main command."""

    @pytest.fixture
    def args(self, temp_dir):
        return ['--config-file', str(temp_dir / 'config.json'), '--log-file', str(temp_dir / 'app.log')]

    @patch("hexpicker.tui.HexPickerApp")
    def test_runs_app_with_config(self, mock_app, runner, args, temp_dir):
        result = runner.invoke(cli, args)

        assert result.exit_code == 0
        mock_app.return_value.run.assert_called_once()
        config = mock_app.call_args.kwargs["config"]
        assert config.initial_color == "#000000"
        assert (temp_dir / 'config.json').exists()

    @patch("hexpicker.tui.HexPickerApp")
    def test_command_line_overrides(self, mock_app, runner, args):
        result = runner.invoke(cli, args + ['--color', '#CC85C5', '--theme', 'light', '-o', 'literal'])

        assert result.exit_code == 0
        config = mock_app.call_args.kwargs["config"]
        assert config.initial_color == "#cc85c5"
        assert config.theme == Theme.LIGHT
        assert config.output == OutputFormat.LITERAL

    @patch("hexpicker.tui.HexPickerApp")
    def test_invalid_color_option(self, mock_app, runner, args):
        result = runner.invoke(cli, args + ['--color', 'red'])

        assert result.exit_code == 2
        assert "is not a hex color" in result.output
        mock_app.assert_not_called()

    @patch("hexpicker.tui.HexPickerApp")
    def test_app_errors_are_reported(self, mock_app, runner, args, temp_dir):
        mock_app.return_value.run.side_effect = RuntimeError("terminal gone")

        result = runner.invoke(cli, args)

        assert result.exit_code == 1
        assert "terminal gone" in result.output
        assert str(temp_dir / 'app.log') in result.output


@pytest.mark.unit
class TestLogPath:
    """Log file location."""

    def test_custom_log_file_wins(self, temp_dir):
        assert resolve_log_path(True, temp_dir / 'x.log') == temp_dir / 'x.log'

    def test_debug_logs_to_cwd(self):
        assert resolve_log_path(True, None).name == "hexpicker-debug.log"

    def test_default_location(self):
        path = resolve_log_path(False, None)
        assert path.parent.name == "logs"
        assert path.name == "hexpicker.log"
