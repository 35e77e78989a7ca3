"""Smoke tests for CLI commands.

Tests that CLI commands parse correctly and produce the expected output.
Uses Click's CliRunner, with logging sent to a temporary file.
"""

import pytest
from click.testing import CliRunner

from controlshaper.cli.main import cli
from controlshaper.models import Curve, DeviceType, SettingName
from controlshaper.services import SettingsStore
from controlshaper.utils import PydanticPersistence


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def base_args(temp_dir):
    """Top-level options isolating config and logs in a temp directory."""
    return [
        "--config", str(temp_dir / "config.json"),
        "--log-file", str(temp_dir / "controlshaper.log"),
    ]


@pytest.fixture
def settings_file(temp_dir):
    """Saved overrides for joystick instance 2."""
    store = SettingsStore()
    store.set(DeviceType.JOYSTICK, 2, "flight.flight_move_pitch", SettingName.INVERT, True)
    store.set(
        DeviceType.JOYSTICK, 2, "flight.flight_throttle", SettingName.CURVE,
        Curve.from_pairs([(0.5, 0.25)]),
    )
    path = temp_dir / "settings.json"
    PydanticPersistence.save_json(store.snapshot(), path)
    return path


@pytest.mark.integration
class TestCLIHelp:
    """Test that all commands have working help text."""

    def test_main_help(self, runner):
        """Test main CLI help displays."""
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Controlshaper" in result.output
        for command in ("tree", "presets", "evaluate", "export"):
            assert command in result.output

    def test_version_flag(self, runner):
        """Test --version flag works."""
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    @pytest.mark.parametrize("command", ["tree", "presets", "evaluate", "export"])
    def test_command_help(self, runner, base_args, command):
        """Test each command's help."""
        result = runner.invoke(cli, [*base_args, command, "--help"])
        assert result.exit_code == 0


@pytest.mark.integration
class TestTreeCommand:
    """Test the tree command."""

    def test_show_joystick_tree(self, runner, base_args, option_tree_file):
        """Test nodes are listed with resolved visibility and defaults."""
        result = runner.invoke(cli, [*base_args, "tree", str(option_tree_file), "--device", "joystick"])
        assert result.exit_code == 0, result.output
        assert "joystick: 4 instance(s), sensitivity 0.1-3" in result.output

        pitch_line = next(
            line for line in result.output.splitlines() if "(flight.flight_move_pitch)" in line
        )
        assert "shows: invert, curve, sensitivity" in pitch_line
        assert "invert=1" in pitch_line
        assert "exponent=1.5" in pitch_line
        assert "curve=2 point(s)" in pitch_line

        assert "curve=reset" in result.output

    def test_missing_device_tree(self, runner, base_args, option_tree_file):
        """Test a device type without definitions shows the empty tree."""
        result = runner.invoke(cli, [*base_args, "tree", str(option_tree_file), "-d", "gamepad"])
        assert result.exit_code == 0
        assert "No gamepad option tree" in result.output
        assert "Gamepad Settings (root)" in result.output

    def test_malformed_definitions(self, runner, base_args, temp_dir):
        """Test invalid XML is reported without a traceback."""
        path = temp_dir / "broken.xml"
        path.write_text("<optiontree", encoding="utf-8")
        result = runner.invoke(cli, [*base_args, "tree", str(path)])
        assert result.exit_code == 1
        assert "invalid XML syntax" in result.output

    def test_no_definitions_configured(self, runner, base_args):
        """Test a usage error when no file is given or configured."""
        result = runner.invoke(cli, [*base_args, "tree"])
        assert result.exit_code == 2
        assert "No definitions file" in result.output


@pytest.mark.integration
class TestCurveCommands:
    """Test the presets and evaluate commands."""

    def test_presets(self, runner, base_args):
        """Test every preset is listed."""
        result = runner.invoke(cli, [*base_args, "presets"])
        assert result.exit_code == 0
        for name in ("linear:", "smooth:", "aggressive:", "precise:"):
            assert name in result.output
        assert "in=0.2 out=0.05" in result.output

    def test_evaluate_identity(self, runner, base_args):
        """Test the default response is the identity."""
        result = runner.invoke(cli, [*base_args, "evaluate", "--steps", "2"])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "0.0000\t0.0000", "0.5000\t0.5000", "1.0000\t1.0000",
        ]

    def test_evaluate_points(self, runner, base_args):
        """Test a curve given as points."""
        result = runner.invoke(cli, [*base_args, "evaluate", "--point", "0.5", "0.25", "-n", "2"])
        assert result.exit_code == 0
        assert result.output.splitlines()[1] == "0.5000\t0.2500"

    def test_evaluate_exponent(self, runner, base_args):
        """Test exponent shaping."""
        result = runner.invoke(cli, [*base_args, "evaluate", "--exponent", "2", "-n", "2"])
        assert result.exit_code == 0
        assert result.output.splitlines()[1] == "0.5000\t0.2500"

    def test_evaluate_preset(self, runner, base_args):
        """Test a preset curve."""
        result = runner.invoke(cli, [*base_args, "evaluate", "--preset", "smooth", "-n", "5"])
        assert result.exit_code == 0
        assert "0.2000\t0.0500" in result.output

    def test_evaluate_rejects_out_of_range_point(self, runner, base_args):
        """Test point coordinates must be within 0-1."""
        result = runner.invoke(cli, [*base_args, "evaluate", "--point", "1.5", "0.2"])
        assert result.exit_code == 2


@pytest.mark.integration
class TestExportCommand:
    """Test the export command."""

    def test_export_with_curves(self, runner, base_args, settings_file):
        """Test the XML export of joystick instance 2."""
        result = runner.invoke(
            cli, [*base_args, "export", str(settings_file), "--device", "joystick", "--instance", "2"]
        )
        assert result.exit_code == 0, result.output
        assert '<options type="joystick" instance="2">' in result.output
        assert '<flight_move_pitch invert="1"/>' in result.output
        assert '<point in="0.5" out="0.25"/>' in result.output

    def test_export_invert_only(self, runner, base_args, settings_file):
        """Test curve overrides are left out with --invert-only."""
        result = runner.invoke(
            cli,
            [*base_args, "export", str(settings_file), "-d", "joystick", "-i", "2", "--invert-only"],
        )
        assert result.exit_code == 0
        assert "flight_move_pitch" in result.output
        assert "flight_throttle" not in result.output

    def test_export_without_overrides(self, runner, base_args, settings_file):
        """Test a pair without overrides."""
        result = runner.invoke(cli, [*base_args, "export", str(settings_file), "-d", "keyboard"])
        assert result.exit_code == 0
        assert "No overrides for keyboard instance 1" in result.output

    def test_export_missing_settings(self, runner, base_args, temp_dir):
        """Test a missing settings file is reported."""
        result = runner.invoke(
            cli, [*base_args, "export", str(temp_dir / "missing.json"), "-d", "joystick"]
        )
        assert result.exit_code == 1
        assert "ERROR" in result.output

    def test_device_required(self, runner, base_args, settings_file):
        """Test --device is required."""
        result = runner.invoke(cli, [*base_args, "export", str(settings_file)])
        assert result.exit_code == 2
