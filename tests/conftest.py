"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from controlshaper.models import DeviceType
from controlshaper.services import ControlsEditorService, SettingsStore
from controlshaper.tree import parse_option_trees

OPTION_TREE_XML = """\
<controls>
  <optiontree type="keyboard" UILabel="@ui_keyboard">
    <optiongroup name="mouse" UILabel="@ui_mouse" UIShowInvert="1">
      <optiongroup name="mouse_pitch" UILabel="@ui_pitch" invert_cvar="cl_invert_pitch"/>
      <optiongroup name="mouse_yaw" UILabel="@ui_yaw" UIShowInvert="0"/>
    </optiongroup>
  </optiontree>
  <optiontree type="joystick" instances="4"
              UISensitivityMin="0.1" UISensitivityMax="3">
    <optiongroup name="flight" UILabel="@ui_flight" UIShowInvert="0" UIShowCurve="1">
      <optiongroup name="flight_move_pitch" UIShowInvert="1" invert="1" exponent="1.5">
        <nonlinearity_curve>
          <point in="0.2" out="0.1"/>
          <point in="0.8" out="0.9"/>
        </nonlinearity_curve>
      </optiongroup>
      <optiongroup name="flight_move_yaw" UIShowInvert="-1" exponent="abc">
        <nonlinearity_curve reset="1"/>
      </optiongroup>
      <optiongroup name="flight_throttle" UIShowCurve="0"/>
    </optiongroup>
  </optiontree>
</controls>
"""

PITCH = "flight.flight_move_pitch"
YAW = "flight.flight_move_yaw"
THROTTLE = "flight.flight_throttle"
MOUSE_PITCH = "mouse.mouse_pitch"


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def option_tree_xml():
    """XML definitions with keyboard and joystick trees (no gamepad tree)."""
    return OPTION_TREE_XML


@pytest.fixture
def option_trees(option_tree_xml):
    """Parsed option trees keyed by device type."""
    return parse_option_trees(option_tree_xml)


@pytest.fixture
def option_tree_file(temp_dir, option_tree_xml):
    """Definitions written to a file."""
    path = temp_dir / "controls.xml"
    path.write_text(option_tree_xml, encoding="utf-8")
    return path


@pytest.fixture
def store():
    """Create an empty settings store."""
    return SettingsStore()


@pytest.fixture
def editor(option_trees, store):
    """Create an editing session on the joystick tree."""
    return ControlsEditorService(trees=option_trees, store=store, device_type=DeviceType.JOYSTICK)
