"""Unit tests for data models."""

import pytest
from pydantic import ValidationError

from controlshaper.models import (
    Curve,
    CurvePoint,
    DeviceType,
    EditorConfig,
    OptionNode,
    OptionSettings,
    OptionTree,
    SettingName,
)


class TestCurvePoint:
    """Test CurvePoint model."""

    @pytest.mark.unit
    def test_alias(self):
        """Test the input coordinate is named 'in' in serialized data."""
        point = CurvePoint.model_validate({"in": 0.3, "out": 0.6})
        assert point.in_ == 0.3
        assert point.model_dump(by_alias=True) == {"in": 0.3, "out": 0.6}

    @pytest.mark.unit
    @pytest.mark.parametrize("in_,out", [(-0.1, 0.5), (1.1, 0.5), (0.5, -0.1), (0.5, 1.5)])
    def test_range(self, in_, out):
        """Test coordinates outside 0-1 are rejected."""
        with pytest.raises(ValidationError):
            CurvePoint.at(in_, out)

    @pytest.mark.unit
    def test_frozen(self):
        """Test points are immutable."""
        point = CurvePoint.at(0.5, 0.5)
        with pytest.raises(ValidationError):
            point.out = 0.1


class TestCurve:
    """Test Curve model."""

    @pytest.mark.unit
    def test_points_sorted_and_deduplicated(self):
        """Test points are sorted by input and the last duplicate wins."""
        curve = Curve.from_pairs([(0.8, 0.9), (0.2, 0.1), (0.8, 0.7)])
        assert [p.as_tuple() for p in curve.points] == [(0.2, 0.1), (0.8, 0.7)]

    @pytest.mark.unit
    def test_reset_without_points(self):
        """Test a reset curve has no points and doesn't shape the response."""
        curve = Curve.linear_reset()
        assert curve.reset
        assert not curve.has_points

    @pytest.mark.unit
    def test_reset_with_points_rejected(self):
        """Test a reset curve cannot carry points."""
        with pytest.raises(ValidationError, match="reset curve"):
            Curve(reset=True, points=[CurvePoint.at(0.5, 0.5)])

    @pytest.mark.unit
    def test_has_points(self):
        """Test has_points only for non-reset curves with points."""
        assert not Curve().has_points
        assert Curve.from_pairs([(0.5, 0.5)]).has_points


class TestOptionSettings:
    """Test OptionSettings model."""

    @pytest.mark.unit
    def test_written_settings_tracked(self):
        """Test only assigned settings count as overrides."""
        settings = OptionSettings()
        assert settings.is_empty

        settings.invert = False
        assert settings.is_set(SettingName.INVERT)
        assert not settings.is_set(SettingName.CURVE)
        assert settings.get(SettingName.INVERT) is False

    @pytest.mark.unit
    def test_assignment_validated(self):
        """Test assignments are validated."""
        settings = OptionSettings()
        with pytest.raises(ValidationError):
            settings.exponent = 0.0

    @pytest.mark.unit
    def test_dump_written_only(self):
        """Test serialization includes written settings only."""
        settings = OptionSettings(exponent=2.0)
        assert settings.model_dump() == {"exponent": 2.0}


class TestOptionTree:
    """Test OptionTree model."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "device_type,label,instances",
        [
            (DeviceType.KEYBOARD, "Keyboard Settings", 1),
            (DeviceType.GAMEPAD, "Gamepad Settings", 1),
            (DeviceType.JOYSTICK, "Joystick Settings", 8),
        ],
    )
    def test_empty_tree(self, device_type, label, instances):
        """Test the fallback tree for each device type."""
        tree = OptionTree.empty(device_type)
        assert tree.is_empty
        assert tree.root.path == ""
        assert tree.root.label == label
        assert tree.instances == instances

    @pytest.mark.unit
    def test_instances_bounds(self):
        """Test instance counts above 8 are rejected."""
        root = OptionNode(name="root", path="root", label="root", device_type=DeviceType.JOYSTICK)
        with pytest.raises(ValidationError):
            OptionTree(device_type=DeviceType.JOYSTICK, root=root, instances=9)

    @pytest.mark.unit
    def test_device_type_instances(self):
        """Test only joysticks are multi-instance."""
        assert DeviceType.JOYSTICK.is_multi_instance
        assert DeviceType.JOYSTICK.max_instances == 8
        assert not DeviceType.GAMEPAD.is_multi_instance
        assert DeviceType.KEYBOARD.max_instances == 1


class TestEditorConfig:
    """Test EditorConfig model."""

    @pytest.mark.unit
    def test_default_config(self):
        """Test default values."""
        config = EditorConfig()
        assert config.option_tree_path is None
        assert config.default_device_type is DeviceType.KEYBOARD
        assert config.export_curves is True
        assert config.settings_path.name == "settings.json"

    @pytest.mark.unit
    def test_load_or_default(self, temp_dir):
        """Test a missing file gives defaults."""
        config = EditorConfig.load_or_default(temp_dir / "nonexistent.json")
        assert config.export_curves is True

    @pytest.mark.unit
    def test_save_and_load(self, temp_dir):
        """Test saving and loading config."""
        config = EditorConfig(
            option_tree_path=temp_dir / "controls.xml",
            default_device_type=DeviceType.JOYSTICK,
            export_curves=False,
        )
        save_path = temp_dir / "config.json"
        config.save(save_path)

        loaded = EditorConfig.load_or_default(save_path)
        assert loaded.option_tree_path == temp_dir / "controls.xml"
        assert loaded.default_device_type is DeviceType.JOYSTICK
        assert loaded.export_curves is False
