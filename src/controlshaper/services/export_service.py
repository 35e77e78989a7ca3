"""Export projection: flatten a session's overrides for serialization."""

import logging

from lxml import etree

from controlshaper.models import (
    ControlSettings,
    DeviceExport,
    DeviceType,
    ExportEntry,
    SettingName,
    format_number,
)
from controlshaper.tree import option_name

from .settings_store import SettingsStore

logger = logging.getLogger(__name__)

CURVE_TAG = "nonlinearity_curve"
POINT_TAG = "point"


def project(store: SettingsStore, device_type: DeviceType, instance: int = 1) -> list[ExportEntry]:
    """
    Flatten the overrides of one (device type, instance) pair.

    One entry per overridden option path, in first-write order, named by the
    path's trailing segment. Inversion is exported as a 0/1 flag; exponent
    and curve overrides are carried as well.

    Args:
        store: Settings store to read
        device_type: Device family
        instance: Device slot (ignored for non-joystick types)

    Returns:
        Export entries (empty when nothing is overridden)
    """
    entries = []
    for path, overrides in store.items(device_type, instance):
        entry = ExportEntry(option_name=option_name(path), path=path)
        if overrides.is_set(SettingName.INVERT) and overrides.invert is not None:
            entry.invert = int(overrides.invert)
        if overrides.is_set(SettingName.EXPONENT):
            entry.exponent = overrides.exponent
        if overrides.is_set(SettingName.CURVE):
            entry.curve = overrides.curve
        entries.append(entry)
    return entries


class ExportService:
    """
    Produces exports of a settings store.

    Serializing to a concrete save file is left to the caller; this service
    only offers the flattened projection, an XML rendering of it, and the
    raw overlay snapshot.
    """

    def __init__(self, store: SettingsStore, include_curves: bool = True):
        """
        Initialize the export service.

        Args:
            store: Settings store to export
            include_curves: Render exponent and curve overrides in XML
                (False renders inversion only)
        """
        self._store = store
        self.include_curves = include_curves

    def get_control_settings(self) -> ControlSettings:
        """Get a snapshot of every override, for persistence."""
        return self._store.snapshot()

    def generate_export_for_device(
        self, device_type: DeviceType, instance: int = 1
    ) -> DeviceExport | None:
        """
        Export one (device type, instance) pair.

        Returns:
            The projection, or None when the pair has no overrides
        """
        entries = project(self._store, device_type, instance)
        if not entries:
            return None

        return DeviceExport(
            device_type=device_type,
            instance=SettingsStore.normalize_instance(device_type, instance),
            entries=entries,
        )

    def build_options_element(
        self, device_type: DeviceType, instance: int = 1
    ) -> etree._Element | None:
        """
        Build the <options> element for one (device type, instance) pair.

        Options without anything to render (for example a curve-only
        override when curves are excluded) are left out.

        Returns:
            The element, or None when the pair has no overrides
        """
        export = self.generate_export_for_device(device_type, instance)
        if export is None:
            return None

        options = etree.Element(
            "options", type=export.device_type.value, instance=str(export.instance)
        )
        for entry in export.entries:
            attrs = entry.attributes
            if not self.include_curves:
                attrs = {k: v for k, v in attrs.items() if k == "invert"}
            curve = entry.curve if self.include_curves else None

            if not attrs and curve is None:
                continue

            option = etree.SubElement(options, entry.option_name, attrs)
            if curve is not None:
                curve_element = etree.SubElement(option, CURVE_TAG)
                if curve.reset:
                    curve_element.set("reset", "1")
                for point in curve.points:
                    etree.SubElement(
                        curve_element,
                        POINT_TAG,
                        {"in": format_number(point.in_), "out": format_number(point.out)},
                    )

        logger.debug(
            f"Built options element for {device_type.value}[{export.instance}] "
            f"with {len(options)} option(s)"
        )
        return options

    def render_options_xml(self, device_type: DeviceType, instance: int = 1) -> str | None:
        """
        Render the <options> element for one (device type, instance) pair.

        Returns:
            Pretty-printed XML, or None when the pair has no overrides
        """
        options = self.build_options_element(device_type, instance)
        if options is None:
            return None
        return etree.tostring(options, pretty_print=True, encoding="unicode")
