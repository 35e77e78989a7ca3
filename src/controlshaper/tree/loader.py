"""Option tree loading from XML definitions.

Definitions look like::

    <optiontree type="joystick" instances="8"
                UISensitivityMin="0.01" UISensitivityMax="2.0">
      <optiongroup name="flight" UILabel="@ui_flight" UIShowCurve="-1">
        <optiongroup name="flight_move_pitch" invert="1" exponent="1.5">
          <nonlinearity_curve>
            <point in="0.2" out="0.05"/>
          </nonlinearity_curve>
        </optiongroup>
      </optiongroup>
    </optiontree>

Option paths are the dot-joined group names below the tree, so the pitch
option above is keyed `flight.flight_move_pitch`. A named <optiontree>
prefixes its own name to every path.

Each device type is parsed independently: a broken tree is logged and left
out of the result, and callers fall back to an empty tree for it.
"""

import logging
import math
from pathlib import Path

from lxml import etree

from controlshaper.exceptions import (
    OptionTreeFileError,
    OptionTreeParseError,
    collect_errors,
)
from controlshaper.models import (
    MAX_JOYSTICK_INSTANCES,
    Curve,
    CurvePoint,
    DeviceType,
    OptionNode,
    OptionTree,
    Visibility,
)

from .resolver import PATH_SEPARATOR

logger = logging.getLogger(__name__)

TREE_TAG = "optiontree"
GROUP_TAG = "optiongroup"
CURVE_TAG = "nonlinearity_curve"
POINT_TAG = "point"

DEFAULT_SENSITIVITY_MIN = 0.01
DEFAULT_SENSITIVITY_MAX = 2.0


def _parse_float(raw: str | None) -> float | None:
    """Parse a numeric attribute; missing, malformed or non-finite gives None."""
    if raw is None:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _parse_curve(element: etree._Element, path: str) -> Curve:
    """Parse a <nonlinearity_curve> element."""
    if element.get("reset") == "1":
        return Curve.linear_reset()

    points = []
    for point in element.iter(POINT_TAG):
        in_ = _parse_float(point.get("in"))
        out = _parse_float(point.get("out"))
        if in_ is None or out is None or not (0 <= in_ <= 1 and 0 <= out <= 1):
            logger.warning(
                f"Skipping curve point in={point.get('in')!r} out={point.get('out')!r} at {path}"
            )
            continue
        points.append(CurvePoint.at(in_, out))
    return Curve(points=points)


def _parse_group(
    element: etree._Element, device_type: DeviceType, parent_path: str | None = None
) -> OptionNode:
    """Parse an <optiontree> or <optiongroup> element and its descendants."""
    name = element.get("name") or "root"
    if parent_path is None:
        # An unnamed root adds nothing to its children's paths
        path = element.get("name") or ""
    elif parent_path:
        path = f"{parent_path}{PATH_SEPARATOR}{name}"
    else:
        path = name

    exponent = _parse_float(element.get("exponent"))
    if exponent is not None and exponent <= 0:
        exponent = None

    curve_element = element.find(CURVE_TAG)
    curve = _parse_curve(curve_element, path) if curve_element is not None else None

    children = tuple(
        _parse_group(child, device_type, path) for child in element.findall(GROUP_TAG)
    )

    return OptionNode(
        name=name,
        path=path,
        label=element.get("UILabel") or element.get("name") or "Unknown",
        device_type=device_type,
        show_invert=Visibility.from_attribute(element.get("UIShowInvert")),
        show_curve=Visibility.from_attribute(element.get("UIShowCurve")),
        show_sensitivity=Visibility.from_attribute(element.get("UIShowSensitivity")),
        invert=element.get("invert") == "1",
        invert_cvar=element.get("invert_cvar") or None,
        exponent=exponent,
        curve=curve,
        children=children,
    )


def parse_option_tree(element: etree._Element, device_type: DeviceType) -> OptionTree:
    """
    Build an OptionTree from one <optiontree> element.

    Args:
        element: The <optiontree> element
        device_type: Device type the tree belongs to

    Returns:
        The parsed tree
    """
    instances_raw = _parse_float(element.get("instances"))
    instances = int(instances_raw) if instances_raw else 1
    instances = max(1, min(instances, MAX_JOYSTICK_INSTANCES))

    return OptionTree(
        device_type=device_type,
        root=_parse_group(element, device_type),
        instances=instances,
        sensitivity_min=_parse_float(element.get("UISensitivityMin")) or DEFAULT_SENSITIVITY_MIN,
        sensitivity_max=_parse_float(element.get("UISensitivityMax")) or DEFAULT_SENSITIVITY_MAX,
    )


def parse_option_trees(xml: str | bytes, source: str = "<string>") -> dict[DeviceType, OptionTree]:
    """
    Parse every <optiontree> found in an XML document.

    Trees with an unknown ``type`` are ignored. A tree that fails to parse
    is logged and omitted without affecting the other device types.

    Args:
        xml: XML document text
        source: Description of the source, for error messages

    Returns:
        Parsed trees keyed by device type (device types without a tree are absent)

    Raises:
        OptionTreeParseError: If the document is not well-formed XML
    """
    if isinstance(xml, str):
        xml = xml.encode("utf-8")

    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        document = etree.fromstring(xml, parser)
    except etree.XMLSyntaxError as e:
        raise OptionTreeParseError(source, str(e)) from e

    trees: dict[DeviceType, OptionTree] = {}
    collector = collect_errors(f"load option trees from {source}")

    for element in document.iter(TREE_TAG):
        type_name = element.get("type")
        try:
            device_type = DeviceType(type_name)
        except ValueError:
            logger.debug(f"Ignoring optiontree with unknown type {type_name!r} in {source}")
            continue

        with collector.try_operation(f"parse {device_type.value} option tree"):
            if device_type in trees:
                logger.warning(f"Duplicate {device_type.value} option tree in {source}, using the last one")
            trees[device_type] = parse_option_tree(element, device_type)

    if collector.has_errors:
        logger.warning(collector.get_summary())

    for device_type in DeviceType:
        if device_type not in trees:
            logger.warning(f"No {device_type.value} option tree in {source}")

    logger.info(f"Loaded {len(trees)} option tree(s) from {source}")
    return trees


def load_option_trees(path: Path) -> dict[DeviceType, OptionTree]:
    """
    Load option trees from an XML definitions file.

    Raises:
        OptionTreeFileError: If the file cannot be read
        OptionTreeParseError: If the file is not well-formed XML
    """
    try:
        content = path.read_bytes()
    except OSError as e:
        raise OptionTreeFileError(str(path), str(e)) from e

    return parse_option_trees(content, source=str(path))
