"""Option tree inspection command."""

from pathlib import Path
from typing import Optional

import click

from controlshaper.exceptions import ControlShaperError
from controlshaper.models import DeviceType, OptionNode, OptionTree, VisibilityFlag, format_number
from controlshaper.tree import iter_nodes, load_option_trees, resolve_visibility

from .common import DEVICE_CHOICE, fail, get_state

FLAG_LABELS = {
    VisibilityFlag.INVERT: "invert",
    VisibilityFlag.CURVE: "curve",
    VisibilityFlag.SENSITIVITY: "sensitivity",
}


def describe_node(node: OptionNode, ancestors: tuple[OptionNode, ...]) -> str:
    """One line for a node: label, path, shown settings and defaults."""
    shown = [
        label for flag, label in FLAG_LABELS.items()
        if resolve_visibility(node, ancestors, flag)
    ]
    parts = [f"{node.label} ({node.path or node.name})", f"shows: {', '.join(shown) or 'nothing'}"]

    if node.invert:
        parts.append("invert=1")
    if node.invert_cvar:
        parts.append(f"cvar={node.invert_cvar}")
    if node.exponent is not None:
        parts.append(f"exponent={format_number(node.exponent)}")
    if node.curve is not None:
        parts.append("curve=reset" if node.curve.reset else f"curve={len(node.curve.points)} point(s)")

    return "  ".join(parts)


def render_tree(tree: OptionTree) -> list[str]:
    """Render every node of a tree, indented by depth."""
    lines = [
        f"{tree.device_type.value}: {tree.instances} instance(s), "
        f"sensitivity {format_number(tree.sensitivity_min)}-{format_number(tree.sensitivity_max)}"
    ]
    for node, ancestors in iter_nodes(tree.root):
        lines.append("  " * (len(ancestors) + 1) + describe_node(node, ancestors))
    return lines


@click.command(name="tree")
@click.pass_context
@click.argument(
    "definitions",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option("--device", "-d", type=DEVICE_CHOICE, default=None, help="Device type to show")
def tree(ctx: click.Context, definitions: Optional[Path], device: Optional[str]):
    """
    Show an option tree with resolved visibility and defaults.

    DEFINITIONS is an XML file of <optiontree> elements (default: the
    option_tree_path of the editor config).
    """
    state = get_state(ctx)
    try:
        config = state.load_config()
        path = definitions or config.option_tree_path
        if path is None:
            raise click.UsageError("No definitions file given and none configured")

        device_type = DeviceType(device.lower()) if device else config.default_device_type
        trees = load_option_trees(path)
    except ControlShaperError as e:
        fail(e, state)

    option_tree = trees.get(device_type)
    if option_tree is None:
        click.echo(f"No {device_type.value} option tree in {path}")
        option_tree = OptionTree.empty(device_type)

    for line in render_tree(option_tree):
        click.echo(line)
