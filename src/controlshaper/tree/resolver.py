"""Option tree lookups and visibility resolution.

Everything here is computed on demand from the immutable tree; nothing is
cached on the nodes.
"""

from collections.abc import Iterator, Sequence

from controlshaper.models import OptionNode, Visibility, VisibilityFlag

PATH_SEPARATOR = "."


def find_node_chain(root: OptionNode, path: str) -> list[OptionNode] | None:
    """
    Walk ``path`` from the root, one segment per level.

    The path may start with the root's own name or leave it out; either
    way the walk continues from the root's children. At each level the
    first child whose name matches the next segment is followed. This is a
    single deterministic walk, not a search.

    Args:
        root: Root node of a device tree
        path: Dot-joined option path

    Returns:
        Nodes from the root down to the match, or None if the path doesn't
        resolve
    """
    if not path:
        return None

    segments = path.split(PATH_SEPARATOR)
    if segments[0] == root.name:
        segments = segments[1:]

    chain = [root]
    node = root
    for segment in segments:
        child = node.get_child(segment)
        if child is None:
            return None
        chain.append(child)
        node = child
    return chain


def find_node_by_path(root: OptionNode, path: str) -> OptionNode | None:
    """
    Find the node at ``path``.

    Returns:
        The node, or None when the path is malformed or outside the tree
    """
    chain = find_node_chain(root, path)
    return chain[-1] if chain else None


def resolve_visibility(
    node: OptionNode,
    ancestors: Sequence[OptionNode] = (),
    flag: VisibilityFlag = VisibilityFlag.INVERT,
) -> bool:
    """
    Decide whether a setting is shown for ``node``.

    Walks from the node toward the root. The first node declaring SHOWN or
    HIDDEN decides; INHERIT and undeclared continue upward. When nothing on
    the way decides, the setting is shown.

    Args:
        node: Node being displayed
        ancestors: Chain from the root down to the node's parent
        flag: Which visibility flag to resolve

    Returns:
        True if the setting is shown
    """
    for candidate in (node, *reversed(ancestors)):
        declared = candidate.declared(flag)
        if declared is Visibility.SHOWN:
            return True
        if declared is Visibility.HIDDEN:
            return False
    return True


def resolve_path_visibility(
    root: OptionNode,
    path: str,
    flag: VisibilityFlag = VisibilityFlag.INVERT,
) -> bool | None:
    """
    Resolve a flag for the node at ``path``.

    Returns:
        Visibility of the setting, or None if the path doesn't resolve
    """
    chain = find_node_chain(root, path)
    if chain is None:
        return None
    return resolve_visibility(chain[-1], chain[:-1], flag)


def iter_nodes(root: OptionNode) -> Iterator[tuple[OptionNode, tuple[OptionNode, ...]]]:
    """
    Depth-first, pre-order traversal.

    Yields:
        (node, ancestors) pairs, ancestors ordered from the root down
    """
    stack: list[tuple[OptionNode, tuple[OptionNode, ...]]] = [(root, ())]
    while stack:
        node, ancestors = stack.pop()
        yield node, ancestors
        below = (*ancestors, node)
        for child in reversed(node.children):
            stack.append((child, below))


def option_name(path: str) -> str:
    """Trailing segment of an option path."""
    return path.rsplit(PATH_SEPARATOR, 1)[-1]
