"""Option tree loading, lookup and visibility resolution."""

from .loader import load_option_trees, parse_option_tree, parse_option_trees
from .resolver import (
    PATH_SEPARATOR,
    find_node_by_path,
    find_node_chain,
    iter_nodes,
    option_name,
    resolve_path_visibility,
    resolve_visibility,
)

__all__ = [
    "PATH_SEPARATOR",
    "find_node_by_path",
    "find_node_chain",
    "iter_nodes",
    "load_option_trees",
    "option_name",
    "parse_option_tree",
    "parse_option_trees",
    "resolve_path_visibility",
    "resolve_visibility",
]
