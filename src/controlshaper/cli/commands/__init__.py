"""CLI commands for controlshaper."""

from .curves import evaluate, presets
from .export import export
from .tree import tree

__all__ = ["evaluate", "export", "presets", "tree"]
