"""
Core TreeStack components.

This package provides the node model and the type aliases shared by the rest
of the engine.
"""

from treestack.core.nodes import Branch, Leaf, Node, build_node, node_to_python
from treestack.core.types import Operation, PlainTree

__all__ = [
    "Leaf",
    "Branch",
    "Node",
    "build_node",
    "node_to_python",
    "Operation",
    "PlainTree",
]
