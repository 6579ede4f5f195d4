"""
Text serialization of TreeStack node trees.
"""

from treestack.formatting.serializer import (
    BranchFormat,
    BranchWriter,
    StackOrder,
    render_nodes,
    render_stack,
)

__all__ = [
    "BranchFormat",
    "BranchWriter",
    "StackOrder",
    "render_nodes",
    "render_stack",
]
