"""
TreeStack - a stack-based command language for reshaping trees of text

TreeStack evaluates a stream of tokens against an operand stack of nodes.
Registered tokens run built-in operations (packing, column extraction,
splitting and joining rows, ...); every other token is pushed as text.
"""

from importlib.metadata import version

from treestack.core import Branch, Leaf, Node, build_node, node_to_python
from treestack.exceptions import Fault, Severity
from treestack.execution import BatchResult, Evaluator, Outcome, SessionConfig
from treestack.formatting import BranchFormat, StackOrder

__version__ = version("treestack")

__all__ = [
    "__version__",
    "Leaf",
    "Branch",
    "Node",
    "build_node",
    "node_to_python",
    "Fault",
    "Severity",
    "Evaluator",
    "Outcome",
    "BatchResult",
    "SessionConfig",
    "BranchFormat",
    "StackOrder",
]
