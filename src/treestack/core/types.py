"""
Core type definitions for the TreeStack engine.

Type aliases shared by the registry, the evaluator and host extensions.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from treestack.execution.evaluator import Evaluator

# A built-in or host operation rewrites the session it is invoked with
Operation = Callable[["Evaluator"], None]

# Plain Python view of a node tree, as produced by node_to_python
PlainTree = str | list
