"""
Reordering operations.

    _   reverse the top item in place: a leaf's characters or a branch's children
"""

from typing import TYPE_CHECKING

from treestack.core.nodes import Branch, Leaf

if TYPE_CHECKING:
    from treestack.execution.evaluator import Evaluator


def reverse(evaluator: "Evaluator") -> None:
    match evaluator.stack.peek():
        case Leaf() as leaf:
            leaf.text = leaf.text[::-1]
        case Branch() as branch:
            branch.children.reverse()
