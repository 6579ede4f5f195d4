"""
Operations that create new items.

    |Eb      push an empty branch
    |Ev      push an empty leaf
    |i, |[   push a copy of the child at index C of the branch beneath C
    |        push a copy of the top item
    |c       make the item beneath count C appear C times
"""

from typing import TYPE_CHECKING

from treestack.core.nodes import Branch, Leaf
from treestack.exceptions import IndexOutOfRange
from treestack.validation import require_integer

if TYPE_CHECKING:
    from treestack.execution.evaluator import Evaluator


def empty_branch(evaluator: "Evaluator") -> None:
    evaluator.stack.push(Branch())


def empty_value(evaluator: "Evaluator") -> None:
    evaluator.stack.push(Leaf())


def copy_from_index(evaluator: "Evaluator") -> None:
    """
    Pop an index and push a copy of that child of the branch now on top.

    The branch stays on the stack. The index is not range-checked up front;
    an access past the last child is a Fatal fault.
    """
    evaluator.require("b.i")
    stack = evaluator.stack
    index = require_integer(stack.pop())
    branch = stack.peek()
    try:
        child = branch.children[index]
    except IndexError as exc:
        raise IndexOutOfRange(index, len(branch.children)) from exc
    stack.push(child.copy())


def copy_top(evaluator: "Evaluator") -> None:
    stack = evaluator.stack
    stack.push(stack.peek().copy())


def duplicate(evaluator: "Evaluator") -> None:
    """
    Pop a count C and push C - 1 copies of the new top item.

    Counts 0 and 1 both leave the stack with the count popped and nothing
    else changed.
    """
    evaluator.require("i")
    stack = evaluator.stack
    count = require_integer(stack.pop())
    for _ in range(1, count):
        stack.push(stack.peek().copy())
