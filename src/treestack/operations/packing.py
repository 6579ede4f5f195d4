"""
Pack and unpack operations.

    ^t   wrap the top item in a new single-child branch
    ^    pack the run of top items sharing the top item's depth
    ^_t  unpack the top branch onto the stack
    ^tc  pack the top C items, C being popped first
"""

from typing import TYPE_CHECKING

from treestack.core.nodes import Branch
from treestack.exceptions import ArgumentError, StackUnderflow
from treestack.validation import require_integer

if TYPE_CHECKING:
    from treestack.execution.evaluator import Evaluator


def pack_top(evaluator: "Evaluator") -> None:
    stack = evaluator.stack
    stack.push(Branch(children=[stack.pop()]))


def pack_same_depth(evaluator: "Evaluator") -> None:
    """
    Pack every consecutive top item whose depth equals the top item's depth.

    The packed items keep their original bottom-to-top order.
    """
    stack = evaluator.stack
    depth = stack.peek().depth()
    packed = []
    while not stack.is_empty() and stack.peek().depth() == depth:
        packed.append(stack.pop())
    packed.reverse()
    stack.push(Branch(children=packed))


def unpack_top(evaluator: "Evaluator") -> None:
    """Replace the top branch with its children, the last child ending on top."""
    evaluator.require("b")
    branch = evaluator.stack.pop()
    for child in branch.children:
        evaluator.stack.push(child)
    branch.children.clear()


def pack_count(evaluator: "Evaluator") -> None:
    """Pop a count C, then pack the C items beneath it into one branch."""
    evaluator.require("i")
    stack = evaluator.stack
    count = require_integer(stack.pop())
    try:
        stack.require(count)
    except StackUnderflow as exc:
        raise ArgumentError(f"Too few arguments to pack ({count} requested)", cause=exc) from exc
    stack.push(Branch(children=stack.pop_many(count)))
