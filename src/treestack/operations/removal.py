"""
Removal operations.

    #    drop the top item
    #d   pop a count C and drop the item C positions below the new top
"""

from typing import TYPE_CHECKING

from treestack.validation import require_integer

if TYPE_CHECKING:
    from treestack.execution.evaluator import Evaluator


def drop_top(evaluator: "Evaluator") -> None:
    evaluator.stack.pop()


def deep_remove(evaluator: "Evaluator") -> None:
    evaluator.require("i")
    stack = evaluator.stack
    count = require_integer(stack.pop())
    stack.require(count + 1)
    stack.remove_at(count)
