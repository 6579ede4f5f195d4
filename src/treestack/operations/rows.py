"""
Row (text) operations.

    $    strip one leading "." from the top leaf, in place
    $^   join the leaf children of a branch with a separator
    $_   split a leaf on a delimiter into a branch of leaves
"""

from typing import TYPE_CHECKING

from treestack.core.nodes import Branch, Leaf
from treestack.exceptions import ArgumentError

if TYPE_CHECKING:
    from treestack.execution.evaluator import Evaluator


def undot(evaluator: "Evaluator") -> None:
    evaluator.require("v")
    leaf = evaluator.stack.peek()
    if leaf.text.startswith("."):
        leaf.text = leaf.text[1:]


def concat_row(evaluator: "Evaluator") -> None:
    """
    Pop a separator leaf and a branch; push the joined text of its leaves.

    Only direct Leaf children take part; nested branches are skipped.
    """
    evaluator.require("b.v")
    stack = evaluator.stack
    separator = stack.pop().text
    branch = stack.pop()
    texts = [child.text for child in branch.children if isinstance(child, Leaf)]
    stack.push(Leaf(text=separator.join(texts)))


def split_row(evaluator: "Evaluator") -> None:
    """
    Pop a delimiter leaf and a subject leaf; push the subject's segments.

    Every occurrence of the delimiter splits, so adjacent or boundary
    delimiters produce empty segments.
    """
    evaluator.require("vv")
    stack = evaluator.stack
    if stack.peek().is_empty():
        raise ArgumentError("Empty passed as split")
    delimiter = stack.pop().text
    subject = stack.pop().text
    stack.push(Branch(children=[Leaf(text=part) for part in subject.split(delimiter)]))
