"""
Column extraction over tabular trees.

A table is a branch of rows, possibly grouped into further branches. Column
extraction walks the tree down to a fixed nesting depth and, at every branch
found at that depth, copies the child at a fixed index.

    |id, |]   collect the column into one flat branch
    |]g       collect the column, mirroring the branching above the rows

Both operations pop the index (top) and the depth beneath it, then read the
branch beneath those. The walk uses an explicit frame stack; trees of any
depth are handled without recursion. Rows too short to hold the index are
skipped silently.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from treestack.core.nodes import Branch
from treestack.exceptions import ArgumentError
from treestack.validation import require_integer

if TYPE_CHECKING:
    from treestack.execution.evaluator import Evaluator


@dataclass
class _Frame:
    branch: Branch
    cursor: int
    output: Branch


def _walk_columns(root: Branch, depth: int, index: int, grouped: bool) -> Branch:
    result = Branch()
    frames = [_Frame(root, 0, result)]
    while frames:
        frame = frames[-1]
        children = frame.branch.children
        if frame.cursor >= len(children):
            frames.pop()
            continue
        if len(frames) == depth:
            if index < len(children):
                frame.output.children.append(children[index].copy())
            frames.pop()
            continue

        child = children[frame.cursor]
        frame.cursor += 1
        if isinstance(child, Branch):
            output = frame.output
            if grouped:
                output = Branch()
                frame.output.children.append(output)
            frames.append(_Frame(child, 0, output))
    return result


def extract_column(root: Branch, depth: int, index: int) -> Branch:
    """
    Copy child ``index`` of every branch at nesting level ``depth``.

    Params:
        root: Tree to read; the root itself is level 1
        depth: Nesting level of the rows, at least 1
        index: Child position to copy from each row

    Returns:
        New flat branch holding the copies in traversal order
    """
    return _walk_columns(root, depth, index, grouped=False)


def extract_grouped_column(root: Branch, depth: int, index: int) -> Branch:
    """
    Like extract_column, but keep the branching above the rows.

    Every branch entered during the walk gets a matching empty output
    branch nested at the same place, and each copied child is appended to
    the output branch of the row it came from.

    Params:
        root: Tree to read; the root itself is level 1
        depth: Nesting level of the rows, at least 1
        index: Child position to copy from each row

    Returns:
        New branch mirroring the input structure down to the rows
    """
    return _walk_columns(root, depth, index, grouped=True)


def _pop_column_arguments(evaluator: "Evaluator") -> tuple[Branch, int, int]:
    evaluator.require("b.ii")
    stack = evaluator.stack
    index = require_integer(stack.peek(0))
    depth = require_integer(stack.peek(1))
    if depth < 1:
        raise ArgumentError("Cannot extract from zero depth")
    stack.pop_many(2)
    return stack.peek(), depth, index


def extract_column_pack(evaluator: "Evaluator") -> None:
    root, depth, index = _pop_column_arguments(evaluator)
    evaluator.stack.push(extract_column(root, depth, index))


def extract_grouped_column_pack(evaluator: "Evaluator") -> None:
    root, depth, index = _pop_column_arguments(evaluator)
    evaluator.stack.push(extract_grouped_column(root, depth, index))
