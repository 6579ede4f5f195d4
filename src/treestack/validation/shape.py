"""
Directive-driven structural validator.

A directive string describes the expected shape of a branch's children,
one character per step:

    b  require a Branch at the cursor and descend into it
    v  require a Leaf at the cursor
    i  require a bounded-integer Leaf at the cursor
    e  skip the node at the cursor without checking it
    .  ascend back to the enclosing branch

For example ``"bvi.v"`` accepts a branch whose first child is a branch
holding a leaf and an integer leaf, followed by a leaf.
"""

from dataclasses import dataclass

from treestack.core.nodes import Branch, Node
from treestack.exceptions import ShapeMismatch, ValidatorSyntaxError
from treestack.validation.requirements import (
    require_branch,
    require_integer,
    require_value,
)

DIRECTIVES = frozenset("bvie.")

_EXPECTED = {"b": "Branch", "v": "Leaf", "i": "Leaf", "e": "node"}


@dataclass
class _Frame:
    """A branch being walked and the index of its next unchecked child."""

    branch: Branch
    cursor: int = 0


def require_shape(directives: str, node: Node) -> Branch:
    """
    Check that a branch matches a directive string.

    The walk keeps an explicit stack of frames, so arbitrarily nested
    directive strings never recurse.

    Params:
        directives: Directive string over the characters ``b v i e .``
        node: Root node; must itself be a Branch

    Returns:
        The validated root branch

    Raises:
        ShapeMismatch: When a node has the wrong variant or is missing
        IntegerFormatError: When an ``i`` node is not a bounded integer
        ValidatorSyntaxError: On an unknown directive or ascending past the root
    """
    root = require_branch(node)
    frames = [_Frame(root)]
    for position, directive in enumerate(directives):
        if directive not in DIRECTIVES:
            raise ValidatorSyntaxError(
                directives, position, f"unknown directive '{directive}'"
            )
        if not frames:
            raise ValidatorSyntaxError(directives, position, "ascended past the root")

        frame = frames[-1]
        if directive == ".":
            frames.pop()
            continue

        if frame.cursor >= len(frame.branch.children):
            raise ShapeMismatch(
                _EXPECTED[directive],
                f"Missing {_EXPECTED[directive]} at child position {frame.cursor}",
            )
        child = frame.branch.children[frame.cursor]
        frame.cursor += 1

        match directive:
            case "b":
                frames.append(_Frame(require_branch(child)))
            case "v":
                require_value(child)
            case "i":
                require_integer(child)
    return root


def count_top_level(directives: str) -> int:
    """
    Count the directives that address the root branch's own children.

    Params:
        directives: Directive string

    Returns:
        Number of ``b``/``v``/``i``/``e`` steps taken at nesting level zero
    """
    level = 0
    count = 0
    for directive in directives:
        if directive == ".":
            level -= 1
        elif directive in _EXPECTED:
            if level == 0:
                count += 1
            if directive == "b":
                level += 1
    return count
