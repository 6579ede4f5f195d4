"""
Operand requirement helpers.

Small checks used by every built-in operation before it touches the stack.
Each helper raises a Critical fault when its requirement is not met and
returns the checked value otherwise.
"""

from treestack.core.nodes import Branch, Leaf, Node
from treestack.exceptions import IntegerFormatError, ShapeMismatch

# Longest digit run accepted as an operation argument
MAX_INTEGER_DIGITS = 8


def require_value(node: Node) -> Leaf:
    """
    Require that a node is a Leaf.

    Params:
        node: Node to check

    Returns:
        The node, narrowed to Leaf

    Raises:
        ShapeMismatch: When the node is a Branch
    """
    if not isinstance(node, Leaf):
        raise ShapeMismatch("Leaf")
    return node


def require_branch(node: Node) -> Branch:
    """
    Require that a node is a Branch.

    Params:
        node: Node to check

    Returns:
        The node, narrowed to Branch

    Raises:
        ShapeMismatch: When the node is a Leaf
    """
    if not isinstance(node, Branch):
        raise ShapeMismatch("Branch")
    return node


def require_integer(node: Node) -> int:
    """
    Require that a node is a bounded-integer Leaf and read its value.

    A bounded integer is 1 to 8 ASCII decimal digits. Signs, whitespace and
    non-ASCII digits are all rejected.

    Params:
        node: Node to check

    Returns:
        The integer value of the leaf text

    Raises:
        ShapeMismatch: When the node is a Branch
        IntegerFormatError: When the text is empty, too long or not all digits
    """
    text = require_value(node).text
    if len(text) > MAX_INTEGER_DIGITS:
        raise IntegerFormatError(text, "Number larger than integer")
    if not text:
        raise IntegerFormatError(text, "Passing empty as number")
    if not all("0" <= char <= "9" for char in text):
        raise IntegerFormatError(text, "Not a number passed as an integer")
    return int(text)
