"""
Node model for the TreeStack engine.

A node is either a Leaf holding text or a Branch holding an ordered list of
child nodes. Nodes on the operand stack are exclusively owned; the only
sanctioned way to duplicate one is ``copy()``, which returns a structurally
independent clone.
"""

from pydantic import BaseModel, Field

from treestack.core.types import PlainTree


class Leaf(BaseModel):
    """Terminal node holding raw text (possibly empty)."""

    text: str = ""

    def depth(self) -> int:
        """Leaves always have depth 0."""
        return 0

    def is_leaf(self) -> bool:
        return True

    def is_branch(self) -> bool:
        return False

    def is_empty(self) -> bool:
        """Check whether the leaf holds no text."""
        return self.text == ""

    def copy(self) -> "Leaf":  # type: ignore[override]
        """Return an independent copy of this leaf."""
        return Leaf(text=self.text)


class Branch(BaseModel):
    """Internal node holding an ordered sequence of children."""

    children: list["Leaf | Branch"] = Field(default_factory=list)

    def depth(self) -> int:
        """
        Compute the nesting depth of this branch.

        The walk keeps an explicit stack of (branch, depth) pairs, so the
        nesting of a tree is never limited by the interpreter's call stack.

        Returns:
            1 + the greatest child depth, or 1 when the branch has no children
        """
        deepest = 1
        pending: list[tuple[Branch, int]] = [(self, 1)]
        while pending:
            branch, level = pending.pop()
            deepest = max(deepest, level)
            pending.extend(
                (child, level + 1) for child in branch.children if isinstance(child, Branch)
            )
        return deepest

    def is_leaf(self) -> bool:
        return False

    def is_branch(self) -> bool:
        return True

    def copy(self) -> "Branch":  # type: ignore[override]
        """
        Return a deep copy of this branch.

        Every descendant is cloned, so mutating the copy never affects the
        source and vice versa. Each pending pair holds a source branch and
        the empty clone its children are appended to.
        """
        root = Branch()
        pending: list[tuple[Branch, Branch]] = [(self, root)]
        while pending:
            source, target = pending.pop()
            for child in source.children:
                if isinstance(child, Branch):
                    clone = Branch()
                    pending.append((child, clone))
                else:
                    clone = Leaf(text=child.text)
                target.children.append(clone)
        return root


Branch.model_rebuild()

Node = Leaf | Branch


def build_node(value: "str | list | tuple | Node") -> Node:
    """
    Build a node tree from plain Python values.

    Strings become leaves and lists (or tuples) become branches, recursively.
    Existing nodes are accepted as-is.

    Params:
        value: String, nested list/tuple of strings, or an existing node

    Returns:
        The corresponding node tree

    Raises:
        TypeError: When a value is neither a string, a sequence nor a node

    Examples:
        "a" -> Leaf("a")
        ["x", ["z"], "y"] -> Branch[Leaf("x"), Branch[Leaf("z")], Leaf("y")]
    """
    if isinstance(value, (Leaf, Branch)):
        return value
    if isinstance(value, str):
        return Leaf(text=value)
    if isinstance(value, (list, tuple)):
        return Branch(children=[build_node(item) for item in value])
    raise TypeError(f"Cannot build a node from {type(value).__name__}")


def node_to_python(node: Node) -> PlainTree:
    """Convert a node tree back to strings and nested lists."""
    match node:
        case Leaf(text=text):
            return text
        case Branch(children=children):
            return [node_to_python(child) for child in children]
    raise TypeError(f"Not a node: {type(node).__name__}")
