"""
Indented text serialization of node trees.

Each Leaf becomes one line holding its text. Each Branch becomes a section
marker line followed by its children, indented one level deeper. With the
default format (one tab per level) ``Branch[a, Branch[b]]`` renders as the
lines ``./section``, ``<tab>a``, ``<tab>./section`` and ``<tab><tab>b``.
"""

from collections.abc import Iterable
from enum import Enum
from io import StringIO
from typing import TextIO

from pydantic import BaseModel, ConfigDict

from treestack.core.nodes import Branch, Leaf, Node


class StackOrder(Enum):
    """Order in which stack items are rendered."""

    BOTTOM_FIRST = "bottom"
    TOP_FIRST = "top"


class BranchFormat(BaseModel):
    """Serialization settings; the defaults are the interoperable format."""

    model_config = ConfigDict(frozen=True)

    indent: str = "\t"
    section: str = "./section"
    line_end: str = "\n"


class BranchWriter:
    """Writes node trees to a text stream using a BranchFormat."""

    def __init__(self, out: TextIO, fmt: BranchFormat | None = None):
        self.out = out
        self.format = fmt or BranchFormat()

    def write(self, node: Node) -> None:
        """
        Write one node tree.

        The walk keeps an explicit stack of (node, depth) pairs, so deeply
        nested trees never recurse.

        Params:
            node: Root of the tree to write
        """
        fmt = self.format
        pending: list[tuple[Node, int]] = [(node, 0)]
        while pending:
            current, depth = pending.pop()
            prefix = fmt.indent * depth
            match current:
                case Leaf(text=text):
                    self.out.write(f"{prefix}{text}{fmt.line_end}")
                case Branch(children=children):
                    self.out.write(f"{prefix}{fmt.section}{fmt.line_end}")
                    pending.extend((child, depth + 1) for child in reversed(children))

    def write_all(self, nodes: Iterable[Node]) -> None:
        for node in nodes:
            self.write(node)


def render_nodes(nodes: Iterable[Node], fmt: BranchFormat | None = None) -> str:
    """
    Render node trees to text.

    Params:
        nodes: Trees to render, in output order
        fmt: Serialization settings, defaults to BranchFormat()

    Returns:
        The concatenated rendering of every tree
    """
    buffer = StringIO()
    BranchWriter(buffer, fmt).write_all(nodes)
    return buffer.getvalue()


def render_stack(
    items: Iterable[Node],
    fmt: BranchFormat | None = None,
    order: StackOrder = StackOrder.BOTTOM_FIRST,
) -> str:
    """
    Render stack contents without modifying them.

    Params:
        items: Stack items from bottom to top
        fmt: Serialization settings
        order: Whether the bottom or the top item is rendered first

    Returns:
        Rendered text of all items
    """
    nodes = list(items)
    if order is StackOrder.TOP_FIRST:
        nodes.reverse()
    return render_nodes(nodes, fmt)
