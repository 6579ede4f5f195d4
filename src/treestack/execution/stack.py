"""
Operand stack shared by all operations of one evaluation session.
"""

from collections.abc import Iterator

from treestack.core.nodes import Node
from treestack.exceptions import StackUnderflow


class OperandStack:
    """Last-in-first-out sequence of nodes; the top is the most recent push."""

    def __init__(self, items: list[Node] | None = None):
        self._items: list[Node] = list(items or [])

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Node]:
        """Iterate from the bottom of the stack to the top."""
        return iter(self._items)

    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def require(self, count: int = 1) -> None:
        """
        Require at least ``count`` items on the stack.

        Raises:
            StackUnderflow: When fewer items are present
        """
        if len(self._items) < count:
            raise StackUnderflow(count, len(self._items))

    def push(self, node: Node) -> None:
        self._items.append(node)

    def pop(self) -> Node:
        """
        Remove and return the top item.

        Raises:
            StackUnderflow: When the stack is empty
        """
        self.require(1)
        return self._items.pop()

    def peek(self, offset: int = 0) -> Node:
        """
        Return the item ``offset`` positions below the top without removing it.

        Params:
            offset: 0 for the top item, 1 for the one beneath it, and so on

        Raises:
            StackUnderflow: When the stack holds ``offset`` items or fewer
        """
        self.require(offset + 1)
        return self._items[-1 - offset]

    def top(self, count: int) -> list[Node]:
        """
        Return the top ``count`` items in stack order, bottom-most first.

        The items stay on the stack; the returned list is a new list.

        Raises:
            StackUnderflow: When fewer than ``count`` items are present
        """
        self.require(count)
        if count == 0:
            return []
        return self._items[-count:]

    def pop_many(self, count: int) -> list[Node]:
        """
        Remove the top ``count`` items and return them in their original order.

        Raises:
            StackUnderflow: When fewer than ``count`` items are present
        """
        taken = self.top(count)
        del self._items[len(self._items) - count :]
        return taken

    def remove_at(self, offset: int) -> Node:
        """
        Remove the item ``offset`` positions below the top.

        Items above it keep their relative order.

        Raises:
            StackUnderflow: When the stack holds ``offset`` items or fewer
        """
        self.require(offset + 1)
        return self._items.pop(-1 - offset)

    def snapshot(self) -> list[Node]:
        """Return the items bottom-to-top as a new list (nodes are not copied)."""
        return list(self._items)
