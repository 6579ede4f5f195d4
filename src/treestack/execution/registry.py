"""
Command registry mapping tokens to operations.

Built-in and host-provided operations share one namespace. A token may be
registered only once per session; lookups use exact string equality.
"""

from collections.abc import Iterator, Mapping

from treestack.core.types import Operation
from treestack.exceptions import DuplicateToken


class CommandRegistry:
    """Registry of named operations for one evaluation session."""

    def __init__(self):
        self._operations: dict[str, Operation] = {}

    def register(self, token: str, operation: Operation) -> None:
        """
        Register an operation under a token.

        Params:
            token: Exact token string that invokes the operation
            operation: Callable receiving the evaluator session

        Raises:
            DuplicateToken: If the token is already registered
        """
        if token in self._operations:
            raise DuplicateToken(token)
        self._operations[token] = operation

    def register_all(self, operations: Mapping[str, Operation]) -> None:
        """Register every token/operation pair of a mapping, in order."""
        for token, operation in operations.items():
            self.register(token, operation)

    def lookup(self, token: str) -> Operation | None:
        """
        Find the operation registered for a token.

        Params:
            token: Token to resolve

        Returns:
            The registered operation, or None when the token is a literal
        """
        return self._operations.get(token)

    def __contains__(self, token: str) -> bool:
        return token in self._operations

    def __len__(self) -> int:
        return len(self._operations)

    def __iter__(self) -> Iterator[str]:
        return iter(self._operations)
