"""
Built-in TreeStack operations.

Token naming conventions:

    ^  pack          _  reverse / unpack     |  generative
    t  top only      c  count argument       d  depth argument
    i  index         g  grouped              #  remove
    $  row (text)
"""

from typing import TYPE_CHECKING

from treestack.core.types import Operation
from treestack.operations.columns import (
    extract_column,
    extract_column_pack,
    extract_grouped_column,
    extract_grouped_column_pack,
)
from treestack.operations.generative import (
    copy_from_index,
    copy_top,
    duplicate,
    empty_branch,
    empty_value,
)
from treestack.operations.packing import (
    pack_count,
    pack_same_depth,
    pack_top,
    unpack_top,
)
from treestack.operations.removal import deep_remove, drop_top
from treestack.operations.reordering import reverse
from treestack.operations.rows import concat_row, split_row, undot

if TYPE_CHECKING:
    from treestack.execution.registry import CommandRegistry

DEFAULT_OPERATIONS: dict[str, Operation] = {
    "^t": pack_top,
    "^": pack_same_depth,
    "^_t": unpack_top,
    "^tc": pack_count,
    "|Eb": empty_branch,
    "|Ev": empty_value,
    "|i": copy_from_index,
    "|id": extract_column_pack,
    "|[": copy_from_index,
    "|]": extract_column_pack,
    "|]g": extract_grouped_column_pack,
    "|": copy_top,
    "|c": duplicate,
    "#": drop_top,
    "#d": deep_remove,
    "$": undot,
    "$^": concat_row,
    "$_": split_row,
    "_": reverse,
}


def load_default_operations(registry: "CommandRegistry") -> None:
    """
    Register every built-in operation.

    Params:
        registry: CommandRegistry to populate

    Raises:
        DuplicateToken: If the registry already holds a built-in token
    """
    registry.register_all(DEFAULT_OPERATIONS)


__all__ = [
    "DEFAULT_OPERATIONS",
    "load_default_operations",
    "extract_column",
    "extract_grouped_column",
]
