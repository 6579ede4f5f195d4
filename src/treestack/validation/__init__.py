"""
Operand validation for TreeStack operations.

Provides the single-node requirement helpers and the directive-driven shape
checker used by the built-in operations.
"""

from treestack.validation.requirements import (
    MAX_INTEGER_DIGITS,
    require_branch,
    require_integer,
    require_value,
)
from treestack.validation.shape import DIRECTIVES, count_top_level, require_shape

__all__ = [
    "MAX_INTEGER_DIGITS",
    "DIRECTIVES",
    "require_value",
    "require_branch",
    "require_integer",
    "require_shape",
    "count_top_level",
]
