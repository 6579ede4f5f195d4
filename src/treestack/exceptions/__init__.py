"""
TreeStack fault classes.

This package provides the severity scale and every fault type raised by the
node model, validators, built-in operations and the command registry.
"""

from treestack.exceptions.core import (
    ArgumentError,
    DuplicateToken,
    Fault,
    IndexOutOfRange,
    IntegerFormatError,
    Severity,
    ShapeMismatch,
    StackUnderflow,
    ValidatorSyntaxError,
)

__all__ = [
    "Severity",
    "Fault",
    "ArgumentError",
    "DuplicateToken",
    "IndexOutOfRange",
    "IntegerFormatError",
    "ShapeMismatch",
    "StackUnderflow",
    "ValidatorSyntaxError",
]
