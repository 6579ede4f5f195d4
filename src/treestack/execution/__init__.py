"""
TreeStack evaluation sessions.

This package provides the operand stack, the command registry, session
configuration, the diagnostic log and the evaluator that dispatches tokens.
"""

from treestack.execution.config import SessionConfig
from treestack.execution.diagnostics import DiagnosticLog, DiagnosticRecord
from treestack.execution.evaluator import BatchResult, Evaluator, Outcome
from treestack.execution.registry import CommandRegistry
from treestack.execution.stack import OperandStack

__all__ = [
    "Evaluator",
    "Outcome",
    "BatchResult",
    "SessionConfig",
    "CommandRegistry",
    "OperandStack",
    "DiagnosticLog",
    "DiagnosticRecord",
]
