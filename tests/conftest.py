"""
Shared test fixtures and utilities for the treestack test suite.
"""

import pytest

from treestack import Evaluator, SessionConfig, node_to_python


@pytest.fixture
def evaluator():
    """Fresh evaluator with the built-in operations loaded."""
    return Evaluator()


@pytest.fixture
def run(evaluator):
    """Evaluate tokens and return the stack as plain Python values.

    Usage:
        def test_something(run):
            assert run("a", "b", "2", "^tc") == [["a", "b"]]
    """

    def _run(*tokens: str):
        for token in tokens:
            outcome = evaluator.evaluate(token)
            assert outcome.fault is None, str(outcome.fault)
        return [node_to_python(node) for node in evaluator.stack]

    return _run


@pytest.fixture
def strict_evaluator():
    """Evaluator that escalates anything above Minor."""
    return Evaluator(SessionConfig(approved_severity="minor"))
