"""
Tests for the row operations ($, $^, $_).
"""

import pytest

from treestack import build_node, node_to_python
from treestack.exceptions import ArgumentError, ShapeMismatch


class TestUndot:
    """Test $."""

    def test_strips_one_leading_dot(self, run):
        """Exactly one leading dot is removed."""
        assert run("..hidden", "$") == [".hidden"]

    def test_no_dot_is_noop(self, run):
        """Text without a leading dot is unchanged."""
        assert run("plain.txt", "$") == ["plain.txt"]

    def test_empty_leaf(self, run):
        """An empty leaf is left alone."""
        assert run("|Ev", "$") == [""]

    def test_mutates_in_place(self, evaluator):
        """The same leaf object is modified."""
        evaluator.evaluate(".x")
        leaf = evaluator.stack.peek()
        evaluator.evaluate("$")
        assert evaluator.stack.peek() is leaf
        assert leaf.text == "x"

    def test_requires_leaf(self, evaluator):
        """A branch on top is rejected."""
        evaluator.evaluate("|Eb")
        assert isinstance(evaluator.evaluate("$").fault, ShapeMismatch)


class TestConcatRow:
    """Test $^."""

    def test_skips_nested_branches(self, evaluator):
        """Only direct leaf children are joined."""
        evaluator.stack.push(build_node(["x", ["z"], "y"]))
        evaluator.evaluate_batch(["-", "$^"])
        assert [node_to_python(node) for node in evaluator.stack] == ["x-y"]

    def test_empty_separator(self, run):
        """An empty separator concatenates directly."""
        assert run("a", "b", "2", "^tc", "|Ev", "$^") == ["ab"]

    def test_empty_branch(self, run):
        """Joining an empty branch gives an empty leaf."""
        assert run("|Eb", ",", "$^") == [""]

    def test_requires_separator_leaf(self, evaluator):
        """The separator must be a leaf."""
        evaluator.evaluate_batch(["|Eb", "|Eb"])
        assert isinstance(evaluator.evaluate("$^").fault, ShapeMismatch)
        assert len(evaluator.stack) == 2


class TestSplitRow:
    """Test $_."""

    def test_empty_segments_kept(self, run):
        """Adjacent delimiters produce empty segments."""
        assert run("a,b,,c", ",", "$_") == [["a", "b", "", "c"]]

    def test_boundary_delimiters(self, run):
        """Leading and trailing delimiters produce empty segments."""
        assert run(",a,", ",", "$_") == [["", "a", ""]]

    def test_multi_character_delimiter(self, run):
        """Delimiters may be longer than one character."""
        assert run("a::b::c", "::", "$_") == [["a", "b", "c"]]

    def test_no_delimiter_found(self, run):
        """A subject without the delimiter becomes a single segment."""
        assert run("abc", ";", "$_") == [["abc"]]

    def test_empty_subject(self, run):
        """An empty subject gives one empty segment."""
        assert run("|Ev", ",", "$_") == [[""]]

    def test_empty_delimiter_rejected(self, evaluator):
        """An empty delimiter is Critical and nothing is popped."""
        evaluator.evaluate_batch(["abc", "|Ev"])
        outcome = evaluator.evaluate("$_")
        assert isinstance(outcome.fault, ArgumentError)
        assert len(evaluator.stack) == 2

    @pytest.mark.parametrize(
        "subject,delimiter",
        [("a,b,,c", ","), (",,", ","), ("", "/"), ("one", "one"), ("a--b-", "--")],
    )
    def test_split_then_join_restores(self, run, subject, delimiter):
        """$_ followed by $^ with the same text restores the subject."""
        assert run(subject, delimiter, "$_", delimiter, "$^") == [subject]
