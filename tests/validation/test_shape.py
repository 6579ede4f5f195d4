"""
Tests for the directive-driven shape validator.
"""

import pytest

from treestack import Leaf, build_node
from treestack.exceptions import (
    IntegerFormatError,
    Severity,
    ShapeMismatch,
    ValidatorSyntaxError,
)
from treestack.validation import count_top_level, require_shape


class TestRequireShape:
    """Test directive interpretation."""

    def test_flat_directives(self):
        """Leaf, integer and skip directives advance the cursor."""
        node = build_node(["a", "12", ["x"]])
        assert require_shape("vie", node) is node

    def test_descend_and_ascend(self):
        """'b' descends into a branch and '.' returns to its parent."""
        node = build_node([["a", "1"], "b"])
        require_shape("bvi.v", node)

    def test_nested_descent(self):
        """Descents compose to any depth."""
        node = build_node([[["deep"]]])
        require_shape("bbv", node)

    def test_prefix_check_ignores_remaining_children(self):
        """Children past the directives are not inspected."""
        require_shape("v", build_node(["a", ["ignored"]]))

    def test_empty_directives(self):
        """An empty directive string only requires a branch."""
        require_shape("", build_node([]))

    def test_root_must_be_branch(self):
        """The validated node itself must be a branch."""
        with pytest.raises(ShapeMismatch):
            require_shape("v", Leaf(text="a"))

    def test_expected_leaf(self):
        """'v' on a branch reports a missing Leaf."""
        with pytest.raises(ShapeMismatch) as exc_info:
            require_shape("v", build_node([["a"]]))
        assert exc_info.value.expected == "Leaf"

    def test_expected_branch(self):
        """'b' on a leaf reports a missing Branch."""
        with pytest.raises(ShapeMismatch) as exc_info:
            require_shape("vb", build_node(["a", "b"]))
        assert exc_info.value.expected == "Branch"

    def test_integer_directive(self):
        """'i' rejects non-integer leaves."""
        with pytest.raises(IntegerFormatError):
            require_shape("i", build_node(["abc"]))

    def test_missing_child(self):
        """Running past the last child is a shape mismatch."""
        with pytest.raises(ShapeMismatch) as exc_info:
            require_shape("vv", build_node(["a"]))
        assert exc_info.value.severity is Severity.CRITICAL

    def test_unknown_directive(self):
        """Unknown directive characters are a Critical syntax error."""
        with pytest.raises(ValidatorSyntaxError) as exc_info:
            require_shape("vx", build_node(["a", "b"]))
        assert exc_info.value.position == 1
        assert exc_info.value.severity is Severity.CRITICAL

    def test_ascend_past_root(self):
        """Directives after leaving the root are a syntax error."""
        with pytest.raises(ValidatorSyntaxError):
            require_shape(".v", build_node(["a"]))


class TestCountTopLevel:
    """Test counting of root-level directives."""

    @pytest.mark.parametrize(
        "directives,count",
        [("", 0), ("v", 1), ("bii", 1), ("b.ii", 3), ("bvv.i", 2), ("bb.v.e", 2)],
    )
    def test_count(self, directives, count):
        """Only steps at nesting level zero are counted."""
        assert count_top_level(directives) == count
