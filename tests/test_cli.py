"""
Tests for the command-line driver and its host operations.
"""

from io import StringIO
from unittest.mock import patch

import pytest

from treestack import Evaluator, SessionConfig, StackOrder
from treestack.cli import (
    EXIT_FAULT,
    EXIT_OK,
    EXIT_REQUESTED,
    main,
    make_host_operations,
    run_session,
)


def _run_cli(script: str, *argv: str) -> tuple[int, str, str]:
    stdout = StringIO()
    stderr = StringIO()
    status = main(list(argv), stdin=StringIO(script), stdout=stdout, stderr=stderr)
    return status, stdout.getvalue(), stderr.getvalue()


class TestMain:
    """Test the CLI entry point."""

    def test_print_top_first(self):
        """print writes the stack with the top item first by default."""
        status, out, _ = _run_cli("a\nb\n2\n^tc\nc\nprint\n")
        assert status == EXIT_OK
        assert out == "c\n./section\n\ta\n\tb\n"

    def test_print_bottom_first(self):
        """--order bottom writes the bottom item first."""
        _, out, _ = _run_cli("a\nb\nprint\n", "--order", "bottom")
        assert out == "a\nb\n"

    def test_custom_format(self):
        """--indent and --section change the printed format."""
        _, out, _ = _run_cli("x\n^t\nprint\n", "--indent", "  ", "--section", "<g>")
        assert out == "<g>\n  x\n"

    def test_blank_lines_skipped(self):
        """Blank lines are not evaluated as tokens."""
        _, out, _ = _run_cli("a\n\n\r\nprint\n")
        assert out == "a\n"

    def test_exit_stops_reading(self):
        """exit stops the loop with status 1."""
        status, out, _ = _run_cli("a\nexit\nprint\n")
        assert status == EXIT_REQUESTED
        assert out == ""

    def test_escalated_fault_reported(self):
        """An escalated fault is reported on stderr with status 2."""
        status, _, err = _run_cli("#\na\n", "--approved-severity", "minor")
        assert status == EXIT_FAULT
        assert "Required argument, but not passed" in err
        assert "Caused during invoking: #" in err

    def test_swallowed_fault_continues(self):
        """With the default ceiling Critical faults do not stop the loop."""
        status, out, err = _run_cli("#\na\nprint\n")
        assert status == EXIT_OK
        assert out == "a\n"
        assert err == ""

    def test_script_file(self, tmp_path):
        """Tokens can be read from a script file."""
        script = tmp_path / "tokens.txt"
        script.write_text("a,b\n,\n$_\nprint\n", encoding="utf-8")
        stdout = StringIO()
        status = main([str(script)], stdout=stdout, stderr=StringIO())
        assert status == EXIT_OK
        assert stdout.getvalue() == "./section\n\ta\n\tb\n"

    def test_invalid_severity_rejected(self):
        """Unknown severities are rejected by argument parsing."""
        with pytest.raises(SystemExit):
            _run_cli("", "--approved-severity", "loud")


class TestHostOperations:
    """Test host operations in isolation."""

    def test_system_runs_and_pops(self):
        """system runs the top leaf as a shell command and pops it."""
        evaluator = Evaluator()
        evaluator.registry.register_all(make_host_operations(StringIO()))
        evaluator.evaluate("echo hi")
        with patch("treestack.cli.subprocess.run") as mock_run:
            outcome = evaluator.evaluate("system")
        assert outcome.ok
        mock_run.assert_called_once_with("echo hi", shell=True, check=False)
        assert len(evaluator.stack) == 0

    def test_system_failure_is_fault(self):
        """An OS error from the shell becomes a Critical fault wrapping it."""
        evaluator = Evaluator()
        evaluator.registry.register_all(make_host_operations(StringIO()))
        evaluator.evaluate("missing-shell")
        with patch("treestack.cli.subprocess.run", side_effect=OSError("no shell")):
            outcome = evaluator.evaluate("system")
        assert outcome.fault is not None
        assert "no shell" in str(outcome.fault)
        assert len(evaluator.stack) == 1

    def test_system_requires_leaf(self):
        """system needs a leaf on top."""
        evaluator = Evaluator()
        evaluator.registry.register_all(make_host_operations(StringIO()))
        assert evaluator.evaluate("system").fault is not None

    def test_run_session_end_of_input(self):
        """run_session returns 0 when input runs out."""
        evaluator = Evaluator()
        out = StringIO()
        evaluator.registry.register_all(make_host_operations(out, StackOrder.BOTTOM_FIRST))
        assert run_session(evaluator, ["a\n", "b\n", "print\n"], StringIO()) == EXIT_OK
        assert out.getvalue() == "a\nb\n"

    def test_run_session_reports_logged_record(self):
        """The escalated fault is reported from the latest log record."""
        evaluator = Evaluator(SessionConfig(approved_severity="minor"))
        err = StringIO()
        assert run_session(evaluator, ["a\n", "$^\n", "b\n"], err) == EXIT_FAULT
        assert err.getvalue() == f"{evaluator.log.latest().render()}\n"
        assert "Caused during invoking: $^" in err.getvalue()

    def test_run_session_reports_without_recording(self):
        """Faults are still reported when the session does not record them."""
        evaluator = Evaluator(SessionConfig(approved_severity="minor", record_faults=False))
        err = StringIO()
        assert run_session(evaluator, ["#\n"], err) == EXIT_FAULT
        assert len(evaluator.log) == 0
        assert "Caused during invoking: #" in err.getvalue()
