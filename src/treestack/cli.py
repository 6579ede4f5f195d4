"""
Command-line driver for TreeStack.

Reads one token per line from a script file or standard input and feeds it
to an Evaluator. The driver registers three host operations on top of the
built-ins:

    print    write the current stack to standard output
    system   pop a leaf and run its text as a shell command
    exit     stop reading input

Exit status is 0 at end of input, 1 after ``exit`` and 2 when a fault
escalates past the approved severity.
"""

import argparse
import logging
import subprocess
import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from treestack import __version__
from treestack.core.types import Operation
from treestack.exceptions import Fault, Severity
from treestack.execution import DiagnosticRecord, Evaluator, SessionConfig
from treestack.formatting import BranchFormat, StackOrder

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_REQUESTED = 1
EXIT_FAULT = 2


class ExitRequested(Exception):
    """Raised by the ``exit`` host operation to stop the read loop."""


def make_host_operations(out: TextIO, order: StackOrder = StackOrder.TOP_FIRST) -> dict[str, Operation]:
    """
    Build the host operations bound to an output sink.

    Params:
        out: Stream receiving ``print`` output
        order: Stack order used by ``print``

    Returns:
        Mapping of host token to operation, ready for registration
    """

    def print_stack(evaluator: Evaluator) -> None:
        out.write(evaluator.render(order))
        out.flush()

    def run_system(evaluator: Evaluator) -> None:
        evaluator.require("v")
        command = evaluator.stack.peek().text
        logger.info("Running host command %r", command)
        try:
            subprocess.run(command, shell=True, check=False)
        except OSError as exc:
            raise Fault("Host command failed", Severity.CRITICAL, cause=exc) from exc
        evaluator.stack.pop()

    def request_exit(evaluator: Evaluator) -> None:
        raise ExitRequested()

    return {"print": print_stack, "system": run_system, "exit": request_exit}


def run_session(evaluator: Evaluator, lines: Iterable[str], err: TextIO) -> int:
    """
    Evaluate one token per input line until input ends or evaluation stops.

    Blank lines are skipped.

    Params:
        evaluator: Session with host operations already registered
        lines: Input lines, line terminators included or not
        err: Stream receiving the report of an escalated fault

    Returns:
        Process exit status
    """
    for line in lines:
        token = line.rstrip("\r\n")
        if not token:
            continue
        try:
            outcome = evaluator.evaluate(token)
        except ExitRequested:
            logger.debug("Exit requested")
            return EXIT_REQUESTED
        if outcome.escalated:
            if evaluator.config.record_faults:
                report = evaluator.log.latest()
            else:
                report = DiagnosticRecord.from_fault(token, outcome.fault)
            err.write(f"{report.render()}\n")
            return EXIT_FAULT
    return EXIT_OK


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s [%(levelname)-5.5s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treestack",
        description="Evaluate TreeStack tokens, one per line.",
    )
    parser.add_argument(
        "script",
        nargs="?",
        help="File of tokens to evaluate (default: standard input).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v info, -vv debug).",
    )
    parser.add_argument(
        "--approved-severity",
        choices=[severity.name.lower() for severity in Severity],
        default="critical",
        help="Highest fault severity that does not stop evaluation.",
    )
    parser.add_argument("--indent", default="\t", help="Indent unit for printed trees.")
    parser.add_argument("--section", default="./section", help="Marker line for branches.")
    parser.add_argument(
        "--order",
        choices=[order.value for order in StackOrder],
        default=StackOrder.TOP_FIRST.value,
        help="Which end of the stack 'print' writes first.",
    )
    return parser


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """
    Run the TreeStack CLI.

    Params:
        argv: Command-line arguments, ``None`` for ``sys.argv[1:]``
        stdin: Token source when no script is given
        stdout: Sink for ``print``
        stderr: Sink for fault reports

    Returns:
        Process exit status
    """
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    config = SessionConfig(
        approved_severity=args.approved_severity,
        output=BranchFormat(indent=args.indent, section=args.section),
    )
    evaluator = Evaluator(config)
    evaluator.registry.register_all(make_host_operations(stdout, StackOrder(args.order)))

    try:
        if args.script is None:
            return run_session(evaluator, stdin, stderr)
        with open(args.script, encoding="utf-8") as script:
            return run_session(evaluator, script, stderr)
    except KeyboardInterrupt:
        logger.info("Interrupted by user.")
        return 130
