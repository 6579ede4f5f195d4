"""
Evaluator and dispatch loop for TreeStack sessions.

Tokens are evaluated one at a time. A token registered in the session's
registry invokes its operation; any other token is pushed as a Leaf holding
the token text. Faults raised by operations never leave the evaluator as
exceptions: they are logged and returned as explicit Outcome/BatchResult
values, and the approved severity decides whether evaluation continues.
"""

import logging
from collections.abc import Iterable

from attrs import field, frozen

from treestack.core.nodes import Branch, Leaf
from treestack.exceptions import Fault, Severity
from treestack.execution.config import SessionConfig
from treestack.execution.diagnostics import DiagnosticLog, DiagnosticRecord
from treestack.execution.registry import CommandRegistry
from treestack.execution.stack import OperandStack
from treestack.formatting import StackOrder, render_stack
from treestack.operations import load_default_operations
from treestack.validation import count_top_level, require_shape

logger = logging.getLogger(__name__)


@frozen
class Outcome:
    """Result of evaluating a single token."""

    token: str
    fault: Fault | None = None
    escalated: bool = False

    @property
    def ok(self) -> bool:
        return self.fault is None


@frozen
class BatchResult:
    """
    Result of evaluating a batch of tokens.

    Params:
        evaluated: Number of tokens attempted, including an aborting one
        faults: Every fault raised in the batch, in the order raised
        escalated: The fault that aborted the batch, if any
        trace: Tokens attempted before the batch finished or aborted
    """

    evaluated: int
    faults: tuple[Fault, ...] = field(default=(), converter=tuple)
    escalated: Fault | None = None
    trace: tuple[str, ...] = field(default=(), converter=tuple)

    @property
    def completed(self) -> bool:
        return self.escalated is None


class Evaluator:
    """
    One evaluation session.

    Owns exactly one operand stack, command registry and diagnostic log.
    Operations receive the evaluator itself and act on ``stack``.
    """

    def __init__(self, config: SessionConfig | None = None, load_defaults: bool = True):
        """
        Initialize the session.

        Params:
            config: Session settings, defaults to SessionConfig()
            load_defaults: Whether to register the built-in operations
        """
        self.config = config or SessionConfig()
        self.stack = OperandStack()
        self.registry = CommandRegistry()
        self.log = DiagnosticLog()
        if load_defaults:
            load_default_operations(self.registry)

    @property
    def approved_severity(self) -> Severity:
        return self.config.approved_severity

    def require(self, directives: str) -> None:
        """
        Validate the shape of the top stack items before an operation runs.

        The items addressed by the directive string are checked bottom-most
        first, as if they were the children of one branch. ``"b.ii"`` therefore
        requires a Branch under two bounded integers, the last one on top.

        Params:
            directives: Directive string understood by require_shape

        Raises:
            StackUnderflow: When the stack has fewer items than addressed
            ShapeMismatch: When an item has the wrong shape
        """
        items = self.stack.top(count_top_level(directives))
        require_shape(directives, Branch.model_construct(children=items))

    def _dispatch(self, token: str) -> None:
        operation = self.registry.lookup(token)
        if operation is None:
            self.stack.push(Leaf(text=token))
            return
        logger.debug("Invoking operation %r", token)
        operation(self)

    def _escalates(self, fault: Fault) -> bool:
        return fault.severity > self.config.approved_severity

    def evaluate(self, token: str, record: bool = True) -> Outcome:
        """
        Evaluate a single token.

        Params:
            token: Operation name or literal text
            record: Whether a raised fault is appended to the diagnostic log

        Returns:
            Outcome naming the fault, if any, and whether it escalated
        """
        try:
            self._dispatch(token)
        except Fault as fault:
            if record and self.config.record_faults:
                self.log.push(DiagnosticRecord.from_fault(token, fault))
            escalated = self._escalates(fault)
            if escalated:
                logger.error("Fault escalated at token %r: %s", token, fault.message)
            else:
                logger.warning("Fault at token %r: %s", token, fault.message)
            return Outcome(token=token, fault=fault, escalated=escalated)
        return Outcome(token=token)

    def evaluate_batch(self, tokens: Iterable[str]) -> BatchResult:
        """
        Evaluate tokens in order, stopping at the first escalated fault.

        Each logged record carries the trace of tokens attempted so far in
        this batch. Tokens after an escalated fault are not evaluated.

        Params:
            tokens: Tokens to evaluate

        Returns:
            BatchResult describing how far evaluation got
        """
        trace: list[str] = []
        faults: list[Fault] = []
        for token in tokens:
            trace.append(token)
            outcome = self.evaluate(token, record=False)
            if outcome.fault is None:
                continue
            faults.append(outcome.fault)
            if self.config.record_faults:
                self.log.push(
                    DiagnosticRecord.from_fault(token, outcome.fault, tuple(trace))
                )
            if outcome.escalated:
                return BatchResult(
                    evaluated=len(trace), faults=faults, escalated=outcome.fault, trace=trace
                )
        return BatchResult(evaluated=len(trace), faults=faults, trace=trace)

    def render(self, order: StackOrder = StackOrder.BOTTOM_FIRST) -> str:
        """
        Serialize the current stack with the session's output format.

        Params:
            order: Whether the bottom or the top item is rendered first

        Returns:
            Rendered text; the stack itself is left untouched
        """
        return render_stack(self.stack.snapshot(), self.config.output, order)
