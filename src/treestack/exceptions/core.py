"""
Fault classes for the TreeStack execution engine.

Every failure raised by a built-in operation is a Fault carrying a severity.
The evaluator compares that severity with the session's approved ceiling to
decide whether evaluation continues or the current batch is aborted.
"""

from enum import IntEnum


class Severity(IntEnum):
    """Fault severity, ordered from least to most severe."""

    WARNING = 0
    MINOR = 1
    CRITICAL = 2
    FATAL = 3

    @property
    def label(self) -> str:
        """Return the capitalized name used in rendered fault messages."""
        return self.name.capitalize()

    @classmethod
    def parse(cls, value: "Severity | int | str") -> "Severity":
        """
        Coerce a severity given as an enum member, integer or name.

        Params:
            value: Severity member, its integer value, or a case-insensitive name

        Returns:
            The matching Severity member

        Raises:
            ValueError: When the value names no severity
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(f"Unknown severity '{value}'") from None
        return cls(value)


class Fault(Exception):
    """Base class for all faults raised while evaluating tokens."""

    default_severity = Severity.FATAL

    def __init__(
        self,
        message: str = "Execution engine fault",
        severity: Severity | None = None,
        cause: Exception | None = None,
    ):
        """
        Initialize the fault.

        Params:
            message: Human-readable description of the failure
            severity: Fault severity, defaults to the class default severity
            cause: Optional underlying exception included in the rendered message
        """
        self.message = message
        self.severity = severity if severity is not None else self.default_severity
        self.cause = cause
        super().__init__(self.render())

    def render(self) -> str:
        """
        Render the fault message together with its cause chain.

        Returns:
            Message tagged with the severity label, one line per wrapped cause
        """
        lines = [f"{self.message} [{self.severity.label}]"]
        cause = self.cause
        while cause is not None:
            if isinstance(cause, Fault):
                lines.append(f"  caused by: {cause.message} [{cause.severity.label}]")
                cause = cause.cause
            else:
                lines.append(f"  caused by: {cause}")
                cause = None
        return "\n".join(lines)


class StackUnderflow(Fault):
    """Raised when an operation needs more stack items than are present."""

    default_severity = Severity.CRITICAL

    def __init__(self, required: int = 1, available: int = 0):
        """
        Initialize the exception.

        Params:
            required: Number of items the operation needed
            available: Number of items actually on the stack
        """
        self.required = required
        self.available = available
        super().__init__(
            f"Required argument, but not passed (need {required}, have {available})"
        )


class ShapeMismatch(Fault):
    """Raised when a node does not have the expected Leaf/Branch shape."""

    default_severity = Severity.CRITICAL

    def __init__(self, expected: str, message: str | None = None):
        """
        Initialize the exception.

        Params:
            expected: Name of the variant that was expected ("Leaf" or "Branch")
            message: Optional override of the default message
        """
        self.expected = expected
        if message is None:
            found = "Branch" if expected == "Leaf" else "Leaf"
            message = f"{found} passed where {expected} was expected"
        super().__init__(message)


class IntegerFormatError(Fault):
    """Raised when a leaf is not a bounded decimal integer."""

    default_severity = Severity.CRITICAL

    def __init__(self, text: str, reason: str):
        """
        Initialize the exception.

        Params:
            text: The offending leaf text
            reason: Why the text was rejected
        """
        self.text = text
        self.reason = reason
        super().__init__(f"{reason}: '{text}'")


class ValidatorSyntaxError(Fault):
    """Raised when a shape directive string is malformed."""

    default_severity = Severity.CRITICAL

    def __init__(self, directives: str, position: int, reason: str):
        """
        Initialize the exception.

        Params:
            directives: The full directive string
            position: Index of the offending directive
            reason: Why the directive could not be applied
        """
        self.directives = directives
        self.position = position
        super().__init__(
            f"Require syntax error in '{directives}' at position {position}: {reason}"
        )


class ArgumentError(Fault):
    """Raised when an operation argument has the right shape but an invalid value."""

    default_severity = Severity.CRITICAL


class IndexOutOfRange(Fault):
    """Raised when an unchecked child access falls outside a branch."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Child index {index} outside branch of {size} children")


class DuplicateToken(Fault):
    """Raised when registering a token that already names an operation."""

    def __init__(self, token: str):
        """
        Initialize the exception.

        Params:
            token: The token that is already registered
        """
        self.token = token
        super().__init__(f"Token '{token}' is already registered")
