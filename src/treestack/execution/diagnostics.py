"""
Diagnostic log of faults raised during evaluation.

The log is stack-like: the most recent record comes first when iterating.
It only ever grows while a session is alive.
"""

from collections.abc import Iterator

from attrs import field, frozen

from treestack.exceptions import Fault, Severity


@frozen
class DiagnosticRecord:
    """One logged fault and the token that triggered it."""

    token: str
    message: str
    severity: Severity
    trace: tuple[str, ...] = field(default=(), converter=tuple)

    @classmethod
    def from_fault(
        cls, token: str, fault: Fault, trace: tuple[str, ...] = ()
    ) -> "DiagnosticRecord":
        return cls(token=token, message=fault.render(), severity=fault.severity, trace=trace)

    def render(self) -> str:
        """
        Render the record as human-readable text.

        Returns:
            Fault message, the triggering token and, for batch evaluation,
            the tokens attempted so far
        """
        text = f"{self.message}\nCaused during invoking: {self.token}"
        if self.trace:
            text += "\nCom trace:\n" + "".join(f"\t{token}\n" for token in self.trace)
        return text

    def __str__(self) -> str:
        return self.render()


class DiagnosticLog:
    """Ordered fault records, newest first."""

    def __init__(self):
        self._records: list[DiagnosticRecord] = []

    def push(self, record: DiagnosticRecord) -> None:
        self._records.append(record)

    def latest(self) -> DiagnosticRecord | None:
        """Get the most recent record, or None when nothing was logged."""
        return self._records[-1] if self._records else None

    @property
    def records(self) -> tuple[DiagnosticRecord, ...]:
        """All records, most recent first."""
        return tuple(reversed(self._records))

    def __iter__(self) -> Iterator[DiagnosticRecord]:
        return reversed(self._records)

    def __len__(self) -> int:
        return len(self._records)
