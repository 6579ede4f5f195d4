"""
Session configuration for the TreeStack evaluator.
"""

from pydantic import BaseModel, Field, field_validator

from treestack.exceptions import Severity
from treestack.formatting import BranchFormat


class SessionConfig(BaseModel):
    """
    Per-session evaluator settings.

    Params:
        approved_severity: Faults above this ceiling abort the current batch;
            faults at or below it are logged and evaluation continues
        record_faults: Whether faults are appended to the diagnostic log
        output: Serialization settings used by Evaluator.render
    """

    approved_severity: Severity = Severity.CRITICAL
    record_faults: bool = True
    output: BranchFormat = Field(default_factory=BranchFormat)

    @field_validator("approved_severity", mode="before")
    @classmethod
    def _parse_severity(cls, value):
        return Severity.parse(value)
