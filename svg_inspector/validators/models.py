"""Validation models — error codes, value faults, and the result structure.

All validation is deterministic: same input → same output, no hidden state.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorCode(str, Enum):
    """Deterministic error codes for every validation rule.

    Naming convention: CATEGORY_SPECIFIC_ISSUE
    """

    # Collected while walking the tree
    UNKNOWN_ELEMENT = "UNKNOWN_ELEMENT"
    MISSING_REQUIRED_ATTRIBUTE = "MISSING_REQUIRED_ATTRIBUTE"
    DISALLOWED_ATTRIBUTE = "DISALLOWED_ATTRIBUTE"
    INVALID_ATTRIBUTE_VALUE = "INVALID_ATTRIBUTE_VALUE"
    DEPRECATED_ELEMENT = "DEPRECATED_ELEMENT"
    DEPRECATED_ATTRIBUTE = "DEPRECATED_ATTRIBUTE"
    DISALLOWED_CHILD_PLACEMENT = "DISALLOWED_CHILD_PLACEMENT"

    # Early exits, no tree to walk
    MALFORMED_DOCUMENT = "MALFORMED_DOCUMENT"
    INVALID_ROOT = "INVALID_ROOT"
    INVALID_INPUT_TYPE = "INVALID_INPUT_TYPE"


class ValueFault(str, Enum):
    """Why an attribute value was rejected by its grammar checker."""

    MALFORMED = "malformed"        # Value does not match the grammar
    OUT_OF_RANGE = "out_of_range"  # Parses, but violates a numeric bound
    EMPTY = "empty"                # Empty where content is mandatory
    DEPRECATED = "deprecated"      # Attribute name itself is obsolete


class ValidationError(BaseModel):
    """A single validation finding."""

    model_config = ConfigDict(use_enum_values=True)

    code: ErrorCode
    message: str
    element: Optional[str] = None     # Which element is affected
    attribute: Optional[str] = None   # Which attribute triggered this
    value: Optional[str] = None       # The offending raw value
    value_fault: Optional[ValueFault] = None


class ValidationResult(BaseModel):
    """Complete validation result — the output of the validation engine."""

    is_valid: bool = Field(description="True if no violation of any kind was found")
    errors: list[str] = Field(default_factory=list, description="Human-readable messages, in walk order")
    issues: list[ValidationError] = Field(default_factory=list)
    summary: dict[str, int] = Field(
        default_factory=dict,
        description="Count of issues by error code",
    )

    @classmethod
    def build(cls, issues: list[ValidationError]) -> "ValidationResult":
        """Build a complete result from an ordered list of findings."""
        summary: dict[str, int] = {}
        for issue in issues:
            summary[issue.code] = summary.get(issue.code, 0) + 1

        return cls(
            is_valid=not issues,
            errors=[issue.message for issue in issues],
            issues=list(issues),
            summary=summary,
        )

    @classmethod
    def failure(cls, code: ErrorCode, message: str) -> "ValidationResult":
        """Single-error result for conditions that stop validation early."""
        return cls.build([ValidationError(code=code, message=message)])
