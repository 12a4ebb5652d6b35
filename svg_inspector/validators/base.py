"""Base validator — shared plumbing for the attribute and tree validators.

Each validator is a standalone, independently testable unit that reads the
schema registry and returns findings; none of them raise for bad input.
"""

from abc import ABC, abstractmethod
from typing import Optional

from svg_inspector.validators.models import ErrorCode, ValidationError, ValueFault
from svg_inspector.validators.schema_registry import SchemaRegistry, schema_registry


class BaseValidator(ABC):
    """Abstract base for document validators.

    Contract:
        - validate() is deterministic: same input → same output
        - validate() returns a list of ValidationError (empty = no issues)
        - validate() never stops at the first finding
    """

    def __init__(self, registry: Optional[SchemaRegistry] = None):
        self.registry = registry if registry is not None else schema_registry

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @abstractmethod
    def validate(self, *args, **kwargs) -> list[ValidationError]:
        """Run validation checks and return every finding."""
        ...

    # ── Helper Methods ──

    def _error(
        self,
        code: ErrorCode,
        message: str,
        element: Optional[str] = None,
        attribute: Optional[str] = None,
        value: Optional[str] = None,
        value_fault: Optional[ValueFault] = None,
    ) -> ValidationError:
        """Convenience method to create a ValidationError."""
        return ValidationError(
            code=code,
            message=message,
            element=element,
            attribute=attribute,
            value=value,
            value_fault=value_fault,
        )

    def _unknown_element(self, element_name: str) -> ValidationError:
        return self._error(
            code=ErrorCode.UNKNOWN_ELEMENT,
            message=f"<{element_name}> is not a valid SVG element",
            element=element_name,
        )
