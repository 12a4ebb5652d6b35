"""SVG validators — deterministic conformance checks for SVG documents.

Usage:
    from svg_inspector.validators import validation_engine

    result = validation_engine.validate(svg_text)
    if not result.is_valid:
        # result.errors holds every violation, in document order
"""

from svg_inspector.validators.attribute_validator import AttributeValidator
from svg_inspector.validators.containment_policy import ContainmentPolicy, containment_policy
from svg_inspector.validators.engine import ValidationEngine, validate_svg, validation_engine
from svg_inspector.validators.models import ErrorCode, ValidationError, ValidationResult, ValueFault
from svg_inspector.validators.schema_registry import ElementSchema, SchemaRegistry, schema_registry
from svg_inspector.validators.tree_validator import TreeValidator

__all__ = [
    "AttributeValidator",
    "ContainmentPolicy",
    "containment_policy",
    "ValidationEngine",
    "validate_svg",
    "validation_engine",
    "ErrorCode",
    "ValidationError",
    "ValidationResult",
    "ValueFault",
    "ElementSchema",
    "SchemaRegistry",
    "schema_registry",
    "TreeValidator",
]
