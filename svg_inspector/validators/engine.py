"""Validation Engine — parses the document, checks the root, runs the tree walk.

This is the main entry point for SVG validation.

Usage:
    engine = ValidationEngine()
    result = engine.validate(svg_text)
    if not result.is_valid:
        for message in result.errors:
            print(message)
"""

import time
from typing import Any, Callable, Optional

import structlog

from svg_inspector.parser import DocumentNode, MalformedDocumentError, parse_document
from svg_inspector.validators.models import ErrorCode, ValidationResult
from svg_inspector.validators.reference_data import ROOT_ELEMENT
from svg_inspector.validators.schema_registry import SchemaRegistry, schema_registry
from svg_inspector.validators.tree_validator import TreeValidator

logger = structlog.get_logger()

INPUT_NOT_A_STRING = "Input is not a string"


class ValidationEngine:
    """Turns raw markup into a ValidationResult.

    Design principles:
        - Deterministic: same input → same output, no state kept between calls
        - Exhaustive: every violation in the tree is reported, not just the first
        - Early exit only when there is no tree to walk (bad input, bad XML, bad root)
        - Observable: logs every validation run with timing
    """

    def __init__(
        self,
        registry: Optional[SchemaRegistry] = None,
        tree_validator: Optional[TreeValidator] = None,
        parser: Callable[[str], DocumentNode] = parse_document,
        root_element: str = ROOT_ELEMENT,
    ):
        """Initialize with the default schema or custom collaborators.

        Args:
            registry: Schema registry. If None, uses the built-in SVG catalogue.
            tree_validator: Tree walker. If None, one is built over the registry.
            parser: Markup text → DocumentNode; must raise MalformedDocumentError.
            root_element: Element name the document root must carry.
        """
        self.registry = registry if registry is not None else schema_registry
        self.tree_validator = tree_validator or TreeValidator(self.registry)
        self.parser = parser
        self.root_element = root_element

    def validate(self, svg_text: Any) -> ValidationResult:
        """Validate SVG markup.

        Args:
            svg_text: The SVG document as a string. Anything else is rejected.

        Returns:
            ValidationResult with is_valid and every error found
        """
        start_time = time.perf_counter()

        if not isinstance(svg_text, str):
            logger.info("document_rejected", reason="input_type", input_type=type(svg_text).__name__)
            return ValidationResult.failure(ErrorCode.INVALID_INPUT_TYPE, INPUT_NOT_A_STRING)

        try:
            root = self.parser(svg_text)
        except MalformedDocumentError as e:
            logger.info("document_rejected", reason="malformed", error=e.message, line=e.line)
            return ValidationResult.failure(
                ErrorCode.MALFORMED_DOCUMENT,
                f"Malformed SVG document: {e.message}",
            )

        if root.element_name != self.root_element:
            logger.info("document_rejected", reason="root", root=root.element_name)
            return ValidationResult.failure(
                ErrorCode.INVALID_ROOT,
                f"Root element is not <{self.root_element}> (found <{root.element_name}>)",
            )

        issues = self.tree_validator.validate(root.element_name, root)
        result = ValidationResult.build(issues)

        logger.info(
            "validation_complete",
            is_valid=result.is_valid,
            summary=result.summary,
            total_errors=len(issues),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )

        return result


# Module-level singleton
validation_engine = ValidationEngine()


def validate_svg(svg_text: Any) -> ValidationResult:
    """Validate SVG markup with the default engine."""
    return validation_engine.validate(svg_text)
