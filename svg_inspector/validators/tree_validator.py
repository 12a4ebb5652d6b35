"""Tree Validator — walks the document and aggregates every finding.

The walk is depth-first pre-order (a node's own findings, then each child in
document order) but runs on an explicit stack, so hostile nesting depth cannot
exhaust the interpreter's call stack.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from svg_inspector.parser.document import DocumentNode, ElementChild
from svg_inspector.validators.attribute_validator import AttributeValidator
from svg_inspector.validators.base import BaseValidator
from svg_inspector.validators.containment_policy import ContainmentPolicy, containment_policy
from svg_inspector.validators.models import ErrorCode, ValidationError
from svg_inspector.validators.reference_data import FOREIGN_CONTENT_CONTAINER
from svg_inspector.validators.schema_registry import SchemaRegistry


@dataclass(frozen=True)
class _WorkItem:
    element_name: str
    node: DocumentNode
    inherited: frozenset
    # Findings raised while discovering this node under its parent
    placement_errors: tuple = ()
    discovered: bool = False


def _namespace_declarations(attributes: Iterable[str]) -> set[str]:
    return {a for a in attributes if a == "xmlns" or a.startswith("xmlns:")}


class TreeValidator(BaseValidator):
    """Applies attribute and containment checks to every node of a tree."""

    def __init__(
        self,
        registry: Optional[SchemaRegistry] = None,
        attribute_validator: Optional[AttributeValidator] = None,
        policy: Optional[ContainmentPolicy] = None,
    ):
        super().__init__(registry)
        self.attribute_validator = attribute_validator or AttributeValidator(self.registry)
        self.policy = policy or containment_policy

    @property
    def name(self) -> str:
        return "TreeValidator"

    def validate(
        self,
        element_name: str,
        node: DocumentNode,
        parent_name: Optional[str] = None,
    ) -> list[ValidationError]:
        """Validate a node and its whole subtree.

        Args:
            element_name: Name of the node being validated
            node: The node itself
            parent_name: Element the node sits under, None for the root. When
                given, the node's own placement under it is checked too.

        Returns:
            All findings, node-then-children, children in document order
        """
        errors: list[ValidationError] = []
        if parent_name is None:
            stack = [_WorkItem(element_name, node, frozenset())]
        else:
            stack = [self._discover(parent_name, ElementChild(element_name, node), frozenset())]

        while stack:
            item = stack.pop()
            errors.extend(item.placement_errors)
            errors.extend(self._check_node(item))

            # foreignObject content is non-native by definition
            if item.element_name == FOREIGN_CONTENT_CONTAINER:
                continue

            in_scope = item.inherited | _namespace_declarations(item.node.attributes)
            pending = [
                self._discover(item.element_name, child, in_scope)
                for child in item.node.element_children()
                if not self.registry.is_foreign_element(child.name)
            ]
            stack.extend(reversed(pending))

        return errors

    def _check_node(self, item: _WorkItem) -> list[ValidationError]:
        errors = []
        name = item.element_name

        if self.registry.is_deprecated_element(name):
            errors.append(self._error(
                code=ErrorCode.DEPRECATED_ELEMENT,
                message=f"<{name}> is deprecated and should not be used",
                element=name,
            ))

        # Unknown children were already reported when discovered
        if item.discovered and not self.registry.is_known_element(name):
            return errors

        errors.extend(self.attribute_validator.validate(name, item.node.attributes, item.inherited))
        return errors

    def _discover(self, parent: str, child: ElementChild, inherited: frozenset) -> _WorkItem:
        placement = []

        if not self.registry.is_known_element(child.name):
            placement.append(self._unknown_element(child.name))

        if not self.policy.is_allowed_child(parent, child.name):
            placement.append(self._error(
                code=ErrorCode.DISALLOWED_CHILD_PLACEMENT,
                message=f"<{child.name}> is not allowed as a child of <{parent}>",
                element=child.name,
            ))

        return _WorkItem(
            element_name=child.name,
            node=child.node,
            inherited=inherited,
            placement_errors=tuple(placement),
            discovered=True,
        )
