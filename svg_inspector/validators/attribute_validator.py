"""Attribute Validator — required attributes, allow-listing, and value grammar."""

from typing import Iterable, Mapping

from svg_inspector.validators.base import BaseValidator
from svg_inspector.validators.models import ErrorCode, ValidationError, ValueFault
from svg_inspector.validators.reference_data import (
    EVENT_HANDLER_ATTRIBUTES,
    OPAQUE_ATTRIBUTES,
    WILDCARD_PREFIXES,
)
from svg_inspector.validators.value_grammar import check_value


def is_wildcard_attribute(attribute: str) -> bool:
    """data-*, aria-*, xmlns:*, known on<event> handlers and role are opaque tokens."""
    if attribute in OPAQUE_ATTRIBUTES or attribute in EVENT_HANDLER_ATTRIBUTES:
        return True
    return attribute.startswith(WILDCARD_PREFIXES)


class AttributeValidator(BaseValidator):
    """Checks one element's attribute map against its schema."""

    @property
    def name(self) -> str:
        return "AttributeValidator"

    def validate(
        self,
        element_name: str,
        attributes: Mapping[str, str],
        inherited: Iterable[str] = (),
    ) -> list[ValidationError]:
        """Validate the attributes of a single element.

        Args:
            element_name: Element the attributes belong to
            attributes: Realized attribute name → raw value map
            inherited: Attribute names satisfied by an ancestor (namespace
                declarations are in scope for the whole subtree)

        Returns:
            Every finding, in the order: missing required, then per attribute
        """
        schema = self.registry.lookup(element_name)
        if schema is None:
            return [self._unknown_element(element_name)]

        errors = []
        inherited = set(inherited)

        # 1. Required attributes
        for attr in sorted(schema.required_attrs):
            if attr not in attributes and attr not in inherited:
                errors.append(self._error(
                    code=ErrorCode.MISSING_REQUIRED_ATTRIBUTE,
                    message=f"Missing required attribute '{attr}' on <{element_name}>",
                    element=element_name,
                    attribute=attr,
                ))

        global_attrs = self.registry.global_attribute_names()

        for attr, value in attributes.items():
            # 2. Deprecated names fail regardless of value
            if self.registry.is_deprecated_attribute(attr):
                errors.append(self._error(
                    code=ErrorCode.DEPRECATED_ATTRIBUTE,
                    message=f"Attribute '{attr}' on <{element_name}> is deprecated",
                    element=element_name,
                    attribute=attr,
                    value=value,
                    value_fault=ValueFault.DEPRECATED,
                ))
                continue

            # 3. Allow-listing
            if is_wildcard_attribute(attr):
                continue
            if attr not in schema.allowed_attrs and attr not in global_attrs:
                errors.append(self._error(
                    code=ErrorCode.DISALLOWED_ATTRIBUTE,
                    message=f"Attribute '{attr}' is not allowed on <{element_name}>",
                    element=element_name,
                    attribute=attr,
                    value=value,
                ))
                continue

            # 4. Value grammar
            check = check_value(attr, value)
            if not check.accepted:
                errors.append(self._error(
                    code=ErrorCode.INVALID_ATTRIBUTE_VALUE,
                    message=f"Invalid attribute value on <{element_name}>: {check.reason}",
                    element=element_name,
                    attribute=attr,
                    value=value,
                    value_fault=check.fault,
                ))

        return errors
