"""Schema Registry — read-only lookup API over the SVG element catalogue.

Usage:
    from svg_inspector.validators.schema_registry import schema_registry

    schema = schema_registry.lookup("rect")
    if schema is None:
        # Not part of the supported vocabulary
"""

from dataclasses import dataclass
from typing import Mapping, Optional

from svg_inspector.validators import reference_data


@dataclass(frozen=True)
class ElementSchema:
    """Attribute rules for one element type.

    required_attrs ⊆ allowed_attrs is an authoring invariant of the tables,
    not enforced here. See SchemaRegistry.check_consistency().
    """

    name: str
    required_attrs: frozenset
    allowed_attrs: frozenset


class SchemaRegistry:
    """Immutable catalogue of elements, global attributes, and deprecations.

    Built once from reference data; safe to share between threads since
    nothing is mutated after __init__.
    """

    def __init__(
        self,
        definitions: Optional[Mapping[str, tuple]] = None,
        global_categories: Optional[Mapping[str, frozenset]] = None,
        deprecated_elements: Optional[frozenset] = None,
        deprecated_attributes: Optional[frozenset] = None,
        foreign_elements: Optional[frozenset] = None,
    ):
        if definitions is None:
            definitions = reference_data.ELEMENT_DEFINITIONS
        if global_categories is None:
            global_categories = reference_data.GLOBAL_ATTRIBUTE_CATEGORIES

        self._schemas: dict[str, ElementSchema] = {
            name: ElementSchema(
                name=name,
                required_attrs=frozenset(required),
                allowed_attrs=frozenset(allowed),
            )
            for name, (required, allowed) in definitions.items()
        }
        self._global_categories = {k: frozenset(v) for k, v in global_categories.items()}
        self._global_attributes = frozenset().union(*self._global_categories.values())
        self._deprecated_elements = (
            reference_data.DEPRECATED_ELEMENTS if deprecated_elements is None else deprecated_elements
        )
        self._deprecated_attributes = (
            reference_data.DEPRECATED_ATTRIBUTES if deprecated_attributes is None else deprecated_attributes
        )
        self._foreign_elements = (
            reference_data.FOREIGN_ELEMENTS if foreign_elements is None else foreign_elements
        )

    def lookup(self, element_name: str) -> Optional[ElementSchema]:
        """Schema for an element, or None if it is not in the vocabulary."""
        return self._schemas.get(element_name)

    def is_known_element(self, element_name: str) -> bool:
        return element_name in self._schemas

    def is_deprecated_element(self, element_name: str) -> bool:
        return element_name in self._deprecated_elements

    def is_deprecated_attribute(self, attribute_name: str) -> bool:
        return attribute_name in self._deprecated_attributes

    def is_foreign_element(self, element_name: str) -> bool:
        """True for embedded non-SVG markup whose subtree is out of scope."""
        return element_name in self._foreign_elements

    def global_attribute_names(self) -> frozenset:
        """Union of every global attribute category."""
        return self._global_attributes

    def global_category(self, category: str) -> frozenset:
        return self._global_categories.get(category, frozenset())

    def element_names(self) -> list[str]:
        return sorted(self._schemas)

    def check_consistency(self) -> list[str]:
        """List authoring mistakes in the tables (empty when consistent).

        A required attribute that is not also allowed would reject every
        document using that element, so it is reported here.
        """
        problems = []
        for schema in self._schemas.values():
            for attr in sorted(schema.required_attrs - schema.allowed_attrs):
                problems.append(
                    f"<{schema.name}> requires '{attr}' but does not allow it"
                )
            for attr in sorted(schema.allowed_attrs & self._deprecated_attributes):
                problems.append(
                    f"<{schema.name}> allows deprecated attribute '{attr}'"
                )
        for name in sorted(self._foreign_elements & set(self._schemas)):
            problems.append(f"<{name}> is both an SVG element and foreign content")
        return problems

    def __len__(self) -> int:
        return len(self._schemas)


# Module-level singleton
schema_registry = SchemaRegistry()
