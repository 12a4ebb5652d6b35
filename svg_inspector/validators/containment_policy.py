"""Containment Policy — which element types may nest directly inside which.

Permissive by default: most elements may hold most known elements. Rules only
narrow that default. The policy says nothing about attributes; a child that is
placed illegally is still validated on its own terms by the tree validator.
"""

from typing import Mapping, Optional

from svg_inspector.validators.reference_data import (
    CHILD_ALLOW_LISTS,
    CONTAINER_ELEMENTS,
    PARENT_REQUIREMENTS,
)


class ContainmentPolicy:
    """Decides whether a parent/child nesting is structurally legal."""

    def __init__(
        self,
        child_allow_lists: Optional[Mapping[str, frozenset]] = None,
        parent_requirements: Optional[Mapping[str, frozenset]] = None,
        containers: Optional[frozenset] = None,
    ):
        self.child_allow_lists = CHILD_ALLOW_LISTS if child_allow_lists is None else child_allow_lists
        self.parent_requirements = PARENT_REQUIREMENTS if parent_requirements is None else parent_requirements
        self.containers = CONTAINER_ELEMENTS if containers is None else containers

    def is_allowed_child(self, parent: str, child: str) -> bool:
        # Child-side rules apply regardless of what the parent would accept
        required_parents = self.parent_requirements.get(child)
        if required_parents is not None and parent not in required_parents:
            return False

        # Containers defer entirely to the child's own checks
        if parent in self.containers:
            return True

        allowed_children = self.child_allow_lists.get(parent)
        if allowed_children is None:
            return True
        return child in allowed_children


# Module-level singleton
containment_policy = ContainmentPolicy()
