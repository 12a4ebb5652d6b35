"""Document tree — the read-only node structure handed to the validators.

Children are a tagged variant resolved once by the parser adapter, so the
validators never have to guess whether a child slot is text or markup.
"""

from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass(frozen=True)
class TextChild:
    """Character data between elements. Never validated."""

    text: str


@dataclass(frozen=True)
class ElementChild:
    """A child element slot: the element name plus its subtree."""

    name: str
    node: "DocumentNode"


Child = Union[TextChild, ElementChild]


@dataclass(frozen=True)
class DocumentNode:
    """One element instance as seen by the validators."""

    element_name: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: tuple[Child, ...] = ()
    text_content: Optional[str] = None

    def element_children(self) -> list[ElementChild]:
        return [c for c in self.children if isinstance(c, ElementChild)]
