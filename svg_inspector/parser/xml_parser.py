"""lxml adapter — turns SVG markup text into a DocumentNode tree.

Malformed input raises MalformedDocumentError; a partial tree is never returned.
"""

from typing import Optional

from lxml import etree

from svg_inspector.parser.document import Child, DocumentNode, ElementChild, TextChild
from svg_inspector.parser.errors import MalformedDocumentError

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
XLINK_NAMESPACE = "http://www.w3.org/1999/xlink"
XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"

# Prefixes used when a namespaced attribute's prefix is not declared in scope
CANONICAL_PREFIXES = {
    XML_NAMESPACE: "xml",
    XLINK_NAMESPACE: "xlink",
}


def _make_parser() -> etree.XMLParser:
    # Parsers are cheap and not shared between threads, so one per call.
    return etree.XMLParser(
        encoding="utf-8",
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
        remove_pis=True,
        # Raises libxml2's 256-level nesting cap; entities stay unresolved
        huge_tree=True,
    )


def split_tag(tag: str) -> tuple[Optional[str], str]:
    """Split '{namespace}local' into (namespace, local)."""
    if tag.startswith("{"):
        namespace, local = tag[1:].split("}", 1)
        return namespace, local
    return None, tag


def element_name(element) -> str:
    """Name of an element as the schema knows it.

    SVG and un-prefixed elements use their local name; elements from other
    prefixed namespaces keep 'prefix:local' so they never collide with SVG.
    """
    namespace, local = split_tag(element.tag)
    if namespace is None or namespace == SVG_NAMESPACE or element.prefix is None:
        return local
    return f"{element.prefix}:{local}"


def attribute_name(element, key: str) -> str:
    namespace, local = split_tag(key)
    if namespace is None:
        return local
    if namespace == XML_NAMESPACE:
        return f"xml:{local}"
    prefix = next(
        (p for p, uri in element.nsmap.items() if uri == namespace and p is not None),
        CANONICAL_PREFIXES.get(namespace),
    )
    return f"{prefix}:{local}" if prefix else local


def namespace_declarations(element) -> dict[str, str]:
    """xmlns / xmlns:prefix declarations made on this element itself."""
    parent = element.getparent()
    inherited = parent.nsmap if parent is not None else {}
    declared = {}
    for prefix, uri in element.nsmap.items():
        if inherited.get(prefix) != uri:
            declared["xmlns" if prefix is None else f"xmlns:{prefix}"] = uri
    return declared


def element_attributes(element) -> dict[str, str]:
    attributes = namespace_declarations(element)
    for key, value in element.attrib.items():
        attributes[attribute_name(element, key)] = value
    return attributes


def _text_child(text: Optional[str]) -> Optional[TextChild]:
    if text is None or not text.strip():
        return None
    return TextChild(text)


def build_document(root) -> DocumentNode:
    """Convert an lxml element tree into DocumentNode form.

    Uses iterwalk rather than recursion so nesting depth does not grow the
    Python call stack.
    """
    pending: list[list[Child]] = [[]]

    for event, element in etree.iterwalk(root, events=("start", "end")):
        if event == "start":
            pending.append([])
            if isinstance(element.tag, str):
                text = _text_child(element.text)
                if text is not None:
                    pending[-1].append(text)
            continue

        children = pending.pop()
        if isinstance(element.tag, str):
            name = element_name(element)
            node = DocumentNode(
                element_name=name,
                attributes=element_attributes(element),
                children=tuple(children),
                text_content=element.text,
            )
            pending[-1].append(ElementChild(name=name, node=node))

        if element is not root:
            tail = _text_child(element.tail)
            if tail is not None:
                pending[-1].append(tail)

    return pending[0][0].node


def parse_document(text: str) -> DocumentNode:
    """Parse markup text into a DocumentNode tree rooted at the document element."""
    try:
        root = etree.fromstring(text.encode("utf-8"), _make_parser())
    except etree.XMLSyntaxError as e:
        raise MalformedDocumentError(str(e), line=e.lineno, column=e.offset) from e
    except ValueError as e:
        raise MalformedDocumentError(str(e)) from e

    if root is None:
        raise MalformedDocumentError("Document is empty")

    return build_document(root)
