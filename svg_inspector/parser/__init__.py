"""Parsing boundary — markup text in, DocumentNode tree out."""

from svg_inspector.parser.document import Child, DocumentNode, ElementChild, TextChild
from svg_inspector.parser.errors import MalformedDocumentError, SvgInspectorError
from svg_inspector.parser.xml_parser import parse_document

__all__ = [
    "Child",
    "DocumentNode",
    "ElementChild",
    "TextChild",
    "MalformedDocumentError",
    "SvgInspectorError",
    "parse_document",
]
