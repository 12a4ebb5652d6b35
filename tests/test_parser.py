"""
Tests for the lxml adapter that builds DocumentNode trees.
"""

import pytest

from svg_inspector.parser import (
    DocumentNode,
    ElementChild,
    MalformedDocumentError,
    TextChild,
    parse_document,
)

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"


class TestParseDocument:
    """Markup in, DocumentNode out."""

    def test_root_and_attributes(self):
        doc = parse_document(f'<svg xmlns="{SVG_NS}" width="100" height="50"/>')
        assert isinstance(doc, DocumentNode)
        assert doc.element_name == "svg"
        assert doc.attributes == {"xmlns": SVG_NS, "width": "100", "height": "50"}

    def test_namespace_declarations_come_first(self):
        doc = parse_document(f'<svg width="1" xmlns="{SVG_NS}"/>')
        assert list(doc.attributes) == ["xmlns", "width"]

    def test_xlink_attribute_names(self):
        doc = parse_document(f'<svg xmlns="{SVG_NS}" xmlns:xlink="{XLINK_NS}"><use xlink:href="#a"/></svg>')
        assert doc.attributes["xmlns:xlink"] == XLINK_NS
        use = doc.element_children()[0].node
        assert use.attributes == {"xlink:href": "#a"}

    def test_declared_prefix_kept(self):
        doc = parse_document(f'<svg xmlns="{SVG_NS}"><use xmlns:l="{XLINK_NS}" l:href="#a"/></svg>')
        use = doc.element_children()[0].node
        assert use.attributes["l:href"] == "#a"

    def test_xml_attributes(self):
        doc = parse_document(f'<svg xmlns="{SVG_NS}" xml:space="preserve"/>')
        assert doc.attributes["xml:space"] == "preserve"

    def test_prefixed_svg_root(self):
        doc = parse_document(f'<s:svg xmlns:s="{SVG_NS}"><s:rect/></s:svg>')
        assert doc.element_name == "svg"
        assert doc.element_children()[0].name == "rect"
        assert "xmlns:s" in doc.attributes

    def test_nested_declarations_not_repeated(self):
        doc = parse_document(f'<svg xmlns="{SVG_NS}"><svg width="1"/></svg>')
        inner = doc.element_children()[0].node
        assert inner.attributes == {"width": "1"}

    def test_repeated_children_keep_order(self):
        doc = parse_document(f'<svg xmlns="{SVG_NS}"><rect id="a"/><rect id="b"/><circle id="c"/><rect id="d"/></svg>')
        ids = [child.node.attributes["id"] for child in doc.element_children()]
        assert ids == ["a", "b", "c", "d"]

    def test_foreign_default_namespace_uses_local_name(self):
        doc = parse_document(
            f'<svg xmlns="{SVG_NS}"><foreignObject>'
            '<div xmlns="http://www.w3.org/1999/xhtml"><p>hi</p></div>'
            "</foreignObject></svg>"
        )
        div = doc.element_children()[0].node.element_children()[0]
        assert div.name == "div"
        assert div.node.attributes == {"xmlns": "http://www.w3.org/1999/xhtml"}


class TestTextContent:
    """Character data becomes TextChild entries."""

    def test_text_and_tails(self):
        doc = parse_document(f'<svg xmlns="{SVG_NS}"><text>Hello <tspan>big</tspan> world</text></svg>')
        text = doc.element_children()[0].node
        assert [type(c) for c in text.children] == [TextChild, ElementChild, TextChild]
        assert text.children[0].text == "Hello "
        assert text.children[2].text == " world"
        assert text.text_content == "Hello "

    def test_whitespace_only_text_dropped(self):
        doc = parse_document(f'<svg xmlns="{SVG_NS}">\n  <g>\n    <rect/>\n  </g>\n</svg>')
        assert all(isinstance(c, ElementChild) for c in doc.children)

    def test_predefined_entities_resolved(self):
        doc = parse_document(f'<svg xmlns="{SVG_NS}"><text>&lt;a&gt; &amp; &quot;b&quot; &apos;c&apos;</text></svg>')
        assert doc.element_children()[0].node.text_content == "<a> & \"b\" 'c'"

    def test_cdata(self):
        doc = parse_document(
            f'<svg xmlns="{SVG_NS}"><script type="text/javascript"><![CDATA[if (a < b) {{ go(); }}]]></script></svg>'
        )
        script = doc.element_children()[0].node
        assert script.text_content == "if (a < b) { go(); }"

    def test_comments_and_processing_instructions_removed(self):
        doc = parse_document(f'<svg xmlns="{SVG_NS}"><!-- note --><?pi data?><rect/></svg>')
        assert [c.name for c in doc.element_children()] == ["rect"]
        assert len(doc.children) == 1

    def test_xml_declaration(self):
        doc = parse_document(f'<?xml version="1.0" encoding="UTF-8"?>\n<svg xmlns="{SVG_NS}"/>')
        assert doc.element_name == "svg"


class TestMalformed:
    """Bad markup raises instead of returning a partial tree."""

    @pytest.mark.parametrize("text", [
        "",
        "   ",
        "<svg><rect></svg>",
        "not xml at all",
        "<svg>",
        "<svg/><svg/>",
    ])
    def test_raises(self, text):
        with pytest.raises(MalformedDocumentError) as exc_info:
            parse_document(text)
        assert exc_info.value.message

    def test_position_reported(self):
        with pytest.raises(MalformedDocumentError) as exc_info:
            parse_document("<svg>\n<rect>\n</svg>")
        assert exc_info.value.line is not None
