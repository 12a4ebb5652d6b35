"""
Tests for the attribute value grammar checkers.
"""

import pytest

from svg_inspector.validators.models import ValueFault
from svg_inspector.validators.value_grammar import (
    check_color,
    check_length,
    check_opacity,
    check_path_data,
    check_preserve_aspect_ratio,
    check_transform,
    check_unconstrained,
    check_value,
    check_view_box,
    checker_for,
)


class TestLength:
    """Numbers with optional units, sign rules per attribute."""

    @pytest.mark.parametrize("value", ["10", "10.5", "50%", "1.5em", "2px", "1e3", ".5", "3rem", " 12 ", "10vw", "5vh", "2ch"])
    def test_accepts_lengths(self, value):
        assert check_length("width", value).accepted

    @pytest.mark.parametrize("value", ["invalid", "10 px", "10pxx", "", "px", "1..2"])
    def test_rejects_malformed(self, value):
        check = check_length("width", value)
        assert not check.accepted
        assert check.fault == ValueFault.MALFORMED
        assert "'width'" in check.reason

    def test_negative_size_is_out_of_range(self):
        check = check_length("height", "-10")
        assert not check.accepted
        assert check.fault == ValueFault.OUT_OF_RANGE
        assert check.reason == "'height' must not be negative, got '-10'"

    def test_negative_radius_is_out_of_range(self):
        assert check_length("r", "-5").fault == ValueFault.OUT_OF_RANGE

    def test_negative_coordinate_is_fine(self):
        assert check_length("x", "-5").accepted
        assert check_length("cy", "-0.5em").accepted

    def test_auto_only_for_sizes(self):
        assert check_length("width", "auto").accepted
        assert check_length("height", "auto").accepted
        assert not check_length("x", "auto").accepted

    def test_coordinate_lists(self):
        assert check_length("x", "0 10 20").accepted
        assert check_length("dy", "1em,2em, 3em").accepted
        assert not check_length("width", "10 20").accepted
        assert not check_length("x", "0 ten 20").accepted


class TestColor:
    """Paint values: keywords, hex, functional notation, paint servers."""

    @pytest.mark.parametrize("value", [
        "none", "currentColor", "red", "#FFF", "#FF0000", "#FF000080",
        "rgb(255, 0, 0)", "rgba(0,0,0,0.5)", "hsl(120, 100%, 50%)",
        "url(#grad1)", "url(#grad1) red", "url( #a )",
    ])
    def test_accepts_colors(self, value):
        assert check_color("fill", value).accepted

    @pytest.mark.parametrize("value", ["#FF00", "#GGG", "rgb(", "red blue", "url(grad1)", ""])
    def test_rejects_malformed(self, value):
        check = check_color("fill", value)
        assert not check.accepted
        assert check.fault == ValueFault.MALFORMED


class TestOpacity:
    """Numbers in the closed range [0, 1]."""

    @pytest.mark.parametrize("value", ["0", "0.5", "1", "1.0", ".25"])
    def test_accepts_range(self, value):
        assert check_opacity("opacity", value).accepted

    @pytest.mark.parametrize("value", ["1.5", "-0.1", "2"])
    def test_out_of_range(self, value):
        check = check_opacity("fill-opacity", value)
        assert check.fault == ValueFault.OUT_OF_RANGE
        assert "between 0 and 1" in check.reason

    def test_not_a_number(self):
        assert check_opacity("opacity", "half").fault == ValueFault.MALFORMED

    def test_any_opacity_suffix_uses_opacity_grammar(self):
        assert checker_for("stroke-opacity") is check_opacity
        assert checker_for("flood-opacity") is check_opacity


class TestViewBox:
    """Exactly four numbers, whitespace or comma separated."""

    @pytest.mark.parametrize("value", ["0 0 100 100", "0,0,100,100", "-10 -10 20.5 20", "0, 0, 1e2, 50"])
    def test_accepts(self, value):
        assert check_view_box("viewBox", value).accepted

    def test_wrong_count(self):
        check = check_view_box("viewBox", "0 0 100")
        assert not check.accepted
        assert "exactly 4 numbers, got 3" in check.reason
        assert not check_view_box("viewBox", "0 0 100 100 5").accepted

    def test_non_numeric(self):
        check = check_view_box("viewBox", "0 0 a 100")
        assert not check.accepted
        assert "'a'" in check.reason


class TestTransform:
    """Sequences of the six transform functions."""

    @pytest.mark.parametrize("value", [
        "translate(10, 10) rotate(45) scale(0.5)",
        "matrix(1 0 0 1 0 0)",
        "skewX(30)skewY(10)",
        "translate(10),scale(2)",
        "rotate(45 50 50)",
    ])
    def test_accepts(self, value):
        assert check_transform("transform", value).accepted

    @pytest.mark.parametrize("value", ["translate(10) wobble(5)", "translate", "", "rotate()", "scale(2"])
    def test_rejects(self, value):
        check = check_transform("transform", value)
        assert not check.accepted
        assert check.fault == ValueFault.MALFORMED


class TestPathData:
    """Coarse character-class check for path data."""

    def test_accepts_square(self):
        assert check_path_data("d", "M10,10 L90,10 L90,90 L10,90 Z").accepted

    def test_accepts_exponents_and_arcs(self):
        assert check_path_data("d", "m1e-3 2E2 a25 25 -30 0 1 50 -25 z").accepted

    @pytest.mark.parametrize("value", ["", "   "])
    def test_empty(self, value):
        check = check_path_data("d", value)
        assert check.fault == ValueFault.EMPTY
        assert check.reason == "'d' path data is empty"

    @pytest.mark.parametrize("value", ["M10 10 X5", "M10,10 L90;", "M10 10 <script>"])
    def test_foreign_characters(self, value):
        assert check_path_data("d", value).fault == ValueFault.MALFORMED


class TestPreserveAspectRatio:
    """Alignment keyword plus optional meet/slice."""

    @pytest.mark.parametrize("value", ["xMidYMid meet", "xMinYMax slice", " xMaxYMin  meet "])
    def test_accepts(self, value):
        assert check_preserve_aspect_ratio("preserveAspectRatio", value).accepted

    @pytest.mark.parametrize("value", ["xMidYMid stretch", "center", "meet", "none", "xMidYMid", "xMidYMidmeet"])
    def test_rejects(self, value):
        assert not check_preserve_aspect_ratio("preserveAspectRatio", value).accepted


class TestCheckValue:
    """Dispatch by attribute name."""

    def test_deprecated_name_fails_before_grammar(self):
        check = check_value("kerning", "0")
        assert not check.accepted
        assert check.fault == ValueFault.DEPRECATED
        assert check.reason == "'kerning' is deprecated"

    def test_unconstrained_attributes_accept_anything(self):
        assert checker_for("points") is check_unconstrained
        assert check_value("points", "anything at all").accepted
        assert check_value("stroke-width", "thick").accepted

    def test_dispatches_by_family(self):
        assert not check_value("width", "invalid").accepted
        assert not check_value("stop-color", "#12").accepted
        assert not check_value("gradientTransform", "spin(3)").accepted
        assert check_value("viewBox", "0 0 10 10").accepted

    def test_reason_quotes_attribute_and_value(self):
        check = check_value("width", "invalid")
        assert check.reason == "'width' must be a length (number with optional unit), got 'invalid'"
