"""Value grammar checkers — lexical checks for attribute value families.

Each checker is a pure function (attribute, value) -> GrammarCheck. The grammars
are deliberately approximate: they catch gross malformation without being full
parsers for path data, colors, or CSS.
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional

from svg_inspector.validators.models import ValueFault
from svg_inspector.validators.reference_data import DEPRECATED_ATTRIBUTES


@dataclass(frozen=True)
class GrammarCheck:
    """Outcome of checking one attribute value."""

    accepted: bool
    reason: Optional[str] = None
    fault: Optional[ValueFault] = None


ACCEPTED = GrammarCheck(accepted=True)


def _reject(fault: ValueFault, reason: str) -> GrammarCheck:
    return GrammarCheck(accepted=False, reason=reason, fault=fault)


# ── Patterns ──

_NUMBER = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"
_UNIT = r"(?:[A-Za-z]{2}|rem|%)"

NUMBER_RE = re.compile(rf"^{_NUMBER}$")
LEADING_NUMBER_RE = re.compile(_NUMBER)
LENGTH_RE = re.compile(rf"^{_NUMBER}{_UNIT}?$")
LIST_SEPARATOR_RE = re.compile(r"[\s,]+")

HEX_COLOR_RE = re.compile(r"^#(?:[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")
FUNCTIONAL_COLOR_RE = re.compile(r"^(?:rgba?|hsla?)\(\s*[^()]+\)$")
PAINT_SERVER_RE = re.compile(r"^url\(\s*#[^\s()]+\s*\)(?:\s+(?:none|currentColor|#[0-9A-Fa-f]+|[A-Za-z]+))?$")
COLOR_NAME_RE = re.compile(r"^[A-Za-z]+$")
COLOR_KEYWORDS = frozenset({"none", "currentColor", "inherit", "transparent"})

TRANSFORM_FUNCTIONS = ("translate", "scale", "rotate", "skewX", "skewY", "matrix")
TRANSFORM_RE = re.compile(
    r"^\s*(?:(?:%s)\s*\([^()]+\)\s*,?\s*)+$" % "|".join(TRANSFORM_FUNCTIONS)
)

PATH_DATA_RE = re.compile(r"^[MmZzLlHhVvCcSsQqTtAaEe0-9.,+\-\s]+$")

ASPECT_RATIO_RE = re.compile(r"^\s*x(?:Min|Mid|Max)Y(?:Min|Mid|Max)\s+(?:meet|slice)\s*$")


# ── Attribute families ──

LENGTH_ATTRIBUTES = frozenset({
    "width", "height", "x", "y", "cx", "cy", "r", "rx", "ry",
    "x1", "y1", "x2", "y2", "dx", "dy", "offset",
})
NON_NEGATIVE_LENGTHS = frozenset({"width", "height", "r", "rx", "ry"})
LENGTH_LIST_ATTRIBUTES = frozenset({"x", "y", "dx", "dy"})
AUTO_SIZED_ATTRIBUTES = frozenset({"width", "height"})

COLOR_ATTRIBUTES = frozenset({
    "fill", "stroke", "stop-color", "flood-color", "lighting-color",
})

TRANSFORM_ATTRIBUTES = frozenset({
    "transform", "gradientTransform", "patternTransform",
})


# ── Checkers ──

def check_length(attribute: str, value: str) -> GrammarCheck:
    """Number with an optional unit; some attributes take lists or 'auto'."""
    stripped = value.strip()
    if attribute in AUTO_SIZED_ATTRIBUTES and stripped == "auto":
        return ACCEPTED

    if attribute in LENGTH_LIST_ATTRIBUTES:
        tokens = [t for t in LIST_SEPARATOR_RE.split(stripped) if t]
    else:
        tokens = [stripped]

    if not tokens or not all(LENGTH_RE.match(t) for t in tokens):
        return _reject(
            ValueFault.MALFORMED,
            f"'{attribute}' must be a length (number with optional unit), got '{value}'",
        )

    if attribute in NON_NEGATIVE_LENGTHS and float(LEADING_NUMBER_RE.match(stripped).group()) < 0:
        return _reject(
            ValueFault.OUT_OF_RANGE,
            f"'{attribute}' must not be negative, got '{value}'",
        )
    return ACCEPTED


def check_color(attribute: str, value: str) -> GrammarCheck:
    stripped = value.strip()
    if (
        stripped in COLOR_KEYWORDS
        or HEX_COLOR_RE.match(stripped)
        or FUNCTIONAL_COLOR_RE.match(stripped)
        or PAINT_SERVER_RE.match(stripped)
        or COLOR_NAME_RE.match(stripped)
    ):
        return ACCEPTED
    return _reject(
        ValueFault.MALFORMED,
        f"'{attribute}' is not a valid color or paint reference: '{value}'",
    )


def check_opacity(attribute: str, value: str) -> GrammarCheck:
    stripped = value.strip()
    if not NUMBER_RE.match(stripped):
        return _reject(
            ValueFault.MALFORMED,
            f"'{attribute}' must be a number, got '{value}'",
        )
    if not 0.0 <= float(stripped) <= 1.0:
        return _reject(
            ValueFault.OUT_OF_RANGE,
            f"'{attribute}' must be between 0 and 1, got '{value}'",
        )
    return ACCEPTED


def check_view_box(attribute: str, value: str) -> GrammarCheck:
    tokens = [t for t in LIST_SEPARATOR_RE.split(value.strip()) if t]
    if len(tokens) != 4:
        return _reject(
            ValueFault.MALFORMED,
            f"'{attribute}' must have exactly 4 numbers, got {len(tokens)} in '{value}'",
        )
    bad = [t for t in tokens if not NUMBER_RE.match(t)]
    if bad:
        return _reject(
            ValueFault.MALFORMED,
            f"'{attribute}' contains non-numeric value '{bad[0]}' in '{value}'",
        )
    return ACCEPTED


def check_transform(attribute: str, value: str) -> GrammarCheck:
    if TRANSFORM_RE.match(value):
        return ACCEPTED
    return _reject(
        ValueFault.MALFORMED,
        f"'{attribute}' must be a list of {', '.join(TRANSFORM_FUNCTIONS)} functions, got '{value}'",
    )


def check_path_data(attribute: str, value: str) -> GrammarCheck:
    if not value.strip():
        return _reject(ValueFault.EMPTY, f"'{attribute}' path data is empty")
    if not PATH_DATA_RE.match(value):
        return _reject(
            ValueFault.MALFORMED,
            f"'{attribute}' contains characters that are not valid path data: '{value}'",
        )
    return ACCEPTED


def check_preserve_aspect_ratio(attribute: str, value: str) -> GrammarCheck:
    if ASPECT_RATIO_RE.match(value):
        return ACCEPTED
    return _reject(
        ValueFault.MALFORMED,
        f"'{attribute}' must be an alignment like 'xMidYMid' followed by 'meet' or 'slice', got '{value}'",
    )


def check_unconstrained(attribute: str, value: str) -> GrammarCheck:
    return ACCEPTED


Checker = Callable[[str, str], GrammarCheck]

_EXACT_CHECKERS: dict[str, Checker] = {
    **{name: check_length for name in LENGTH_ATTRIBUTES},
    **{name: check_color for name in COLOR_ATTRIBUTES},
    **{name: check_transform for name in TRANSFORM_ATTRIBUTES},
    "viewBox": check_view_box,
    "d": check_path_data,
    "preserveAspectRatio": check_preserve_aspect_ratio,
}


def checker_for(attribute: str) -> Checker:
    """Select the grammar checker for an attribute name."""
    checker = _EXACT_CHECKERS.get(attribute)
    if checker is not None:
        return checker
    if attribute.endswith("opacity"):
        return check_opacity
    return check_unconstrained


def check_value(attribute: str, value: str) -> GrammarCheck:
    """Check one attribute value. Deprecated names fail before any grammar."""
    if attribute in DEPRECATED_ATTRIBUTES:
        return _reject(ValueFault.DEPRECATED, f"'{attribute}' is deprecated")
    return checker_for(attribute)(attribute, value)
