"""Reference data — the SVG element catalogue, attribute categories, and content rules.

This is the encoded grammar knowledge that makes validation deterministic.
Everything here is immutable and built once at import time.
"""

from types import MappingProxyType

ROOT_ELEMENT = "svg"


# ──────────────────────────────────────────────────────────────────────
# GLOBAL ATTRIBUTE CATEGORIES (legal on every element)
# ──────────────────────────────────────────────────────────────────────

CORE_ATTRIBUTES = frozenset({
    "id", "class", "style", "lang", "tabindex",
    "xml:base", "xml:lang", "xml:space",
})

CONDITIONAL_PROCESSING_ATTRIBUTES = frozenset({
    "requiredExtensions", "systemLanguage",
})

EVENT_ATTRIBUTES = frozenset({
    # Graphical events
    "onactivate", "onclick", "onfocusin", "onfocusout", "onload",
    "onmousedown", "onmousemove", "onmouseout", "onmouseover", "onmouseup",
    # Document events
    "onabort", "onerror", "onresize", "onscroll", "onunload",
    # Animation events
    "onbegin", "onend", "onrepeat",
})

PRESENTATION_ATTRIBUTES = frozenset({
    "alignment-baseline", "baseline-shift", "clip-path", "clip-rule", "color",
    "color-interpolation", "color-interpolation-filters", "color-rendering",
    "cursor", "direction", "display", "dominant-baseline", "fill",
    "fill-opacity", "fill-rule", "filter", "flood-color", "flood-opacity",
    "font-family", "font-size", "font-size-adjust", "font-stretch",
    "font-style", "font-variant", "font-weight", "image-rendering",
    "letter-spacing", "lighting-color", "marker-end", "marker-mid",
    "marker-start", "mask", "opacity", "overflow", "paint-order",
    "pointer-events", "shape-rendering", "stop-color", "stop-opacity",
    "stroke", "stroke-dasharray", "stroke-dashoffset", "stroke-linecap",
    "stroke-linejoin", "stroke-miterlimit", "stroke-opacity", "stroke-width",
    "text-anchor", "text-decoration", "text-rendering", "transform",
    "transform-origin", "unicode-bidi", "vector-effect", "visibility",
    "word-spacing", "writing-mode",
})

XLINK_ATTRIBUTES = frozenset({
    "xlink:href", "xlink:title", "xlink:type", "xlink:role",
    "xlink:show", "xlink:actuate",
})

GLOBAL_ATTRIBUTE_CATEGORIES = MappingProxyType({
    "core": CORE_ATTRIBUTES,
    "conditional_processing": CONDITIONAL_PROCESSING_ATTRIBUTES,
    "event": EVENT_ATTRIBUTES,
    "presentation": PRESENTATION_ATTRIBUTES,
    "xlink": XLINK_ATTRIBUTES,
})

# Opaque attribute classes: allowed everywhere, never grammar-checked
WILDCARD_PREFIXES = ("data-", "aria-", "xmlns:")
OPAQUE_ATTRIBUTES = frozenset({"role"})

# on<event> handlers accepted as opaque tokens: the SVG event attributes plus
# the DOM events browsers dispatch to SVG elements
EVENT_HANDLER_ATTRIBUTES = EVENT_ATTRIBUTES | frozenset({
    "onafterprint", "onbeforeprint", "onbeforeunload", "onblur", "oncancel",
    "oncanplay", "oncanplaythrough", "onchange", "onclose", "oncontextmenu",
    "oncopy", "oncuechange", "oncut", "ondblclick", "ondrag", "ondragend",
    "ondragenter", "ondragleave", "ondragover", "ondragstart", "ondrop",
    "ondurationchange", "onemptied", "onended", "onfocus", "onfocusin",
    "onhashchange", "oninput", "oninvalid", "onkeydown", "onkeypress",
    "onkeyup", "onloadeddata", "onloadedmetadata", "onloadstart",
    "onmessage", "onmouseenter", "onmouseleave", "onmousewheel", "onoffline",
    "ononline", "onpagehide", "onpageshow", "onpaste", "onpause", "onplay",
    "onplaying", "onpointercancel", "onpointerdown", "onpointerenter",
    "onpointerleave", "onpointermove", "onpointerout", "onpointerover",
    "onpointerup", "onpopstate", "onprogress", "onratechange", "onreset",
    "onseeked", "onseeking", "onselect", "onshow", "onstalled", "onstorage",
    "onsubmit", "onsuspend", "ontimeupdate", "ontoggle", "ontouchcancel",
    "ontouchend", "ontouchmove", "ontouchstart", "ontransitionend",
    "onvolumechange", "onwaiting", "onwheel",
})


# ──────────────────────────────────────────────────────────────────────
# DEPRECATED VOCABULARY (SVG 1.1 features removed in SVG 2)
# ──────────────────────────────────────────────────────────────────────

DEPRECATED_ELEMENTS = frozenset({
    "altGlyph", "altGlyphDef", "altGlyphItem", "animateColor", "color-profile",
    "cursor", "font", "font-face", "font-face-format", "font-face-name",
    "font-face-src", "font-face-uri", "glyph", "glyphRef", "hkern",
    "missing-glyph", "tref", "vkern",
})

DEPRECATED_ATTRIBUTES = frozenset({
    "baseProfile", "contentScriptType", "contentStyleType",
    "enable-background", "externalResourcesRequired",
    "glyph-orientation-horizontal", "glyph-orientation-vertical",
    "kerning", "requiredFeatures", "zoomAndPan",
})


# ──────────────────────────────────────────────────────────────────────
# ELEMENT CATALOGUE: (required attributes, element-specific attributes)
# ──────────────────────────────────────────────────────────────────────

_HREF = ("href",)
_XYWH = ("x", "y", "width", "height")
_VIEWPORT = ("viewBox", "preserveAspectRatio")
_ANIMATION_TIMING = (
    "begin", "dur", "end", "min", "max", "restart", "repeatCount",
    "repeatDur", "fill",
)
_ANIMATION_VALUES = (
    "calcMode", "values", "keyTimes", "keySplines", "from", "to", "by",
    "additive", "accumulate",
)
_ANIMATION = _HREF + _ANIMATION_TIMING + _ANIMATION_VALUES + ("attributeName", "attributeType")
_FILTER_PRIMITIVE = _XYWH + ("result",)
_TRANSFER_FUNCTION = (
    "type", "tableValues", "slope", "intercept", "amplitude", "exponent", "offset",
)
_GRADIENT = _HREF + ("gradientUnits", "gradientTransform", "spreadMethod")
_TEXT_POSITIONING = ("x", "y", "dx", "dy", "rotate", "textLength", "lengthAdjust")
_FONT_FACE = (
    "font-family", "font-style", "font-variant", "font-weight", "font-stretch",
    "font-size", "unicode-range", "units-per-em", "ascent", "descent",
)

ELEMENT_DEFINITIONS: dict[str, tuple[tuple[str, ...], tuple[str, ...]]] = {
    # Structural
    "svg": (("xmlns",), ("xmlns", "version") + _XYWH + _VIEWPORT),
    "g": ((), ()),
    "defs": ((), ()),
    "symbol": ((), _XYWH + _VIEWPORT + ("refX", "refY")),
    "use": ((), _HREF + _XYWH),
    "switch": ((), ()),
    "a": ((), _HREF + ("target", "download", "ping", "rel", "hreflang", "type", "referrerpolicy")),
    "view": ((), _VIEWPORT),

    # Descriptive
    "desc": ((), ()),
    "title": ((), ()),
    "metadata": ((), ()),

    # Basic shapes and paths
    "rect": ((), _XYWH + ("rx", "ry", "pathLength")),
    "circle": ((), ("cx", "cy", "r", "pathLength")),
    "ellipse": ((), ("cx", "cy", "rx", "ry", "pathLength")),
    "line": ((), ("x1", "y1", "x2", "y2", "pathLength")),
    "polyline": ((), ("points", "pathLength")),
    "polygon": ((), ("points", "pathLength")),
    "path": ((), ("d", "pathLength")),
    "image": ((), _HREF + _XYWH + ("preserveAspectRatio", "crossorigin", "decoding")),

    # Text
    "text": ((), _TEXT_POSITIONING),
    "tspan": ((), _TEXT_POSITIONING),
    "textPath": ((), _HREF + ("startOffset", "method", "spacing", "side", "path", "textLength", "lengthAdjust")),

    # Paint servers
    "linearGradient": ((), _GRADIENT + ("x1", "y1", "x2", "y2")),
    "radialGradient": ((), _GRADIENT + ("cx", "cy", "r", "fx", "fy", "fr")),
    "stop": ((), ("offset",)),
    "pattern": ((), _HREF + _XYWH + _VIEWPORT + ("patternUnits", "patternContentUnits", "patternTransform")),

    # Clipping, masking, markers
    "clipPath": ((), ("clipPathUnits",)),
    "mask": ((), _XYWH + ("maskUnits", "maskContentUnits", "mask-type")),
    "marker": ((), _VIEWPORT + ("refX", "refY", "markerUnits", "markerWidth", "markerHeight", "orient")),

    # Filters
    "filter": ((), _HREF + _XYWH + ("filterUnits", "primitiveUnits", "filterRes")),
    "feBlend": ((), _FILTER_PRIMITIVE + ("in", "in2", "mode")),
    "feColorMatrix": ((), _FILTER_PRIMITIVE + ("in", "type", "values")),
    "feComponentTransfer": ((), _FILTER_PRIMITIVE + ("in",)),
    "feComposite": ((), _FILTER_PRIMITIVE + ("in", "in2", "operator", "k1", "k2", "k3", "k4")),
    "feConvolveMatrix": ((), _FILTER_PRIMITIVE + (
        "in", "order", "kernelMatrix", "divisor", "bias", "targetX", "targetY",
        "edgeMode", "kernelUnitLength", "preserveAlpha",
    )),
    "feDiffuseLighting": ((), _FILTER_PRIMITIVE + ("in", "surfaceScale", "diffuseConstant", "kernelUnitLength")),
    "feDisplacementMap": ((), _FILTER_PRIMITIVE + ("in", "in2", "scale", "xChannelSelector", "yChannelSelector")),
    "feDistantLight": ((), ("azimuth", "elevation")),
    "feDropShadow": ((), _FILTER_PRIMITIVE + ("in", "dx", "dy", "stdDeviation")),
    "feFlood": ((), _FILTER_PRIMITIVE),
    "feFuncA": ((), _TRANSFER_FUNCTION),
    "feFuncB": ((), _TRANSFER_FUNCTION),
    "feFuncG": ((), _TRANSFER_FUNCTION),
    "feFuncR": ((), _TRANSFER_FUNCTION),
    "feGaussianBlur": ((), _FILTER_PRIMITIVE + ("in", "stdDeviation", "edgeMode")),
    "feImage": ((), _FILTER_PRIMITIVE + _HREF + ("preserveAspectRatio", "crossorigin")),
    "feMerge": ((), _FILTER_PRIMITIVE),
    "feMergeNode": ((), ("in",)),
    "feMorphology": ((), _FILTER_PRIMITIVE + ("in", "operator", "radius")),
    "feOffset": ((), _FILTER_PRIMITIVE + ("in", "dx", "dy")),
    "fePointLight": ((), ("x", "y", "z")),
    "feSpecularLighting": ((), _FILTER_PRIMITIVE + (
        "in", "surfaceScale", "specularConstant", "specularExponent", "kernelUnitLength",
    )),
    "feSpotLight": ((), (
        "x", "y", "z", "pointsAtX", "pointsAtY", "pointsAtZ", "specularExponent",
        "limitingConeAngle",
    )),
    "feTile": ((), _FILTER_PRIMITIVE + ("in",)),
    "feTurbulence": ((), _FILTER_PRIMITIVE + ("baseFrequency", "numOctaves", "seed", "stitchTiles", "type")),

    # Animation
    "animate": ((), _ANIMATION),
    "animateMotion": ((), _ANIMATION + ("path", "keyPoints", "rotate", "origin")),
    "animateTransform": ((), _ANIMATION + ("type",)),
    "set": ((), _HREF + _ANIMATION_TIMING + ("attributeName", "attributeType", "to")),
    "mpath": ((), _HREF),

    # Embedded content and resources
    "foreignObject": ((), _XYWH),
    "style": ((), ("type", "media", "title")),
    "script": ((), _HREF + ("type", "crossorigin")),

    # Deprecated SVG 1.1 vocabulary, catalogued so it reports as deprecated
    "altGlyph": ((), _HREF + _TEXT_POSITIONING + ("glyphRef", "format")),
    "altGlyphDef": ((), ()),
    "altGlyphItem": ((), ()),
    "animateColor": ((), _ANIMATION),
    "color-profile": ((), _HREF + ("local", "name", "rendering-intent")),
    "cursor": ((), _HREF + ("x", "y")),
    "font": ((), ("horiz-origin-x", "horiz-origin-y", "horiz-adv-x", "vert-origin-x", "vert-origin-y", "vert-adv-y")),
    "font-face": ((), _FONT_FACE),
    "font-face-format": ((), ("string",)),
    "font-face-name": ((), ("name",)),
    "font-face-src": ((), ()),
    "font-face-uri": ((), _HREF),
    "glyph": ((), ("d", "unicode", "glyph-name", "orientation", "arabic-form", "horiz-adv-x", "vert-adv-y")),
    "glyphRef": ((), _HREF + ("x", "y", "dx", "dy", "glyphRef", "format")),
    "hkern": ((), ("u1", "g1", "u2", "g2", "k")),
    "missing-glyph": ((), ("d", "horiz-adv-x", "vert-adv-y")),
    "tref": ((), _HREF + _TEXT_POSITIONING),
    "vkern": ((), ("u1", "g1", "u2", "g2", "k")),
}


# ──────────────────────────────────────────────────────────────────────
# FOREIGN CONTENT: non-SVG names whose subtrees are out of grammar scope
# ──────────────────────────────────────────────────────────────────────

FOREIGN_CONTENT_CONTAINER = "foreignObject"

FOREIGN_ELEMENTS = frozenset({
    # XHTML commonly embedded through foreignObject
    "html", "body", "div", "p", "span", "br", "hr", "button", "input",
    "label", "form", "select", "option", "textarea", "img", "canvas",
    "video", "audio", "source", "iframe", "table", "thead", "tbody",
    "tr", "td", "th", "ul", "ol", "li", "h1", "h2", "h3", "h4", "h5", "h6",
    "em", "strong", "b", "i", "u", "small", "code", "pre", "section",
    "article", "header", "footer", "nav",
    # MathML
    "math",
})


# ──────────────────────────────────────────────────────────────────────
# CONTAINMENT CATEGORIES
# ──────────────────────────────────────────────────────────────────────

DESCRIPTIVE_ELEMENTS = frozenset({"desc", "title", "metadata"})

ANIMATION_ELEMENTS = frozenset({
    "animate", "animateMotion", "animateTransform", "animateColor", "set",
})

GRADIENT_ELEMENTS = frozenset({"linearGradient", "radialGradient"})

GRADIENT_STOP = "stop"
MOTION_PATH = "mpath"
MOTION_ANIMATION = "animateMotion"

SHAPE_ELEMENTS = frozenset({
    "rect", "circle", "ellipse", "line", "polyline", "polygon", "path",
    "image", "use",
})

TEXT_CONTENT_ELEMENTS = frozenset({"text", "tspan", "textPath"})

TEXT_FLOW_ELEMENTS = frozenset({"tspan", "textPath", "a", "tref", "altGlyph"})

CONTAINER_ELEMENTS = frozenset({
    "a", "defs", "marker", "mask", "clipPath", "pattern", FOREIGN_CONTENT_CONTAINER,
})

# Parent-side allow-lists: parent → the only children it may hold
CHILD_ALLOW_LISTS = MappingProxyType({
    **{name: frozenset({GRADIENT_STOP}) | ANIMATION_ELEMENTS | DESCRIPTIVE_ELEMENTS for name in GRADIENT_ELEMENTS},
    **{name: DESCRIPTIVE_ELEMENTS | ANIMATION_ELEMENTS for name in SHAPE_ELEMENTS},
    **{name: TEXT_FLOW_ELEMENTS | DESCRIPTIVE_ELEMENTS | ANIMATION_ELEMENTS for name in TEXT_CONTENT_ELEMENTS},
})

# Child-side constraints: child → the only parents it may appear under
PARENT_REQUIREMENTS = MappingProxyType({
    GRADIENT_STOP: GRADIENT_ELEMENTS,
    MOTION_PATH: frozenset({MOTION_ANIMATION}),
})
