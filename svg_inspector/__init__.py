"""SVG Inspector — validates SVG markup against the SVG element and attribute grammar.

    >>> from svg_inspector import validate_svg
    >>> validate_svg('<svg xmlns="http://www.w3.org/2000/svg"/>').is_valid
    True
"""

__version__ = "1.0.0"

from svg_inspector.validators import ErrorCode, ValidationResult, validate_svg  # noqa: E402

__all__ = ["ErrorCode", "ValidationResult", "validate_svg", "__version__"]
