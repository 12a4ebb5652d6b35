"""Exceptions raised at the parsing boundary."""


class SvgInspectorError(Exception):
    """Base class for errors raised by svg_inspector."""


class MalformedDocumentError(SvgInspectorError):
    """The input could not be parsed as well-formed XML."""

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
