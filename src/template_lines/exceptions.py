"""Exception classes for template-lines."""


class TemplatesError(Exception):
    """Base exception for all template-lines errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MalformedExpressionError(TemplatesError):
    """Interpolation delimiters are present but their boundaries cannot be located."""


class UnrecognizedLineError(TemplatesError):
    """A line has delimiters but does not belong to any known category."""


class UnsupportedLineError(TemplatesError):
    """A line cannot be rendered on its own, e.g. a control-flow tag."""
