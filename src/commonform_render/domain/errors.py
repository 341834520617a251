"""Domain errors — custom exceptions for Common Form rendering.

These exceptions are raised by domain services and collaborators and are
caught by the render use case, which hands their message to the reporter.
They carry no infrastructure dependencies.
"""


class CommonFormError(Exception):
    """Base exception for all Common Form rendering errors."""


class ParseError(CommonFormError):
    """Raised when the source markup cannot be parsed."""


class ResolutionError(CommonFormError):
    """Raised when front matter cannot be resolved into render options."""


class UnknownNumberingScheme(ResolutionError):
    """Raised when front matter names a numbering scheme that is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No such numbering scheme: {name}")
        self.name = name


class InvalidNumberingType(ResolutionError):
    """Raised when the front matter ``numbering`` value is not a string."""

    def __init__(self) -> None:
        super().__init__("Numbering is not a string.")


class GenerationError(CommonFormError):
    """Raised when a generator rejects the resolved form, blanks or options."""


class WriteError(CommonFormError):
    """Raised when the output destination cannot be written."""


class ConfigurationError(CommonFormError):
    """Raised when the settings file is invalid or missing."""


class SourceError(CommonFormError):
    """Raised when the current document cannot be read."""
