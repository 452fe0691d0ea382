"""Exceptions raised while validating and transcoding a message.

Every validation failure is a `ValidationError`: it carries the label
of the offending field (for example ``"embed 1 author name"``) and a
human-readable reason. The first failure aborts the whole transcode
call; no partial payload is ever returned.
"""

import attrs


class TomlEmbedsError(Exception):
    """Base class for all toml-embeds exceptions."""


@attrs.define
class ValidationError(TomlEmbedsError):
    """Raised when a field of the message document is invalid.

    Subclasses identify the kind of failure, so callers can catch the
    specific failures they care about.
    """

    key: str
    reason: str

    def __str__(self) -> str:
        """Provide the field label and the reason of the failure."""
        return f"Invalid {self.key}: {self.reason}."


class RequiredError(ValidationError):
    """A required field is missing."""


class InvalidTypeError(ValidationError):
    """A field has the wrong shape, e.g. a number instead of a string."""


class EmptyStringError(ValidationError):
    """A string field is empty after trimming whitespace."""


class LengthError(ValidationError):
    """A string or a collection exceeds its maximum length."""


class IntegerError(ValidationError):
    """A color is a number, but not a whole number."""


class ColorRangeError(ValidationError):
    """A color is outside of the 24-bit RGB range."""


class SchemeError(ValidationError):
    """A URL does not start with ``http://`` or ``https://``."""


class InjectionShapeError(ValidationError):
    """Injection options are neither a source name nor a mapping with a source."""


class UnknownSourceError(ValidationError):
    """Injection options name a source that is not in the registry."""


class DocumentParseError(TomlEmbedsError):
    """The message document is not valid TOML."""


class ConfigurationError(TomlEmbedsError):
    """The command line configuration could not be used."""
