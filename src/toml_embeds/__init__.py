"""Validate styled messages written in TOML and transcode them to Discord webhook payloads."""

from toml_embeds.exceptions import (
    ColorRangeError,
    ConfigurationError,
    DocumentParseError,
    EmptyStringError,
    InjectionShapeError,
    IntegerError,
    InvalidTypeError,
    LengthError,
    RequiredError,
    SchemeError,
    TomlEmbedsError,
    UnknownSourceError,
    ValidationError,
)
from toml_embeds.injection import Source, Sources
from toml_embeds.transcoder import parse, transcode

__all__ = [
    "ColorRangeError",
    "ConfigurationError",
    "DocumentParseError",
    "EmptyStringError",
    "InjectionShapeError",
    "IntegerError",
    "InvalidTypeError",
    "LengthError",
    "RequiredError",
    "SchemeError",
    "Source",
    "Sources",
    "TomlEmbedsError",
    "UnknownSourceError",
    "ValidationError",
    "parse",
    "transcode",
]
