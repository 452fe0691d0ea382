"""Validators for the primitive fields of a message document.

Each validator takes the label of the field, used in error messages,
and the raw value. It returns the typed value, or `None` if the field
is absent and optional. Invalid values raise a subclass of
`exceptions.ValidationError`.
"""
import datetime
import re
from typing import Any, Final

import arrow

from toml_embeds import exceptions
from toml_embeds.nodes import NodeKind, kind_of

_URL_SCHEME: Final = re.compile(r"^https?://")
_MAX_COLOR: Final = 0xFFFFFF


def validate_string(key: str, raw: Any, *, required: bool, max_length: int | None) -> str | None:
    """Validate a string field and return it trimmed.

    :param key: The label of the field
    :param raw: The raw value
    :param required: If an absent value is an error
    :param max_length: The maximum length after trimming, or `None`
      for strings without a maximum length
    :return: The trimmed string, or `None` if absent
    """
    match kind_of(raw):
        case NodeKind.MISSING:
            if required:
                raise exceptions.RequiredError(key, "required")
            return None
        case NodeKind.STRING:
            value = raw.strip()
        case _:
            raise exceptions.InvalidTypeError(key, "expected a string")

    if not value:
        raise exceptions.EmptyStringError(key, "expected a non-empty string (or exclude the field)")
    if max_length is not None and len(value) > max_length:
        raise exceptions.LengthError(key, f"maximum length is {max_length}")
    return value


def validate_boolean(key: str, raw: Any) -> bool | None:
    """Validate an optional boolean field."""
    match raw:
        case None:
            return None
        case bool():
            return raw
        case _:
            raise exceptions.InvalidTypeError(key, "expected a boolean")


def validate_color(key: str, raw: Any) -> int | None:
    """Validate a 24-bit RGB color.

    Floats are accepted as long as they hold a whole number, as some
    document formats don't distinguish between the two.

    :param key: The label of the field
    :param raw: The raw value
    :return: The color as an integer, or `None` if absent
    """
    match raw:
        case None:
            return None
        case bool():
            raise exceptions.InvalidTypeError(key, "expected a number")
        case int():
            color = raw
        case float():
            if not raw.is_integer():
                raise exceptions.IntegerError(key, "expected an integer")
            color = int(raw)
        case _:
            raise exceptions.InvalidTypeError(key, "expected a number")

    if not 0 <= color <= _MAX_COLOR:
        raise exceptions.ColorRangeError(key, "out of range (0x000000 - 0xffffff)")
    return color


def validate_date(key: str, raw: Any) -> arrow.Arrow | None:
    """Validate a date and return it in UTC.

    Naive datetimes are assumed to be in UTC; plain dates are taken as
    midnight UTC.

    :param key: The label of the field
    :param raw: The raw value
    :return: The moment in UTC, or `None` if absent
    """
    match raw:
        case None:
            return None
        case arrow.Arrow():
            moment = raw
        case datetime.datetime() | datetime.date():
            moment = arrow.get(raw)
        case _:
            raise exceptions.InvalidTypeError(key, "expected a date")
    return moment.to("UTC")


def validate_url(key: str, raw: Any, *, required: bool) -> str | None:
    """Validate an absolute http(s) URL and return it trimmed."""
    match kind_of(raw):
        case NodeKind.MISSING:
            if required:
                raise exceptions.RequiredError(key, "required")
            return None
        case NodeKind.STRING:
            url = raw.strip()
        case _:
            raise exceptions.InvalidTypeError(key, "expected a string")

    if not url:
        raise exceptions.EmptyStringError(key, "expected a non-empty string (or exclude the field)")
    if not _URL_SCHEME.match(url):
        raise exceptions.SchemeError(key, "expected it to start with http:// or https://")
    return url


def validate_boolean_or_string_array(key: str, raw: Any) -> bool | tuple[str, ...] | None:
    """Validate a field that is either a boolean or a list of strings.

    :param key: The label of the field
    :param raw: The raw value
    :return: The boolean, a tuple of trimmed strings, or `None`
    """
    match raw:
        case None:
            return None
        case bool():
            return raw
        case list() | tuple():
            return tuple(
                validate_string(f"{key} element {index}", element, required=True, max_length=None)
                for index, element in enumerate(raw, start=1)
            )
        case _:
            raise exceptions.InvalidTypeError(key, "expected a string array or a boolean")
