"""Models to represent the Discord webhook payload."""
from typing import Any, Final

import attrs
import cattrs
from attrs import validators
from cattrs.gen import make_dict_unstructure_fn, override

# Discord limits that cannot be exceeded
MAX_LEN: Final = {
    "attachment_name": 256,
    "attachments": 10,
    "author_name": 256,
    "content": 2000,
    "description": 4096,
    "embeds": 10,
    "field_name": 256,
    "field_value": 1024,
    "fields": 25,
    "footer": 2048,
    "title": 256,
    "username": 80,
}


def _optional_max_len(name: str) -> Any:
    return validators.optional(validators.max_len(MAX_LEN[name]))


@attrs.define(frozen=True, kw_only=True)
class Field:
    """An embed field."""

    name: str = attrs.field(validator=validators.max_len(MAX_LEN["field_name"]))
    value: str = attrs.field(validator=validators.max_len(MAX_LEN["field_value"]))
    inline: bool | None = None


@attrs.define(frozen=True, kw_only=True)
class Footer:
    """The footer of a Discord embed."""

    text: str = attrs.field(validator=validators.max_len(MAX_LEN["footer"]))
    icon_url: str | None = None


@attrs.define(frozen=True, kw_only=True)
class Media:
    """An image, thumbnail, or video of a Discord embed."""

    url: str


@attrs.define(frozen=True, kw_only=True)
class Author:
    """The author of a Discord embed."""

    name: str = attrs.field(validator=validators.max_len(MAX_LEN["author_name"]))
    url: str | None = None
    icon_url: str | None = None


@attrs.define(frozen=True, kw_only=True)
class Embed:
    """A Discord embed."""

    title: str | None = attrs.field(default=None, validator=_optional_max_len("title"))
    description: str | None = attrs.field(default=None, validator=_optional_max_len("description"))
    url: str | None = None
    timestamp: str | None = None
    color: int | None = attrs.field(
        default=None, validator=validators.optional(validators.instance_of(int))
    )
    footer: Footer | None = None
    image: Media | None = None
    thumbnail: Media | None = None
    video: Media | None = None
    author: Author | None = None
    fields: list[Field] | None = attrs.field(default=None, validator=_optional_max_len("fields"))


@attrs.define(frozen=True, kw_only=True)
class Attachment:
    """A file attached to a webhook message, fetched from a URL."""

    name: str = attrs.field(validator=validators.max_len(MAX_LEN["attachment_name"]))
    attachment: str


@attrs.define(frozen=True, kw_only=True)
class AllowedMentions:
    """The mentions a webhook message is allowed to ping.

    A kind listed in `parse` without an explicit id list allows all
    mentions of that kind.
    """

    parse: list[str]
    users: list[str] | None = None
    roles: list[str] | None = None


@attrs.define(frozen=True, kw_only=True)
class WebhookMessage:
    """A message to send to a Discord webhook."""

    content: str | None = attrs.field(default=None, validator=_optional_max_len("content"))
    username: str | None = attrs.field(default=None, validator=_optional_max_len("username"))
    avatar_url: str | None = None
    allowed_mentions: AllowedMentions | None = None
    embeds: list[Embed] | None = attrs.field(default=None, validator=_optional_max_len("embeds"))
    files: list[Attachment] | None = attrs.field(
        default=None, validator=_optional_max_len("attachments")
    )


def _create_converter() -> cattrs.Converter:
    """Create a converter that unstructures messages to the wire format.

    Attributes that hold their default value (`None`) are left out of
    the payload, so absent values never show up as nulls or empty
    sub-objects.
    """
    converter = cattrs.Converter(omit_if_default=True)
    converter.register_unstructure_hook(
        WebhookMessage,
        make_dict_unstructure_fn(
            WebhookMessage,
            converter,
            _cattrs_omit_if_default=True,
            avatar_url=override(rename="avatarURL"),
            allowed_mentions=override(rename="allowedMentions"),
        ),
    )
    return converter


_converter = _create_converter()


def to_payload(message: WebhookMessage) -> dict[str, Any]:
    """Unstructure a webhook message into its JSON-ready payload.

    :param message: The message to unstructure
    :return: A dictionary with the wire field names
    """
    return _converter.unstructure(message)
