"""Validators for the structured parts of a message document.

Embeds and embed fields accept one-or-many values: a single mapping is
treated like a list holding that mapping. Both may also be injected
(see `injection`), in which case the source may return either form.
"""
from collections.abc import Mapping
from typing import Any

from toml_embeds import exceptions, injection, models, validators
from toml_embeds.discord import MAX_LEN
from toml_embeds.nodes import NodeKind, kind_of, one_or_many


def _expect_mapping(key: str, raw: Any) -> Mapping[str, Any]:
    if kind_of(raw) is not NodeKind.MAPPING:
        raise exceptions.InvalidTypeError(key, "expected an object")
    return raw


def _expect_mapping_or_sequence(key: str, raw: Any) -> Any:
    if kind_of(raw) not in (NodeKind.MAPPING, NodeKind.SEQUENCE):
        raise exceptions.InvalidTypeError(key, "expected an object")
    return raw


def validate_profile(key: str, raw: Any) -> models.Profile | None:
    """Validate the display identity override of the webhook."""
    if raw is None:
        return None

    profile = _expect_mapping(key, raw)
    return models.Profile(
        username=validators.validate_string(
            f"{key} username", profile.get("name"), required=False, max_length=MAX_LEN["username"]
        ),
        avatar_url=validators.validate_url(f"{key} avatar URL", profile.get("avatar"), required=False),
    )


def validate_footer(key: str, raw: Any) -> models.Footer | None:
    """Validate an embed footer; `text` is required if a footer is given."""
    if raw is None:
        return None

    footer = _expect_mapping(key, raw)
    return models.Footer(
        text=validators.validate_string(
            f"{key} text", footer.get("text"), required=True, max_length=MAX_LEN["footer"]
        ),
        icon=validators.validate_url(f"{key} icon URL", footer.get("icon"), required=False),
    )


def validate_author(key: str, raw: Any) -> models.Author | None:
    """Validate an embed author; `name` is required if an author is given."""
    if raw is None:
        return None

    author = _expect_mapping(key, raw)
    return models.Author(
        name=validators.validate_string(
            f"{key} name", author.get("name"), required=True, max_length=MAX_LEN["author_name"]
        ),
        icon=validators.validate_url(f"{key} icon URL", author.get("icon"), required=False),
        url=validators.validate_url(f"{key} URL", author.get("url"), required=False),
    )


def validate_field(sources: injection.Sources, key: str, raw: Any) -> list[models.Field]:
    """Validate a single item of an embed's field list.

    The item may be injected, and may expand into more than one field.

    :param sources: The available injection sources
    :param key: The label of the item
    :param raw: The raw item
    :return: The validated fields
    """
    item = injection.maybe_inject(_expect_mapping_or_sequence(key, raw), sources, key)

    fields = []
    for field in one_or_many(item):
        field = _expect_mapping(key, field)
        fields.append(
            models.Field(
                name=validators.validate_string(
                    f"{key} name", field.get("name"), required=True, max_length=MAX_LEN["field_name"]
                ),
                value=validators.validate_string(
                    f"{key} value",
                    field.get("value"),
                    required=True,
                    max_length=MAX_LEN["field_value"],
                ),
                inline=validators.validate_boolean(f"{key} inline", field.get("inline")),
            )
        )
    return fields


def validate_fields(
    sources: injection.Sources, key: str, raw: Any
) -> tuple[models.Field, ...] | None:
    """Validate the field list of an embed.

    The maximum number of fields applies after injected items have been
    expanded.

    :param sources: The available injection sources
    :param key: The label of the embed
    :param raw: The raw list of fields
    :return: The validated fields, or `None` if absent
    """
    match kind_of(raw):
        case NodeKind.MISSING:
            return None
        case NodeKind.SEQUENCE:
            pass
        case _:
            raise exceptions.InvalidTypeError(f"{key} fields", "expected an array")

    fields = tuple(
        field
        for index, item in enumerate(raw, start=1)
        for field in validate_field(sources, f"{key} field {index}", item)
    )
    if len(fields) > MAX_LEN["fields"]:
        raise exceptions.LengthError(f"{key} fields", f"maximum length is {MAX_LEN['fields']}")
    return fields


def validate_embed(sources: injection.Sources, key: str, raw: Any) -> list[models.Embed]:
    """Validate a single item of the document's embed list.

    Note that the fields of an embed are read from the singular `field`
    key, matching the TOML array-of-tables notation ``[[embed.field]]``.

    :param sources: The available injection sources
    :param key: The label of the item
    :param raw: The raw item
    :return: The validated embeds
    """
    item = injection.maybe_inject(_expect_mapping_or_sequence(key, raw), sources, key)

    embeds = []
    for embed in one_or_many(item):
        embed = _expect_mapping(key, embed)
        embeds.append(
            models.Embed(
                title=validators.validate_string(
                    f"{key} title", embed.get("title"), required=False, max_length=MAX_LEN["title"]
                ),
                description=validators.validate_string(
                    f"{key} description",
                    embed.get("description"),
                    required=False,
                    max_length=MAX_LEN["description"],
                ),
                url=validators.validate_url(f"{key} URL", embed.get("url"), required=False),
                timestamp=validators.validate_date(f"{key} timestamp", embed.get("timestamp")),
                color=validators.validate_color(f"{key} color", embed.get("color")),
                footer=validate_footer(f"{key} footer", embed.get("footer")),
                image=validators.validate_url(f"{key} image URL", embed.get("image"), required=False),
                thumbnail=validators.validate_url(
                    f"{key} thumbnail URL", embed.get("thumbnail"), required=False
                ),
                video=validators.validate_url(f"{key} video URL", embed.get("video"), required=False),
                author=validate_author(f"{key} author", embed.get("author")),
                fields=validate_fields(sources, key, embed.get("field")),
            )
        )
    return embeds


def validate_embeds(sources: injection.Sources, key: str, raw: Any) -> tuple[models.Embed, ...] | None:
    """Validate the embeds of the document.

    A single embed may be given instead of a list. The maximum number
    of embeds applies after injected items have been expanded.

    :param sources: The available injection sources
    :param key: The label of the embed list
    :param raw: The raw embed or list of embeds
    :return: The validated embeds, or `None` if absent
    """
    if raw is None:
        return None

    embeds = tuple(
        embed
        for index, item in enumerate(one_or_many(raw), start=1)
        for embed in validate_embed(sources, f"embed {index}", item)
    )
    if len(embeds) > MAX_LEN["embeds"]:
        raise exceptions.LengthError(key, f"maximum length is {MAX_LEN['embeds']}")
    return embeds


def validate_file(key: str, raw: Any) -> models.File:
    """Validate an attachment; both the name and the URL are required."""
    file = _expect_mapping(key, raw)
    return models.File(
        name=validators.validate_string(
            f"{key} filename", file.get("name"), required=True, max_length=MAX_LEN["attachment_name"]
        ),
        url=validators.validate_url(f"{key} attachment URL", file.get("url"), required=True),
    )


def validate_files(key: str, raw: Any) -> tuple[models.File, ...] | None:
    """Validate the attachments of the document."""
    match kind_of(raw):
        case NodeKind.MISSING:
            return None
        case NodeKind.SEQUENCE:
            pass
        case _:
            raise exceptions.InvalidTypeError(key, "expected an array")

    if len(raw) > MAX_LEN["attachments"]:
        raise exceptions.LengthError(key, f"maximum length is {MAX_LEN['attachments']}")
    return tuple(validate_file(f"file {index}", file) for index, file in enumerate(raw, start=1))


def validate_mentions(key: str, raw: Any) -> models.Mentions | None:
    """Validate the allowed-mention policy.

    Every kind of mention defaults to `False`: nobody is pinged unless
    the document allows it.
    """
    if raw is None:
        return None

    mentions = _expect_mapping(key, raw)
    everyone = validators.validate_boolean(f"{key} everyone", mentions.get("everyone"))
    users = validators.validate_boolean_or_string_array(f"{key} users", mentions.get("users"))
    roles = validators.validate_boolean_or_string_array(f"{key} roles", mentions.get("roles"))
    return models.Mentions(
        everyone=everyone if everyone is not None else False,
        users=users if users is not None else False,
        roles=roles if roles is not None else False,
    )
