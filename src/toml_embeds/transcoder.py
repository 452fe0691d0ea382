"""Transcode a message document into a Discord webhook payload.

The document is validated completely before anything is reshaped: the
first invalid field raises an `exceptions.ValidationError` and no
payload is returned.
"""
import logging
import tomllib
from typing import Any, Final

from toml_embeds import discord, exceptions, injection, models, structures, validators
from toml_embeds.discord import MAX_LEN
from toml_embeds.nodes import NodeKind, kind_of

_logger = logging.getLogger(__name__)

_TIMESTAMP_FORMAT: Final = "YYYY-MM-DDTHH:mm:ss.SSS[Z]"


def parse(source: str, sources: injection.Sources = None) -> dict[str, Any]:
    """Parse a TOML message document and transcode it.

    :param source: The TOML text of the document
    :param sources: The available injection sources
    :return: The webhook payload
    """
    try:
        document = tomllib.loads(source)
    except tomllib.TOMLDecodeError as exc:
        raise exceptions.DocumentParseError(f"Invalid document: {exc}") from exc
    return transcode(document, sources)


def transcode(document: Any, sources: injection.Sources = None) -> dict[str, Any]:
    """Validate a message document and transcode it into a payload.

    :param document: The raw document, as a mapping
    :param sources: The available injection sources
    :return: The webhook payload, without any of the absent fields
    """
    validated = validate_document(document, sources)
    message = _create_webhook_message(validated)
    _logger.debug(
        "Transcoded document with %d embed(s) and %d file(s)",
        len(validated.embeds or ()),
        len(validated.files or ()),
    )
    return discord.to_payload(message)


def validate_document(document: Any, sources: injection.Sources = None) -> models.Document:
    """Validate every part of a raw message document.

    :param document: The raw document, as a mapping
    :param sources: The available injection sources
    :return: The validated document
    """
    if kind_of(document) is not NodeKind.MAPPING:
        raise exceptions.InvalidTypeError("document", "expected an object")

    return models.Document(
        color=validators.validate_color("root color", document.get("color")),
        content=validators.validate_string(
            "content", document.get("content"), required=False, max_length=MAX_LEN["content"]
        ),
        profile=structures.validate_profile("profile", document.get("profile")),
        embeds=structures.validate_embeds(sources, "embeds", document.get("embed")),
        files=structures.validate_files("files", document.get("file")),
        mentions=structures.validate_mentions("mentions", document.get("mentions")),
    )


def _create_webhook_message(document: models.Document) -> discord.WebhookMessage:
    """Reshape a validated document into a webhook message."""
    profile = document.profile or models.Profile()
    embeds = document.embeds
    files = document.files
    return discord.WebhookMessage(
        content=document.content,
        username=profile.username,
        avatar_url=profile.avatar_url,
        allowed_mentions=_create_allowed_mentions(document.mentions),
        embeds=[_create_embed(e, document.color) for e in embeds] if embeds is not None else None,
        files=[_create_attachment(f) for f in files] if files is not None else None,
    )


def _create_embed(embed: models.Embed, root_color: int | None) -> discord.Embed:
    """Reshape a validated embed into its wire form.

    :param embed: The validated embed
    :param root_color: The color of the document, used if the embed
      does not have a color of its own
    :return: A Discord embed
    """
    footer = embed.footer
    author = embed.author
    return discord.Embed(
        title=embed.title,
        description=embed.description,
        url=embed.url,
        timestamp=_format_timestamp(embed),
        color=embed.color if embed.color is not None else root_color,
        footer=discord.Footer(text=footer.text, icon_url=footer.icon) if footer else None,
        image=_create_media(embed.image),
        thumbnail=_create_media(embed.thumbnail),
        video=_create_media(embed.video),
        author=discord.Author(name=author.name, url=author.url, icon_url=author.icon) if author else None,
        fields=_create_fields(embed.fields),
    )


def _format_timestamp(embed: models.Embed) -> str | None:
    """Format the timestamp as an ISO-8601 string in UTC, e.g. 2023-07-19T07:55:00.000Z."""
    if embed.timestamp is None:
        return None
    return embed.timestamp.to("UTC").format(_TIMESTAMP_FORMAT)


def _create_media(url: str | None) -> discord.Media | None:
    return discord.Media(url=url) if url is not None else None


def _create_fields(fields: tuple[models.Field, ...] | None) -> list[discord.Field] | None:
    if fields is None:
        return None
    return [discord.Field(name=f.name, value=f.value, inline=f.inline) for f in fields]


def _create_attachment(file: models.File) -> discord.Attachment:
    return discord.Attachment(name=file.name, attachment=file.url)


def _create_allowed_mentions(mentions: models.Mentions | None) -> discord.AllowedMentions | None:
    """Create the allowed-mention policy of the message.

    Every kind that is enabled is listed in `parse`. Explicit id lists
    are only included if the document listed ids; a boolean allows all
    mentions of that kind.

    :param mentions: The validated mentions
    :return: The allowed mentions, or `None` if absent
    """
    if mentions is None:
        return None

    parse = [
        kind
        for kind, allowed in (
            ("everyone", mentions.everyone),
            ("users", mentions.users),
            ("roles", mentions.roles),
        )
        if allowed
    ]
    return discord.AllowedMentions(
        parse=parse,
        users=None if isinstance(mentions.users, bool) else list(mentions.users),
        roles=None if isinstance(mentions.roles, bool) else list(mentions.roles),
    )
