"""Models to represent a validated message document.

These are the values produced by the structured validators. They still
use the names of the input document; the transcoder reshapes them into
the `discord` wire models.
"""
import arrow
import attrs


@attrs.define(frozen=True)
class Profile:
    """An override of the webhook's display identity."""

    username: str | None = None
    avatar_url: str | None = None


@attrs.define(frozen=True)
class Footer:
    """The footer of an embed."""

    text: str
    icon: str | None = None


@attrs.define(frozen=True)
class Author:
    """The author of an embed."""

    name: str
    icon: str | None = None
    url: str | None = None


@attrs.define(frozen=True)
class Field:
    """A single name/value row of an embed."""

    name: str
    value: str
    inline: bool | None = None


@attrs.define(frozen=True, kw_only=True)
class Embed:
    """A single rich panel of a message."""

    title: str | None = None
    description: str | None = None
    url: str | None = None
    timestamp: arrow.Arrow | None = None
    color: int | None = None
    footer: Footer | None = None
    image: str | None = None
    thumbnail: str | None = None
    video: str | None = None
    author: Author | None = None
    fields: tuple[Field, ...] | None = None


@attrs.define(frozen=True)
class File:
    """An attachment, fetched from a URL."""

    name: str
    url: str


@attrs.define(frozen=True)
class Mentions:
    """The allowed-mention policy of a message.

    `True` allows all mentions of a kind, a tuple of ids allows only
    those ids.
    """

    everyone: bool = False
    users: bool | tuple[str, ...] = False
    roles: bool | tuple[str, ...] = False


@attrs.define(frozen=True, kw_only=True)
class Document:
    """A completely validated message."""

    color: int | None = None
    content: str | None = None
    profile: Profile | None = None
    embeds: tuple[Embed, ...] | None = None
    files: tuple[File, ...] | None = None
    mentions: Mentions | None = None
