"""Resolve injected values from caller-supplied sources.

Instead of supplying an embed or a field literally, a document may ask
for it to be computed by a named source function:

    [[embed]]
    inject = { source = "weather", city = "Prague" }

The value returned by the source is validated exactly like a literal
value would be. Sources are passed in explicitly by the caller; the
resolver never looks them up anywhere else and never modifies them.
"""
import logging
from collections.abc import Callable, Mapping
from typing import Any

from toml_embeds import exceptions
from toml_embeds.nodes import NodeKind, kind_of

_logger = logging.getLogger(__name__)

Source = Callable[[dict[str, Any]], Any]
Sources = Mapping[str, Source] | None


def resolve(options: Any, sources: Sources, key: str) -> Any:
    """Call the injection source named in the options.

    Exceptions raised by the source itself are not caught.

    :param options: A source name, or a mapping with a `source` name
      and the options to pass to that source
    :param sources: The available sources by name
    :param key: The label of the injected field
    :return: The value returned by the source
    """
    match kind_of(options):
        case NodeKind.STRING:
            name, arguments = options, {}
        case NodeKind.MAPPING:
            name = options.get("source")
            arguments = {k: v for k, v in options.items() if k != "source"}
        case _:
            name = arguments = None

    if not isinstance(name, str):
        raise exceptions.InjectionShapeError(
            key, "injection options should be a string or contain a source field"
        )

    source = sources.get(name) if sources is not None else None
    if source is None:
        raise exceptions.UnknownSourceError(key, f"invalid injection source: {name}")

    _logger.debug("Injecting %s from source %r", key, name)
    return source(arguments)


def maybe_inject(item: Any, sources: Sources, key: str) -> Any:
    """Resolve the item if it carries an `inject` marker.

    :param item: A raw document node
    :param sources: The available sources by name
    :param key: The label of the item
    :return: The injected value, or the item itself if it is not
      marked for injection
    """
    if kind_of(item) is NodeKind.MAPPING and item.get("inject"):
        return resolve(item["inject"], sources, key)
    return item
