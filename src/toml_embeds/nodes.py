"""Classify untyped document nodes.

A document is a generic object tree: it may come from a TOML parser or
be built in memory by the caller. Validators never probe a raw value
directly; they match on the `NodeKind` of the value and only narrow it
to a concrete type once the kind is known.
"""

import enum
from collections.abc import Mapping
from typing import Any


class NodeKind(enum.Enum):
    """The shape of a raw document node."""

    MISSING = "missing"
    STRING = "string"
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SCALAR = "scalar"


def kind_of(node: Any) -> NodeKind:
    """Get the kind of a raw document node.

    A missing key and a key explicitly set to `None` are both treated
    as `NodeKind.MISSING`; TOML has no null value.

    :param node: A raw document node
    :return: The kind of the node
    """
    match node:
        case None:
            return NodeKind.MISSING
        case str():
            return NodeKind.STRING
        case Mapping():
            return NodeKind.MAPPING
        case list() | tuple():
            return NodeKind.SEQUENCE
        case _:
            return NodeKind.SCALAR


def one_or_many(node: Any) -> list[Any]:
    """Normalize a node to a list, wrapping anything but a sequence."""
    if kind_of(node) is NodeKind.SEQUENCE:
        return list(node)
    return [node]

