"""Configuration of the toml-embeds command line tool."""
from __future__ import annotations

import importlib
import tomllib
from pathlib import Path
from typing import Literal

from pydantic import BaseModel

from toml_embeds import exceptions, injection


class Config(BaseModel):
    """Configuration loaded from a TOML file.

    Injection sources are declared as import paths:

        [sources]
        weather = "my_package.sources:weather"
    """

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    sources: dict[str, str] = {}

    @classmethod
    def from_file(cls, path: Path) -> Config:
        """Load the configuration from a TOML file."""
        with path.open("rb") as config_file:
            return cls(**tomllib.load(config_file))

    def load_sources(self) -> injection.Sources:
        """Import the configured injection sources.

        :return: The injection sources by name
        """
        return {name: _import_source(name, path) for name, path in self.sources.items()}


def _import_source(name: str, path: str) -> injection.Source:
    """Import a source function from a `module:attribute` path."""
    module_name, _, attribute = path.partition(":")
    if not module_name or not attribute:
        raise exceptions.ConfigurationError(
            f"Source {name!r} should be a 'module:function' path, got {path!r}"
        )

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise exceptions.ConfigurationError(f"Source {name!r}: cannot import {module_name!r}") from exc

    try:
        source = getattr(module, attribute)
    except AttributeError:
        raise exceptions.ConfigurationError(
            f"Source {name!r}: {module_name!r} has no attribute {attribute!r}"
        ) from None

    if not callable(source):
        raise exceptions.ConfigurationError(f"Source {name!r}: {path!r} is not callable")
    return source
