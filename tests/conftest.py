from collections.abc import Callable
from typing import Any

import pytest

from tests import helpers
from toml_embeds import injection


@pytest.fixture()
def recording_source() -> Callable[[Any], helpers.RecordingSource]:
    """Return a factory for injection sources that record their calls."""
    return helpers.RecordingSource


@pytest.fixture()
def field_sources() -> injection.Sources:
    """Return injection sources that produce embed fields."""
    return {
        "single": lambda options: {"name": "Single", "value": str(options.get("value", "1"))},
        "pair": lambda _: [{"name": "First", "value": "1"}, {"name": "Second", "value": "2"}],
    }
