from typing import Any


class RecordingSource:
    """An injection source that returns a fixed value and records its calls."""

    def __init__(self, value: Any) -> None:
        self.value = value
        self.calls: list[dict[str, Any]] = []

    def __call__(self, options: dict[str, Any]) -> Any:
        self.calls.append(options)
        return self.value


def echo_source(options: dict[str, Any]) -> dict[str, Any]:
    """An injection source that returns its options."""
    return options
