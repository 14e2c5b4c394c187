from docwatch.properties.base import BasePropertyStore


class InMemoryPropertyStore(BasePropertyStore):
    """Dict-backed store; nothing survives the process."""

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(values or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key) or None

    def set(self, key: str, value: str) -> None:
        self._values[key] = value
