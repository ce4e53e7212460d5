"""In-process key-value store."""

from __future__ import annotations


class InMemoryKeyValueStore:
    """Key-value store kept in a dict.

    Implements the KeyValueStore protocol. Contents are lost when the
    process exits, so it suits tests and ephemeral hosts only.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.items: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self.items.get(key)

    async def set(self, key: str, value: str) -> None:
        self.items[key] = value

    async def remove(self, key: str) -> None:
        self.items.pop(key, None)
