"""Ordered, deduplicating record of cited keys."""

from collections.abc import Iterator


class CitationRegistry:
    """Assigns every cited key a stable index in first-seen order.

    Indices are dense and 0-based. Registering a key that is already
    present returns its existing index.
    """

    def __init__(self) -> None:
        self._keys: list[str] = []
        self._index: dict[str, int] = {}

    def register(self, key: str) -> int:
        """Register a key and return its index."""
        index = self._index.get(key)
        if index is None:
            index = len(self._keys)
            self._keys.append(key)
            self._index[key] = index
        return index

    def index(self, key: str) -> int | None:
        """Index of a registered key, ``None`` if it was never cited."""
        return self._index.get(key)

    def snapshot(self) -> list[tuple[str, int]]:
        """All ``(key, index)`` pairs in insertion order."""
        return [(key, index) for index, key in enumerate(self._keys)]

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        return f"CitationRegistry({self._keys!r})"
