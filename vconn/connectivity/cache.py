"""Memo of minimum separators keyed by ordered vertex pair."""

from __future__ import annotations

from typing import Dict, Hashable, Iterable, Optional, Tuple

NodeID = Hashable
Separator = Tuple[NodeID, ...]


class SeparatorCache:
    """Write-once mapping ``(source, target) -> separator``.

    Separators are stored as tuples so their iteration order is the order in
    which they were computed and the stored value cannot be mutated by callers.
    """

    def __init__(self) -> None:
        self._separators: Dict[Tuple[NodeID, NodeID], Separator] = {}

    def get(self, source: NodeID, target: NodeID) -> Optional[Separator]:
        return self._separators.get((source, target))

    def put(self, source: NodeID, target: NodeID, separator: Iterable[NodeID]) -> Separator:
        """Store ``separator`` under ``(source, target)`` and return the stored tuple.

        Raises:
            KeyError: If a separator is already stored for this pair.
        """
        key = (source, target)
        if key in self._separators:
            raise KeyError(f"Separator for {key!r} is already cached.")
        stored = tuple(separator)
        self._separators[key] = stored
        return stored

    def clear(self) -> None:
        self._separators.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._separators

    def __len__(self) -> int:
        return len(self._separators)
