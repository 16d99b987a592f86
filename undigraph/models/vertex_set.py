"""
    VertexSet - insertion-ordered set of vertices.

    Backs both ``Vertex.adjacent`` and ``Graph.nodes``.  Members are kept
    as keys of a plain dict, so iteration follows insertion order and
    membership follows the member's own hashing (object identity for
    ``Vertex``).
"""
from collections.abc import MutableSet
from typing import Any, Dict, Iterable, Iterator, Optional


class VertexSet(MutableSet):
    """
    Ordered set with deterministic iteration.
    Re-adding an existing member does not change its position.
    """

    __slots__ = ('_items',)

    def __init__(self, items: Optional[Iterable[Any]] = None):
        self._items: Dict[Any, None] = {}
        if items is not None:
            for item in items:
                self.add(item)

    def add(self, item: Any) -> None:
        self._items.setdefault(item, None)

    def discard(self, item: Any) -> None:
        self._items.pop(item, None)

    def __contains__(self, item: Any) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"VertexSet({list(self._items)!r})"
