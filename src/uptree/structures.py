"""Disjoint-set forest of up-trees."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Generic, Hashable, Iterator, List, TypeVar

E = TypeVar("E", bound=Hashable)


class DisjointSetError(Exception):
    """Base class for disjoint-set forest errors."""


class ElementNotFoundError(DisjointSetError, KeyError):
    """Raised when an element was never registered in the forest."""


class InvalidPositionError(DisjointSetError, ValueError):
    """Raised when a position is foreign to the forest or not an up-tree root."""


class DuplicateElementError(DisjointSetError, ValueError):
    """Raised when an element is registered twice."""


class Position(Generic[E]):
    """Handle to a node of a :class:`DisjointSetForest`."""

    __slots__ = ("_forest", "_index")

    def __init__(self, forest: "DisjointSetForest[E]", index: int) -> None:
        self._forest = forest
        self._index = index

    @property
    def element(self) -> E:
        return self._forest._elements[self._index]

    def get_element(self) -> E:
        return self.element

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self._forest is other._forest and self._index == other._index

    def __hash__(self) -> int:
        return hash((id(self._forest), self._index))

    def __repr__(self) -> str:
        return f"Position({self.element!r})"


class DisjointSetForest(Generic[E]):
    """Union-find over arbitrary hashable elements.

    Nodes live in parallel lists indexed by registration order; a node is a
    root iff its parent index is its own index. ``find`` applies full path
    compression and ``union`` merges by size, so a sequence of n operations
    costs O(log* n) amortized per operation.
    """

    def __init__(self) -> None:
        self._elements: List[E] = []
        self._parent: List[int] = []
        self._count: List[int] = []
        self._index: Dict[E, int] = {}

    def make_set(self, element: E) -> Position[E]:
        """Register `element` as a new singleton class and return its position."""

        if element in self._index:
            raise DuplicateElementError(f"Element {element!r} is already registered.")
        index = len(self._elements)
        self._elements.append(element)
        self._parent.append(index)
        self._count.append(1)
        self._index[element] = index
        return Position(self, index)

    def find(self, element: E) -> Position[E]:
        """Return the root position of the class containing `element`."""

        return Position(self, self._find_root(self._lookup(element)))

    def union(self, s: Position[E], t: Position[E]) -> None:
        """Merge the classes rooted at `s` and `t`.

        The larger class absorbs the smaller one; on a tie `t` survives.
        """

        a = self._validate(s)
        b = self._validate(t)
        if a == b:
            return
        if self._root_count(a) > self._root_count(b):
            self._parent[b] = a
            self._count[a] += self._count[b]
        else:
            self._parent[a] = b
            self._count[b] += self._count[a]

    def size(self, element: E) -> int:
        """Return the number of elements in the class containing `element`."""

        return self._root_count(self._find_root(self._lookup(element)))

    def connected(self, first: E, second: E) -> bool:
        return self._find_root(self._lookup(first)) == self._find_root(self._lookup(second))

    def parent(self, element: E) -> Position[E]:
        """Return the current parent of `element`'s node without compressing."""

        return Position(self, self._parent[self._lookup(element)])

    def groups(self) -> Dict[Position[E], List[E]]:
        """Return every class keyed by its root position."""

        grouped: Dict[int, List[E]] = defaultdict(list)
        for index, element in enumerate(self._elements):
            grouped[self._find_root(index)].append(element)
        return {Position(self, root): members for root, members in grouped.items()}

    @property
    def num_sets(self) -> int:
        return sum(1 for index, parent in enumerate(self._parent) if index == parent)

    def __len__(self) -> int:
        return len(self._elements)

    def __contains__(self, element: object) -> bool:
        return element in self._index

    def __iter__(self) -> Iterator[E]:
        return iter(self._elements)

    def __repr__(self) -> str:
        return f"DisjointSetForest(elements={len(self)}, sets={self.num_sets})"

    def _lookup(self, element: E) -> int:
        try:
            return self._index[element]
        except KeyError:
            raise ElementNotFoundError(element) from None

    def _find_root(self, index: int) -> int:
        path = []
        parent = self._parent
        while parent[index] != index:
            path.append(index)
            index = parent[index]
        for node in path:
            parent[node] = index
        return index

    def _root_count(self, index: int) -> int:
        if self._parent[index] != index:
            raise InvalidPositionError("Position is not the root of an up-tree.")
        return self._count[index]

    def _validate(self, position: Position[E]) -> int:
        if not isinstance(position, Position) or position._forest is not self:
            raise InvalidPositionError("Position is not a valid up tree node.")
        if self._parent[position._index] != position._index:
            raise InvalidPositionError("Position is not the root of an up-tree.")
        return position._index
