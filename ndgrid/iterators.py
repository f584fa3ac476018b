# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Callable, Iterator, Self
from abc import abstractmethod

from .borrow import Borrow
from .cell import Cell
from .extents import Extents

class GridView[T, Item](Iterator[Item]):
    """
    Lazy forward view over the buffer of a grid in row-major order. The view
    holds a borrow of the grid until it is exhausted or closed.
    """

    _buffer: list[T]
    _extents: Extents
    _borrow: Borrow
    _pos: int

    def __init__(self, buffer: list[T], extents: Extents, borrow: Borrow) -> None:
        self._buffer = buffer
        self._extents = extents
        self._borrow = borrow
        self._pos = 0

    #-------------------------------------------------------------------------
    #iterator protocol

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> Item:
        if self._pos >= len(self._buffer) or not self._borrow.active:
            self.close()
            raise StopIteration
        item = self._item(self._pos)
        self._pos += 1
        return item

    def __length_hint__(self) -> int:
        if not self._borrow.active:
            return 0
        return len(self._buffer) - self._pos

    @abstractmethod
    def _item(self, offset: int) -> Item: ...

    #-------------------------------------------------------------------------
    #methods

    def position(self, predicate: Callable[[T], bool]) -> tuple[int, ...] | None:
        """
        Consume the view up to the first element satisfying predicate and return
        its multi-index. Returns None if no remaining element matches.
        """
        for offset in self._offsets():
            if predicate(self._buffer[offset]):
                return self._extents.reverse(offset)
        return None

    def enumerate(self) -> Iterator[tuple[tuple[int, ...], Item]]:
        """Pairs of multi-index and element for all remaining elements."""
        for offset in self._offsets():
            yield self._extents.reverse(offset), self._item(offset)

    def close(self) -> None:
        """End the borrow of the view. A closed view is exhausted."""
        self._borrow.release()

    def _offsets(self) -> Iterator[int]:
        while self._pos < len(self._buffer) and self._borrow.active:
            self._pos += 1
            yield self._pos - 1
        self.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *_) -> None:
        self.close()

class GridIter[T](GridView[T, T]):
    """Read-only view yielding the elements of a grid."""

    def _item(self, offset: int) -> T:
        return self._buffer[offset]

class GridIterMut[T](GridView[T, Cell[T]]):
    """
    Mutable view yielding a Cell for every element of a grid. The cells are
    valid as long as the view is alive.
    """

    def _item(self, offset: int) -> Cell[T]:
        return Cell(self._buffer, offset, self._extents, self._borrow, owned=False)
