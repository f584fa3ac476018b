# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Self

from .borrow import Borrow
from .errors import BorrowError
from .extents import Extents

class Cell[T]:
    """
    Mutable reference to a single element of a grid. The cell is only valid as
    long as the borrow it was created with is alive. Cells returned by
    Grid.get_mut own their borrow, cells yielded by a mutable view share the
    borrow of the view.
    """

    _buffer: list[T]
    _offset: int
    _extents: Extents
    _borrow: Borrow
    _owned: bool

    @property
    def offset(self) -> int:
        """Linear offset of the element."""
        return self._offset

    @property
    def index(self) -> tuple[int, ...]:
        """Multi-index of the element."""
        return self._extents.reverse(self._offset)

    @property
    def value(self) -> T:
        """The referenced element. Setting it overwrites the element in the grid."""
        self._check_alive()
        return self._buffer[self._offset]
    @value.setter
    def value(self, value: T) -> None:
        self._check_alive()
        self._buffer[self._offset] = value

    @property
    def alive(self) -> bool:
        return self._borrow.active

    def __init__(self,
                 buffer: list[T],
                 offset: int,
                 extents: Extents,
                 borrow: Borrow,
                 owned: bool = True) -> None:
        self._buffer = buffer
        self._offset = offset
        self._extents = extents
        self._borrow = borrow
        self._owned = owned

    def get(self) -> T:
        return self.value

    def set(self, value: T) -> None:
        self.value = value

    def release(self) -> None:
        """End the borrow of an owning cell. Cells of a mutable view are released with the view."""
        if self._owned:
            self._borrow.release()

    def _check_alive(self) -> None:
        if not self._borrow.active:
            raise BorrowError("Cell is used after its borrow was released")

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *_) -> None:
        self.release()

    def __repr__(self) -> str:
        state = repr(self._buffer[self._offset]) if self.alive else "<released>"
        return f"Cell(index={self.index},value={state})"
