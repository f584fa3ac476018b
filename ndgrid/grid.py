# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Sequence, SupportsIndex, Iterator, Self
import logging

from .backend import ArrayLike
from .extents import Extents
from .borrow import BorrowFlag, BorrowKind
from .cell import Cell
from .iterators import GridIter, GridIterMut
from .options import OptionType, get_options

logger = logging.getLogger(__name__)

Target = Sequence[SupportsIndex]

class Grid[T]:
    """
    N-dimensional grid backed by a single linear buffer in row-major order.
    Every element is addressed by a multi-index with one coordinate per axis.
    All element access goes through translate_index, so invalid multi-indices
    raise DimensionMismatch or OutOfBounds instead of touching the buffer.

    Reading and writing follow a borrow discipline that is checked at runtime:
    while a cell returned by get_mut or a view returned by iter_mut is alive,
    every other access raises BorrowError, and while a view returned by iter
    is alive, every write raises BorrowError.
    """

    _buffer: list[T]
    _extents: Extents
    _flag: BorrowFlag

    @property
    def extents(self) -> Extents:
        """Extents of the grid. Cannot be set."""
        return self._extents

    @property
    def ndims(self) -> int:
        """Number of axes."""
        return len(self._extents)

    @property
    def axis_count(self) -> int:
        return len(self._extents)

    @property
    def shape(self) -> tuple[int, ...]:
        return self._extents.sizes()

    @property
    def size(self) -> int:
        """Number of elements, i.e., the length of the buffer."""
        return len(self._buffer)

    @property
    def buffer(self) -> tuple[T, ...]:
        """Copy of the linear buffer in row-major order."""
        with self._flag.borrow(BorrowKind.SHARED):
            return tuple(self._buffer)

    #-------------------------------------------------------------------------
    #constructor

    def __init__(self, default_value: T, extents: Sequence[SupportsIndex]) -> None:
        self._extents = Extents(extents)
        copy = get_options(OptionType.FILL).copy
        self._buffer = [copy(default_value) for _ in range(self._extents.size())]
        self._flag = BorrowFlag()
        logger.debug("created grid with extents %s and %d elements",
                     list(self._extents.sizes()), len(self._buffer))

    @classmethod
    def new(cls, default_value: T, extents: Sequence[SupportsIndex]) -> Self:
        return cls(default_value, extents)

    #-------------------------------------------------------------------------
    #index translation

    def translate_index(self, target: Target) -> int:
        """Convert the multi-index target to the linear offset of its element."""
        return self._extents.translate(target)

    def reverse_index(self, offset: SupportsIndex) -> tuple[int, ...]:
        """Convert a linear offset to the multi-index of its element."""
        return self._extents.reverse(offset)

    def translate_indices[A: ArrayLike](self, idxs: A) -> A:
        """Vectorized translate_index for multi-indices with shape (ndims, ...)."""
        return self._extents.to_offsets(idxs)

    def reverse_indices[A: ArrayLike](self, offsets: A) -> A:
        """Vectorized reverse_index for linear offsets with shape (...)."""
        return self._extents.to_indices(offsets)

    #-------------------------------------------------------------------------
    #element access

    def get(self, target: Target) -> T:
        """Get the element at target."""
        offset = self.translate_index(target)
        with self._flag.borrow(BorrowKind.SHARED):
            return self._buffer[offset]

    def get_mut(self, target: Target) -> Cell[T]:
        """
        Get a mutable reference to the element at target. The cell holds an
        exclusive borrow of the grid until it is released.
        """
        offset = self.translate_index(target)
        borrow = self._flag.borrow(BorrowKind.EXCLUSIVE)
        return Cell(self._buffer, offset, self._extents, borrow)

    def set(self, target: Target, value: T) -> None:
        """Overwrite the element at target with value."""
        offset = self.translate_index(target)
        with self._flag.borrow(BorrowKind.EXCLUSIVE):
            self._buffer[offset] = value

    #-------------------------------------------------------------------------
    #iteration

    def iter(self) -> GridIter[T]:
        """Fresh read-only view over all elements in row-major order."""
        return GridIter(self._buffer, self._extents, self._flag.borrow(BorrowKind.SHARED))

    def iter_mut(self) -> GridIterMut[T]:
        """Fresh mutable view over all elements in row-major order."""
        return GridIterMut(self._buffer, self._extents, self._flag.borrow(BorrowKind.EXCLUSIVE))

    #-------------------------------------------------------------------------
    #some magic

    def __iter__(self) -> Iterator[T]:
        return self.iter()

    def __len__(self) -> int:
        return len(self._buffer)

    def __getitem__(self, target: SupportsIndex | Target) -> T:
        return self.get(_as_target(target))

    def __setitem__(self, target: SupportsIndex | Target, value: T) -> None:
        self.set(_as_target(target), value)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Grid)\
               and self._extents == other._extents\
               and self.buffer == other.buffer

    __hash__ = None # type: ignore

    def __repr__(self) -> str:
        return f"Grid({list(self._extents.sizes())})"

def _as_target(target: Any) -> Target:
    if isinstance(target, (tuple, list)):
        return target
    return (target,)

def grid[T](default_value: T, *extents: SupportsIndex) -> Grid[T]:
    """Create a grid with the given extents, filled with copies of default_value."""
    return Grid(default_value, extents)
