# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Iterator, Sequence, SupportsIndex, overload
from dataclasses import dataclass
from operator import index
from math import prod

from .backend import ArrayLike, DType, namespace_of_arrays, get_index_dtype, device, size
from .axis import Axis
from .errors import DimensionMismatch, OutOfBounds

@dataclass(frozen=True, init=False)
class Extents(Sequence[Axis]):
    """
    The extents of a grid, represented as a sequence of axes. Each axis carries its
    row-major weight, so that a multi-index can be flattened to a linear offset
    and a linear offset can be expanded back to a multi-index. The last axis
    varies fastest.
    """

    #-------------------------------------------------------------------------
    #private members

    _axes: tuple[Axis, ...]
    _size: int

    #-------------------------------------------------------------------------
    #constructor

    def __init__(self, extents: Sequence[SupportsIndex], /) -> None:
        if isinstance(extents, Extents):
            extents = extents.sizes()
        extents = [self._check_extent(e) for e in extents]
        weights = [prod(extents[i+1:]) for i in range(len(extents))]
        axes = tuple(Axis(i, e, w) for i, (e, w) in enumerate(zip(extents, weights)))
        object.__setattr__(self, "_axes", axes)
        object.__setattr__(self, "_size", prod(extents))

    def _check_extent(self, extent: SupportsIndex) -> int:
        if isinstance(extent, bool):
            raise TypeError("Extents must be integers, not bool")
        extent = index(extent)
        if extent < 0:
            raise ValueError(f"Extents must not be negative, but got {extent}")
        return extent

    #-------------------------------------------------------------------------
    #container behaviour

    def __len__(self) -> int:
        return len(self._axes)

    def __iter__(self) -> Iterator[Axis]:
        return iter(self._axes)

    def __reversed__(self) -> Iterator[Axis]:
        return reversed(self._axes)

    @overload
    def __getitem__(self, idx: SupportsIndex) -> Axis: ...
    @overload
    def __getitem__(self, idx: slice) -> Sequence[Axis]: ...
    #implementation
    def __getitem__(self, idx: SupportsIndex | slice) -> Axis | Sequence[Axis]:
        return self._axes[idx]

    #-------------------------------------------------------------------------
    #methods

    def size(self) -> int:
        """Number of elements, i.e., the product of all extents. An empty sequence of extents has size one."""
        return self._size

    def sizes(self) -> tuple[int, ...]:
        return tuple(axis.extent for axis in self._axes)

    def weights(self) -> tuple[int, ...]:
        return tuple(axis.weight for axis in self._axes)

    def translate(self, target: Sequence[SupportsIndex]) -> int:
        """
        Flatten the multi-index target to a linear offset in row-major order.
        Raises DimensionMismatch if target does not have one coordinate per axis
        and OutOfBounds if the offset lies outside of the buffer.
        """
        if len(target) != len(self):
            raise DimensionMismatch(len(target), len(self))
        coords = [index(c) for c in target]
        offset = sum(c * axis.weight for c, axis in zip(coords, self._axes))
        if offset >= self._size or any(c < 0 for c in coords):
            raise OutOfBounds(offset, self._size)
        return offset

    def reverse(self, offset: SupportsIndex) -> tuple[int, ...]:
        """Expand the linear offset to the multi-index it addresses."""
        offset = index(offset)
        if offset < 0 or offset >= self._size:
            raise OutOfBounds(offset, self._size)
        return tuple((offset // axis.weight) % axis.extent for axis in self._axes)

    def to_offsets[T: ArrayLike](self, idxs: T) -> T:
        """
        Convert multi-indices with shape (len(Extents), ...) to linear offsets with shape (...).
        """
        xp = namespace_of_arrays(idxs)
        int_type = get_index_dtype(xp)
        self._check_dtype(int_type, idxs)
        if idxs.ndim == 0:
            raise DimensionMismatch(0, len(self))
        if idxs.shape[0] != len(self):
            raise DimensionMismatch(idxs.shape[0], len(self))
        trans = xp.asarray(self.weights(),
                           dtype=int_type,
                           device=device(idxs))
        offsets = idxs * xp.reshape(trans, (len(self), *[1]*(idxs.ndim-1)))
        offsets = xp.sum(offsets, axis=0, dtype=int_type)
        invalid = offsets >= self._size
        if len(self) > 0:
            invalid = invalid | xp.any(idxs < 0, axis=0)
        self._check_offsets(xp, offsets, invalid)
        return offsets

    def to_indices[T: ArrayLike](self, offsets: T) -> T:
        """
        Convert linear offsets with shape (...) to multi-indices with shape (len(Extents), ...).
        """
        xp = namespace_of_arrays(offsets)
        int_type = get_index_dtype(xp)
        self._check_dtype(int_type, offsets)
        self._check_offsets(xp, offsets, (offsets < 0) | (offsets >= self._size))
        idxs = xp.zeros((len(self), *offsets.shape),
                        dtype=int_type,
                        device=device(offsets))
        if size(offsets) == 0:
            return idxs
        for axis in self._axes:
            idxs[axis.idx, ...] = (offsets // axis.weight) % axis.extent
        return idxs

    def _check_dtype(self, index_dtype: DType, inp: ArrayLike) -> None:
        if inp.dtype != index_dtype:
            raise ValueError(f"Input should have dtype={index_dtype}")

    def _check_offsets(self, xp, offsets: ArrayLike, invalid: ArrayLike) -> None:
        if size(offsets) > 0 and bool(xp.any(invalid)):
            raise OutOfBounds(int(offsets[invalid][0]), self._size)

    #-------------------------------------------------------------------------
    #some magic

    def __str__(self) -> str:
        return f"Extents({list(self.sizes())})"

    def __repr__(self) -> str:
        return str(self)
