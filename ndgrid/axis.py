# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from __future__ import annotations
from typing import Sequence
from dataclasses import dataclass

@dataclass(frozen=True, init=False)
class Axis:
    """
    A single axis of a grid.
    """

    #-------------------------------------------------------------------------
    #members & properties

    #: The position of the axis, counted from the most significant one.
    idx: int

    #: The extent of the axis, i.e., the number of valid coordinates.
    extent: int

    #: The weight of the axis, i.e., the product of the extents of all subsequent axes.
    weight: int

    #----------------------------------------------------------------------
    #constructor

    def __init__(self, idx: int, extent: int, weight: int) -> None:
        self._check_input(idx, extent, weight)
        object.__setattr__(self, "idx", idx)
        object.__setattr__(self, "extent", extent)
        object.__setattr__(self, "weight", weight)

    def _check_input(self, idx: int, extent: int, weight: int) -> None:
        if idx < 0:
            raise ValueError(f"Index must be positive, but got {idx}")
        if extent < 0:
            raise ValueError(f"Extent must not be negative, but got {extent}")
        if weight < 0:
            raise ValueError(f"Weight must not be negative, but got {weight}")

    #----------------------------------------------------------------------
    #methods

    def contains(self, coord: int) -> bool:
        """Check whether coord is a valid coordinate along this axis."""
        return 0 <= coord < self.extent

    def __str__(self) -> str:
        return f"Axis(extent={self.extent},weight={self.weight},idx={self.idx})"

Axes = Sequence[Axis]
