# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from enum import Enum

class ErrorKind(Enum):
    DIMENSION_MISMATCH = 0
    OUT_OF_BOUNDS = 1

class GridIndexError(IndexError):
    """
    Base class of the errors raised by index translation. Callers can branch on
    the concrete subclass or on ``kind`` instead of parsing the message.
    """

    #: Tag identifying the kind of failure.
    kind: ErrorKind

class DimensionMismatch(GridIndexError):
    """The multi-index has a different number of coordinates than the grid has axes."""

    kind = ErrorKind.DIMENSION_MISMATCH

    #: Number of coordinates supplied by the caller.
    got: int
    #: Number of axes of the grid.
    expected: int

    def __init__(self, got: int, expected: int) -> None:
        self.got = got
        self.expected = expected
        super().__init__(f"Tried to index with {got} dimensions when grid has {expected} dimensions")

class OutOfBounds(GridIndexError):
    """The linear offset lies outside of the buffer."""

    kind = ErrorKind.OUT_OF_BOUNDS

    #: Offending linear offset.
    offset: int
    #: Number of elements in the buffer.
    size: int

    def __init__(self, offset: int, size: int) -> None:
        self.offset = offset
        self.size = size
        super().__init__(f"Index ({offset}) out of bounds ({size})")

class BorrowError(RuntimeError):
    """A borrow of the grid buffer conflicts with a borrow that is still alive."""
    pass
