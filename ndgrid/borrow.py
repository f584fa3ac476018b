# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Self
from enum import Enum
import logging

from .errors import BorrowError
from .options import OptionType, get_options

logger = logging.getLogger(__name__)

class BorrowKind(Enum):
    SHARED = 0
    EXCLUSIVE = 1

class BorrowFlag:
    """
    Runtime bookkeeping of the borrows of a grid buffer. Any number of shared
    borrows or exactly one exclusive borrow may be alive at a time.
    """

    _shared: int
    _exclusive: int

    @property
    def shared(self) -> int:
        """Number of shared borrows alive."""
        return self._shared

    @property
    def exclusive(self) -> int:
        """Number of exclusive borrows alive. More than one only if checking is disabled."""
        return self._exclusive

    def __init__(self) -> None:
        self._shared = 0
        self._exclusive = 0

    def borrow(self, kind: BorrowKind) -> "Borrow":
        """Acquire a borrow of the given kind. Raises BorrowError on conflicts."""
        if get_options(OptionType.BORROW).checked:
            self._check(kind)
        if kind == BorrowKind.SHARED:
            self._shared += 1
        else:
            self._exclusive += 1
        return Borrow(self, kind)

    def _check(self, kind: BorrowKind) -> None:
        if self._exclusive > 0:
            logger.debug("refused %s borrow, exclusive borrow alive", kind.name.lower())
            raise BorrowError("Grid is already mutably borrowed")
        if kind == BorrowKind.EXCLUSIVE and self._shared > 0:
            logger.debug("refused exclusive borrow, %d shared borrows alive", self._shared)
            raise BorrowError(f"Grid is already borrowed by {self._shared} reader(s)")

    def _release(self, kind: BorrowKind) -> None:
        if kind == BorrowKind.SHARED:
            self._shared -= 1
        else:
            self._exclusive -= 1

    def __repr__(self) -> str:
        return f"BorrowFlag(shared={self._shared},exclusive={self._exclusive})"

class Borrow:
    """
    Handle of a single borrow. The borrow ends on release(), at the end of a
    with block or when the handle is garbage collected.
    """

    _flag: BorrowFlag | None

    @property
    def kind(self) -> BorrowKind:
        return self._kind

    @property
    def active(self) -> bool:
        return self._flag is not None

    def __init__(self, flag: BorrowFlag, kind: BorrowKind) -> None:
        self._flag = flag
        self._kind = kind

    def release(self) -> None:
        """End the borrow. Releasing twice has no effect."""
        if self._flag is not None:
            self._flag._release(self._kind)
            self._flag = None

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *_) -> None:
        self.release()

    def __del__(self) -> None:
        self.release()
