# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Callable, Hashable, Literal, Self, overload
from enum import Enum
from copy import deepcopy
import threading

class OptionType(Enum):
    FILL = 0
    BORROW = 1

class Options:

    key: Hashable

    def __init__(self, category: OptionType):
        self.key = (category, threading.get_ident())

    def __enter__(self) -> Self:
        global _opts
        if self.key in _opts:
            self._tmp = _opts[self.key]
        else:
            self._tmp = None
        _opts[self.key] = self
        return self

    def __exit__(self, *_) -> None:
        global _opts
        if self._tmp is not None:
            _opts[self.key] = self._tmp
        else:
            del _opts[self.key]

class FillOptions(Options):
    """
    Context manager for the construction of grids.
    """

    #: Function duplicating the default value for every cell of a new grid.
    copy: Callable[[Any], Any]

    def __init__(self, *, copy: Callable[[Any], Any] = deepcopy):
        self.copy = copy
        super().__init__(OptionType.FILL)

class BorrowOptions(Options):
    """
    Context manager for the borrow discipline. If checked is False, conflicting
    borrows are not refused and the discipline becomes a contract of the caller.
    """

    #: Refuse conflicting borrows with a BorrowError.
    checked: bool

    def __init__(self, *, checked: bool = True):
        self.checked = checked
        super().__init__(OptionType.BORROW)

_opts: dict[Any, Options] = {}

_defaults: dict[OptionType, Options] = {
    OptionType.FILL: FillOptions(),
    OptionType.BORROW: BorrowOptions()
}

@overload
def get_options(otype: Literal[OptionType.FILL]) -> FillOptions: ...
@overload
def get_options(otype: Literal[OptionType.BORROW]) -> BorrowOptions: ...
# implementation
def get_options(otype: OptionType) -> Options:
    """Options active for the current thread, falling back to the defaults."""
    key = (otype, threading.get_ident())
    if key in _opts:
        return _opts[key]
    return _defaults[otype]

def set_options(opts: FillOptions | BorrowOptions) -> None:
    global _opts
    _opts[opts.key] = opts

def reset_options(otype: OptionType) -> None:
    """Remove the options set for the current thread, restoring the defaults."""
    _opts.pop((otype, threading.get_ident()), None)
