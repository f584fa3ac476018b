# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""typing has all classes used in the external API of ndgrid."""

from .axis import Axis
from .extents import Extents
from .grid import Grid
from .cell import Cell
from .iterators import GridView, GridIter, GridIterMut
from .borrow import Borrow, BorrowFlag, BorrowKind

from .errors import ErrorKind, GridIndexError, DimensionMismatch, OutOfBounds, BorrowError

from .options import Options, FillOptions, BorrowOptions, OptionType
