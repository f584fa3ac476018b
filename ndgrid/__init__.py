# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

import logging

from .grid import Grid, grid
from .extents import Extents
from .errors import ErrorKind, GridIndexError, DimensionMismatch, OutOfBounds, BorrowError
from .options import FillOptions, BorrowOptions, OptionType, get_options, set_options, reset_options

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["Grid", "grid", "Extents",
           "ErrorKind", "GridIndexError", "DimensionMismatch", "OutOfBounds", "BorrowError",
           "FillOptions", "BorrowOptions", "OptionType", "get_options", "set_options", "reset_options"]
