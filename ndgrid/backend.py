# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any
import array_api_compat as api
from array_api_compat import device
from array_api_compat import size as _size

#: Any array object supported by array_api_compat.
type ArrayLike = Any
#: Any array namespace returned by array_api_compat.
type ArrayNamespace = Any
#: Data type object of an array namespace.
type DType = Any

__all__ = ["ArrayLike", "ArrayNamespace", "DType", "device",
           "get_namespace", "namespace_of_arrays", "get_index_dtype", "size"]

def get_namespace(obj: Any) -> ArrayNamespace:
    if not api.is_array_api_obj(obj):
        try:
            obj = obj.zeros(1)
        except AttributeError as err:
            raise TypeError("Provided object is not a recognized array or namespace.") from err
    return api.array_namespace(obj)

def namespace_of_arrays(*arrays: ArrayLike) -> ArrayNamespace:
    return api.array_namespace(*arrays)

def get_index_dtype(xp: ArrayNamespace) -> DType:
    info = xp.__array_namespace_info__()
    dtypes = info.dtypes(kind=None)
    for name in ["int64", "int32", "int16"]:
        if name in dtypes:
            return dtypes[name]
    raise ValueError("No suitable index dtype found")

def size(array: ArrayLike) -> int:
    val = _size(array)
    if val is None:
        raise ValueError("Array size is unknown (None).")
    return val
