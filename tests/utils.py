from itertools import product
import numpy as np
import array_api_compat as api

backends = [api.array_namespace(np.zeros(1))]

#import torch as tr
#backends.append(api.array_namespace(tr.zeros(1)))

#import cupy as cp
#backends.append(api.array_namespace(cp.zeros(1)))

def row_major_indices(*extents: int) -> list[tuple[int, ...]]:
    return list(product(*(range(extent) for extent in extents)))
