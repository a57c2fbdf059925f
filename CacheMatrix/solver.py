# -*- coding: utf-8 -*-
"""
Inverse lookup with caching.

cache_solve returns the stored inverse when there is one and computes
it with dense_solve otherwise.
"""

import numpy as np

from .linalg import dense_solve
from .matrix import CacheableABS, cache_message


def cache_solve(matrix_x: CacheableABS, *args, **options) -> np.ndarray:
    """
    Inverse of a cacheable matrix, computed at most once per matrix.

    Parameters
    ----------
    matrix_x : CacheableABS
        Holder of the matrix and its cached inverse.
    *args, **options
        Forwarded to dense_solve on a cache miss, e.g. a right-hand side
        b or tol. Ignored when the inverse is already cached.

    Returns
    -------
    np.ndarray
        The cached inverse, or the freshly computed one.

    Raises
    ------
    ShapeError, SingularMatrixError
        From dense_solve. The cache is left empty.
    """
    inv = matrix_x.get_inverse()
    if inv is not None:
        cache_message("getting cached inverse")
        return inv

    original = matrix_x.get()
    cache_message("computing inverse")
    inv = np.asarray(dense_solve(original, *args, **options))
    # the result now belongs to the cache
    inv.flags.writeable = False
    matrix_x.set_inverse(inv)
    return inv
