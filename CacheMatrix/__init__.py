from .linalg import (
    DEFAULT_TOL,
    ShapeError,
    SingularMatrixError,
    dense_solve,
    rcond,
)
from .matrix import (
    CacheableABS,
    CacheableMatrix,
    show_cache_messages,
    hide_cache_messages,
    cache_messages_shown,
)
from .solver import cache_solve

__all__ = [
    "DEFAULT_TOL",
    "ShapeError",
    "SingularMatrixError",
    "dense_solve",
    "rcond",
    "CacheableABS",
    "CacheableMatrix",
    "show_cache_messages",
    "hide_cache_messages",
    "cache_messages_shown",
    "cache_solve",
]
