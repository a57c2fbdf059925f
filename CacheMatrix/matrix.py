# -*- coding: utf-8 -*-
"""
Matrix container that can cache its inverse.

The inverse is dropped every time the matrix is replaced, so a stored
inverse always belongs to the current matrix.
"""

from abc import ABC, abstractmethod
from typing import Optional

import numpy as np


_show_cache_messages = True
def show_cache_messages():
    global _show_cache_messages
    _show_cache_messages = True
def hide_cache_messages():
    global _show_cache_messages
    _show_cache_messages = False
def cache_messages_shown() -> bool:
    return _show_cache_messages


def cache_message(text: str) -> None:
    """Print a cache notification if messages are switched on."""
    if _show_cache_messages:
        print(text)


class CacheableABS(ABC):
    """
    Interface of a matrix holder with an inverse slot.

    cache_solve works with anything providing these four methods.
    """

    @abstractmethod
    def set(self, mat) -> None:
        """Replace the matrix and forget the inverse."""

    @abstractmethod
    def get(self) -> np.ndarray:
        """Current matrix."""

    @abstractmethod
    def set_inverse(self, inverse: np.ndarray) -> None:
        """Store an inverse computed for the current matrix."""

    @abstractmethod
    def get_inverse(self) -> Optional[np.ndarray]:
        """Stored inverse, None if nothing is cached."""


class CacheableMatrix(CacheableABS):
    """
    Square matrix with a cached inverse.

    The matrix is kept as a private read-only copy. Whatever is passed to
    set_inverse is stored as is, without checking that it really is the
    inverse.
    """

    def __init__(self, mat=None, name: str = None):
        """
        Create the holder.

        Parameters
        ----------
        mat : array_like, optional
            Initial matrix. The default is None, an empty 0x0 placeholder.
        name : str, optional
            Label used in messages and repr.
        """
        self.name = name
        self._inverse = None
        self.set(mat)

    def set(self, mat) -> None:
        if mat is None:
            mat = np.empty((0, 0))
        value = np.array(mat, copy=True)
        value.flags.writeable = False
        was_cached = self._inverse is not None
        self._value = value
        self._inverse = None
        if was_cached:
            cache_message(f"Cached inverse dropped for matrix '{self._label()}'")

    def get(self) -> np.ndarray:
        return self._value

    def set_inverse(self, inverse: np.ndarray) -> None:
        self._inverse = inverse

    def get_inverse(self) -> Optional[np.ndarray]:
        return self._inverse

    @property
    def matrix(self) -> np.ndarray:
        return self.get()

    @matrix.setter
    def matrix(self, value):
        self.set(value)

    @property
    def is_cached(self) -> bool:
        """True once an inverse is stored for the current matrix."""
        return self._inverse is not None

    def _label(self) -> str:
        return self.name if self.name else "<unnamed>"

    def __repr__(self) -> str:
        state = "cached" if self.is_cached else "empty"
        return (f"CacheableMatrix({self._label()}, "
                f"shape={self._value.shape}, {state})")
