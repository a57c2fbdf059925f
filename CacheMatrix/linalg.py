# -*- coding: utf-8 -*-
"""
Dense inversion routine used behind the matrix cache.

Thin layer over scipy.linalg: shape checks, singularity detection
and the error classes raised to the caller.
"""

import warnings

import numpy as np
from scipy import linalg as sla
from scipy.linalg import get_lapack_funcs


# Reciprocal condition number below which a matrix counts as singular
DEFAULT_TOL = np.finfo(float).eps


class ShapeError(ValueError):
    """Matrix is not square, or the right-hand side does not fit it."""


class SingularMatrixError(np.linalg.LinAlgError):
    """Matrix has no inverse (exactly or computationally singular)."""


def rcond(a):
    """Reciprocal 1-norm condition estimate (LAPACK gecon on the LU factors)."""
    a = np.asarray(a)
    with warnings.catch_warnings():
        # exact zero pivots just give rcond = 0
        warnings.simplefilter('ignore', sla.LinAlgWarning)
        lu, _ = sla.lu_factor(a)
    gecon, = get_lapack_funcs(('gecon',), (lu,))
    rc, _ = gecon(lu, np.linalg.norm(a, 1), norm='1')
    return float(rc)


def _rcond_from_inverse(a, inverse):
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        return 1.0 / (np.linalg.norm(a, 1) * np.linalg.norm(inverse, 1))


def dense_solve(a, b=None, *, tol=None, **options):
    """
    Invert a square matrix, or solve A·X = B when b is given.

    Parameters
    ----------
    a : array_like
        Square N×N matrix.
    b : array_like, optional
        Right-hand side with N rows. The default is None (full inverse).
    tol : float, optional
        Reciprocal condition number threshold. The default is DEFAULT_TOL,
        0 switches the check off.
    **options
        Forwarded to scipy.linalg.inv / scipy.linalg.solve.

    Returns
    -------
    np.ndarray
        Inverse of a, or the solution X.
    """
    a = np.asarray(a)
    if a.ndim != 2:
        raise ShapeError(f"matrix must be two-dimensional, got shape {a.shape}")
    if a.shape[0] != a.shape[1]:
        raise ShapeError(f"matrix must be square, got shape {a.shape}")
    if a.size == 0:
        raise ShapeError("matrix is empty")

    if b is not None:
        b = np.asarray(b)
        if b.ndim == 0 or b.shape[0] != a.shape[0]:
            raise ShapeError(f"right-hand side of shape {b.shape} does not "
                             f"match matrix of shape {a.shape}")

    if tol is None:
        tol = DEFAULT_TOL

    if b is not None and tol > 0:
        # no inverse to measure against, estimate before solving
        _check_rcond(rcond(a), tol)

    try:
        if b is None:
            result = sla.inv(a, **options)
        else:
            result = sla.solve(a, b, **options)
    except sla.LinAlgError as exc:
        raise SingularMatrixError(f"matrix is singular: {exc}") from exc

    if b is None and tol > 0:
        _check_rcond(_rcond_from_inverse(a, result), tol)
    return result


def _check_rcond(rc, tol):
    # nan compares false, so the negated test also catches it
    if not rc >= tol:
        raise SingularMatrixError(
            f"matrix is computationally singular: reciprocal condition "
            f"number = {rc:g}")
