import numpy as np
from scipy.optimize import nnls

from .errors import DimensionError


def cone_project(y, delta, maxiter=None) -> np.ndarray:
    """
    Non-negative coefficients c minimizing ||y - delta @ c||.

    This is the least-squares projection of `y` onto the convex cone
    generated by the columns of `delta`. Degenerate inputs (no columns,
    no rows or an all-zero `delta`) yield a zero vector.
    """
    y = np.asarray(y, dtype=float)
    delta = np.asarray(delta, dtype=float)
    k = delta.shape[1] if delta.ndim == 2 else 0
    if k == 0 or delta.shape[0] == 0 or not np.any(delta):
        return np.zeros(k)
    if y.shape != (delta.shape[0],):
        raise DimensionError(
            f"Observation of shape {y.shape} does not match constraint matrix {delta.shape}"
        )
    coefs, _ = nnls(delta, y, maxiter=maxiter)
    return coefs
