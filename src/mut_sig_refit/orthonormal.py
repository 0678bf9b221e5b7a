import logging
from typing import NamedTuple, Optional

import numpy as np
from scipy import linalg

from .errors import DimensionError

logger = logging.getLogger(__name__)


class OrthonormalBasis(NamedTuple):
    """
    Orthonormal basis of the subspace spanned by a signature dictionary.

    q : (M, rank) array with orthonormal columns
    r : (rank, K) array, components of each signature in that basis,
        so that signatures ≈ q @ r
    """
    q: np.ndarray
    r: np.ndarray
    rank: int


def orthonormalize(signatures, rtol: Optional[float] = None) -> OrthonormalBasis:
    """
    Column-pivoted QR decomposition of a (M, K) signature matrix.

    Rank-deficient dictionaries are reduced to their numerical rank rather
    than rejected; `rtol` is relative to the largest diagonal entry of R.
    """
    S = np.asarray(signatures, dtype=float)
    if S.ndim != 2:
        raise DimensionError(f"Signatures must be 2-dimensional, got shape {S.shape}")
    m, k = S.shape
    if k == 0:
        raise DimensionError("Signature matrix has no columns")
    if m == 0:
        raise DimensionError("Signature matrix has no rows")
    if not np.any(S):
        raise DimensionError("Signature matrix is entirely zero")
    if k > m:
        logger.warning("More signatures (%d) than contexts (%d); rank is at most %d", k, m, m)

    q, r, piv = linalg.qr(S, mode="economic", pivoting=True)

    if rtol is None:
        rtol = max(m, k) * np.finfo(float).eps
    diag = np.abs(np.diag(r))
    rank = int(np.sum(diag > rtol * diag[0]))
    if rank < k:
        logger.warning("Signature matrix is rank deficient: rank %d < %d signatures", rank, k)

    # undo the column pivoting so columns of r follow the input signature order
    r_unpivoted = np.empty((rank, k))
    r_unpivoted[:, piv] = r[:rank, :]

    return OrthonormalBasis(q=q[:, :rank], r=r_unpivoted, rank=rank)
