"""
Refitting of mutation catalogs onto a fixed set of reference signatures.

The catalog is projected onto the subspace spanned by the signatures (via an
orthonormal basis) and then onto the cone of their non-negative combinations,
after Omichessan et al., PLoS ONE 14(9): e0221235 (2019).
"""

import logging
import os

import numpy as np
import pandas as pd
from joblib import Parallel, delayed

from .cone import cone_project
from .extract import load_matrix
from .labels import align_catalog, as_frame
from .orthonormal import orthonormalize

logger = logging.getLogger(__name__)


def _refit_column(q, r, column, maxiter=None):
    return cone_project(q.T @ column, r, maxiter=maxiter)


def normalize_columns(weights: pd.DataFrame) -> pd.DataFrame:
    """Scale each column to sum to one; all-zero columns stay zero."""
    totals = weights.sum(axis=0)
    scale = totals.where(totals != 0, 1.0)
    return weights.div(scale, axis=1)


def mutational_cone(catalog, signatures, normalize=False, n_jobs=1, maxiter=None, rtol=None):
    """
    Estimate signature exposures for every sample of a catalog.

    Args:
        catalog (DataFrame or Series): Counts with mutation contexts in rows
            and samples in columns. A Series is treated as one sample.
        signatures (DataFrame or str): Reference signatures with the same
            contexts in rows and signature names in columns, or a path to a
            tab/comma-separated file holding them.
        normalize (bool): Divide each sample's weights by their sum.
        n_jobs (int): Number of parallel workers over samples (-1 = all cores).
        maxiter (int): Iteration cap forwarded to the cone-projection solver.
        rtol (float): Relative tolerance for the numerical rank of the signatures.

    Returns:
        DataFrame of shape (signatures, samples), or a Series when the
        catalog holds a single sample.
    """
    if isinstance(signatures, (str, os.PathLike)):
        signatures = load_matrix(signatures)
    signatures = as_frame(signatures, "signatures")
    catalog = as_frame(catalog, "catalog")
    catalog = align_catalog(catalog, signatures)

    basis = orthonormalize(signatures.values, rtol=rtol)
    counts = catalog.values.astype(float)

    logger.info(
        "Refitting %d samples onto %d signatures (%d contexts, rank %d)",
        counts.shape[1], signatures.shape[1], signatures.shape[0], basis.rank,
    )

    if n_jobs == 1:
        columns = [_refit_column(basis.q, basis.r, counts[:, j], maxiter)
                   for j in range(counts.shape[1])]
    else:
        columns = Parallel(n_jobs=n_jobs)(
            delayed(_refit_column)(basis.q, basis.r, counts[:, j], maxiter)
            for j in range(counts.shape[1])
        )

    values = np.column_stack(columns) if columns else np.zeros((signatures.shape[1], 0))
    weights = pd.DataFrame(values, index=signatures.columns, columns=catalog.columns)

    if normalize:
        weights = normalize_columns(weights)

    if weights.shape[1] == 1:
        return weights.iloc[:, 0]
    return weights


refit = mutational_cone
