import numpy as np
import pandas as pd
from sklearn.metrics.pairwise import cosine_similarity as _pairwise_cosine

from .errors import DimensionError, LabelMismatchError
from .labels import as_frame


def _pad_rows(test: pd.DataFrame, ref: pd.DataFrame) -> pd.DataFrame:
    extra = test.index.difference(ref.index)
    if len(extra) > 0:
        raise LabelMismatchError(f"Row labels not found in reference: {extra.tolist()[:5]}")
    return test.reindex(ref.index, fill_value=0.0)


def cosine_similarity(A, B, diag=False):
    """
    Cosine similarity between columns of A and columns of B.

    Row labels (mutation contexts) are used for matching. When the label sets
    differ, the matrix with fewer rows is zero-padded to the labels of the
    other; its labels must be a subset of them. A column pair involving a
    column that sums to zero has similarity 0.

    Returns:
        If `diag`, a Series with the similarity of A[:, i] and B[:, i],
        labeled by the columns of A. Otherwise an (a, b) DataFrame with
        columns of A in rows and columns of B in columns.
    """
    A = as_frame(A, "A")
    B = as_frame(B, "B")
    if diag and A.shape[1] != B.shape[1]:
        raise DimensionError(
            f"diag requires the same number of columns in A ({A.shape[1]}) "
            f"and B ({B.shape[1]})"
        )

    if A.shape[0] < B.shape[0]:
        A = _pad_rows(A, B)
    else:
        B = _pad_rows(B, A)

    xa = A.values.astype(float)
    xb = B.values.astype(float)
    if xa.shape[1] == 0 or xb.shape[1] == 0:
        cos = np.zeros((xa.shape[1], xb.shape[1]))
    else:
        cos = _pairwise_cosine(xa.T, xb.T)
        cos[xa.sum(axis=0) == 0, :] = 0.0
        cos[:, xb.sum(axis=0) == 0] = 0.0

    if diag:
        return pd.Series(np.diag(cos).copy(), index=A.columns)
    return pd.DataFrame(cos, index=A.columns, columns=B.columns)
