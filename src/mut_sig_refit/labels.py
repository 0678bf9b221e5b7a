"""
Helpers for label-keyed vectors (pandas.Series) and matrices (pandas.DataFrame).

Labels are the join key whenever two inputs interact: unmatched labels raise
instead of being dropped, except in `vector_pad`, which fills them.
"""

from collections.abc import Mapping

import numpy as np
import pandas as pd

from .errors import LabelMismatchError, MissingLabelsError


def has_labels(index: pd.Index) -> bool:
    if isinstance(index, pd.RangeIndex):
        return False
    return not index.isna().any()


def as_series(x, name: str = "vector") -> pd.Series:
    """Return `x` as a labeled Series, raising MissingLabelsError if it has none."""
    if isinstance(x, Mapping) and not isinstance(x, pd.Series):
        x = pd.Series(list(x.values()), index=pd.Index(list(x), dtype=object), dtype=float)
    if not isinstance(x, pd.Series) or not has_labels(x.index):
        raise MissingLabelsError(f"{name} must carry labels")
    check_unique(x.index, name)
    return x


def as_frame(x, name: str = "matrix") -> pd.DataFrame:
    """Promote a Series to a single-column DataFrame; validate row labels."""
    if isinstance(x, pd.Series):
        x = x.to_frame(name=x.name if x.name is not None else name)
    elif not isinstance(x, pd.DataFrame):
        raise TypeError(f"{name} must be a pandas DataFrame or Series")
    if not has_labels(x.index):
        raise MissingLabelsError(f"Rows of {name} must be labeled")
    check_unique(x.index, f"{name} rows")
    check_unique(x.columns, f"{name} columns")
    check_finite(x, name)
    return x


def check_unique(index: pd.Index, name: str):
    if not index.is_unique:
        dupes = index[index.duplicated()].unique().tolist()
        raise LabelMismatchError(f"Duplicate labels in {name}: {dupes[:5]}")


def check_finite(x, name: str):
    values = np.asarray(x, dtype=float)
    if not np.isfinite(values).all():
        raise ValueError(f"{name} contains NaN or infinite values")


def vector_pad(x: pd.Series, reference, fill: float = 0.0) -> pd.Series:
    """
    Expand `x` to the labels of `reference`, in reference order.

    Labels of `reference` missing from `x` get `fill`. Labels of `x` absent
    from `reference` raise LabelMismatchError.
    """
    reference = pd.Index(reference)
    extra = x.index.difference(reference)
    if len(extra) > 0:
        raise LabelMismatchError(
            f"Labels not found in reference: {extra.tolist()[:5]}"
        )
    return x.reindex(reference, fill_value=fill)


def align_catalog(catalog: pd.DataFrame, signatures: pd.DataFrame) -> pd.DataFrame:
    """Reorder catalog rows to follow the signature row order exactly."""
    if catalog.shape[0] != signatures.shape[0]:
        raise LabelMismatchError(
            f"Catalog has {catalog.shape[0]} rows but signatures have "
            f"{signatures.shape[0]}"
        )
    missing = signatures.index.difference(catalog.index)
    if len(missing) > 0:
        raise LabelMismatchError(
            f"Row labels of catalog do not match signatures; missing: "
            f"{missing.tolist()[:5]}"
        )
    return catalog.loc[signatures.index]
