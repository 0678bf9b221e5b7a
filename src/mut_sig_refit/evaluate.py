"""Sensitivity/specificity of predicted signature exposures against known truth."""

from dataclasses import dataclass
from typing import FrozenSet

from .errors import LabelMismatchError
from .labels import as_series, vector_pad

DEFAULT_ALPHA = 0.05


@dataclass(frozen=True)
class ClassificationResult:
    tp: FrozenSet[str]
    fp: FrozenSet[str]
    positives: FrozenSet[str]
    negatives: FrozenSet[str]

    @property
    def tpr(self) -> float:
        """True positive rate."""
        return len(self.tp) / len(self.positives) if self.positives else 0.0

    @property
    def fpr(self) -> float:
        """False positive rate."""
        return len(self.fp) / len(self.negatives) if self.negatives else 0.0


def senspec(xhat, x, pvalue=None, alpha=DEFAULT_ALPHA) -> ClassificationResult:
    """
    Compare predicted exposures `xhat` with true exposures `x`.

    A signature is predicted present when its exposure is positive and, if
    `pvalue` is given, its p-value is at most `alpha`. Signatures missing from
    one of the inputs count as zero exposure; missing p-values count as 1.
    """
    xhat = as_series(xhat, "xhat")
    x = as_series(x, "x")
    if pvalue is not None:
        pvalue = as_series(pvalue, "pvalue")
        if len(pvalue) != len(xhat):
            raise LabelMismatchError("xhat and pvalue have different lengths")
        if not (pvalue.index == xhat.index).all():
            raise LabelMismatchError("xhat and pvalue labels mismatch")

    labels = xhat.index.append(x.index.difference(xhat.index, sort=False))
    x = vector_pad(x, labels, fill=0.0)
    xhat = vector_pad(xhat, labels, fill=0.0)

    predicted = xhat > 0
    if pvalue is not None:
        pvalue = vector_pad(pvalue, labels, fill=1.0)
        predicted &= pvalue <= alpha
    actual = x > 0

    return ClassificationResult(
        tp=frozenset(labels[(predicted & actual).to_numpy()]),
        fp=frozenset(labels[(predicted & ~actual).to_numpy()]),
        positives=frozenset(labels[actual.to_numpy()]),
        negatives=frozenset(labels[(~actual).to_numpy()]),
    )
