class SignatureRefitError(ValueError):
    """Base class for input validation failures."""


class DimensionError(SignatureRefitError):
    """Shape or rank preconditions violated."""


class LabelMismatchError(SignatureRefitError):
    """Row or column labels cannot be reconciled."""


class MissingLabelsError(SignatureRefitError):
    """Required label metadata is absent."""
