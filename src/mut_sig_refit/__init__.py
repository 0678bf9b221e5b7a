"""Mutational signature refitting and evaluation package."""

__version__ = "0.1.0"

from .contexts import dinucleotides, trinucleotides
from .errors import DimensionError, LabelMismatchError, MissingLabelsError, SignatureRefitError
from .evaluate import ClassificationResult, senspec
from .extract import load_matrix, maf_to_catalog, save_exposures, save_matrix
from .labels import vector_pad
from .orthonormal import OrthonormalBasis, orthonormalize
from .cone import cone_project
from .plot import plot_exposure
from .refitting import mutational_cone, refit
from .similarity import cosine_similarity

__all__ = [
    'trinucleotides',
    'dinucleotides',
    'maf_to_catalog',
    'load_matrix',
    'save_matrix',
    'save_exposures',
    'vector_pad',
    'orthonormalize',
    'OrthonormalBasis',
    'cone_project',
    'mutational_cone',
    'refit',
    'cosine_similarity',
    'senspec',
    'ClassificationResult',
    'plot_exposure',
    'DimensionError',
    'LabelMismatchError',
    'MissingLabelsError',
    'SignatureRefitError',
]
