import numpy as np
import pandas as pd
import pytest

from mut_sig_refit import DimensionError, LabelMismatchError, cosine_similarity


class TestCosineSimilarity:
    def test_self_similarity_diag(self, catalog):
        cos = cosine_similarity(catalog, catalog, diag=True)

        assert list(cos.index) == list(catalog.columns)
        np.testing.assert_allclose(cos.values, 1.0)

    def test_zero_column_has_zero_similarity(self, catalog):
        A = catalog.copy()
        A["empty"] = 0.0

        cos = cosine_similarity(A, A, diag=True)

        assert cos["empty"] == 0.0
        full = cosine_similarity(A, catalog)
        assert (full.loc["empty"] == 0.0).all()

    def test_zero_sum_column_has_zero_similarity(self):
        A = pd.DataFrame({"a": [1.0, -1.0]}, index=["x", "y"])
        B = pd.DataFrame({"b": [1.0, -1.0]}, index=["x", "y"])

        assert cosine_similarity(A, B).loc["a", "b"] == 0.0

    def test_full_matrix(self, signatures):
        cos = cosine_similarity(signatures, signatures.iloc[:, :3])

        assert cos.shape == (5, 3)
        assert list(cos.index) == list(signatures.columns)
        assert list(cos.columns) == list(signatures.columns[:3])
        np.testing.assert_allclose(np.diag(cos.values[:3, :3]), 1.0)
        assert ((cos.values >= 0) & (cos.values <= 1 + 1e-12)).all()

    def test_known_value(self):
        A = pd.DataFrame({"a": [1.0, 0.0]}, index=["x", "y"])
        B = pd.DataFrame({"b": [1.0, 1.0]}, index=["x", "y"])

        assert cosine_similarity(A, B).loc["a", "b"] == pytest.approx(1 / np.sqrt(2))

    def test_zero_padding(self):
        A = pd.DataFrame({"a": [1.0, 2.0]}, index=["x", "y"])
        B = pd.DataFrame({"b": [1.0, 2.0, 3.0]}, index=["x", "y", "z"])

        padded = cosine_similarity(A, B).loc["a", "b"]
        ignoring_z = cosine_similarity(A, B.loc[["x", "y"]]).loc["a", "b"]

        assert padded < ignoring_z
        assert padded == pytest.approx(5 / (np.sqrt(5) * np.sqrt(14)))

    def test_padding_is_symmetric(self):
        A = pd.DataFrame({"a": [1.0, 2.0, 3.0]}, index=["x", "y", "z"])
        B = pd.DataFrame({"b": [2.0, 1.0]}, index=["y", "x"])

        assert cosine_similarity(A, B).loc["a", "b"] == pytest.approx(
            cosine_similarity(B, A).loc["b", "a"]
        )

    def test_series_input(self, catalog):
        cos = cosine_similarity(catalog["tumor_1"], catalog)

        assert cos.shape == (1, 3)
        assert cos.loc["tumor_1", "tumor_1"] == pytest.approx(1.0)

    def test_labels_not_in_reference(self):
        A = pd.DataFrame({"a": [1.0, 2.0]}, index=["x", "w"])
        B = pd.DataFrame({"b": [1.0, 2.0, 3.0]}, index=["x", "y", "z"])

        with pytest.raises(LabelMismatchError):
            cosine_similarity(A, B)

    def test_diag_requires_same_columns(self, catalog):
        with pytest.raises(DimensionError):
            cosine_similarity(catalog, catalog.iloc[:, :2], diag=True)
