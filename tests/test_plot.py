import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")

from mut_sig_refit import plot_exposure  # noqa: E402


class TestPlotExposure:
    def test_by_name(self, true_exposures):
        shown = plot_exposure(true_exposures, "tumor_1", cutoff=10)

        assert list(shown.index) == ["SBS1", "SBS3"]

    def test_by_position(self, true_exposures):
        shown = plot_exposure(true_exposures, 1)

        assert list(shown.index) == ["SBS2", "SBS4"]

    def test_unknown_sample(self, true_exposures):
        with pytest.raises(KeyError):
            plot_exposure(true_exposures, "missing")
        with pytest.raises(IndexError):
            plot_exposure(true_exposures, 3)
