import pandas as pd


def plot_exposure(exposures, sample=0, cutoff=1e-3, ax=None, **kwargs):
    """
    Bar plot of the exposures of one sample.

    Args:
        exposures (DataFrame or Series): Signatures x samples weights, or the
            weights of a single sample.
        sample (str or int): Sample name or column position.
        cutoff (float): Minimum exposure for a signature to be shown.
        ax: Matplotlib axes to draw on; a new figure is created if omitted.
        **kwargs: Passed to `Axes.bar`.

    Returns:
        Series of the exposures displayed.
    """
    try:
        import matplotlib.pyplot as plt
    except ImportError as e:
        raise ImportError(
            "matplotlib is required for plotting. Install with: pip install mut-sig-refit[plot]"
        ) from e

    if isinstance(exposures, pd.Series):
        weights = exposures
        title = exposures.name
    elif isinstance(sample, str):
        if sample not in exposures.columns:
            raise KeyError(f"{sample} is not in exposures")
        weights = exposures[sample]
        title = sample
    else:
        if not 0 <= sample < exposures.shape[1]:
            raise IndexError(f"sample index {sample} out of bounds")
        weights = exposures.iloc[:, sample]
        title = exposures.columns[sample]

    shown = weights[weights >= cutoff]

    if ax is None:
        _, ax = plt.subplots(figsize=(12, 4))
    ax.bar(range(len(shown)), shown.values, **kwargs)
    ax.set_xticks(range(len(shown)))
    ax.set_xticklabels(shown.index, rotation=90)
    ax.set_ylabel('Proportions')
    if title is not None:
        ax.set_title(str(title))

    return shown
