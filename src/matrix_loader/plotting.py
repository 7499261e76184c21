import matplotlib.pyplot as plt
import numpy as np

def plot_matrix(M, title="Matrix", ax=None, show=False):
    """Heat-map preview of a loaded matrix; returns the Axes."""
    M = np.asarray(M, dtype=float)
    if M.ndim != 2:
        raise ValueError("plot_matrix expects a 2D array")

    if ax is None:
        _, ax = plt.subplots(figsize=(5, 5))
    im = ax.imshow(M, cmap="viridis", interpolation="nearest")
    ax.figure.colorbar(im, ax=ax, label="value")
    ax.set_title(f"{title} ({M.shape[0]}x{M.shape[1]})")
    ax.set_xlabel("column")
    ax.set_ylabel("row")
    ax.figure.tight_layout()
    if show:
        plt.show()
    return ax
