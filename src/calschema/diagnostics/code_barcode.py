"""
calschema.diagnostics.code_barcode
----------------------------------
Barcodes of period lengths: one cell per period, dark when the period is
long (code - min == 1). Handy to eyeball a leap distribution before running
the Troesch analyzer on it.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from ..schemas.base import CalendricalSchema


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "calschema[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "calschema[diagnostics]"') from e


def leap_year_barcode(schema: CalendricalSchema, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    """Returns (years, year_lengths), both int arrays over start_year..end_year."""
    if end_year < start_year:
        raise ValueError("end_year must be >= start_year")
    np = _need_numpy()
    years = np.arange(start_year, end_year + 1, dtype=np.int64)
    lengths = np.array([schema.count_days_in_year(int(y)) for y in years], dtype=np.int64)
    return years, lengths


def plot_code_barcode(
    code: Sequence[int],
    out: Optional[str] = None,
    *,
    title: str = "",
    first: int = 0,
):
    """
    Draw `code` as a barcode and return the matplotlib figure, saving it to
    `out` when given. `first` is the index of the first period on the x axis.
    """
    np = _need_numpy()
    plt = _need_matplotlib()

    values = np.asarray(list(code), dtype=np.int64)
    if values.size == 0:
        raise ValueError("code must not be empty")
    bars = (values - values.min()).reshape(1, -1)

    fig, ax = plt.subplots(figsize=(max(4.0, values.size * 0.25), 1.6))
    x_edges = np.arange(first - 0.5, first + values.size + 0.5, 1.0)
    ax.pcolormesh(
        x_edges,
        np.array([0.0, 1.0]),
        bars,
        shading="flat",
        cmap="Greys",
        vmin=0,
        vmax=max(1, int(bars.max())),
        edgecolors="0.8",
        linewidth=0.5,
    )
    ax.set_yticks([])
    ax.tick_params(axis="x", which="both", length=0)
    ax.set_xlim(first - 0.5, first + values.size - 0.5)
    if title:
        ax.set_title(title)
    fig.tight_layout()

    if out is not None:
        fig.savefig(out, dpi=200)
    return fig
