"""Read-only projections over spectra and reconstructed series."""

from spectraledit.analysis.ranking import rank_bins, top_bins
from spectraledit.analysis.residual import ResidualSummary, difference, summarize_residual

__all__ = [
    "ResidualSummary",
    "difference",
    "rank_bins",
    "summarize_residual",
    "top_bins",
]
