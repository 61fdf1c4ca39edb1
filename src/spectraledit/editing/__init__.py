"""Interactive bin suppression over a loaded sample series."""

from spectraledit.editing.bin_editor import BinEditor

__all__ = ["BinEditor"]
