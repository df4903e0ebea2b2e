"""End-to-end pipeline: time series file to spectrum files."""

from __future__ import annotations

import os

from .fft import fft_real
from .fft_io import save_real_imag
from .storage import load_txt


def run_fft_pipeline(
    in_path: str | os.PathLike,
    out_re: str | os.PathLike,
    out_im: str | os.PathLike,
) -> list[complex]:
    """Load a time series, transform it and save the spectrum parts.

    Returns the computed spectrum. Load and save failures propagate as
    ``OSError`` or ``ValueError``.
    """
    frame = load_txt(in_path)
    spectrum = fft_real(frame)
    save_real_imag(spectrum, out_re, out_im)
    return spectrum