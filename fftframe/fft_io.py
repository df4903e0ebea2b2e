"""Saving a spectrum as separate real- and imaginary-part text files."""

from __future__ import annotations

import os
from collections.abc import Sequence

from .dataframe import DataFrame
from .storage import save_txt


def save_real_imag(
    spectrum: Sequence[complex],
    re_path: str | os.PathLike,
    im_path: str | os.PathLike,
) -> None:
    """Write the real parts to ``re_path`` and the imaginary parts to ``im_path``.

    The spectrum must be exactly one frame long.
    """
    frame = DataFrame()
    if len(spectrum) != len(frame):
        raise ValueError(
            f"spectrum must hold {len(frame)} values, got {len(spectrum)}"
        )

    for index, z in enumerate(spectrum):
        frame[index] = z.real
    save_txt(frame, re_path)

    for index, z in enumerate(spectrum):
        frame[index] = z.imag
    save_txt(frame, im_path)