"""Plain-text storage of data frames, one sample per line."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from itertools import islice

from .dataframe import DF_SIZE, DataFrame


def save_txt(frame: DataFrame, path: str | os.PathLike) -> None:
    """Write every sample of ``frame`` to ``path`` as ``%f`` text, one per line."""
    with open(path, "w", encoding="ascii") as handle:
        handle.writelines(f"{value:f}\n" for value in frame)


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def load_txt(path: str | os.PathLike) -> DataFrame:
    """Read a full frame of whitespace-separated samples from ``path``.

    Raises ``ValueError`` if the file holds fewer samples than a frame
    or a token is not a number.
    """
    frame = DataFrame()
    with open(path, "r", encoding="ascii") as handle:
        tokens = list(islice(_tokens(handle), DF_SIZE))
    if len(tokens) < DF_SIZE:
        raise ValueError(
            f"{os.fspath(path)}: expected {DF_SIZE} samples, found {len(tokens)}"
        )
    for index, token in enumerate(tokens):
        try:
            frame[index] = float(token)
        except ValueError as exc:
            raise ValueError(
                f"{os.fspath(path)}: sample {index} is not a number: {token!r}"
            ) from exc
    return frame