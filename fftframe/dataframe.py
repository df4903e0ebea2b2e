"""Fixed-size single-precision sample frame over a symmetric interval."""

from __future__ import annotations

import math
import struct
from array import array
from collections.abc import Callable, Iterator


def _f32(value: float) -> float:
    """Round ``value`` to the nearest single-precision float."""
    return struct.unpack("f", struct.pack("f", value))[0]


DF_SIZE = 65536
DF_START = _f32(-10.0 * _f32(math.pi))
DF_END = _f32(10.0 * _f32(math.pi))


class DataFrame:
    """A frame of ``size`` float32 samples spread evenly from ``start`` to ``end``."""

    __slots__ = ("start", "end", "step", "_data")

    def __init__(
        self,
        size: int = DF_SIZE,
        start: float = DF_START,
        end: float = DF_END,
    ) -> None:
        if size < 2:
            raise ValueError("a frame needs at least two samples")
        self.start = _f32(start)
        self.end = _f32(end)
        self.step = _f32(_f32(self.end - self.start) / (size - 1))
        self._data = array("f", bytes(4 * size))

    @property
    def size(self) -> int:
        return len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    def __getitem__(self, index):
        return self._data[index]

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            replacement = array("f", value)
            if len(replacement) != len(self._data[index]):
                raise ValueError("slice assignment must keep the frame size")
            self._data[index] = replacement
        else:
            self._data[index] = value

    def __repr__(self) -> str:
        return (
            f"DataFrame(size={self.size}, start={self.start!r}, "
            f"end={self.end!r}, step={self.step!r})"
        )

    def fill_zeros(self) -> None:
        """Set every sample to zero."""
        self.fill_constant(0.0)

    def fill_constant(self, value: float) -> None:
        """Set every sample to ``value``."""
        self._data = array("f", [value]) * len(self._data)

    def fill_function(self, func: Callable[[float], float]) -> None:
        """Set each sample to ``func(x)`` at its position on the interval."""
        if not callable(func):
            raise TypeError("func must be callable")
        positions = (
            _f32(self.start + _f32(i * self.step)) for i in range(len(self._data))
        )
        self._data = array("f", (func(x) for x in positions))

    def clone(self) -> DataFrame:
        """Return an independent copy of this frame."""
        twin = DataFrame(len(self._data), self.start, self.end)
        twin.step = self.step
        twin._data = array("f", self._data)
        return twin