"""Iterative radix-2 fast Fourier transform."""

from __future__ import annotations

import math
from collections.abc import Iterable


def _reverse_bits(value: int, bits: int) -> int:
    result = 0
    for _ in range(bits):
        result = (result << 1) | (value & 1)
        value >>= 1
    return result


def fft_radix2(values: Iterable[complex], inverse: bool = False) -> list[complex]:
    """Return the discrete Fourier transform of ``values``.

    The length must be a power of two. With ``inverse`` set, the inverse
    transform is computed, including the ``1/n`` scaling.
    """
    buf = [complex(v) for v in values]
    n = len(buf)
    if n == 0:
        return buf
    if n & (n - 1):
        raise ValueError(f"length must be a power of two, got {n}")

    bits = n.bit_length() - 1
    buf = [buf[_reverse_bits(i, bits)] for i in range(n)]

    sign = 1.0 if inverse else -1.0
    length = 2
    while length <= n:
        half = length // 2
        angle = sign * 2.0 * math.pi / length
        wlen = complex(math.cos(angle), math.sin(angle))
        for block in range(0, n, length):
            w = complex(1.0, 0.0)
            for j in range(block, block + half):
                u = buf[j]
                v = w * buf[j + half]
                buf[j] = u + v
                buf[j + half] = u - v
                w *= wlen
        length <<= 1

    if inverse:
        buf = [complex(z.real / n, z.imag / n) for z in buf]
    return buf


def fft_real(values: Iterable[float]) -> list[complex]:
    """Return the forward transform of a sequence of real samples."""
    return fft_radix2((complex(float(v), 0.0) for v in values), inverse=False)