"""Text formatting for complex numbers."""

from __future__ import annotations

from numbers import Complex


def format_complex(z: Complex) -> str:
    """Render ``z`` as ``"a + bi"`` or ``"a - bi"`` with two decimals."""
    real = float(z.real)
    imag = float(z.imag)
    sign = "-" if imag < 0 else "+"
    magnitude = -imag if imag < 0 else imag
    return f"{real:.2f} {sign} {magnitude:.2f}i"