"""Command-line entry point and small demonstrations."""

from __future__ import annotations

import argparse
import math
import os
import sys

from .complexfmt import format_complex
from .dataframe import DataFrame
from .pipeline import run_fft_pipeline
from .storage import load_txt, save_txt

DEFAULT_INPUT = "data/data_2sin20t+sin16t-cos35t-3sin(5t-25deg).txt"
DEFAULT_REAL = "data/fft_stupid_real.txt"
DEFAULT_IMAG = "data/fft_stupid_imag.txt"
DEFAULT_SAVELOAD_INPUT = "data/data_2sin20t.txt"
DEFAULT_SAVELOAD_OUTPUT = "data/data_4sin20t.txt"


def demo_complex() -> None:
    """Print the sum and product of two sample complex numbers."""
    z1 = complex(3.0, 4.0)
    z2 = complex(1.0, -2.0)
    print(f"z1 + z2 = {format_complex(z1 + z2)}")
    print(f"z1 * z2 = {format_complex(z1 * z2)}")


def _sine20(x: float) -> float:
    return 2.0 * math.sin(20.0 * x)


def demo_dataframe() -> int:
    """Fill a frame with 2*sin(20x), print its ends and show clone independence."""
    frame = DataFrame()
    frame.fill_function(_sine20)

    print("First 5 samples:")
    for index, value in enumerate(frame[:5]):
        print(f"  df[{index:2d}] = {value:f}")

    first_tail = max(len(frame) - 5, 0)
    print("Last 5 samples:")
    for index, value in enumerate(frame[first_tail:], start=first_tail):
        print(f"  df[{index:2d}] = {value:f}")

    twin = frame.clone()
    twin[0] = 123.456
    print("After modifying clone at index 0:")
    print(f"  original df[0] = {frame[0]:f}")
    print(f"  cloned   df2[0] = {twin[0]:f}")
    return 0


def demo_saveload(
    infile: str | os.PathLike = DEFAULT_SAVELOAD_INPUT,
    outfile: str | os.PathLike = DEFAULT_SAVELOAD_OUTPUT,
) -> int:
    """Load ``infile``, double every sample and save the result to ``outfile``."""
    try:
        frame = load_txt(infile)
    except (OSError, ValueError):
        print(f"Error: failed to load '{os.fspath(infile)}'", file=sys.stderr)
        return 1

    frame[:] = [2.0 * value for value in frame]

    try:
        save_txt(frame, outfile)
    except OSError:
        print(f"Error: failed to save '{os.fspath(outfile)}'", file=sys.stderr)
        return 1
    print(f"Saved doubled data to '{os.fspath(outfile)}' ({len(frame)} samples)")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the requested demos, then the FFT pipeline; return its status."""
    parser = argparse.ArgumentParser(
        prog="fftframe",
        description="Transform a sampled time series and save its spectrum.",
    )
    parser.add_argument("--input", default=DEFAULT_INPUT, help="time series file")
    parser.add_argument("--real", default=DEFAULT_REAL, help="output file for real parts")
    parser.add_argument("--imag", default=DEFAULT_IMAG, help="output file for imaginary parts")
    parser.add_argument(
        "--demo",
        action="append",
        default=[],
        choices=("complex", "dataframe", "saveload"),
        help="run a demonstration first (may be repeated)",
    )
    args = parser.parse_args(argv)

    demos = {
        "complex": demo_complex,
        "dataframe": demo_dataframe,
        "saveload": demo_saveload,
    }
    for name in args.demo:
        demos[name]()

    try:
        run_fft_pipeline(args.input, args.real, args.imag)
    except (OSError, ValueError) as exc:
        print(f"FFT pipeline failed ({exc}).")
        code = 1
    else:
        print("FFT pipeline finished successfully.")
        code = 0
    print(f"result : {code}")
    return code


if __name__ == "__main__":
    sys.exit(main())