# fftframe

A small toolkit for uniformly sampled real signals and their spectra.

- `fftframe.dataframe.DataFrame` – a grid of float32 samples spread evenly
  over an interval. By default it holds 65536 samples spanning `-10π … 10π`
  (`DF_SIZE`, `DF_START`, `DF_END`). It supports `len()`, iteration, indexing
  and slicing (slice assignment must keep the size), and has `fill_zeros()`,
  `fill_constant(value)`, `fill_function(func)` (sets each sample to
  `func(x)` at its position `start + i * step`) and `clone()`. The attributes
  `size`, `start`, `end` and `step` describe the grid.
- `fftframe.storage` – `save_txt(frame, path)` writes every sample as `%f`
  text, one per line; `load_txt(path)` reads whitespace-separated numbers into
  a new default-sized frame.
- `fftframe.fft` – `fft_radix2(values, inverse=False)` returns the discrete
  Fourier transform of a power-of-two-length sequence as a new list (with
  `inverse=True` the inverse transform, scaled by `1/n`); `fft_real(values)`
  is the forward transform of real samples.
- `fftframe.fft_io.save_real_imag(spectrum, re_path, im_path)` writes the
  real parts of a spectrum to one text file and the imaginary parts to
  another. The spectrum must be exactly 65536 values long.
- `fftframe.pipeline.run_fft_pipeline(in_path, out_re, out_im)` loads a
  signal file, transforms it, saves both parts of the spectrum and returns the
  spectrum.
- `fftframe.complexfmt.format_complex(z)` renders a complex number as
  `a + bi` or `a - bi` with two decimals.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
import math

from fftframe.dataframe import DataFrame
from fftframe.storage import save_txt
from fftframe.pipeline import run_fft_pipeline

frame = DataFrame()
frame.fill_function(lambda x: 2.0 * math.sin(20.0 * x))
save_txt(frame, "signal.txt")

spectrum = run_fft_pipeline("signal.txt", "spectrum_real.txt", "spectrum_imag.txt")
```

The transform works on power-of-two lengths and returns a new list:

```python
from fftframe.fft import fft_real

spectrum = fft_real([1, -1, 1, -1, 1, -1, 1, -1])
# spectrum[4] is 8+0j; every other bin is (numerically) 0
```

A length that is not a power of two raises `ValueError`; an empty input
gives an empty list.

## Command line

Installing the package provides the `fftframe` command, which runs the FFT
pipeline on a signal file and writes the real and imaginary parts of its
spectrum:

```
fftframe --input signal.txt --real spectrum_real.txt --imag spectrum_imag.txt
```

Without options it reads
`data/data_2sin20t+sin16t-cos35t-3sin(5t-25deg).txt` and writes
`data/fft_stupid_real.txt` and `data/fft_stupid_imag.txt`.

`--demo complex`, `--demo dataframe` and `--demo saveload` (repeatable) run
small demonstrations before the pipeline: complex arithmetic, filling and
cloning a frame, and doubling the samples of `data/data_2sin20t.txt` into
`data/data_4sin20t.txt`.

The command prints whether the pipeline succeeded, then `result : 0` or
`result : 1`, and exits with that status.

## File format

Signal and spectrum files are plain text with one value per line, written
with six decimal places. A file being loaded must hold at least as many
values as a frame has samples (65536); extra values are ignored. Too few
values, or a token that is not a number, raises `ValueError`.

## Limitations

Loading, saving and the pipeline always work on the default frame size of
65536 samples; other lengths are not read or written. There is no plotting
and no binary file format.