[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fftframe"
version = "0.1.0"
description = "Fixed-size sampled signal frames, plain-text storage and a radix-2 FFT pipeline"
requires-python = ">=3.10"
dependencies = []
keywords = ["fft", "fourier", "signal", "spectrum", "radix-2", "dataframe"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fftframe = "fftframe.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fftframe"]

[tool.pytest.ini_options]
addopts = "-ra"
