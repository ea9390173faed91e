[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "convsim"
version = "0.1.0"
description = "Convolutional codes over a binary symmetric channel: trellis encoding, Viterbi decoding and bit-error-rate simulation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "convolutional code",
    "viterbi",
    "trellis",
    "channel coding",
    "bit error rate",
    "binary symmetric channel",
    "simulation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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
    "Topic :: Communications",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
convsim = "convsim.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["convsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
