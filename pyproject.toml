[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsdfec"
version = "0.1.0"
description = "Signal-processing and forward error correction building blocks for digital voice radio decoding"
requires-python = ">=3.10"
dependencies = []
keywords = ["viterbi", "convolutional code", "pll", "pseudo-noise", "ham radio", "dsp"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Telecommunications Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Ham Radio",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dsdfec"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
