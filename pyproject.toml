[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "audioblocks"
version = "0.1.0"
description = "Building blocks for block-based audio processing: delay lines, fixed-size containers, a ring-buffer FIFO, parameter tracking and numeric/string helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "dsp", "delay line", "block processing", "fifo", "ring buffer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["audioblocks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
