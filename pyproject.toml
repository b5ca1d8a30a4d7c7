[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "daisykit"
version = "0.1.0"
description = "Audio-rate DSP utilities, control-input processing and simulated peripheral models for small audio boards"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "dsp",
    "audio",
    "synthesis",
    "delay line",
    "debounce",
    "encoder",
    "i2s",
    "simulation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["daisykit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = false
warn_unused_ignores = true
