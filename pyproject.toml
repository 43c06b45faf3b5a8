[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sdtcore"
version = "0.1.0"
description = "Building blocks for physically informed sound synthesis: DSP helpers, control layers for compound impact events, and zero-crossing analysis"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "dsp", "sound synthesis", "sound design", "procedural audio"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sdtcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
