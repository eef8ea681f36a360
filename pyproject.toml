[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "phosynth"
version = "0.1.0"
description = "Audio output, G.711 conversion, phone and error helpers for diphone speech synthesis"
requires-python = ">=3.10"
dependencies = []
keywords = ["speech", "synthesis", "diphone", "g711", "ulaw", "alaw", "wav", "aiff", "au"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Speech",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["phosynth"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
