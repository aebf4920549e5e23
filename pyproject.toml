[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "obwire"
version = "0.14.0"
description = "Typed response models and wire encodings for the obs-websocket remote control protocol."
requires-python = ">=3.10"
dependencies = [
    "semver",
]
keywords = ["obs", "obs-websocket", "remote-control", "streaming", "protocol"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Video",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["obwire"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
