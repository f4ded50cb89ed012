[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arscrew"
version = "0.1.0"
description = "Small toolkit for 2D games: bit sets, vectors, quaternions, events, coroutines, interpolation, animation and a camera"
requires-python = ">=3.10"
dependencies = []
keywords = ["bitset", "vector", "quaternion", "events", "coroutine", "interpolation", "animation", "game"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Games/Entertainment",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["arscrew"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
