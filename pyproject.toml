[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gamecore"
version = "0.1.0"
description = "Small game-engine core: vectors, matrices, quaternions, transforms, convolution filters, UDP networking and simple force generators"
requires-python = ">=3.10"
dependencies = []
keywords = ["vector", "matrix", "quaternion", "transform", "filter", "physics", "udp", "game"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gamecore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
