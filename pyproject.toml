[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quadlite"
version = "0.1.0"
description = "Game-loop building blocks: colors, 2D geometry, shader includes, type-keyed storage, sprite animation, a mouse camera, input state, file loading and profiling."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "gamedev", "color", "geometry", "input", "animation", "profiling"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quadlite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
