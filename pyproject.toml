[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "harsh_realm"
version = "0.1.0"
description = "Core of a turn-based solar system strategy game: 2D orbits, celestial bodies, turns and view layout"
requires-python = ">=3.10"
dependencies = []
keywords = ["strategy", "turn-based", "simulation", "orbits", "solar-system", "game"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["harsh_realm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
