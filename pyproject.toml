[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flightlib"
version = "0.1.0"
description = "Quadrotor states, commands, quaternion helpers, scene objects and render message types for flight simulation"
requires-python = ">=3.10"
keywords = ["quadrotor", "drone", "simulation", "quaternion", "unity"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["flightlib"]

[tool.hatch.build.targets.sdist]
include = ["flightlib", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
