[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cncsim"
version = "0.1.0"
description = "Core building blocks for CNC machining simulation: tooling, jogging, simulation stepping and viewport cameras"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["cnc", "cam", "machining", "simulation", "milling", "camera"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Manufacturing",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["cncsim"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
