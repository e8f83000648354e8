[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hexswarm"
version = "0.1.0"
description = "Geometry, sensing rules, layouts and bounds for self-organizing particle systems on the triangular lattice"
requires-python = ">=3.10"
dependencies = []
keywords = ["amoebot", "programmable matter", "swarm", "triangular lattice", "aggregation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Life",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["hexswarm"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
