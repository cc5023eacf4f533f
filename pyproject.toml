[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "evtolsim"
version = "0.1.0"
description = "Discrete-time simulation of an eVTOL fleet with charging, faults and per-type statistics"
requires-python = ">=3.10"
dependencies = []
keywords = ["evtol", "simulation", "fleet", "aviation", "statistics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
evtolsim = "evtolsim.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["evtolsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
