[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "verletsim"
version = "1.0.0"
description = "Interactive 2D Verlet-integration particle simulation with grid-based collision solving"
requires-python = ">=3.10"
keywords = ["verlet", "physics", "simulation", "particles", "collision", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
verletsim = "verletsim.app:main"

[tool.hatch.build.targets.wheel]
packages = ["verletsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
