[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "summit_surveyor"
version = "0.1.0"
description = "Ski resort simulation core: terrain, lifts, path finding, cameras and skier decisions"
requires-python = ">=3.10"
keywords = ["simulation", "ski", "dijkstra", "terrain", "game", "camera"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["summit_surveyor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
