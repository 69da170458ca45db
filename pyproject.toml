[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "micromouse"
version = "0.2.0"
description = "Micromouse maze-solving agents that talk to a maze simulator over standard input and output"
requires-python = ">=3.10"
dependencies = []
keywords = ["micromouse", "maze", "simulator", "robotics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
micromouse-solve = "micromouse.solver:main"
micromouse-tester = "micromouse.tester:main"

[tool.hatch.build.targets.wheel]
packages = ["micromouse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
