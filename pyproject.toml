[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dronefleet"
version = "0.1.0"
description = "A small threaded simulation of a drone fleet working through a prioritised mission queue."
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "drones", "threads", "priority-queue", "missions"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
dronefleet = "dronefleet.control:main"

[tool.hatch.build.targets.wheel]
packages = ["dronefleet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
