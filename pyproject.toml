[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termodoro"
version = "0.1.0"
description = "A pomodoro timer for the terminal"
requires-python = ">=3.11"
keywords = ["pomodoro", "timer", "terminal", "tui", "productivity"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]
dependencies = [
    "blessed",
    "platformdirs",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
termodoro = "termodoro.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["termodoro"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
