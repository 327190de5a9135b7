[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tasktrack"
version = "3.0.0"
description = "Command-line task tracker with priorities, due dates, filtering, sorting and an interactive mode"
requires-python = ">=3.10"
dependencies = []
keywords = ["tasks", "todo", "cli", "productivity", "scheduling"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
task_tracker = "tasktrack.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tasktrack"]

[tool.pytest.ini_options]
addopts = "-ra"
