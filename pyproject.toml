[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taskmanager"
version = "0.1.0"
description = "A small task manager: task entities, an in-memory repository and a task service."
requires-python = ">=3.10"
dependencies = []
keywords = ["tasks", "todo", "repository", "service"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["taskmanager"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
