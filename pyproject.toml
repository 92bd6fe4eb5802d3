[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "danobj"
version = "0.1.0"
description = "A small dynamic object model with reference counting and a virtual machine that marks reachable objects"
requires-python = ">=3.10"
dependencies = []
keywords = ["object model", "interpreter", "reference counting", "garbage collection", "virtual machine"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["danobj"]

[tool.pytest.ini_options]
addopts = "-ra"
