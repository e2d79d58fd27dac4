[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lager"
version = "0.1.0"
description = "Unidirectional data-flow building blocks: reactive state, sensors, lens and merge nodes, futures and serialization helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["reactive", "state", "cursor", "lens", "unidirectional", "future"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lager"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
