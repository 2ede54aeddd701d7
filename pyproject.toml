[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dockyard-launcher"
version = "0.1.0"
description = "Download the DockyardMC server jar and launch it with the local Java runtime"
requires-python = ">=3.10"
dependencies = []
keywords = ["minecraft", "dockyard", "server", "launcher", "java"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
dockyard-launcher = "dockyard_launcher.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dockyard_launcher"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
