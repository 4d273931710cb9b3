[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "startengine"
version = "0.1.0"
description = "Backend-independent building blocks for small 2D games: vectors, sprite animations, game states, configuration files and widgets"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "2d", "widgets", "animation", "state-machine", "configuration"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["startengine"]

[tool.pytest.ini_options]
addopts = "-ra"
