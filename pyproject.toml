[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "csstats"
version = "0.1.0"
description = "Counter-Strike match statistics, FACEIT API access and map frame rendering"
requires-python = ">=3.10"
keywords = ["counter-strike", "cs2", "faceit", "statistics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
]
dependencies = [
    "requests",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["csstats"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
