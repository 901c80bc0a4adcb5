[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vendomat"
version = "0.1.0"
description = "A small console vending machine built from pluggable temperature, selection and vending components"
requires-python = ">=3.10"
dependencies = []
keywords = ["vending", "vending-machine", "point-of-sale", "console", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vendomat = "vendomat.runner:main"

[tool.hatch.build.targets.wheel]
packages = ["vendomat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
