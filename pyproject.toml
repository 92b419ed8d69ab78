[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vonatjegy"
version = "0.1.0"
description = "Train ticket office: register trains, sell seat tickets and total the takings"
requires-python = ">=3.10"
dependencies = []
keywords = ["train", "ticket", "booking", "reservation", "seats"]
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
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vonatjegy = "vonatjegy.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["vonatjegy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
