[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parcelpost"
version = "0.1.0"
description = "A console post-office desk: send, track, deliver and hand over parcels between offices"
requires-python = ">=3.10"
dependencies = []
keywords = ["post", "parcel", "delivery", "tracking", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Russian",
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
parcelpost = "parcelpost.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["parcelpost"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
