[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "turf"
version = "0.1.0"
description = "Process listing, Ethernet frame inspection helpers and small utilities"
requires-python = ">=3.10"
dependencies = ["psutil"]
keywords = ["process", "monitoring", "packets", "ethernet", "ipv4"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
turf = "turf.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["turf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
