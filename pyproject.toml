[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "uipneighbor"
version = "0.1.0"
description = "A fixed-size table of link-local neighbours with ageing and oldest-entry replacement"
requires-python = ">=3.10"
dependencies = []
keywords = ["networking", "neighbor", "arp", "link-layer", "tcpip"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["uipneighbor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
