[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dockyard"
version = "0.1.0"
description = "Domain types for Docker container management: typed errors, validated container IDs and container status rules"
requires-python = ">=3.10"
dependencies = []
keywords = ["docker", "containers", "container-status", "errors"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dockyard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
