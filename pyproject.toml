[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "osim"
version = "0.1.0"
description = "Classic operating-system algorithms: CPU scheduling, page replacement, memory allocation, the banker's algorithm and more"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating systems",
    "scheduling",
    "page replacement",
    "bankers algorithm",
    "memory allocation",
    "producer consumer",
    "shared memory",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
osim-sum = "osim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["osim"]

[tool.pytest.ini_options]
addopts = "-ra"
