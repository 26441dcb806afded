[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bbsctl"
version = "1.0.0"
description = "Command line interface to manage a BigBlueSwarm load balancer cluster"
requires-python = ">=3.10"
keywords = ["bigblueswarm", "bigbluebutton", "cli", "load-balancer", "admin"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
dependencies = [
    "pyyaml>=6.0",
    "requests>=2.28",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[project.scripts]
bbsctl = "bbsctl.root:main"

[tool.hatch.build.targets.wheel]
packages = ["bbsctl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
