[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blinddepths"
version = "0.1.0"
description = "A small cave game played by sonar: find your lost colleague in the dark using echo pings."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "pygame", "sonar", "echo", "cave", "horror"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
blinddepths = "blinddepths.game:main"

[tool.hatch.build.targets.wheel]
packages = ["blinddepths"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
