[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rpnplot"
version = "0.1.0"
description = "Plot functions of x as character graphs in the terminal, using the shunting-yard algorithm and postfix evaluation"
requires-python = ">=3.10"
dependencies = []
keywords = ["reverse polish notation", "shunting yard", "plot", "terminal", "ascii", "expression"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rpnplot = "rpnplot.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["rpnplot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
