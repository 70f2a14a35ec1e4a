[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kata"
version = "0.1.0"
description = "Small classic algorithms, data structures and command-line exercises"
requires-python = ">=3.10"
keywords = [
    "algorithms",
    "sorting",
    "searching",
    "data-structures",
    "exercises",
    "rpn",
    "caesar-cipher",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
    "Typing :: Typed",
]
dependencies = [
    "requests",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
    "responses",
]

[project.scripts]
kata-sort = "kata.sorting:main"
kata-search = "kata.searching:main"
kata-cumsum = "kata.cumsum:main"
kata-numbers = "kata.numbers:main"
kata-caesar = "kata.caesar:main"
kata-janken = "kata.janken:main"
kata-calendar = "kata.monthcal:main"
kata-freq = "kata.frequency:main"
kata-grep = "kata.grep:main"
kata-async = "kata.asyncdemo:main"
kata-mkreadme = "kata.readme:main"
kata-rpn = "kata.rpn:main"
kata-numberfile = "kata.numberfile:main"
kata-stocks = "kata.stocks:main"
kata-webserver = "kata.webserver:main"
kata-hello = "kata.hello_routes:main"
kata-forecast = "kata.forecast:main"
kata-checkerboard = "kata.checkerboard:main"
kata-ls = "kata.listing:main"

[tool.hatch.build.targets.wheel]
packages = ["kata"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
