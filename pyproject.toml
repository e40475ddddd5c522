[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labkit"
version = "0.1.0"
description = "Small command-line utilities: word counting, a simple file archiver, fixed-width big-integer arithmetic and a life cellular automaton on 1-bit BMP images"
requires-python = ">=3.10"
dependencies = []
keywords = ["wc", "archive", "bignum", "game-of-life", "bmp"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labkit-wc = "labkit.wordcount:main"
labkit-arc = "labkit.archive:main"
labkit-uint1024 = "labkit.uint1024:main"
labkit-life = "labkit.life:main"

[tool.hatch.build.targets.wheel]
packages = ["labkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
