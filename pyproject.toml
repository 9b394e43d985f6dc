[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "obadh"
version = "0.1.0"
description = "Phonetic Bengali input method engine: type Roman letters, get Bengali script"
requires-python = ">=3.10"
dependencies = []
keywords = ["bengali", "bangla", "input method", "transliteration", "phonetic", "ime"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Bengali",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
obadh = "obadh.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["obadh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
