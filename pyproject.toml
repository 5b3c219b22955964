[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sjisutf"
version = "0.1.0"
description = "Decoding of Shift_JIS and conversions between UTF-8, UTF-16 and UTF-32 code sequences"
requires-python = ">=3.10"
dependencies = []
keywords = ["shift_jis", "sjis", "utf-8", "utf-16", "utf-32", "unicode", "encoding", "japanese"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: Japanese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Internationalization",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sjisutf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 120
target-version = "py310"
