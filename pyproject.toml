[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "espterm"
version = "2.4.0"
description = "Serial terminal bridge core: UTF-8 glyph cache, byte ring buffers, UART line settings and SGR codes"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "serial", "uart", "vt100", "utf-8", "ring buffer", "sgr"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals :: Serial",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["espterm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
