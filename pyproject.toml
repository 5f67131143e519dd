[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xutilkit"
version = "0.1.0"
description = "X11 client utilities: geometry strings, text properties, context tables, XBM bitmaps, command-line resources and named colours"
requires-python = ">=3.10"
dependencies = []
keywords = ["x11", "xlib", "geometry", "xbm", "bitmap", "colors", "resources"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xutilkit"]

[tool.pytest.ini_options]
addopts = "-ra"
