[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bmppalette"
version = "0.1.0"
description = "Find the dominant colours of a BMP image and draw them as an SVG pie chart over a small TCP client/server pair"
requires-python = ">=3.10"
dependencies = []
keywords = ["bmp", "palette", "colors", "svg", "pie-chart", "socket"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bmppalette-client = "bmppalette.client:main"
bmppalette-server = "bmppalette.server:main"

[tool.hatch.build.targets.wheel]
packages = ["bmppalette"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
