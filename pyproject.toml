[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vortexleds"
version = "0.1.0"
description = "Colour types, colorsets and LED state handling for small LED light-show devices"
requires-python = ">=3.10"
dependencies = []
keywords = ["led", "color", "hsv", "rgb", "colorset", "lightshow"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vortexleds"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
