[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "imgremote"
version = "0.1.0"
description = "Send image-editing commands to a local image server over TCP"
requires-python = ">=3.10"
dependencies = []
keywords = ["image", "remote control", "tcp", "client", "image editing"]
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
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
imgremote = "imgremote.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["imgremote"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
