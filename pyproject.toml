[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "picogb"
version = "0.1.0"
description = "Game Boy colour palettes, bitmap font, ROM selection and save handling for a handheld emulator front end"
requires-python = ">=3.10"
dependencies = []
keywords = ["game boy", "emulator", "palette", "rgb565", "font", "rom selector"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["picogb"]

[tool.pytest.ini_options]
addopts = "-ra"
