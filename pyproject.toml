[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gbemu"
version = "0.1.0"
description = "A small Game Boy emulator core: cartridge header inspection and an early LR35902 CPU"
requires-python = ">=3.10"
dependencies = []
keywords = ["gameboy", "emulator", "lr35902", "rom", "cartridge"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gbemu = "gbemu.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gbemu"]

[tool.pytest.ini_options]
addopts = "-ra"
