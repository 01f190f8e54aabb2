[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gbemu"
version = "0.1.0"
description = "Game Boy cartridge header decoding and CPU register model"
requires-python = ">=3.10"
dependencies = []
keywords = ["gameboy", "emulator", "rom", "cartridge", "registers"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
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
gbemu = "gbemu.emu:main"

[tool.hatch.build.targets.wheel]
packages = ["gbemu"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
