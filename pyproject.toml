[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ravedude"
version = "0.1.0"
description = "Drive avrdude to flash AVR boards, find their serial ports, and look up ATmega/ATtiny pin and peripheral tables"
requires-python = ">=3.10"
keywords = ["avr", "avrdude", "arduino", "atmega", "attiny", "flashing", "serial"]
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
    "Topic :: Software Development :: Embedded Systems",
]
dependencies = [
    "pyserial",
    "termcolor",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ravedude"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
