"""Facts about the supported ATmega microcontrollers."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, Tuple

_MCUS: Tuple[str, ...] = (
    "atmega48p",
    "atmega168",
    "atmega328p",
    "atmega328pb",
    "atmega32u4",
    "atmega128a",
    "atmega1280",
    "atmega2560",
    "atmega1284p",
    "atmega8",
)


class UnknownMcuError(ValueError):
    """Raised for a microcontroller name that is not supported."""


def _check(mcu: str) -> str:
    if mcu not in _MCUS:
        raise UnknownMcuError(f"unknown microcontroller: {mcu}")
    return mcu


def supported_mcus() -> Tuple[str, ...]:
    """Names of all supported ATmega microcontrollers."""
    return _MCUS


_MEGA_PORTS = tuple(f"PORT{letter}" for letter in "ABCDEFGHJKL")

_PORTS: Dict[str, Tuple[str, ...]] = {
    "atmega48p": ("PORTB", "PORTC", "PORTD"),
    "atmega168": ("PORTB", "PORTC", "PORTD"),
    "atmega328p": ("PORTB", "PORTC", "PORTD"),
    "atmega328pb": ("PORTB", "PORTC", "PORTD", "PORTE"),
    "atmega32u4": ("PORTB", "PORTC", "PORTD", "PORTE", "PORTF"),
    "atmega128a": tuple(f"PORT{letter}" for letter in "ABCDEFG"),
    "atmega1280": _MEGA_PORTS,
    "atmega2560": _MEGA_PORTS,
    "atmega1284p": ("PORTA", "PORTB", "PORTC", "PORTD"),
    "atmega8": ("PORTB", "PORTC", "PORTD"),
}


def ports(mcu: str) -> Tuple[str, ...]:
    """The I/O ports of ``mcu`` in the order the pin set is built from."""
    return _PORTS[_check(mcu)]


_EEPROM: Dict[str, int] = {
    "atmega48p": 256,
    "atmega168": 512,
    "atmega328pb": 1024,
    "atmega328p": 1024,
    "atmega32u4": 1024,
    "atmega2560": 4096,
    "atmega1280": 4096,
    "atmega1284p": 4096,
    "atmega8": 512,
    "atmega128a": 4096,
}


def eeprom_capacity(mcu: str) -> int:
    """EEPROM size of ``mcu`` in bytes."""
    return _EEPROM[_check(mcu)]


class Timeout(enum.Enum):
    """Watchdog timeouts, valued in milliseconds."""

    Ms16 = 16
    Ms32 = 32
    Ms64 = 64
    Ms125 = 125
    Ms250 = 250
    Ms500 = 500
    Ms1000 = 1000
    Ms2000 = 2000
    Ms4000 = 4000
    Ms8000 = 8000


_TIMEOUT_ORDER = tuple(Timeout)
_OLD_WATCHDOG = frozenset({"atmega128a", "atmega8"})


def watchdog_prescaler(mcu: str, timeout: Timeout) -> int:
    """The watchdog prescaler bits (WDP3..WDP0) selecting ``timeout``.

    Chips with the older watchdog only have three prescaler bits and
    cannot reach 4 s or 8 s.
    """
    _check(mcu)
    timeout = Timeout(timeout)
    index = _TIMEOUT_ORDER.index(timeout)
    if mcu in _OLD_WATCHDOG:
        if index >= 8:
            raise ValueError(f"{timeout.name} is not available on {mcu}")
        return index
    if index >= 8:
        # WDP3 set, low bits restart at the two shortest cycle counts.
        return 0b1000 | (index - 8)
    return index


@dataclass(frozen=True)
class I2cBus:
    """A TWI peripheral and the pins it uses."""

    name: str
    peripheral: str
    sda: str
    scl: str


_I2C_D = (I2cBus("I2c", "TWI", "PD1", "PD0"),)
_I2C_C = (I2cBus("I2c", "TWI", "PC4", "PC5"),)

_I2C: Dict[str, Tuple[I2cBus, ...]] = {
    "atmega128a": _I2C_D,
    "atmega1280": _I2C_D,
    "atmega2560": _I2C_D,
    "atmega32u4": _I2C_D,
    "atmega328p": _I2C_C,
    "atmega168": _I2C_C,
    "atmega48p": _I2C_C,
    "atmega8": _I2C_C,
    "atmega328pb": (
        I2cBus("I2c0", "TWI0", "PC4", "PC5"),
        I2cBus("I2c1", "TWI1", "PE0", "PE1"),
    ),
    "atmega1284p": (I2cBus("I2c", "TWI", "PC1", "PC0"),),
}


def i2c_buses(mcu: str) -> Tuple[I2cBus, ...]:
    """The I2C buses of ``mcu``."""
    return _I2C[_check(mcu)]


@dataclass(frozen=True)
class SpiBus:
    """An SPI peripheral and the pins it uses."""

    name: str
    peripheral: str
    sclk: str
    mosi: str
    miso: str
    cs: str


_SPI_B0 = (SpiBus("Spi", "SPI", "PB1", "PB2", "PB3", "PB0"),)
_SPI_B2 = (SpiBus("Spi", "SPI", "PB5", "PB3", "PB4", "PB2"),)

_SPI: Dict[str, Tuple[SpiBus, ...]] = {
    "atmega128a": _SPI_B0,
    "atmega1280": _SPI_B0,
    "atmega2560": _SPI_B0,
    "atmega32u4": _SPI_B0,
    "atmega168": _SPI_B2,
    "atmega328p": _SPI_B2,
    "atmega48p": _SPI_B2,
    "atmega8": _SPI_B2,
    "atmega328pb": (
        SpiBus("Spi0", "SPI0", "PB5", "PB3", "PB4", "PB2"),
        SpiBus("Spi1", "SPI1", "PC1", "PE3", "PC0", "PE2"),
    ),
    "atmega1284p": (SpiBus("Spi", "SPI", "PB7", "PB5", "PB6", "PB4"),),
}


def spi_buses(mcu: str) -> Tuple[SpiBus, ...]:
    """The SPI buses of ``mcu``."""
    return _SPI[_check(mcu)]