"""Facts about the supported ATtiny microcontrollers."""

from __future__ import annotations

from typing import Dict, Iterable, Tuple

from .atmega import SpiBus, UnknownMcuError
from .atmega_ports import Pin

_MCUS: Tuple[str, ...] = (
    "attiny84",
    "attiny85",
    "attiny88",
    "attiny167",
    "attiny2313",
)


def _check(mcu: str) -> str:
    if mcu not in _MCUS:
        raise UnknownMcuError(f"unknown microcontroller: {mcu}")
    return mcu


def supported_mcus() -> Tuple[str, ...]:
    """Names of all supported ATtiny microcontrollers."""
    return _MCUS


_PORTS: Dict[str, Tuple[str, ...]] = {
    "attiny84": ("PORTA", "PORTB"),
    "attiny85": ("PORTB",),
    "attiny88": ("PORTA", "PORTB", "PORTC", "PORTD"),
    "attiny167": ("PORTA", "PORTB"),
    "attiny2313": ("PORTA", "PORTB", "PORTD"),
}


def ports(mcu: str) -> Tuple[str, ...]:
    """The I/O ports of ``mcu`` in the order the pin set is built from."""
    return _PORTS[_check(mcu)]


def _port(letter: str, bits: Iterable[int] = range(8)) -> Tuple[Pin, ...]:
    return tuple(Pin(letter, bit) for bit in bits)


_PINS: Dict[str, Tuple[Pin, ...]] = {
    "attiny84": _port("A") + _port("B", range(4)),
    "attiny85": _port("B", range(6)),
    "attiny88": _port("A", range(4)) + _port("B") + _port("C") + _port("D"),
    "attiny167": _port("A") + _port("B"),
    "attiny2313": _port("A", range(3)) + _port("B") + _port("D", range(7)),
}


def pins(mcu: str) -> Tuple[Pin, ...]:
    """All I/O pins of ``mcu``, in port and bit order."""
    return _PINS[_check(mcu)]


_EEPROM: Dict[str, int] = {
    "attiny2313": 128,
    "attiny167": 512,
    "attiny85": 512,
    "attiny88": 64,
}


def eeprom_capacity(mcu: str) -> int:
    """EEPROM size of ``mcu`` in bytes.

    Raises ``ValueError`` for chips whose EEPROM is not supported.
    """
    _check(mcu)
    try:
        return _EEPROM[mcu]
    except KeyError:
        raise ValueError(f"EEPROM is not supported on {mcu}") from None


_SPI: Dict[str, Tuple[SpiBus, ...]] = {
    "attiny88": (SpiBus("Spi", "SPI", "PB5", "PB3", "PB4", "PB2"),),
    "attiny167": (SpiBus("Spi", "SPI", "PA5", "PA4", "PA2", "PA6"),),
}


def spi_buses(mcu: str) -> Tuple[SpiBus, ...]:
    """The SPI buses of ``mcu``; empty if it has none supported."""
    return _SPI.get(_check(mcu), ())