"""The general purpose I/O pins of the supported ATmega microcontrollers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

from .atmega import _check

_PIN_RE = re.compile(r"^P([A-Z])([0-7])$")


@dataclass(frozen=True, order=True)
class Pin:
    """A single pin, identified by its port letter and bit number."""

    port: str
    bit: int

    def __post_init__(self) -> None:
        if len(self.port) != 1 or not self.port.isalpha() or not self.port.isupper():
            raise ValueError(f"invalid port letter: {self.port!r}")
        if not 0 <= self.bit <= 7:
            raise ValueError(f"pin bit out of range: {self.bit}")

    @property
    def name(self) -> str:
        """The pin's name, e.g. ``PB5``."""
        return f"P{self.port}{self.bit}"

    @property
    def field(self) -> str:
        """The lower-case name used for the pin in a pin set, e.g. ``pb5``."""
        return self.name.lower()

    @property
    def port_name(self) -> str:
        """The port register the pin belongs to, e.g. ``PORTB``."""
        return f"PORT{self.port}"

    @classmethod
    def parse(cls, name: str) -> "Pin":
        """Parse a pin name such as ``PB5`` or ``pb5``."""
        match = _PIN_RE.match(name.strip().upper())
        if match is None:
            raise ValueError(f"invalid pin name: {name!r}")
        return cls(match.group(1), int(match.group(2)))

    def __str__(self) -> str:
        return self.name


def _port(letter: str, bits: Iterable[int] = range(8)) -> Tuple[Pin, ...]:
    return tuple(Pin(letter, bit) for bit in bits)


_TRADITIONAL = _port("B") + _port("C", range(7)) + _port("D")
_ATMEGA128A = (
    _port("A") + _port("B") + _port("C") + _port("D") + _port("E") + _port("F")
    + _port("G", range(6))
)
_MEGA = _ATMEGA128A + _port("H") + _port("J") + _port("K") + _port("L")

_PINS: Dict[str, Tuple[Pin, ...]] = {
    "atmega48p": _TRADITIONAL,
    "atmega168": _TRADITIONAL,
    "atmega328p": _TRADITIONAL,
    "atmega328pb": _TRADITIONAL + _port("E", range(4)),
    "atmega32u4": (
        _port("B")
        + _port("C", (6, 7))
        + _port("D")
        + _port("E", (2, 6))
        + _port("F", (0, 1, 4, 5, 6, 7))
    ),
    "atmega128a": _ATMEGA128A,
    "atmega1280": _MEGA,
    "atmega2560": _MEGA,
    "atmega1284p": _port("A") + _port("B") + _port("C") + _port("D"),
    "atmega8": _TRADITIONAL,
}


def pins(mcu: str) -> Tuple[Pin, ...]:
    """All I/O pins of ``mcu``, in port and bit order."""
    return _PINS[_check(mcu)]


def has_pin(mcu: str, name: str) -> bool:
    """Whether ``mcu`` has the pin called ``name``."""
    try:
        pin = Pin.parse(name)
    except ValueError:
        return False
    return pin in pins(mcu)