"""Analog-to-digital converter facts for the supported ATmega microcontrollers."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, NamedTuple, Optional, Tuple, Union

from .atmega import _check
from .atmega_ports import Pin

MuxId = Union[str, int]


class ReferenceVoltage(enum.Enum):
    """Voltage reference of the ADC.

    The internal references must not be used while an external voltage
    is applied to the AREF pin.
    """

    Aref = "aref"
    AVcc = "avcc"
    Internal = "internal"


class ClockDivider(enum.Enum):
    """Prescaler between the system clock and the ADC clock."""

    Factor2 = 2
    Factor4 = 4
    Factor8 = 8
    Factor16 = 16
    Factor32 = 32
    Factor64 = 64
    Factor128 = 128


@dataclass(frozen=True)
class AdcSettings:
    """Configuration for the ADC peripheral."""

    clock_divider: ClockDivider = ClockDivider.Factor128
    ref_voltage: ReferenceVoltage = ReferenceVoltage.AVcc

    def __post_init__(self) -> None:
        object.__setattr__(self, "clock_divider", ClockDivider(self.clock_divider))
        object.__setattr__(self, "ref_voltage", ReferenceVoltage(self.ref_voltage))


class AdcPin(NamedTuple):
    """A pin wired to the ADC multiplexer.

    ``mux`` is the multiplexer selection: a symbolic channel name on chips
    whose register description names the channels, a raw 6-bit value on
    the others.  ``didr`` names the digital-input-disable bit, if any.
    """

    pin: Pin
    mux: MuxId
    didr: Optional[str]


def _named(pins: Tuple[str, ...], didr: bool = True) -> Tuple[AdcPin, ...]:
    return tuple(
        AdcPin(
            Pin.parse(name),
            f"ADC{index}",
            f"didr0::adc{index}d" if didr else None,
        )
        for index, name in enumerate(pins)
    )


def _raw(entries: Tuple[Tuple[str, int], ...]) -> Tuple[AdcPin, ...]:
    result = []
    for name, mux in entries:
        channel = (mux & 0b111) | (8 if mux & 0b100000 else 0)
        register = "didr2" if channel >= 8 else "didr0"
        result.append(AdcPin(Pin.parse(name), mux, f"{register}::adc{channel}d"))
    return tuple(result)


_PORT_C6 = _named(("PC0", "PC1", "PC2", "PC3", "PC4", "PC5"))

_MEGA_PINS = _raw(
    (
        ("PF0", 0b000000),
        ("PF1", 0b000001),
        ("PF2", 0b000010),
        ("PF3", 0b000011),
        ("PF4", 0b000100),
        ("PF5", 0b000101),
        ("PF6", 0b000110),
        ("PF7", 0b000111),
        ("PK0", 0b100000),
        ("PK1", 0b100001),
        ("PK2", 0b100010),
        ("PK3", 0b100011),
        ("PK4", 0b100100),
        ("PK5", 0b100101),
        ("PK6", 0b100110),
        ("PK7", 0b100111),
    )
)

_PINS: Dict[str, Tuple[AdcPin, ...]] = {
    "atmega168": _PORT_C6,
    "atmega328p": _PORT_C6,
    "atmega328pb": _PORT_C6,
    "atmega48p": _PORT_C6,
    "atmega32u4": _raw(
        (
            ("PF0", 0b000000),
            ("PF1", 0b000001),
            ("PF4", 0b000100),
            ("PF5", 0b000101),
            ("PF6", 0b000110),
            ("PF7", 0b000111),
            ("PD4", 0b100000),
            ("PD6", 0b100001),
            ("PD7", 0b100010),
            ("PB4", 0b100011),
            ("PB5", 0b100100),
            ("PB6", 0b100101),
        )
    ),
    "atmega128a": _named(
        ("PF0", "PF1", "PF2", "PF3", "PF4", "PF5", "PF6", "PF7"), didr=False
    ),
    "atmega2560": _MEGA_PINS,
    "atmega1280": _MEGA_PINS,
    "atmega1284p": _named(("PA0", "PA1", "PA2", "PA3", "PA4", "PA5")),
    "atmega8": _named(("PC0", "PC1", "PC2", "PC3", "PC4", "PC5"), didr=False),
}

_NAMED_BASE = {"Vbg": "ADC_VBG", "Gnd": "ADC_GND"}
_EXTRA = {"ADC6": "ADC6", "ADC7": "ADC7"}
_RAW_MEGA = {"Vbg": 0b011110, "Gnd": 0b011111}

# (channels always present, channels added with the extra ADC inputs)
_CHANNELS: Dict[str, Tuple[Dict[str, MuxId], Dict[str, MuxId]]] = {
    "atmega168": (_NAMED_BASE, _EXTRA),
    "atmega328p": ({**_NAMED_BASE, "Temperature": "TEMPSENS"}, _EXTRA),
    "atmega328pb": ({**_NAMED_BASE, "Temperature": "TEMPSENS"}, _EXTRA),
    "atmega48p": ({**_NAMED_BASE, "Temperature": "TEMPSENS"}, _EXTRA),
    "atmega32u4": ({**_RAW_MEGA, "Temperature": 0b100111}, {}),
    "atmega128a": (_NAMED_BASE, {}),
    "atmega2560": (_RAW_MEGA, {}),
    "atmega1280": (_RAW_MEGA, {}),
    "atmega1284p": (_NAMED_BASE, _EXTRA),
    "atmega8": (_NAMED_BASE, _EXTRA),
}


def adc_pins(mcu: str) -> Tuple[AdcPin, ...]:
    """The pins of ``mcu`` that can be sampled by the ADC."""
    return _PINS[_check(mcu)]


def adc_channels(mcu: str, extra_adc: bool = False) -> Dict[str, MuxId]:
    """ADC channels of ``mcu`` that are not tied to an I/O pin.

    ``extra_adc`` adds the ADC6/ADC7 inputs found only on some packages.
    Channel names map to their multiplexer selection.
    """
    base, extra = _CHANNELS[_check(mcu)]
    channels: Dict[str, MuxId] = {}
    if extra_adc:
        channels.update(extra)
    channels.update(base)
    return channels