"""Analog-to-digital converter facts for the supported ATtiny microcontrollers."""

from __future__ import annotations

import enum
from typing import Dict, Tuple

from .atmega_adc import AdcPin, MuxId
from .atmega_ports import Pin
from .attiny import _check


class TinyReferenceVoltage(enum.Enum):
    """Voltage reference of the ATtiny ADC."""

    Aref = "aref"
    AVcc = "avcc"
    Internal1_1 = "internal1_1"
    Internal2_56 = "internal2_56"


_ALL_REFS = tuple(TinyReferenceVoltage)

_REFERENCES: Dict[str, Tuple[TinyReferenceVoltage, ...]] = {
    "attiny85": _ALL_REFS,
    "attiny167": _ALL_REFS,
    "attiny88": (TinyReferenceVoltage.AVcc, TinyReferenceVoltage.Internal1_1),
}


def _require_adc(mcu: str) -> str:
    _check(mcu)
    if mcu not in _REFERENCES:
        raise ValueError(f"{mcu} has no supported ADC")
    return mcu


def reference_voltages(mcu: str) -> Tuple[TinyReferenceVoltage, ...]:
    """The reference voltages the ADC of ``mcu`` can use."""
    return _REFERENCES[_require_adc(mcu)]


def _pins(entries: Tuple[Tuple[str, int, int], ...]) -> Tuple[AdcPin, ...]:
    return tuple(
        AdcPin(Pin.parse(name), f"ADC{channel}", f"didr{register}::adc{channel}d")
        for name, channel, register in entries
    )


_PINS: Dict[str, Tuple[AdcPin, ...]] = {
    "attiny85": _pins(
        (("PB5", 0, 0), ("PB2", 1, 0), ("PB4", 2, 0), ("PB3", 3, 0))
    ),
    "attiny88": _pins(
        (
            ("PC0", 0, 0), ("PC1", 1, 0), ("PC2", 2, 0), ("PC3", 3, 0),
            ("PC4", 4, 0), ("PC5", 5, 0), ("PA0", 6, 0), ("PA1", 7, 0),
        )
    ),
    "attiny167": _pins(
        (
            ("PA0", 0, 0), ("PA1", 1, 0), ("PA2", 2, 0), ("PA3", 3, 0),
            ("PA4", 4, 0), ("PA5", 5, 0), ("PA6", 6, 0), ("PA7", 7, 0),
            ("PB5", 8, 1), ("PB6", 9, 1), ("PB7", 10, 1),
        )
    ),
}

_BASE_CHANNELS: Dict[str, MuxId] = {
    "Vbg": "ADC_VBG",
    "Gnd": "ADC_GND",
    "Temperature": "TEMPSENS",
}

_CHANNELS: Dict[str, Dict[str, MuxId]] = {
    "attiny85": _BASE_CHANNELS,
    "attiny88": _BASE_CHANNELS,
    "attiny167": {"AVcc_4": "ADC_AVCC_4", **_BASE_CHANNELS},
}


def adc_pins(mcu: str) -> Tuple[AdcPin, ...]:
    """The pins of ``mcu`` that can be sampled by the ADC."""
    return _PINS[_require_adc(mcu)]


def adc_channels(mcu: str) -> Dict[str, MuxId]:
    """ADC channels of ``mcu`` that are not tied to an I/O pin."""
    return dict(_CHANNELS[_require_adc(mcu)])