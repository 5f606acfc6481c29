"""USART peripherals of the supported ATmega microcontrollers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .atmega import _check


@dataclass(frozen=True)
class UsartBus:
    """A USART peripheral and its receive and transmit pins.

    ``register_suffix`` is the number appended to the register names, or
    None where the registers carry no number.  The bus always runs 8N1.
    """

    name: str
    peripheral: str
    register_suffix: Optional[int]
    rx: str
    tx: str


def _bus(number: int, rx: str, tx: str) -> UsartBus:
    return UsartBus(f"Usart{number}", f"USART{number}", number, rx, tx)


_USART0_D = _bus(0, "PD0", "PD1")
_USART0_E = _bus(0, "PE0", "PE1")
_USART1_D = _bus(1, "PD2", "PD3")

_USARTS: Dict[str, Tuple[UsartBus, ...]] = {
    "atmega48p": (),
    "atmega168": (_USART0_D,),
    "atmega328p": (_USART0_D,),
    "atmega328pb": (_USART0_D, _bus(1, "PB4", "PB3")),
    "atmega32u4": (_USART1_D,),
    "atmega128a": (_USART0_E, _USART1_D),
    "atmega1280": (_USART0_E, _USART1_D, _bus(2, "PH0", "PH1"), _bus(3, "PJ0", "PJ1")),
    "atmega2560": (_USART0_E, _USART1_D, _bus(2, "PH0", "PH1"), _bus(3, "PJ0", "PJ1")),
    "atmega1284p": (_USART0_D, _USART1_D),
    "atmega8": (UsartBus("Usart0", "USART", None, "PD0", "PD1"),),
}


def usart_buses(mcu: str) -> Tuple[UsartBus, ...]:
    """The USART buses of ``mcu``; empty if it has none supported."""
    return _USARTS[_check(mcu)]


def split_ubrr(mcu: str, ubrr: int) -> Tuple[int, int]:
    """Split a baud rate register value into its (high, low) bytes.

    On the ATmega8 UBRRH shares its address with UCSRC and only its low
    four bits hold the rate; the top bit must stay clear to select UBRRH.
    """
    if not usart_buses(mcu):
        raise ValueError(f"{mcu} has no supported USART")
    if not 0 <= ubrr <= 0xFFFF:
        raise ValueError(f"UBRR value out of range: {ubrr}")
    low = ubrr & 0xFF
    if mcu == "atmega8":
        return (ubrr >> 8) & 0x0F, low
    return (ubrr >> 8) & 0xFF, low