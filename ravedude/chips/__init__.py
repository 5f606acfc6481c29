"""Pin and peripheral tables for ATmega and ATtiny microcontrollers."""

__all__ = [
    "atmega",
    "atmega_ports",
    "atmega_adc",
    "atmega_usart",
    "attiny",
    "attiny_adc",
]