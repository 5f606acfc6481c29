# ravedude

`ravedude` is a Python library for flashing AVR microcontroller boards
through `avrdude`. It knows a set of common boards, can find a board's USB
serial port by its vendor and product IDs, tells you when a board has to be
reset by hand, checks the installed `avrdude` version, and prints
cargo-style status messages. It also holds tables describing ATmega and
ATtiny parts.

## Installation

```
pip install .
```

Flashing needs `avrdude` installed and on your `PATH`.

## Boards

```python
from ravedude.board import get_board, board_names

print(board_names())
# ('uno', 'nano', 'nano-new', 'leonardo', 'micro', 'mega2560', 'mega1280',
#  'diecimila', 'promicro', 'trinket-pro', 'trinket', 'nano168', 'duemilanove')

board = get_board("uno")
print(board.display_name)       # Arduino Uno
print(board.avrdude_options)    # programmer, part number, baudrate, chip erase
```

`get_board` returns `None` for an unknown name.

- `Board.guess_port()` returns the path of the board's serial port, found
  with `find_port_from_vid_pid_list`. It raises `PortNotFoundError` when no
  matching port is connected or when the board cannot be detected
  automatically, and returns `None` for boards without a USB-to-serial
  interface (`trinket`, `trinket-pro`).
- `Board.needs_reset()` returns the instructions to reset the board by hand,
  or `None` if that is not needed. For the Leonardo it first tries to reset
  the board itself by opening its port at 1200 baud.

## avrdude

```python
from ravedude.avrdude import Avrdude, build_command, require_min_version
from ravedude.board import get_board

require_min_version((6, 3))   # raises AvrdudeError if avrdude is older

options = get_board("uno").avrdude_options
print(build_command(options, "/dev/ttyACM0", "firmware.elf"))
# ['avrdude', '-c', 'arduino', '-p', 'atmega328p', '-P', '/dev/ttyACM0',
#  '-e', '-D', '-U', 'flash:w:firmware.elf:e']

flasher = Avrdude.run(options, "/dev/ttyACM0", "firmware.elf")
flasher.wait()                # raises AvrdudeError if avrdude failed
```

`Avrdude.run` takes an optional `config`: the path of an avrdude
configuration file, or its contents as bytes, which are written to a
temporary file that is removed once avrdude is done. `parse_avrdude_version`
reads the `(major, minor)` version from avrdude's usage text and
`get_avrdude_version` asks the installed avrdude for it. Failures raise
`AvrdudeError`.

## Messages

`ravedude.ui` prints to standard error (or a stream you pass):
`task_message(verb, text)` with a right-aligned green verb,
`warning(text)`, and `print_error(error)`, which also lists the chain of
exceptions that caused the error. Colour is used only on a terminal and is
turned off by `NO_COLOR`.

## Chip tables

The `ravedude.chips` package describes ATmega and ATtiny parts:

- `atmega`: supported parts, ports, EEPROM sizes, watchdog prescaler bits
  for each `Timeout`, I2C and SPI buses.
- `atmega_ports`: the `Pin` type, every I/O pin of a part, `has_pin`.
- `atmega_adc`: `ReferenceVoltage`, `ClockDivider`, `AdcSettings`, ADC pins
  and internal channels.
- `atmega_usart`: USART buses and `split_ubrr` for the baud rate register.
- `attiny`: supported parts, ports, pins, EEPROM sizes, SPI buses.
- `attiny_adc`: `TinyReferenceVoltage`, reference voltages, ADC pins and
  channels.

```python
from ravedude.chips import atmega, attiny
from ravedude.chips.atmega_ports import pins

print(atmega.eeprom_capacity("atmega328p"))   # 1024
print(attiny.spi_buses("attiny88"))
print(pins("atmega32u4"))
```

Unknown part names raise `UnknownMcuError`.

## What it does not do

- There is no command-line program; everything is used from Python.
- There is no serial console for talking to a board after flashing.
- No avrdude configuration file comes with the package; avrdude uses its
  own unless you pass `config` to `Avrdude.run`.
- The chip tables have no PWM timer descriptions.

## Tests

```
pip install ".[test]"
pytest
```