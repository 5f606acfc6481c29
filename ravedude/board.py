"""Known boards and how to find and reset them."""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Tuple

import serial
from serial.tools import list_ports

from .avrdude import AvrdudeOptions

_PRESS_ONCE = "Reset the board by pressing the reset button once."
_PRESS_TWICE = "Reset the board by quickly pressing the reset button **twice**."
_CANNOT_GUESS = "Not able to guess port"


class PortNotFoundError(Exception):
    """Raised when no serial port for a board can be found."""


def find_port_from_vid_pid_list(ids: Sequence[Tuple[int, int]]) -> Path:
    """Return the first USB serial port whose VID:PID is in ``ids``."""
    wanted = set(ids)
    for info in list_ports.comports():
        if info.vid is None or info.pid is None:
            continue
        if (info.vid, info.pid) in wanted:
            return Path(info.device)
    raise PortNotFoundError("Serial port not found.")


@dataclass(frozen=True)
class Board:
    """A board that can be flashed."""

    name: str
    display_name: str
    avrdude_options: AvrdudeOptions
    reset_message: Optional[str] = None
    usb_ids: Tuple[Tuple[int, int], ...] = ()
    has_serial: bool = True
    guess_error: str = _CANNOT_GUESS
    touch_reset: bool = False

    def guess_port(self) -> Optional[Path]:
        """Find the board's serial port; None if it has no USB-to-serial."""
        if not self.has_serial:
            return None
        if not self.usb_ids:
            raise PortNotFoundError(self.guess_error)
        return find_port_from_vid_pid_list(self.usb_ids)

    def needs_reset(self) -> Optional[str]:
        """Return reset instructions, or None if no manual reset is needed."""
        if not self.touch_reset:
            return self.reset_message
        try:
            port = self.guess_port()
        except PortNotFoundError:
            return self.reset_message
        if port is None:
            return self.reset_message
        try:
            # Opening the port at 1200 baud makes the bootloader start.
            with serial.Serial(str(port), 1200):
                pass
        except (serial.SerialException, OSError):
            return self.reset_message
        time.sleep(1)
        return None


_BOARDS = {
    board.name: board
    for board in (
        Board(
            "uno", "Arduino Uno",
            AvrdudeOptions("arduino", "atmega328p", None, True),
            usb_ids=((0x2341, 0x0043), (0x2341, 0x0001), (0x2A03, 0x0043), (0x2341, 0x0243)),
        ),
        Board(
            "nano", "Arduino Nano",
            AvrdudeOptions("arduino", "atmega328p", 57600, True),
        ),
        Board(
            "nano-new", "Arduino Nano (New Bootloader)",
            AvrdudeOptions("arduino", "atmega328p", 115200, True),
        ),
        Board(
            "leonardo", "Arduino Leonardo",
            AvrdudeOptions("avr109", "atmega32u4", None, True),
            reset_message=_PRESS_ONCE,
            usb_ids=((0x2341, 0x0036), (0x2341, 0x8036), (0x2A03, 0x0036), (0x2A03, 0x8036)),
            touch_reset=True,
        ),
        Board(
            "micro", "Arduino Micro",
            AvrdudeOptions("avr109", "atmega32u4", 115200, True),
            reset_message=_PRESS_ONCE,
            usb_ids=(
                (0x2341, 0x0037), (0x2341, 0x8037), (0x2A03, 0x0037),
                (0x2A03, 0x8037), (0x2341, 0x0237), (0x2341, 0x8237),
            ),
        ),
        Board(
            "mega2560", "Arduino Mega 2560",
            AvrdudeOptions("wiring", "atmega2560", 115200, False),
            usb_ids=(
                (0x2341, 0x0010), (0x2341, 0x0042), (0x2A03, 0x0010),
                (0x2A03, 0x0042), (0x2341, 0x0210), (0x2341, 0x0242),
            ),
        ),
        Board(
            # The generic 0403:6001 serial interface is too common to detect.
            "mega1280", "Arduino Mega 1280",
            AvrdudeOptions("arduino", "atmega1280", 57600, False),
            guess_error="Unable to guess port.",
        ),
        Board(
            "diecimila", "Arduino Diecimila",
            AvrdudeOptions("arduino", "atmega168", 19200, False),
        ),
        Board(
            "promicro", "SparkFun Pro Micro",
            AvrdudeOptions("avr109", "atmega32u4", None, True),
            reset_message=_PRESS_TWICE,
            usb_ids=((0x1B4F, 0x9205), (0x1B4F, 0x9206), (0x1B4F, 0x9203), (0x1B4F, 0x9204)),
        ),
        Board(
            "trinket-pro", "Trinket Pro",
            AvrdudeOptions("usbtiny", "atmega328p", None, False),
            reset_message=_PRESS_ONCE,
            has_serial=False,
        ),
        Board(
            "trinket", "Trinket",
            AvrdudeOptions("usbtiny", "attiny85", None, True),
            reset_message=_PRESS_ONCE,
            has_serial=False,
        ),
        Board(
            "nano168", "Nano Clone (ATmega168)",
            AvrdudeOptions("arduino", "atmega168", 19200, False),
        ),
        Board(
            "duemilanove", "Arduino Duemilanove",
            AvrdudeOptions("arduino", "atmega328p", 57600, True),
        ),
    )
}


def get_board(name: str) -> Optional[Board]:
    """Look up a board by its identifier."""
    return _BOARDS.get(name)


def board_names() -> Tuple[str, ...]:
    """All known board identifiers, in documented order."""
    return tuple(_BOARDS)