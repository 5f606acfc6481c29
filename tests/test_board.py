from pathlib import Path
from types import SimpleNamespace
from unittest import mock

import pytest
import serial

from ravedude import board
from ravedude.board import PortNotFoundError


def _port(device, vid, pid):
    return SimpleNamespace(device=device, vid=vid, pid=pid)


def test_get_board_uno():
    uno = board.get_board("uno")
    assert uno.display_name == "Arduino Uno"
    assert uno.avrdude_options.programmer == "arduino"
    assert uno.avrdude_options.partno == "atmega328p"
    assert uno.avrdude_options.do_chip_erase is True


def test_unknown_board():
    assert board.get_board("esp32") is None


def test_board_names_resolve():
    names = board.board_names()
    assert len(names) == 13
    assert names[0] == "uno" and names[-1] == "duemilanove"
    assert all(board.get_board(n).name == n for n in names)


def test_mega2560_options():
    opts = board.get_board("mega2560").avrdude_options
    assert (opts.programmer, opts.partno, opts.baudrate) == ("wiring", "atmega2560", 115200)


def test_find_port_matches_vid_pid():
    ports = [_port("/dev/ttyS0", None, None), _port("/dev/ttyACM0", 0x2341, 0x0043)]
    with mock.patch.object(board.list_ports, "comports", return_value=ports):
        assert board.get_board("uno").guess_port() == Path("/dev/ttyACM0")


def test_find_port_no_match():
    ports = [_port("/dev/ttyACM0", 0x1234, 0x5678)]
    with mock.patch.object(board.list_ports, "comports", return_value=ports):
        with pytest.raises(PortNotFoundError, match="Serial port not found."):
            board.find_port_from_vid_pid_list([(0x2341, 0x0043)])


def test_nano_cannot_guess():
    with pytest.raises(PortNotFoundError, match="Not able to guess port"):
        board.get_board("nano").guess_port()


def test_mega1280_cannot_guess():
    with pytest.raises(PortNotFoundError, match="Unable to guess port."):
        board.get_board("mega1280").guess_port()


def test_trinket_has_no_serial():
    assert board.get_board("trinket").guess_port() is None
    assert board.get_board("trinket-pro").guess_port() is None


def test_reset_messages():
    assert board.get_board("uno").needs_reset() is None
    assert board.get_board("micro").needs_reset() == (
        "Reset the board by pressing the reset button once."
    )
    assert "**twice**" in board.get_board("promicro").needs_reset()


def test_leonardo_touch_reset_succeeds():
    ports = [_port("/dev/ttyACM1", 0x2341, 0x8036)]
    with mock.patch.object(board.list_ports, "comports", return_value=ports), \
            mock.patch.object(board.serial, "Serial") as ser, \
            mock.patch.object(board.time, "sleep") as sleep:
        assert board.get_board("leonardo").needs_reset() is None
    ser.assert_called_once_with("/dev/ttyACM1", 1200)
    sleep.assert_called_once_with(1)


def test_leonardo_touch_reset_fails_to_open():
    ports = [_port("/dev/ttyACM1", 0x2341, 0x8036)]
    with mock.patch.object(board.list_ports, "comports", return_value=ports), \
            mock.patch.object(board.serial, "Serial",
                              side_effect=serial.SerialException("busy")):
        assert board.get_board("leonardo").needs_reset() == (
            "Reset the board by pressing the reset button once."
        )


def test_leonardo_without_port_asks_for_reset():
    with mock.patch.object(board.list_ports, "comports", return_value=[]):
        assert board.get_board("leonardo").needs_reset() == (
            "Reset the board by pressing the reset button once."
        )