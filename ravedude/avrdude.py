"""Running avrdude and checking its version."""

from __future__ import annotations

import itertools
import os
import string
import subprocess
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

PathLike = Union[str, "os.PathLike[str]"]


class AvrdudeError(Exception):
    """Raised when avrdude cannot be found, started or fails."""


@dataclass(frozen=True)
class AvrdudeOptions:
    """How avrdude talks to a board."""

    programmer: str
    partno: str
    baudrate: Optional[int] = None
    do_chip_erase: bool = False


def _parse_u8(text: str) -> int:
    if not text or not text.isdigit() or int(text) > 255:
        raise AvrdudeError("failed to derive version number from avrdude")
    return int(text)


def parse_avrdude_version(text: str) -> Tuple[int, int]:
    """Extract (major, minor) from avrdude's usage output."""
    tail = text.split("version")[-1].strip()
    allowed = set(string.digits) | {"."}
    number = "".join(itertools.takewhile(lambda c: c in allowed, tail))
    parts = number.split(".")
    if len(parts) < 2:
        raise AvrdudeError("failed to derive version number from avrdude")
    return _parse_u8(parts[0]), _parse_u8(parts[1])


def get_avrdude_version() -> Tuple[int, int]:
    """Ask the installed avrdude for its version."""
    result = subprocess.run(["avrdude", "-?"], capture_output=True, check=False)
    try:
        stderr = result.stderr.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise AvrdudeError("avrdude printed output that is not UTF-8") from exc
    return parse_avrdude_version(stderr)


def require_min_version(required: Sequence[int]) -> Tuple[int, int]:
    """Raise unless the installed avrdude is at least ``required``."""
    req_major, req_minor = required
    try:
        major, minor = get_avrdude_version()
    except (OSError, AvrdudeError) as exc:
        raise AvrdudeError("Failed reading avrdude version information.") from exc
    if (major, minor) < (req_major, req_minor):
        raise AvrdudeError(
            "Avrdude does not meet minimum version requirements. "
            f"v{major}.{minor} was found while v{req_major}.{req_minor} "
            "or greater is required.\n"
            "You may find a more suitable version on the avrdude release page."
        )
    return major, minor


def build_command(
    options: AvrdudeOptions,
    port: Optional[PathLike],
    binary: PathLike,
    config: Optional[PathLike] = None,
) -> list:
    """Build the avrdude argument list for flashing ``binary``."""
    command = ["avrdude"]
    if config is not None:
        command += ["-C", os.fspath(config)]
    command += ["-c", options.programmer, "-p", options.partno]
    if port is not None:
        command += ["-P", os.fspath(port)]
    if options.baudrate is not None:
        command += ["-b", str(options.baudrate)]
    if options.do_chip_erase:
        command.append("-e")
    command += ["-D", "-U", f"flash:w:{os.fspath(binary)}:e"]
    return command


class Avrdude:
    """A running avrdude flashing process."""

    def __init__(self, process: subprocess.Popen, temp_config: Optional[Path] = None):
        self.process = process
        self._temp_config = temp_config

    @property
    def config_path(self) -> Optional[Path]:
        return self._temp_config

    @classmethod
    def run(
        cls,
        options: AvrdudeOptions,
        port: Optional[PathLike],
        binary: PathLike,
        config: Union[bytes, PathLike, None] = None,
    ) -> "Avrdude":
        """Start avrdude.

        ``config`` may be the contents of a configuration file (bytes), which
        is written to a temporary file, or the path of an existing one.
        """
        temp_config: Optional[Path] = None
        config_path: Optional[Path] = None
        if isinstance(config, bytes):
            fd, name = tempfile.mkstemp(prefix=".avrdude-", suffix=".conf")
            temp_config = config_path = Path(name)
            try:
                with os.fdopen(fd, "wb") as fh:
                    fh.write(config)
            except OSError as exc:
                temp_config.unlink(missing_ok=True)
                raise AvrdudeError("could not write avrdude.conf") from exc
        elif config is not None:
            config_path = Path(config)

        command = build_command(options, port, binary, config_path)
        try:
            process = subprocess.Popen(command)
        except OSError as exc:
            if temp_config is not None:
                temp_config.unlink(missing_ok=True)
            raise AvrdudeError("failed starting avrdude") from exc
        return cls(process, temp_config)

    def _cleanup(self) -> None:
        if self._temp_config is not None:
            self._temp_config.unlink(missing_ok=True)
            self._temp_config = None

    def wait(self) -> None:
        """Wait for avrdude to finish; raise if it failed."""
        try:
            code = self.process.wait()
        finally:
            self._cleanup()
        if code != 0:
            raise AvrdudeError("avrdude failed")

    def __enter__(self) -> "Avrdude":
        return self

    def __exit__(self, *exc_info) -> None:
        self._cleanup()