"""Diagnostic stream for mode banners, verbose sizes and key dumps."""

import sys
import typing

import colorama

from . import config


class Reporter:
    """Writes diagnostics to *stream* (stderr by default).

    ``verbose`` gates the size and key/IV output; banners and errors are
    always written.
    """

    def __init__(self, stream: typing.Optional[typing.TextIO] = None, verbose: bool = False):
        self.stream = stream if stream is not None else sys.stderr
        self.verbose = verbose
        isatty = getattr(self.stream, "isatty", None)
        self._has_colors = bool(config.USE_COLOR and isatty and isatty())
        if self._has_colors:
            self._red = colorama.Fore.RED
            self._dim = colorama.Style.DIM
            self._reset = colorama.Style.RESET_ALL
        else:
            self._red = self._dim = self._reset = ""

    def _write(self, text: str) -> None:
        self.stream.write(text + "\n")
        self.stream.flush()

    def info(self, message: str) -> None:
        self._write(message)

    def error(self, message: str) -> None:
        self._write(f"{self._red}Error: {message}{self._reset}")

    def size(self, label: str, value: int) -> None:
        if self.verbose:
            # labels are right-aligned on the colon
            self._write(f"{label:>11}: {value}")

    def key_material(self, material) -> None:
        if self.verbose:
            self._write(f"{self._dim}{material.dump_iv()}{self._reset}")
            self._write(f"{self._dim}{material.dump_key()}{self._reset}")


class NullReporter(Reporter):
    def __init__(self):
        super().__init__(stream=None, verbose=False)

    def _write(self, text: str) -> None:
        return None


__all__ = ["NullReporter", "Reporter"]
