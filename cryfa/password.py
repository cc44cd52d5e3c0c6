"""Password gate and key-file reader."""

import pathlib
import typing

from .errors import KeyFileUnavailableError, PasswordTooShortError

MIN_PASSWORD_LENGTH = 8

PasswordLike = typing.Union[str, bytes, bytearray, memoryview]


def password_bytes(password: PasswordLike) -> bytes:
    if isinstance(password, str):
        # surrogateescape keeps undecodable key-file bytes intact
        return password.encode("utf-8", "surrogateescape")
    if isinstance(password, (bytes, bytearray, memoryview)):
        return bytes(password)
    raise TypeError(f"Unsupported password type: {type(password)!r}")


def validate_password(password: PasswordLike) -> bytes:
    """Reject short passwords before they reach key derivation.

    Length is counted in encoded bytes, the unit the derivation consumes.

    Returns:
        The encoded password bytes.

    Raises:
        PasswordTooShortError: fewer than ``MIN_PASSWORD_LENGTH`` bytes.
    """
    pw = password_bytes(password)
    if len(pw) < MIN_PASSWORD_LENGTH:
        raise PasswordTooShortError("password is too short!")
    return pw


def read_password_file(path: typing.Union[str, pathlib.Path, None]) -> str:
    """Return the first line of *path* as the password.

    Only ``\\n`` terminates the line; everything else, including a trailing
    ``\\r``, belongs to the password.
    """
    if path is None or str(path) == "":
        raise KeyFileUnavailableError("no password file has been set!")
    key_path = pathlib.Path(str(path)).expanduser()
    try:
        with open(key_path, "rb") as handle:
            first = handle.readline()
    except OSError as exc:
        raise KeyFileUnavailableError(f"opening '{path}' failed: {exc.strerror or exc}") from exc
    if first.endswith(b"\n"):
        first = first[:-1]
    if not first:
        raise KeyFileUnavailableError("empty password line file!")
    return first.decode("utf-8", "surrogateescape")


__all__ = [
    "MIN_PASSWORD_LENGTH",
    "password_bytes",
    "read_password_file",
    "validate_password",
]
