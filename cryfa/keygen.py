"""Random password generator for cryfa key files."""

import argparse
import pathlib
import secrets

from .errors import CryfaError, KeyFileUnavailableError, PasswordTooShortError
from .password import MIN_PASSWORD_LENGTH
from .report import Reporter

# the 94 printable ASCII characters from '!' to '~'
SHOWABLE_CHARS = "".join(chr(c) for c in range(33, 33 + 94))
DEFAULT_LENGTH = 1024


def generate_password(length: int = DEFAULT_LENGTH) -> str:
    """Generates a random password of showable ASCII characters."""
    if length < MIN_PASSWORD_LENGTH:
        raise PasswordTooShortError(f"key length must be at least {MIN_PASSWORD_LENGTH}")
    return "".join(secrets.choice(SHOWABLE_CHARS) for _ in range(length))


def write_key_file(target, length: int = DEFAULT_LENGTH) -> pathlib.Path:
    name = str(target)
    if not name:
        raise KeyFileUnavailableError("no key file name has been set!")
    if " " in name:
        raise KeyFileUnavailableError("the file name has a space character.")
    path = pathlib.Path(name).expanduser()
    try:
        path.write_text(generate_password(length) + "\n", encoding="ascii")
    except OSError as exc:
        raise KeyFileUnavailableError(f"writing '{name}' failed: {exc.strerror or exc}") from exc
    return path


def cli(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="cryfa-keygen",
        description="Generate a random password file for cryfa -k"
    )
    parser.add_argument("target", help="key file to create")
    parser.add_argument(
        "-l", "--length",
        type=int,
        default=DEFAULT_LENGTH,
        help=f"password length (default {DEFAULT_LENGTH})"
    )
    args = parser.parse_args(argv)

    reporter = Reporter()
    try:
        path = write_key_file(args.target, args.length)
    except CryfaError as exc:
        reporter.error(str(exc))
        return exc.exit_code
    reporter.info(f"Key written to '{path}'.")
    return 0


def main(argv=None) -> int:
    return cli(argv)


if __name__ == "__main__":
    raise SystemExit(main())
