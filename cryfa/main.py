import argparse
import pathlib
import sys

import colorama

from .errors import CryfaError, SourceFileUnavailableError
from .password import read_password_file
from .pipeline import Orchestrator
from .report import Reporter
from .version import RELEASE, VERSION

ABOUT_TEXT = f"""
cryfa v{VERSION}.{RELEASE}
================
A FASTA encryption and decryption tool

Diogo Pratas & Armando J. Pinho
Copyright (C) 2017 University of Aveiro

This is a Free software, under GPLv3. You may redistribute
copies of it under the terms of the GNU - General Public
License v3 <http://www.gnu.org/licenses/gpl.html>. There
is NOT ANY WARRANTY, to the extent permitted by law.
"""


def build_parser() -> argparse.ArgumentParser:
    # -h/-a exit with status 1, so argparse's own help action is not used
    parser = argparse.ArgumentParser(
        prog="cryfa",
        usage="cryfa [OPTION]... -k [KEYFILENAME] [FILENAME]",
        description="A FASTA encryption and decryption tool",
        add_help=False,
    )
    parser.add_argument("-h", "--help", action="store_true", help="usage guide")
    parser.add_argument("-a", "--about", action="store_true", help="about the program")
    parser.add_argument("-v", "--verbose", action="store_true", help="verbose mode (more information)")
    parser.add_argument("-d", "--decrypt", action="store_true", help="decrypt mode")
    parser.add_argument(
        "-k", "--key",
        dest="key_file",
        default="",
        metavar="KEYFILE",
        help="key filename; its first line is the password"
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="write the result to this path instead of stdout"
    )
    parser.add_argument(
        "file",
        nargs="?",
        default=None,
        help="FASTA file to encrypt, or cryfa file to decrypt"
    )
    return parser


def _emit(data: bytes, output) -> None:
    if output:
        pathlib.Path(output).expanduser().write_bytes(data)
        return
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()


def cli(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.help:
        parser.print_help()
        return 1
    if args.about:
        print(ABOUT_TEXT)
        return 1

    colorama.just_fix_windows_console()
    reporter = Reporter(verbose=args.verbose)
    if args.verbose:
        reporter.info("Verbose mode on.")
    reporter.info("Decryption mode on." if args.decrypt else "Encryption mode on.")

    orchestrator = Orchestrator(reporter=reporter)
    try:
        password = read_password_file(args.key_file)
        if not args.file:
            raise SourceFileUnavailableError("no input file has been set!")
        if args.decrypt:
            result = orchestrator.decrypt_file(args.file, password)
        else:
            result = orchestrator.encrypt_file(args.file, password)
    except CryfaError as exc:
        reporter.error(str(exc))
        return exc.exit_code

    try:
        _emit(result, args.output)
    except OSError as exc:
        reporter.error(f"writing '{args.output}' failed: {exc.strerror or exc}")
        return 1
    return 0


def main(argv=None) -> int:
    return cli(argv)


if __name__ == "__main__":
    raise SystemExit(main())
