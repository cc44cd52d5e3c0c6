"""Encrypt and decrypt pipelines.

Encrypt: password gate -> key derivation -> normalize -> AES-CBC -> wrap.
Decrypt: password gate -> key derivation -> unwrap -> AES-CBC.
Both load the whole input into memory before processing.
"""

import pathlib
import typing

from . import config, envelope, fasta
from .cipher import CipherEngine
from .errors import SourceFileUnavailableError
from .kdf import KeyDerivation, KeyMaterial
from .password import PasswordLike
from .report import NullReporter, Reporter

PathLike = typing.Union[str, pathlib.Path]


def _human_readable_size(num_bytes: int) -> str:
    units = ["B", "KiB", "MiB", "GiB"]
    value = float(num_bytes)
    for unit in units:
        if value < 1024.0 or unit == units[-1]:
            return f"{value:.2f} {unit}"
        value /= 1024.0


def read_source(path: PathLike, max_bytes: typing.Optional[int] = None) -> bytes:
    source = pathlib.Path(str(path)).expanduser()
    if not source.exists() or not source.is_file():
        raise SourceFileUnavailableError(f"opening '{path}' failed: no such file")
    limit = max_bytes or config.MAX_INPUT_BYTES
    size = source.stat().st_size
    if size > limit:
        raise SourceFileUnavailableError(
            f"{source.name} is {_human_readable_size(size)}, exceeding the "
            f"{_human_readable_size(limit)} in-memory limit"
        )
    try:
        return source.read_bytes()
    except OSError as exc:
        raise SourceFileUnavailableError(f"opening '{path}' failed: {exc.strerror or exc}") from exc


class Orchestrator:
    def __init__(
        self,
        derivation: typing.Optional[KeyDerivation] = None,
        reporter: typing.Optional[Reporter] = None,
    ):
        self.derivation = derivation or KeyDerivation()
        self.reporter = reporter or NullReporter()

    def _material(self, password: PasswordLike) -> KeyMaterial:
        material = self.derivation.derive(password)
        self.reporter.key_material(material)
        return material

    def _encrypt(self, data: bytes, material: KeyMaterial) -> bytes:
        plaintext, stats = fasta.normalize_with_stats(data)
        ciphertext = CipherEngine.encrypt(plaintext, material)
        self.reporter.size("records", stats.kept)
        self.reporter.size("dropped", stats.dropped)
        self.reporter.size("sym size", len(plaintext))
        self.reporter.size("cipher size", len(ciphertext))
        self.reporter.size("block size", CipherEngine.BLOCK_SIZE)
        return envelope.wrap(ciphertext)

    def _decrypt(self, blob: bytes, material: KeyMaterial) -> bytes:
        ciphertext = envelope.unwrap(blob)
        self.reporter.size("cipher size", len(ciphertext))
        self.reporter.size("block size", CipherEngine.BLOCK_SIZE)
        return CipherEngine.decrypt(ciphertext, material)

    def encrypt_bytes(self, data: bytes, password: PasswordLike) -> bytes:
        return self._encrypt(data, self._material(password))

    def decrypt_bytes(self, blob: bytes, password: PasswordLike) -> bytes:
        return self._decrypt(blob, self._material(password))

    # key material comes first so a bad password fails before the file is read
    def encrypt_file(self, path: PathLike, password: PasswordLike) -> bytes:
        material = self._material(password)
        return self._encrypt(read_source(path), material)

    def decrypt_file(self, path: PathLike, password: PasswordLike) -> bytes:
        material = self._material(password)
        return self._decrypt(read_source(path), material)


def encrypt_bytes(data: bytes, password: PasswordLike, reporter: typing.Optional[Reporter] = None) -> bytes:
    return Orchestrator(reporter=reporter).encrypt_bytes(data, password)


def decrypt_bytes(blob: bytes, password: PasswordLike, reporter: typing.Optional[Reporter] = None) -> bytes:
    return Orchestrator(reporter=reporter).decrypt_bytes(blob, password)


def encrypt_file(path: PathLike, password: PasswordLike, reporter: typing.Optional[Reporter] = None) -> bytes:
    return Orchestrator(reporter=reporter).encrypt_file(path, password)


def decrypt_file(path: PathLike, password: PasswordLike, reporter: typing.Optional[Reporter] = None) -> bytes:
    return Orchestrator(reporter=reporter).decrypt_file(path, password)


__all__ = [
    "Orchestrator",
    "decrypt_bytes",
    "decrypt_file",
    "encrypt_bytes",
    "encrypt_file",
    "read_source",
]
