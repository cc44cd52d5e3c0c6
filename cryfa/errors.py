"""Error taxonomy raised by the cryfa pipelines.

Library code raises these; only the command line front-end turns them into
an ``Error: ...`` line and a non-zero exit status.
"""


class CryfaError(Exception):
    """Base class for every fatal cryfa condition."""

    exit_code = 1


class PasswordTooShortError(CryfaError, ValueError):
    """Raised when the password has fewer than the minimum number of bytes."""


class KeyFileUnavailableError(CryfaError, FileNotFoundError):
    """Raised when the key file is unset, unreadable or has an empty first line."""


class SourceFileUnavailableError(CryfaError, FileNotFoundError):
    """Raised when the input file cannot be loaded."""


class InvalidEnvelopeError(CryfaError, ValueError):
    """Raised when the watermark is missing from an encrypted file."""


class CorruptCiphertextError(CryfaError, ValueError):
    """Raised when the ciphertext is not a whole number of cipher blocks."""


__all__ = [
    "CorruptCiphertextError",
    "CryfaError",
    "InvalidEnvelopeError",
    "KeyFileUnavailableError",
    "PasswordTooShortError",
    "SourceFileUnavailableError",
]
