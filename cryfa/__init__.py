"""
CRYFA - FASTA encryption and decryption

Password-based AES-128-CBC encryption of FASTA files. Key and IV are derived
deterministically from the password, the FASTA input is normalized before
encryption, and the ciphertext is framed with a "#cryfa v1.1" watermark.
"""

from .errors import (
    CorruptCiphertextError,
    CryfaError,
    InvalidEnvelopeError,
    KeyFileUnavailableError,
    PasswordTooShortError,
    SourceFileUnavailableError,
)
from .kdf import KeyDerivation, KeyMaterial, derive_key_material
from .keygen import generate_password
from .password import read_password_file, validate_password
from .pipeline import Orchestrator
from .version import __version__
from . import fasta, pipeline

# ============================================================================
# IN-MEMORY PIPELINES
# ============================================================================

def encrypt(data: bytes, password: str) -> bytes:
    """
    Encrypt FASTA content into a cryfa envelope.

    Args:
        data: Raw FASTA bytes (or text)
        password: At least 8 bytes once UTF-8 encoded

    Returns:
        Watermark + AES-CBC ciphertext + two trailing newlines

    Note:
        - Records without a header, or with a space in a sequence line, are dropped
        - The same password always yields the same key and IV
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    return pipeline.encrypt_bytes(data, password)


def decrypt(blob: bytes, password: str) -> bytes:
    """
    Decrypt a cryfa envelope back to normalized FASTA.

    Args:
        blob: Complete encrypted file contents
        password: Password used to encrypt

    Returns:
        Normalized FASTA bytes

    Note:
        - No authentication: a wrong password returns garbage, not an error
        - Raises InvalidEnvelopeError when the watermark is missing
    """
    return pipeline.decrypt_bytes(blob, password)


def normalize(data: bytes) -> bytes:
    """
    Normalize FASTA content exactly as encrypt() does before encrypting.

    Args:
        data: Raw FASTA bytes (or text)

    Returns:
        Concatenated ">header\\n" + sequence lines for every valid record
    """
    return fasta.normalize(data)

# ============================================================================
# FILE PIPELINES
# ============================================================================

def encrypt_file(path: str, password: str) -> bytes:
    """Read *path* whole and return its cryfa envelope."""
    return pipeline.encrypt_file(path, password)


def decrypt_file(path: str, password: str) -> bytes:
    """Read the cryfa file at *path* and return the normalized FASTA."""
    return pipeline.decrypt_file(path, password)


__all__ = [
    "CorruptCiphertextError",
    "CryfaError",
    "InvalidEnvelopeError",
    "KeyDerivation",
    "KeyFileUnavailableError",
    "KeyMaterial",
    "Orchestrator",
    "PasswordTooShortError",
    "SourceFileUnavailableError",
    "__version__",
    "decrypt",
    "decrypt_file",
    "derive_key_material",
    "encrypt",
    "encrypt_file",
    "generate_password",
    "normalize",
    "read_password_file",
    "validate_password",
]
