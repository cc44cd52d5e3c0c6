"""AES-128-CBC with PKCS#7 padding over the normalized plaintext."""

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .errors import CorruptCiphertextError
from .kdf import AES_BLOCK_SIZE, KeyMaterial

# Encrypted along with the plaintext and dropped again on decrypt.
TERMINATOR = b"\x00"


class CipherEngine:
    BLOCK_SIZE = AES_BLOCK_SIZE

    @staticmethod
    def _cipher(material: KeyMaterial) -> Cipher:
        return Cipher(algorithms.AES(material.key), modes.CBC(material.iv))

    @staticmethod
    def encrypt(plaintext: bytes, material: KeyMaterial) -> bytes:
        padder = padding.PKCS7(CipherEngine.BLOCK_SIZE * 8).padder()
        padded = padder.update(bytes(plaintext) + TERMINATOR) + padder.finalize()
        encryptor = CipherEngine._cipher(material).encryptor()
        return encryptor.update(padded) + encryptor.finalize()

    @staticmethod
    def decrypt(ciphertext: bytes, material: KeyMaterial) -> bytes:
        """Decrypt *ciphertext* and strip padding and terminator.

        There is no authentication: a wrong key gives garbage, not an error.
        """
        ciphertext = bytes(ciphertext)
        if not ciphertext or len(ciphertext) % CipherEngine.BLOCK_SIZE:
            raise CorruptCiphertextError(
                f"ciphertext is {len(ciphertext)} bytes, not a multiple of {CipherEngine.BLOCK_SIZE}"
            )
        decryptor = CipherEngine._cipher(material).decryptor()
        padded = decryptor.update(ciphertext) + decryptor.finalize()
        unpadder = padding.PKCS7(CipherEngine.BLOCK_SIZE * 8).unpadder()
        try:
            plain = unpadder.update(padded) + unpadder.finalize()
        except ValueError:
            # unauthenticated padding: a wrong key leaves it invalid, keep the raw blocks
            plain = padded
        return plain[:-len(TERMINATOR)]


def encrypt(plaintext: bytes, material: KeyMaterial) -> bytes:
    return CipherEngine.encrypt(plaintext, material)


def decrypt(ciphertext: bytes, material: KeyMaterial) -> bytes:
    return CipherEngine.decrypt(ciphertext, material)


__all__ = ["CipherEngine", "TERMINATOR", "decrypt", "encrypt"]
