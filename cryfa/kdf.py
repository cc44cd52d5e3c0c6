"""Password to AES key/IV derivation.

The chain is glibc ``rand()`` -> MT19937 -> ``uniform_int_distribution(0, 255)``
-> ``% 255``. It is the cryfa v1.1 wire format and must stay bit-exact; it is
not a KDF to reuse elsewhere.
"""

import typing
from dataclasses import dataclass, field

from . import config
from .password import PasswordLike, validate_password
from .rng import GlibcRandom, MersenneTwister, make_sampler

AES_KEY_LENGTH = 16
AES_BLOCK_SIZE = 16
SEED_MODULUS = 4294967295
_MASK64 = (1 << 64) - 1


@dataclass(frozen=True)
class DerivationProfile:
    name: str
    multiplier: int
    addend: int
    positions: typing.Tuple[int, int]
    size: int


KEY_PROFILE = DerivationProfile("key", 24593, 49157, (0, 2), AES_KEY_LENGTH)
IV_PROFILE = DerivationProfile("iv", 7919, 75653, (2, 5), AES_BLOCK_SIZE)


@dataclass(frozen=True)
class KeyMaterial:
    key: bytes = field(repr=False)
    iv: bytes = field(repr=False)

    @staticmethod
    def _dump(label: str, data: bytes) -> str:
        return f"{label}: [" + "".join(f"{b} " for b in data) + "]"

    def dump_key(self) -> str:
        return self._dump("KEY", self.key)

    def dump_iv(self) -> str:
        return self._dump("IV ", self.iv)


def _signed_char(value: int) -> int:
    return value - 256 if value > 127 else value


def legacy_seed(pw: bytes, profile: DerivationProfile) -> int:
    """Seed for the legacy generator, as a C ``unsigned int``."""
    first, second = (_signed_char(pw[i]) for i in profile.positions)
    return (profile.multiplier * (first * second) + profile.addend) & 0xFFFFFFFF


def twister_seed(pw: bytes, profile: DerivationProfile, legacy_factory=GlibcRandom) -> int:
    """Fold every password byte into a 64-bit sum using two legacy draws each."""
    legacy = legacy_factory(legacy_seed(pw, profile))
    acc = 0
    for value in pw:
        char = _signed_char(value) & _MASK64
        # multiplicative draw first, additive draw second
        acc = (acc + char * legacy.next() + legacy.next()) & _MASK64
    return acc % SEED_MODULUS


class KeyDerivation:
    """Derives :class:`KeyMaterial` with swappable generator stages.

    Args:
        legacy_factory: builds the reseeding generator from a 32-bit seed.
        modern_factory: builds the byte generator from a 32-bit seed.
        sampler: maps generator output to [0, 255]; defaults to
            ``config.BYTE_SAMPLER`` resolved at call time.
    """

    def __init__(self, legacy_factory=GlibcRandom, modern_factory=MersenneTwister, sampler=None):
        self.legacy_factory = legacy_factory
        self.modern_factory = modern_factory
        self.sampler = sampler

    def _derive(self, pw: bytes, profile: DerivationProfile) -> bytes:
        generator = self.modern_factory(twister_seed(pw, profile, self.legacy_factory))
        sample = self.sampler or make_sampler(config.BYTE_SAMPLER)
        return bytes(sample(generator) % 255 for _ in range(profile.size))

    def derive_key(self, password: PasswordLike) -> bytes:
        return self._derive(validate_password(password), KEY_PROFILE)

    def derive_iv(self, password: PasswordLike) -> bytes:
        return self._derive(validate_password(password), IV_PROFILE)

    def derive(self, password: PasswordLike) -> KeyMaterial:
        pw = validate_password(password)
        return KeyMaterial(
            key=self._derive(pw, KEY_PROFILE),
            iv=self._derive(pw, IV_PROFILE),
        )


def derive_key_material(password: PasswordLike) -> KeyMaterial:
    return KeyDerivation().derive(password)


__all__ = [
    "AES_BLOCK_SIZE",
    "AES_KEY_LENGTH",
    "DerivationProfile",
    "IV_PROFILE",
    "KEY_PROFILE",
    "KeyDerivation",
    "KeyMaterial",
    "derive_key_material",
    "legacy_seed",
    "twister_seed",
]
