"""Pseudo-random generators behind the password derivation.

Every generator is an ordinary object seeded at construction, so two
derivations never share state. Each exposes ``next()`` returning the next raw
output as a Python int.
"""

import typing

import numpy as np

_MASK32 = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


class GlibcRandom:
    """glibc ``srandom()``/``random()`` with the default TYPE_3 state.

    A 31-word additive feedback generator whose table is filled with the
    Park-Miller sequence (Schrage's method) and then stirred by discarding
    310 outputs. Outputs are 31-bit.
    """

    DEGREE = 31
    SEPARATION = 3

    def __init__(self, seed: int):
        seed &= _MASK32
        if seed == 0:
            seed = 1
        word = _to_int32(seed)
        table = [word]
        for _ in range(1, self.DEGREE):
            # C division truncates toward zero
            hi = abs(word) // 127773
            if word < 0:
                hi = -hi
            lo = word - hi * 127773
            word = _to_int32(16807 * lo - 2836 * hi)
            if word < 0:
                word += 2147483647
            table.append(word)
        self._table = [w & _MASK32 for w in table]
        self._front = self.SEPARATION
        self._rear = 0
        for _ in range(self.DEGREE * 10):
            self.next()

    def next(self) -> int:
        table = self._table
        value = (table[self._front] + table[self._rear]) & _MASK32
        table[self._front] = value
        self._front = (self._front + 1) % self.DEGREE
        self._rear = (self._rear + 1) % self.DEGREE
        return value >> 1


class MersenneTwister:
    """32-bit MT19937 seeded like ``std::mt19937(seed)``."""

    def __init__(self, seed: int):
        self._bitgen = np.random.MT19937(0)
        # RandomState applies the reference init_genrand to an integer seed;
        # MT19937(seed) itself would hash the seed through SeedSequence.
        self._bitgen.state = np.random.RandomState(seed & _MASK32).get_state(legacy=False)

    def next(self) -> int:
        return int(self._bitgen.random_raw())


class DivisionSampler:
    """``uniform_int_distribution`` downscaling as in libstdc++ before GCC 11."""

    def __init__(self, low: int = 0, high: int = 255):
        self.low = low
        self._range = high - low + 1
        self._scaling = _MASK32 // self._range
        self._past = self._range * self._scaling

    def __call__(self, generator) -> int:
        value = generator.next()
        while value >= self._past:
            value = generator.next()
        return self.low + value // self._scaling


class MultiplySampler:
    """Lemire's multiply-shift, used by libstdc++ from GCC 11 on."""

    def __init__(self, low: int = 0, high: int = 255):
        self.low = low
        self._range = high - low + 1

    def __call__(self, generator) -> int:
        product = generator.next() * self._range
        low = product & _MASK32
        if low < self._range:
            threshold = ((1 << 32) - self._range) % self._range
            while low < threshold:
                product = generator.next() * self._range
                low = product & _MASK32
        return self.low + (product >> 32)


SAMPLERS: typing.Dict[str, typing.Callable[..., typing.Callable[[typing.Any], int]]] = {
    "division": DivisionSampler,
    "lemire": MultiplySampler,
}


def make_sampler(name: str, low: int = 0, high: int = 255):
    try:
        factory = SAMPLERS[name]
    except KeyError:
        raise ValueError(f"Unknown byte sampler '{name}'") from None
    return factory(low, high)


__all__ = [
    "DivisionSampler",
    "GlibcRandom",
    "MersenneTwister",
    "MultiplySampler",
    "SAMPLERS",
    "make_sampler",
]
