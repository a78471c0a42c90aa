"""Portable 64-bit Mersenne Twister and permutation helpers built on it."""

from __future__ import annotations

from typing import Any, MutableSequence

_NN = 312
_MM = 156
_MATRIX_A = 0xB5026F5AA96619E9
_UM = 0xFFFFFFFF80000000
_LM = 0x7FFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_DEFAULT_SEED = 5489


class MersenneTwister64:
    """MT19937-64 generator whose outputs are cut to non-negative values."""

    def __init__(self, seed: int = _DEFAULT_SEED) -> None:
        self._mt: list[int] = []
        self._mti = _NN
        self.seed(seed)

    def seed(self, seed: int) -> None:
        """Reinitialise the state from ``seed``."""
        mt = [seed & _MASK64]
        for i in range(1, _NN):
            prev = mt[-1]
            mt.append((6364136223846793005 * (prev ^ (prev >> 62)) + i) & _MASK64)
        self._mt = mt
        self._mti = _NN

    def _twist(self) -> None:
        mt = self._mt
        for i in range(_NN):
            x = (mt[i] & _UM) | (mt[(i + 1) % _NN] & _LM)
            mag = _MATRIX_A if x & 1 else 0
            mt[i] = mt[(i + _MM) % _NN] ^ (x >> 1) ^ mag
        self._mti = 0

    def randint64(self) -> int:
        """Return a random integer in ``[0, 2**63)``."""
        if self._mti >= _NN:
            self._twist()
        x = self._mt[self._mti]
        self._mti += 1

        x ^= (x >> 29) & 0x5555555555555555
        x ^= (x << 17) & 0x71D67FFFEDA60000
        x ^= (x << 37) & 0xFFF7EEE000000000
        x &= _MASK64
        x ^= x >> 43
        return x & 0x7FFFFFFFFFFFFFFF

    def randint32(self) -> int:
        """Return a random integer in ``[0, 2**31)``."""
        return self.randint64() & 0x7FFFFFFF

    def rand_in_range(self, maximum: int) -> int:
        """Return a random integer in ``[0, maximum)``."""
        if maximum <= 0:
            raise ValueError(f"maximum must be positive, got {maximum}")
        return self.randint64() % maximum

    def permute(self, p: MutableSequence[Any], nshuffles: int) -> None:
        """Shuffle ``p`` in place with coarse swaps of neighbouring runs.

        Short sequences (fewer than 10 items) get ``len(p)`` random swaps;
        longer ones get ``nshuffles`` rounds that each swap four elements.
        """
        n = len(p)
        if n < 10:
            for _ in range(n):
                v = self.rand_in_range(n)
                u = self.rand_in_range(n)
                p[v], p[u] = p[u], p[v]
            return
        for _ in range(nshuffles):
            v = self.rand_in_range(n - 3)
            u = self.rand_in_range(n - 3)
            p[v], p[u + 2] = p[u + 2], p[v]
            p[v + 1], p[u + 3] = p[u + 3], p[v + 1]
            p[v + 2], p[u] = p[u], p[v + 2]
            p[v + 3], p[u + 1] = p[u + 1], p[v + 3]

    def permute_fine(self, p: MutableSequence[Any]) -> None:
        """Shuffle ``p`` in place, swapping every position with a random one."""
        n = len(p)
        for i in range(n):
            v = self.rand_in_range(n)
            p[i], p[v] = p[v], p[i]