"""
Alea pseudo-random number generator.

Based on Johannes Baagøe's Alea algorithm. Seeds of any type are hashed
through their string form, so "42" and 42 produce the same sequence and a
given seed always reproduces the same cave.
"""

MASH_SEED = 0xEFC8249D  # 4022871197
TWO_POW_32 = 0x100000000
TWO_POW_NEG_32 = 2.3283064365386963e-10


def _uint32(n):
    """Convert to unsigned 32-bit integer."""
    return int(n) & 0xFFFFFFFF


class AleaPRNG:
    """
    Seeded Alea generator producing floats in [0, 1).

    Every generation run owns its own instance; the state is never shared
    between runs.
    """

    def __init__(self, seed):
        """Initialize with a seed value or an iterable of seed parts."""
        self.call_count = 0
        self.seed = seed

        if hasattr(seed, "__iter__") and not isinstance(seed, str):
            parts = list(seed)
        else:
            parts = [seed]

        mash_n = MASH_SEED

        def mash(data):
            nonlocal mash_n
            for char in str(data):
                mash_n = mash_n + ord(char)
                h = 0.02519603282416938 * mash_n
                mash_n = _uint32(h)
                h -= mash_n
                h *= mash_n
                mash_n = _uint32(h)
                h -= mash_n
                mash_n += h * TWO_POW_32
            return _uint32(mash_n) * TWO_POW_NEG_32

        self.s0 = mash(" ")
        self.s1 = mash(" ")
        self.s2 = mash(" ")
        self.c = 1

        for part in parts:
            self.s0 -= mash(part)
            if self.s0 < 0:
                self.s0 += 1
            self.s1 -= mash(part)
            if self.s1 < 0:
                self.s1 += 1
            self.s2 -= mash(part)
            if self.s2 < 0:
                self.s2 += 1

    def random(self):
        """Generate next random number in [0, 1)."""
        self.call_count += 1
        t = 2091639 * self.s0 + self.c * TWO_POW_NEG_32
        self.s0 = self.s1
        self.s1 = self.s2
        self.c = int(t)
        self.s2 = t - self.c
        return self.s2

    def randint(self, low, high):
        """Return an integer in the half-open range [low, high)."""
        if high <= low:
            raise ValueError(f"Empty range [{low}, {high})")
        return low + int(self.random() * (high - low))
