"""
Random number generator with seed support
"""
import math


class SeededRandom:
    """Park-Miller linear congruential generator.

    Every derived value comes from a single draw primitive, so a given seed
    replays the same sequence for the same call order.
    """

    g = 16807
    n = 2147483647

    def __init__(self, seed):
        seed = int(seed)
        self.seed = seed
        # Truncating remainder: negative seeds keep their sign
        state = abs(seed) % self.n
        if seed < 0:
            state = -state
        if state <= 0:
            state += self.n - 1
        self.state = state

    def _next(self):
        """Advance the internal state"""
        self.state = (self.state * self.g) % self.n
        return self.state

    def random(self):
        """Random float in [0, 1)"""
        return (self._next() - 1) / (self.n - 1)

    def random_int(self, min_val, max_val):
        """Random integer in [min, max] (inclusive)"""
        return math.floor(self.random() * (max_val - min_val + 1)) + min_val

    def random_float(self, min_val, max_val):
        """Random float in [min, max)"""
        return self.random() * (max_val - min_val) + min_val

    def pick(self, seq):
        """Uniformly chosen element of a non-empty sequence"""
        return seq[self.random_int(0, len(seq) - 1)]

    def shuffle(self, seq):
        """Fisher-Yates shuffle in place, returns seq"""
        for i in range(len(seq) - 1, 0, -1):
            j = self.random_int(0, i)
            seq[i], seq[j] = seq[j], seq[i]
        return seq
