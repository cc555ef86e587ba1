import random


class RandomSource:
    """Uniform integers from the process-wide `random` generator."""

    def randint(self, lo: int, hi: int) -> int:
        return random.randint(lo, hi)
