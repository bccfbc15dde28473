import random
from dataclasses import dataclass
from typing import Optional

A = 16807
M = 0x7FFFFFFF  # 2^31-1


def pm_next(state: int) -> int:
    return (state * A) % M


def new_seed() -> int:
    """Draw a fresh non-zero seed from the process-wide random module."""
    return random.randint(1, M - 1)


@dataclass
class PMRandom:
    """
    Park–Miller minimal standard generator.
    Exposes the small subset of the random.Random API the generators use
    (randrange), so either can be injected.
    """
    state: int

    def __post_init__(self) -> None:
        self.state %= M
        if self.state == 0:
            # 0 is a fixed point of the recurrence
            self.state = 1

    @classmethod
    def from_seed(cls, seed: Optional[int]) -> "PMRandom":
        return cls(new_seed() if seed is None else seed)

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def randrange(self, n: int) -> int:
        """Uniform integer in 0..n-1 (rejection sampling, no modulo bias)."""
        if n <= 0:
            raise ValueError(f"empty range for randrange({n})")
        span = M - 1                    # next32 yields 1..M-1
        limit = span - (span % n)
        while True:
            v = self.next32() - 1
            if v < limit:
                return v % n
