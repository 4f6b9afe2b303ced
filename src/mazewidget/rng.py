from dataclasses import dataclass

A = 1664525
C = 1013904223
M = 2 ** 32
MASK32 = 0xFFFFFFFF


def to_uint32(seed) -> int:
    # Truncate toward zero, then wrap into 0..2^32-1 (negatives wrap too).
    return int(seed) & MASK32


def lcg_next(state: int) -> int:
    return (state * A + C) & MASK32


@dataclass
class LCGRandom:
    """
    Linear congruential stream used by the carver.
    next() advances the 32-bit state and returns state / 2^32, in [0, 1).
    """
    state: int

    def __post_init__(self) -> None:
        self.state = to_uint32(self.state)

    def next32(self) -> int:
        self.state = lcg_next(self.state)
        return self.state

    def next(self) -> float:
        return self.next32() / M

    def choice_index(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"choice_index needs n > 0, got {n}")
        return int(self.next() * n)
