"""Seeded Xorshift random stream.

The stream reproduces, bit for bit, the generator used by Ethereum Mist
identicons ("blockies"). State is four signed 32-bit registers ``x, y, z, w``:

* Seeding folds the seed into the registers with a Java ``String.hashCode``
  style update, spread round-robin over the four slots.
* Each draw performs one Xorshift round and returns ``uint32(w) / 2**31``.
  The final xor cancels the sign bit of ``w`` so the result is always in
  ``[0, 1)``.

Python integers are unbounded, so every intermediate value is wrapped back
into signed 32-bit range with :func:`int32`. Skipping a wrap anywhere makes the
sequence diverge from the reference after a few draws.
"""

from typing import Tuple

from blockies.types import Seed


INT32_MASK = 0xFFFFFFFF
INT32_SIGN = 0x80000000
DRAW_DIVISOR = float(1 << 31)

StreamState = Tuple[int, int, int, int]


def int32(value: int) -> int:
    """Wrap ``value`` to a signed two's complement 32-bit integer."""
    value &= INT32_MASK
    return value - (1 << 32) if value & INT32_SIGN else value


def uint32(value: int) -> int:
    """Reinterpret ``value`` as an unsigned 32-bit integer."""
    return value & INT32_MASK


def code_units(seed: Seed) -> Tuple[int, ...]:
    """Return the UTF-16 code units of ``seed``.

    Characters outside the Basic Multilingual Plane contribute a surrogate
    pair, exactly like indexing a UTF-16 string one unit at a time.
    """
    data = seed.encode("utf-16-le", "surrogatepass")
    return tuple(
        int.from_bytes(data[i : i + 2], "little") for i in range(0, len(data), 2)
    )


def seed_state(seed: Seed) -> StreamState:
    """Fold ``seed`` into the four initial register values."""
    if not isinstance(seed, str):
        raise TypeError(f"seed must be a str, got {type(seed).__name__}")
    acc = [0, 0, 0, 0]
    for i, code in enumerate(code_units(seed)):
        slot = i % 4
        acc[slot] = int32(int32(acc[slot] << 5) - acc[slot] + code)
    return (acc[0], acc[1], acc[2], acc[3])


class RandomStream:
    """Mutable Xorshift state owned by a single generation call.

    The stream is passed explicitly through the palette and bitmap stages;
    the order in which they call :meth:`draw` is part of the output format.

    Attributes:
        x, y, z, w: Signed 32-bit registers.
    """

    x: int
    y: int
    z: int
    w: int

    def __init__(self, state: StreamState = (0, 0, 0, 0)):
        self.x, self.y, self.z, self.w = (int32(v) for v in state)

    @classmethod
    def from_seed(cls, seed: Seed) -> "RandomStream":
        return cls(seed_state(seed))

    @property
    def state(self) -> StreamState:
        return (self.x, self.y, self.z, self.w)

    def draw(self) -> float:
        """Advance one Xorshift round and return a float in ``[0, 1)``."""
        t = int32(self.x ^ int32(self.x << 11))
        self.x, self.y, self.z = self.y, self.z, self.w
        w = self.w
        self.w = int32(w ^ (w >> 19) ^ t ^ (t >> 8))
        return uint32(self.w) / DRAW_DIVISOR

    def __repr__(self) -> str:
        return f"RandomStream(state={self.state!r})"
