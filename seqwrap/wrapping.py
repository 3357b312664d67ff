"""32-bit wrapping sequence numbers and conversion to 64-bit absolute indices."""

from __future__ import annotations

from dataclasses import dataclass

_MASK32 = (1 << 32) - 1
_MASK64 = (1 << 64) - 1
_SPAN32 = 1 << 32
_HALF32 = 1 << 31

__all__ = ["WrappingInt32", "wrap", "unwrap"]


def _to_int32(value: int) -> int:
    """Interpret the low 32 bits of ``value`` as a signed integer."""
    value &= _MASK32
    return value - _SPAN32 if value >= _HALF32 else value


@dataclass(frozen=True)
class WrappingInt32:
    """A 32-bit integer expressed relative to an arbitrary initial sequence number.

    Values outside the 32-bit range are reduced modulo 2**32.
    """

    raw_value: int

    def __post_init__(self) -> None:
        if isinstance(self.raw_value, bool) or not isinstance(self.raw_value, int):
            raise TypeError(f"raw value must be an int, not {type(self.raw_value).__name__}")
        object.__setattr__(self, "raw_value", self.raw_value & _MASK32)

    def __add__(self, other: int) -> WrappingInt32:
        """Step ``other`` places past this point."""
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return WrappingInt32(self.raw_value + other)

    def __sub__(self, other: WrappingInt32 | int) -> WrappingInt32 | int:
        """Offset from ``other`` when it is a WrappingInt32, else step back ``other`` places.

        The offset is the number of increments needed to get from ``other`` to
        ``self``, negative when the number of decrements is not larger.
        """
        if isinstance(other, WrappingInt32):
            return _to_int32(self.raw_value - other.raw_value)
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return WrappingInt32(self.raw_value - other)

    def __str__(self) -> str:
        return str(self.raw_value)


def wrap(n: int, isn: WrappingInt32) -> WrappingInt32:
    """Transform an absolute 64-bit sequence number into a WrappingInt32."""
    return WrappingInt32(isn.raw_value + ((n & _MASK64) & _MASK32))


def unwrap(n: WrappingInt32, isn: WrappingInt32, checkpoint: int) -> int:
    """Return the absolute 64-bit sequence number that wraps to ``n`` closest to ``checkpoint``."""
    checkpoint &= _MASK64
    result = (n.raw_value - isn.raw_value) & _MASK32
    if checkpoint <= result:
        return result
    err = checkpoint - result
    periods = err >> 32
    if (err & _MASK32) >= _HALF32:
        periods += 1
    return (result + periods * _SPAN32) & _MASK64