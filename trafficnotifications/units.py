"""Human readable byte counts."""

from __future__ import annotations

from enum import Enum

U128_MAX = 2**128 - 1


class ByteMultiple(Enum):
    """Decimal byte multiples, smallest first."""

    B = 1
    KB = 10**3
    MB = 10**6
    GB = 10**9
    TB = 10**12
    PB = 10**15

    @property
    def multiplier(self) -> int:
        return self.value

    @classmethod
    def for_value(cls, num: int) -> "ByteMultiple":
        """Return the largest multiple that keeps the scaled value under 1000."""
        if num < 1000:
            return cls.B
        for multiple in (cls.KB, cls.MB, cls.GB, cls.TB):
            if _tenths(num, multiple) < 10000:
                return multiple
        return cls.PB

    @classmethod
    def formatted_string(cls, num: int) -> str:
        """Format a byte count, e.g. 1500 -> '1.5 KB'.

        Bytes are printed as an integer; every other multiple gets exactly one
        decimal place, rounded half-up. Accepts any unsigned 128-bit value.
        """
        if isinstance(num, bool) or not isinstance(num, int):
            raise TypeError(f"Expected an integer byte count, got {type(num).__name__}")
        if num < 0 or num > U128_MAX:
            raise ValueError(f"Byte count {num} outside unsigned 128-bit range")

        multiple = cls.for_value(num)
        if multiple is cls.B:
            return f"{num} {multiple.name}"
        whole, tenth = divmod(_tenths(num, multiple), 10)
        return f"{whole}.{tenth} {multiple.name}"


def _tenths(num: int, multiple: ByteMultiple) -> int:
    # round half-up in integer arithmetic
    return (num * 10 + multiple.multiplier // 2) // multiple.multiplier
