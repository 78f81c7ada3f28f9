from __future__ import annotations


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    # Square-and-multiply keeps every intermediate below modulus**2.
    if modulus == 1:
        return 0
    result = 1
    base %= modulus
    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        base = (base * base) % modulus
        exponent >>= 1
    return result


def split_power_of_two(value: int) -> tuple[int, int]:
    # Returns (d, s) with value == d * 2**s and d odd; value must be positive.
    if value <= 0:
        raise ValueError("value must be positive")
    shift = 0
    while value & 1 == 0:
        value >>= 1
        shift += 1
    return value, shift
