from __future__ import annotations

_NUMERALS: tuple[tuple[int, str], ...] = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)


def to_roman(number: int) -> str:
    remaining = int(number)
    parts: list[str] = []
    for value, numeral in _NUMERALS:
        while remaining >= value:
            parts.append(numeral)
            remaining -= value
    return "".join(parts)

