"""Render numbers as Chinese numerals and full-width digits.

Public conversions (one per spreadsheet [DBNumN] format):
- to_chinese_numeral(value, is_formal=False)  -> 一千〇五 / 壹仟零伍   ([DBNum1], [DBNum2])
- to_chinese_digits(value)                    -> 一〇〇五              ([DBNum3])
- to_full_width(value)                        -> １００５              ([DBNum4])

Every conversion starts from `default_text(value)` so digit order and the
fractional digits match exactly what the plain number would print.
"""

from __future__ import annotations

import math
from dataclasses import replace
from decimal import Decimal

from .glyphs import FULL_WIDTH, GlyphProfile, profile_for

# Largest magnitude rendered as numeral words; anything above falls back to plain text
MAX_NUMERAL = 9_999_999_999_999_999_999.0

# Fractions at or below this are binary noise, not digits worth printing
FRACTION_EPSILON = 1e-9


def default_text(value: float) -> str:
    """Plain decimal text of a float: shortest round-trip digits, no exponent.

    Examples: 5.0 -> "5", 123.5 -> "123.5", 1e21 -> "1000000000000000000000",
    1e-07 -> "0.0000001". Non-finite values keep Python's spelling ("nan", "inf").
    """
    value = float(value)
    if not math.isfinite(value):
        return str(value)
    return format(Decimal(repr(value)).normalize(), "f")


def to_full_width(value: float) -> str:
    """Replace ASCII digits, '-' and '.' with their full-width forms; keep everything else."""
    return "".join(FULL_WIDTH.get(ch, ch) for ch in default_text(value))


def to_chinese_digits(value: float, is_formal: bool = False) -> str:
    """Transliterate the printed number digit by digit, without place-value units.

    Example: -102.3 -> "负一〇二.三". Characters other than digits, '-' and '.'
    are dropped.
    """
    profile = profile_for(is_formal)
    glyphs = {str(d): glyph for d, glyph in enumerate(profile.digits)}
    glyphs["-"] = profile.negative
    glyphs["."] = profile.point
    return "".join(glyphs.get(ch, "") for ch in default_text(value))


def to_chinese_numeral(value: float, is_formal: bool = False, use_leading_one_for_ten: bool = False) -> str:
    """Convert a number to Chinese numeral words.

    Rules:
    - Non-finite or |value| > 9,999,999,999,999,999,999 -> default_text(value).
    - Negative values get a leading 负.
    - Zero integer part renders as a single zero glyph (0 -> 〇, 0.5 -> 〇.五).
    - Fractional digits follow a '.' and carry no units: 3.14 -> 三.一四
    - use_leading_one_for_ten keeps the 一 before a leading 十: 12 -> 一十二
    """
    value = float(value)
    if not math.isfinite(value) or abs(value) > MAX_NUMERAL:
        return default_text(value)

    profile = profile_for(is_formal)
    if use_leading_one_for_ten:
        profile = replace(profile, leading_one_for_ten=True)

    parts: list[str] = []
    if value < 0:
        parts.append(profile.negative)

    magnitude = abs(value)
    integer = int(magnitude)
    fraction = magnitude - integer

    if integer == 0:
        # Placeholder for 0 itself and for pure fractions such as 0.25
        parts.append(profile.zero)
    else:
        parts.append(_convert_integer(integer, profile))

    if fraction > FRACTION_EPSILON:
        parts.append(profile.point)
        _, _, decimals = default_text(value).partition(".")
        parts.extend(profile.digits[int(ch)] for ch in decimals)

    return "".join(parts)


# --- Place-value helpers ---------------------------------------------------


def _convert_integer(n: int, profile: GlyphProfile) -> str:
    """Convert a non-negative integer to numeral words with 万/亿/兆/京 grouping.

    Chunks of four digits are processed lowest first and prepended. A single
    zero glyph bridges a gap between two non-zero chunks, e.g.
    100000001 -> 一亿〇一, 10010 -> 一万〇一十, 100001000 -> 一亿〇一千.
    """
    if n == 0:
        return profile.zero

    zero = profile.zero
    result = ""
    needs_zero = False
    index = 0

    while n > 0:
        n, chunk = divmod(n, 10000)
        if needs_zero:
            result = zero + result

        if chunk:
            fragment = _convert_group(chunk, profile, leading=(n == 0))
            result = fragment + profile.large_units[index] + result
            # A chunk below 1000 has leading zeros that a higher chunk must bridge
            needs_zero = chunk < 1000 and n > 0
        else:
            needs_zero = bool(result) and not result.startswith(zero)

        index += 1

    return result


def _convert_group(chunk: int, profile: GlyphProfile, leading: bool = True) -> str:
    """Convert 0..9999 to numeral words WITHOUT the large unit.

    Rules in this 4-digit scope:
    - Internal runs of zeros collapse into one zero glyph: 1005 -> 一千〇五
    - No leading or trailing zero glyph: 1000 -> 一千, 0 -> ""
    - 10..19 as the number's leading chunk drops the 一 unless the profile
      asks for it: 12 -> 十二. Lower chunks always keep it.
    """
    assert 0 <= chunk <= 9999
    if chunk == 0:
        return ""

    zero = profile.zero
    parts: list[str] = []
    seen_nonzero = False

    for weight in range(3, -1, -1):
        d = chunk // 10 ** weight % 10
        if d:
            contract = (
                weight == 1
                and leading
                and 10 <= chunk < 20
                and not profile.leading_one_for_ten
            )
            parts.append(profile.units[weight] if contract else profile.digits[d] + profile.units[weight])
            seen_nonzero = True
        elif seen_nonzero and parts[-1] != zero:
            parts.append(zero)

    while parts and parts[-1] == zero:
        parts.pop()

    return "".join(parts)
