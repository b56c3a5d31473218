"""Glyph tables for the Chinese numeral forms.

Two profiles share the same algorithm:
- LOWERCASE: 〇一二三 ... with units 十百千 ([DBNum1], [DBNum3])
- FORMAL:    零壹贰叁 ... with units 拾佰仟 ([DBNum2])
"""

from __future__ import annotations

from dataclasses import dataclass

# Units for chunks of 10^0, 10^4, 10^8, 10^12, 10^16
LARGE_UNITS: tuple[str, ...] = ("", "万", "亿", "兆", "京")

# Full-width replacements used by [DBNum4]
FULL_WIDTH: dict[str, str] = {
    "0": "０",
    "1": "１",
    "2": "２",
    "3": "３",
    "4": "４",
    "5": "５",
    "6": "６",
    "7": "７",
    "8": "８",
    "9": "９",
    "-": "－",
    ".": "．",
}


@dataclass(frozen=True)
class GlyphProfile:
    """Digit and unit glyphs for one numeral vocabulary.

    `digits[0]` doubles as the bridging zero. `units[0]` and `large_units[0]`
    are empty since the ones position carries no unit word.
    """

    digits: tuple[str, ...]
    units: tuple[str, ...]
    large_units: tuple[str, ...] = LARGE_UNITS
    negative: str = "负"
    point: str = "."
    leading_one_for_ten: bool = False

    @property
    def zero(self) -> str:
        return self.digits[0]


LOWERCASE = GlyphProfile(
    digits=("〇", "一", "二", "三", "四", "五", "六", "七", "八", "九"),
    units=("", "十", "百", "千"),
)

FORMAL = GlyphProfile(
    digits=("零", "壹", "贰", "叁", "肆", "伍", "陆", "柒", "捌", "玖"),
    units=("", "拾", "佰", "仟"),
)


def profile_for(is_formal: bool) -> GlyphProfile:
    return FORMAL if is_formal else LOWERCASE
