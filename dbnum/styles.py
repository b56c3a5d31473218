"""Map spreadsheet [DBNumN] format codes to the numeral conversions."""

from __future__ import annotations

from enum import Enum

from .chinese import to_chinese_digits, to_chinese_numeral, to_full_width


class NumeralStyle(str, Enum):
    """Surface form requested by a [DBNumN] format code."""

    DBNUM1 = "dbnum1"  # lowercase numeral words: 一千〇五
    DBNUM2 = "dbnum2"  # formal numeral words: 壹仟零伍
    DBNUM3 = "dbnum3"  # digit glyphs only: 一〇〇五
    DBNUM4 = "dbnum4"  # full-width digits: １００５

    @property
    def label(self) -> str:
        return f"[DBNum{self.value[-1]}]"


def render(
    value: float,
    style: NumeralStyle,
    *,
    formal: bool = False,
    leading_one_for_ten: bool = False,
) -> str:
    """Render `value` in one style.

    `formal` selects the formal digit glyphs for DBNUM3 (DBNUM2 is always
    formal, DBNUM1 never). `leading_one_for_ten` applies to the word styles only.
    """
    style = NumeralStyle(style)
    if style is NumeralStyle.DBNUM1:
        return to_chinese_numeral(value, False, leading_one_for_ten)
    if style is NumeralStyle.DBNUM2:
        return to_chinese_numeral(value, True, leading_one_for_ten)
    if style is NumeralStyle.DBNUM3:
        return to_chinese_digits(value, formal)
    return to_full_width(value)


def render_all(
    value: float,
    *,
    formal: bool = False,
    leading_one_for_ten: bool = False,
) -> dict[NumeralStyle, str]:
    """Render `value` in every style, keyed in DBNum order."""
    return {
        style: render(value, style, formal=formal, leading_one_for_ten=leading_one_for_ten)
        for style in NumeralStyle
    }
