"""
Stage 1: Normalization

ЦКП: Приведение строки чата к виду, пригодному для сравнения с мастерами.

Input: одна строка текста
Output: строка без внешних пробелов, с полуширинными цифрами
"""

# '０' (U+FF10) .. '９' (U+FF19) -> '0' .. '9'
FULLWIDTH_DIGIT_OFFSET = 0xFEE0
_FULLWIDTH_DIGITS = {code: code - FULLWIDTH_DIGIT_OFFSET for code in range(ord("０"), ord("９") + 1)}


class Normalizer:
    """
    Stage 1: Normalization.

    Чистая функция без ошибок: normalize(normalize(s)) == normalize(s).
    Полноширинный пробел (U+3000) для str.strip() тоже пробел.
    """

    def normalize(self, line: str) -> str:
        return line.translate(_FULLWIDTH_DIGITS).strip()
