"""
Конвертация чисел, записанных словами, в числовые значения.
Поддерживает русский и английский: "триста" -> 300, "five hundred" -> 500,
денежный сленг: "косарь" -> 1000, "полтора миллиона" -> 1500000.
"""
import re
import logging
from decimal import Decimal
from types import MappingProxyType
from typing import NamedTuple, Optional

logger = logging.getLogger(__name__)


class WordNumberResult(NamedTuple):
    value: Decimal
    matched_text: str


class WordNumberMatch(NamedTuple):
    value: Decimal
    matched_text: str
    start: int


# Русский
RU_UNITS = MappingProxyType({
    'ноль': 0, 'нуль': 0, 'один': 1, 'одна': 1, 'одну': 1, 'одно': 1,
    'два': 2, 'две': 2, 'двух': 2, 'три': 3, 'трёх': 3, 'трех': 3,
    'четыре': 4, 'четырёх': 4, 'четырех': 4, 'пять': 5, 'пяти': 5,
    'шесть': 6, 'шести': 6, 'семь': 7, 'семи': 7, 'восемь': 8, 'восьми': 8,
    'девять': 9, 'девяти': 9, 'десять': 10, 'десяти': 10, 'одиннадцать': 11,
    'двенадцать': 12, 'тринадцать': 13, 'четырнадцать': 14, 'пятнадцать': 15,
    'шестнадцать': 16, 'семнадцать': 17, 'восемнадцать': 18, 'девятнадцать': 19,
})

RU_TENS = MappingProxyType({
    'двадцать': 20, 'двадцати': 20, 'тридцать': 30, 'тридцати': 30,
    'сорок': 40, 'сорока': 40, 'пятьдесят': 50, 'пятидесяти': 50,
    'шестьдесят': 60, 'семьдесят': 70, 'восемьдесят': 80,
    'девяносто': 90, 'девяноста': 90,
})

RU_HUNDREDS = MappingProxyType({
    'сто': 100, 'ста': 100, 'двести': 200, 'двухсот': 200,
    'триста': 300, 'трёхсот': 300, 'трехсот': 300, 'четыреста': 400,
    'пятьсот': 500, 'пятисот': 500, 'шестьсот': 600, 'семьсот': 700,
    'восемьсот': 800, 'девятьсот': 900, 'девятисот': 900,
})

RU_MULTIPLIERS = MappingProxyType({
    'тысяча': 1000, 'тысячи': 1000, 'тысячу': 1000, 'тысяч': 1000,
    'тыс': 1000, 'тыщ': 1000, 'тыщи': 1000,
    'миллион': 10 ** 6, 'миллиона': 10 ** 6, 'миллионов': 10 ** 6, 'млн': 10 ** 6,
    'миллиард': 10 ** 9, 'миллиарда': 10 ** 9, 'миллиардов': 10 ** 9, 'млрд': 10 ** 9,
})

RU_SLANG = MappingProxyType({
    'полтинник': 50, 'полтос': 50, 'сотка': 100, 'сотня': 100, 'соточка': 100,
    'косарь': 1000, 'косарей': 1000, 'кусок': 1000, 'штука': 1000, 'тонна': 1000,
    'пятихатка': 500, 'пятихат': 500, 'червонец': 10, 'четвертак': 25,
    'полторы': Decimal('1.5'), 'полтора': Decimal('1.5'), 'пол': Decimal('0.5'),
})

# English
EN_UNITS = MappingProxyType({
    'zero': 0, 'one': 1, 'a': 1, 'an': 1, 'two': 2, 'three': 3, 'four': 4,
    'five': 5, 'six': 6, 'seven': 7, 'eight': 8, 'nine': 9, 'ten': 10,
    'eleven': 11, 'twelve': 12, 'thirteen': 13, 'fourteen': 14, 'fifteen': 15,
    'sixteen': 16, 'seventeen': 17, 'eighteen': 18, 'nineteen': 19,
})

EN_TENS = MappingProxyType({
    'twenty': 20, 'thirty': 30, 'forty': 40, 'fifty': 50,
    'sixty': 60, 'seventy': 70, 'eighty': 80, 'ninety': 90,
})

EN_MULTIPLIERS = MappingProxyType({
    'hundred': 100, 'thousand': 1000, 'k': 1000, 'grand': 1000,
    'million': 10 ** 6, 'm': 10 ** 6, 'mil': 10 ** 6, 'billion': 10 ** 9, 'b': 10 ** 9,
})

EN_SLANG = MappingProxyType({
    'half': Decimal('0.5'), 'quarter': Decimal('0.25'), 'dozen': 12,
    'buck': 1, 'bucks': 1,
})

# Слова, которые имеют смысл только перед множителем ("полтора миллиона")
FRACTION_WORDS = frozenset({'полторы', 'полтора', 'пол', 'half', 'quarter'})
# Не считаются суммой сами по себе ("buck" - это валюта, а не число)
NON_STANDALONE_SLANG = FRACTION_WORDS | {'buck', 'bucks'}
# Артикли считаются единицей только перед множителем ("a hundred", "a grand")
ARTICLES = frozenset({'a', 'an'})
# Сокращения множителей требуют числа перед собой ("5 тыс", но не просто "k")
ABBREVIATED_MULTIPLIERS = frozenset({'тыс', 'тыщ', 'тыщи', 'млн', 'млрд', 'k', 'm', 'mil', 'b'})

NUMBER_WORDS = MappingProxyType({
    **RU_UNITS, **RU_TENS, **RU_HUNDREDS, **EN_UNITS, **EN_TENS,
})
MULTIPLIERS = MappingProxyType({**RU_MULTIPLIERS, **EN_MULTIPLIERS})
SLANG = MappingProxyType({**RU_SLANG, **EN_SLANG})

# Все слова словаря, от длинных к коротким: "пятьдесят" не должно проиграть "пять"
ALL_WORDS = tuple(sorted(set(NUMBER_WORDS) | set(MULTIPLIERS) | set(SLANG), key=lambda w: (-len(w), w)))
_VOCABULARY_RE = re.compile(
    r'(?<!\w)(?:' + '|'.join(re.escape(w) for w in ALL_WORDS) + r')(?!\w)',
    re.IGNORECASE,
)
_TOKEN_RE = re.compile(r'[^\s\-]+')
_PUNCTUATION = '.,!?;:()"\''


def _tokens(text: str):
    """Возвращает (слово в нижнем регистре, конец слова без пунктуации)."""
    for match in _TOKEN_RE.finditer(text):
        raw = match.group(0)
        clean = raw.rstrip(_PUNCTUATION)
        leading = len(clean) - len(clean.lstrip(_PUNCTUATION))
        clean = clean[leading:]
        yield clean.lower(), match.start() + leading + len(clean)


def _as_decimal(value) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(value)


def parse_word_number(text: str) -> Optional[WordNumberResult]:
    """
    Парсит число, записанное словами, с начала текста.

    Примеры:
    - "триста" -> 300
    - "две тысячи пятьсот рублей" -> 2500 (matched_text="две тысячи пятьсот")
    - "косарь" -> 1000
    - "полтора миллиона" -> 1500000
    - "twenty five thousand" -> 25000
    """
    if not text:
        return None

    tokens = list(_tokens(text))
    if not tokens:
        return None

    first, first_end = tokens[0]
    next_word = tokens[1][0] if len(tokens) > 1 else None

    # Сленг проверяем первым, он не комбинируется с соседними числами
    if first in SLANG:
        if first in FRACTION_WORDS and next_word in MULTIPLIERS:
            value = _as_decimal(SLANG[first]) * MULTIPLIERS[next_word]
            return WordNumberResult(value, text[:tokens[1][1]].strip())
        if first not in NON_STANDALONE_SLANG:
            return WordNumberResult(_as_decimal(SLANG[first]), text[:first_end].strip())
        return None

    result = Decimal(0)
    current = Decimal(0)
    matched_end = None
    previous = None

    for index, (word, end) in enumerate(tokens):
        following = tokens[index + 1][0] if index + 1 < len(tokens) else None

        if word == 'and' and matched_end is not None and following in NUMBER_WORDS:
            # "one hundred and fifty"
            continue
        elif word in ARTICLES:
            # "a hundred" = 100, но "a coffee" - не число
            if matched_end is not None or following not in MULTIPLIERS:
                break
            current += 1
        elif word in NUMBER_WORDS:
            current += NUMBER_WORDS[word]
        elif word in MULTIPLIERS:
            if word in ABBREVIATED_MULTIPLIERS and previous is None:
                break
            multiplier = MULTIPLIERS[word]
            if current == 0:
                current = Decimal(1)
            current *= multiplier
            if multiplier >= 1000:
                result += current
                current = Decimal(0)
        else:
            break

        matched_end = end
        previous = word

    if matched_end is None:
        return None

    result += current
    if result <= 0:
        return None
    return WordNumberResult(result, text[:matched_end].strip())


def find_word_number(text: str) -> Optional[WordNumberMatch]:
    """
    Ищет в тексте самое раннее число, записанное словами, и его позицию.

    Позиция нужна вызывающему коду, чтобы вырезать ровно найденный фрагмент.
    """
    if not text:
        return None

    for match in _VOCABULARY_RE.finditer(text):
        parsed = parse_word_number(text[match.start():])
        if parsed:
            logger.debug(f"Word number '{parsed.matched_text}' -> {parsed.value} at {match.start()}")
            return WordNumberMatch(parsed.value, parsed.matched_text, match.start())

    return None
