"""
Извлечение суммы из текста.
Порядок: диапазон -> сумма нескольких чисел -> множитель (5к, 5 тыс)
-> число с разделителями тысяч -> дробное -> целое -> число словами.
"""
import re
import logging
from decimal import Decimal, InvalidOperation
from typing import Optional, Tuple

from finparse.number_words import find_word_number

logger = logging.getLogger(__name__)

_NUMBER = r'\d+(?:[.,]\d+)?'
# Число в диапазоне может быть записано с пробелами: "от 5 000 до 10 000"
_RANGE_NUMBER = r'\d{1,3}(?:[ \u00a0]\d{3})+(?:[.,]\d+)?|' + _NUMBER

PERCENT_PATTERN = re.compile(r'\d+(?:[.,]\d+)?\s*%')

RANGE_PATTERN = re.compile(
    r'(?<!\w)(?:от|from)\s+(' + _RANGE_NUMBER + r')\s+(?:до|to)\s+(' + _RANGE_NUMBER + r')(?![.,]?\d)',
    re.IGNORECASE,
)

# "500 + 300", "200 плюс 100 и 50" - цепочка может быть любой длины.
# Последнее число не должно иметь множителя: "300 и 5k" - это не 305
SUM_CHAIN_PATTERN = re.compile(
    r'(?<![\d.,])' + _NUMBER + r'(?:(?:\s*\+\s*|\s+(?:плюс|plus|и|and)\s+)' + _NUMBER + r')+'
    r'(?![.,]?\d)(?![кkmb](?!\w))(?!\s*(?:тыс|тыщ|млн|млрд|thousand|million|billion))',
    re.IGNORECASE,
)

# Однобуквенные множители пишутся слитно ("5к", "2m"): "500 к чаю" - это не 500 тысяч
MULTIPLIER_PATTERNS: Tuple[Tuple[re.Pattern, int], ...] = (
    (re.compile(r'(?<![\d.,])(' + _NUMBER + r')(?:к|k)(?!\w)', re.IGNORECASE), 1000),
    (re.compile(r'(?<![\d.,])(' + _NUMBER + r')\s*(?:тыс|тыщ)[а-яё]*\.?', re.IGNORECASE), 1000),
    (re.compile(r'(?<![\d.,])(' + _NUMBER + r')\s*(?:thousand|grand)(?!\w)', re.IGNORECASE), 1000),
    (re.compile(r'(?<![\d.,])(' + _NUMBER + r')\s*(?:млн|миллион[а-яё]*)\.?', re.IGNORECASE), 10 ** 6),
    (re.compile(r'(?<![\d.,])(' + _NUMBER + r')(?:m(?!\w)|\s*(?:mln|mil|millions?)(?!\w))', re.IGNORECASE), 10 ** 6),
    (re.compile(r'(?<![\d.,])(' + _NUMBER + r')\s*(?:млрд|миллиард[а-яё]*)\.?', re.IGNORECASE), 10 ** 9),
    (re.compile(r'(?<![\d.,])(' + _NUMBER + r')(?:b(?!\w)|\s*(?:bln|billions?)(?!\w))', re.IGNORECASE), 10 ** 9),
)

# Числа с разделителями тысяч: "5 000", "5,000", "10.000.000" (2+ точки = разделители)
GROUPED_PATTERN = re.compile(
    r'(?<![\d.,])(\d{1,3}(?:[ \u00a0,]\d{3})+|\d{1,3}(?:\.\d{3}){2,})(?:[.,](\d{1,2}))?(?![.,]?\d)'
)
DECIMAL_PATTERN = re.compile(r'(?<!\d)(\d+)[.,](\d+)(?![.,]?\d)')
# Числа вплотную к "/" - это отвергнутая дата или дробь ("12/31"), а не сумма
INTEGER_PATTERN = re.compile(r'(?<![\d/])\d+(?![\d/])')


def _blank(text: str, start: int, end: int) -> str:
    return text[:start] + ' ' + text[end:]


def to_decimal(raw: str) -> Optional[Decimal]:
    """
    Преобразует числовую строку в Decimal.
    Пробелы удаляются, запятая считается десятичным разделителем.
    """
    amount_str = raw.replace(' ', '').replace('\u00a0', '').replace(',', '.')
    try:
        return Decimal(amount_str)
    except (ValueError, InvalidOperation):
        logger.debug(f"Ошибка при парсинге суммы '{raw}'")
        return None


def normalize_amount(amount: Decimal) -> Decimal:
    """Целые суммы без дробной части (1500.0 -> 1500), дробные без хвостовых нулей."""
    if amount == amount.to_integral_value():
        return amount.quantize(Decimal(1))
    return amount.normalize()


def _extract_range(text: str) -> Optional[Tuple[Decimal, str]]:
    match = RANGE_PATTERN.search(text)
    if not match:
        return None
    amount = to_decimal(match.group(1))
    if amount is None or amount <= 0:
        return None
    logger.debug(f"Range '{match.group(0)}' -> {amount}")
    return amount, _blank(text, match.start(), match.end())


def _extract_sum(text: str) -> Optional[Tuple[Decimal, str]]:
    total = Decimal(0)
    found = False
    for match in SUM_CHAIN_PATTERN.finditer(text):
        for raw in re.findall(_NUMBER, match.group(0)):
            value = to_decimal(raw)
            if value is not None:
                total += value
                found = True
        logger.debug(f"Sum chain '{match.group(0)}', running total {total}")

    if not found or total <= 0:
        return None
    return total, SUM_CHAIN_PATTERN.sub(' ', text)


def _extract_with_multiplier(text: str) -> Optional[Tuple[Decimal, str]]:
    for pattern, multiplier in MULTIPLIER_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue
        value = to_decimal(match.group(1))
        if value is None or value <= 0:
            continue
        logger.debug(f"Multiplier '{match.group(0)}' -> {value} x {multiplier}")
        return value * multiplier, _blank(text, match.start(), match.end())
    return None


def _extract_numeral(text: str) -> Optional[Tuple[Decimal, str]]:
    for match in GROUPED_PATTERN.finditer(text):
        digits = re.sub(r'\D', '', match.group(1))
        if match.group(2):
            digits += '.' + match.group(2)
        value = to_decimal(digits)
        if value is not None and value > 0:
            return value, _blank(text, match.start(), match.end())

    for pattern in (DECIMAL_PATTERN, INTEGER_PATTERN):
        for match in pattern.finditer(text):
            value = to_decimal(match.group(0))
            if value is not None and value > 0:
                return value, _blank(text, match.start(), match.end())

    return None


def _extract_word_number(text: str) -> Optional[Tuple[Decimal, str]]:
    found = find_word_number(text)
    if not found or found.value <= 0:
        return None
    end = found.start + len(found.matched_text)
    return found.value, _blank(text, found.start, end)


EXTRACTORS = (_extract_range, _extract_sum, _extract_with_multiplier, _extract_numeral, _extract_word_number)


def extract_amount(text: str) -> Tuple[Optional[Decimal], str]:
    """
    Извлекает сумму из текста и возвращает кортеж (сумма, текст_без_суммы).
    Если сумму найти не удалось, возвращает (None, исходный текст).

    Примеры:
    - "шашлык 500" -> 500
    - "от 500 до 1000 на подарок" -> 500
    - "500 + 300" -> 800
    - "5к на аренду" -> 5000
    - "триста на кофе" -> 300
    """
    if not text:
        return None, text

    working = PERCENT_PATTERN.sub(' ', text)

    for extractor in EXTRACTORS:
        found = extractor(working)
        if found:
            amount, remaining = found
            amount = normalize_amount(amount)
            logger.debug(f"Amount {amount} found by {extractor.__name__}")
            return amount, remaining

    return None, text
