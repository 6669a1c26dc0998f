"""
Парсер свободного текста транзакций.
Извлекает сумму, валюту, дату, категорию и тип операции без внешних сервисов.

Примеры:
- "шашлык 500 руб" -> 500 RUB, Food & Dining
- "coffee $5" -> 5 USD, Food & Dining
- "триста рублей на кофе" -> 300 RUB, описание "Кофе"
"""
import re
import logging
from datetime import date
from typing import Optional

from asgiref.sync import sync_to_async

from finparse.amounts import extract_amount
from finparse.categories import find_category
from finparse.currencies import extract_currency, guess_currency_by_amount
from finparse.dates import extract_date
from finparse.fuzzy import find_category_fuzzy
from finparse.models import EXPENSE, INCOME, ParsedTransaction
from finparse.settings import ParserConfig, get_config

logger = logging.getLogger(__name__)

# Слова, указывающие на доход
INCOME_KEYWORDS = re.compile(
    r'(?<!\w)(?:получил[аи]?|зарплат|доход|премия|бонус|вернули|income|salary|received|earned|'
    r'bonus|refund|кэшб[эе]к|кешб[эе]к|cashback|возврат|скинули|зачислили|пришло|поступило)',
    re.IGNORECASE,
)
# "+5000 долг", "плюс 300"
INCOME_PATTERNS = (
    re.compile(r'^\s*\+\s*\d'),
    re.compile(r'^\s*(?:плюс|plus)\s+\d', re.IGNORECASE),
)

_PREPOSITIONS = r'(?:на|за|в|во|для|от|до|по|к|on|for|to|from|at|in)'
_LEADING_PREPOSITION = re.compile(r'^' + _PREPOSITIONS + r'(?:\s+|$)', re.IGNORECASE)
_TRAILING_PREPOSITION = re.compile(r'(?:^|\s+)' + _PREPOSITIONS + r'$', re.IGNORECASE)
_EDGE_CHARS = ' ,.;:!?+-\u2013\u2014()"\'«»'
# Числа, оставшиеся после извлечения суммы: "кофе 250 и такси 300", "12/31", "5к"
_LEFTOVER_NUMBER = re.compile(r'(?<!\w)\d+(?:[.,/:\-]\d+)*(?:[кkmb]|\s*%)?(?!\w)', re.IGNORECASE)


def detect_income(text: str) -> bool:
    """
    Определяет, является ли текст доходом.

    Примеры:
    - "получил зарплату 2000" -> True
    - "+5000" -> True
    - "плюс 300 долг" -> True
    - "кофе 200" -> False
    """
    if not text:
        return False
    if INCOME_KEYWORDS.search(text):
        return True
    return any(pattern.search(text) for pattern in INCOME_PATTERNS)


def clean_description(text: str, original: str) -> str:
    """
    Очищает остаток текста после извлечения суммы, валюты и даты.
    Оставшиеся числа удаляются, чтобы повторный разбор описания
    не нашёл в нём другую сумму.
    Если ничего не осталось, возвращает исходный текст.
    """
    description = ' '.join(_LEFTOVER_NUMBER.sub(' ', text).split())

    while True:
        previous = description
        description = description.strip(_EDGE_CHARS)
        description = _LEADING_PREPOSITION.sub('', description)
        description = _TRAILING_PREPOSITION.sub('', description)
        if description == previous:
            break

    if not description:
        return original

    return description[0].upper() + description[1:]


def parse_transaction_text(text: str, today: Optional[date] = None,
                           config: Optional[ParserConfig] = None) -> ParsedTransaction:
    """
    Разбирает текст транзакции.

    Этапы: дата -> валюта -> сумма -> описание -> категория (точная, затем нечёткая)
    -> валюта по величине суммы -> уверенность (вычисляется в ParsedTransaction).
    Каждый этап вырезает найденный фрагмент из рабочего текста.
    Никогда не выбрасывает исключений на некорректном тексте.
    """
    if config is None:
        config = get_config()

    if not isinstance(text, str):
        text = ''

    original = text.strip()
    if len(original) > config.max_text_length:
        logger.warning(
            f"Текст длиной {len(original)} обрезан до {config.max_text_length} символов"
        )
        original = original[:config.max_text_length]

    transaction_type = INCOME if detect_income(original) else EXPENSE

    parsed_date, working = extract_date(original, today)
    currency, working = extract_currency(working)
    amount, working = extract_amount(working)

    description = clean_description(working, original)

    # Категория ищется по исходному тексту: валюта и сумма могут быть её частью
    category = find_category(original)
    if category is None:
        category = find_category_fuzzy(original)

    currency_guessed = False
    if currency is None and amount is not None and config.guess_currency:
        currency = guess_currency_by_amount(amount, original)
        currency_guessed = currency is not None

    result = ParsedTransaction(
        amount=amount,
        currency=currency,
        description=description,
        type=transaction_type,
        category=category,
        date=parsed_date.isoformat() if parsed_date else None,
        currency_guessed=currency_guessed,
    )

    logger.debug(
        f"Parsed '{original}': amount={result.amount}, currency={result.currency}, "
        f"category={result.category}, type={result.type}, date={result.date}, "
        f"confidence={result.confidence}"
    )
    return result


def is_parse_successful(result: ParsedTransaction) -> bool:
    """Разбор успешен, если найдена положительная сумма"""
    return result.amount is not None and result.amount > 0


def make_sync_to_async(func):
    """Создает обертку для синхронной функции для использования в асинхронном контексте"""
    return sync_to_async(func)


parse_transaction_text_async = make_sync_to_async(parse_transaction_text)
