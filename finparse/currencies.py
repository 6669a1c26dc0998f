"""
Определение валюты по тексту.
Поддерживает символы ($, €, ₽ ...), ISO-коды и русские/английские названия валют.
"""
import re
import logging
from decimal import Decimal
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

# Русское слово не должно начинаться внутри другого слова ("бат" в "батон")
_RU = r'(?<![а-яё])'
_RU_END = r'(?![а-яё])'


def _p(pattern: str, flags: int = re.IGNORECASE) -> re.Pattern:
    return re.compile(pattern, flags)


# Порядок важен: первое совпадение побеждает.
# Уточнённые формы ("белорусских рублей", "R$") идут раньше общих ("рублей", "$").
CURRENCY_PATTERNS: Tuple[Tuple[re.Pattern, str], ...] = (
    # Уточнённые названия
    (_p(_RU + r'бел[ао]русск\w*\s+руб\w*'), 'BYN'),
    (_p(r'\bbelarusian\s+rub\w*'), 'BYN'),
    (_p(_RU + r'сингапурск\w*\s+долл\w*'), 'SGD'),
    (_p(r'\bsingapore\s+dollars?\b'), 'SGD'),
    (_p(_RU + r'индийск\w*\s+рупи\w*'), 'INR'),
    (_p(r'\bindian\s+rupees?\b'), 'INR'),
    (_p(r'R\$', 0), 'BRL'),

    # RUB - российский рубль
    (_p(_RU + r'руб(?:л[яиеьюй]*)?' + _RU_END + r'\.?'), 'RUB'),
    (_p(r'₽'), 'RUB'),
    (_p(_RU + r'р\.?' + _RU_END), 'RUB'),
    (_p(r'\brub(?:les?)?\b'), 'RUB'),

    # USD - доллар США
    (_p(_RU + r'(?:доллар(?:ов|а|ы)?|долл?\.?' + _RU_END + r'|бакс(?:ов|а|ы)?)'), 'USD'),
    (_p(r'\$'), 'USD'),
    (_p(r'\busd\b'), 'USD'),
    (_p(r'\bdollars?\b'), 'USD'),
    (_p(r'\bbucks?\b'), 'USD'),
    (_p(_RU + r'американск\w*'), 'USD'),

    # EUR - евро
    (_p(_RU + r'евро' + _RU_END), 'EUR'),
    (_p(r'€'), 'EUR'),
    (_p(r'\beur(?:os?)?\b'), 'EUR'),

    # IDR - индонезийская рупия
    (_p(_RU + r'рупи[йяиюе]' + _RU_END), 'IDR'),
    (_p(r'\bidr\b'), 'IDR'),
    (_p(r'\brupiah\b'), 'IDR'),
    (_p(_RU + r'индонезийск\w*'), 'IDR'),

    # CNY - китайский юань
    (_p(_RU + r'юан(?:ь|я|ей|и|ю)?' + _RU_END), 'CNY'),
    (_p(r'\b(?:cny|rmb|yuan)\b'), 'CNY'),
    (_p(r'¥'), 'CNY'),
    (_p(_RU + r'китайск\w*'), 'CNY'),

    # KRW - южнокорейская вона; "вон" без окончания - только сразу после числа
    (_p(_RU + r'вон(?:ов|а|ы)' + _RU_END), 'KRW'),
    (_p(r'(?:(?<=\d)|(?<=\d\s))вон' + _RU_END), 'KRW'),
    (_p(r'\bkrw\b'), 'KRW'),
    (_p(r'₩'), 'KRW'),
    (_p(_RU + r'корейск\w*'), 'KRW'),

    # KZT - казахстанский тенге
    (_p(_RU + r'тенге' + _RU_END), 'KZT'),
    (_p(r'\b(?:kzt|tenge)\b'), 'KZT'),
    (_p(r'₸'), 'KZT'),

    # UAH - украинская гривна
    (_p(_RU + r'грив(?:н[аыуеіи]?|ен)' + _RU_END), 'UAH'),
    (_p(_RU + r'грн\.?'), 'UAH'),
    (_p(r'\b(?:uah|hryvnia)\b'), 'UAH'),
    (_p(r'₴'), 'UAH'),

    # BYN - белорусский рубль
    (_p(r'\b(?:byn|byr)\b'), 'BYN'),

    # GEL - грузинский лари
    (_p(_RU + r'лари' + _RU_END), 'GEL'),
    # "gel" - ещё и гель для душа, поэтому только заглавными
    (_p(r'\bGEL\b', 0), 'GEL'),
    (_p(r'\blari\b'), 'GEL'),
    (_p(r'₾'), 'GEL'),

    # THB - тайский бат
    (_p(_RU + r'бат(?:ов|а|ы)?' + _RU_END), 'THB'),
    (_p(r'\b(?:thb|baht)\b'), 'THB'),
    (_p(r'฿'), 'THB'),

    # VND - вьетнамский донг
    (_p(_RU + r'донг(?:ов|а|и)?' + _RU_END), 'VND'),
    (_p(r'\b(?:vnd|dong)\b'), 'VND'),
    (_p(r'₫'), 'VND'),

    # TRY - турецкая лира
    (_p(_RU + r'лир(?:а|ы|у|е)?' + _RU_END), 'TRY'),
    # "try" - английский глагол, поэтому только заглавными
    (_p(r'\b(?:TRY|TL)\b', 0), 'TRY'),
    (_p(r'\bliras?\b'), 'TRY'),
    (_p(r'₺'), 'TRY'),

    # AED - дирхам ОАЭ
    (_p(_RU + r'дирхам(?:ов|а|ы)?' + _RU_END), 'AED'),
    (_p(r'\b(?:aed|dirhams?)\b'), 'AED'),

    # GBP - британский фунт
    (_p(_RU + r'фунт(?:ов|а|ы)?(?:\s*стерлинг\w*)?' + _RU_END), 'GBP'),
    (_p(r'\b(?:gbp|pounds?|quid)\b'), 'GBP'),
    (_p(r'£'), 'GBP'),

    # JPY - японская иена
    (_p(_RU + r'[йи]ен(?:а|ы|у|е)?' + _RU_END), 'JPY'),
    (_p(r'\b(?:jpy|yen)\b'), 'JPY'),

    # PLN - польский злотый
    (_p(_RU + r'злот(?:ых|ый|ого|ые)?' + _RU_END), 'PLN'),
    (_p(r'\b(?:pln|zloty)\b'), 'PLN'),
    (_p(r'zł'), 'PLN'),

    # CZK - чешская крона
    (_p(_RU + r'крон(?:ы|а|у)?' + _RU_END), 'CZK'),
    (_p(r'\bczk\b'), 'CZK'),
    (_p(r'Kč'), 'CZK'),

    # INR - индийская рупия
    (_p(r'\b(?:inr|rupees?)\b'), 'INR'),
    (_p(r'₹'), 'INR'),

    # SGD - сингапурский доллар
    (_p(r'\bsgd\b'), 'SGD'),

    # ARS - аргентинское песо
    (_p(_RU + r'песо' + _RU_END), 'ARS'),
    (_p(r'\b(?:ars|pesos?)\b'), 'ARS'),

    # BRL - бразильский реал
    (_p(_RU + r'реал(?:ов|а|ы)?' + _RU_END), 'BRL'),
    (_p(r'\b(?:brl|reais)\b'), 'BRL'),

    # CHF - швейцарский франк
    (_p(_RU + r'франк(?:ов|а|и)?' + _RU_END), 'CHF'),
    (_p(r'\b(?:chf|francs?)\b'), 'CHF'),

    # UZS - узбекский сум
    (_p(_RU + r'сум(?:ов|ы|а)?' + _RU_END), 'UZS'),
    (_p(r"\b(?:uzs|so['’]m)\b"), 'UZS'),

    # AMD - армянский драм
    (_p(_RU + r'драм(?:ов|а|ы)?' + _RU_END), 'AMD'),
    (_p(r'\b(?:amd|dram)\b'), 'AMD'),
)

# Контекст для угадывания валюты по величине суммы
_IDR_CONTEXT = re.compile(r'индонези|бали|джакарта|рупи|indonesia|bali|jakarta|rupiah', re.IGNORECASE)
_KRW_CONTEXT = re.compile(r'коре|сеул|' + _RU + r'вон(?:ов|а|ы)' + _RU_END + r'|korea|seoul|\bwon\b', re.IGNORECASE)

LARGE_AMOUNT = Decimal(100000)
MEDIUM_AMOUNT = Decimal(10000)


def extract_currency(text: str) -> Tuple[Optional[str], str]:
    """
    Извлекает валюту из текста и возвращает кортеж (код_валюты, текст_без_валюты).

    Примеры:
    - "шашлык 500 руб" -> ("RUB", "шашлык 500  ")
    - "coffee $5" -> ("USD", "coffee  5")
    - "обед 300" -> (None, "обед 300")
    """
    if not text:
        return None, text

    for pattern, currency in CURRENCY_PATTERNS:
        match = pattern.search(text)
        if match:
            logger.debug(f"Currency '{match.group(0)}' -> {currency}")
            return currency, text[:match.start()] + ' ' + text[match.end():]

    return None, text


def guess_currency_by_amount(amount: Optional[Decimal], text: str) -> Optional[str]:
    """
    Угадывает валюту по величине суммы, когда явной валюты в тексте нет.
    Большие суммы обычно в рублях, рупиях или вонах.
    """
    if amount is None:
        return None

    if amount >= LARGE_AMOUNT:
        if _IDR_CONTEXT.search(text or ''):
            return 'IDR'
        if _KRW_CONTEXT.search(text or ''):
            return 'KRW'
        return 'RUB'

    if amount >= MEDIUM_AMOUNT:
        return 'RUB'

    return None
