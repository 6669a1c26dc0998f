"""
Извлечение даты из свободного текста.
Поддерживает относительные даты (вчера, 3 дня назад, в понедельник)
и абсолютные (15 января, jan 15, 25.12.2023).
"""
import re
import logging
from datetime import date, timedelta
from types import MappingProxyType
from typing import Callable, Optional, Tuple

from dateutil.relativedelta import relativedelta

logger = logging.getLogger(__name__)

MONTHS = MappingProxyType({
    # Русские названия
    'января': 1, 'январь': 1, 'янв': 1,
    'февраля': 2, 'февраль': 2, 'фев': 2,
    'марта': 3, 'март': 3, 'мар': 3,
    'апреля': 4, 'апрель': 4, 'апр': 4,
    'мая': 5, 'май': 5,
    'июня': 6, 'июнь': 6, 'июн': 6,
    'июля': 7, 'июль': 7, 'июл': 7,
    'августа': 8, 'август': 8, 'авг': 8,
    'сентября': 9, 'сентябрь': 9, 'сент': 9, 'сен': 9,
    'октября': 10, 'октябрь': 10, 'окт': 10,
    'ноября': 11, 'ноябрь': 11, 'ноя': 11,
    'декабря': 12, 'декабрь': 12, 'дек': 12,
    # Английские названия
    'january': 1, 'jan': 1, 'february': 2, 'feb': 2,
    'march': 3, 'mar': 3, 'april': 4, 'apr': 4,
    'may': 5, 'june': 6, 'jun': 6, 'july': 7, 'jul': 7,
    'august': 8, 'aug': 8, 'september': 9, 'sept': 9, 'sep': 9,
    'october': 10, 'oct': 10, 'november': 11, 'nov': 11,
    'december': 12, 'dec': 12,
})

# 0 = понедельник, как date.weekday()
WEEKDAYS = MappingProxyType({
    'понедельник': 0, 'пн': 0,
    'вторник': 1, 'вт': 1,
    'среда': 2, 'среду': 2, 'ср': 2,
    'четверг': 3, 'чт': 3,
    'пятница': 4, 'пятницу': 4, 'пт': 4,
    'суббота': 5, 'субботу': 5, 'сб': 5,
    'воскресенье': 6, 'вс': 6,
    'monday': 0, 'tuesday': 1, 'wednesday': 2, 'thursday': 3,
    'friday': 4, 'saturday': 5, 'sunday': 6,
})

# Английские сокращения совпадают с обычными словами ("sun cream"),
# поэтому принимаются только после "on"/"last"
WEEKDAY_ABBREVIATIONS = MappingProxyType({
    'mon': 0, 'tues': 1, 'tue': 1, 'wed': 2,
    'thurs': 3, 'thur': 3, 'thu': 3, 'fri': 4, 'sat': 5, 'sun': 6,
})


def _alternation(words) -> str:
    return '|'.join(re.escape(w) for w in sorted(words, key=lambda w: (-len(w), w)))


_FLAGS = re.IGNORECASE

RELATIVE_DAYS = (
    # "day before yesterday" раньше, чем "yesterday"
    (re.compile(r'(?<!\w)(?:позавчера|(?:the\s+)?day\s+before\s+yesterday)(?!\w)', _FLAGS), 2),
    (re.compile(r'(?<!\w)(?:вчера|yesterday)(?!\w)', _FLAGS), 1),
    (re.compile(r'(?<!\w)(?:сегодня|today)(?!\w)', _FLAGS), 0),
)

_DAYS_AGO = re.compile(r'(?<!\w)(\d+)\s*(?:день|дня|дней|days?)\s+(?:назад|ago)(?!\w)', _FLAGS)
_WEEKS_AGO = re.compile(r'(?<!\w)(\d+)\s*(?:неделю|недели|недель|weeks?)\s+(?:назад|ago)(?!\w)', _FLAGS)
_MONTHS_AGO = re.compile(r'(?<!\w)(\d+)\s*(?:месяц|месяца|месяцев|months?)\s+(?:назад|ago)(?!\w)', _FLAGS)
_WEEK_AGO = re.compile(r'(?<!\w)(?:(?:a|one)\s+)?(?:неделю|week)\s+(?:назад|ago)(?!\w)', _FLAGS)
_MONTH_AGO = re.compile(r'(?<!\w)(?:(?:a|one)\s+)?(?:месяц|month)\s+(?:назад|ago)(?!\w)', _FLAGS)

_WEEKDAY = re.compile(
    r'(?<!\w)(?:(?:в|во|on|last)\s+)?(' + _alternation(WEEKDAYS) + r')(?!\w)', _FLAGS
)
_WEEKDAY_ABBREVIATION = re.compile(
    r'(?<!\w)(?:on|last)\s+(' + _alternation(WEEKDAY_ABBREVIATIONS) + r')\.?(?!\w)', _FLAGS
)

_MONTH_NAMES = _alternation(MONTHS)
_ORDINAL = r'(?:st|nd|rd|th)?'
# Год только 19xx/20xx: в "15 декабря 3000" 3000 - это сумма
_YEAR = r'((?:19|20)\d{2})(?!\d)'
_DAY_MONTH = re.compile(
    r'(?<!\d)(\d{1,2})' + _ORDINAL + r'\s*(?:of\s+)?(' + _MONTH_NAMES + r')(?!\w)(?:\s+' + _YEAR + r')?', _FLAGS
)
_MONTH_DAY = re.compile(
    r'(?<!\w)(' + _MONTH_NAMES + r')\s*(\d{1,2})' + _ORDINAL + r'(?!\w)(?:,?\s+' + _YEAR + r')?', _FLAGS
)

_NUMERIC = re.compile(r'(?<![\d.,/-])(\d{1,2})([./-])(\d{1,2})(?:\2(\d{4}|\d{2}))?(?![\d.,/-]?\d)')


def _remove(text: str, start: int, end: int) -> str:
    return text[:start] + ' ' + text[end:]


def _safe_date(year: int, month: int, day: int) -> Optional[date]:
    try:
        return date(year, month, day)
    except ValueError:
        logger.debug(f"Invalid date {day:02d}.{month:02d}.{year}")
        return None


def _retrospective(day: int, month: int, today: date) -> Optional[date]:
    """
    Ближайшая прошедшая дата с таким днём и месяцем: в текущем году,
    если она уже наступила, иначе в прошлом. 29 февраля ищется
    в последнем високосном году.
    """
    # Между високосными годами не бывает больше 8 лет
    for year in range(today.year, today.year - 9, -1):
        try:
            result = date(year, month, day)
        except ValueError:
            continue
        if result <= today:
            return result
    logger.debug(f"Invalid date {day:02d}.{month:02d}")
    return None


def last_weekday(weekday: int, today: date) -> date:
    """Ближайший прошедший день недели. Сегодняшний день не возвращается никогда."""
    diff = (today.weekday() - weekday) % 7
    if diff == 0:
        diff = 7
    return today - timedelta(days=diff)


def _relative_day(text: str, today: date):
    for pattern, offset in RELATIVE_DAYS:
        match = pattern.search(text)
        if match:
            return today - timedelta(days=offset), match
    return None


def _ago(text: str, today: date):
    intervals = (
        (_DAYS_AGO, lambda n: timedelta(days=n)),
        (_WEEKS_AGO, lambda n: timedelta(weeks=n)),
        (_MONTHS_AGO, lambda n: relativedelta(months=n)),
    )
    for pattern, interval in intervals:
        match = pattern.search(text)
        if match:
            return today - interval(int(match.group(1))), match

    match = _WEEK_AGO.search(text)
    if match:
        return today - timedelta(days=7), match

    match = _MONTH_AGO.search(text)
    if match:
        return today - relativedelta(months=1), match

    return None


def _weekday(text: str, today: date):
    for pattern, names in ((_WEEKDAY, WEEKDAYS), (_WEEKDAY_ABBREVIATION, WEEKDAY_ABBREVIATIONS)):
        match = pattern.search(text)
        if match:
            return last_weekday(names[match.group(1).lower()], today), match
    return None


def _named_month(text: str, today: date):
    """
    "15 января", "jan 15, 2024". Несуществующая дата ("31 апреля")
    возвращается как (None, match): фраза всё равно вырезается из текста.
    """
    impossible = None
    for pattern, day_group, month_group in ((_DAY_MONTH, 1, 2), (_MONTH_DAY, 2, 1)):
        for match in pattern.finditer(text):
            day = int(match.group(day_group))
            month = MONTHS[match.group(month_group).lower()]
            if match.group(3):
                result = _safe_date(int(match.group(3)), month, day)
            else:
                result = _retrospective(day, month, today)
            if result is not None:
                return result, match
            if impossible is None:
                impossible = (None, match)
    return impossible


def _numeric(text: str, today: date):
    impossible = None
    for match in _NUMERIC.finditer(text):
        day, month = int(match.group(1)), int(match.group(3))
        year_str = match.group(4)

        if not (1 <= day <= 31 and 1 <= month <= 12):
            continue

        if year_str:
            year = int(year_str)
            if len(year_str) == 2:
                year += 1900 if year >= 50 else 2000
            result = _safe_date(year, month, day)
        else:
            # "кофе 3.20" - это сумма, а не 3 февраля: без года дата
            # принимается, только если в тексте остаётся другое число
            rest = text[:match.start()] + text[match.end():]
            if not re.search(r'\d', rest):
                continue
            result = _retrospective(day, month, today)

        if result is not None:
            return result, match
        if impossible is None:
            impossible = (None, match)
    return impossible


# Порядок правил важен: срабатывает первое подходящее
DATE_RULES: Tuple[Callable, ...] = (_relative_day, _ago, _weekday, _named_month, _numeric)


def extract_date(text: str, today: Optional[date] = None) -> Tuple[Optional[date], str]:
    """
    Извлекает дату из текста и возвращает кортеж (дата, текст_без_даты).

    Примеры (today = 2025-03-12, среда):
    - "кофе 200 вчера" -> (date(2025, 3, 11), "кофе 200  ")
    - "такси 500 в понедельник" -> (date(2025, 3, 10), "такси 500  ")
    - "подарок 15 декабря 3000" -> (date(2024, 12, 15), "подарок   3000")
    - "Продукты 1500" -> (None, "Продукты 1500")
    - "31 апреля такси 300" -> (None, "  такси 300"): несуществующая дата вырезается
    """
    if not text:
        return None, text

    if today is None:
        today = date.today()

    for rule in DATE_RULES:
        found = rule(text, today)
        if found:
            result, match = found
            remaining = _remove(text, match.start(), match.end())
            if result is None:
                logger.debug(f"Impossible date '{match.group(0)}' removed ({rule.__name__})")
                return None, remaining
            logger.debug(f"Date '{match.group(0)}' -> {result.isoformat()} ({rule.__name__})")
            return result, remaining

    return None, text
