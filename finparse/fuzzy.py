"""
Нечёткий поиск категории: находит категорию даже с опечатками ("кофэ", "таксм").
Используется, только если точное совпадение по ключевым словам не найдено.
"""
import logging
from typing import Optional, Tuple

from finparse.categories import (
    BILLS, ENTERTAINMENT, FOOD, GROCERIES, HEALTH, SHOPPING, TRANSPORT,
    normalize_letters,
)

logger = logging.getLogger(__name__)

# Самые частые слова; порядок важен, первое совпадение побеждает
FUZZY_KEYWORDS: Tuple[Tuple[str, str], ...] = (
    # Food & Dining
    ('кофе', FOOD), ('кафе', FOOD), ('обед', FOOD), ('ужин', FOOD), ('завтрак', FOOD),
    ('ресторан', FOOD), ('пицца', FOOD), ('бургер', FOOD), ('шашлык', FOOD),
    ('шаурма', FOOD), ('суши', FOOD), ('макдональдс', FOOD), ('старбакс', FOOD),
    ('бар', FOOD),
    # Transport
    ('такси', TRANSPORT), ('метро', TRANSPORT), ('автобус', TRANSPORT), ('бензин', TRANSPORT),
    ('заправка', TRANSPORT), ('парковка', TRANSPORT), ('каршеринг', TRANSPORT),
    ('самокат', TRANSPORT),
    # Groceries
    ('продукты', GROCERIES), ('магазин', GROCERIES), ('пятерочка', GROCERIES),
    ('магнит', GROCERIES), ('перекресток', GROCERIES), ('вкусвилл', GROCERIES),
    # Entertainment
    ('кино', ENTERTAINMENT), ('фильм', ENTERTAINMENT), ('концерт', ENTERTAINMENT),
    ('театр', ENTERTAINMENT), ('нетфликс', ENTERTAINMENT), ('спотифай', ENTERTAINMENT),
    # Shopping
    ('одежда', SHOPPING), ('обувь', SHOPPING), ('вайлдберриз', SHOPPING), ('озон', SHOPPING),
    # Health
    ('аптека', HEALTH), ('лекарства', HEALTH), ('врач', HEALTH), ('стоматолог', HEALTH),
    ('фитнес', HEALTH), ('спортзал', HEALTH),
    # Bills & Utilities
    ('интернет', BILLS), ('телефон', BILLS), ('аренда', BILLS), ('коммуналка', BILLS),
    ('мтс', BILLS),
)

MIN_WORD_LENGTH = 3
SHORT_KEYWORD_LENGTH = 3
_PUNCTUATION = '.,!?;:()"\'«»'


def levenshtein(a: str, b: str) -> int:
    """
    Вычисляет расстояние Левенштейна между двумя строками.
    Полная матрица (len(b) + 1) x (len(a) + 1), все операции стоят 1.
    """
    matrix = [[0] * (len(a) + 1) for _ in range(len(b) + 1)]

    for i in range(len(b) + 1):
        matrix[i][0] = i
    for j in range(len(a) + 1):
        matrix[0][j] = j

    for i in range(1, len(b) + 1):
        for j in range(1, len(a) + 1):
            if b[i - 1] == a[j - 1]:
                matrix[i][j] = matrix[i - 1][j - 1]
            else:
                matrix[i][j] = min(
                    matrix[i - 1][j - 1] + 1,  # замена
                    matrix[i][j - 1] + 1,      # вставка
                    matrix[i - 1][j] + 1,      # удаление
                )

    return matrix[len(b)][len(a)]


def is_similar(word: str, target: str, threshold: int = 2) -> bool:
    """Проверяет, похоже ли слово на целевое с учётом допустимых опечаток."""
    word = normalize_letters(word)
    target = normalize_letters(target)

    # Короткие слова - только точное совпадение
    if len(target) <= SHORT_KEYWORD_LENGTH:
        return word == target

    max_distance = min(threshold, len(target) // 3)
    return levenshtein(word, target) <= max_distance


def find_category_fuzzy(text: str) -> Optional[str]:
    """
    Ищет категорию нечётким сравнением слов текста со списком FUZZY_KEYWORDS.

    Слова перебираются по порядку, для каждого слова - все ключевые слова;
    побеждает первая подходящая пара.
    """
    if not text:
        return None

    for raw_word in text.lower().split():
        word = raw_word.strip(_PUNCTUATION)
        if len(word) < MIN_WORD_LENGTH:
            continue

        for keyword, category in FUZZY_KEYWORDS:
            if is_similar(word, keyword):
                logger.debug(f"Fuzzy category '{word}' ~ '{keyword}' -> {category}")
                return category

    return None
