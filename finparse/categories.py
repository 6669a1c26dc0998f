"""
Shared definitions for transaction categories.
Объединенные ключевые слова для категорий (русские + английские).

Категории проверяются строго по порядку CATEGORY_PATTERNS, первое совпадение
побеждает. Пересечения ключевых слов между категориями ('газ', 'телефон',
'мясо') решаются только позицией в списке.
"""
import re
import logging
from typing import Iterable, Optional, Tuple

logger = logging.getLogger(__name__)

FOOD = 'Food & Dining'
TRANSPORT = 'Transport'
ENTERTAINMENT = 'Entertainment'
SHOPPING = 'Shopping'
GROCERIES = 'Groceries'
BILLS = 'Bills & Utilities'
HEALTH = 'Health'
EDUCATION = 'Education'
TRAVEL = 'Travel'
PERSONAL_CARE = 'Personal Care'
PETS = 'Pets'
KIDS = 'Kids'
GIFTS = 'Gifts & Donations'
HOME = 'Home & Garden'
ELECTRONICS = 'Electronics'
SERVICES = 'Services'
SUBSCRIPTIONS = 'Subscriptions'

FOOD_KEYWORDS = (
    'еда', 'обед', 'ужин', 'завтрак', 'ланч', 'кофе', 'кофейня', 'чай', 'латте', 'капучино',
    'ресторан', 'кафе', 'столовая', 'фудкорт', 'бар', 'пицца', 'бургер', 'суши', 'роллы', 'рамен',
    'шашлык', 'шаурма', 'шава', 'донер', 'кебаб', 'гриль', 'стейк', 'мясо', 'курица',
    'макдональдс', 'макдак', 'бургер кинг', 'кфс', 'kfc', 'сабвей', 'додо', 'папа джонс',
    'шоколадница', 'старбакс', 'starbucks', 'теремок', 'тануки', 'вкусно и точка',
    'яндекс еда', 'delivery club', 'деливери', 'лавка', 'food', 'lunch', 'dinner', 'breakfast',
    'coffee', 'restaurant', 'cafe', 'pizza', 'burger', 'sushi', 'mcdonalds', 'ubereats',
)

TRANSPORT_KEYWORDS = (
    'такси', 'taxi', 'убер', 'uber', 'болт', 'bolt', 'ситимобил', 'яндекс такси',
    'яндекс го', 'gett', 'максим', 'везёт', 'диди', 'didi', 'grab', 'lyft', 'метро', 'metro',
    'subway', 'автобус', 'bus', 'маршрутка', 'трамвай', 'электричка', 'поезд', 'train', 'ржд',
    'каршеринг', 'делимобиль', 'яндекс драйв', 'самокат', 'scooter', 'велосипед', 'bike', 'whoosh',
    'бензин', 'газ', 'топливо', 'азс', 'заправка', 'gas', 'fuel', 'лукойл', 'газпром', 'shell',
    'парковка', 'parking', 'blablacar', 'авиа', 'самолёт', 'flight', 'аэрофлот', 's7', 'победа',
)

ENTERTAINMENT_KEYWORDS = (
    'кино', 'кинотеатр', 'cinema', 'movie', 'фильм', 'театр', 'theater', 'опера',
    'концерт', 'concert', 'шоу', 'фестиваль', 'выставка', 'музей', 'стендап', 'игра', 'game',
    'стим', 'steam', 'playstation', 'ps5', 'xbox', 'nintendo', 'донат', 'нетфликс', 'netflix',
    'кинопоиск', 'иви', 'okko', 'wink', 'ютуб премиум', 'youtube', 'twitch', 'спотифай', 'spotify',
    'яндекс музыка', 'apple music', 'клуб', 'паб', 'караоке', 'боулинг', 'бильярд', 'квест',
)

SHOPPING_KEYWORDS = (
    'одежда', 'шмотки', 'clothes', 'футболка', 'джинсы', 'куртка', 'платье', 'юбка',
    'брюки', 'свитер', 'худи', 'обувь', 'shoes', 'кроссовки', 'ботинки', 'сумка', 'bag', 'рюкзак',
    'zara', 'h&m', 'uniqlo', 'mango', 'adidas', 'nike', 'puma', 'gucci', 'wildberries', 'вайлдберриз',
    'вб', 'wb', 'ozon', 'озон', 'lamoda', 'aliexpress', 'али', 'amazon', 'авито', 'покупка',
    'shopping', 'магазин', 'store', 'тц', 'mall', 'мега', 'ikea', 'икея',
)

GROCERIES_KEYWORDS = (
    'продукты', 'groceries', 'молоко', 'хлеб', 'яйца', 'овощи', 'фрукты', 'мясо',
    'рыба', 'сыр', 'масло', 'сметана', 'йогурт', 'творог', 'крупа', 'рис', 'гречка', 'макароны',
    'пятёрочка', 'пятерочка', 'магнит', 'перекрёсток', 'перекресток', 'дикси', 'лента', 'ашан',
    'вкусвилл', 'азбука вкуса', 'глобус', 'окей', 'lidl', 'aldi', 'walmart', 'рынок', 'market',
)

BILLS_KEYWORDS = (
    'аренда', 'rent', 'квартира', 'квартплата', 'ипотека', 'коммуналка', 'жкх',
    'электричество', 'свет', 'газ', 'вода', 'отопление', 'интернет', 'internet', 'wifi',
    'ростелеком', 'билайн', 'телефон', 'phone', 'мобильный', 'мтс', 'мегафон', 'теле2', 'йота',
    'icloud', 'google one', 'dropbox', 'облако', 'счёт', 'счет', 'bill', 'штраф', 'налог', 'tax',
)

HEALTH_KEYWORDS = (
    'врач', 'doctor', 'клиника', 'больница', 'поликлиника', 'стоматолог', 'dentist',
    'зубы', 'анализы', 'узи', 'мрт', 'аптека', 'pharmacy', 'лекарства', 'таблетки', 'витамины',
    'спортзал', 'gym', 'фитнес', 'fitness', 'тренировка', 'workout', 'тренер', 'бассейн', 'pool',
    'йога', 'yoga', 'пилатес', 'world class', 'x-fit', 'спа', 'spa', 'массаж',
)

EDUCATION_KEYWORDS = (
    'образование', 'education', 'учёба', 'учеба', 'курсы', 'course', 'обучение',
    'школа', 'school', 'университет', 'вуз', 'репетитор', 'tutor', 'книга', 'book', 'учебник',
    'skillbox', 'geekbrains', 'нетология', 'coursera', 'udemy', 'stepik', 'яндекс практикум',
    'английский', 'english', 'язык', 'language', 'skyeng', 'duolingo',
)

TRAVEL_KEYWORDS = (
    'путешествие', 'travel', 'поездка', 'trip', 'отпуск', 'vacation', 'отель', 'hotel',
    'гостиница', 'хостел', 'airbnb', 'бронирование', 'booking', 'виза', 'visa', 'паспорт',
    'страховка', 'экскурсия', 'tour', 'чемодан', 'багаж', 'букинг', 'островок', 'aviasales', 'туту',
)

PERSONAL_CARE_KEYWORDS = (
    'красота', 'beauty', 'уход', 'косметика', 'макияж', 'крем', 'шампунь', 'парфюм',
    'парикмахерская', 'барбершоп', 'салон красоты', 'стрижка', 'haircut', 'маникюр', 'педикюр',
    'ногти', 'брови', 'ресницы', 'эпиляция', 'лэтуаль', 'рив гош', 'золотое яблоко', 'sephora',
)

PETS_KEYWORDS = (
    'питомец', 'pet', 'животное', 'собака', 'dog', 'пёс', 'щенок', 'кот', 'cat', 'кошка',
    'котёнок', 'корм', 'вискас', 'purina', 'royal canin', 'ветеринар', 'vet', 'зоомагазин',
    'четыре лапы', 'лоток', 'наполнитель', 'поводок', 'ошейник',
)

KIDS_KEYWORDS = (
    'ребёнок', 'ребенок', 'child', 'дети', 'kids', 'детский сад', 'садик', 'игрушка',
    'toy', 'лего', 'подгузники', 'памперсы', 'huggies', 'детское питание', 'смесь', 'детский мир',
    'mothercare', 'кружок', 'секция', 'няня',
)

GIFTS_KEYWORDS = (
    'подарок', 'gift', 'день рождения', 'birthday', 'праздник', 'цветы', 'flowers',
    'букет', 'благотворительность', 'charity', 'donation', 'пожертвование', 'фонд',
)

HOME_KEYWORDS = (
    'мебель', 'furniture', 'диван', 'стол', 'стул', 'кровать', 'шкаф', 'hoff',
    'leroy merlin', 'леруа', 'оби', 'ремонт', 'repair', 'краска', 'обои', 'плитка', 'инструмент',
    'дрель', 'сад', 'garden', 'дача', 'растения', 'уборка', 'cleaning', 'клининг', 'химчистка',
)

ELECTRONICS_KEYWORDS = (
    'электроника', 'electronics', 'техника', 'телефон', 'смартфон', 'айфон',
    'iphone', 'samsung', 'xiaomi', 'ноутбук', 'laptop', 'компьютер', 'макбук', 'планшет', 'ipad',
    'наушники', 'airpods', 'телевизор', 'tv', 'камера', 'зарядка', 'charger', 'мвидео', 'эльдорадо',
    'dns', 'ситилинк', 'технопарк',
)

SERVICES_KEYWORDS = (
    'услуга', 'service', 'доставка', 'delivery', 'курьер', 'мастер', 'сантехник',
    'электрик', 'нотариус', 'юрист', 'адвокат', 'переводчик', 'фотограф', 'типография', 'печать',
)

SUBSCRIPTIONS_KEYWORDS = (
    'подписка', 'subscription', 'premium', 'премиум', 'pro', 'chatgpt', 'gpt',
    'notion', 'vpn', 'антивирус', 'kaspersky', 'adobe', 'photoshop', 'figma', 'microsoft', 'office',
    'github', 'copilot',
)

# Ключевые слова не длиннее этого совпадают только целым словом ("кот", но не "котлета")
SHORT_KEYWORD_LENGTH = 3


def normalize_letters(text: str) -> str:
    return text.lower().replace('ё', 'е')


def keyword_pattern(keywords: Iterable[str]) -> re.Pattern:
    """
    Собирает одно регулярное выражение из списка ключевых слов.

    Слово должно начинаться с начала слова в тексте; длинным ключевым словам
    разрешено любое окончание ("ресторан" -> "рестораны", "аренда" -> "аренды").
    """
    parts = []
    for keyword in sorted({normalize_letters(k) for k in keywords}, key=lambda k: (-len(k), k)):
        escaped = re.escape(keyword)
        if len(keyword) <= SHORT_KEYWORD_LENGTH:
            parts.append(escaped + r'(?!\w)')
        else:
            parts.append(escaped)
    return re.compile(r'(?<!\w)(?:' + '|'.join(parts) + ')', re.IGNORECASE)


# Порядок - приоритет категорий
CATEGORY_PATTERNS: Tuple[Tuple[str, re.Pattern], ...] = (
    (FOOD, keyword_pattern(FOOD_KEYWORDS)),
    (TRANSPORT, keyword_pattern(TRANSPORT_KEYWORDS)),
    (ENTERTAINMENT, keyword_pattern(ENTERTAINMENT_KEYWORDS)),
    (SHOPPING, keyword_pattern(SHOPPING_KEYWORDS)),
    (GROCERIES, keyword_pattern(GROCERIES_KEYWORDS)),
    (BILLS, keyword_pattern(BILLS_KEYWORDS)),
    (HEALTH, keyword_pattern(HEALTH_KEYWORDS)),
    (EDUCATION, keyword_pattern(EDUCATION_KEYWORDS)),
    (TRAVEL, keyword_pattern(TRAVEL_KEYWORDS)),
    (PERSONAL_CARE, keyword_pattern(PERSONAL_CARE_KEYWORDS)),
    (PETS, keyword_pattern(PETS_KEYWORDS)),
    (KIDS, keyword_pattern(KIDS_KEYWORDS)),
    (GIFTS, keyword_pattern(GIFTS_KEYWORDS)),
    (HOME, keyword_pattern(HOME_KEYWORDS)),
    (ELECTRONICS, keyword_pattern(ELECTRONICS_KEYWORDS)),
    (SERVICES, keyword_pattern(SERVICES_KEYWORDS)),
    (SUBSCRIPTIONS, keyword_pattern(SUBSCRIPTIONS_KEYWORDS)),
)

CATEGORY_LABELS = tuple(label for label, _ in CATEGORY_PATTERNS)


def find_category(text: str) -> Optional[str]:
    """Return the first category whose keywords occur in the text."""
    if not text:
        return None

    normalized = normalize_letters(text)
    for category, pattern in CATEGORY_PATTERNS:
        match = pattern.search(normalized)
        if match:
            logger.debug(f"Category matched by keyword '{match.group(0)}' -> {category}")
            return category

    return None
