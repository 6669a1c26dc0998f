import sys
import os
import unittest
from decimal import Decimal

# Add project root to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from finparse.number_words import find_word_number, parse_word_number, ALL_WORDS, RU_UNITS


def value_of(text):
    result = parse_word_number(text)
    return result.value if result else None


class TestNumberWords(unittest.TestCase):
    def test_simple_numbers_en(self):
        self.assertEqual(value_of("one"), 1)
        self.assertEqual(value_of("five"), 5)
        self.assertEqual(value_of("ten"), 10)
        self.assertEqual(value_of("nineteen"), 19)

    def test_simple_numbers_ru(self):
        self.assertEqual(value_of("один"), 1)
        self.assertEqual(value_of("пять"), 5)
        self.assertEqual(value_of("десять"), 10)
        self.assertEqual(value_of("триста"), 300)

    def test_composite_numbers_en(self):
        self.assertEqual(value_of("twenty one"), 21)
        self.assertEqual(value_of("forty-five"), 45)
        self.assertEqual(value_of("one hundred fifty"), 150)
        self.assertEqual(value_of("one hundred and fifty"), 150)
        self.assertEqual(value_of("three thousand"), 3000)
        self.assertEqual(value_of("twenty five thousand"), 25000)
        self.assertEqual(value_of("one million"), 1000000)

    def test_composite_numbers_ru(self):
        self.assertEqual(value_of("двадцать один"), 21)
        self.assertEqual(value_of("сто пятьдесят"), 150)
        self.assertEqual(value_of("две тысячи"), 2000)
        self.assertEqual(value_of("пять тысяч"), 5000)
        self.assertEqual(value_of("триста тысяч"), 300000)
        self.assertEqual(value_of("сто двадцать три тысячи четыреста пятьдесят шесть"), 123456)

    def test_matched_text_stops_at_first_non_number(self):
        result = parse_word_number("две тысячи пятьсот рублей")
        self.assertEqual(result.value, 2500)
        self.assertEqual(result.matched_text, "две тысячи пятьсот")

    def test_slang(self):
        self.assertEqual(value_of("косарь"), 1000)
        self.assertEqual(value_of("полтинник"), 50)
        self.assertEqual(value_of("пятихатка"), 500)
        self.assertEqual(value_of("dozen"), 12)

    def test_fraction_words_need_multiplier(self):
        self.assertEqual(value_of("полтора миллиона"), Decimal(1500000))
        self.assertEqual(value_of("полторы тысячи"), 1500)
        self.assertIsNone(parse_word_number("полтора"))
        self.assertIsNone(parse_word_number("пол"))

    def test_articles(self):
        self.assertEqual(value_of("a hundred"), 100)
        self.assertEqual(value_of("a grand"), 1000)
        self.assertIsNone(parse_word_number("a coffee"))

    def test_edge_cases(self):
        # Case insensitivity
        self.assertEqual(value_of("Two Hundred"), 200)
        self.assertEqual(value_of("Двести"), 200)
        # Punctuation
        self.assertEqual(value_of("two hundred,"), 200)
        # Zero is not an amount
        self.assertIsNone(parse_word_number("ноль"))
        self.assertIsNone(parse_word_number(""))

    def test_invalid_sequences(self):
        self.assertIsNone(parse_word_number("coffee"))
        self.assertIsNone(parse_word_number("bucks"))
        # Abbreviated multiplier without a number
        self.assertIsNone(parse_word_number("тыс"))


class TestFindWordNumber(unittest.TestCase):
    def test_position_in_text(self):
        found = find_word_number("обед на пятьсот рублей")
        self.assertEqual(found.value, 500)
        self.assertEqual(found.matched_text, "пятьсот")
        self.assertEqual(found.start, len("обед на "))

    def test_english_phrase(self):
        found = find_word_number("lunch for twenty five")
        self.assertEqual(found.value, 25)
        self.assertEqual(found.start, len("lunch for "))

    def test_no_number_words(self):
        self.assertIsNone(find_word_number("кофе 200"))
        self.assertIsNone(find_word_number("мыл пол"))
        self.assertIsNone(find_word_number(""))

    def test_vocabulary_sorted_longest_first(self):
        lengths = [len(word) for word in ALL_WORDS]
        self.assertEqual(lengths, sorted(lengths, reverse=True))
        self.assertLess(ALL_WORDS.index("пятьдесят"), ALL_WORDS.index("пять"))

    def test_tables_are_read_only(self):
        with self.assertRaises(TypeError):
            RU_UNITS['сто'] = 100


if __name__ == '__main__':
    unittest.main()
