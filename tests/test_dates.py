"""
Tests for date extraction from free text.

Reference date: Wednesday, 2025-03-12 (see conftest.REFERENCE_DATE).
"""
import pytest
from datetime import date

from finparse.dates import extract_date, last_weekday


# =============================================================================
# Relative Dates
# =============================================================================

class TestRelativeDates:
    """Tests for today / yesterday / N days ago."""

    def test_yesterday_removed_from_text(self, today):
        """Matched date phrase should be blanked out of the working text."""
        result, remaining = extract_date("кофе 200 вчера", today)
        assert result == date(2025, 3, 11)
        assert remaining == "кофе 200  "

    @pytest.mark.parametrize("text,expected", [
        ("сегодня обед 300", date(2025, 3, 12)),
        ("today lunch 10", date(2025, 3, 12)),
        ("yesterday taxi", date(2025, 3, 11)),
        ("позавчера такси", date(2025, 3, 10)),
        ("day before yesterday taxi", date(2025, 3, 10)),
    ])
    def test_named_relative_days(self, today, text, expected):
        result, _ = extract_date(text, today)
        assert result == expected

    @pytest.mark.parametrize("text,expected", [
        ("3 дня назад", date(2025, 3, 9)),
        ("5 days ago", date(2025, 3, 7)),
        ("2 weeks ago", date(2025, 2, 26)),
        ("неделю назад", date(2025, 3, 5)),
        ("2 месяца назад", date(2025, 1, 12)),
        ("a month ago", date(2025, 2, 12)),
    ])
    def test_intervals_ago(self, today, text, expected):
        result, _ = extract_date(text, today)
        assert result == expected

    def test_month_ago_clamps_to_month_end(self):
        """Calendar-month subtraction should clamp to the last day of the month."""
        result, _ = extract_date("месяц назад", date(2025, 3, 31))
        assert result == date(2025, 2, 28)


# =============================================================================
# Weekdays
# =============================================================================

class TestWeekdays:
    """Tests for weekday names resolved to the most recent past occurrence."""

    @pytest.mark.parametrize("text,expected", [
        ("такси 500 в понедельник", date(2025, 3, 10)),
        ("friday dinner", date(2025, 3, 7)),
        ("в воскресенье кино", date(2025, 3, 9)),
        ("в чт обед", date(2025, 3, 6)),
    ])
    def test_weekday_in_past(self, today, text, expected):
        result, _ = extract_date(text, today)
        assert result == expected

    def test_today_weekday_goes_back_a_week(self, today):
        """Naming today's weekday should resolve to 7 days ago, never today."""
        result, _ = extract_date("в среду кофе", today)
        assert result == date(2025, 3, 5)

    @pytest.mark.parametrize("text,expected", [
        ("on sat cinema", date(2025, 3, 8)),
        ("last fri dinner", date(2025, 3, 7)),
    ])
    def test_english_abbreviation_after_preposition(self, today, text, expected):
        result, _ = extract_date(text, today)
        assert result == expected

    @pytest.mark.parametrize("text", ["sun cream 300", "sat nav 5000", "wed dress 200"])
    def test_bare_english_abbreviation_is_not_weekday(self, today, text):
        """Short English weekday names also occur as ordinary words."""
        result, remaining = extract_date(text, today)
        assert result is None
        assert remaining == text

    def test_last_weekday_never_returns_today(self):
        wednesday = date(2025, 3, 12)
        for weekday in range(7):
            result = last_weekday(weekday, wednesday)
            assert 1 <= (wednesday - result).days <= 7
            assert result.weekday() == weekday


# =============================================================================
# Absolute Dates
# =============================================================================

class TestAbsoluteDates:
    """Tests for day + month names and numeric dates."""

    @pytest.mark.parametrize("text,expected", [
        ("15 января обед", date(2025, 1, 15)),
        ("jan 15 lunch", date(2025, 1, 15)),
        ("1st of March", date(2025, 3, 1)),
        ("15 января 2024", date(2024, 1, 15)),
        ("20 декабря 2025", date(2025, 12, 20)),
    ])
    def test_named_month(self, today, text, expected):
        result, _ = extract_date(text, today)
        assert result == expected

    def test_future_named_month_rolls_back_a_year(self, today):
        result, remaining = extract_date("подарок 15 декабря 3000", today)
        assert result == date(2024, 12, 15)
        assert "3000" in remaining

    @pytest.mark.parametrize("text,expected", [
        ("25.12.2023 подарок", date(2023, 12, 25)),
        ("01.02.99 ремонт", date(1999, 2, 1)),
        ("01.02.24 ремонт", date(2024, 2, 1)),
        ("10/03 кофе 300", date(2025, 3, 10)),
        ("15.03 кофе 300", date(2024, 3, 15)),
    ])
    def test_numeric(self, today, text, expected):
        result, _ = extract_date(text, today)
        assert result == expected

    @pytest.mark.parametrize("text", [
        "31.02.2024 кофе",
        "31 февраля кофе",
        "31 апреля кофе",
        "29 февраля 2025 кофе",
    ])
    def test_impossible_date_rejected(self, today, text):
        """Impossible calendar dates should be rejected, not rolled over."""
        result, remaining = extract_date(text, today)
        assert result is None
        assert remaining == "  кофе"

    def test_leap_day_goes_back_to_leap_year(self, today):
        """Feb 29 without a year should resolve to the latest leap year."""
        result, remaining = extract_date("29 февраля такси 300", today)
        assert result == date(2024, 2, 29)
        assert remaining == "  такси 300"

    def test_leap_day_numeric(self, today):
        result, _ = extract_date("29.02 такси 300", today)
        assert result == date(2024, 2, 29)

    def test_leap_day_in_leap_year(self):
        result, _ = extract_date("29 февраля", date(2024, 3, 1))
        assert result == date(2024, 2, 29)

    @pytest.mark.parametrize("text", [
        "кофе 3.20",
        "кофе 3.12",
        "Продукты 1500",
        "",
    ])
    def test_no_date(self, today, text):
        """A lone decimal amount should not be taken for a date."""
        result, remaining = extract_date(text, today)
        assert result is None
        assert remaining == text


# =============================================================================
# Default Reference Date
# =============================================================================

class TestDefaultToday:

    def test_uses_current_date_when_not_given(self):
        result, _ = extract_date("сегодня")
        assert result == date.today()
