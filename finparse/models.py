"""
Результат разбора текста транзакции
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Optional

EXPENSE = 'expense'
INCOME = 'income'

HIGH = 'high'
MEDIUM = 'medium'
LOW = 'low'


@dataclass(frozen=True)
class ParsedTransaction:
    """Структурированная транзакция, извлечённая из свободного текста"""
    amount: Optional[Decimal]
    currency: Optional[str]
    description: str
    type: str = EXPENSE
    category: Optional[str] = None
    # ISO дата YYYY-MM-DD
    date: Optional[str] = None
    # Валюта угадана по величине суммы, а не найдена в тексте
    currency_guessed: bool = False

    @property
    def confidence(self) -> str:
        """
        Уверенность разбора:
        - high: есть сумма, явно указанная валюта и категория
        - medium: есть сумма
        - low: суммы нет
        """
        if self.amount is None or self.amount <= 0:
            return LOW
        if self.currency and not self.currency_guessed and self.category:
            return HIGH
        return MEDIUM

    def to_dict(self) -> Dict[str, Any]:
        """Словарь для JSON; сумма строкой, чтобы не терять точность"""
        return {
            'amount': str(self.amount) if self.amount is not None else None,
            'currency': self.currency,
            'description': self.description,
            'type': self.type,
            'category': self.category,
            'date': self.date,
            'currency_guessed': self.currency_guessed,
            'confidence': self.confidence,
        }
