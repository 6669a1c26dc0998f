"""
finparse - разбор свободного текста финансовых транзакций (русский и английский).
"""
from finparse.models import ParsedTransaction
from finparse.settings import ParserConfig, configure_logging, get_config
from finparse.transaction_parser import (
    is_parse_successful,
    parse_transaction_text,
    parse_transaction_text_async,
)

__version__ = '1.0.0'

__all__ = [
    'ParsedTransaction',
    'ParserConfig',
    'configure_logging',
    'get_config',
    'is_parse_successful',
    'parse_transaction_text',
    'parse_transaction_text_async',
]
