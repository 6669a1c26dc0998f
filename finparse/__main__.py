"""
Пакетный разбор транзакций из командной строки.

Примеры:
    python -m finparse "шашлык 500 руб" "coffee $5"
    python -m finparse --file expenses.txt --today 2025-03-12 --strict
    cat expenses.txt | python -m finparse --file -

Каждая строка ввода печатается отдельным JSON-объектом.
"""
import sys
import json
import logging
import argparse
import dataclasses
from datetime import date, datetime

from finparse.settings import configure_logging, get_config
from finparse.transaction_parser import is_parse_successful, parse_transaction_text

logger = logging.getLogger(__name__)

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def _iso_date(value: str) -> date:
    try:
        return datetime.strptime(value, '%Y-%m-%d').date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"неверная дата '{value}', ожидается YYYY-MM-DD")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='finparse',
        description='Разбор свободного текста транзакций в JSON',
    )
    parser.add_argument('texts', nargs='*', metavar='TEXT', help='Текст транзакции')
    parser.add_argument('--file', type=argparse.FileType('r', encoding='utf-8'),
                        help='Файл с транзакциями, по одной на строку ("-" для stdin)')
    parser.add_argument('--today', type=_iso_date, default=None,
                        help='Опорная дата для относительных дат (YYYY-MM-DD)')
    parser.add_argument('--strict', action='store_true',
                        help='Код возврата 1, если хотя бы одна строка не разобрана')
    parser.add_argument('--log-level', type=str.upper, choices=LOG_LEVELS, default=None,
                        help='Уровень логирования (по умолчанию FINPARSE_LOG_LEVEL)')
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = get_config()
    except ValueError as e:
        parser.error(str(e))

    if args.log_level:
        config = dataclasses.replace(config, log_level=args.log_level)
    configure_logging(config)

    texts = list(args.texts)
    if args.file:
        with args.file:
            texts.extend(line.strip() for line in args.file if line.strip())

    if not texts:
        parser.error('нужен хотя бы один TEXT или --file')

    failed = 0
    for text in texts:
        result = parse_transaction_text(text, today=args.today, config=config)
        if not is_parse_successful(result):
            failed += 1
            logger.info(f"Не удалось найти сумму в '{text}'")
        print(json.dumps(result.to_dict(), ensure_ascii=False))

    logger.info(f"Обработано строк: {len(texts)}, без суммы: {failed}")

    if args.strict and failed:
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
