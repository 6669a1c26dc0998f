"""
Настройки парсера и логирования.
Значения читаются из переменных окружения (и файла .env, если он есть).
"""
import os
import logging
import logging.config
from dataclasses import dataclass
from typing import Any, Dict, Optional

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_MAX_TEXT_LENGTH = 1000


@dataclass(frozen=True)
class ParserConfig:
    """Конфигурация парсера транзакций"""
    # Более длинный текст обрезается перед разбором
    max_text_length: int = DEFAULT_MAX_TEXT_LENGTH
    # Угадывать валюту по величине суммы, если она не указана
    guess_currency: bool = True

    log_level: str = 'INFO'
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> 'ParserConfig':
        """Создание конфигурации из переменных окружения"""
        raw_length = os.getenv('FINPARSE_MAX_TEXT_LENGTH', str(DEFAULT_MAX_TEXT_LENGTH))
        try:
            max_text_length = int(raw_length)
        except ValueError:
            raise ValueError(f"FINPARSE_MAX_TEXT_LENGTH must be an integer, got '{raw_length}'")
        if max_text_length <= 0:
            raise ValueError(f"FINPARSE_MAX_TEXT_LENGTH must be positive, got {max_text_length}")

        return cls(
            max_text_length=max_text_length,
            guess_currency=os.getenv('FINPARSE_GUESS_CURRENCY', 'true').lower() == 'true',
            log_level=os.getenv('FINPARSE_LOG_LEVEL', 'INFO').upper(),
            log_file=os.getenv('FINPARSE_LOG_FILE') or None,
        )


_config: Optional[ParserConfig] = None


def get_config() -> ParserConfig:
    """Возвращает общую конфигурацию процесса, создавая её при первом обращении"""
    global _config
    if _config is None:
        _config = ParserConfig.from_env()
    return _config


def reset_config() -> None:
    """Сбрасывает закэшированную конфигурацию (после изменения окружения)"""
    global _config
    _config = None


def build_logging_config(config: ParserConfig) -> Dict[str, Any]:
    """Словарь для logging.config.dictConfig"""
    handlers: Dict[str, Any] = {
        # stdout занят JSON-выводом CLI
        'console': {
            'level': config.log_level,
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
            'stream': 'ext://sys.stderr',
        },
    }
    if config.log_file:
        handlers['file'] = {
            'level': config.log_level,
            'class': 'logging.handlers.RotatingFileHandler',
            'filename': config.log_file,
            'maxBytes': 1024 * 1024 * 15,  # 15MB
            'backupCount': 10,
            'formatter': 'verbose',
            'encoding': 'utf-8',
        }

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'verbose': {
                'format': '{levelname} {asctime} {module} {message}',
                'style': '{',
            },
        },
        'handlers': handlers,
        'root': {
            'handlers': list(handlers),
            'level': config.log_level,
        },
        'loggers': {
            'finparse': {
                'level': config.log_level,
                'propagate': True,
            },
        },
    }


def configure_logging(config: Optional[ParserConfig] = None) -> None:
    """Настраивает логирование; вызывается приложением, а не библиотекой"""
    if config is None:
        config = get_config()
    logging.config.dictConfig(build_logging_config(config))
    logger.debug(f"Logging configured: level={config.log_level}, file={config.log_file}")
