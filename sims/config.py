# sims/config.py
"""Константы и настройки системы учета студентов."""
import logging
import os

# --- КОНФИГУРАЦИЯ ---
SOFTWARE_NAME = "Students' Information Management System"
SOFTWARE_VERSION = "0.1.7"
SOFTWARE_LICENSE = "MIT License"

# Вместимость реестра по умолчанию (переопределяется через SIMS_CAPACITY)
DEFAULT_CAPACITY = 100
CAPACITY_ENV = "SIMS_CAPACITY"

LOG_LEVEL_ENV = "SIMS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Ограничения длины полей
NAME_MAX_LEN = 20
ID_MIN_LEN = 4
ID_MAX_LEN = 20
CLASS_MAX_LEN = 20

SCORE_MIN = 0.0
SCORE_MAX = 100.0

# Маппинг допустимых обозначений пола -> канонический пол
GENDER_TOKENS = {
    "男": "male", "女": "female",
    "м": "male", "ж": "female",
    "male": "male", "female": "female",
    "M": "male", "F": "female",
    # Устаревшие цифровые обозначения
    "1": "male", "0": "female",
}

# Слово, завершающее ввод списка оценок или предустановок
END_TOKEN = "end"


def get_capacity() -> int:
    """Возвращает вместимость реестра из окружения или значение по умолчанию."""
    raw = os.environ.get(CAPACITY_ENV, "").strip()
    if not raw:
        return DEFAULT_CAPACITY
    try:
        capacity = int(raw)
    except ValueError:
        return DEFAULT_CAPACITY
    return capacity if capacity > 0 else DEFAULT_CAPACITY


def get_log_level() -> int:
    """Уровень логирования из SIMS_LOG_LEVEL (по умолчанию WARNING)."""
    name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING
