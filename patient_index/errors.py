"""
Patient Index — Винятки

Ієрархія помилок системи:
- PatientIndexError: базовий виняток
- ConfigError: некоректна конфігурація (мапінг колонок, YAML, роздільник)
- StorageError: помилка читання/запису потоку даних

Помилки парсингу рядків сюди не входять: вони відновлюються локально
і повертаються як попередження (див. parsing.record_builder).
"""

from typing import Optional


class PatientIndexError(Exception):
    """Базовий виняток Patient Index"""


class ConfigError(PatientIndexError):
    """Некоректна конфігурація"""


class StorageError(PatientIndexError):
    """
    Помилка джерела або приймача даних.

    Зберігає шлях і першопричину, щоб діагностика містила обидва.
    """

    def __init__(self, message: str, location: Optional[str] = None):
        super().__init__(message)
        self.location = location

    def __str__(self) -> str:
        message = super().__str__()
        if self.__cause__ is not None:
            message = f"{message}: {self.__cause__}"
        return message
