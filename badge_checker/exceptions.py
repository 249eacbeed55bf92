"""Иерархия исключений проверки бейджей.

Ошибки валидации (размер, круг, настроение) исключениями не являются:
это ожидаемые результаты `ValidationVerdict`. Исключения остаются для
внешних участников (декодер, конвертер) и некорректной конфигурации.
"""
from __future__ import annotations


class BadgeCheckerError(Exception):
    """Базовое исключение проекта."""


class DecodeError(BadgeCheckerError):
    """Файл не удалось декодировать в растр.

    Attributes:
        path: Путь к исходному файлу.
    """

    def __init__(self, message: str, *, path: str = ""):
        super().__init__(message)
        self.path = path


class ConversionError(BadgeCheckerError):
    """Не удалось сохранить сконвертированный бейдж.

    Attributes:
        input_path: Исходный файл.
        output_path: Целевой файл.
    """

    def __init__(self, message: str, *, input_path: str = "", output_path: str = ""):
        super().__init__(message)
        self.input_path = input_path
        self.output_path = output_path


class ConfigurationError(BadgeCheckerError, ValueError):
    """Недопустимое значение параметра конфигурации.

    Attributes:
        field: Имя параметра.
    """

    def __init__(self, message: str, *, field: str = ""):
        super().__init__(message)
        self.field = field
