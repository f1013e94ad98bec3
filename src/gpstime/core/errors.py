"""
Ошибки библиотеки gpstime

Единственный вид ошибки входных данных: некорректная календарная дата
(год вне 1970–2099 или месяц вне 1–12). Все остальные операции тотальны:
выход за диапазон обрабатывается clamp или pass-through.
"""

from typing import Any


class GPSTimeError(Exception):
    """Базовое исключение для всех ошибок gpstime."""


class InvalidCalendarInput(GPSTimeError, ValueError):
    """
    Календарная дата вне поддерживаемого диапазона.

    Поднимается только строгой конверсией epoch_to_time_checked.
    Нестрогая epoch_to_time вместо исключения возвращает TIME_ZERO.
    """

    def __init__(self, epoch: Any, reason: str):
        self.epoch = epoch
        self.reason = reason
        super().__init__(f"Invalid calendar input {epoch!r}: {reason}")
