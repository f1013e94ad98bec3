"""
Numerical Safeguards — Safe Math Primitives для времени

Модуль обеспечивает тотальность операций над временем:
- NaN/Inf санитизация входных секунд (math.floor не принимает NaN/Inf)
- Проверка попадания в диапазон, устойчивая к NaN
- Epsilon-сравнения float секунд

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не пропагируют в TimeValue (заменяются на fallback)
2. Сравнение с NaN всегда считается выходом за диапазон
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Абсолютная толерантность сравнения моментов времени (секунды)
# Соответствует разрешению fraction для дат 1970–2099
EPS_TIME_COMPARE_ABS: Final[float] = 1e-9


# =============================================================================
# NaN/Inf САНИТИЗАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Returns:
        True если значение finite
    """
    return math.isfinite(value)


def sanitize_float(value: float, fallback: float = 0.0) -> float:
    """
    Санитизация float: замена NaN/Inf на fallback значение.

    Examples:
        >>> sanitize_float(1.5)
        1.5
        >>> sanitize_float(float('nan'))
        0.0
        >>> sanitize_float(float('-inf'), fallback=-1.0)
        -1.0
    """
    if is_valid_float(value):
        return value
    return fallback


# =============================================================================
# СРАВНЕНИЯ
# =============================================================================


def is_within(value: float, lower: float, upper: float) -> bool:
    """
    Проверка lower <= value <= upper.

    NaN не попадает ни в один диапазон.
    """
    return lower <= value <= upper


def is_close(a: float, b: float, abs_tol: float = EPS_TIME_COMPARE_ABS) -> bool:
    """
    Сравнение секунд с абсолютной толерантностью.

    Относительная толерантность не применяется: ошибка в секундах
    не должна расти с удалённостью от эпохи.

    Raises:
        ValueError: Если abs_tol отрицательна
    """
    if abs_tol < 0:
        raise ValueError(f"abs_tol must be non-negative, got {abs_tol}")

    return math.isclose(a, b, rel_tol=0.0, abs_tol=abs_tol)
